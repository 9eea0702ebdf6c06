"""Task resource routes.

Routing is an explicit table of (methods, path) -> handler rather than a
naming convention. Every handler calls exactly one service operation and
returns its result unchanged; the JSON client is the rendering layer.
"""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from fastapi import APIRouter, Query, Response, status
from pydantic import BaseModel

from ..schemas.models import Page, TaskCreate, TaskRead, TaskUpdate
from ..database import verify_database
from .dependencies import AuthoringServiceDep, EngineDep, TaskServiceDep


class AssignableUsersResponse(BaseModel):
    users: dict[int, str]


class HealthResponse(BaseModel):
    status: str
    database: str


def index(
    service: TaskServiceDep,
    page: int = Query(default=1, ge=1),
    include_owner: bool | None = Query(default=None),
) -> Page[TaskRead]:
    return service.list_tasks(page=page, include_owner=include_owner)


def create(service: AuthoringServiceDep) -> AssignableUsersResponse:
    return AssignableUsersResponse(users=service.list_assignable_users())


def store(payload: TaskCreate, service: TaskServiceDep) -> TaskRead:
    return service.create_task(payload)


def show(task_id: int, service: TaskServiceDep) -> TaskRead:
    return service.get_task(task_id)


def edit(task_id: int, service: TaskServiceDep) -> TaskRead:
    return service.get_task(task_id)


def update(task_id: int, payload: TaskUpdate, service: TaskServiceDep) -> TaskRead:
    return service.update_task(task_id, payload)


def destroy(task_id: int, service: TaskServiceDep) -> Response:
    service.delete_task(task_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


def health(engine: EngineDep, response: Response) -> HealthResponse:
    if verify_database(engine):
        return HealthResponse(status="ok", database="ok")
    response.status_code = status.HTTP_503_SERVICE_UNAVAILABLE
    return HealthResponse(status="degraded", database="unavailable")


@dataclass(frozen=True)
class Route:
    methods: tuple[str, ...]
    path: str
    endpoint: Callable[..., Any]
    name: str
    status_code: int = status.HTTP_200_OK
    response_model: Any = None


# /tasks/create precedes /tasks/{task_id} so the literal segment wins.
ROUTES: list[Route] = [
    Route(("GET",), "/tasks", index, "tasks.index", response_model=Page[TaskRead]),
    Route(
        ("GET",),
        "/tasks/create",
        create,
        "tasks.create",
        response_model=AssignableUsersResponse,
    ),
    Route(
        ("POST",),
        "/tasks",
        store,
        "tasks.store",
        status_code=status.HTTP_201_CREATED,
        response_model=TaskRead,
    ),
    Route(("GET",), "/tasks/{task_id}", show, "tasks.show", response_model=TaskRead),
    Route(
        ("GET",), "/tasks/{task_id}/edit", edit, "tasks.edit", response_model=TaskRead
    ),
    Route(
        ("PUT", "PATCH"),
        "/tasks/{task_id}",
        update,
        "tasks.update",
        response_model=TaskRead,
    ),
    Route(
        ("DELETE",),
        "/tasks/{task_id}",
        destroy,
        "tasks.destroy",
        status_code=status.HTTP_204_NO_CONTENT,
    ),
]


def build_router(routes: list[Route] | None = None) -> APIRouter:
    """Register every route in the table on a fresh router."""
    router = APIRouter(tags=["tasks"])
    for route in routes if routes is not None else ROUTES:
        router.add_api_route(
            route.path,
            route.endpoint,
            methods=list(route.methods),
            name=route.name,
            status_code=route.status_code,
            response_model=route.response_model,
        )
    return router


def build_health_router() -> APIRouter:
    router = APIRouter(tags=["health"])
    router.add_api_route("/health", health, methods=["GET"], response_model=HealthResponse)
    return router
