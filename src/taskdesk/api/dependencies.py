"""Dependency providers for FastAPI routes.

Each request gets its own session; services are built on top of it so
tests can override either layer.
"""

from collections.abc import Generator
from typing import Annotated

from fastapi import Depends
from sqlalchemy.engine import Engine
from sqlmodel import Session

from ..database import get_engine
from ..services import TaskAuthoringService, TaskService


EngineDep = Annotated[Engine, Depends(get_engine)]


def get_session(engine: EngineDep) -> Generator[Session, None, None]:
    with Session(engine) as session:
        yield session


SessionDep = Annotated[Session, Depends(get_session)]


def get_task_service(session: SessionDep) -> TaskService:
    return TaskService(session=session)


def get_authoring_service(session: SessionDep) -> TaskAuthoringService:
    return TaskAuthoringService(session=session)


TaskServiceDep = Annotated[TaskService, Depends(get_task_service)]
AuthoringServiceDep = Annotated[TaskAuthoringService, Depends(get_authoring_service)]
