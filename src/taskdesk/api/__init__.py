"""HTTP surface for the task resource."""

from .app import create_app
from .routes import ROUTES, Route, build_router


__all__ = ["ROUTES", "Route", "build_router", "create_app"]
