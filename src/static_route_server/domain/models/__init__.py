"""Domain models for static routes."""

from static_route_server.domain.models.static_route import (
    DEFAULT_FILE,
    DEFAULT_ROUTE,
    DEFAULT_ROUTE_STRIP,
    StaticRoute,
)

__all__ = [
    "DEFAULT_FILE",
    "DEFAULT_ROUTE",
    "DEFAULT_ROUTE_STRIP",
    "StaticRoute",
]
