"""Application services."""

from static_route_server.application.services.static_route_registrar import (
    StaticRouteRegistrar,
)

__all__ = ["StaticRouteRegistrar"]
