"""Contracts (protocols) implemented by application services."""

from static_route_server.domain.contracts.static_route_registrar import (
    StaticRouteRegistrarProtocol,
)

__all__ = ["StaticRouteRegistrarProtocol"]
