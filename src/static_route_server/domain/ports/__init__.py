"""Ports (interfaces) for the ports-and-adapters architecture."""

from static_route_server.domain.ports.static_route_host import StaticRouteHost

__all__ = ["StaticRouteHost"]
