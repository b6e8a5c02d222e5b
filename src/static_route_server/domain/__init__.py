"""Domain layer - static route records and the interfaces around them."""

from static_route_server.domain.contracts import StaticRouteRegistrarProtocol
from static_route_server.domain.models import StaticRoute
from static_route_server.domain.ports import StaticRouteHost

__all__ = [
    "StaticRoute",
    "StaticRouteHost",
    "StaticRouteRegistrarProtocol",
]
