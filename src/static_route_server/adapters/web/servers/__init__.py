"""Server adapters that install static routes."""

from .static_file_server import StarletteStaticRouteHost
from .static_route_params import StaticRouteParams

__all__ = ["StarletteStaticRouteHost", "StaticRouteParams"]
