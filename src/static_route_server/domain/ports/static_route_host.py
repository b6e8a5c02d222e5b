"""Static route host port."""

from collections.abc import Mapping
from typing import Any, Protocol


class StaticRouteHost(Protocol):
    """Port for an HTTP server that can install static file routes."""

    def add_static_route(
        self,
        file_path: str,
        default_file: str | None = None,
        route: str | None = None,
        route_strip: str | None = None,
        params: Mapping[str, Any] | None = None,
    ) -> bool:
        """Serve the directory at ``file_path`` for requests matching ``route``.

        Returns True when the route was installed, False when the host
        rejected the arguments.
        """
        ...
