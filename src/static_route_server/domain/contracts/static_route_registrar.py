"""Protocol for registering static routes."""

from collections.abc import Mapping, Sequence
from typing import Any, Protocol

from static_route_server.domain.models import StaticRoute


class StaticRouteRegistrarProtocol(Protocol):
    """Protocol for registering static routes and listing the ones in place."""

    @property
    def routes(self) -> Sequence[StaticRoute]:
        """Successfully registered routes, in registration order."""
        ...

    def add_static_route(
        self,
        file_path: str,
        default_file: str | None = None,
        route: str | None = None,
        route_strip: str | None = None,
        params: Mapping[str, Any] | None = None,
    ) -> bool:
        """Register a static route.

        Args:
            file_path: Directory on disk to serve files from.
            default_file: File served for directory requests.
            route: URL pattern to match.
            route_strip: URL prefix removed before the filesystem lookup.
            params: Options passed through to the serving mechanism.

        Returns:
            True if the route was installed.
        """
        ...
