"""Service for registering static routes on a host server."""

from __future__ import annotations

import logging
import threading
from typing import TYPE_CHECKING, Any

from static_route_server.domain.contracts import StaticRouteRegistrarProtocol
from static_route_server.domain.models import StaticRoute

if TYPE_CHECKING:
    from collections.abc import Mapping

    from static_route_server.domain.ports import StaticRouteHost


class StaticRouteRegistrar(StaticRouteRegistrarProtocol):
    """Registers static routes on a host server and keeps a ledger of them.

    All serving behaviour lives in the host. The registrar only refuses to
    work without one and records what the host accepted.
    """

    def __init__(
        self,
        host: StaticRouteHost | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        """Initialize the registrar.

        Args:
            host: Server that installs the routes. Without one every
                registration fails.
            logger: Logger for diagnostics. Defaults to the module logger.
        """
        self._host = host
        self._logger = logger or logging.getLogger(__name__)
        self._routes: list[StaticRoute] = []
        self._lock = threading.Lock()

    @property
    def has_host(self) -> bool:
        """Whether a host server is attached."""
        return self._host is not None

    @property
    def routes(self) -> tuple[StaticRoute, ...]:
        """Successfully registered routes, in registration order."""
        with self._lock:
            return tuple(self._routes)

    def add_static_route(
        self,
        file_path: str,
        default_file: str | None = None,
        route: str | None = None,
        route_strip: str | None = None,
        params: Mapping[str, Any] | None = None,
    ) -> bool:
        """Register a static route on the host server.

        Args:
            file_path: Directory on disk to serve files from.
            default_file: File served for directory requests (default ``index.html``).
            route: URL pattern to match (default ``/*``).
            route_strip: URL prefix removed before the filesystem lookup (default ``/``).
            params: Options passed through to the host untouched.

        Returns:
            True if the host installed the route, False otherwise.
        """
        if self._host is None:
            self._logger.error("StaticRouteRegistrar requires a host server to install routes.")
            return False

        installed = bool(
            self._host.add_static_route(file_path, default_file, route, route_strip, params)
        )

        if installed:
            record = StaticRoute.with_defaults(file_path, default_file, route, route_strip, params)
            with self._lock:
                self._routes.append(record)
            self._logger.debug(f"Recorded static route {record.route} -> {record.file_path}")

        return installed
