"""Static file server implementation on top of Starlette."""

from __future__ import annotations

import logging
import os
import stat
from collections.abc import Mapping
from pathlib import Path
from typing import TYPE_CHECKING, Any
from urllib.parse import quote

import anyio.to_thread
from pydantic import ValidationError
from starlette.responses import RedirectResponse, Response
from starlette.routing import Route
from starlette.staticfiles import StaticFiles

from static_route_server.domain.models import DEFAULT_FILE, DEFAULT_ROUTE, DEFAULT_ROUTE_STRIP
from static_route_server.domain.ports import StaticRouteHost

from .static_route_params import StaticRouteParams

if TYPE_CHECKING:
    from collections.abc import MutableMapping

    from starlette.applications import Starlette
    from starlette.types import ASGIApp, Receive, Scope, Send

logger = logging.getLogger(__name__)


def to_starlette_path(route: str) -> str:
    """Translate a route pattern into a Starlette path.

    A trailing ``*`` matches any remainder, so ``/content/*`` becomes
    ``/content/{path:path}``. Patterns without a wildcard match exactly.
    """
    if route.endswith("*"):
        return route[:-1] + "{path:path}"
    return route


def request_path(scope: Scope) -> str:
    """Path the client actually requested, before any prefix stripping."""
    raw_path = scope.get("raw_path")
    if raw_path:
        return raw_path.decode("latin-1")
    return quote(scope["path"])


class DefaultFileStaticFiles(StaticFiles):
    """StaticFiles that answers directory requests with a configurable file.

    A directory requested without a trailing slash is redirected to the
    slash-terminated URL so relative links in the default file resolve
    inside that directory.
    """

    def __init__(self, *, directory: str, default_file: str, follow_symlink: bool = False) -> None:
        """Initialize with the directory to serve and the file used for directories."""
        super().__init__(directory=directory, follow_symlink=follow_symlink)
        self.default_file = default_file

    async def get_response(self, path: str, scope: Scope) -> Response:
        """Serve ``path``, pointing directories at the default file."""
        if scope["method"] not in ("GET", "HEAD"):
            return await super().get_response(path, scope)

        try:
            _, stat_result = await anyio.to_thread.run_sync(self.lookup_path, path)
        except OSError:
            # Starlette maps lookup errors to the right status
            return await super().get_response(path, scope)

        if stat_result and stat.S_ISDIR(stat_result.st_mode):
            original_path = request_path(scope)
            if not original_path.endswith("/"):
                location = original_path + "/"
                if scope.get("query_string"):
                    location += "?" + scope["query_string"].decode("latin-1")
                return RedirectResponse(url=location)
            path = os.path.join(path, self.default_file)

        return await super().get_response(path, scope)


class StaticFileCacheApp:
    """ASGI app wrapper that adds cache headers to static file responses."""

    def __init__(
        self,
        static_files: StaticFiles,
        cache_control: str,
        headers: Mapping[str, str] | None = None,
    ) -> None:
        """Initialize with a StaticFiles instance and the headers to add."""
        self.static_files = static_files
        self.cache_control = cache_control
        self.headers = dict(headers or {})

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        """Handle ASGI request and add cache headers."""

        async def send_with_cache_headers(message: MutableMapping[str, Any]) -> None:
            """Add cache headers before sending a successful response."""
            if message["type"] == "http.response.start" and message["status"] < 400:
                headers = list(message.get("headers", []))
                present = {name.lower() for name, _ in headers}
                if b"cache-control" not in present:
                    headers.append((b"cache-control", self.cache_control.encode("latin-1")))
                for name, value in self.headers.items():
                    if name.lower().encode("latin-1") not in present:
                        headers.append((name.lower().encode("latin-1"), value.encode("latin-1")))
                message["headers"] = headers
            await send(message)

        await self.static_files(scope, receive, send_with_cache_headers)


class RouteStripApp:
    """ASGI app that removes the route prefix before handing the request on."""

    def __init__(self, app: ASGIApp, route_strip: str) -> None:
        """Initialize with the wrapped app and the prefix to remove."""
        self.app = app
        self.route_strip = route_strip

    def strip(self, path: str) -> str:
        """Remove the prefix from ``path``, keeping a leading slash."""
        if path.startswith(self.route_strip):
            path = path[len(self.route_strip) :]
        return "/" + path.lstrip("/")

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        """Rewrite the path and forward the request."""
        child_scope = dict(scope)
        child_scope["raw_path"] = request_path(scope).encode("latin-1")
        child_scope["path"] = self.strip(scope["path"])
        child_scope["root_path"] = ""
        await self.app(child_scope, receive, send)


class StarletteStaticRouteHost(StaticRouteHost):
    """Installs static file routes on a Starlette application."""

    def __init__(self, app: Starlette) -> None:
        """Initialize with the application that receives the routes."""
        self.app = app

    def add_static_route(
        self,
        file_path: str,
        default_file: str | None = None,
        route: str | None = None,
        route_strip: str | None = None,
        params: Mapping[str, Any] | None = None,
    ) -> bool:
        """Serve ``file_path`` for requests matching ``route``.

        Routes are appended to the application's router, so routes
        registered earlier take precedence over overlapping later ones.

        Args:
            file_path: Directory on disk to serve files from.
            default_file: File served for directory requests.
            route: URL pattern; a trailing ``*`` matches any remainder.
            route_strip: URL prefix removed before the filesystem lookup.
            params: Serving options, see StaticRouteParams.

        Returns:
            True if the route was installed, False if the arguments were rejected.
        """
        if not isinstance(file_path, str) or not file_path:
            logger.error(f"Static route file path must be a non-empty string, got {file_path!r}")
            return False

        directory = Path(file_path)
        if not directory.is_dir():
            logger.error(f"Static route directory not found: {directory}")
            return False

        default_file = default_file or DEFAULT_FILE
        route = route or DEFAULT_ROUTE
        route_strip = route_strip or DEFAULT_ROUTE_STRIP
        for name, value in (
            ("default_file", default_file),
            ("route", route),
            ("route_strip", route_strip),
        ):
            if not isinstance(value, str):
                logger.error(f"Static route {name} must be a string, got {value!r}")
                return False
        if not route.startswith("/"):
            logger.error(f"Static route pattern must start with '/', got {route!r}")
            return False

        if params is not None and not isinstance(params, Mapping):
            logger.error(f"Static route params must be a mapping, got {type(params).__name__}")
            return False
        try:
            route_params = StaticRouteParams.model_validate(dict(params or {}))
        except ValidationError as e:
            logger.error(f"Invalid static route params for {route}: {e}")
            return False

        static_files = DefaultFileStaticFiles(
            directory=str(directory),
            default_file=default_file,
            follow_symlink=route_params.follow_symlink,
        )
        cached_static = StaticFileCacheApp(
            static_files,
            cache_control=route_params.cache_control_header(),
            headers=route_params.headers,
        )
        self.app.routes.append(
            Route(to_starlette_path(route), RouteStripApp(cached_static, route_strip))
        )
        logger.info(
            f"Serving static files from {directory} at '{route}' "
            f"(strip '{route_strip}', default file '{default_file}')"
        )
        return True
