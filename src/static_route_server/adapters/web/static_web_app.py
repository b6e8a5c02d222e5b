"""Starlette web adapter serving configured static routes."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

import uvicorn
from starlette.applications import Starlette
from starlette.responses import Response
from starlette.routing import Route

from static_route_server.adapters.config import AppConfig
from static_route_server.domain.models import StaticRoute

from .rate_limit_middleware import RateLimitMiddleware
from .servers import StarletteStaticRouteHost

if TYPE_CHECKING:
    from collections.abc import Callable

    from starlette.types import ASGIApp

    from static_route_server.domain.contracts import StaticRouteRegistrarProtocol
    from static_route_server.domain.ports import StaticRouteHost

logger = logging.getLogger(__name__)

HEALTH_PATH = "/healthz"


async def healthz(_request: Any) -> Response:
    """Health check endpoint for load balancers and monitoring."""
    return Response(content="Ok", media_type="text/plain")


class StaticWebAdapter:
    """Starlette-based web adapter that serves static routes."""

    def __init__(
        self,
        config: AppConfig,
        static_routes: list[StaticRoute],
        registrar_factory: Callable[[StaticRouteHost], StaticRouteRegistrarProtocol],
    ) -> None:
        """Initialize the web adapter.

        Args:
            config: Application configuration.
            static_routes: Routes to register when the app is built.
            registrar_factory: Builds the registrar for the app's route host.
        """
        if not isinstance(config, AppConfig):
            raise TypeError("config must be an AppConfig instance")
        if not isinstance(static_routes, list) or not all(
            isinstance(sr, StaticRoute) for sr in static_routes
        ):
            raise TypeError("static_routes must be a list of StaticRoute instances")

        self.config = config
        self.static_routes = static_routes
        self.registrar_factory = registrar_factory
        self._registrar: StaticRouteRegistrarProtocol | None = None
        self._server: uvicorn.Server | None = None

    @property
    def registrar(self) -> StaticRouteRegistrarProtocol | None:
        """Registrar of the most recently built app."""
        return self._registrar

    def build_app(self) -> Starlette:
        """Create the Starlette app and register every configured static route.

        Raises:
            ValueError: If the host rejects one of the configured routes.
        """
        app = Starlette()
        app.routes.append(Route(HEALTH_PATH, healthz, methods=["GET"]))

        registrar = self.registrar_factory(StarletteStaticRouteHost(app))
        for static_route in self.static_routes:
            logger.info(
                f"Registering static route '{static_route.route}' -> {static_route.file_path}"
            )
            installed = registrar.add_static_route(
                static_route.file_path,
                static_route.default_file,
                static_route.route,
                static_route.route_strip,
                static_route.params,
            )
            if not installed:
                raise ValueError(
                    f"Static route '{static_route.route}' for {static_route.file_path} was rejected"
                )

        self._registrar = registrar
        logger.info(f"Registered {len(registrar.routes)} static route(s)")
        return app

    def wrap_app(self, app: Starlette) -> ASGIApp:
        """Apply middleware around the built app."""
        if self.config.rate_limit_per_minute <= 0:
            return app
        return RateLimitMiddleware(
            app,
            requests_per_minute=self.config.rate_limit_per_minute,
            exempt_paths=(HEALTH_PATH,),
        )

    async def start(self) -> None:
        """Start the web server."""
        app = self.wrap_app(self.build_app())

        config = uvicorn.Config(
            app,
            host=self.config.host,
            port=self.config.port,
            log_level=self.config.log_level,
        )
        self._server = uvicorn.Server(config)

        await self._server.serve()

    async def stop(self) -> None:
        """Stop the web server."""
        if self._server:
            self._server.should_exit = True
