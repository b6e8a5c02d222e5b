"""Main entry point for the static route server."""

import asyncio
import logging
import sys

from static_route_server.adapters.config import AppConfig, StaticRouteConfigurationLoader
from static_route_server.adapters.web import StaticWebAdapter
from static_route_server.application.services import StaticRouteRegistrar

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
    stream=sys.stderr,
)

logger = logging.getLogger(__name__)


async def main() -> None:
    """Main application entry point."""
    # Load settings and static route declarations
    try:
        config = AppConfig()
        static_routes = StaticRouteConfigurationLoader.load(config)
    except (ValueError, FileNotFoundError) as e:
        logger.error(f"Invalid configuration: {e}")
        sys.exit(1)

    logging.getLogger().setLevel(config.log_level.upper())

    if not static_routes:
        logger.error("No static routes configured.")
        logger.error("Declare [[static_routes]] with a file_path in your config.toml file.")
        logger.error("Or copy config.example.toml to config.toml and customize it.")
        sys.exit(1)

    logger.info(f"Loaded {len(static_routes)} static route(s):")
    for static_route in static_routes:
        logger.info(f"  - Route: '{static_route.route}' serving {static_route.file_path}")

    web_adapter = StaticWebAdapter(
        config,
        static_routes,
        registrar_factory=StaticRouteRegistrar,
    )

    try:
        await web_adapter.start()
    except ValueError as e:
        logger.error(f"Could not install static routes: {e}")
        sys.exit(1)
    except KeyboardInterrupt:
        logger.info("Shutting down...")
        await web_adapter.stop()


def run() -> None:
    """Console script entry point."""
    asyncio.run(main())


if __name__ == "__main__":
    run()
