"""Configuration adapters."""

from static_route_server.adapters.config.app_config import AppConfig
from static_route_server.adapters.config.static_route_configuration_loader import (
    StaticRouteConfigurationLoader,
)

__all__ = ["AppConfig", "StaticRouteConfigurationLoader"]
