"""Static route configuration loader."""

from pathlib import Path
from typing import Any

from static_route_server.adapters.config.app_config import AppConfig
from static_route_server.domain.models import StaticRoute


class StaticRouteConfigurationLoader:
    """Loads static route declarations from app config."""

    @staticmethod
    def load_static_route_from_data(data: dict[str, Any], base_dir: Path) -> StaticRoute:
        """Load a single static route from a TOML table.

        Relative file paths are resolved against ``base_dir``.
        """
        file_path = data["file_path"]
        if not isinstance(file_path, str) or not file_path:
            raise ValueError(f"Static route 'file_path' must be a non-empty string: {file_path!r}")
        path = Path(file_path)
        if not path.is_absolute():
            path = base_dir / path

        params = data.get("params", {})
        if not isinstance(params, dict):
            raise ValueError(f"Static route 'params' must be a table for {file_path!r}")

        return StaticRoute.with_defaults(
            file_path=str(path),
            default_file=data.get("default_file"),
            route=data.get("route"),
            route_strip=data.get("route_strip"),
            params=params,
        )

    @staticmethod
    def load(config: AppConfig) -> list[StaticRoute]:
        """Load all static routes declared in the config file."""
        routes_data = config.get_static_routes_config()
        base_dir = config.config_path().resolve().parent
        return [
            StaticRouteConfigurationLoader.load_static_route_from_data(route_data, base_dir)
            for route_data in routes_data
        ]
