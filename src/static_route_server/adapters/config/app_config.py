"""12-factor configuration adapter using environment variables and TOML config."""

import tomllib
from pathlib import Path
from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from static_route_server.domain.models import DEFAULT_ROUTE

LOG_LEVELS = ("debug", "info", "warning", "error", "critical")
SERVER_SETTINGS = ("host", "port", "log_level", "rate_limit_per_minute")


class AppConfig(BaseSettings):
    """Application configuration following 12-factor principles."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        validate_assignment=True,
    )

    # Server configuration
    host: str = Field(default="0.0.0.0", description="Host to bind the server to")
    port: int = Field(default=8000, description="Port to bind the server to")
    log_level: str = Field(default="info", description="Log level for the application and uvicorn")

    # Rate limiting configuration
    rate_limit_per_minute: int = Field(
        default=100,
        description="Maximum number of requests allowed per IP address per minute (0 disables)",
    )

    # TOML config file path
    config_file: str | None = Field(
        default="config.example.toml",
        description="Path to TOML configuration file declaring static routes",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is one of the standard level names."""
        if v.lower() not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}")
        return v.lower()

    @field_validator("rate_limit_per_minute")
    @classmethod
    def validate_rate_limit(cls, v: int) -> int:
        """Validate the rate limit is not negative."""
        if v < 0:
            raise ValueError("rate_limit_per_minute must be zero or positive")
        return v

    def config_path(self) -> Path:
        """Path of the TOML configuration file."""
        if not self.config_file:
            raise ValueError("config_file must be set to load static routes configuration")
        return Path(self.config_file)

    def _load_toml_data(self) -> dict[str, Any]:
        """Load and parse TOML file, updating server settings."""
        config_path = self.config_path()
        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {config_path}")

        with open(config_path, "rb") as f:
            toml_data = tomllib.load(f)

        server = toml_data.get("server", {})
        if not isinstance(server, dict):
            raise ValueError("TOML config 'server' must be a table")
        # Assignment is validated, so bad values raise ValidationError here
        for name in SERVER_SETTINGS:
            if name in server:
                setattr(self, name, server[name])

        return toml_data

    def get_static_routes_config(self) -> list[dict[str, Any]]:
        """Parse and return static routes configuration as a list of dicts from TOML file.

        Each ``[[static_routes]]`` table needs a ``file_path`` and may set
        ``default_file``, ``route``, ``route_strip`` and a ``params`` table.

        Raises ValueError if the section is malformed or route patterns are not unique.
        """
        toml_data = self._load_toml_data()

        static_routes = toml_data.get("static_routes", [])
        if not isinstance(static_routes, list):
            raise ValueError("TOML config 'static_routes' must be a list")

        for static_route in static_routes:
            if not isinstance(static_route, dict):
                raise ValueError("Each entry in 'static_routes' must be a table")
            if "file_path" not in static_route:
                raise ValueError("All static routes must have a 'file_path' field")

        routes = [static_route.get("route") or DEFAULT_ROUTE for static_route in static_routes]
        if len(routes) != len(set(routes)):
            duplicates = [r for r in routes if routes.count(r) > 1]
            raise ValueError(
                f"Static route patterns must be unique. Duplicate routes found: {set(duplicates)}"
            )

        return static_routes
