"""Static route domain model."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

DEFAULT_FILE = "index.html"
DEFAULT_ROUTE = "/*"
DEFAULT_ROUTE_STRIP = "/"


@dataclass(frozen=True)
class StaticRoute:
    """A directory exposed at a URL route, as it is actually being served.

    ``params`` is handed to the serving mechanism untouched; its recognised
    keys belong to whichever host installs the route. It takes part in
    equality but not in the hash, so records can live in sets.
    """

    file_path: str
    default_file: str = DEFAULT_FILE
    route: str = DEFAULT_ROUTE
    route_strip: str = DEFAULT_ROUTE_STRIP
    params: Mapping[str, Any] = field(default_factory=dict, hash=False)

    @classmethod
    def with_defaults(
        cls,
        file_path: str,
        default_file: str | None = None,
        route: str | None = None,
        route_strip: str | None = None,
        params: Mapping[str, Any] | None = None,
    ) -> "StaticRoute":
        """Build a record, substituting defaults for omitted or empty arguments."""
        return cls(
            file_path=file_path,
            default_file=default_file or DEFAULT_FILE,
            route=route or DEFAULT_ROUTE,
            route_strip=route_strip or DEFAULT_ROUTE_STRIP,
            params=dict(params) if params else {},
        )
