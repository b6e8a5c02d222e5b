"""Web adapters."""

from .static_web_app import StaticWebAdapter

__all__ = ["StaticWebAdapter"]
