"""Static file routes for Starlette applications, with a registration ledger."""

__version__ = "0.1.0"
