"""HTTP API over the field resolution functions."""

from .app import create_app

__all__ = ["create_app"]
