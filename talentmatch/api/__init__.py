"""HTTP API exposing the matching engine."""

from .app import create_app

__all__ = ["create_app"]
