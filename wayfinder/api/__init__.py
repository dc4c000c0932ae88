"""HTTP layer - Flask application exposing the wayfinder API."""

from .app import create_app

__all__ = ["create_app"]
