"""HTTP API exposing the extraction pipeline."""

from .app import app, create_app

__all__ = ["app", "create_app"]
