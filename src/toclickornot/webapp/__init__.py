"""Flask webapp for To Click Or Not."""

from .app import create_app

__all__ = ["create_app"]
