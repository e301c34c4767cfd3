"""Personal portfolio site: project catalog + static pages (Flask)."""

from .app import create_app

__all__ = ["create_app"]
