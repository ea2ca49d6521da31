"""Web interface for the SubRip tools."""

from .app import app

__all__ = ["app"]
