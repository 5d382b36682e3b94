"""Command-line interface for the cricket scoring system."""

from .main import app

__all__ = ["app"]
