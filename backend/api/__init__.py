"""
Chairbook API package.

Provides the FastAPI application for the Chairbook backend.
"""

from .app import app, create_app

__all__ = ["app", "create_app"]
