"""
API package for Shape Gallery.

Provides the Flask routes for the drawing page, gallery and JSON API.
"""

from __future__ import annotations

from .routes import api

__all__ = ['api']
