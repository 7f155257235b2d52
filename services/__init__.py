"""
Service layer for Raster Tone
"""

from .edit_service import EditService

__all__ = ["EditService"]
