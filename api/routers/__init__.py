"""
API Routers for Raster Tone
"""

from . import analysis, raster, system, transform

__all__ = ["raster", "transform", "analysis", "system"]
