"""
Domain exceptions for the raster editing engine.

All engine failures derive from RasterError so callers (service layer,
HTTP handlers) can catch the whole family in one place.
"""

from typing import Any, Dict, Optional


class RasterError(Exception):
    """Base class for all raster engine errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        """Serialize error for API responses."""
        return {
            "error": self.__class__.__name__,
            "message": self.message,
            "details": self.details,
        }


class InvalidDimensions(RasterError):
    """Pixel data length does not match width * height * 4."""


class InvalidRegion(RasterError):
    """Region has non-positive size or falls outside the raster."""


class EmptyRegion(RasterError):
    """Averaging was requested over zero pixels."""


class DegenerateBinWindow(RasterError):
    """A histogram binning window would contain no buckets."""


class ParameterOutOfRange(RasterError):
    """Transform or aggregation parameter outside its valid domain."""


class RasterNotFoundError(RasterError):
    """Raster id is unknown to the store."""

    def __init__(self, raster_id: str):
        super().__init__(f"Raster {raster_id} not found", {"raster_id": raster_id})
        self.raster_id = raster_id
