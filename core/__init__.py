"""
Core modules for Raster Tone
"""

from .enums import Channel, TransformOperation
from .exceptions import (
    DegenerateBinWindow,
    EmptyRegion,
    InvalidDimensions,
    InvalidRegion,
    ParameterOutOfRange,
    RasterError,
    RasterNotFoundError,
)
from .raster import PixelQuad, RasterBuffer
from .raster_store import RasterRecord, RasterStore
from .roi_handler import ROIHandler

__all__ = [
    "RasterBuffer",
    "PixelQuad",
    "RasterStore",
    "RasterRecord",
    "ROIHandler",
    "Channel",
    "TransformOperation",
    "RasterError",
    "InvalidDimensions",
    "InvalidRegion",
    "EmptyRegion",
    "DegenerateBinWindow",
    "ParameterOutOfRange",
    "RasterNotFoundError",
]
