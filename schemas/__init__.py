"""
Schemas Package

This package contains all Pydantic schemas for request/response validation
and serialization, organized by domain:
- common: ROI and pixel values
- raster: Raster upload and description
- transform: Point transform requests
- analysis: Histogram and region statistics
- system: Status and debug settings
"""

# Re-export enums from centralized location for convenience
from core.enums import Channel, TransformOperation

# Analysis models
from .analysis import (
    BinRequest,
    BinResponse,
    HistogramRequest,
    HistogramResponse,
    RegionAverageResponse,
    RegionRequest,
)

# Common models (core data structures)
from .common import ROI, PixelValue

# Raster models
from .raster import RasterImageResponse, RasterInfo, RasterListResponse, RasterUploadRequest

# System models
from .system import DebugSettings, SystemStatus

# Transform models
from .transform import TransformRequest, TransformResponse

# Explicitly declare public API for re-export
__all__ = [
    # Common models
    "ROI",
    "PixelValue",
    # Raster models
    "RasterUploadRequest",
    "RasterInfo",
    "RasterListResponse",
    "RasterImageResponse",
    # Transform models
    "TransformRequest",
    "TransformResponse",
    # Analysis models
    "HistogramRequest",
    "HistogramResponse",
    "BinRequest",
    "BinResponse",
    "RegionRequest",
    "RegionAverageResponse",
    # System models
    "SystemStatus",
    "DebugSettings",
    # Enums (re-exported from core.enums)
    "Channel",
    "TransformOperation",
]
