"""
Raster API models.

This module contains models for raster management:
- Upload requests and raster descriptions
- Image export responses
"""

from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field


class RasterUploadRequest(BaseModel):
    """Request to load an encoded image as a raster"""

    image_base64: str = Field(..., min_length=1, description="Base64 image or data URL")
    name: Optional[str] = Field(None, description="Display name")


class RasterInfo(BaseModel):
    """Stored raster description"""

    id: str
    name: str
    width: int
    height: int
    created_at: datetime
    updated_at: datetime
    last_operation: Optional[str] = None
    operations_applied: int = 0
    metadata: Dict[str, Any] = Field(default_factory=dict)


class RasterListResponse(BaseModel):
    """All stored rasters plus store statistics"""

    rasters: List[RasterInfo]
    stats: Dict[str, Any]


class RasterImageResponse(BaseModel):
    """Encoded raster for display"""

    raster_id: str
    format: str
    image_base64: str
