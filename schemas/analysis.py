"""
Histogram and region statistics API models.
"""

from typing import List, Optional

from pydantic import BaseModel, Field

from core.enums import Channel

from .common import ROI, PixelValue


class HistogramRequest(BaseModel):
    """Request a channel histogram of a stored raster"""

    raster_id: str
    channel: Channel = Field(Channel.RED, description="'r', 'g' or 'b'")
    bins: Optional[int] = Field(None, description="Also return the histogram binned to this size")


class HistogramResponse(BaseModel):
    """Channel histogram"""

    raster_id: str
    channel: Channel
    counts: List[int]
    max_frequency: int
    total: int
    bins: Optional[List[float]] = None


class BinRequest(BaseModel):
    """Bin an arbitrary histogram"""

    histogram: List[float] = Field(..., description="Bucket frequencies")
    bin_count: Optional[int] = Field(None, description="Defaults to the configured bin count")


class BinResponse(BaseModel):
    bins: List[float]


class RegionRequest(BaseModel):
    """Region of a stored raster"""

    raster_id: str
    roi: ROI


class RegionAverageResponse(BaseModel):
    """Average pixel value of a region"""

    raster_id: str
    roi: ROI
    average: PixelValue
    css: str
