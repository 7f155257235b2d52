"""
Analysis API Router - Histograms and region statistics
"""

import logging

from fastapi import APIRouter, Depends

from api.dependencies import get_default_bin_count, get_edit_service
from api.exceptions import safe_endpoint
from schemas import (
    BinRequest,
    BinResponse,
    HistogramRequest,
    HistogramResponse,
    PixelValue,
    RasterInfo,
    RegionAverageResponse,
    RegionRequest,
)

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/histogram")
@safe_endpoint
async def get_histogram(
    request: HistogramRequest, edit_service=Depends(get_edit_service)
) -> HistogramResponse:
    """Histogram of one channel of a stored raster, optionally binned"""
    data = edit_service.histogram(request.raster_id, request.channel, bins=request.bins)
    return HistogramResponse(**data)


@router.post("/bin")
@safe_endpoint
async def bin_histogram(
    request: BinRequest,
    edit_service=Depends(get_edit_service),
    default_bin_count: int = Depends(get_default_bin_count),
) -> BinResponse:
    """Bin an arbitrary histogram to fewer buckets"""
    bin_count = request.bin_count if request.bin_count is not None else default_bin_count
    return BinResponse(bins=edit_service.bin(request.histogram, bin_count))


@router.post("/region-average")
@safe_endpoint
async def region_average(
    request: RegionRequest, edit_service=Depends(get_edit_service)
) -> RegionAverageResponse:
    """
    Average pixel value of a rectangular region.

    The region must lie fully inside the raster.
    """
    quad = edit_service.region_average(request.raster_id, *request.roi.as_tuple())
    average = PixelValue.from_quad(quad)

    return RegionAverageResponse(
        raster_id=request.raster_id, roi=request.roi, average=average, css=average.to_css()
    )


@router.post("/extract-region")
@safe_endpoint
async def extract_region(
    request: RegionRequest, edit_service=Depends(get_edit_service)
) -> RasterInfo:
    """Copy a region of a stored raster into a new raster"""
    record = edit_service.extract_region(request.raster_id, *request.roi.as_tuple())

    logger.info(f"Extracted region {request.roi.to_dict()} from {request.raster_id}")
    return RasterInfo(**record.to_dict())
