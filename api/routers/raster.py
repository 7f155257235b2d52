"""
Raster API Router - Loading, listing and exporting rasters
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, Query

from api.dependencies import get_edit_service, get_raster_store
from api.exceptions import safe_endpoint
from core.constants import SystemConstants
from core.exceptions import RasterNotFoundError
from schemas import RasterImageResponse, RasterInfo, RasterListResponse, RasterUploadRequest

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/upload")
@safe_endpoint
async def upload_raster(
    request: RasterUploadRequest, edit_service=Depends(get_edit_service)
) -> RasterInfo:
    """
    Decode a base64 image and keep it as a raster.

    Args:
        request: Encoded image and optional name
        edit_service: Edit service dependency

    Returns:
        RasterInfo of the stored raster
    """
    record = edit_service.load_base64(request.image_base64, name=request.name)
    return RasterInfo(**record.to_dict())


@router.get("/")
@safe_endpoint
async def list_rasters(raster_store=Depends(get_raster_store)) -> RasterListResponse:
    """List stored rasters"""
    return RasterListResponse(
        rasters=[RasterInfo(**r) for r in raster_store.list_rasters()],
        stats=raster_store.get_stats(),
    )


@router.post("/clear")
@safe_endpoint
async def clear_rasters(raster_store=Depends(get_raster_store)) -> dict:
    """Remove all rasters"""
    raster_store.clear()

    return {"success": True, "message": "Raster store cleared"}


@router.get("/{raster_id}")
@safe_endpoint
async def get_raster(raster_id: str, raster_store=Depends(get_raster_store)) -> RasterInfo:
    """Get stored raster details"""
    return RasterInfo(**raster_store.get_record(raster_id).to_dict())


@router.get("/{raster_id}/image")
@safe_endpoint
async def get_raster_image(
    raster_id: str,
    thumbnail_width: Optional[int] = Query(None, ge=16, le=4096),
    edit_service=Depends(get_edit_service),
) -> RasterImageResponse:
    """
    Encode a stored raster for display.

    Full resolution rasters are returned as PNG (alpha kept); thumbnails as JPEG.
    """
    image_base64 = edit_service.export_base64(raster_id, thumbnail_width=thumbnail_width)
    return RasterImageResponse(
        raster_id=raster_id,
        format="JPEG" if thumbnail_width else SystemConstants.EXPORT_FORMAT,
        image_base64=image_base64,
    )


@router.delete("/{raster_id}")
@safe_endpoint
async def delete_raster(raster_id: str, raster_store=Depends(get_raster_store)) -> dict:
    """Delete a stored raster"""
    if not raster_store.delete(raster_id):
        raise RasterNotFoundError(raster_id)

    logger.info(f"Deleted raster {raster_id}")
    return {"success": True, "message": f"Raster {raster_id} deleted"}
