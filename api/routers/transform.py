"""
Transform API Router - Point transforms on stored rasters
"""

import logging

from fastapi import APIRouter, Depends

from api.dependencies import get_edit_service
from api.exceptions import safe_endpoint
from core.enums import TransformOperation
from core.image import operation_parameters
from schemas import RasterInfo, TransformRequest, TransformResponse

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/operations")
async def list_operations() -> dict:
    """Available operations and the parameters each expects"""
    return {op.value: list(operation_parameters(op)) for op in TransformOperation}


@router.post("/apply")
@safe_endpoint
async def apply_transform(
    request: TransformRequest, edit_service=Depends(get_edit_service)
) -> TransformResponse:
    """
    Apply a point transform to a stored raster.

    The raster is edited in place unless copy is set, in which case the
    result is stored as a new raster and the source is left untouched.
    """
    record, processing_time_ms = edit_service.apply(
        request.raster_id,
        request.operation,
        request.params,
        copy=request.copy_result,
    )

    return TransformResponse(
        raster=RasterInfo(**record.to_dict()),
        operation=request.operation,
        processing_time_ms=processing_time_ms,
    )
