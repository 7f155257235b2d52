"""
Point transform API models.
"""

from typing import Any, Dict

from pydantic import BaseModel, Field

from core.enums import TransformOperation

from .raster import RasterInfo


class TransformRequest(BaseModel):
    """Request to apply a point transform to a stored raster"""

    raster_id: str
    operation: TransformOperation
    params: Dict[str, Any] = Field(
        default_factory=dict,
        description=(
            "threshold: {threshold}; hue: {degrees}; saturation/value: {amount}; "
            "contrast: {factor}; multiply: {red, green, blue}"
        ),
    )
    copy_result: bool = Field(
        False, alias="copy", description="Store the result as a new raster instead of in place"
    )

    model_config = {"populate_by_name": True}


class TransformResponse(BaseModel):
    """Result of a point transform"""

    raster: RasterInfo
    operation: TransformOperation
    processing_time_ms: int
