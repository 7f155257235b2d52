"""
Image processing operations for presentation.

Handles display-side tasks:
- Thumbnail creation
"""

import logging
from typing import Tuple

from PIL import Image

from core.constants import SystemConstants
from core.image.converters import pil_to_raster, raster_to_pil, to_base64
from core.raster import RasterBuffer

logger = logging.getLogger(__name__)


def create_thumbnail(
    raster: RasterBuffer, width: int = 320, maintain_aspect: bool = True
) -> Tuple[RasterBuffer, str]:
    """
    Create thumbnail from raster.

    Args:
        raster: Source raster (never modified)
        width: Target width in pixels
        maintain_aspect: If True, maintain aspect ratio

    Returns:
        Tuple of (thumbnail as RasterBuffer, thumbnail as base64 JPEG string)
    """
    try:
        pil_image = raster_to_pil(raster)

        # Calculate new size
        if maintain_aspect:
            aspect_ratio = pil_image.height / pil_image.width
            height = max(1, int(width * aspect_ratio))
        else:
            height = width

        # thumbnail() only ever shrinks
        pil_image.thumbnail((width, height), Image.Resampling.LANCZOS)

        thumb_raster = pil_to_raster(pil_image)
        thumb_base64 = to_base64(
            thumb_raster, format="JPEG", quality=SystemConstants.THUMBNAIL_JPEG_QUALITY
        )

        return thumb_raster, thumb_base64

    except Exception as e:
        logger.error(f"Failed to create thumbnail: {e}")
        raise
