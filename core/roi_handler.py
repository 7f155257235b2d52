"""
Region of Interest (ROI) handler for the Raster Tone system.

Provides utility functions for region validation and pixel extraction
from a RasterBuffer. Regions are plain (x, y, width, height) rectangles
in raster coordinates.
"""

import logging
from typing import Optional, Tuple

import numpy as np

from core.exceptions import InvalidRegion
from core.raster import RasterBuffer

logger = logging.getLogger(__name__)

Region = Tuple[int, int, int, int]


class ROIHandler:
    """
    Handler for region validation and extraction operations.

    Provides three core functions:
    - validate_region: Check a rectangle against raster bounds
    - clip_region: Clip a rectangle to raster bounds
    - extract_region: Pull the flat RGBA samples of a rectangle
    """

    @staticmethod
    def validate_region(
        raster: RasterBuffer, x: int, y: int, width: int, height: int
    ) -> Tuple[bool, Optional[str]]:
        """
        Validate region parameters.

        Args:
            raster: Raster the region refers to
            x, y: Top-left corner
            width, height: Region size

        Returns:
            Tuple of (is_valid, error_message)
        """
        if width <= 0 or height <= 0:
            return False, f"Region has non-positive size: {width}x{height}"

        if x < 0 or y < 0:
            return False, f"Region has negative coordinates: ({x}, {y})"

        if x + width > raster.width or y + height > raster.height:
            return (
                False,
                f"Region ({x}, {y}, {width}x{height}) exceeds raster bounds "
                f"{raster.width}x{raster.height}",
            )

        return True, None

    @staticmethod
    def require_region(raster: RasterBuffer, x: int, y: int, width: int, height: int) -> None:
        """Raise InvalidRegion unless the region lies fully inside the raster."""
        is_valid, error_msg = ROIHandler.validate_region(raster, x, y, width, height)
        if not is_valid:
            raise InvalidRegion(
                error_msg, {"x": x, "y": y, "width": width, "height": height}
            )

    @staticmethod
    def clip_region(raster: RasterBuffer, x: int, y: int, width: int, height: int) -> Region:
        """
        Clip region to raster bounds.

        Returns:
            Clipped (x, y, width, height); width or height may become 0
        """
        x1 = max(0, min(x, raster.width))
        y1 = max(0, min(y, raster.height))
        x2 = max(0, min(x + width, raster.width))
        y2 = max(0, min(y + height, raster.height))

        return x1, y1, max(0, x2 - x1), max(0, y2 - y1)

    @staticmethod
    def extract_region(
        raster: RasterBuffer,
        x: int,
        y: int,
        width: int,
        height: int,
        safe_mode: bool = False,
    ) -> np.ndarray:
        """
        Extract the pixels of a rectangle as a flat RGBA sequence.

        Args:
            raster: Source raster (never modified)
            x, y: Top-left corner
            width, height: Region size
            safe_mode: If True, clip region to raster bounds instead of failing

        Returns:
            Flat uint8 array (R, G, B, A, R, G, B, A, ...), row-major

        Raises:
            InvalidRegion: Region is empty or (in strict mode) out of bounds
        """
        if safe_mode:
            x, y, width, height = ROIHandler.clip_region(raster, x, y, width, height)

            if width <= 0 or height <= 0:
                logger.warning(f"Region becomes empty after clipping: ({x}, {y})")
                raise InvalidRegion(
                    "Region is empty after clipping to raster bounds",
                    {"x": x, "y": y, "width": width, "height": height},
                )
        else:
            ROIHandler.require_region(raster, x, y, width, height)

        return raster.view()[y : y + height, x : x + width].reshape(-1).copy()
