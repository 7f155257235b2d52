"""
Image format conversion utilities.

Boundary between the raster engine and decoded images:
- NumPy arrays (RGB/RGBA, or OpenCV BGR/BGRA)
- PIL Images
- Base64 encoded strings
Pillow and OpenCV do all codec work; RasterBuffer only ever holds RGBA.
"""

import base64
import binascii
import io
import logging

import cv2
import numpy as np
from PIL import Image, UnidentifiedImageError

from core.constants import RasterConstants, SystemConstants
from core.exceptions import InvalidDimensions, ParameterOutOfRange
from core.raster import RasterBuffer

logger = logging.getLogger(__name__)


class ImageConverters:
    """Utilities for converting between image formats and RasterBuffer."""

    @staticmethod
    def array_to_raster(image: np.ndarray, bgr: bool = False) -> RasterBuffer:
        """
        Convert NumPy image array to a RasterBuffer.

        Args:
            image: Grayscale (H, W), color (H, W, 3) or (H, W, 4) uint8 array
            bgr: If True, channels are in OpenCV BGR(A) order

        Returns:
            RasterBuffer in RGBA order (opaque alpha when the input has none)
        """
        if image.dtype != np.uint8:
            raise ParameterOutOfRange(
                f"Expected uint8 image, got {image.dtype}", {"dtype": str(image.dtype)}
            )

        if image.ndim == 2:
            rgba = cv2.cvtColor(image, cv2.COLOR_GRAY2RGBA)
        elif image.ndim == 3 and image.shape[2] == 3:
            rgba = cv2.cvtColor(image, cv2.COLOR_BGR2RGBA if bgr else cv2.COLOR_RGB2RGBA)
        elif image.ndim == 3 and image.shape[2] == RasterConstants.CHANNELS:
            rgba = cv2.cvtColor(image, cv2.COLOR_BGRA2RGBA) if bgr else image
        else:
            raise InvalidDimensions(
                f"Unsupported image shape {image.shape}", {"shape": list(image.shape)}
            )

        return RasterBuffer.from_array(rgba)

    @staticmethod
    def raster_to_array(raster: RasterBuffer, bgr: bool = False) -> np.ndarray:
        """
        Convert RasterBuffer to an (H, W, 4) array.

        Args:
            raster: Source raster
            bgr: If True, return OpenCV BGRA order

        Returns:
            New NumPy array (does not share memory with the raster)
        """
        rgba = raster.view()
        if bgr:
            return cv2.cvtColor(rgba, cv2.COLOR_RGBA2BGRA)
        return rgba.copy()

    @staticmethod
    def pil_to_raster(image: Image.Image) -> RasterBuffer:
        """Convert a PIL Image of any mode to a RasterBuffer."""
        return RasterBuffer.from_array(np.array(image.convert("RGBA")))

    @staticmethod
    def raster_to_pil(raster: RasterBuffer) -> Image.Image:
        """Convert RasterBuffer to an RGBA PIL Image."""
        return Image.fromarray(raster.view().copy())

    @staticmethod
    def to_base64(
        raster: RasterBuffer,
        format: str = SystemConstants.EXPORT_FORMAT,
        quality: int = SystemConstants.THUMBNAIL_JPEG_QUALITY,
    ) -> str:
        """
        Encode raster as a base64 image string.

        Args:
            raster: Raster to encode
            format: Image format (PNG, JPEG, ...)
            quality: JPEG quality (1-100, ignored for PNG)

        Returns:
            Base64 encoded string
        """
        try:
            image = ImageConverters.raster_to_pil(raster)

            buffer = io.BytesIO()
            save_kwargs = {"format": format}

            if format.upper() == "JPEG":
                # JPEG has no alpha channel
                image = image.convert("RGB")
                save_kwargs["quality"] = quality
                save_kwargs["optimize"] = True

            image.save(buffer, **save_kwargs)
            return base64.b64encode(buffer.getvalue()).decode("utf-8")

        except Exception as e:
            logger.error(f"Failed to convert raster to base64: {e}")
            raise

    @staticmethod
    def from_base64(base64_string: str) -> RasterBuffer:
        """
        Decode a base64 image string into a RasterBuffer.

        Accepts plain base64 or a data URL (data:image/png;base64,...).

        Raises:
            ParameterOutOfRange: Payload is not valid base64 or not an image
        """
        if base64_string.startswith("data:") and "," in base64_string:
            base64_string = base64_string.split(",", 1)[1]

        try:
            image_bytes = base64.b64decode(base64_string, validate=True)
            image = Image.open(io.BytesIO(image_bytes))
            image.load()
        except (binascii.Error, ValueError, UnidentifiedImageError, OSError) as e:
            logger.warning(f"Failed to decode base64 image: {e}")
            raise ParameterOutOfRange(f"Invalid image data: {e}")

        if max(image.size) > RasterConstants.MAX_DIMENSION:
            raise InvalidDimensions(
                f"Image {image.size[0]}x{image.size[1]} exceeds "
                f"{RasterConstants.MAX_DIMENSION} pixels per side",
                {"width": image.size[0], "height": image.size[1]},
            )

        return ImageConverters.pil_to_raster(image)


array_to_raster = ImageConverters.array_to_raster
raster_to_array = ImageConverters.raster_to_array
pil_to_raster = ImageConverters.pil_to_raster
raster_to_pil = ImageConverters.raster_to_pil
to_base64 = ImageConverters.to_base64
from_base64 = ImageConverters.from_base64
