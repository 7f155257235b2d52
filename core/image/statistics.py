"""
Region statistics: average pixel value over a flat RGBA sequence or a
rectangular region of a raster.
"""

import logging
from typing import Sequence, Union

import numpy as np

from core.constants import RasterConstants
from core.exceptions import EmptyRegion, InvalidDimensions
from core.raster import PixelQuad, RasterBuffer
from core.roi_handler import ROIHandler

logger = logging.getLogger(__name__)


def average(pixels: Union[np.ndarray, Sequence[int]]) -> PixelQuad:
    """
    Average a flat RGBA sequence channel by channel.

    Args:
        pixels: R, G, B, A, R, G, B, A, ... of length 4n

    Returns:
        (R, G, B, A) means, each rounded half up

    Raises:
        EmptyRegion: Sequence holds no pixels
        InvalidDimensions: Length is not a multiple of 4
    """
    samples = np.asarray(pixels, dtype=np.float64).reshape(-1)
    if samples.size % RasterConstants.CHANNELS:
        raise InvalidDimensions(
            f"Pixel sequence length {samples.size} is not a multiple of 4",
            {"length": int(samples.size)},
        )

    count = samples.size // RasterConstants.CHANNELS
    if count == 0:
        raise EmptyRegion("Cannot average an empty pixel sequence")

    means = samples.reshape(count, RasterConstants.CHANNELS).sum(axis=0) / count
    r, g, b, a = (int(m) for m in np.floor(means + 0.5))
    return r, g, b, a


def average_region(raster: RasterBuffer, x: int, y: int, w: int, h: int) -> PixelQuad:
    """
    Average pixel value of the rectangle [x, x+w) x [y, y+h).

    Raises:
        InvalidRegion: Non-positive size or rectangle outside the raster
    """
    region = ROIHandler.extract_region(raster, x, y, w, h)
    result = average(region)
    logger.debug(f"average of ({x}, {y}, {w}x{h}) = {result}")
    return result
