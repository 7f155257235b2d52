"""
RGB <-> HSV color space conversion.

Hue is expressed in degrees [0, 360). Saturation and value stay on the
same 0-255 scale as the pixel samples so they can be adjusted with the
same byte-sized offsets as the channels themselves.

OpenCV does the conversion in its float32 mode (hue in degrees, S and V
in 0-1). The scalar functions run the same path on a single pixel.
"""

from typing import Tuple

import cv2
import numpy as np

from core.constants import RasterConstants

_SCALE = float(RasterConstants.SAMPLE_MAX)
_DEGREES = RasterConstants.HUE_DEGREES


def _as_pixels(values: np.ndarray) -> np.ndarray:
    """(..., 3) float array -> contiguous (N, 1, 3) float32 image for cvtColor."""
    return np.ascontiguousarray(values.reshape(-1, 1, 3), dtype=np.float32)


def rgb_to_hsv_array(rgb: np.ndarray) -> np.ndarray:
    """
    Convert RGB samples to HSV.

    Args:
        rgb: Array of shape (..., 3) with samples 0-255

    Returns:
        Float array of shape (..., 3): hue degrees, saturation and value (0-255).
        Achromatic pixels have hue 0 and saturation 0.
    """
    rgb = np.asarray(rgb, dtype=np.float64)
    hsv = cv2.cvtColor(_as_pixels(rgb / _SCALE), cv2.COLOR_RGB2HSV).astype(np.float64)

    hsv[..., 0] %= _DEGREES
    hsv[..., 1:] *= _SCALE
    return hsv.reshape(rgb.shape)


def hsv_to_rgb_array(hsv: np.ndarray) -> np.ndarray:
    """
    Convert HSV back to RGB samples.

    Hue is taken modulo 360 first. Output channels are rounded half up
    and clamped to 0..255.

    Args:
        hsv: Array of shape (..., 3): hue degrees, saturation and value (0-255)

    Returns:
        uint8 array of shape (..., 3)
    """
    hsv = np.asarray(hsv, dtype=np.float64)
    normalized = np.stack(
        [
            np.mod(hsv[..., 0], _DEGREES),
            np.clip(hsv[..., 1] / _SCALE, 0.0, 1.0),
            np.clip(hsv[..., 2] / _SCALE, 0.0, 1.0),
        ],
        axis=-1,
    )
    rgb = cv2.cvtColor(_as_pixels(normalized), cv2.COLOR_HSV2RGB).astype(np.float64)

    rgb = np.clip(np.floor(rgb * _SCALE + 0.5), 0, RasterConstants.SAMPLE_MAX)
    return rgb.astype(np.uint8).reshape(hsv.shape)


def rgb_to_hsv(r: float, g: float, b: float) -> Tuple[float, float, float]:
    """
    Convert one RGB triple (0-255) to HSV.

    Returns:
        (h, s, v) with h in degrees [0, 360), s and v on the 0-255 scale
    """
    h, s, v = rgb_to_hsv_array(np.array([r, g, b], dtype=np.float64))
    return float(h), float(s), float(v)


def hsv_to_rgb(h: float, s: float, v: float) -> Tuple[int, int, int]:
    """Convert one HSV triple back to an RGB triple."""
    r, g, b = hsv_to_rgb_array(np.array([h, s, v], dtype=np.float64))
    return int(r), int(g), int(b)
