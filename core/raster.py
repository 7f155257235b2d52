"""
Raster Buffer - flat RGBA pixel data model
"""

import logging
from dataclasses import dataclass
from typing import Sequence, Tuple, Union

import numpy as np

from core.constants import RasterConstants
from core.exceptions import InvalidDimensions, ParameterOutOfRange

logger = logging.getLogger(__name__)

# (R, G, B, A), each 0-255
PixelQuad = Tuple[int, int, int, int]


def _as_samples(pixels: Union[np.ndarray, Sequence[int], bytes]) -> np.ndarray:
    """Coerce incoming pixel data to a flat uint8 array, rejecting samples that are not bytes."""
    if isinstance(pixels, (bytes, bytearray)):
        return np.frombuffer(bytes(pixels), dtype=np.uint8).copy()

    array = np.asarray(pixels)
    if array.dtype == np.uint8:
        return array.reshape(-1)

    if array.dtype.kind not in "iuf":
        raise ParameterOutOfRange(
            f"Pixel samples must be numbers, got dtype {array.dtype}", {"dtype": str(array.dtype)}
        )
    if array.dtype.kind == "f" and not (
        np.all(np.isfinite(array)) and np.all(array == np.floor(array))
    ):
        raise ParameterOutOfRange("Pixel samples must be whole numbers within 0..255")

    if array.size and (
        array.min() < RasterConstants.SAMPLE_MIN or array.max() > RasterConstants.SAMPLE_MAX
    ):
        raise ParameterOutOfRange(
            "Pixel samples must be within 0..255",
            {"min": float(array.min()), "max": float(array.max())},
        )
    return array.astype(np.uint8).reshape(-1)


@dataclass(eq=False)
class RasterBuffer:
    """
    One decoded image: width, height and interleaved RGBA samples (row-major).

    The sample of channel c of pixel (x, y) lives at ((y * width + x) * 4) + c.
    """

    width: int
    height: int
    pixels: np.ndarray

    def __post_init__(self):
        if not isinstance(self.width, (int, np.integer)) or not isinstance(
            self.height, (int, np.integer)
        ):
            raise InvalidDimensions(
                "Width and height must be integers",
                {"width": repr(self.width), "height": repr(self.height)},
            )
        self.width = int(self.width)
        self.height = int(self.height)

        if self.width <= 0 or self.height <= 0:
            raise InvalidDimensions(
                f"Raster dimensions must be positive, got {self.width}x{self.height}",
                {"width": self.width, "height": self.height},
            )

        self.pixels = _as_samples(self.pixels)
        expected = self.width * self.height * RasterConstants.CHANNELS
        if self.pixels.size != expected:
            raise InvalidDimensions(
                f"Expected {expected} samples for {self.width}x{self.height}, "
                f"got {self.pixels.size}",
                {"width": self.width, "height": self.height, "samples": int(self.pixels.size)},
            )

    @classmethod
    def from_array(cls, array: np.ndarray) -> "RasterBuffer":
        """Create raster from an (H, W, 4) RGBA array. Data is copied."""
        if array.ndim != 3 or array.shape[2] != RasterConstants.CHANNELS:
            raise InvalidDimensions(
                f"Expected (height, width, 4) array, got shape {array.shape}",
                {"shape": list(array.shape)},
            )
        height, width = array.shape[:2]
        return cls(width=width, height=height, pixels=np.array(array, copy=True).reshape(-1))

    @classmethod
    def filled(cls, width: int, height: int, color: PixelQuad) -> "RasterBuffer":
        """Create raster where every pixel has the same RGBA value."""
        quad = _as_samples(list(color))
        if quad.size != RasterConstants.CHANNELS:
            raise InvalidDimensions("Fill color must have 4 channels", {"color": list(color)})
        return cls(width=width, height=height, pixels=np.tile(quad, width * height))

    @property
    def pixel_count(self) -> int:
        """Number of channel samples (width * height * 4)."""
        return int(self.pixels.size)

    @property
    def shape(self) -> Tuple[int, int]:
        """(width, height) tuple."""
        return self.width, self.height

    def view(self) -> np.ndarray:
        """(H, W, 4) view sharing memory with the flat buffer."""
        return self.pixels.reshape(self.height, self.width, RasterConstants.CHANNELS)

    def copy(self) -> "RasterBuffer":
        return RasterBuffer(self.width, self.height, self.pixels.copy())

    def blank_like(self) -> "RasterBuffer":
        """Transparent black raster with the same dimensions."""
        return RasterBuffer(self.width, self.height, np.zeros_like(self.pixels))

    def same_shape(self, other: "RasterBuffer") -> bool:
        return self.width == other.width and self.height == other.height

    def index_of(self, x: int, y: int, channel: int = 0) -> int:
        """Flat index of a channel sample."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"Pixel ({x}, {y}) outside {self.width}x{self.height}")
        if not 0 <= channel < RasterConstants.CHANNELS:
            raise IndexError(f"Channel {channel} outside 0..3")
        return ((y * self.width + x) * RasterConstants.CHANNELS) + channel

    def pixel(self, x: int, y: int) -> PixelQuad:
        """RGBA quad of a single pixel."""
        start = self.index_of(x, y)
        r, g, b, a = self.pixels[start : start + RasterConstants.CHANNELS]
        return int(r), int(g), int(b), int(a)

    def equals(self, other: "RasterBuffer") -> bool:
        """Exact comparison of dimensions and samples."""
        return self.same_shape(other) and np.array_equal(self.pixels, other.pixels)

    def __repr__(self) -> str:
        return f"RasterBuffer(width={self.width}, height={self.height})"
