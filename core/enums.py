"""
Centralized enums for the raster editing engine.
"""

from enum import Enum


class Channel(str, Enum):
    """Pixel channel selector."""

    RED = "r"
    GREEN = "g"
    BLUE = "b"
    ALPHA = "a"

    @property
    def offset(self) -> int:
        """Position of the channel inside an RGBA quad."""
        return "rgba".index(self.value)


class TransformOperation(str, Enum):
    """Per-pixel transform operations."""

    INVERT = "invert"
    THRESHOLD = "threshold"
    HUE = "hue"
    SATURATION = "saturation"
    VALUE = "value"
    CONTRAST = "contrast"
    MULTIPLY = "multiply"
