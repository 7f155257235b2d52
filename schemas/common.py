"""
Common data structures shared across API layers.

Contains core data models:
- ROI: Rectangular region in raster coordinates
- PixelValue: RGBA quad
"""

from typing import Dict, Tuple

from pydantic import BaseModel, Field


class ROI(BaseModel):
    """
    Region of Interest in raster coordinates.

    Size and bounds are validated by the raster engine against the raster
    itself, so an empty or out-of-bounds region is reported as InvalidRegion.
    """

    x: int = Field(..., description="X coordinate of the top-left corner")
    y: int = Field(..., description="Y coordinate of the top-left corner")
    width: int = Field(..., description="Width")
    height: int = Field(..., description="Height")

    def to_dict(self) -> Dict[str, int]:
        """Convert to dictionary for service layer compatibility."""
        return {"x": self.x, "y": self.y, "width": self.width, "height": self.height}

    def as_tuple(self) -> Tuple[int, int, int, int]:
        return self.x, self.y, self.width, self.height


class PixelValue(BaseModel):
    """RGBA pixel value"""

    r: int = Field(..., ge=0, le=255)
    g: int = Field(..., ge=0, le=255)
    b: int = Field(..., ge=0, le=255)
    a: int = Field(..., ge=0, le=255)

    @classmethod
    def from_quad(cls, quad: Tuple[int, int, int, int]) -> "PixelValue":
        r, g, b, a = quad
        return cls(r=r, g=g, b=b, a=a)

    def to_css(self) -> str:
        """CSS rgb() string, e.g. for a page background."""
        return f"rgb({self.r},{self.g},{self.b})"
