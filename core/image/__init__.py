"""
Image processing utilities - functional architecture.

This package provides the raster engine as pure functions:
- point_transforms: Per-pixel edits (invert, threshold, hue, saturation, value, contrast, multiply)
- histogram: Channel histograms and histogram binning
- statistics: Region averages
- converters: Format conversions (NumPy, PIL, base64)
- processors: Presentation helpers (thumbnail)

All utilities are re-exported from this module for convenient access.
"""

from core.image.converters import (
    ImageConverters,
    array_to_raster,
    from_base64,
    pil_to_raster,
    raster_to_array,
    raster_to_pil,
    to_base64,
)
from core.image.histogram import (
    HistogramResult,
    bin_histogram,
    bin_span,
    bin_window,
    histogram,
    parse_channel,
)
from core.image.point_transforms import (
    apply_transform,
    contrast,
    hue,
    invert,
    multiply,
    normalize_factor,
    operation_parameters,
    parse_operation,
    saturation,
    threshold,
    value,
)
from core.image.processors import create_thumbnail
from core.image.statistics import average, average_region

__all__ = [
    # Converter functions
    "ImageConverters",
    "array_to_raster",
    "raster_to_array",
    "pil_to_raster",
    "raster_to_pil",
    "to_base64",
    "from_base64",
    # Point transforms
    "invert",
    "threshold",
    "hue",
    "saturation",
    "value",
    "contrast",
    "multiply",
    "normalize_factor",
    "apply_transform",
    "parse_operation",
    "operation_parameters",
    # Histogram functions
    "HistogramResult",
    "histogram",
    "bin_histogram",
    "bin_span",
    "bin_window",
    "parse_channel",
    # Statistics
    "average",
    "average_region",
    # Processor functions
    "create_thumbnail",
]
