"""
Constants and configuration values for the Raster Tone system.
Centralizes all magic numbers and configuration constants.
"""


# Raster layout constants
class RasterConstants:
    """Constants describing the RGBA pixel layout."""

    CHANNELS = 4  # R, G, B, A interleaved
    SAMPLE_MIN = 0
    SAMPLE_MAX = 255

    # Color space
    HUE_DEGREES = 360.0

    # Sanity limits for decoded input
    MAX_DIMENSION = 16384


# Transform Constants
class TransformConstants:
    """Constants for point transforms."""

    THRESHOLD_MIN = 0
    THRESHOLD_MAX = 255

    # multiply factors above this are treated as bytes and divided by 255
    FRACTION_MAX = 1.0


# Histogram Constants
class HistogramConstants:
    """Constants for histogram aggregation."""

    BUCKETS = 256
    DEFAULT_BIN_COUNT = 64
    MAX_BIN_COUNT = 4096

    DEFAULT_WORKERS = 1
    MAX_WORKERS = 16


# Store Constants
class StoreConstants:
    """Constants related to in-memory raster storage."""

    DEFAULT_MAX_RASTERS = 20
    MIN_RASTERS = 1
    MAX_RASTERS = 500
    ID_PREFIX = "rst_"


# System Constants
class SystemConstants:
    """Constants for system operations."""

    # Logging
    LOG_LEVEL_DEFAULT = "INFO"
    LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    # Export
    EXPORT_FORMAT = "PNG"
    THUMBNAIL_JPEG_QUALITY = 85
