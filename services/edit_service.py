"""
Edit Service - Business logic for raster editing operations.

This service connects the raster store with the pure raster engine:
loading and exporting rasters, running point transforms, and computing
histograms and region statistics.
"""

import logging
from typing import Any, Dict, List, Mapping, Optional, Tuple, Union

import numpy as np

from core.constants import HistogramConstants
from core.enums import Channel, TransformOperation
from core.image import (
    apply_transform,
    array_to_raster,
    average_region,
    bin_histogram,
    create_thumbnail,
    from_base64,
    histogram,
    parse_operation,
    to_base64,
)
from core.raster import PixelQuad, RasterBuffer
from core.raster_store import RasterRecord, RasterStore
from core.roi_handler import ROIHandler
from core.utils.decorators import log_timing, timer

logger = logging.getLogger(__name__)


class EditService:
    """
    Service for raster editing operations.

    Transforms on a stored raster edit it in place unless a copy is
    requested, in which case the result is stored under a new ID.
    """

    def __init__(
        self,
        raster_store: RasterStore,
        histogram_workers: int = HistogramConstants.DEFAULT_WORKERS,
    ):
        """
        Initialize edit service.

        Args:
            raster_store: Raster store instance
            histogram_workers: Threads used for histogram accumulation
        """
        self.raster_store = raster_store
        self.histogram_workers = histogram_workers

    @log_timing
    def load_base64(self, image_base64: str, name: Optional[str] = None) -> RasterRecord:
        """Decode an uploaded image and store it."""
        raster = from_base64(image_base64)
        raster_id = self.raster_store.store(raster, name=name, metadata={"source": "upload"})
        logger.info(f"Loaded raster {raster_id}: {raster.width}x{raster.height}")
        return self.raster_store.get_record(raster_id)

    def load_array(
        self, image: np.ndarray, name: Optional[str] = None, bgr: bool = False
    ) -> RasterRecord:
        """Store a decoded NumPy image (RGB(A), or BGR(A) from OpenCV)."""
        raster = array_to_raster(image, bgr=bgr)
        raster_id = self.raster_store.store(raster, name=name, metadata={"source": "array"})
        return self.raster_store.get_record(raster_id)

    @log_timing
    def export_base64(self, raster_id: str, thumbnail_width: Optional[int] = None) -> str:
        """Encode a stored raster for display (PNG, or JPEG thumbnail)."""
        raster = self.raster_store.get(raster_id)
        if thumbnail_width:
            _, thumbnail = create_thumbnail(raster, width=thumbnail_width)
            return thumbnail
        return to_base64(raster)

    def apply(
        self,
        raster_id: str,
        operation: Union[TransformOperation, str],
        params: Optional[Mapping[str, Any]] = None,
        copy: bool = False,
    ) -> Tuple[RasterRecord, int]:
        """
        Run a point transform on a stored raster.

        Args:
            raster_id: Raster identifier
            operation: Transform operation
            params: Operation parameters by name
            copy: If True, keep the source and store the result as a new raster

        Returns:
            Tuple of (record holding the result, processing_time_ms)
        """
        op = parse_operation(operation)

        with timer() as t:
            with self.raster_store.lock:
                record = self.raster_store.get_record(raster_id)
                source = record.raster
                target = source.blank_like() if copy else source

                apply_transform(source, target, op, params)

                if copy:
                    new_id = self.raster_store.store(
                        target,
                        name=f"{record.name} ({op.value})",
                        metadata={"source": raster_id},
                    )
                    result = self.raster_store.mark_updated(new_id, op.value)
                else:
                    result = self.raster_store.mark_updated(raster_id, op.value)

        logger.info(f"Applied {op.value} to {raster_id} -> {result.id} in {t['ms']}ms")
        return result, t["ms"]

    def histogram(
        self,
        raster_id: str,
        channel: Union[Channel, str],
        bins: Optional[int] = None,
    ) -> Dict[str, Any]:
        """
        Histogram of one channel, optionally binned for display.

        Returns:
            Dict with counts (256 entries), max_frequency, total and,
            when bins is given, the binned values
        """
        raster = self.raster_store.get(raster_id)
        result = histogram(raster, channel, workers=self.histogram_workers)

        data: Dict[str, Any] = {
            "raster_id": raster_id,
            "channel": result.channel.value,
            "counts": result.to_list(),
            "max_frequency": result.max_frequency,
            "total": result.total,
        }
        if bins is not None:
            data["bins"] = bin_histogram(result.counts, bins)

        return data

    @staticmethod
    def bin(histogram_values: List[float], bin_count: int) -> List[float]:
        """Bin an arbitrary histogram."""
        return bin_histogram(histogram_values, bin_count)

    def region_average(self, raster_id: str, x: int, y: int, width: int, height: int) -> PixelQuad:
        """Average pixel value of a region of a stored raster."""
        raster = self.raster_store.get(raster_id)
        return average_region(raster, x, y, width, height)

    def extract_region(
        self, raster_id: str, x: int, y: int, width: int, height: int
    ) -> RasterRecord:
        """Copy a region of a stored raster into a new stored raster."""
        record = self.raster_store.get_record(raster_id)
        samples = ROIHandler.extract_region(record.raster, x, y, width, height)
        new_id = self.raster_store.store(
            RasterBuffer(width, height, samples),
            name=f"{record.name} [{x},{y} {width}x{height}]",
            metadata={"source": raster_id, "region": [x, y, width, height]},
        )
        return self.raster_store.get_record(new_id)
