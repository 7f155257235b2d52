"""
Channel histograms and histogram binning.
"""

import logging
import math
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import List, Sequence, Tuple, Union

import numpy as np

from core.constants import HistogramConstants
from core.enums import Channel
from core.exceptions import DegenerateBinWindow, ParameterOutOfRange
from core.raster import RasterBuffer

logger = logging.getLogger(__name__)


@dataclass
class HistogramResult:
    """Frequency of each sample value 0-255 for one channel."""

    channel: Channel
    counts: np.ndarray  # shape (256,), int64
    max_frequency: int

    @property
    def total(self) -> int:
        return int(self.counts.sum())

    def to_list(self) -> List[int]:
        return [int(c) for c in self.counts]


def parse_channel(channel: Union[Channel, str]) -> Channel:
    """Resolve 'r', 'g' or 'b'. Alpha is not histogrammed."""
    try:
        parsed = channel if isinstance(channel, Channel) else Channel(str(channel).lower())
    except ValueError:
        parsed = None

    if parsed is None or parsed is Channel.ALPHA:
        raise ParameterOutOfRange(
            f"Histogram channel must be one of 'r', 'g', 'b', got {channel!r}",
            {"channel": str(channel)},
        )
    return parsed


def _count(samples: np.ndarray) -> np.ndarray:
    return np.bincount(samples, minlength=HistogramConstants.BUCKETS).astype(np.int64)


def histogram(
    raster: RasterBuffer, channel: Union[Channel, str], workers: int = 1
) -> HistogramResult:
    """
    Build the 256-bucket histogram of one channel.

    Args:
        raster: Source raster
        channel: 'r', 'g' or 'b'
        workers: Number of threads. Each thread counts a band of rows into
            a private histogram; the partial histograms are summed.

    Returns:
        HistogramResult with counts and the largest bucket frequency
    """
    band = parse_channel(channel)
    if workers < 1 or workers > HistogramConstants.MAX_WORKERS:
        raise ParameterOutOfRange(
            f"workers must be within 1..{HistogramConstants.MAX_WORKERS}, got {workers}",
            {"workers": workers},
        )

    samples = raster.view()[..., band.offset]
    workers = min(workers, raster.height)

    if workers == 1:
        counts = _count(samples.reshape(-1))
    else:
        row_bands = np.array_split(samples, workers, axis=0)
        with ThreadPoolExecutor(max_workers=workers) as pool:
            partials = list(pool.map(lambda rows: _count(rows.reshape(-1)), row_bands))
        counts = np.sum(partials, axis=0)

    max_frequency = int(counts.max())
    logger.debug(
        f"histogram channel={band.value} {raster.width}x{raster.height} "
        f"workers={workers} max={max_frequency}"
    )
    return HistogramResult(channel=band, counts=counts, max_frequency=max_frequency)


def bin_span(length: int, bin_count: int) -> int:
    """Half-width of the averaging window."""
    return int(math.floor((length / bin_count) / 2)) + 1


def bin_window(index: int, span: int, length: int) -> Tuple[int, int]:
    """
    Inclusive bounds of the averaging window for one output bucket.

    The window is [index - span, index + span] clipped to the histogram.
    If the output bucket lies past the end of the histogram, the window
    collapses onto the last bucket.
    """
    if length <= 0:
        raise DegenerateBinWindow("Cannot bin an empty histogram", {"length": length})

    last = length - 1
    left = min(max(0, index - span), last)
    right = min(last, index + span)
    return left, right


def bin_histogram(histogram: Sequence[float], bin_count: int) -> List[float]:
    """
    Downsample a histogram to bin_count buckets by local averaging.

    Args:
        histogram: Frequencies of any length (usually 256)
        bin_count: Number of output buckets, 1..MAX_BIN_COUNT

    Returns:
        List of bin_count finite, non-negative averages
    """
    if isinstance(bin_count, bool) or not isinstance(bin_count, (int, np.integer)):
        raise ParameterOutOfRange(
            f"bin_count must be an integer, got {bin_count!r}", {"bin_count": repr(bin_count)}
        )
    if bin_count <= 0:
        raise ParameterOutOfRange(
            f"bin_count must be positive, got {bin_count}", {"bin_count": int(bin_count)}
        )
    if bin_count > HistogramConstants.MAX_BIN_COUNT:
        raise ParameterOutOfRange(
            f"bin_count must be at most {HistogramConstants.MAX_BIN_COUNT}, got {bin_count}",
            {"bin_count": int(bin_count), "max": HistogramConstants.MAX_BIN_COUNT},
        )

    values = np.asarray(histogram, dtype=np.float64).reshape(-1)
    length = values.size
    if length == 0:
        raise DegenerateBinWindow("Cannot bin an empty histogram", {"length": 0})
    if not np.all(np.isfinite(values)) or np.any(values < 0):
        raise ParameterOutOfRange("Histogram entries must be finite and non-negative")

    span = bin_span(length, bin_count)
    # prefix[k] = sum of the first k entries
    prefix = np.concatenate(([0.0], np.cumsum(values)))

    bins = []
    for i in range(bin_count):
        left, right = bin_window(i, span, length)
        bins.append(float((prefix[right + 1] - prefix[left]) / (right - left + 1)))

    logger.debug(f"binned {length} buckets into {bin_count} (span={span})")
    return bins
