"""
Per-pixel point transforms.

Every transform reads a source raster, computes the full result, and
writes it into an explicit target raster of the same dimensions (pass the
source itself as target to edit in place). Parameters are validated
before any pixel is touched, so a failing call leaves both rasters as
they were. Alpha is always carried over unchanged.
"""

import logging
import math
from typing import Any, Callable, Dict, Mapping, Optional, Sequence, Tuple, Union

import numpy as np

from core.color_space import hsv_to_rgb_array, rgb_to_hsv_array
from core.constants import RasterConstants, TransformConstants
from core.enums import TransformOperation
from core.exceptions import InvalidDimensions, ParameterOutOfRange
from core.raster import RasterBuffer

logger = logging.getLogger(__name__)

_MAX = float(RasterConstants.SAMPLE_MAX)


def _check_target(raster: RasterBuffer, target: RasterBuffer) -> None:
    if not isinstance(target, RasterBuffer):
        raise InvalidDimensions("Target must be a RasterBuffer", {"target": repr(target)})
    if not raster.same_shape(target):
        raise InvalidDimensions(
            f"Target is {target.width}x{target.height}, "
            f"source is {raster.width}x{raster.height}",
            {"source": list(raster.shape), "target": list(target.shape)},
        )


def _require_number(name: str, value: Any) -> float:
    try:
        number = float(value)
    except (TypeError, ValueError):
        raise ParameterOutOfRange(f"{name} must be a number, got {value!r}", {name: repr(value)})
    if not math.isfinite(number):
        raise ParameterOutOfRange(f"{name} must be finite, got {value!r}", {name: repr(value)})
    return number


def _to_bytes(values: np.ndarray) -> np.ndarray:
    """Round half up and clamp float samples to uint8."""
    return np.clip(np.floor(values + 0.5), 0, RasterConstants.SAMPLE_MAX).astype(np.uint8)


def _rgb(raster: RasterBuffer) -> np.ndarray:
    return raster.view()[..., :3].astype(np.float64)


def _write(raster: RasterBuffer, target: RasterBuffer, rgb: np.ndarray) -> RasterBuffer:
    out = target.view()
    out[..., :3] = rgb
    if target is not raster:
        out[..., 3] = raster.view()[..., 3]
    return target


def invert(raster: RasterBuffer, target: RasterBuffer) -> RasterBuffer:
    """Replace each of R, G, B with 255 - value."""
    _check_target(raster, target)
    rgb = RasterConstants.SAMPLE_MAX - raster.view()[..., :3]
    logger.debug(f"invert {raster.width}x{raster.height}")
    return _write(raster, target, rgb)


def threshold(raster: RasterBuffer, target: RasterBuffer, t: float) -> RasterBuffer:
    """
    Binarize the raster.

    A pixel whose brightest channel reaches t becomes white, every other
    pixel becomes black. Alpha is kept.
    """
    _check_target(raster, target)
    t = _require_number("threshold", t)
    if not TransformConstants.THRESHOLD_MIN <= t <= TransformConstants.THRESHOLD_MAX:
        raise ParameterOutOfRange(f"threshold must be within 0..255, got {t}", {"threshold": t})

    brightest = raster.view()[..., :3].max(axis=-1)
    level = np.where(brightest >= t, RasterConstants.SAMPLE_MAX, 0).astype(np.uint8)
    rgb = np.repeat(level[..., np.newaxis], 3, axis=-1)

    logger.debug(f"threshold {raster.width}x{raster.height} at {t}")
    return _write(raster, target, rgb)


def hue(raster: RasterBuffer, target: RasterBuffer, h: float) -> RasterBuffer:
    """Rotate hue by h degrees (any sign, wraps modulo 360)."""
    _check_target(raster, target)
    h = _require_number("hue", h)

    hsv = rgb_to_hsv_array(raster.view()[..., :3])
    hsv[..., 0] = np.mod(hsv[..., 0] + h, RasterConstants.HUE_DEGREES)

    logger.debug(f"hue {raster.width}x{raster.height} by {h}")
    return _write(raster, target, hsv_to_rgb_array(hsv))


def saturation(raster: RasterBuffer, target: RasterBuffer, s: float) -> RasterBuffer:
    """Shift saturation by s on the 0-255 scale, clamped to 0..255."""
    _check_target(raster, target)
    s = _require_number("saturation", s)

    hsv = rgb_to_hsv_array(raster.view()[..., :3])
    hsv[..., 1] = np.clip(hsv[..., 1] + s, 0, _MAX)

    logger.debug(f"saturation {raster.width}x{raster.height} by {s}")
    return _write(raster, target, hsv_to_rgb_array(hsv))


def value(raster: RasterBuffer, target: RasterBuffer, v: float) -> RasterBuffer:
    """
    Adjust brightness while keeping channel ratios.

    The dominant channel (or every channel tied for the maximum) is shifted
    by v and clamped. The remaining channels are scaled by the same factor
    as the dominant one, so their ratios to it are preserved. When the
    dominant channel was 0 the factor is defined as 0 and dependent channels
    stay at 0.
    """
    _check_target(raster, target)
    v = _require_number("value", v)

    rgb = _rgb(raster)
    peak = rgb.max(axis=-1, keepdims=True)
    dominant = rgb == peak

    new_peak = np.clip(peak + v, 0, _MAX)
    factor = np.divide(new_peak, peak, out=np.zeros_like(peak), where=peak > 0)
    adjusted = np.where(dominant, new_peak, rgb * factor)

    logger.debug(f"value {raster.width}x{raster.height} by {v}")
    return _write(raster, target, _to_bytes(adjusted))


def contrast(raster: RasterBuffer, target: RasterBuffer, c: float) -> RasterBuffer:
    """Scale R, G, B by a positive factor c, rounded and clamped."""
    _check_target(raster, target)
    c = _require_number("contrast", c)
    if c <= 0:
        raise ParameterOutOfRange(f"contrast must be positive, got {c}", {"contrast": c})

    logger.debug(f"contrast {raster.width}x{raster.height} by {c}")
    return _write(raster, target, _to_bytes(_rgb(raster) * c))


def normalize_factor(factor: float) -> float:
    """
    Turn a multiply factor into a 0-1 fraction.

    The factor is first clamped to 0..255. Values above 1 are read as
    bytes and divided by 255; values in 0..1 are already fractions.
    """
    factor = min(max(factor, 0.0), _MAX)
    if factor > TransformConstants.FRACTION_MAX:
        return factor / _MAX
    return factor


def multiply(
    raster: RasterBuffer, target: RasterBuffer, mr: float, mg: float, mb: float
) -> RasterBuffer:
    """Multiply each of R, G, B by the matching normalized factor."""
    _check_target(raster, target)
    fractions = np.array(
        [
            normalize_factor(_require_number("red", mr)),
            normalize_factor(_require_number("green", mg)),
            normalize_factor(_require_number("blue", mb)),
        ]
    )

    logger.debug(f"multiply {raster.width}x{raster.height} by {fractions.tolist()}")
    return _write(raster, target, _to_bytes(_rgb(raster) * fractions))


# operation -> (function, ordered parameter names)
_OPERATIONS: Dict[TransformOperation, Tuple[Callable[..., RasterBuffer], Sequence[str]]] = {
    TransformOperation.INVERT: (invert, ()),
    TransformOperation.THRESHOLD: (threshold, ("threshold",)),
    TransformOperation.HUE: (hue, ("degrees",)),
    TransformOperation.SATURATION: (saturation, ("amount",)),
    TransformOperation.VALUE: (value, ("amount",)),
    TransformOperation.CONTRAST: (contrast, ("factor",)),
    TransformOperation.MULTIPLY: (multiply, ("red", "green", "blue")),
}


def parse_operation(operation: Union[TransformOperation, str]) -> TransformOperation:
    """Resolve an operation name (case-insensitive) to its enum."""
    if isinstance(operation, TransformOperation):
        return operation
    try:
        return TransformOperation(str(operation).lower())
    except ValueError:
        raise ParameterOutOfRange(
            f"Unknown transform operation: {operation}",
            {"operation": operation, "available": [op.value for op in TransformOperation]},
        )


def operation_parameters(operation: Union[TransformOperation, str]) -> Sequence[str]:
    """Names of the parameters an operation expects."""
    return _OPERATIONS[parse_operation(operation)][1]


def apply_transform(
    raster: RasterBuffer,
    target: RasterBuffer,
    operation: Union[TransformOperation, str],
    params: Optional[Mapping[str, Any]] = None,
) -> RasterBuffer:
    """
    Run a transform selected by name.

    Args:
        raster: Source raster
        target: Output raster (may be the source)
        operation: Operation enum or name
        params: Operation parameters by name, see operation_parameters()

    Returns:
        The target raster
    """
    op = parse_operation(operation)
    func, names = _OPERATIONS[op]
    params = params or {}

    missing = [name for name in names if name not in params]
    if missing:
        raise ParameterOutOfRange(
            f"Missing parameters for {op.value}: {', '.join(missing)}",
            {"operation": op.value, "missing": missing},
        )

    return func(raster, target, *(params[name] for name in names))
