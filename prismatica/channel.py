"""
Numeric channel abstraction.

Channels are handled in a canonical floating representation (unit range for
device channels, degrees for hue). :class:`~prismatica.types.format_type.FormatType`
selects the concrete representation a caller stores or exchanges:
8/16-bit fixed point, float32/float64, or percentages.

All helpers accept Python scalars and numpy arrays alike. NaN is never
masked: clamping and wrapping propagate it, and quantizing it to a fixed
point format raises :class:`~prismatica.errors.DomainError`.
"""
from __future__ import annotations
import math
from typing import Union
import numpy as np
from boundednumbers import BoundType, bound_type_to_np_function, clamp
from boundednumbers.functions import cyclic_wrap_float

from .errors import DomainError
from .types.format_type import (
    FormatType,
    FIXED_POINT_FORMATS,
    HUE_360,
    default_format_dtypes,
    max_non_hue,
)

Number = Union[int, float, np.ndarray]


def _is_array(value) -> bool:
    return isinstance(value, np.ndarray)


def to_unit(value: Number, fmt: FormatType = FormatType.FLOAT) -> Number:
    """
    Convert a channel from ``fmt`` into the canonical unit range.

    Args:
        value: Channel value(s) stored in ``fmt``
        fmt: Representation of ``value``

    Returns:
        float (scalar input) or floating array; FLOAT32 stays float32
    """
    fmt = FormatType(fmt)
    maxval = max_non_hue[fmt]
    if _is_array(value):
        dtype = np.float32 if fmt == FormatType.FLOAT32 else np.float64
        return np.asarray(value, dtype=dtype) / dtype(maxval)
    return float(value) / maxval


def from_unit(value: Number, fmt: FormatType = FormatType.FLOAT) -> Number:
    """
    Convert a canonical unit-range channel into ``fmt``.

    Fixed point formats round to nearest and saturate to their range.

    Raises:
        DomainError: If a NaN would have to be quantized to fixed point
    """
    fmt = FormatType(fmt)
    maxval = max_non_hue[fmt]
    if fmt in FIXED_POINT_FORMATS:
        if _is_array(value):
            arr = np.asarray(value, dtype=np.float64)
            if np.isnan(arr).any():
                raise DomainError(f"Cannot quantize NaN to {fmt.value}")
            scaled = bound_type_to_np_function[BoundType.CLAMP](np.round(arr * maxval), 0, maxval)
            return scaled.astype(default_format_dtypes[fmt])
        if math.isnan(value):
            raise DomainError(f"Cannot quantize NaN to {fmt.value}")
        return int(clamp(round(float(value) * maxval), 0, maxval))
    if _is_array(value):
        return np.asarray(value * maxval, dtype=default_format_dtypes[fmt])
    return float(value) * maxval


def _binary(a: Number, b: Number, fmt: FormatType, op) -> Number:
    result = op(to_unit(a, fmt), to_unit(b, fmt))
    return from_unit(result, fmt)


def channel_add(a: Number, b: Number, fmt: FormatType = FormatType.FLOAT) -> Number:
    """Add two channels stored in ``fmt``; saturates for fixed point."""
    return _binary(a, b, fmt, lambda x, y: x + y)


def channel_subtract(a: Number, b: Number, fmt: FormatType = FormatType.FLOAT) -> Number:
    """Subtract ``b`` from ``a``; saturates at zero for fixed point."""
    return _binary(a, b, fmt, lambda x, y: x - y)


def channel_scale(a: Number, factor: float, fmt: FormatType = FormatType.FLOAT) -> Number:
    """Multiply a channel stored in ``fmt`` by a plain float factor."""
    return from_unit(to_unit(a, fmt) * factor, fmt)


def channel_divide(a: Number, divisor: float, fmt: FormatType = FormatType.FLOAT) -> Number:
    """Divide a channel stored in ``fmt`` by a plain float divisor."""
    if divisor == 0:
        raise ZeroDivisionError("channel_divide by zero")
    return from_unit(to_unit(a, fmt) / divisor, fmt)


def clamp_channel(value: Number, lo: float, hi: float) -> Number:
    """Clamp into ``[lo, hi]``. NaN passes through unchanged."""
    if _is_array(value):
        arr = np.asarray(value)
        clamped = bound_type_to_np_function[BoundType.CLAMP](arr, lo, hi)
        return np.where(np.isnan(arr), arr, clamped).astype(arr.dtype, copy=False)
    if math.isnan(value):
        return value
    return float(clamp(value, lo, hi))


def wrap_hue(value: Number, period: float = HUE_360) -> Number:
    """Wrap a hue cyclically into ``[0, period)``. NaN passes through."""
    if _is_array(value):
        arr = np.asarray(value)
        wrapped = np.asarray(cyclic_wrap_float(arr, 0.0, period), dtype=arr.dtype)
        # float rounding of tiny negative angles can land exactly on the period
        wrapped = np.where(wrapped >= period, wrapped - period, wrapped)
        return np.where(np.isnan(arr), arr, wrapped)
    if math.isnan(value):
        return value
    wrapped = float(cyclic_wrap_float(float(value), 0.0, period))
    return 0.0 if wrapped >= period else wrapped


def lerp(a: Number, b: Number, t: Number) -> Number:
    """Linear interpolation between ``a`` and ``b``."""
    return a + (b - a) * t


def hue_delta(h0: Number, h1: Number, direction: str = "shortest") -> Number:
    """
    Signed angular distance from ``h0`` to ``h1`` in degrees.

    Args:
        h0, h1: Hues in degrees
        direction: 'shortest', 'longest', 'cw' (increasing) or 'ccw' (decreasing)
    """
    d = (np.asarray(h1, dtype=float) - np.asarray(h0, dtype=float)) % HUE_360
    if direction == "shortest":
        d = np.where(d > 180.0, d - HUE_360, d)
    elif direction == "longest":
        d = np.where(d <= 180.0, d - HUE_360, d)
        d = np.where(d == -HUE_360, 0.0, d)
    elif direction == "cw":
        pass
    elif direction == "ccw":
        d = np.where(d > 0.0, d - HUE_360, d)
    else:
        raise ValueError(f"Invalid hue direction: {direction}")
    return d if _is_array(h0) or _is_array(h1) else float(d)


def lerp_hue(h0: Number, h1: Number, t: Number, direction: str = "shortest") -> Number:
    """Interpolate two hues along ``direction``; result wrapped into [0, 360)."""
    return wrap_hue(h0 + hue_delta(h0, h1, direction) * t)
