"""
Hexcone models: HSV, HSL and HWB.

All functions operate on unit-range RGB and return hue in degrees in
[0, 360). Achromatic colors (max == min) get hue 0 and saturation 0, and
convert back to exactly the RGB they came from.
"""
from __future__ import annotations
import math
from typing import Tuple
import numpy as np
from numpy import ndarray as NDArray

from ..utils import broadcast_channels

Triple = Tuple[float, float, float]


# ---------------------------------------------------------------------------
# Shared hexcone helpers
# ---------------------------------------------------------------------------
def hexcone_hue(r: float, g: float, b: float, max_c: float, delta: float) -> float:
    """Six-sector hue of an RGB triple, in degrees."""
    if delta == 0:
        return 0.0
    if max_c == r:
        h = 60.0 * (((g - b) / delta) % 6.0)
    elif max_c == g:
        h = 60.0 * ((b - r) / delta + 2.0)
    else:
        h = 60.0 * ((r - g) / delta + 4.0)
    return 0.0 if h >= 360.0 else h


def np_hexcone_hue(r: NDArray, g: NDArray, b: NDArray, max_c: NDArray, delta: NDArray) -> NDArray:
    """Vectorized: Six-sector hue; zero where ``delta`` is zero."""
    safe = np.where(delta == 0, 1.0, delta)
    h = np.where(
        max_c == r,
        ((g - b) / safe) % 6.0,
        np.where(max_c == g, (b - r) / safe + 2.0, (r - g) / safe + 4.0),
    ) * 60.0
    h = np.where(delta == 0, 0.0, h)
    return np.where(h >= 360.0, 0.0, h).astype(r.dtype, copy=False)


def hue_to_rgb_unit(h: float) -> Triple:
    """
    Fully saturated RGB of a hue on the hexcone, each channel in [0, 1].

    Evaluated piecewise so that the primaries and secondaries are exact.
    """
    if math.isnan(h):
        return h, h, h
    hp = (h % 360.0) / 60.0
    sector = int(hp) % 6
    f = hp - math.floor(hp)
    if sector == 0:
        return 1.0, f, 0.0
    if sector == 1:
        return 1.0 - f, 1.0, 0.0
    if sector == 2:
        return 0.0, 1.0, f
    if sector == 3:
        return 0.0, 1.0 - f, 1.0
    if sector == 4:
        return f, 0.0, 1.0
    return 1.0, 0.0, 1.0 - f


def np_hue_to_rgb_unit(h: NDArray) -> Tuple[NDArray, NDArray, NDArray]:
    """Vectorized: Fully saturated RGB of hue arrays."""
    hp = (h % 360.0) / 60.0
    fl = np.floor(hp)
    sector = fl.astype(np.int64) % 6
    f = hp - fl
    one = np.ones_like(f)
    zero = np.zeros_like(f)
    r = np.choose(sector, [one, 1.0 - f, zero, zero, f, one])
    g = np.choose(sector, [f, one, one, 1.0 - f, zero, zero])
    b = np.choose(sector, [zero, zero, f, one, one, 1.0 - f])
    return r, g, b


# ---------------------------------------------------------------------------
# RGB <-> HSV
# ---------------------------------------------------------------------------
def rgb_to_hsv(r: float, g: float, b: float) -> Triple:
    """
    Convert unit RGB to HSV.

    Args:
        r, g, b: RGB channels in [0, 1]

    Returns:
        (h, s, v) with h in [0, 360), s and v in [0, 1]
    """
    max_c = max(r, g, b)
    min_c = min(r, g, b)
    delta = max_c - min_c
    h = hexcone_hue(r, g, b, max_c, delta)
    s = 0.0 if max_c == 0 else delta / max_c
    return h, s, float(max_c)


def np_rgb_to_hsv(r: NDArray, g: NDArray, b: NDArray) -> NDArray:
    """Vectorized: Convert unit RGB arrays to HSV, shape (..., 3)."""
    r, g, b = broadcast_channels(r, g, b)
    max_c = np.maximum(np.maximum(r, g), b)
    min_c = np.minimum(np.minimum(r, g), b)
    delta = max_c - min_c
    h = np_hexcone_hue(r, g, b, max_c, delta)
    s = np.where(max_c == 0, 0.0, delta / np.where(max_c == 0, 1.0, max_c)).astype(r.dtype, copy=False)
    return np.stack([h, s, max_c], axis=-1)


def hsv_to_rgb(h: float, s: float, v: float) -> Triple:
    """Convert HSV (h in degrees, s and v in [0, 1]) to unit RGB."""
    if s == 0:
        return float(v), float(v), float(v)
    hr, hg, hb = hue_to_rgb_unit(h)
    min_c = v * (1.0 - s)
    chroma = v - min_c
    return min_c + hr * chroma, min_c + hg * chroma, min_c + hb * chroma


def np_hsv_to_rgb(h: NDArray, s: NDArray, v: NDArray) -> NDArray:
    """Vectorized: Convert HSV arrays to unit RGB, shape (..., 3)."""
    h, s, v = broadcast_channels(h, s, v)
    hr, hg, hb = np_hue_to_rgb_unit(h)
    min_c = v * (1.0 - s)
    chroma = v - min_c
    rgb = np.stack([min_c + hr * chroma, min_c + hg * chroma, min_c + hb * chroma], axis=-1)
    gray = np.stack([v, v, v], axis=-1)
    return np.where((s == 0)[..., None], gray, rgb).astype(h.dtype, copy=False)


# ---------------------------------------------------------------------------
# RGB <-> HSL
# ---------------------------------------------------------------------------
def rgb_to_hsl(r: float, g: float, b: float) -> Triple:
    """
    Convert unit RGB to HSL.

    Returns:
        (h, s, l) with h in [0, 360), s and l in [0, 1]
    """
    max_c = max(r, g, b)
    min_c = min(r, g, b)
    delta = max_c - min_c
    h = hexcone_hue(r, g, b, max_c, delta)
    if delta == 0:
        return h, 0.0, float(max_c)
    l = (max_c + min_c) / 2.0
    denom = 1.0 - abs(2.0 * l - 1.0)
    s = 0.0 if denom == 0 else delta / denom
    return h, s, l


def np_rgb_to_hsl(r: NDArray, g: NDArray, b: NDArray) -> NDArray:
    """Vectorized: Convert unit RGB arrays to HSL, shape (..., 3)."""
    r, g, b = broadcast_channels(r, g, b)
    max_c = np.maximum(np.maximum(r, g), b)
    min_c = np.minimum(np.minimum(r, g), b)
    delta = max_c - min_c
    h = np_hexcone_hue(r, g, b, max_c, delta)
    l = np.where(delta == 0, max_c, (max_c + min_c) / 2.0)
    denom = 1.0 - np.abs(2.0 * l - 1.0)
    s = np.where((delta == 0) | (denom == 0), 0.0, delta / np.where(denom == 0, 1.0, denom))
    return np.stack([h, s, l], axis=-1).astype(r.dtype, copy=False)


def hsl_to_rgb(h: float, s: float, l: float) -> Triple:
    """Convert HSL (h in degrees, s and l in [0, 1]) to unit RGB."""
    if s == 0:
        return float(l), float(l), float(l)
    chroma = (1.0 - abs(2.0 * l - 1.0)) * s
    min_c = l - chroma / 2.0
    hr, hg, hb = hue_to_rgb_unit(h)
    return min_c + hr * chroma, min_c + hg * chroma, min_c + hb * chroma


def np_hsl_to_rgb(h: NDArray, s: NDArray, l: NDArray) -> NDArray:
    """Vectorized: Convert HSL arrays to unit RGB, shape (..., 3)."""
    h, s, l = broadcast_channels(h, s, l)
    chroma = (1.0 - np.abs(2.0 * l - 1.0)) * s
    min_c = l - chroma / 2.0
    hr, hg, hb = np_hue_to_rgb_unit(h)
    rgb = np.stack([min_c + hr * chroma, min_c + hg * chroma, min_c + hb * chroma], axis=-1)
    gray = np.stack([l, l, l], axis=-1)
    return np.where((s == 0)[..., None], gray, rgb).astype(h.dtype, copy=False)


# ---------------------------------------------------------------------------
# HSV <-> HSL
# ---------------------------------------------------------------------------
def hsv_to_hsl(h: float, s: float, v: float) -> Triple:
    """Convert HSV to HSL without going through RGB."""
    l = v * (1.0 - s / 2.0)
    if l == 0 or l == 1:
        return h, 0.0, l
    return h, (v - l) / min(l, 1.0 - l), l


def np_hsv_to_hsl(h: NDArray, s: NDArray, v: NDArray) -> NDArray:
    """Vectorized: Convert HSV arrays to HSL."""
    h, s, v = broadcast_channels(h, s, v)
    l = v * (1.0 - s / 2.0)
    denom = np.minimum(l, 1.0 - l)
    s_l = np.where(denom == 0, 0.0, (v - l) / np.where(denom == 0, 1.0, denom))
    return np.stack([h, s_l, l], axis=-1).astype(h.dtype, copy=False)


def hsl_to_hsv(h: float, s: float, l: float) -> Triple:
    """Convert HSL to HSV without going through RGB."""
    v = l + s * min(l, 1.0 - l)
    if v == 0:
        return h, 0.0, 0.0
    return h, 2.0 * (1.0 - l / v), v


def np_hsl_to_hsv(h: NDArray, s: NDArray, l: NDArray) -> NDArray:
    """Vectorized: Convert HSL arrays to HSV."""
    h, s, l = broadcast_channels(h, s, l)
    v = l + s * np.minimum(l, 1.0 - l)
    s_v = np.where(v == 0, 0.0, 2.0 * (1.0 - l / np.where(v == 0, 1.0, v)))
    return np.stack([h, s_v, v], axis=-1).astype(h.dtype, copy=False)


# ---------------------------------------------------------------------------
# HWB
# ---------------------------------------------------------------------------
def rescale_wb(w: float, b: float) -> Tuple[float, float]:
    """Scale whiteness and blackness down proportionally when they sum past 1."""
    total = w + b
    if total > 1.0:
        return w / total, b / total
    return w, b


def rgb_to_hwb(r: float, g: float, b: float) -> Triple:
    """
    Convert unit RGB to HWB.

    Returns:
        (h, w, b) where w is the minimum channel and b is 1 - maximum channel
    """
    max_c = max(r, g, b)
    min_c = min(r, g, b)
    h = hexcone_hue(r, g, b, max_c, max_c - min_c)
    return h, float(min_c), 1.0 - max_c


def np_rgb_to_hwb(r: NDArray, g: NDArray, b: NDArray) -> NDArray:
    """Vectorized: Convert unit RGB arrays to HWB."""
    r, g, b = broadcast_channels(r, g, b)
    max_c = np.maximum(np.maximum(r, g), b)
    min_c = np.minimum(np.minimum(r, g), b)
    h = np_hexcone_hue(r, g, b, max_c, max_c - min_c)
    return np.stack([h, min_c, 1.0 - max_c], axis=-1)


def hwb_to_rgb(h: float, w: float, b: float) -> Triple:
    """Convert HWB to unit RGB. Whiteness + blackness above 1 is rescaled first."""
    w, b = rescale_wb(w, b)
    max_c = 1.0 - b
    chroma = max_c - w
    hr, hg, hb = hue_to_rgb_unit(h)
    return w + hr * chroma, w + hg * chroma, w + hb * chroma


def np_hwb_to_rgb(h: NDArray, w: NDArray, b: NDArray) -> NDArray:
    """Vectorized: Convert HWB arrays to unit RGB."""
    h, w, b = broadcast_channels(h, w, b)
    total = w + b
    over = total > 1.0
    scale = np.where(over, total, 1.0)
    w = w / scale
    b = b / scale
    chroma = (1.0 - b) - w
    hr, hg, hb = np_hue_to_rgb_unit(h)
    return np.stack([w + hr * chroma, w + hg * chroma, w + hb * chroma], axis=-1).astype(h.dtype, copy=False)


def hsv_to_hwb(h: float, s: float, v: float) -> Triple:
    """Convert HSV to HWB: w = (1 - s) v, b = 1 - v."""
    return h, (1.0 - s) * v, 1.0 - v


def np_hsv_to_hwb(h: NDArray, s: NDArray, v: NDArray) -> NDArray:
    h, s, v = broadcast_channels(h, s, v)
    return np.stack([h, (1.0 - s) * v, 1.0 - v], axis=-1)


def hwb_to_hsv(h: float, w: float, b: float) -> Triple:
    """Convert HWB to HSV: v = 1 - b, s = 1 - w / v."""
    w, b = rescale_wb(w, b)
    v = 1.0 - b
    if v == 0:
        return h, 0.0, 0.0
    return h, 1.0 - w / v, v


def np_hwb_to_hsv(h: NDArray, w: NDArray, b: NDArray) -> NDArray:
    h, w, b = broadcast_channels(h, w, b)
    total = w + b
    scale = np.where(total > 1.0, total, 1.0)
    w = w / scale
    v = 1.0 - b / scale
    s = np.where(v == 0, 0.0, 1.0 - w / np.where(v == 0, 1.0, v))
    return np.stack([h, s, v], axis=-1).astype(h.dtype, copy=False)
