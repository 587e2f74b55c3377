"""
Intensity based models: HSI, eHSI and RGI.

HSI uses the circular hue of the chromaticity plane,
``atan2(sqrt(3)/2 (g - b), (2r - g - b)/2)``, intensity ``(r + g + b) / 3``
and saturation ``1 - min / i``. Its inverse can leave the RGB gamut, so
:func:`hsi_to_rgb` takes an :class:`OutOfGamutMode`.

eHSI (extended HSI) redefines saturation above the intensity at which the
HSI solid leaves the RGB cube, so every eHSI color maps inside [0, 1].

RGI stores normalized chromaticity r = R / sum, g = G / sum and intensity
sum / 3.
"""
from __future__ import annotations
import math
from typing import Tuple
import numpy as np
from numpy import ndarray as NDArray

from ..types.color_types import OutOfGamutMode
from ..utils import broadcast_channels

Triple = Tuple[float, float, float]

SQRT3_2 = math.sqrt(3.0) / 2.0
_DEG = math.pi / 180.0


def _chromaticity_hue(r: float, g: float, b: float) -> float:
    alpha = 0.5 * (2.0 * r - g - b)
    beta = SQRT3_2 * (g - b)
    h = math.degrees(math.atan2(beta, alpha)) % 360.0
    return 0.0 if h >= 360.0 else h


def _np_chromaticity_hue(r: NDArray, g: NDArray, b: NDArray) -> NDArray:
    alpha = 0.5 * (2.0 * r - g - b)
    beta = SQRT3_2 * (g - b)
    h = np.degrees(np.arctan2(beta, alpha)) % 360.0
    return np.where(h >= 360.0, 0.0, h)


# ---------------------------------------------------------------------------
# HSI
# ---------------------------------------------------------------------------
def rgb_to_hsi(r: float, g: float, b: float) -> Triple:
    """
    Convert unit RGB to HSI.

    Returns:
        (h, s, i) with h in [0, 360), s and i in [0, 1]
    """
    if r == g == b:
        return 0.0, 0.0, float(r)
    h = _chromaticity_hue(r, g, b)
    i = (r + g + b) / 3.0
    s = 0.0 if i == 0 else 1.0 - min(r, g, b) / i
    return h, s, i


def np_rgb_to_hsi(r: NDArray, g: NDArray, b: NDArray) -> NDArray:
    """Vectorized: Convert unit RGB arrays to HSI, shape (..., 3)."""
    r, g, b = broadcast_channels(r, g, b)
    gray = (r == g) & (g == b)
    h = np.where(gray, 0.0, _np_chromaticity_hue(r, g, b))
    i = np.where(gray, r, (r + g + b) / 3.0)
    min_c = np.minimum(np.minimum(r, g), b)
    s = np.where(gray | (i == 0), 0.0, 1.0 - min_c / np.where(i == 0, 1.0, i))
    return np.stack([h, s, i], axis=-1).astype(r.dtype, copy=False)


def _hsi_components(h: float, s: float, i: float) -> Tuple[float, float, float, float]:
    hue_frac = h % 120.0
    c1 = i * (1.0 - s)
    c2 = i * (1.0 + s * math.cos(hue_frac * _DEG) / math.cos((60.0 - hue_frac) * _DEG))
    c3 = 3.0 * i - (c1 + c2)
    return hue_frac, c1, c2, c3


def _order_by_sector(h: float, c1: float, c2: float, c3: float) -> Triple:
    if h < 120.0:
        return c2, c3, c1
    if h < 240.0:
        return c1, c2, c3
    return c3, c1, c2


def _saturation_rescale(hue_frac: float, s: float, i: float, c2: float, c3: float) -> float:
    """Largest saturation at (hue, intensity) whose RGB max is 1."""
    cos_a = math.cos(hue_frac * _DEG)
    cos_b = math.cos((60.0 - hue_frac) * _DEG)
    if hue_frac < 60.0:
        if c2 > 1.0:
            return ((1.0 - i) * cos_b) / (i * cos_a)
    elif c3 > 1.0:
        return ((1.0 - i) * cos_b) / (i * (cos_b - cos_a))
    return s


def _apply_gamut(rgb: Triple, mode: OutOfGamutMode) -> Triple:
    if mode == OutOfGamutMode.CLIP:
        return tuple(min(max(c, 0.0), 1.0) for c in rgb)  # type: ignore[return-value]
    if mode == OutOfGamutMode.RESCALE:
        peak = max(rgb)
        if peak > 1.0:
            return tuple(c / peak for c in rgb)  # type: ignore[return-value]
    return rgb


def hsi_to_rgb(h: float, s: float, i: float, gamut_mode: OutOfGamutMode = OutOfGamutMode.PRESERVE) -> Triple:
    """
    Convert HSI to unit RGB.

    Args:
        h: hue in degrees
        s, i: saturation and intensity in [0, 1]
        gamut_mode: treatment of results outside [0, 1]

    Returns:
        (r, g, b); may leave [0, 1] when ``gamut_mode`` is PRESERVE
    """
    gamut_mode = OutOfGamutMode(gamut_mode)
    if s == 0:
        return float(i), float(i), float(i)
    h = h % 360.0
    hue_frac, c1, c2, c3 = _hsi_components(h, s, i)
    if gamut_mode == OutOfGamutMode.SATURATION:
        new_s = _saturation_rescale(hue_frac, s, i, c2, c3)
        if new_s != s:
            hue_frac, c1, c2, c3 = _hsi_components(h, new_s, i)
        return _order_by_sector(h, c1, c2, c3)
    return _apply_gamut(_order_by_sector(h, c1, c2, c3), gamut_mode)


def _np_order_by_sector(h: NDArray, c1: NDArray, c2: NDArray, c3: NDArray) -> NDArray:
    low = (h < 120.0)[..., None]
    mid = (h < 240.0)[..., None]
    return np.where(
        low,
        np.stack([c2, c3, c1], axis=-1),
        np.where(mid, np.stack([c1, c2, c3], axis=-1), np.stack([c3, c1, c2], axis=-1)),
    )


def _np_hsi_components(h: NDArray, s: NDArray, i: NDArray):
    hue_frac = h % 120.0
    cos_a = np.cos(np.radians(hue_frac))
    cos_b = np.cos(np.radians(60.0 - hue_frac))
    c1 = i * (1.0 - s)
    c2 = i * (1.0 + s * cos_a / cos_b)
    c3 = 3.0 * i - (c1 + c2)
    return hue_frac, cos_a, cos_b, c1, c2, c3


def np_hsi_to_rgb(
    h: NDArray,
    s: NDArray,
    i: NDArray,
    gamut_mode: OutOfGamutMode = OutOfGamutMode.PRESERVE,
) -> NDArray:
    """Vectorized: Convert HSI arrays to unit RGB, shape (..., 3)."""
    gamut_mode = OutOfGamutMode(gamut_mode)
    h, s, i = broadcast_channels(h, s, i)
    h = h % 360.0
    hue_frac, cos_a, cos_b, c1, c2, c3 = _np_hsi_components(h, s, i)

    if gamut_mode == OutOfGamutMode.SATURATION:
        safe_i = np.where(i == 0, 1.0, i)
        low_sat = ((1.0 - i) * cos_b) / (safe_i * cos_a)
        denom = cos_b - cos_a
        high_sat = ((1.0 - i) * cos_b) / (safe_i * np.where(denom == 0, 1.0, denom))
        new_s = np.where(
            hue_frac < 60.0,
            np.where(c2 > 1.0, low_sat, s),
            np.where(c3 > 1.0, high_sat, s),
        )
        _, _, _, c1, c2, c3 = _np_hsi_components(h, new_s, i)

    rgb = _np_order_by_sector(h, c1, c2, c3)
    if gamut_mode == OutOfGamutMode.CLIP:
        rgb = np.clip(rgb, 0.0, 1.0)
    elif gamut_mode == OutOfGamutMode.RESCALE:
        peak = rgb.max(axis=-1, keepdims=True)
        rgb = np.where(peak > 1.0, rgb / np.where(peak > 1.0, peak, 1.0), rgb)

    gray = np.stack([i, i, i], axis=-1)
    return np.where((s == 0)[..., None], gray, rgb).astype(h.dtype, copy=False)


# ---------------------------------------------------------------------------
# eHSI
# ---------------------------------------------------------------------------
def ehsi_intensity_limit(h: float) -> float:
    """Intensity above which plain HSI at hue ``h`` would leave the RGB cube."""
    return 2.0 / 3.0 - abs((h % 120.0) - 60.0) / 180.0


def rgb_to_ehsi(r: float, g: float, b: float) -> Triple:
    """
    Convert unit RGB to eHSI.

    Below the intensity limit of the hue this equals HSI; above it the
    saturation is measured against the distance of the brightest channel
    from 1.
    """
    if r == g == b:
        return 0.0, 0.0, float(r)
    h = _chromaticity_hue(r, g, b)
    total = r + g + b
    i = total / 3.0
    if i <= ehsi_intensity_limit(h):
        s = 0.0 if i == 0 else 1.0 - min(r, g, b) / i
    else:
        s = 1.0 - 3.0 * (1.0 - max(r, g, b)) / (3.0 - total)
    return h, s, i


def np_rgb_to_ehsi(r: NDArray, g: NDArray, b: NDArray) -> NDArray:
    """Vectorized: Convert unit RGB arrays to eHSI, shape (..., 3)."""
    r, g, b = broadcast_channels(r, g, b)
    gray = (r == g) & (g == b)
    h = np.where(gray, 0.0, _np_chromaticity_hue(r, g, b))
    total = r + g + b
    i = np.where(gray, r, total / 3.0)
    max_c = np.maximum(np.maximum(r, g), b)
    min_c = np.minimum(np.minimum(r, g), b)
    limit = 2.0 / 3.0 - np.abs((h % 120.0) - 60.0) / 180.0
    low = np.where(i == 0, 0.0, 1.0 - min_c / np.where(i == 0, 1.0, i))
    rest = 3.0 - total
    high = 1.0 - 3.0 * (1.0 - max_c) / np.where(rest == 0, 1.0, rest)
    s = np.where(gray, 0.0, np.where(i <= limit, low, high))
    return np.stack([h, s, i], axis=-1).astype(r.dtype, copy=False)


def ehsi_to_rgb(h: float, s: float, i: float) -> Triple:
    """Convert eHSI to unit RGB; the result always lies within [0, 1]."""
    if s == 0:
        return float(i), float(i), float(i)
    h = h % 360.0
    segment = int(h // 60.0) % 6
    if i < ehsi_intensity_limit(h):
        _, c1, c2, c3 = _hsi_components(h, s, i)
        return _order_by_sector(h, c1, c2, c3)

    if segment in (1, 2):
        shifted = h - 240.0
    elif segment in (3, 4):
        shifted = h
    else:
        shifted = h - 120.0
    c1 = i * (1.0 - s) + s
    c2 = 1.0 - (1.0 - i) * (1.0 + s * math.cos(shifted * _DEG) / math.cos((60.0 - shifted) * _DEG))
    c3 = 3.0 * i - (c1 + c2)
    if segment in (1, 2):
        return c3, c1, c2
    if segment in (3, 4):
        return c2, c3, c1
    return c1, c2, c3


def np_ehsi_to_rgb(h: NDArray, s: NDArray, i: NDArray) -> NDArray:
    """Vectorized: Convert eHSI arrays to unit RGB, shape (..., 3)."""
    h, s, i = broadcast_channels(h, s, i)
    h = h % 360.0
    segment = np.floor(h / 60.0).astype(np.int64) % 6

    _, _, _, c1, c2, c3 = _np_hsi_components(h, s, i)
    plain = _np_order_by_sector(h, c1, c2, c3)

    seg_12 = (segment == 1) | (segment == 2)
    seg_34 = (segment == 3) | (segment == 4)
    shifted = np.where(seg_12, h - 240.0, np.where(seg_34, h, h - 120.0))
    e1 = i * (1.0 - s) + s
    e2 = 1.0 - (1.0 - i) * (1.0 + s * np.cos(np.radians(shifted)) / np.cos(np.radians(60.0 - shifted)))
    e3 = 3.0 * i - (e1 + e2)
    extended = np.where(
        seg_12[..., None],
        np.stack([e3, e1, e2], axis=-1),
        np.where(seg_34[..., None], np.stack([e2, e3, e1], axis=-1), np.stack([e1, e2, e3], axis=-1)),
    )

    limit = 2.0 / 3.0 - np.abs((h % 120.0) - 60.0) / 180.0
    rgb = np.where((i < limit)[..., None], plain, extended)
    gray = np.stack([i, i, i], axis=-1)
    return np.where((s == 0)[..., None], gray, rgb).astype(h.dtype, copy=False)


# ---------------------------------------------------------------------------
# RGI
# ---------------------------------------------------------------------------
def rgb_to_rgi(r: float, g: float, b: float) -> Triple:
    """
    Convert unit RGB to RGI.

    Returns:
        (r / sum, g / sum, sum / 3); black maps to (0, 0, 0)
    """
    total = r + g + b
    if total == 0:
        return 0.0, 0.0, 0.0
    return r / total, g / total, total / 3.0


def np_rgb_to_rgi(r: NDArray, g: NDArray, b: NDArray) -> NDArray:
    """Vectorized: Convert unit RGB arrays to RGI."""
    r, g, b = broadcast_channels(r, g, b)
    total = r + g + b
    safe = np.where(total == 0, 1.0, total)
    return np.stack([
        np.where(total == 0, 0.0, r / safe),
        np.where(total == 0, 0.0, g / safe),
        total / 3.0,
    ], axis=-1).astype(r.dtype, copy=False)


def rgi_to_rgb(r: float, g: float, i: float) -> Triple:
    """Convert RGI to unit RGB; blue chromaticity is 1 - r - g."""
    total = 3.0 * i
    return r * total, g * total, (1.0 - r - g) * total


def np_rgi_to_rgb(r: NDArray, g: NDArray, i: NDArray) -> NDArray:
    """Vectorized: Convert RGI arrays to unit RGB."""
    r, g, i = broadcast_channels(r, g, i)
    total = 3.0 * i
    return np.stack([r * total, g * total, (1.0 - r - g) * total], axis=-1)
