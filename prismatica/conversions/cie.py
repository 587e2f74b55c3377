"""
CIE perceptual spaces: L*a*b*, L*u*v* and their cylindrical LCh forms.

Lab and Luv are defined relative to a reference white. Both share the CIE
lightness companding with the exact constants

    epsilon = 216 / 24389
    kappa   = 24389 / 27

Black maps to L = 0 with zero chroma; hue of achromatic LCh colors is 0.
"""
from __future__ import annotations
import math
from typing import Tuple
import numpy as np
from numpy import ndarray as NDArray

from ..utils import broadcast_channels
from ..white_points import WhitePointLike, get_white_point

Triple = Tuple[float, float, float]

EPSILON = 216.0 / 24389.0
KAPPA = 24389.0 / 27.0


# ---------------------------------------------------------------------------
# Companding
# ---------------------------------------------------------------------------
def cie_f(t: float) -> float:
    """Lab companding: cube root above epsilon, linear segment below."""
    if t > EPSILON:
        return t ** (1.0 / 3.0)
    return (KAPPA * t + 16.0) / 116.0


def cie_f_inv(f: float) -> float:
    f3 = f ** 3
    if f3 > EPSILON:
        return f3
    return (116.0 * f - 16.0) / KAPPA


def np_cie_f(t: NDArray) -> NDArray:
    return np.where(t > EPSILON, np.cbrt(t), (KAPPA * t + 16.0) / 116.0)


def np_cie_f_inv(f: NDArray) -> NDArray:
    f3 = f ** 3
    return np.where(f3 > EPSILON, f3, (116.0 * f - 16.0) / KAPPA)


def lightness_from_y(yr: float) -> float:
    """CIE L* of a relative luminance Y / Yw."""
    if yr > EPSILON:
        return 116.0 * yr ** (1.0 / 3.0) - 16.0
    return KAPPA * yr


def y_from_lightness(lightness: float) -> float:
    """Relative luminance Y / Yw of a CIE L*."""
    if lightness > KAPPA * EPSILON:
        return ((lightness + 16.0) / 116.0) ** 3
    return lightness / KAPPA


def np_lightness_from_y(yr: NDArray) -> NDArray:
    return np.where(yr > EPSILON, 116.0 * np.cbrt(yr) - 16.0, KAPPA * yr)


def np_y_from_lightness(lightness: NDArray) -> NDArray:
    return np.where(
        lightness > KAPPA * EPSILON,
        ((lightness + 16.0) / 116.0) ** 3,
        lightness / KAPPA,
    )


# ---------------------------------------------------------------------------
# XYZ <-> Lab
# ---------------------------------------------------------------------------
def xyz_to_lab(x: float, y: float, z: float, white_point: WhitePointLike) -> Triple:
    """
    XYZ -> CIE L*a*b* relative to ``white_point``.

    Args:
        x, y, z: tristimulus values on the white's scale (Yw = 1)
        white_point: reference white or its name

    Returns:
        (L, a, b); L is 100 at the white
    """
    xw, yw, zw = get_white_point(white_point).xyz
    fx = cie_f(x / xw)
    fy = cie_f(y / yw)
    fz = cie_f(z / zw)
    return 116.0 * fy - 16.0, 500.0 * (fx - fy), 200.0 * (fy - fz)


def lab_to_xyz(lightness: float, a: float, b: float, white_point: WhitePointLike) -> Triple:
    """CIE L*a*b* -> XYZ relative to ``white_point``."""
    xw, yw, zw = get_white_point(white_point).xyz
    fy = (lightness + 16.0) / 116.0
    fx = fy + a / 500.0
    fz = fy - b / 200.0
    return cie_f_inv(fx) * xw, y_from_lightness(lightness) * yw, cie_f_inv(fz) * zw


def np_xyz_to_lab(x: NDArray, y: NDArray, z: NDArray, white_point: WhitePointLike) -> NDArray:
    """Vectorized: XYZ arrays -> Lab, shape (..., 3)."""
    x, y, z = broadcast_channels(x, y, z)
    xw, yw, zw = get_white_point(white_point).xyz
    fx = np_cie_f(x / xw)
    fy = np_cie_f(y / yw)
    fz = np_cie_f(z / zw)
    return np.stack([116.0 * fy - 16.0, 500.0 * (fx - fy), 200.0 * (fy - fz)], axis=-1).astype(x.dtype, copy=False)


def np_lab_to_xyz(lightness: NDArray, a: NDArray, b: NDArray, white_point: WhitePointLike) -> NDArray:
    """Vectorized: Lab arrays -> XYZ, shape (..., 3)."""
    lightness, a, b = broadcast_channels(lightness, a, b)
    xw, yw, zw = get_white_point(white_point).xyz
    fy = (lightness + 16.0) / 116.0
    fx = fy + a / 500.0
    fz = fy - b / 200.0
    return np.stack([
        np_cie_f_inv(fx) * xw,
        np_y_from_lightness(lightness) * yw,
        np_cie_f_inv(fz) * zw,
    ], axis=-1).astype(lightness.dtype, copy=False)


# ---------------------------------------------------------------------------
# XYZ <-> Luv
# ---------------------------------------------------------------------------
def _uv_prime(x: float, y: float, z: float) -> Tuple[float, float]:
    denom = x + 15.0 * y + 3.0 * z
    if denom == 0:
        return 0.0, 0.0
    return 4.0 * x / denom, 9.0 * y / denom


def xyz_to_luv(x: float, y: float, z: float, white_point: WhitePointLike) -> Triple:
    """XYZ -> CIE L*u*v* relative to ``white_point``."""
    wp = get_white_point(white_point)
    if x + 15.0 * y + 3.0 * z == 0:
        return 0.0, 0.0, 0.0
    ur, vr = _uv_prime(*wp.xyz)
    u_p, v_p = _uv_prime(x, y, z)
    lightness = lightness_from_y(y / wp.xyz[1])
    return lightness, 13.0 * lightness * (u_p - ur), 13.0 * lightness * (v_p - vr)


def luv_to_xyz(lightness: float, u: float, v: float, white_point: WhitePointLike) -> Triple:
    """CIE L*u*v* -> XYZ relative to ``white_point``; L == 0 is black."""
    wp = get_white_point(white_point)
    if lightness == 0:
        return 0.0, 0.0, 0.0
    ur, vr = _uv_prime(*wp.xyz)
    u_p = u / (13.0 * lightness) + ur
    v_p = v / (13.0 * lightness) + vr
    y = y_from_lightness(lightness) * wp.xyz[1]
    if v_p == 0:
        return 0.0, y, 0.0
    x = y * 9.0 * u_p / (4.0 * v_p)
    z = y * (12.0 - 3.0 * u_p - 20.0 * v_p) / (4.0 * v_p)
    return x, y, z


def np_xyz_to_luv(x: NDArray, y: NDArray, z: NDArray, white_point: WhitePointLike) -> NDArray:
    """Vectorized: XYZ arrays -> Luv, shape (..., 3)."""
    x, y, z = broadcast_channels(x, y, z)
    wp = get_white_point(white_point)
    ur, vr = _uv_prime(*wp.xyz)
    denom = x + 15.0 * y + 3.0 * z
    black = denom == 0
    safe = np.where(black, 1.0, denom)
    u_p = 4.0 * x / safe
    v_p = 9.0 * y / safe
    lightness = np_lightness_from_y(y / wp.xyz[1])
    u = np.where(black, 0.0, 13.0 * lightness * (u_p - ur))
    v = np.where(black, 0.0, 13.0 * lightness * (v_p - vr))
    lightness = np.where(black, 0.0, lightness)
    return np.stack([lightness, u, v], axis=-1).astype(x.dtype, copy=False)


def np_luv_to_xyz(lightness: NDArray, u: NDArray, v: NDArray, white_point: WhitePointLike) -> NDArray:
    """Vectorized: Luv arrays -> XYZ, shape (..., 3)."""
    lightness, u, v = broadcast_channels(lightness, u, v)
    wp = get_white_point(white_point)
    ur, vr = _uv_prime(*wp.xyz)
    black = lightness == 0
    safe_l = np.where(black, 1.0, lightness)
    u_p = u / (13.0 * safe_l) + ur
    v_p = v / (13.0 * safe_l) + vr
    y = np.where(black, 0.0, np_y_from_lightness(lightness) * wp.xyz[1])
    degenerate = black | (v_p == 0)
    safe_v = np.where(v_p == 0, 1.0, v_p)
    x = np.where(degenerate, 0.0, y * 9.0 * u_p / (4.0 * safe_v))
    z = np.where(degenerate, 0.0, y * (12.0 - 3.0 * u_p - 20.0 * v_p) / (4.0 * safe_v))
    return np.stack([x, y, z], axis=-1).astype(lightness.dtype, copy=False)


# ---------------------------------------------------------------------------
# Lab/Luv <-> LCh
# ---------------------------------------------------------------------------
def to_lch(lightness: float, a: float, b: float) -> Triple:
    """
    Rectangular (L, a, b) or (L, u, v) -> (L, chroma, hue in degrees).

    Shared by LCh(ab) and LCh(uv); hue lies in [0, 360).
    """
    chroma = math.hypot(a, b)
    h = math.degrees(math.atan2(b, a)) % 360.0
    return float(lightness), chroma, 0.0 if h >= 360.0 else h


def from_lch(lightness: float, chroma: float, hue: float) -> Triple:
    """(L, chroma, hue) -> rectangular (L, a, b) or (L, u, v)."""
    rad = math.radians(hue)
    return float(lightness), chroma * math.cos(rad), chroma * math.sin(rad)


def np_to_lch(lightness: NDArray, a: NDArray, b: NDArray) -> NDArray:
    lightness, a, b = broadcast_channels(lightness, a, b)
    h = np.degrees(np.arctan2(b, a)) % 360.0
    h = np.where(h >= 360.0, 0.0, h)
    return np.stack([lightness, np.hypot(a, b), h], axis=-1).astype(lightness.dtype, copy=False)


def np_from_lch(lightness: NDArray, chroma: NDArray, hue: NDArray) -> NDArray:
    lightness, chroma, hue = broadcast_channels(lightness, chroma, hue)
    rad = np.radians(hue)
    return np.stack([lightness, chroma * np.cos(rad), chroma * np.sin(rad)], axis=-1)


lab_to_lchab = to_lch
lchab_to_lab = from_lch
luv_to_lchuv = to_lch
lchuv_to_luv = from_lch
np_lab_to_lchab = np_to_lch
np_lchab_to_lab = np_from_lch
np_luv_to_lchuv = np_to_lch
np_lchuv_to_luv = np_from_lch
