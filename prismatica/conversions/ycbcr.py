"""
YCbCr family: luma plus two color-difference channels.

Models are linear transforms of encoded RGB. Luma Y lies in [0, 1]; the
chroma channels of the (kr, kb) models are centered at 0 and scaled into
[-0.5, 0.5]. YIQ keeps its native ranges, I in [-0.5957, 0.5957] and
Q in [-0.5226, 0.5226].

Digital storage is handled separately by :func:`ycbcr_to_digital` and
:func:`digital_to_ycbcr`:

- full range (JPEG): ``Y' = Y (2^n - 1)``, ``C' = C (2^n - 1) + 2^(n-1)``
- studio range (BT.601/709 video): ``Y' = (16 + 219 Y) 2^(n-8)``,
  ``C' = (128 + 224 C) 2^(n-8)``
"""
from __future__ import annotations
from typing import Tuple
import numpy as np
from numpy import ndarray as NDArray

from ..errors import DomainError
from ..linalg import apply_matrix, np_apply_matrix
from ..types.color_types import OutOfGamutMode
from ..utils import broadcast_channels
from ..ycbcr_models import YCbCrModelLike, get_ycbcr_model

Triple = Tuple[float, float, float]


def rgb_to_ycbcr(r: float, g: float, b: float, model: YCbCrModelLike) -> Triple:
    """
    Convert encoded unit RGB to YCbCr.

    Args:
        r, g, b: RGB channels in [0, 1]
        model: YCbCr model or its name

    Returns:
        (y, cb, cr)
    """
    return apply_matrix(get_ycbcr_model(model).forward, (r, g, b))


def np_rgb_to_ycbcr(r: NDArray, g: NDArray, b: NDArray, model: YCbCrModelLike) -> NDArray:
    """Vectorized: Convert unit RGB arrays to YCbCr."""
    r, g, b = broadcast_channels(r, g, b)
    return np_apply_matrix(get_ycbcr_model(model).forward, r, g, b)


def ycbcr_to_rgb(
    y: float,
    cb: float,
    cr: float,
    model: YCbCrModelLike,
    gamut_mode: OutOfGamutMode = OutOfGamutMode.PRESERVE,
) -> Triple:
    """
    Convert YCbCr to encoded unit RGB.

    Args:
        gamut_mode: PRESERVE leaves out-of-range RGB as is, CLIP clamps it

    Raises:
        ValueError: For gamut modes other than PRESERVE and CLIP
    """
    gamut_mode = _check_gamut_mode(gamut_mode)
    rgb = apply_matrix(get_ycbcr_model(model).inverse, (y, cb, cr))
    if gamut_mode == OutOfGamutMode.CLIP:
        return tuple(min(max(c, 0.0), 1.0) for c in rgb)  # type: ignore[return-value]
    return rgb


def np_ycbcr_to_rgb(
    y: NDArray,
    cb: NDArray,
    cr: NDArray,
    model: YCbCrModelLike,
    gamut_mode: OutOfGamutMode = OutOfGamutMode.PRESERVE,
) -> NDArray:
    """Vectorized: Convert YCbCr arrays to unit RGB."""
    gamut_mode = _check_gamut_mode(gamut_mode)
    y, cb, cr = broadcast_channels(y, cb, cr)
    rgb = np_apply_matrix(get_ycbcr_model(model).inverse, y, cb, cr)
    if gamut_mode == OutOfGamutMode.CLIP:
        rgb = np.clip(rgb, 0.0, 1.0)
    return rgb


def _check_gamut_mode(gamut_mode) -> OutOfGamutMode:
    gamut_mode = OutOfGamutMode(gamut_mode)
    if gamut_mode not in (OutOfGamutMode.PRESERVE, OutOfGamutMode.CLIP):
        raise ValueError(f"YCbCr supports only preserve/clip gamut modes, got {gamut_mode.value}")
    return gamut_mode


# ---------------------------------------------------------------------------
# Digital (integer) storage
# ---------------------------------------------------------------------------
def _digital_params(bits: int, full_range: bool) -> Tuple[float, float, float, float]:
    """(luma offset, luma scale, chroma offset, chroma scale) for ``bits``."""
    if bits < 8:
        raise ValueError(f"YCbCr quantization needs at least 8 bits, got {bits}")
    if full_range:
        top = float(2 ** bits - 1)
        return 0.0, top, float(2 ** (bits - 1)), top
    step = float(2 ** (bits - 8))
    return 16.0 * step, 219.0 * step, 128.0 * step, 224.0 * step


def ycbcr_to_digital(y, cb, cr, bits: int = 8, full_range: bool = True):
    """
    Quantize analog YCbCr (y in [0, 1], chroma in [-0.5, 0.5]) to integers.

    Scalars give a tuple of ints; arrays give an integer array (..., 3).
    Values are rounded and saturated to [0, 2^bits - 1].
    """
    y_off, y_scale, c_off, c_scale = _digital_params(bits, full_range)
    top = 2 ** bits - 1
    dtype = np.uint8 if bits == 8 else np.uint16 if bits <= 16 else np.uint32
    if any(isinstance(c, np.ndarray) for c in (y, cb, cr)):
        y, cb, cr = broadcast_channels(y, cb, cr)
        stacked = np.stack([y * y_scale + y_off, cb * c_scale + c_off, cr * c_scale + c_off], axis=-1)
        if np.isnan(stacked).any():
            raise DomainError("Cannot quantize NaN YCbCr values")
        return np.clip(np.round(stacked), 0, top).astype(dtype)
    values = (y * y_scale + y_off, cb * c_scale + c_off, cr * c_scale + c_off)
    if any(v != v for v in values):
        raise DomainError("Cannot quantize NaN YCbCr values")
    return tuple(int(min(max(round(v), 0), top)) for v in values)


def digital_to_ycbcr(y, cb, cr, bits: int = 8, full_range: bool = True):
    """Inverse of :func:`ycbcr_to_digital` (up to quantization error)."""
    y_off, y_scale, c_off, c_scale = _digital_params(bits, full_range)
    if any(isinstance(c, np.ndarray) for c in (y, cb, cr)):
        y, cb, cr = broadcast_channels(y, cb, cr)
        return np.stack([(y - y_off) / y_scale, (cb - c_off) / c_scale, (cr - c_off) / c_scale], axis=-1)
    return (y - y_off) / y_scale, (cb - c_off) / c_scale, (cr - c_off) / c_scale
