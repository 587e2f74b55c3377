"""
Linear tristimulus transforms: RGB <-> XYZ, XYZ <-> xyY and XYZ <-> LMS.

``rgb_to_xyz`` / ``xyz_to_rgb`` are pure matrix products on linear-light
RGB; use :func:`decode_rgb` / :func:`encode_rgb` to move between encoded
and linear RGB with the working space's transfer function.
"""
from __future__ import annotations
from typing import Tuple
import numpy as np
from numpy import ndarray as NDArray

from ..adaptation import get_lms_inverse, get_lms_matrix
from ..linalg import apply_matrix, np_apply_matrix
from ..utils import broadcast_channels
from ..working_spaces import WorkingSpaceLike, get_working_space

Triple = Tuple[float, float, float]


# ---------------------------------------------------------------------------
# Transfer functions of a working space
# ---------------------------------------------------------------------------
def decode_rgb(r: float, g: float, b: float, working_space: WorkingSpaceLike) -> Triple:
    """Encoded RGB -> linear-light RGB."""
    transfer = get_working_space(working_space).transfer
    return transfer.decode(r), transfer.decode(g), transfer.decode(b)


def encode_rgb(r: float, g: float, b: float, working_space: WorkingSpaceLike) -> Triple:
    """Linear-light RGB -> encoded RGB."""
    transfer = get_working_space(working_space).transfer
    return transfer.encode(r), transfer.encode(g), transfer.encode(b)


def np_decode_rgb(r: NDArray, g: NDArray, b: NDArray, working_space: WorkingSpaceLike) -> NDArray:
    r, g, b = broadcast_channels(r, g, b)
    transfer = get_working_space(working_space).transfer
    return np.stack([transfer.np_decode(r), transfer.np_decode(g), transfer.np_decode(b)], axis=-1)


def np_encode_rgb(r: NDArray, g: NDArray, b: NDArray, working_space: WorkingSpaceLike) -> NDArray:
    r, g, b = broadcast_channels(r, g, b)
    transfer = get_working_space(working_space).transfer
    return np.stack([transfer.np_encode(r), transfer.np_encode(g), transfer.np_encode(b)], axis=-1)


# ---------------------------------------------------------------------------
# RGB <-> XYZ
# ---------------------------------------------------------------------------
def rgb_to_xyz(r: float, g: float, b: float, working_space: WorkingSpaceLike) -> Triple:
    """
    Linear-light RGB -> XYZ relative to the working space's white.

    Exactly the matrix-vector product; nothing is clamped.
    """
    return apply_matrix(get_working_space(working_space).to_xyz, (r, g, b))


def xyz_to_rgb(x: float, y: float, z: float, working_space: WorkingSpaceLike) -> Triple:
    """XYZ -> linear-light RGB; results outside [0, 1] are kept."""
    return apply_matrix(get_working_space(working_space).from_xyz, (x, y, z))


def np_rgb_to_xyz(r: NDArray, g: NDArray, b: NDArray, working_space: WorkingSpaceLike) -> NDArray:
    """Vectorized: linear RGB arrays -> XYZ, shape (..., 3)."""
    r, g, b = broadcast_channels(r, g, b)
    return np_apply_matrix(get_working_space(working_space).to_xyz, r, g, b)


def np_xyz_to_rgb(x: NDArray, y: NDArray, z: NDArray, working_space: WorkingSpaceLike) -> NDArray:
    """Vectorized: XYZ arrays -> linear RGB, shape (..., 3)."""
    x, y, z = broadcast_channels(x, y, z)
    return np_apply_matrix(get_working_space(working_space).from_xyz, x, y, z)


# ---------------------------------------------------------------------------
# XYZ <-> xyY
# ---------------------------------------------------------------------------
def xyz_to_xyy(x: float, y: float, z: float) -> Triple:
    """
    XYZ -> xyY chromaticity plus luminance.

    Black (X + Y + Z == 0) maps to (0, 0, 0).
    """
    total = x + y + z
    if total == 0:
        return 0.0, 0.0, 0.0
    return x / total, y / total, float(y)


def xyy_to_xyz(x: float, y: float, luminance: float) -> Triple:
    """xyY -> XYZ; a zero y chromaticity yields black."""
    if y == 0:
        return 0.0, 0.0, 0.0
    scale = luminance / y
    return x * scale, float(luminance), (1.0 - x - y) * scale


def np_xyz_to_xyy(x: NDArray, y: NDArray, z: NDArray) -> NDArray:
    x, y, z = broadcast_channels(x, y, z)
    total = x + y + z
    safe = np.where(total == 0, 1.0, total)
    return np.stack([
        np.where(total == 0, 0.0, x / safe),
        np.where(total == 0, 0.0, y / safe),
        np.where(total == 0, 0.0, y),
    ], axis=-1).astype(x.dtype, copy=False)


def np_xyy_to_xyz(x: NDArray, y: NDArray, luminance: NDArray) -> NDArray:
    x, y, luminance = broadcast_channels(x, y, luminance)
    zero = y == 0
    scale = np.where(zero, 0.0, luminance / np.where(zero, 1.0, y))
    return np.stack([
        x * scale,
        np.where(zero, 0.0, luminance),
        (1.0 - x - y) * scale,
    ], axis=-1).astype(x.dtype, copy=False)


# ---------------------------------------------------------------------------
# XYZ <-> LMS
# ---------------------------------------------------------------------------
def xyz_to_lms(x: float, y: float, z: float, model: str) -> Triple:
    """XYZ -> cone response with the named LMS model matrix."""
    return apply_matrix(get_lms_matrix(model), (x, y, z))


def lms_to_xyz(l: float, m: float, s: float, model: str) -> Triple:
    """Cone response -> XYZ with the inverse of the named model matrix."""
    return apply_matrix(get_lms_inverse(model), (l, m, s))


def np_xyz_to_lms(x: NDArray, y: NDArray, z: NDArray, model: str) -> NDArray:
    x, y, z = broadcast_channels(x, y, z)
    return np_apply_matrix(get_lms_matrix(model), x, y, z)


def np_lms_to_xyz(l: NDArray, m: NDArray, s: NDArray, model: str) -> NDArray:
    l, m, s = broadcast_channels(l, m, s)
    return np_apply_matrix(get_lms_inverse(model), l, m, s)
