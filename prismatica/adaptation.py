"""
Chromatic adaptation and cone-response (LMS) matrices.

Adaptation follows the von Kries scheme: XYZ is taken into a cone space,
each cone response is scaled by the ratio of the destination and source
whites, and the result is taken back to XYZ.
"""
from __future__ import annotations
from functools import lru_cache
from typing import Dict, Tuple
import numpy as np

from .linalg import Matrix3, apply_matrix, as_matrix, compose, invert3, np_apply_matrix
from .utils import broadcast_channels
from .white_points import WhitePoint, WhitePointLike, get_white_point

LMS_MATRICES: Dict[str, Matrix3] = {
    "bradford": as_matrix([
        [0.8951, 0.2664, -0.1614],
        [-0.7502, 1.7135, 0.0367],
        [0.0389, -0.0685, 1.0296],
    ]),
    # Hunt-Pointer-Estevez, normalized to D65
    "von_kries": as_matrix([
        [0.40024, 0.70760, -0.08081],
        [-0.22630, 1.16532, 0.04570],
        [0.0, 0.0, 0.91822],
    ]),
    # Hunt-Pointer-Estevez, normalized to the equal-energy illuminant
    "hpe": as_matrix([
        [0.38971, 0.68898, -0.07868],
        [-0.22981, 1.18340, 0.04641],
        [0.0, 0.0, 1.0],
    ]),
    "cat02": as_matrix([
        [0.7328, 0.4296, -0.1624],
        [-0.7036, 1.6975, 0.0061],
        [0.0030, 0.0136, 0.9834],
    ]),
    "cat97s": as_matrix([
        [0.8562, 0.3372, -0.1934],
        [-0.8360, 1.8327, 0.0033],
        [0.0357, -0.0469, 1.0112],
    ]),
    "xyz_scaling": as_matrix(np.eye(3)),
}

ADAPTATION_METHODS = tuple(LMS_MATRICES)


def get_lms_matrix(model: str) -> Matrix3:
    """
    Return the XYZ -> LMS matrix of a named cone model.

    Raises:
        ValueError: If the model is unknown
    """
    key = str(model).strip().lower().replace("-", "_")
    try:
        return LMS_MATRICES[key]
    except KeyError:
        raise ValueError(
            f"Unknown LMS model: {model!r}. Known: {', '.join(ADAPTATION_METHODS)}"
        ) from None


@lru_cache(maxsize=None)
def _lms_inverse(model: str) -> Matrix3:
    return invert3(get_lms_matrix(model))


def get_lms_inverse(model: str) -> Matrix3:
    """Return the LMS -> XYZ matrix of a named cone model."""
    return _lms_inverse(str(model).strip().lower().replace("-", "_"))


@lru_cache(maxsize=256)
def _adaptation_matrix(src: Tuple[float, float, float], dst: Tuple[float, float, float], method: str) -> Matrix3:
    cone = get_lms_matrix(method)
    src_lms = cone @ np.asarray(src)
    dst_lms = cone @ np.asarray(dst)
    return compose(get_lms_inverse(method), np.diag(dst_lms / src_lms), cone)


def adaptation_matrix(
    from_white: WhitePointLike,
    to_white: WhitePointLike,
    method: str = "bradford",
) -> Matrix3:
    """
    Matrix adapting XYZ relative to ``from_white`` into XYZ relative to ``to_white``.

    Results are memoized per (source white, destination white, method).
    """
    src = get_white_point(from_white)
    dst = get_white_point(to_white)
    return _adaptation_matrix(src.xyz, dst.xyz, str(method).strip().lower().replace("-", "_"))


def chromatic_adapt(
    x: float,
    y: float,
    z: float,
    from_white: WhitePointLike,
    to_white: WhitePointLike,
    method: str = "bradford",
) -> Tuple[float, float, float]:
    """
    Adapt a single XYZ color from one reference white to another.

    The input is returned unchanged when both whites have identical XYZ.

    Args:
        x, y, z: tristimulus values relative to ``from_white``
        from_white: source reference white
        to_white: destination reference white
        method: cone model used for the diagonal scaling

    Returns:
        (X, Y, Z) relative to ``to_white``
    """
    src: WhitePoint = get_white_point(from_white)
    dst: WhitePoint = get_white_point(to_white)
    if src.same_white(dst):
        return x, y, z
    return apply_matrix(adaptation_matrix(src, dst, method), (x, y, z))


def np_chromatic_adapt(
    x: np.ndarray,
    y: np.ndarray,
    z: np.ndarray,
    from_white: WhitePointLike,
    to_white: WhitePointLike,
    method: str = "bradford",
) -> np.ndarray:
    """Vectorized: adapt XYZ arrays; returns shape (..., 3)."""
    x, y, z = broadcast_channels(x, y, z)
    src = get_white_point(from_white)
    dst = get_white_point(to_white)
    if src.same_white(dst):
        return np.stack([x, y, z], axis=-1)
    return np_apply_matrix(adaptation_matrix(src, dst, method), x, y, z)
