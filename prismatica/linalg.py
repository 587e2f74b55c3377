"""3x3 matrix helpers shared by the working-space, adaptation and YCbCr code."""
from __future__ import annotations
from typing import Sequence, Tuple
import numpy as np

from .errors import DegenerateMatrixError

Matrix3 = np.ndarray
Vector3 = Tuple[float, float, float]

# Relative determinant below which a 3x3 matrix is treated as singular
SINGULAR_TOLERANCE = 1e-12


def as_matrix(values) -> Matrix3:
    """Return ``values`` as a read-only float64 3x3 matrix."""
    m = np.array(values, dtype=np.float64)
    if m.shape != (3, 3):
        raise ValueError(f"Expected a 3x3 matrix, got shape {m.shape}")
    m.flags.writeable = False
    return m


def invert3(m: Matrix3) -> Matrix3:
    """
    Invert a 3x3 matrix.

    Raises:
        DegenerateMatrixError: If the matrix is singular or numerically so
    """
    m = np.asarray(m, dtype=np.float64)
    scale = np.abs(m).max()
    if scale == 0 or not np.isfinite(m).all():
        raise DegenerateMatrixError(f"Matrix is not invertible:\n{m}")
    det = np.linalg.det(m)
    if abs(det) <= SINGULAR_TOLERANCE * scale ** 3:
        raise DegenerateMatrixError(f"Matrix is singular (det={det:.3e}):\n{m}")
    try:
        inv = np.linalg.inv(m)
    except np.linalg.LinAlgError as exc:
        raise DegenerateMatrixError(str(exc)) from exc
    inv.flags.writeable = False
    return inv


def compose(*matrices: Matrix3) -> Matrix3:
    """Product of matrices applied right to left: ``compose(A, B) @ v == A @ (B @ v)``."""
    out = np.eye(3)
    for m in matrices:
        out = out @ np.asarray(m, dtype=np.float64)
    out.flags.writeable = False
    return out


def apply_matrix(m: Matrix3, vector: Sequence[float]) -> Vector3:
    """Multiply a single 3-vector by ``m`` and return plain floats."""
    a, b, c = (float(v) for v in vector)
    return (
        float(m[0, 0] * a + m[0, 1] * b + m[0, 2] * c),
        float(m[1, 0] * a + m[1, 1] * b + m[1, 2] * c),
        float(m[2, 0] * a + m[2, 1] * b + m[2, 2] * c),
    )


def np_apply_matrix(m: Matrix3, a, b, c) -> np.ndarray:
    """
    Vectorized: multiply stacked 3-vectors by ``m``.

    Args:
        m: 3x3 matrix
        a, b, c: channel arrays of a common shape

    Returns:
        array of shape (..., 3) in the dtype of the channels
    """
    stacked = np.stack([a, b, c], axis=-1)
    return stacked @ np.asarray(m, dtype=stacked.dtype).T


def primaries_to_xyz_matrix(
    red: Tuple[float, float],
    green: Tuple[float, float],
    blue: Tuple[float, float],
    white: Vector3,
) -> Matrix3:
    """
    Build the linear RGB -> XYZ matrix of a working space.

    Each primary chromaticity (x, y) becomes the column (x/y, 1, (1-x-y)/y);
    the columns are then scaled so RGB (1, 1, 1) maps exactly onto ``white``.

    Args:
        red, green, blue: xy chromaticities of the primaries
        white: XYZ of the reference white (Y = 1)

    Raises:
        DegenerateMatrixError: If the primaries are collinear or a y is zero
    """
    columns = []
    for name, (x, y) in (("red", red), ("green", green), ("blue", blue)):
        if y == 0:
            raise DegenerateMatrixError(f"{name} primary has y == 0")
        columns.append((x / y, 1.0, (1.0 - x - y) / y))
    primaries = np.array(columns, dtype=np.float64).T
    scale = invert3(primaries) @ np.asarray(white, dtype=np.float64)
    return as_matrix(primaries * scale)
