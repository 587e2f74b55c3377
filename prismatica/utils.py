from typing import Any, Tuple
from collections.abc import Sized
import numpy as np


def get_dimension(element: Any) -> int:
    if element is None:
        return 0
    if isinstance(element, Sized):
        return len(element)
    return 1


def as_float_array(x: Any) -> np.ndarray:
    """Return ``x`` as a floating array, keeping float32/float64 as they are."""
    arr = np.asarray(x)
    if np.issubdtype(arr.dtype, np.floating):
        return arr
    return arr.astype(np.float64)


def broadcast_channels(a: Any, b: Any, c: Any) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
    """
    Turn three channel inputs into float arrays of one common shape and dtype.

    Float32 inputs stay float32 only when all three are float32; anything
    else is promoted to float64.
    """
    a, b, c = as_float_array(a), as_float_array(b), as_float_array(c)
    dtype = np.result_type(a, b, c)
    shape = np.broadcast(a, b, c).shape
    return (
        np.broadcast_to(a, shape).astype(dtype, copy=False),
        np.broadcast_to(b, shape).astype(dtype, copy=False),
        np.broadcast_to(c, shape).astype(dtype, copy=False),
    )
