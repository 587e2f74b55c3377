from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Literal, Optional, Tuple, Union
import numpy as np
from numpy import ndarray

Scalar = int | float
ScalarVector = Tuple[Scalar, ...]
ColorElement = Union[Scalar, ScalarVector]
ColorValue = Union[ColorElement, ndarray]  # Includes array support
HueDirection = Literal["cw", "ccw", "shortest", "longest"]


class ColorSpace(str, Enum):
    RGB = "rgb"
    RGBA = "rgba"
    HSV = "hsv"
    HSVA = "hsva"
    HSL = "hsl"
    HSLA = "hsla"
    HSI = "hsi"
    EHSI = "ehsi"
    HWB = "hwb"
    RGI = "rgi"
    YCBCR = "ycbcr"
    XYZ = "xyz"
    XYY = "xyy"
    LAB = "lab"
    LABA = "laba"
    LUV = "luv"
    LCHAB = "lchab"
    LCHUV = "lchuv"
    LMS = "lms"


# Spaces that route through RGB
DEVICE_SPACES = frozenset({"rgb", "hsv", "hsl", "hsi", "ehsi", "hwb", "rgi", "ycbcr"})
# Spaces that route through XYZ
CIE_SPACES = frozenset({"xyz", "xyy", "lab", "luv", "lchab", "lchuv", "lms"})
ALL_SPACES = DEVICE_SPACES | CIE_SPACES

# Index of the hue channel for every space that has one
HUE_INDEX = {
    "hsv": 0,
    "hsl": 0,
    "hsi": 0,
    "ehsi": 0,
    "hwb": 0,
    "lchab": 2,
    "lchuv": 2,
}

# Spaces whose non-hue channels are all unit-range and can take a FormatType
UNIT_SPACES = frozenset({"rgb", "hsv", "hsl", "hsi", "ehsi", "hwb", "rgi"})


class DomainPolicy(str, Enum):
    CLAMP = "clamp"
    REJECT = "reject"
    WRAP = "wrap"
    FREE = "free"


@dataclass(frozen=True)
class ChannelSpec:
    """Name, bounds and out-of-range policy of one channel."""
    name: str
    lo: Optional[float] = None
    hi: Optional[float] = None
    policy: DomainPolicy = DomainPolicy.FREE


def split_alpha(space: str) -> Tuple[str, bool]:
    """
    Split a space name into its base space and whether it carries alpha.

    Args:
        space: Space name such as "rgb", "rgba" or "laba"

    Returns:
        (base space, has alpha)

    Raises:
        ValueError: If the base space is unknown
    """
    name = space.value if isinstance(space, ColorSpace) else str(space)
    name = name.lower()
    if name in ALL_SPACES:
        return name, False
    if name.endswith("a") and name[:-1] in ALL_SPACES:
        return name[:-1], True
    raise ValueError(f"Unknown color space: {space}")


def element_to_array(element: Union[ColorElement, ndarray]) -> np.ndarray:
    """
    Convert a color element to a numpy array.

    Args:
        element: Scalar, tuple, or already an ndarray

    Returns:
        numpy array representation
    """
    if isinstance(element, ndarray):
        return element
    if isinstance(element, (int, float)):
        return np.array([element], dtype=float)
    return np.array(element, dtype=float)


class OutOfGamutMode(str, Enum):
    """How an inverse transform treats RGB results outside [0, 1].

    PRESERVE returns them untouched, CLIP clamps each channel, RESCALE
    divides by the largest channel, SATURATION lowers saturation at constant
    hue and intensity until the color fits (HSI only).
    """
    PRESERVE = "preserve"
    CLIP = "clip"
    RESCALE = "rescale"
    SATURATION = "saturation"
