"""
RGB working spaces.

A working space is defined by the chromaticities of its three primaries,
its reference white and the transfer function that maps linear light to
encoded values. The RGB -> XYZ matrix and its inverse are derived once when
the space is created and stored as read-only arrays.
"""
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Dict, Tuple, Union
import numpy as np

from .encoding import (
    LINEAR_TRANSFER,
    REC709_TRANSFER,
    ROMM_TRANSFER,
    SRGB_TRANSFER,
    TransferFunction,
)
from .linalg import invert3, primaries_to_xyz_matrix
from .white_points import WHITE_POINTS, WhitePoint, WhitePointLike, get_white_point

Chromaticity = Tuple[float, float]


@dataclass(frozen=True, eq=False)
class WorkingSpace:
    name: str
    red: Chromaticity
    green: Chromaticity
    blue: Chromaticity
    white: WhitePoint
    transfer: TransferFunction = SRGB_TRANSFER
    to_xyz: np.ndarray = field(init=False, repr=False)
    from_xyz: np.ndarray = field(init=False, repr=False)

    def __post_init__(self):
        m = primaries_to_xyz_matrix(self.red, self.green, self.blue, self.white.xyz)
        object.__setattr__(self, "to_xyz", m)
        object.__setattr__(self, "from_xyz", invert3(m))

    def __eq__(self, other):
        if not isinstance(other, WorkingSpace):
            return NotImplemented
        return (
            self.red == other.red
            and self.green == other.green
            and self.blue == other.blue
            and self.white.same_white(other.white)
            and self.transfer == other.transfer
        )

    def __hash__(self):
        return hash((self.red, self.green, self.blue, self.white.xyz, self.transfer))

    def __str__(self) -> str:
        return self.name

    @classmethod
    def from_primaries(
        cls,
        name: str,
        red: Chromaticity,
        green: Chromaticity,
        blue: Chromaticity,
        white: WhitePointLike = "d65",
        transfer: TransferFunction = SRGB_TRANSFER,
    ) -> "WorkingSpace":
        """
        Build a custom working space.

        Raises:
            DegenerateMatrixError: If the primaries are collinear
        """
        return cls(name, tuple(red), tuple(green), tuple(blue), get_white_point(white), transfer)


_D65 = WHITE_POINTS[2]["d65"]
_D50 = WHITE_POINTS[2]["d50"]
_E = WHITE_POINTS[2]["e"]

_SRGB_PRIMARIES = ((0.64, 0.33), (0.30, 0.60), (0.15, 0.06))

WORKING_SPACES: Dict[str, WorkingSpace] = {
    ws.name: ws
    for ws in (
        WorkingSpace("srgb", *_SRGB_PRIMARIES, _D65, SRGB_TRANSFER),
        WorkingSpace("linear_srgb", *_SRGB_PRIMARIES, _D65, LINEAR_TRANSFER),
        WorkingSpace("adobe_rgb", (0.64, 0.33), (0.21, 0.71), (0.15, 0.06), _D65,
                     TransferFunction("gamma", 563.0 / 256.0)),
        WorkingSpace("display_p3", (0.680, 0.320), (0.265, 0.690), (0.150, 0.060), _D65, SRGB_TRANSFER),
        WorkingSpace("rec709", *_SRGB_PRIMARIES, _D65, REC709_TRANSFER),
        WorkingSpace("rec2020", (0.708, 0.292), (0.170, 0.797), (0.131, 0.046), _D65, REC709_TRANSFER),
        WorkingSpace("prophoto_rgb", (0.7347, 0.2653), (0.1596, 0.8404), (0.0366, 0.0001), _D50,
                     ROMM_TRANSFER),
        WorkingSpace("cie_rgb", (0.735, 0.265), (0.274, 0.717), (0.167, 0.009), _E,
                     TransferFunction("gamma", 2.2)),
    )
}

SRGB = WORKING_SPACES["srgb"]

WorkingSpaceLike = Union[str, WorkingSpace]


def get_working_space(space: WorkingSpaceLike) -> WorkingSpace:
    """
    Look up a working space by name; WorkingSpace instances are returned as is.

    Raises:
        ValueError: If the name is unknown
    """
    if isinstance(space, WorkingSpace):
        return space
    key = str(space).strip().lower().replace("-", "_").replace(" ", "_")
    try:
        return WORKING_SPACES[key]
    except KeyError:
        raise ValueError(
            f"Unknown working space: {space!r}. Known: {', '.join(sorted(WORKING_SPACES))}"
        ) from None
