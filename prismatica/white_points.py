"""
Reference whites.

CIE standard illuminants for the 2 degree (CIE 1931) and 10 degree
(CIE 1964) observers. XYZ values are normalized to Y = 1; ``xy`` holds the
published chromaticity coordinates.
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, Tuple, Union

Vector3 = Tuple[float, float, float]


@dataclass(frozen=True)
class WhitePoint:
    name: str
    observer: int
    xyz: Vector3
    xy: Tuple[float, float]

    def __str__(self) -> str:
        return self.name if self.observer == 2 else f"{self.name}/{self.observer}"

    def same_white(self, other: "WhitePoint") -> bool:
        """True when both whites have identical tristimulus values."""
        return self.xyz == other.xyz


_DEG_2 = {
    "a": ((1.09850, 1.0, 0.35585), (0.44757, 0.40745)),
    "b": ((0.99072, 1.0, 0.85223), (0.34842, 0.35161)),
    "c": ((0.98074, 1.0, 1.18232), (0.31006, 0.31616)),
    "d50": ((0.96422, 1.0, 0.82521), (0.34567, 0.35850)),
    "d55": ((0.95682, 1.0, 0.92149), (0.33242, 0.34743)),
    "d65": ((0.95047, 1.0, 1.08883), (0.31271, 0.32902)),
    "d75": ((0.94972, 1.0, 1.22638), (0.29902, 0.31485)),
    "e": ((1.0, 1.0, 1.0), (1.0 / 3.0, 1.0 / 3.0)),
    "f1": ((0.928336, 1.0, 1.036647), (0.31310, 0.33727)),
    "f2": ((0.99186, 1.0, 0.67393), (0.37208, 0.37529)),
    "f3": ((1.037535, 1.0, 0.498605), (0.40910, 0.39430)),
    "f4": ((1.091473, 1.0, 0.388133), (0.44018, 0.40329)),
    "f5": ((0.908720, 1.0, 0.987229), (0.31379, 0.34531)),
    "f6": ((0.973091, 1.0, 0.601905), (0.37790, 0.38835)),
    "f7": ((0.95041, 1.0, 1.08747), (0.31292, 0.32933)),
    "f8": ((0.964125, 1.0, 0.823331), (0.34588, 0.35875)),
    "f9": ((1.003648, 1.0, 0.678684), (0.37417, 0.37281)),
    "f10": ((0.961735, 1.0, 0.817123), (0.34609, 0.35986)),
    "f11": ((1.00962, 1.0, 0.64350), (0.38052, 0.37713)),
    "f12": ((1.080463, 1.0, 0.392275), (0.43695, 0.40441)),
}

_DEG_10 = {
    "a": ((1.111420, 1.0, 0.351998), (0.45117, 0.40594)),
    "b": ((0.991778, 1.0, 0.843493), (0.34980, 0.35270)),
    "c": ((0.972857, 1.0, 1.161448), (0.31039, 0.31905)),
    "d50": ((0.967206, 1.0, 0.814280), (0.34773, 0.35952)),
    "d55": ((0.957967, 1.0, 0.909253), (0.33411, 0.34877)),
    "d65": ((0.948097, 1.0, 1.073051), (0.31382, 0.33100)),
    "d75": ((0.944171, 1.0, 1.206427), (0.29968, 0.31740)),
    "e": ((1.0, 1.0, 1.000030), (0.33333, 0.33333)),
    "f1": ((0.947913, 1.0, 1.031914), (0.31811, 0.33559)),
    "f2": ((1.032450, 1.0, 0.689897), (0.37925, 0.36733)),
    "f3": ((1.089683, 1.0, 0.519648), (0.41761, 0.38324)),
    "f4": ((1.149614, 1.0, 0.409633), (0.44920, 0.39074)),
    "f5": ((0.933686, 1.0, 0.986363), (0.31975, 0.34246)),
    "f6": ((1.021481, 1.0, 0.620736), (0.38660, 0.37847)),
    "f7": ((0.957797, 1.0, 1.076183), (0.31569, 0.32960)),
    "f8": ((0.971146, 1.0, 0.811347), (0.34902, 0.35939)),
    "f9": ((1.021163, 1.0, 0.678256), (0.37829, 0.37045)),
    "f10": ((0.990012, 1.0, 0.831340), (0.35090, 0.35444)),
    "f11": ((1.038197, 1.0, 0.655550), (0.38541, 0.37123)),
    "f12": ((1.114284, 1.0, 0.403530), (0.44256, 0.39717)),
}


def _build(table: Dict[str, Tuple[Vector3, Tuple[float, float]]], observer: int) -> Dict[str, WhitePoint]:
    return {
        name: WhitePoint(name=name, observer=observer, xyz=xyz, xy=xy)
        for name, (xyz, xy) in table.items()
    }


WHITE_POINTS: Dict[int, Dict[str, WhitePoint]] = {
    2: _build(_DEG_2, 2),
    10: _build(_DEG_10, 10),
}

D50 = WHITE_POINTS[2]["d50"]
D65 = WHITE_POINTS[2]["d65"]
E = WHITE_POINTS[2]["e"]

WhitePointLike = Union[str, WhitePoint]


def get_white_point(white: WhitePointLike, observer: int = 2) -> WhitePoint:
    """
    Look up a reference white.

    Args:
        white: Illuminant name ("d65", "D50", "f11", ...), optionally with an
            observer suffix ("d65/10"), or a WhitePoint which is returned as is
        observer: 2 or 10, used when ``white`` carries no suffix

    Raises:
        ValueError: If the illuminant or observer is unknown
    """
    if isinstance(white, WhitePoint):
        return white
    name = str(white).strip().lower()
    if "/" in name:
        name, _, suffix = name.partition("/")
        observer = int(suffix)
    table = WHITE_POINTS.get(observer)
    if table is None:
        raise ValueError(f"Unknown observer: {observer} (expected 2 or 10)")
    try:
        return table[name]
    except KeyError:
        raise ValueError(f"Unknown white point: {white!r}") from None


def white_point_from_xy(x: float, y: float, name: str = "custom") -> WhitePoint:
    """Build a custom reference white from its chromaticity (Y = 1)."""
    if y <= 0:
        raise ValueError(f"White point chromaticity y must be positive, got {y}")
    xyz = (x / y, 1.0, (1.0 - x - y) / y)
    return WhitePoint(name=name, observer=2, xyz=xyz, xy=(x, y))
