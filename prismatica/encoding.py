"""
Transfer functions (companding) between linear light and encoded RGB.

Every curve is sign-preserving: ``f(-x) == -f(x)``. Out-of-gamut linear
values produced by a matrix conversion therefore survive an
encode/decode round trip instead of collapsing to zero.
"""
from __future__ import annotations
import math
from dataclasses import dataclass
import numpy as np
from numpy import ndarray as NDArray

from .utils import as_float_array

# sRGB (IEC 61966-2-1)
SRGB_ENCODED_THRESHOLD = 0.04045
SRGB_LINEAR_THRESHOLD = 0.0031308

# ITU-R BT.709 / BT.2020 (exact constants from BT.2020)
REC709_ALPHA = 1.09929682680944
REC709_BETA = 0.018053968510807

# ROMM RGB (ProPhoto)
ROMM_LINEAR_THRESHOLD = 1.0 / 512.0
ROMM_GAMMA = 1.8


# ---------------------------------------------------------------------------
# sRGB
# ---------------------------------------------------------------------------
def srgb_to_linear(c: float) -> float:
    """Convert nonlinear sRGB to linear-light RGB."""
    a = abs(c)
    if a <= SRGB_ENCODED_THRESHOLD:
        return c / 12.92
    return math.copysign(((a + 0.055) / 1.055) ** 2.4, c)


def linear_to_srgb(c: float) -> float:
    """Convert linear-light RGB to nonlinear sRGB."""
    a = abs(c)
    if a <= SRGB_LINEAR_THRESHOLD:
        return 12.92 * c
    return math.copysign(1.055 * (a ** (1 / 2.4)) - 0.055, c)


def np_srgb_to_linear(c: NDArray) -> NDArray:
    """Vectorized: Convert nonlinear sRGB to linear-light RGB."""
    c = as_float_array(c)
    a = np.abs(c)
    return np.where(
        a <= SRGB_ENCODED_THRESHOLD,
        c / 12.92,
        np.sign(c) * ((a + 0.055) / 1.055) ** 2.4,
    )


def np_linear_to_srgb(c: NDArray) -> NDArray:
    """Vectorized: Convert linear-light RGB to nonlinear sRGB."""
    c = as_float_array(c)
    a = np.abs(c)
    return np.where(
        a <= SRGB_LINEAR_THRESHOLD,
        12.92 * c,
        np.sign(c) * (1.055 * (a ** (1 / 2.4)) - 0.055),
    )


# ---------------------------------------------------------------------------
# Pure power law
# ---------------------------------------------------------------------------
def gamma_to_linear(c: float, gamma: float = 2.2) -> float:
    return math.copysign(abs(c) ** gamma, c)


def linear_to_gamma(c: float, gamma: float = 2.2) -> float:
    return math.copysign(abs(c) ** (1.0 / gamma), c)


def np_gamma_to_linear(c: NDArray, gamma: float = 2.2) -> NDArray:
    c = as_float_array(c)
    return np.sign(c) * np.abs(c) ** gamma


def np_linear_to_gamma(c: NDArray, gamma: float = 2.2) -> NDArray:
    c = as_float_array(c)
    return np.sign(c) * np.abs(c) ** (1.0 / gamma)


# ---------------------------------------------------------------------------
# BT.709 / BT.2020 OETF
# ---------------------------------------------------------------------------
def rec709_to_linear(c: float) -> float:
    a = abs(c)
    if a < 4.5 * REC709_BETA:
        return c / 4.5
    return math.copysign(((a + REC709_ALPHA - 1.0) / REC709_ALPHA) ** (1.0 / 0.45), c)


def linear_to_rec709(c: float) -> float:
    a = abs(c)
    if a < REC709_BETA:
        return 4.5 * c
    return math.copysign(REC709_ALPHA * a ** 0.45 - (REC709_ALPHA - 1.0), c)


def np_rec709_to_linear(c: NDArray) -> NDArray:
    c = as_float_array(c)
    a = np.abs(c)
    return np.where(
        a < 4.5 * REC709_BETA,
        c / 4.5,
        np.sign(c) * ((a + REC709_ALPHA - 1.0) / REC709_ALPHA) ** (1.0 / 0.45),
    )


def np_linear_to_rec709(c: NDArray) -> NDArray:
    c = as_float_array(c)
    a = np.abs(c)
    return np.where(
        a < REC709_BETA,
        4.5 * c,
        np.sign(c) * (REC709_ALPHA * a ** 0.45 - (REC709_ALPHA - 1.0)),
    )


# ---------------------------------------------------------------------------
# ROMM (ProPhoto RGB)
# ---------------------------------------------------------------------------
def romm_to_linear(c: float) -> float:
    a = abs(c)
    if a < 16.0 * ROMM_LINEAR_THRESHOLD:
        return c / 16.0
    return math.copysign(a ** ROMM_GAMMA, c)


def linear_to_romm(c: float) -> float:
    a = abs(c)
    if a < ROMM_LINEAR_THRESHOLD:
        return 16.0 * c
    return math.copysign(a ** (1.0 / ROMM_GAMMA), c)


def np_romm_to_linear(c: NDArray) -> NDArray:
    c = as_float_array(c)
    a = np.abs(c)
    return np.where(a < 16.0 * ROMM_LINEAR_THRESHOLD, c / 16.0, np.sign(c) * a ** ROMM_GAMMA)


def np_linear_to_romm(c: NDArray) -> NDArray:
    c = as_float_array(c)
    a = np.abs(c)
    return np.where(a < ROMM_LINEAR_THRESHOLD, 16.0 * c, np.sign(c) * a ** (1.0 / ROMM_GAMMA))


TRANSFER_KINDS = ("srgb", "gamma", "linear", "rec709", "romm")


@dataclass(frozen=True)
class TransferFunction:
    """
    An encode/decode pair.

    ``kind`` is one of "srgb", "gamma", "linear", "rec709" or "romm";
    ``gamma`` is only read for the "gamma" kind.
    """
    kind: str = "srgb"
    gamma: float = 2.2

    def __post_init__(self):
        if self.kind not in TRANSFER_KINDS:
            raise ValueError(f"Unknown transfer function: {self.kind!r}")
        if self.kind == "gamma" and self.gamma <= 0:
            raise ValueError(f"Gamma must be positive, got {self.gamma}")

    def decode(self, c: float) -> float:
        """Encoded value -> linear light."""
        if self.kind == "srgb":
            return srgb_to_linear(c)
        if self.kind == "gamma":
            return gamma_to_linear(c, self.gamma)
        if self.kind == "rec709":
            return rec709_to_linear(c)
        if self.kind == "romm":
            return romm_to_linear(c)
        return float(c)

    def encode(self, c: float) -> float:
        """Linear light -> encoded value."""
        if self.kind == "srgb":
            return linear_to_srgb(c)
        if self.kind == "gamma":
            return linear_to_gamma(c, self.gamma)
        if self.kind == "rec709":
            return linear_to_rec709(c)
        if self.kind == "romm":
            return linear_to_romm(c)
        return float(c)

    def np_decode(self, c: NDArray) -> NDArray:
        if self.kind == "srgb":
            return np_srgb_to_linear(c)
        if self.kind == "gamma":
            return np_gamma_to_linear(c, self.gamma)
        if self.kind == "rec709":
            return np_rec709_to_linear(c)
        if self.kind == "romm":
            return np_romm_to_linear(c)
        return as_float_array(c)

    def np_encode(self, c: NDArray) -> NDArray:
        if self.kind == "srgb":
            return np_linear_to_srgb(c)
        if self.kind == "gamma":
            return np_linear_to_gamma(c, self.gamma)
        if self.kind == "rec709":
            return np_linear_to_rec709(c)
        if self.kind == "romm":
            return np_linear_to_romm(c)
        return as_float_array(c)


SRGB_TRANSFER = TransferFunction("srgb")
LINEAR_TRANSFER = TransferFunction("linear")
REC709_TRANSFER = TransferFunction("rec709")
ROMM_TRANSFER = TransferFunction("romm")
