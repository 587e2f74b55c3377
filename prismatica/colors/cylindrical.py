from typing import ClassVar, Tuple
from ..types.color_types import ChannelSpec, ColorSpace, DomainPolicy
from ..types.format_type import HUE_360
from .color_base import ALPHA_CHANNEL, ColorBase, WithAlpha, build_registry

HUE = ChannelSpec("h", 0.0, HUE_360, DomainPolicy.WRAP)


def _unit(name: str) -> ChannelSpec:
    return ChannelSpec(name, 0.0, 1.0, DomainPolicy.CLAMP)


HSV_CHANNELS = (HUE, _unit("s"), _unit("v"))
HSL_CHANNELS = (HUE, _unit("s"), _unit("l"))


class ColorHSV(ColorBase):
    num_channels: ClassVar[int] = 3
    mode: ClassVar[str] = ColorSpace.HSV.value
    channels: ClassVar[Tuple[ChannelSpec, ...]] = HSV_CHANNELS
    param_names: ClassVar[Tuple[str, ...]] = ("working_space",)


class ColorHSVA(ColorBase, WithAlpha):
    num_channels: ClassVar[int] = 4
    mode: ClassVar[str] = ColorSpace.HSVA.value
    channels: ClassVar[Tuple[ChannelSpec, ...]] = HSV_CHANNELS + (ALPHA_CHANNEL,)
    param_names: ClassVar[Tuple[str, ...]] = ("working_space",)


class ColorHSL(ColorBase):
    num_channels: ClassVar[int] = 3
    mode: ClassVar[str] = ColorSpace.HSL.value
    channels: ClassVar[Tuple[ChannelSpec, ...]] = HSL_CHANNELS
    param_names: ClassVar[Tuple[str, ...]] = ("working_space",)


class ColorHSLA(ColorBase, WithAlpha):
    num_channels: ClassVar[int] = 4
    mode: ClassVar[str] = ColorSpace.HSLA.value
    channels: ClassVar[Tuple[ChannelSpec, ...]] = HSL_CHANNELS + (ALPHA_CHANNEL,)
    param_names: ClassVar[Tuple[str, ...]] = ("working_space",)


class ColorHSI(ColorBase):
    """
    Hue, saturation, intensity with the chromaticity-plane hue.

    Not every (h, s, i) lies inside the RGB cube; how RGB results outside
    [0, 1] are treated is chosen with ``gamut_mode`` when converting.
    """
    num_channels: ClassVar[int] = 3
    mode: ClassVar[str] = ColorSpace.HSI.value
    channels: ClassVar[Tuple[ChannelSpec, ...]] = (HUE, _unit("s"), _unit("i"))
    param_names: ClassVar[Tuple[str, ...]] = ("working_space",)


class ColorEHSI(ColorBase):
    """Extended HSI: every (h, s, i) in range maps into the RGB cube."""
    num_channels: ClassVar[int] = 3
    mode: ClassVar[str] = ColorSpace.EHSI.value
    channels: ClassVar[Tuple[ChannelSpec, ...]] = (HUE, _unit("s"), _unit("i"))
    param_names: ClassVar[Tuple[str, ...]] = ("working_space",)


class ColorHWB(ColorBase):
    num_channels: ClassVar[int] = 3
    mode: ClassVar[str] = ColorSpace.HWB.value
    channels: ClassVar[Tuple[ChannelSpec, ...]] = (HUE, _unit("w"), _unit("b"))
    param_names: ClassVar[Tuple[str, ...]] = ("working_space",)


HSV = ColorHSV
HSVA = ColorHSVA
HSL = ColorHSL
HSLA = ColorHSLA


cylindrical_registry = build_registry(
    ColorHSV,
    ColorHSVA,
    ColorHSL,
    ColorHSLA,
    ColorHSI,
    ColorEHSI,
    ColorHWB,
)
