from typing import ClassVar, Tuple
from ..types.color_types import ChannelSpec, ColorSpace, DomainPolicy
from .color_base import ALPHA_CHANNEL, ColorBase, WithAlpha, build_registry

UNIT_RGB = (
    ChannelSpec("r", 0.0, 1.0, DomainPolicy.CLAMP),
    ChannelSpec("g", 0.0, 1.0, DomainPolicy.CLAMP),
    ChannelSpec("b", 0.0, 1.0, DomainPolicy.CLAMP),
)


class ColorRGB(ColorBase):
    num_channels: ClassVar[int] = 3
    mode: ClassVar[str] = ColorSpace.RGB.value
    channels: ClassVar[Tuple[ChannelSpec, ...]] = UNIT_RGB
    param_names: ClassVar[Tuple[str, ...]] = ("working_space",)


class ColorRGBA(ColorBase, WithAlpha):
    num_channels: ClassVar[int] = 4
    mode: ClassVar[str] = ColorSpace.RGBA.value
    channels: ClassVar[Tuple[ChannelSpec, ...]] = UNIT_RGB + (ALPHA_CHANNEL,)
    param_names: ClassVar[Tuple[str, ...]] = ("working_space",)


class ColorRGI(ColorBase):
    """Normalized chromaticity r, g plus intensity; r + g may not exceed 1."""
    num_channels: ClassVar[int] = 3
    mode: ClassVar[str] = ColorSpace.RGI.value
    channels: ClassVar[Tuple[ChannelSpec, ...]] = (
        ChannelSpec("r", 0.0, 1.0, DomainPolicy.REJECT),
        ChannelSpec("g", 0.0, 1.0, DomainPolicy.REJECT),
        ChannelSpec("i", 0.0, 1.0, DomainPolicy.CLAMP),
    )
    param_names: ClassVar[Tuple[str, ...]] = ("working_space",)
    sum_limit = (0, 1)


RGB = ColorRGB
RGBA = ColorRGBA


rgb_registry = build_registry(
    ColorRGB,
    ColorRGBA,
    ColorRGI,
)
