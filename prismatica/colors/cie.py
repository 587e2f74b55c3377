from typing import ClassVar, Tuple
from ..types.color_types import ChannelSpec, ColorSpace, DomainPolicy
from ..types.format_type import HUE_360
from .color_base import ALPHA_CHANNEL, ColorBase, WithAlpha, build_registry


def _free(name: str) -> ChannelSpec:
    return ChannelSpec(name, policy=DomainPolicy.FREE)


CHROMA = ChannelSpec("c", 0.0, None, DomainPolicy.REJECT)
HUE = ChannelSpec("h", 0.0, HUE_360, DomainPolicy.WRAP)
LAB_CHANNELS = (_free("L"), _free("a"), _free("b"))


class ColorXYZ(ColorBase):
    """CIE 1931 tristimulus values, scaled so the reference white has Y = 1."""
    num_channels: ClassVar[int] = 3
    mode: ClassVar[str] = ColorSpace.XYZ.value
    channels: ClassVar[Tuple[ChannelSpec, ...]] = (_free("x"), _free("y"), _free("z"))
    param_names: ClassVar[Tuple[str, ...]] = ("white_point",)


class ColorXYY(ColorBase):
    num_channels: ClassVar[int] = 3
    mode: ClassVar[str] = ColorSpace.XYY.value
    channels: ClassVar[Tuple[ChannelSpec, ...]] = (
        ChannelSpec("x", 0.0, 1.0, DomainPolicy.REJECT),
        ChannelSpec("y", 0.0, 1.0, DomainPolicy.REJECT),
        _free("Y"),
    )
    param_names: ClassVar[Tuple[str, ...]] = ("white_point",)
    sum_limit = (0, 1)


class ColorLMS(ColorBase):
    num_channels: ClassVar[int] = 3
    mode: ClassVar[str] = ColorSpace.LMS.value
    channels: ClassVar[Tuple[ChannelSpec, ...]] = (_free("l"), _free("m"), _free("s"))
    param_names: ClassVar[Tuple[str, ...]] = ("white_point", "lms_model")


class ColorLab(ColorBase):
    num_channels: ClassVar[int] = 3
    mode: ClassVar[str] = ColorSpace.LAB.value
    channels: ClassVar[Tuple[ChannelSpec, ...]] = LAB_CHANNELS
    param_names: ClassVar[Tuple[str, ...]] = ("white_point",)


class ColorLabA(ColorBase, WithAlpha):
    num_channels: ClassVar[int] = 4
    mode: ClassVar[str] = ColorSpace.LABA.value
    channels: ClassVar[Tuple[ChannelSpec, ...]] = LAB_CHANNELS + (ALPHA_CHANNEL,)
    param_names: ClassVar[Tuple[str, ...]] = ("white_point",)


class ColorLuv(ColorBase):
    num_channels: ClassVar[int] = 3
    mode: ClassVar[str] = ColorSpace.LUV.value
    channels: ClassVar[Tuple[ChannelSpec, ...]] = (_free("L"), _free("u"), _free("v"))
    param_names: ClassVar[Tuple[str, ...]] = ("white_point",)


class ColorLChab(ColorBase):
    num_channels: ClassVar[int] = 3
    mode: ClassVar[str] = ColorSpace.LCHAB.value
    channels: ClassVar[Tuple[ChannelSpec, ...]] = (_free("L"), CHROMA, HUE)
    param_names: ClassVar[Tuple[str, ...]] = ("white_point",)


class ColorLChuv(ColorBase):
    num_channels: ClassVar[int] = 3
    mode: ClassVar[str] = ColorSpace.LCHUV.value
    channels: ClassVar[Tuple[ChannelSpec, ...]] = (_free("L"), CHROMA, HUE)
    param_names: ClassVar[Tuple[str, ...]] = ("white_point",)


XYZ = ColorXYZ
Lab = ColorLab
LCh = ColorLChab


cie_registry = build_registry(
    ColorXYZ,
    ColorXYY,
    ColorLMS,
    ColorLab,
    ColorLabA,
    ColorLuv,
    ColorLChab,
    ColorLChuv,
)
