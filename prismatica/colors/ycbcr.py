from typing import Any, ClassVar, Dict, Tuple
from ..types.color_types import ChannelSpec, ColorSpace, DomainPolicy
from .color_base import ColorBase, build_registry


class ColorYCbCr(ColorBase):
    """
    Luma plus two color-difference channels under a named model.

    The chroma bounds follow the model: [-0.5, 0.5] for the (kr, kb) models,
    the native I/Q ranges for ``yiq``.
    """
    num_channels: ClassVar[int] = 3
    mode: ClassVar[str] = ColorSpace.YCBCR.value
    channels: ClassVar[Tuple[ChannelSpec, ...]] = (
        ChannelSpec("y", 0.0, 1.0, DomainPolicy.CLAMP),
        ChannelSpec("cb", -0.5, 0.5, DomainPolicy.CLAMP),
        ChannelSpec("cr", -0.5, 0.5, DomainPolicy.CLAMP),
    )
    param_names: ClassVar[Tuple[str, ...]] = ("working_space", "ycbcr_model")

    @classmethod
    def channel_specs(cls, params: Dict[str, Any]) -> Tuple[ChannelSpec, ...]:
        cb_range, cr_range = params["ycbcr_model"].chroma_range
        luma, cb, cr = cls.channels
        return (
            luma,
            ChannelSpec(cb.name, -cb_range, cb_range, DomainPolicy.CLAMP),
            ChannelSpec(cr.name, -cr_range, cr_range, DomainPolicy.CLAMP),
        )

    @property
    def model(self):
        return self._params["ycbcr_model"]


YCbCr = ColorYCbCr


ycbcr_registry = build_registry(ColorYCbCr)
