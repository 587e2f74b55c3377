"""
Conversion parameter bundle.

Every conversion that depends on a working space, a reference white, a
chromatic adaptation method or a YCbCr/LMS model reads it from a
:class:`ConversionConfig` passed explicitly by the caller.
``DEFAULT_CONFIG`` is an ordinary immutable constant; nothing in the
library reads hidden global state.
"""
from __future__ import annotations
from dataclasses import dataclass, replace
from typing import Optional, Union

from .adaptation import get_lms_matrix
from .ycbcr_models import YCbCrModel, get_ycbcr_model
from .types.color_types import OutOfGamutMode
from .white_points import WhitePoint, get_white_point
from .working_spaces import WorkingSpace, get_working_space


@dataclass(frozen=True)
class ConversionConfig:
    """
    Parameters of one side of a conversion.

    Attributes:
        working_space: RGB working space of device colors
        white_point: reference white of CIE colors; None uses the working
            space's white
        observer: 2 or 10, used to resolve named white points
        adaptation: chromatic adaptation method applied when the source and
            target whites differ; None forbids adaptation
        ycbcr_model: model used for YCbCr colors
        lms_model: cone model used for LMS colors
        gamut_mode: treatment of out-of-gamut results of HSI/YCbCr -> RGB
    """
    working_space: Union[str, WorkingSpace] = "srgb"
    white_point: Optional[Union[str, WhitePoint]] = None
    observer: int = 2
    adaptation: Optional[str] = "bradford"
    ycbcr_model: Union[str, YCbCrModel] = "jpeg"
    lms_model: str = "bradford"
    gamut_mode: OutOfGamutMode = OutOfGamutMode.PRESERVE

    def __post_init__(self):
        if self.observer not in (2, 10):
            raise ValueError(f"Unknown observer: {self.observer} (expected 2 or 10)")
        object.__setattr__(self, "gamut_mode", OutOfGamutMode(self.gamut_mode))

    def resolved_working_space(self) -> WorkingSpace:
        return get_working_space(self.working_space)

    def resolved_white_point(self) -> WhitePoint:
        """The reference white of CIE colors under this config."""
        if self.white_point is None:
            return self.resolved_working_space().white
        return get_white_point(self.white_point, self.observer)

    def resolved_ycbcr_model(self) -> YCbCrModel:
        return get_ycbcr_model(self.ycbcr_model)

    def resolved_lms_model(self) -> str:
        get_lms_matrix(self.lms_model)
        return str(self.lms_model).strip().lower().replace("-", "_")

    def replace(self, **changes) -> "ConversionConfig":
        """Return a copy with ``changes`` applied."""
        return replace(self, **changes)


DEFAULT_CONFIG = ConversionConfig()
