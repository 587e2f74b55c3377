from __future__ import annotations
import warnings
from typing import Any, Dict, Optional
import numpy as np
from numpy import ndarray

from ..config import DEFAULT_CONFIG, ConversionConfig
from ..conversions import convert, np_convert
from ..errors import GamutWarning
from ..types.color_types import ColorValue, OutOfGamutMode, split_alpha
from .cie import cie_registry
from .color_base import ColorBase
from .cylindrical import cylindrical_registry
from .rgb import rgb_registry
from .ycbcr import ycbcr_registry

unified_registry: Dict[str, type[ColorBase]] = {
    **rgb_registry,
    **cylindrical_registry,
    **ycbcr_registry,
    **cie_registry,
}


def get_color_class(color_space: str) -> type[ColorBase]:
    color_class = unified_registry.get(str(getattr(color_space, "value", color_space)).lower())
    if color_class is None:
        raise ValueError(f"Unsupported color space: {color_space}")
    return color_class


def _target_params(self: ColorBase, cls: type[ColorBase], overrides: Dict[str, Any]) -> Dict[str, Any]:
    """Parameters of the converted color: overrides, then the source's shared ones."""
    unknown = set(overrides) - set(cls.param_names)
    if unknown:
        raise TypeError(f"{cls.__name__} got unexpected parameters: {', '.join(sorted(unknown))}")
    params: Dict[str, Any] = {}
    for name in cls.param_names:
        if overrides.get(name) is not None:
            params[name] = overrides[name]
        elif name in self._params:
            params[name] = self._params[name]
        elif name == "white_point" and "working_space" in self._params:
            # device -> CIE keeps the working space's own white
            params[name] = self._params["working_space"].white
    return cls._resolve_params(params)


def color_convert(
    self: ColorBase,
    to_space: Optional[str] = None,
    *,
    adaptation: Optional[str] = DEFAULT_CONFIG.adaptation,
    gamut_mode: OutOfGamutMode = OutOfGamutMode.PRESERVE,
    **params: Any,
) -> ColorBase:
    """
    Convert this color to a different color space and/or parameters.

    Automatically detects whether the value is a scalar or array and uses
    the appropriate conversion function (convert for scalars, np_convert for arrays).

    Args:
        to_space: Target color space (e.g. "rgb", "hsv", "lab"). Defaults to the current one.
        adaptation: Chromatic adaptation method used when the reference whites
            differ; None makes a white change an error
        gamut_mode: Treatment of RGB results outside [0, 1] when leaving HSI or YCbCr
        **params: Target parameters (working_space, white_point, ycbcr_model,
            lms_model). Shared parameters default to this color's.

    Returns:
        New ColorBase instance in the target space

    Raises:
        ParameterMismatchError: If the whites differ and ``adaptation`` is None

    Warns:
        GamutWarning: If the result leaves the target's clamped domain
    """
    to_space = to_space or self.mode
    cls = get_color_class(to_space)
    target = _target_params(self, cls, params)

    src_config = self.to_config(adaptation=adaptation, gamut_mode=gamut_mode)
    dst_config = ConversionConfig(**target, adaptation=adaptation, gamut_mode=gamut_mode)

    # Check if value is an array or scalar
    if isinstance(self.value, ndarray):
        # Use vectorized conversion for arrays
        result = np_convert(
            color=self.value,
            from_space=self.mode,
            to_space=cls.mode,
            config=src_config,
            target_config=dst_config,
        )
    else:
        # Use scalar conversion for tuples/scalars
        result = convert(
            color=self.value,
            from_space=self.mode,
            to_space=cls.mode,
            config=src_config,
            target_config=dst_config,
        )

    if cls.out_of_domain(result, target):
        warnings.warn(
            f"{self.mode} -> {cls.mode} result lies outside the {cls.mode} gamut and was clamped",
            GamutWarning,
            stacklevel=2,
        )
        result = cls.fit_to_domain(result, target)
    return cls(result, **target)


def with_alpha(self: ColorBase, alpha: ColorValue = 1.0) -> ColorBase:
    """
    Return an RGBA/HSVA/HSLA/LabA color with the specified alpha.

    Args:
        alpha: Alpha in [0, 1]. Can be a scalar or an array matching the
            shape of the color array.

    Returns:
        New ColorBase instance with alpha channel.
    """
    base, has_alpha = split_alpha(self.mode)
    cls = get_color_class(base + "a")
    value = self.value

    if isinstance(value, ndarray):
        # Handle array case
        color = value[..., :3]
        if isinstance(alpha, ndarray):
            # Alpha is an array - must match color array shape (excluding channels)
            expected_shape = color.shape[:-1]
            if alpha.shape != expected_shape:
                raise ValueError(
                    f"Alpha array shape {alpha.shape} doesn't match color shape {expected_shape}"
                )
            alpha_array = np.expand_dims(alpha, axis=-1).astype(color.dtype)
        else:
            # Alpha is scalar - broadcast to all elements
            alpha_array = np.full(color.shape[:-1] + (1,), alpha, dtype=color.dtype)
        new_value = np.concatenate([color, alpha_array], axis=-1)
    else:
        # Handle scalar/tuple case
        if isinstance(alpha, ndarray):
            raise TypeError("Cannot use array alpha with scalar color value")
        new_value = tuple(value[:3]) + (alpha,)

    return cls(new_value, **self._params)


ColorBase.convert = color_convert
ColorBase.with_alpha = with_alpha


def convert_color(value: ColorValue | ColorBase, color_space: str, **params: Any) -> ColorBase:
    """Build a color of ``color_space`` from raw channels or convert an existing color."""
    if isinstance(value, ColorBase):
        return value.convert(color_space, **params)
    return get_color_class(color_space)(value, **params)
