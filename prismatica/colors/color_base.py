from __future__ import annotations
import math
from typing import Any, Callable, ClassVar, Dict, Optional, Tuple, Union, cast
import numpy as np
from numpy import ndarray

from ..adaptation import get_lms_matrix
from ..channel import clamp_channel, from_unit, lerp, lerp_hue, to_unit, wrap_hue
from ..config import DEFAULT_CONFIG, ConversionConfig
from ..errors import DomainError, ParameterMismatchError
from ..conversions.wrapper import normalize, scale
from ..types.color_types import (
    HUE_INDEX,
    ChannelSpec,
    ColorValue,
    DomainPolicy,
    HueDirection,
    Scalar,
    element_to_array,
    split_alpha,
)
from ..types.format_type import FormatType
from ..utils import as_float_array, get_dimension
from ..white_points import get_white_point
from ..working_spaces import get_working_space
from ..ycbcr_models import get_ycbcr_model

# Excursions past a REJECT bound smaller than this are rounding noise and get clipped
REJECT_TOLERANCE = 1e-9

ALPHA_CHANNEL = ChannelSpec("alpha", 0.0, 1.0, DomainPolicy.CLAMP)


def _lms_model_name(model: str) -> str:
    get_lms_matrix(model)
    return str(model).strip().lower().replace("-", "_")


# Resolves a user supplied parameter into the shared registry object
PARAM_RESOLVERS: Dict[str, Callable[[Any], Any]] = {
    "working_space": get_working_space,
    "white_point": get_white_point,
    "ycbcr_model": get_ycbcr_model,
    "lms_model": _lms_model_name,
}

PARAM_DEFAULTS: Dict[str, Any] = {
    "working_space": DEFAULT_CONFIG.working_space,
    "white_point": "d65",
    "ycbcr_model": DEFAULT_CONFIG.ycbcr_model,
    "lms_model": DEFAULT_CONFIG.lms_model,
}


def _apply_spec(spec: ChannelSpec, v):
    """Apply one channel's domain policy to a scalar or an array."""
    if spec.policy == DomainPolicy.FREE:
        return v
    if spec.policy == DomainPolicy.WRAP:
        return wrap_hue(v, spec.hi)
    if spec.policy == DomainPolicy.CLAMP:
        return clamp_channel(v, spec.lo, spec.hi)

    lo = -math.inf if spec.lo is None else spec.lo
    hi = math.inf if spec.hi is None else spec.hi
    if isinstance(v, ndarray):
        if np.any(v < lo - REJECT_TOLERANCE) or np.any(v > hi + REJECT_TOLERANCE):
            raise DomainError(f"Channel {spec.name!r} must lie in [{lo}, {hi}]")
        return np.where(np.isnan(v), v, np.clip(v, lo, hi)).astype(v.dtype, copy=False)
    if v < lo - REJECT_TOLERANCE or v > hi + REJECT_TOLERANCE:
        raise DomainError(f"Channel {spec.name!r} must lie in [{lo}, {hi}], got {v}")
    return v if math.isnan(v) else min(max(v, lo), hi)


class ColorBase:
    """
    Immutable color value: one color (tuple of floats) or an array of colors
    (ndarray whose last dimension holds the channels), plus the parameters
    (working space, white point, model) that give the numbers meaning.
    """
    __slots__ = ('_value', '_params')

    num_channels: ClassVar[int] = 3
    mode: ClassVar[str]
    channels: ClassVar[Tuple[ChannelSpec, ...]]
    param_names: ClassVar[Tuple[str, ...]] = ()
    # Pair of channel indices whose sum may not exceed 1 (chromaticity spaces)
    sum_limit: ClassVar[Optional[Tuple[int, int]]] = None
    _is_frozen: bool = False   # class-level default (instance gets its own slot)

    # attached in color.py
    convert: Callable[..., ColorBase]
    with_alpha: Callable[..., ColorBase]

    def __setattr__(self, name, value):
        """Block attribute changes after __init__ finishes."""
        if getattr(self, '_is_frozen', False):
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    def __init__(self, value: Union[ColorValue, ColorBase], **params: Any) -> None:
        # ---- Handle ColorBase input ----
        if isinstance(value, ColorBase):
            # only explicit params override the ones inherited from the source
            converted = value.convert(self.mode, **params)
            self._params = converted._params
            value = converted.value
        else:
            self._params = self._resolve_params(params)

        specs = self.channel_specs(self._params)

        # ---- Handle array input ----
        if isinstance(value, ndarray):
            arr = as_float_array(value)
            if arr.ndim == 0 or arr.shape[-1] != self.num_channels:
                raise ValueError(
                    f"{self.mode} expects last dimension to be {self.num_channels}, "
                    f"got shape {arr.shape}"
                )
            columns = [_apply_spec(spec, arr[..., i]) for i, spec in enumerate(specs)]
            value = np.stack(columns, axis=-1).astype(arr.dtype, copy=False)

        # ---- Handle scalar/tuple input ----
        else:
            if get_dimension(value) != self.num_channels:
                raise ValueError(f"{self.mode} expects {self.num_channels} channels, got {value!r}")
            value = tuple(
                _apply_spec(spec, float(v)) for spec, v in zip(specs, cast(Tuple[Any, ...], value))
            )

        self._check_sum_limit(value)

        # safe assignment; __setattr__ still allows it during init
        self._value = value

        # freeze instance; no more writes allowed
        super().__setattr__('_is_frozen', True)

    # ------------------ PARAMETERS & DOMAIN ------------------
    @classmethod
    def _resolve_params(cls, params: Dict[str, Any]) -> Dict[str, Any]:
        unknown = set(params) - set(cls.param_names)
        if unknown:
            raise TypeError(f"{cls.__name__} got unexpected parameters: {', '.join(sorted(unknown))}")
        resolved = {}
        for name in cls.param_names:
            raw = params.get(name)
            resolved[name] = PARAM_RESOLVERS[name](PARAM_DEFAULTS[name] if raw is None else raw)
        return resolved

    @classmethod
    def channel_specs(cls, params: Dict[str, Any]) -> Tuple[ChannelSpec, ...]:
        """Channel domains; parameter dependent for some spaces."""
        return cls.channels

    @classmethod
    def _check_sum_limit(cls, value) -> None:
        if cls.sum_limit is None:
            return
        i, j = cls.sum_limit
        if isinstance(value, ndarray):
            total = value[..., i] + value[..., j]
            if np.any(total > 1.0 + REJECT_TOLERANCE):
                raise DomainError(f"{cls.mode}: channels {i} and {j} may not sum past 1")
        elif value[i] + value[j] > 1.0 + REJECT_TOLERANCE:
            raise DomainError(f"{cls.mode}: channels {i} and {j} may not sum past 1, got {value}")

    @classmethod
    def _bounded(cls, params: Dict[str, Any]):
        for i, spec in enumerate(cls.channel_specs(params)):
            if spec.policy in (DomainPolicy.CLAMP, DomainPolicy.REJECT):
                yield i, spec

    @classmethod
    def out_of_domain(cls, value: ColorValue, params: Dict[str, Any]) -> bool:
        """True if ``value`` leaves a bounded channel or breaks the sum limit."""
        arr = np.asarray(value, dtype=float)
        for i, spec in cls._bounded(params):
            col = arr[..., i]
            if spec.lo is not None and np.any(col < spec.lo - REJECT_TOLERANCE):
                return True
            if spec.hi is not None and np.any(col > spec.hi + REJECT_TOLERANCE):
                return True
        if cls.sum_limit is not None:
            i, j = cls.sum_limit
            return bool(np.any(arr[..., i] + arr[..., j] > 1.0 + REJECT_TOLERANCE))
        return False

    @classmethod
    def fit_to_domain(cls, value: ColorValue, params: Dict[str, Any]) -> ColorValue:
        """
        Project ``value`` into the domain of this class.

        Bounded channels are clipped to their bounds. A chromaticity pair
        whose sum still exceeds 1 is scaled back onto the r + g = 1 edge.
        """
        arr = np.array(value, dtype=float)
        for i, spec in cls._bounded(params):
            lo = -np.inf if spec.lo is None else spec.lo
            hi = np.inf if spec.hi is None else spec.hi
            arr[..., i] = np.clip(arr[..., i], lo, hi)
        if cls.sum_limit is not None:
            i, j = cls.sum_limit
            total = arr[..., i] + arr[..., j]
            over = total > 1.0
            factor = np.where(over, 1.0 / np.where(over, total, 1.0), 1.0)
            arr[..., i] *= factor
            arr[..., j] *= factor
        if isinstance(value, ndarray):
            return arr.astype(value.dtype, copy=False)
        return tuple(arr.tolist())

    def to_config(self, **overrides: Any) -> ConversionConfig:
        """ConversionConfig describing this color's parameters."""
        return ConversionConfig(**{**self._params, **overrides})

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def value(self) -> ColorValue:
        return self._value

    @property
    def params(self) -> Dict[str, Any]:
        return dict(self._params)

    @property
    def is_array(self) -> bool:
        """Check if this color contains an array of colors."""
        return isinstance(self._value, ndarray)

    @property
    def shape(self) -> Tuple[int, ...] | None:
        """Return shape of the array, or None if scalar."""
        if isinstance(self._value, ndarray):
            return self._value.shape
        return None

    @property
    def has_alpha(self) -> bool:
        """Check if this color space includes an alpha channel."""
        return split_alpha(self.mode)[1]

    @property
    def has_hue(self) -> bool:
        """Check if this color space includes a hue channel."""
        return split_alpha(self.mode)[0] in HUE_INDEX

    @property
    def channel_names(self) -> Tuple[str, ...]:
        return tuple(spec.name for spec in self.channels)

    def channel(self, name: str) -> Union[Scalar, ndarray]:
        """Value(s) of one channel by name."""
        names = [spec.name for spec in self.channels]
        if name not in names:
            raise KeyError(f"{self.mode} has no channel {name!r}; channels are {names}")
        i = names.index(name)
        if isinstance(self._value, ndarray):
            return self._value[..., i]
        return self._value[i]

    def __getattr__(self, name: str):
        if name.startswith('_'):
            raise AttributeError(name)
        if any(spec.name == name for spec in type(self).channels):
            return self.channel(name)
        raise AttributeError(f"{self.__class__.__name__} has no attribute {name!r}")

    # ------------------ COMPARISON & DISPLAY ------------------
    def _check_compatible(self, other: ColorBase, action: str) -> None:
        if not isinstance(other, ColorBase) or other.mode != self.mode:
            raise ParameterMismatchError(
                f"Cannot {action} {self.mode} with {getattr(other, 'mode', type(other).__name__)}"
            )
        if other._params != self._params:
            raise ParameterMismatchError(
                f"Cannot {action} {self.mode} colors with different parameters: "
                f"{self._describe_params()} vs {other._describe_params()}"
            )

    def isclose(self, other: ColorBase, atol: float = 1e-6) -> bool:
        """
        Compare two colors channel by channel within ``atol``.

        Hue channels compare by angular distance, so 359.9 and 0.0 are close.

        Raises:
            ParameterMismatchError: If the spaces or parameters differ
        """
        self._check_compatible(other, "compare")
        a = np.asarray(self._value, dtype=float)
        b = np.asarray(other._value, dtype=float)
        diff = np.abs(a - b)
        hue = HUE_INDEX.get(split_alpha(self.mode)[0])
        if hue is not None:
            d = diff[..., hue] % 360.0
            diff[..., hue] = np.minimum(d, 360.0 - d)
        return bool(np.all(diff <= atol))

    def mix(self, other: ColorBase, t: float = 0.5, hue_direction: HueDirection = "shortest") -> ColorBase:
        """
        Interpolate toward ``other`` within this color's space.

        Args:
            other: Color of the same class and parameters
            t: 0 gives self, 1 gives other
            hue_direction: path around the hue circle for hue channels

        Returns:
            New color of this class
        """
        self._check_compatible(other, "mix")
        a = np.asarray(self._value, dtype=float)
        b = np.asarray(other._value, dtype=float)
        mixed = lerp(a, b, t)
        hue = HUE_INDEX.get(split_alpha(self.mode)[0])
        if hue is not None:
            mixed[..., hue] = lerp_hue(a[..., hue], b[..., hue], t, hue_direction)
        if not self.is_array and not other.is_array:
            return type(self)(tuple(mixed.tolist()), **self._params)
        return type(self)(mixed, **self._params)

    def invert(self) -> ColorBase:
        """
        Complement of this color within its own channel domains.

        Hue turns half a circle; every bounded channel is reflected about the
        middle of its range, so unit channels (alpha included) become 1 - x.

        Raises:
            TypeError: If the space has unbounded channels or a chromaticity sum limit
        """
        specs = self.channel_specs(self._params)
        if self.sum_limit is not None or any(
            spec.policy != DomainPolicy.WRAP and (spec.lo is None or spec.hi is None) for spec in specs
        ):
            raise TypeError(f"{self.mode} colors have no complement")
        arr = np.array(self._value, dtype=float)
        for i, spec in enumerate(specs):
            if spec.policy == DomainPolicy.WRAP:
                arr[..., i] = wrap_hue(arr[..., i] + spec.hi / 2.0, spec.hi)
            else:
                arr[..., i] = spec.lo + spec.hi - arr[..., i]
        if isinstance(self._value, ndarray):
            return type(self)(arr.astype(self._value.dtype, copy=False), **self._params)
        return type(self)(tuple(arr.tolist()), **self._params)

    # ------------------ FORMATS ------------------
    def to_format(self, fmt: FormatType) -> ColorValue:
        """
        Channel values expressed in ``fmt``.

        Unit channels are scaled (INT 0-255, INT16 0-65535, PERCENTAGE 0-100);
        hue stays in degrees. Spaces without unit channels only accept float formats.
        """
        base, has_alpha = split_alpha(self.mode)
        arr = element_to_array(self._value)
        out = scale(arr[..., :3], base, fmt)
        if has_alpha:
            alpha = from_unit(arr[..., 3], FormatType(fmt))
            out = np.concatenate([out, np.asarray(alpha, dtype=out.dtype)[..., None]], axis=-1)
        if self.is_array:
            return out
        return tuple(out.tolist())

    @classmethod
    def from_format(cls, value: ColorValue, fmt: FormatType, **params: Any) -> ColorBase:
        """Build a color from channel values expressed in ``fmt``."""
        base, has_alpha = split_alpha(cls.mode)
        arr = element_to_array(value)
        if arr.shape[-1] != cls.num_channels:
            raise ValueError(f"{cls.mode} expects {cls.num_channels} channels, got shape {arr.shape}")
        unit = normalize(arr[..., :3], base, fmt)
        if has_alpha:
            alpha = to_unit(np.asarray(arr[..., 3]), FormatType(fmt))
            unit = np.concatenate([unit, np.asarray(alpha, dtype=unit.dtype)[..., None]], axis=-1)
        if isinstance(value, ndarray):
            return cls(unit, **params)
        return cls(tuple(unit.tolist()), **params)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ColorBase):
            return NotImplemented
        if type(other) is not type(self) or other._params != self._params:
            return False
        if isinstance(self._value, ndarray) or isinstance(other._value, ndarray):
            return bool(np.array_equal(np.asarray(self._value), np.asarray(other._value)))
        return self._value == other._value

    def __hash__(self) -> int:
        if isinstance(self._value, ndarray):
            raise TypeError(f"unhashable array-valued {self.__class__.__name__}")
        return hash((self.mode, self._value, tuple(str(v) for v in self._params.values())))

    def _describe_params(self) -> str:
        return ", ".join(f"{k}={str(v)!r}" for k, v in self._params.items())

    def __repr__(self) -> str:
        if isinstance(self._value, ndarray):
            body = f"array(shape={self._value.shape}, dtype={self._value.dtype})"
        else:
            body = ", ".join(f"{n}={v:g}" for n, v in zip(self.channel_names, self._value))
        params = self._describe_params()
        return f"{self.__class__.__name__}({body}{', ' + params if params else ''})"


class WithAlpha:
    """
    Mixin for a color class whose last channel is alpha in [0, 1].

    For array values, alpha operations work on the entire array.
    """
    value: ColorValue

    alpha_index: ClassVar[int] = -1

    @property
    def alpha(self) -> Union[Scalar, ndarray]:
        """
        Get alpha channel value.

        Returns:
            Scalar if value is a tuple, ndarray if value is an array.
        """
        if isinstance(self.value, ndarray):
            return self.value[..., self.alpha_index]
        return cast(Tuple[Scalar, ...], self.value)[self.alpha_index]


def build_registry(*classes: type[ColorBase]) -> Dict[str, type[ColorBase]]:
    return {cls.mode: cls for cls in classes}
