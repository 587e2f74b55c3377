"""
Conversion graph.

Device spaces (HSV, HSL, HSI, eHSI, HWB, RGI, YCbCr) are spokes around RGB;
CIE spaces (xyY, Lab, Luv, LCh, LMS) are spokes around XYZ. RGB and XYZ are
bridged by the working space (transfer function + primaries matrix).
A handful of direct edges skip the hub when both ends share parameters.

Routes are resolved by :func:`conversion_path` from fixed rules, never by
searching a graph. When the reference white of the source XYZ differs from
the target's, an ``"adapt"`` step is inserted; if the target config forbids
adaptation, :class:`~prismatica.errors.ParameterMismatchError` is raised.
"""
from __future__ import annotations
from typing import Callable, Dict, Optional, Tuple, cast
import numpy as np

from ..adaptation import np_chromatic_adapt
from ..channel import from_unit, to_unit, wrap_hue
from ..config import DEFAULT_CONFIG, ConversionConfig
from ..errors import ParameterMismatchError
from ..types.color_types import (
    DEVICE_SPACES,
    HUE_INDEX,
    UNIT_SPACES,
    ColorElement,
    OutOfGamutMode,
    element_to_array,
    split_alpha,
)
from ..types.format_type import FIXED_POINT_FORMATS, FormatType, default_format_dtypes
from ..utils import as_float_array
from ..white_points import WhitePoint
from .cie import (
    np_from_lch,
    np_lab_to_xyz,
    np_luv_to_xyz,
    np_to_lch,
    np_xyz_to_lab,
    np_xyz_to_luv,
)
from .cylindrical import (
    np_hsl_to_hsv,
    np_hsl_to_rgb,
    np_hsv_to_hsl,
    np_hsv_to_hwb,
    np_hsv_to_rgb,
    np_hwb_to_hsv,
    np_hwb_to_rgb,
    np_rgb_to_hsl,
    np_rgb_to_hsv,
    np_rgb_to_hwb,
)
from .intensity import (
    np_ehsi_to_rgb,
    np_hsi_to_rgb,
    np_rgb_to_ehsi,
    np_rgb_to_hsi,
    np_rgb_to_rgi,
    np_rgi_to_rgb,
)
from .tristimulus import (
    np_decode_rgb,
    np_encode_rgb,
    np_lms_to_xyz,
    np_rgb_to_xyz,
    np_xyy_to_xyz,
    np_xyz_to_lms,
    np_xyz_to_rgb,
    np_xyz_to_xyy,
)
from .ycbcr import np_rgb_to_ycbcr, np_ycbcr_to_rgb

Step = Callable[[np.ndarray, np.ndarray, np.ndarray, ConversionConfig], np.ndarray]


def _ycbcr_gamut(mode: OutOfGamutMode) -> OutOfGamutMode:
    return OutOfGamutMode.CLIP if mode == OutOfGamutMode.CLIP else OutOfGamutMode.PRESERVE


# spoke -> RGB, configured by the source side
TO_RGB: Dict[str, Step] = {
    "hsv": lambda a, b, c, cfg: np_hsv_to_rgb(a, b, c),
    "hsl": lambda a, b, c, cfg: np_hsl_to_rgb(a, b, c),
    "hwb": lambda a, b, c, cfg: np_hwb_to_rgb(a, b, c),
    "hsi": lambda a, b, c, cfg: np_hsi_to_rgb(a, b, c, cfg.gamut_mode),
    "ehsi": lambda a, b, c, cfg: np_ehsi_to_rgb(a, b, c),
    "rgi": lambda a, b, c, cfg: np_rgi_to_rgb(a, b, c),
    "ycbcr": lambda a, b, c, cfg: np_ycbcr_to_rgb(
        a, b, c, cfg.resolved_ycbcr_model(), _ycbcr_gamut(cfg.gamut_mode)
    ),
}

# RGB -> spoke, configured by the target side
FROM_RGB: Dict[str, Step] = {
    "hsv": lambda r, g, b, cfg: np_rgb_to_hsv(r, g, b),
    "hsl": lambda r, g, b, cfg: np_rgb_to_hsl(r, g, b),
    "hwb": lambda r, g, b, cfg: np_rgb_to_hwb(r, g, b),
    "hsi": lambda r, g, b, cfg: np_rgb_to_hsi(r, g, b),
    "ehsi": lambda r, g, b, cfg: np_rgb_to_ehsi(r, g, b),
    "rgi": lambda r, g, b, cfg: np_rgb_to_rgi(r, g, b),
    "ycbcr": lambda r, g, b, cfg: np_rgb_to_ycbcr(r, g, b, cfg.resolved_ycbcr_model()),
}


def _lch_to_xyz(to_xyz):
    def step(lightness, c, h, cfg):
        rect = np_from_lch(lightness, c, h)
        return to_xyz(rect[..., 0], rect[..., 1], rect[..., 2], cfg.resolved_white_point())
    return step


def _xyz_to_lch(from_xyz):
    def step(x, y, z, cfg):
        rect = from_xyz(x, y, z, cfg.resolved_white_point())
        return np_to_lch(rect[..., 0], rect[..., 1], rect[..., 2])
    return step


# spoke -> XYZ, configured by the source side
TO_XYZ: Dict[str, Step] = {
    "xyy": lambda x, y, luminance, cfg: np_xyy_to_xyz(x, y, luminance),
    "lab": lambda lightness, a, b, cfg: np_lab_to_xyz(lightness, a, b, cfg.resolved_white_point()),
    "luv": lambda lightness, u, v, cfg: np_luv_to_xyz(lightness, u, v, cfg.resolved_white_point()),
    "lchab": _lch_to_xyz(np_lab_to_xyz),
    "lchuv": _lch_to_xyz(np_luv_to_xyz),
    "lms": lambda l, m, s, cfg: np_lms_to_xyz(l, m, s, cfg.resolved_lms_model()),
}

# XYZ -> spoke, configured by the target side
FROM_XYZ: Dict[str, Step] = {
    "xyy": lambda x, y, z, cfg: np_xyz_to_xyy(x, y, z),
    "lab": lambda x, y, z, cfg: np_xyz_to_lab(x, y, z, cfg.resolved_white_point()),
    "luv": lambda x, y, z, cfg: np_xyz_to_luv(x, y, z, cfg.resolved_white_point()),
    "lchab": _xyz_to_lch(np_xyz_to_lab),
    "lchuv": _xyz_to_lch(np_xyz_to_luv),
    "lms": lambda x, y, z, cfg: np_xyz_to_lms(x, y, z, cfg.resolved_lms_model()),
}

# Edges that skip the hub when both ends share their parameters
CONVERT_NUMPY_DIRECT: Dict[Tuple[str, str], Callable[[np.ndarray, np.ndarray, np.ndarray], np.ndarray]] = {
    ("hsv", "hsl"): np_hsv_to_hsl,
    ("hsl", "hsv"): np_hsl_to_hsv,
    ("hsv", "hwb"): np_hsv_to_hwb,
    ("hwb", "hsv"): np_hwb_to_hsv,
    ("lab", "lchab"): np_to_lch,
    ("lchab", "lab"): np_from_lch,
    ("luv", "lchuv"): np_to_lch,
    ("lchuv", "luv"): np_from_lch,
}


# ---------------------------------------------------------------------------
# Route resolution
# ---------------------------------------------------------------------------
def _hub_white(space: str, cfg: ConversionConfig) -> WhitePoint:
    """White of the XYZ a space reaches through its hub."""
    if space in DEVICE_SPACES:
        return cfg.resolved_working_space().white
    return cfg.resolved_white_point()


def _shared_params(space: str, cfg: ConversionConfig) -> tuple:
    """Parameters two colors of ``space`` must share to convert directly."""
    if space in DEVICE_SPACES:
        return (cfg.resolved_working_space(),)
    return (cfg.resolved_white_point().xyz,)


def _leg_params(space: str, cfg: ConversionConfig) -> tuple:
    """All parameters that affect a color of ``space``."""
    params = _shared_params(space, cfg)
    if space == "ycbcr":
        params += (cfg.resolved_ycbcr_model(),)
    elif space == "lms":
        params += (cfg.resolved_lms_model(),)
    return params


def conversion_path(
    from_space: str,
    to_space: str,
    config: ConversionConfig = DEFAULT_CONFIG,
    target_config: Optional[ConversionConfig] = None,
) -> Tuple[str, ...]:
    """
    Resolve the route between two spaces.

    Args:
        from_space: source space (alpha suffix allowed)
        to_space: target space (alpha suffix allowed)
        config: parameters of the source color
        target_config: parameters of the target color; defaults to ``config``

    Returns:
        Tuple of steps starting with the source space. ``"adapt"`` marks a
        chromatic adaptation of XYZ to the target's white.

    Examples:
        >>> conversion_path("hsv", "lab")
        ('hsv', 'rgb', 'xyz', 'lab')
    """
    fs, _ = split_alpha(from_space)
    ts, _ = split_alpha(to_space)
    src = config
    dst = target_config if target_config is not None else config

    if fs == ts and _leg_params(fs, src) == _leg_params(ts, dst):
        return (fs,)
    if (fs, ts) in CONVERT_NUMPY_DIRECT and _shared_params(fs, src) == _shared_params(ts, dst):
        return (fs, ts)

    path = [fs]
    if fs in DEVICE_SPACES:
        if fs != "rgb":
            path.append("rgb")
        same_space = src.resolved_working_space() == dst.resolved_working_space()
        if ts in DEVICE_SPACES and same_space:
            if ts != "rgb":
                path.append(ts)
            return tuple(path)
        path.append("xyz")
    elif fs != "xyz":
        path.append("xyz")

    if not _hub_white(fs, src).same_white(_hub_white(ts, dst)):
        path.append("adapt")

    if ts in DEVICE_SPACES:
        path.append("rgb")
        if ts != "rgb":
            path.append(ts)
    elif ts != "xyz":
        path.append(ts)
    return tuple(path)


def _run_step(
    current: str,
    step: str,
    color: np.ndarray,
    src: ConversionConfig,
    dst: ConversionConfig,
    whites: Tuple[WhitePoint, WhitePoint],
) -> np.ndarray:
    a, b, c = color[..., 0], color[..., 1], color[..., 2]
    if step == "adapt":
        method = dst.adaptation
        if method is None:
            raise ParameterMismatchError(
                f"Converting from white {whites[0]} to {whites[1]} requires chromatic "
                f"adaptation, but the target config disables it"
            )
        return np_chromatic_adapt(a, b, c, whites[0], whites[1], method)
    if (current, step) in CONVERT_NUMPY_DIRECT:
        return CONVERT_NUMPY_DIRECT[(current, step)](a, b, c)
    if current == "rgb" and step == "xyz":
        linear = np_decode_rgb(a, b, c, src.resolved_working_space())
        return np_rgb_to_xyz(linear[..., 0], linear[..., 1], linear[..., 2], src.resolved_working_space())
    if current == "xyz" and step == "rgb":
        linear = np_xyz_to_rgb(a, b, c, dst.resolved_working_space())
        return np_encode_rgb(linear[..., 0], linear[..., 1], linear[..., 2], dst.resolved_working_space())
    if step == "rgb":
        return TO_RGB[current](a, b, c, src)
    if current == "rgb":
        return FROM_RGB[step](a, b, c, dst)
    if step == "xyz":
        return TO_XYZ[current](a, b, c, src)
    if current == "xyz":
        return FROM_XYZ[step](a, b, c, dst)
    raise ValueError(f"No conversion step from {current} to {step}")


# ---------------------------------------------------------------------------
# Format handling
# ---------------------------------------------------------------------------
def normalize(color: np.ndarray, space: str, fmt: FormatType) -> np.ndarray:
    """Bring the unit channels of ``color`` from ``fmt`` into [0, 1]."""
    fmt = FormatType(fmt)
    if fmt == FormatType.FLOAT:
        return as_float_array(color)
    if space not in UNIT_SPACES:
        if fmt == FormatType.FLOAT32:
            return np.asarray(color, dtype=np.float32)
        raise ValueError(f"{space} channels are not unit-range; use a float format, got {fmt.value}")
    hue = HUE_INDEX.get(space)
    channels = [
        np.asarray(color[..., i], dtype=np.float32 if fmt == FormatType.FLOAT32 else np.float64)
        if i == hue else to_unit(np.asarray(color[..., i]), fmt)
        for i in range(3)
    ]
    return np.stack(channels, axis=-1)


def scale(color: np.ndarray, space: str, fmt: FormatType) -> np.ndarray:
    """Express the unit channels of ``color`` in ``fmt``."""
    fmt = FormatType(fmt)
    if fmt == FormatType.FLOAT:
        return color
    if space not in UNIT_SPACES:
        if fmt == FormatType.FLOAT32:
            return color.astype(np.float32)
        raise ValueError(f"{space} channels are not unit-range; use a float format, got {fmt.value}")
    hue = HUE_INDEX.get(space)
    if hue is None:
        return from_unit(color, fmt)
    channels = []
    for i in range(3):
        if i != hue:
            channels.append(from_unit(color[..., i], fmt))
        elif fmt in FIXED_POINT_FORMATS:
            channels.append(np.round(wrap_hue(color[..., i])) % 360)
        else:
            channels.append(color[..., i])
    dtype = np.int64 if fmt in FIXED_POINT_FORMATS else default_format_dtypes[fmt]
    return np.stack(channels, axis=-1).astype(dtype)


def convert_alpha(alpha: np.ndarray | None, input_fmt: FormatType, output_fmt: FormatType) -> np.ndarray | None:
    if alpha is None:
        return None
    return from_unit(to_unit(np.asarray(alpha), input_fmt), output_fmt)


def _convert_core(
    color: np.ndarray,
    from_space: str,
    to_space: str,
    input_fmt: FormatType,
    output_fmt: FormatType,
    config: ConversionConfig,
    target_config: Optional[ConversionConfig],
) -> np.ndarray:
    fs, has_alpha_in = split_alpha(from_space)
    ts, has_alpha_out = split_alpha(to_space)
    dst = target_config if target_config is not None else config

    if color.shape[-1] != 3 + has_alpha_in:
        raise ValueError(f"{from_space} expects last dimension {3 + has_alpha_in}, got shape {color.shape}")

    if has_alpha_in:
        base = color[..., :3]
        alpha = color[..., 3]
    else:
        base = color
        alpha = None

    # normalize → convert → scale
    converted = normalize(base, fs, input_fmt)
    path = conversion_path(fs, ts, config, dst)
    whites = (_hub_white(fs, config), _hub_white(ts, dst))
    current = path[0]
    for step in path[1:]:
        converted = _run_step(current, step, converted, config, dst, whites)
        current = "xyz" if step == "adapt" else step

    out = scale(converted, ts, output_fmt)

    if has_alpha_out:
        new_alpha = convert_alpha(alpha, input_fmt, output_fmt)
        if new_alpha is None:
            # Opaque alpha when the input had none
            new_alpha = from_unit(np.ones(out.shape[:-1]), output_fmt)
        return np.concatenate([out, np.asarray(new_alpha, dtype=out.dtype)[..., None]], axis=-1)
    return out


def convert(
    color: ColorElement,
    from_space: str,
    to_space: str,
    input_type: FormatType = FormatType.FLOAT,
    output_type: FormatType = FormatType.FLOAT,
    config: ConversionConfig = DEFAULT_CONFIG,
    target_config: Optional[ConversionConfig] = None,
) -> ColorElement:
    """
    Convert a single color.

    Args:
        color: channel tuple (three channels, four with alpha)
        from_space: source space, e.g. "rgb", "hsva", "lab"
        to_space: target space
        input_type: FormatType of the unit channels of ``color``
        output_type: FormatType of the unit channels of the result
        config: parameters of the source color
        target_config: parameters of the result; defaults to ``config``

    Returns:
        Tuple of Python numbers
    """
    color_array = element_to_array(color)
    result = _convert_core(
        color_array,
        from_space,
        to_space,
        FormatType(input_type),
        FormatType(output_type),
        config,
        target_config,
    )
    # Convert back to tuple for scalar output
    return tuple(result.tolist()) if result.ndim == 1 else cast(ColorElement, result)


def np_convert(
    color: np.ndarray,
    from_space: str,
    to_space: str,
    input_type: FormatType = FormatType.FLOAT,
    output_type: FormatType = FormatType.FLOAT,
    config: ConversionConfig = DEFAULT_CONFIG,
    target_config: Optional[ConversionConfig] = None,
) -> np.ndarray:
    """
    Convert an array of colors with the channels on the last axis.

    Float32 input stays float32 when both formats are floating.
    """
    return _convert_core(
        np.asarray(color),
        from_space,
        to_space,
        FormatType(input_type),
        FormatType(output_type),
        config,
        target_config,
    )
