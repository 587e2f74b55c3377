"""
Prismatica Color Space Conversions
==================================

Pure numeric transforms between color spaces, each in a scalar flavour
(tuple in, tuple out) and a vectorized numpy flavour (channel arrays in,
``(..., 3)`` array out).

Conversion Functions
--------------------

Hexcone models (``cylindrical``):
    rgb_to_hsv / hsv_to_rgb, rgb_to_hsl / hsl_to_rgb, rgb_to_hwb / hwb_to_rgb,
    hsv_to_hsl / hsl_to_hsv, hsv_to_hwb / hwb_to_hsv

Intensity models (``intensity``):
    rgb_to_hsi / hsi_to_rgb (with OutOfGamutMode), rgb_to_ehsi / ehsi_to_rgb,
    rgb_to_rgi / rgi_to_rgb

YCbCr (``ycbcr``):
    rgb_to_ycbcr / ycbcr_to_rgb, ycbcr_to_digital / digital_to_ycbcr

Tristimulus (``tristimulus``):
    rgb_to_xyz / xyz_to_rgb (linear RGB), decode_rgb / encode_rgb,
    xyz_to_xyy / xyy_to_xyz, xyz_to_lms / lms_to_xyz

CIE (``cie``):
    xyz_to_lab / lab_to_xyz, xyz_to_luv / luv_to_xyz,
    lab_to_lchab / lchab_to_lab, luv_to_lchuv / lchuv_to_luv

Every function above has an ``np_`` counterpart.

High-Level API
--------------
    convert(color, from_space, to_space, input_type, output_type, config, target_config)
        Universal single-color converter with format handling
    np_convert(...)
        Vectorized universal converter
    conversion_path(from_space, to_space, config, target_config)
        The route a conversion takes, e.g. ('hsv', 'rgb', 'xyz', 'lab')

Examples
--------
>>> from prismatica.conversions import rgb_to_hsv, convert
>>> rgb_to_hsv(1.0, 0.5, 0.0)
(30.0, 1.0, 1.0)
>>> convert((1.0, 1.0, 1.0), "rgb", "lab")   # doctest: +SKIP
(100.0, 0.0, 0.0)
"""

from .cylindrical import (
    rgb_to_hsv,
    np_rgb_to_hsv,
    hsv_to_rgb,
    np_hsv_to_rgb,
    rgb_to_hsl,
    np_rgb_to_hsl,
    hsl_to_rgb,
    np_hsl_to_rgb,
    rgb_to_hwb,
    np_rgb_to_hwb,
    hwb_to_rgb,
    np_hwb_to_rgb,
    hsv_to_hsl,
    np_hsv_to_hsl,
    hsl_to_hsv,
    np_hsl_to_hsv,
    hsv_to_hwb,
    np_hsv_to_hwb,
    hwb_to_hsv,
    np_hwb_to_hsv,
)
from .intensity import (
    rgb_to_hsi,
    np_rgb_to_hsi,
    hsi_to_rgb,
    np_hsi_to_rgb,
    rgb_to_ehsi,
    np_rgb_to_ehsi,
    ehsi_to_rgb,
    np_ehsi_to_rgb,
    rgb_to_rgi,
    np_rgb_to_rgi,
    rgi_to_rgb,
    np_rgi_to_rgb,
)
from .ycbcr import (
    rgb_to_ycbcr,
    np_rgb_to_ycbcr,
    ycbcr_to_rgb,
    np_ycbcr_to_rgb,
    ycbcr_to_digital,
    digital_to_ycbcr,
)
from .tristimulus import (
    rgb_to_xyz,
    np_rgb_to_xyz,
    xyz_to_rgb,
    np_xyz_to_rgb,
    decode_rgb,
    np_decode_rgb,
    encode_rgb,
    np_encode_rgb,
    xyz_to_xyy,
    np_xyz_to_xyy,
    xyy_to_xyz,
    np_xyy_to_xyz,
    xyz_to_lms,
    np_xyz_to_lms,
    lms_to_xyz,
    np_lms_to_xyz,
)
from .cie import (
    xyz_to_lab,
    np_xyz_to_lab,
    lab_to_xyz,
    np_lab_to_xyz,
    xyz_to_luv,
    np_xyz_to_luv,
    luv_to_xyz,
    np_luv_to_xyz,
    lab_to_lchab,
    np_lab_to_lchab,
    lchab_to_lab,
    np_lchab_to_lab,
    luv_to_lchuv,
    np_luv_to_lchuv,
    lchuv_to_luv,
    np_lchuv_to_luv,
)

# High-level API
from .wrapper import convert, np_convert, conversion_path

# Types and enums
from ..types.format_type import FormatType
from ..types.color_types import OutOfGamutMode

__all__ = [
    'rgb_to_hsv', 'np_rgb_to_hsv', 'hsv_to_rgb', 'np_hsv_to_rgb',
    'rgb_to_hsl', 'np_rgb_to_hsl', 'hsl_to_rgb', 'np_hsl_to_rgb',
    'rgb_to_hwb', 'np_rgb_to_hwb', 'hwb_to_rgb', 'np_hwb_to_rgb',
    'hsv_to_hsl', 'np_hsv_to_hsl', 'hsl_to_hsv', 'np_hsl_to_hsv',
    'hsv_to_hwb', 'np_hsv_to_hwb', 'hwb_to_hsv', 'np_hwb_to_hsv',

    'rgb_to_hsi', 'np_rgb_to_hsi', 'hsi_to_rgb', 'np_hsi_to_rgb',
    'rgb_to_ehsi', 'np_rgb_to_ehsi', 'ehsi_to_rgb', 'np_ehsi_to_rgb',
    'rgb_to_rgi', 'np_rgb_to_rgi', 'rgi_to_rgb', 'np_rgi_to_rgb',

    'rgb_to_ycbcr', 'np_rgb_to_ycbcr', 'ycbcr_to_rgb', 'np_ycbcr_to_rgb',
    'ycbcr_to_digital', 'digital_to_ycbcr',

    'rgb_to_xyz', 'np_rgb_to_xyz', 'xyz_to_rgb', 'np_xyz_to_rgb',
    'decode_rgb', 'np_decode_rgb', 'encode_rgb', 'np_encode_rgb',
    'xyz_to_xyy', 'np_xyz_to_xyy', 'xyy_to_xyz', 'np_xyy_to_xyz',
    'xyz_to_lms', 'np_xyz_to_lms', 'lms_to_xyz', 'np_lms_to_xyz',

    'xyz_to_lab', 'np_xyz_to_lab', 'lab_to_xyz', 'np_lab_to_xyz',
    'xyz_to_luv', 'np_xyz_to_luv', 'luv_to_xyz', 'np_luv_to_xyz',
    'lab_to_lchab', 'np_lab_to_lchab', 'lchab_to_lab', 'np_lchab_to_lab',
    'luv_to_lchuv', 'np_luv_to_lchuv', 'lchuv_to_luv', 'np_lchuv_to_luv',

    # High-level API
    'convert',
    'np_convert',
    'conversion_path',

    # Types
    'FormatType',
    'OutOfGamutMode',
]
