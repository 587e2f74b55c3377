"""
Prismatica Color Classes
========================

Immutable color values for every supported space, holding either a single
color or an array of colors together with the parameters (working space,
reference white, YCbCr/LMS model) that give the numbers meaning.

Features
--------
- Immutable color instances (frozen after initialization)
- Scalar colors (single color values) and array colors (batches)
- Per-channel domain policies: clamp, reject, hue wrap, or free
- Conversion between any two spaces, with chromatic adaptation when the
  reference whites differ
- Alpha channel support with the WithAlpha mixin

Scalar Usage
-----------
>>> from prismatica.colors.rgb import RGB
>>>
>>> color = RGB((1.0, 0.5, 0.0))
>>> color.value
(1.0, 0.5, 0.0)
>>> lab = color.convert("lab")          # white point inherited from sRGB (D65)
>>> lab_d50 = color.convert("lab", white_point="d50")   # Bradford adapted
>>> color.to_format("int")
(255, 128, 0)

Array Usage
-----------
>>> import numpy as np
>>> colors = RGB(np.array([[1.0, 0.5, 0.0], [0.2, 0.4, 0.6]]))
>>> colors.is_array
True
>>> hsv = colors.convert("hsv")

Color Classes
-------------
Device (parameter ``working_space``):
    ColorRGB, ColorRGBA, ColorRGI, ColorHSV, ColorHSVA, ColorHSL, ColorHSLA,
    ColorHSI, ColorEHSI, ColorHWB, ColorYCbCr (also ``ycbcr_model``)

CIE (parameter ``white_point``):
    ColorXYZ, ColorXYY, ColorLab, ColorLabA, ColorLuv, ColorLChab, ColorLChuv,
    ColorLMS (also ``lms_model``)

Notes
-----
- Conversion results outside the target's clamped domain emit GamutWarning
- Comparing or mixing colors with different parameters raises ParameterMismatchError
"""

from .color import color_convert, convert_color, get_color_class, unified_registry, with_alpha
from .color_base import ColorBase, WithAlpha
from .cie import ColorLab, ColorLabA, ColorLChab, ColorLChuv, ColorLMS, ColorLuv, ColorXYY, ColorXYZ
from .cylindrical import ColorEHSI, ColorHSI, ColorHSL, ColorHSLA, ColorHSV, ColorHSVA, ColorHWB
from .rgb import ColorRGB, ColorRGBA, ColorRGI
from .ycbcr import ColorYCbCr


__all__ = [
    'ColorBase',
    'WithAlpha',
    'color_convert',
    'convert_color',
    'get_color_class',
    'unified_registry',
    'with_alpha',
    'ColorRGB',
    'ColorRGBA',
    'ColorRGI',
    'ColorHSV',
    'ColorHSVA',
    'ColorHSL',
    'ColorHSLA',
    'ColorHSI',
    'ColorEHSI',
    'ColorHWB',
    'ColorYCbCr',
    'ColorXYZ',
    'ColorXYY',
    'ColorLMS',
    'ColorLab',
    'ColorLabA',
    'ColorLuv',
    'ColorLChab',
    'ColorLChuv',
]
