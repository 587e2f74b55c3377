"""Prismatica: color spaces and the conversions between them."""

from .colors import (
    ColorBase,
    ColorEHSI,
    ColorHSI,
    ColorHSL,
    ColorHSLA,
    ColorHSV,
    ColorHSVA,
    ColorHWB,
    ColorLab,
    ColorLabA,
    ColorLChab,
    ColorLChuv,
    ColorLMS,
    ColorLuv,
    ColorRGB,
    ColorRGBA,
    ColorRGI,
    ColorXYY,
    ColorXYZ,
    ColorYCbCr,
    convert_color,
    get_color_class,
)
from .adaptation import adaptation_matrix, chromatic_adapt, np_chromatic_adapt
from .config import DEFAULT_CONFIG, ConversionConfig
from .conversions import convert, np_convert, conversion_path
from .errors import ColorError, DegenerateMatrixError, DomainError, GamutWarning, ParameterMismatchError
from .types.color_types import ColorSpace, OutOfGamutMode
from .types.format_type import FormatType
from .white_points import WHITE_POINTS, WhitePoint, get_white_point
from .working_spaces import WORKING_SPACES, WorkingSpace, get_working_space
from .ycbcr_models import YCBCR_MODELS, YCbCrModel, get_ycbcr_model

__all__ = [
    # Colors
    'ColorBase',
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
    'convert_color',
    'get_color_class',
    # Conversions
    'convert',
    'np_convert',
    'conversion_path',
    'chromatic_adapt',
    'np_chromatic_adapt',
    'adaptation_matrix',
    # Configuration & registries
    'ConversionConfig',
    'DEFAULT_CONFIG',
    'ColorSpace',
    'FormatType',
    'OutOfGamutMode',
    'WhitePoint',
    'WHITE_POINTS',
    'get_white_point',
    'WorkingSpace',
    'WORKING_SPACES',
    'get_working_space',
    'YCbCrModel',
    'YCBCR_MODELS',
    'get_ycbcr_model',
    # Errors
    'ColorError',
    'DomainError',
    'ParameterMismatchError',
    'DegenerateMatrixError',
    'GamutWarning',
]
