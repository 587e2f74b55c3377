# No dependencies
from enum import Enum
import numpy as np


class FormatType(str, Enum):
    INT = "int"
    INT16 = "int16"
    FLOAT = "float"
    FLOAT32 = "float32"
    PERCENTAGE = "percentage"

max_non_hue = {
    FormatType.INT: 255,
    FormatType.INT16: 65535,
    FormatType.FLOAT: 1.0,
    FormatType.FLOAT32: 1.0,
    FormatType.PERCENTAGE: 100.0,
}

default_format_dtypes = {
    FormatType.INT: np.uint8,
    FormatType.INT16: np.uint16,
    FormatType.FLOAT: np.float64,
    FormatType.FLOAT32: np.float32,
    FormatType.PERCENTAGE: np.float64,
}

FIXED_POINT_FORMATS = frozenset({FormatType.INT, FormatType.INT16})

HUE_360 = 360.0
