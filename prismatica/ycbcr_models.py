"""
YCbCr model registry.

A model is the 3x3 matrix taking encoded RGB to (luma, chroma, chroma);
its inverse is computed once on construction.
"""
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Dict, Tuple, Union
import numpy as np

from .errors import DomainError
from .linalg import Matrix3, as_matrix, invert3


@dataclass(frozen=True, eq=False)
class YCbCrModel:
    name: str
    forward: Matrix3 = field(repr=False)
    chroma_range: Tuple[float, float] = (0.5, 0.5)
    inverse: Matrix3 = field(init=False, repr=False)

    def __post_init__(self):
        object.__setattr__(self, "forward", as_matrix(self.forward))
        object.__setattr__(self, "inverse", invert3(self.forward))

    def __eq__(self, other):
        if not isinstance(other, YCbCrModel):
            return NotImplemented
        return bool(np.array_equal(self.forward, other.forward))

    def __hash__(self):
        return hash(self.forward.tobytes())

    def __str__(self) -> str:
        return self.name

    @classmethod
    def from_coefficients(cls, kr: float, kb: float, name: str = "custom") -> "YCbCrModel":
        """
        Build a model from its red and blue luma weights.

        Args:
            kr: weight of red in luma
            kb: weight of blue in luma; green gets ``1 - kr - kb``

        Raises:
            DomainError: If the weights are not positive or sum to 1 or more
        """
        if kr <= 0 or kb <= 0 or kr + kb >= 1:
            raise DomainError(f"Invalid luma coefficients kr={kr}, kb={kb}")
        kg = 1.0 - kr - kb
        forward = [
            [kr, kg, kb],
            [-0.5 * kr / (1.0 - kb), -0.5 * kg / (1.0 - kb), 0.5],
            [0.5, -0.5 * kg / (1.0 - kr), -0.5 * kb / (1.0 - kr)],
        ]
        return cls(name, forward)


_YIQ_FORWARD = [
    [0.299, 0.587, 0.114],
    [0.595716, -0.274453, -0.321263],
    [0.211456, -0.522591, 0.311135],
]

YCBCR_MODELS: Dict[str, YCbCrModel] = {
    "jpeg": YCbCrModel.from_coefficients(0.299, 0.114, "jpeg"),
    "bt601": YCbCrModel.from_coefficients(0.299, 0.114, "bt601"),
    "bt709": YCbCrModel.from_coefficients(0.2126, 0.0722, "bt709"),
    "bt2020": YCbCrModel.from_coefficients(0.2627, 0.0593, "bt2020"),
    "yiq": YCbCrModel("yiq", _YIQ_FORWARD, chroma_range=(0.5957, 0.5226)),
}

YCbCrModelLike = Union[str, YCbCrModel]


def get_ycbcr_model(model: YCbCrModelLike) -> YCbCrModel:
    """
    Look up a YCbCr model by name; YCbCrModel instances are returned as is.

    Raises:
        ValueError: If the name is unknown
    """
    if isinstance(model, YCbCrModel):
        return model
    key = str(model).strip().lower().replace(".", "").replace("-", "").replace("_", "")
    key = {"rec601": "bt601", "rec709": "bt709", "rec2020": "bt2020"}.get(key, key)
    try:
        return YCBCR_MODELS[key]
    except KeyError:
        raise ValueError(
            f"Unknown YCbCr model: {model!r}. Known: {', '.join(YCBCR_MODELS)}"
        ) from None
