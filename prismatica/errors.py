"""
Exceptions and warnings raised by prismatica.

Every error derives from :class:`ColorError`. The concrete classes also
derive from the builtin they refine, so callers that only catch
``ValueError`` keep working.
"""


class ColorError(Exception):
    """Base class for all prismatica errors."""


class DomainError(ColorError, ValueError):
    """A channel value lies outside the domain its color type accepts."""


class ParameterMismatchError(ColorError, ValueError):
    """Two values or a value and a conversion disagree on their parameters.

    Raised when converting between different reference whites with
    adaptation disabled, or when mixing/comparing values whose working
    space, white point or model differ.
    """


class DegenerateMatrixError(ColorError, ArithmeticError):
    """A 3x3 matrix built from primaries or coefficients is not invertible."""


class GamutWarning(UserWarning):
    """A converted value fell outside the target domain and was clamped."""
