# errors.py


class MatrixError(Exception):
    """Base class for every error raised by cssmatrix."""


class InvalidInputError(MatrixError, TypeError):
    """
    The argument is not a flat sequence of finite real numbers.

    Raised for the wrong container type (dict, str, scalar, 2-D array), for
    non-real elements, and for NaN or infinite values.
    """


class InvalidLengthError(MatrixError, ValueError):
    """The numeric sequence holds neither 6 nor 16 values."""


class SingularMatrixError(MatrixError, ZeroDivisionError):
    """The matrix has no inverse because its determinant is zero."""


class MatrixParseError(MatrixError, ValueError):
    """The text is not a ``matrix(...)`` or ``matrix3d(...)`` value."""
