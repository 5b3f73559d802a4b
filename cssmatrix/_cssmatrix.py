# _cssmatrix.py
#
# Formatting, composition, inversion and text round-tripping of CSS transform
# matrices. A canonical matrix is a (16,) float64 array holding a 4x4 matrix in
# column-major order, the layout of CSS ``matrix3d()``.

import logging
import math
import re
from numbers import Real
from typing import List, Tuple, Union

from numpy import array as np_array
from numpy import asarray as np_asarray
from numpy import float64 as np_float64
from numpy import format_float_positional as np_format_float_positional
from numpy import format_float_scientific as np_format_float_scientific
from numpy import isfinite as np_isfinite
from numpy import ndarray

from cssmatrix.creation import _EYE16, identity
from cssmatrix.errors import (
    InvalidInputError,
    InvalidLengthError,
    MatrixError,
    MatrixParseError,
    SingularMatrixError,
)
from cssmatrix.math import det4, inv4, mul4

logger = logging.getLogger(__name__)

MatrixLike = Union[ndarray, List[float], Tuple[float, ...]]

SHORT_LENGTH = 6
LONG_LENGTH = 16
# canonical positions of a, b, c, d, tx, ty from the short form
SHORT_INDICES = (0, 1, 4, 5, 12, 13)
IDENTITY_KEYWORD = "none"

_MATRIX_PATTERN = re.compile(r"matrix(3d)?\(([^)]+)\)")
_SEPARATOR = re.compile(r"\s*,\s*")
# CSS <number>: no underscores, no inf or nan
_NUMBER_PATTERN = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?")


def format(source: MatrixLike) -> ndarray:
    """
    Bring a short or long form matrix into canonical long form.

    CSS transform matrices come in two flavors: ``matrix()`` with 6 values
    and ``matrix3d()`` with 16. Short values ``[a, b, c, d, tx, ty]`` land on
    indices 0, 1, 4, 5, 12 and 13 of an identity matrix.

    Args:
        source: list, tuple or 1-D array of 6 or 16 finite real numbers.

    Returns:
        A (16,) float64 array. A float64 array of length 16 is returned as-is.

    Raises:
        InvalidInputError: wrong container, non-real or non-finite values.
        InvalidLengthError: length is neither 6 nor 16.
    """
    if isinstance(source, ndarray):
        if source.ndim != 1:
            raise InvalidInputError(
                f"Expected a flat array, got shape {source.shape}")
        if source.dtype.kind not in "iuf":
            raise InvalidInputError(
                f"Expected a numeric array, got dtype {source.dtype}")
        matrix = np_asarray(source, dtype=np_float64)
    elif isinstance(source, (list, tuple)):
        for value in source:
            if isinstance(value, bool) or not isinstance(value, Real):
                raise InvalidInputError(
                    f"Expected real numbers, got {type(value).__name__}")
        try:
            matrix = np_array(source, dtype=np_float64)
        except OverflowError:
            raise InvalidInputError("Matrix values must be finite") from None
    else:
        raise InvalidInputError(
            f"Expected a list, tuple or array, got {type(source).__name__}")

    length = matrix.shape[0]
    if length != SHORT_LENGTH and length != LONG_LENGTH:
        raise InvalidLengthError(
            f"Expected {SHORT_LENGTH} or {LONG_LENGTH} values, got {length}")
    if not np_isfinite(matrix).all():
        raise InvalidInputError("Matrix values must be finite")

    if length == LONG_LENGTH:
        return matrix

    expanded = _EYE16.copy()
    expanded[list(SHORT_INDICES)] = matrix
    return expanded


def _finite_product(product: ndarray) -> ndarray:
    if not np_isfinite(product).all():
        raise InvalidInputError("Matrix product overflows a float")
    return product


def multiply(m: MatrixLike, x: MatrixLike) -> ndarray:
    """
    Combine two transforms into one.

    Order matters: `x` is applied first and `m` second, as with column
    vectors, ``multiply(m, x) @ v == m @ (x @ v)``. Rotating 45 degrees and
    then translating is not the same as translating and then rotating.

    Args:
        m: the outer transform, short or long form.
        x: the inner transform, short or long form.

    Returns:
        A (16,) float64 array holding ``m @ x``.
    """
    return _finite_product(mul4(format(m), format(x)))


def multiply_all(*matrices: MatrixLike) -> ndarray:
    """
    Fold `multiply` left to right over `matrices`.

    ``multiply_all(a, b, c)`` equals ``multiply(multiply(a, b), c)``, which is
    how a CSS transform list ``a b c`` composes. No arguments gives identity.
    """
    product = identity()
    for matrix in matrices:
        product = _finite_product(mul4(product, format(matrix)))
    return product


def determinant(source: MatrixLike) -> float:
    """Determinant of a short or long form matrix."""
    return float(det4(format(source)))


def inverse(source: MatrixLike) -> ndarray:
    """
    Create the matrix describing the inverse transformation of `source`.

    The product of a matrix with its inverse is the identity. Computed in
    closed form from the 2x2 sub-determinants of the matrix.

    Raises:
        SingularMatrixError: the determinant is zero, or the inverse does not
            fit in a float.
    """
    matrix = format(source)
    out, inv_det = inv4(matrix)
    # sub-determinants that overflow leave inv_det at 0 and the cofactors at nan
    if not math.isfinite(inv_det) or not np_isfinite(out).all():
        logger.debug("Refusing to invert singular matrix %s", matrix)
        raise SingularMatrixError("Matrix has no finite inverse.")
    return out


def _format_number(value: float) -> str:
    # -0.0 renders as "0"
    if value == 0.0:
        return "0"
    # exponent outside [1e-6, 1e21), like a browser prints numbers
    if abs(value) < 1e-6 or abs(value) >= 1e21:
        return np_format_float_scientific(value, trim="-", exp_digits=1)
    return np_format_float_positional(value, trim="-")


def to_string(source: MatrixLike) -> str:
    """
    Render a matrix as a CSS transform value.

    Always produces the long ``matrix3d(...)`` form, even for short input.

    Example:
        >>> to_string(scale(2))
        'matrix3d(2, 0, 0, 0, 0, 2, 0, 0, 0, 0, 1, 0, 0, 0, 0, 1)'
    """
    matrix = format(source)
    return f"matrix3d({', '.join(_format_number(v) for v in matrix)})"


def from_string(source: str) -> ndarray:
    """
    Parse a CSS ``matrix()`` or ``matrix3d()`` transform value.

    ``none`` and the empty string describe no transform and give identity.
    Values may be separated by ``", "`` as browsers emit them, or by bare
    commas.

    Args:
        source: the transform value, e.g. a computed ``transform`` style.

    Returns:
        A (16,) float64 array.

    Raises:
        InvalidInputError: `source` is not a string, or a value overflows a float.
        MatrixParseError: `source` holds no matrix value, or a value is not a number.
        InvalidLengthError: the matrix holds neither 6 nor 16 values.
    """
    if not isinstance(source, str):
        raise InvalidInputError(
            f"Expected a string, got {type(source).__name__}")
    text = source.strip()
    if not text or text.lower() == IDENTITY_KEYWORD:
        return identity()

    match = _MATRIX_PATTERN.search(text)
    if match is None:
        raise MatrixParseError(f"Not a matrix transform value: {source!r}")

    values = []
    for token in _SEPARATOR.split(match.group(2).strip()):
        if _NUMBER_PATTERN.fullmatch(token) is None:
            raise MatrixParseError(f"Invalid number {token!r} in {source!r}")
        values.append(float(token))
    return format(values)


def from_string_or_identity(source: str) -> ndarray:
    """
    Lenient `from_string`: anything it rejects resolves to identity.

    Suited to reading whatever a host environment reports, where an
    unexpected value should mean "no transform" rather than an error.
    """
    try:
        return from_string(source)
    except MatrixError as error:
        logger.debug("Falling back to identity: %s", error)
        return identity()


def round_significant(source: MatrixLike, digits: int = 6) -> ndarray:
    """
    Round every entry to `digits` significant digits.

    Useful when comparing against a browser's computed style, whose sine,
    cosine and tangent round differently in the last few digits.
    """
    if digits < 1:
        raise ValueError(f"digits must be at least 1, got {digits}")
    matrix = format(source)
    return np_array([float(f"{v:.{digits}g}") for v in matrix], dtype=np_float64)


def is_2d(source: MatrixLike) -> bool:
    """True when the matrix can be written in the short ``matrix()`` form."""
    matrix = format(source)
    for i in range(LONG_LENGTH):
        if i not in SHORT_INDICES and matrix[i] != _EYE16[i]:
            return False
    return True


def to_short(source: MatrixLike) -> Tuple[float, ...]:
    """
    Short form ``(a, b, c, d, tx, ty)`` of a 2D matrix.

    Raises:
        InvalidInputError: the matrix carries 3D or perspective components.
    """
    matrix = format(source)
    if not is_2d(matrix):
        raise InvalidInputError("Matrix has no short form; it is not 2D")
    return tuple(float(matrix[i]) for i in SHORT_INDICES)

