# creation.py
#
# Elementary transform matrices. Each one is a fresh copy of the identity with
# a handful of entries overwritten, in the column-major flattening used by CSS
# ``matrix3d()``.

import math
from numbers import Real
from typing import Optional

from numpy import arange as np_arange
from numpy import float64 as np_float64
from numpy import ndarray

from cssmatrix.errors import InvalidInputError

# preallocate the identity matrix; never handed out without a copy
_EYE16 = (np_arange(16) % 5 == 0).astype(np_float64)
_EYE16.setflags(write=False)


def _finite(value: Real, name: str) -> float:
    if isinstance(value, bool) or not isinstance(value, Real):
        raise InvalidInputError(
            f"{name} must be a real number, got {type(value).__name__}")
    try:
        value = float(value)
    except OverflowError:
        raise InvalidInputError(f"{name} must be finite") from None
    if not math.isfinite(value):
        raise InvalidInputError(f"{name} must be finite, got {value}")
    return value


def identity() -> ndarray:
    """
    Create a matrix representing no transformation.

    The product of any matrix with the identity is the original matrix.

    Returns:
        A (16,) float64 array, 1 where ``i % 5 == 0`` and 0 elsewhere.
    """
    return _EYE16.copy()


def perspective(distance: float) -> ndarray:
    """
    Create a matrix representing perspective.

    Args:
        distance: distance from the z=0 plane to the viewer. Must be non-zero.

    Returns:
        A (16,) float64 array.
    """
    distance = _finite(distance, "distance")
    if distance == 0.0:
        raise InvalidInputError("Perspective distance cannot be zero.")
    matrix = _EYE16.copy()
    matrix[11] = -1.0 / distance
    return matrix


def rotate(angle: float) -> ndarray:
    """Alias of `rotate_z`, for parity with CSS ``rotate()``."""
    return rotate_z(angle)


def rotate_x(angle: float) -> ndarray:
    """
    Create a matrix representing rotation about the X-axis.

    Args:
        angle: measured in degrees.
    """
    theta = math.radians(_finite(angle, "angle"))
    matrix = _EYE16.copy()
    matrix[5] = matrix[10] = math.cos(theta)
    matrix[6] = math.sin(theta)
    matrix[9] = -matrix[6]
    return matrix


def rotate_y(angle: float) -> ndarray:
    """
    Create a matrix representing rotation about the Y-axis.

    Args:
        angle: measured in degrees.
    """
    theta = math.radians(_finite(angle, "angle"))
    matrix = _EYE16.copy()
    matrix[0] = matrix[10] = math.cos(theta)
    matrix[8] = math.sin(theta)
    matrix[2] = -matrix[8]
    return matrix


def rotate_z(angle: float) -> ndarray:
    """
    Create a matrix representing rotation about the Z-axis.

    Args:
        angle: measured in degrees.
    """
    theta = math.radians(_finite(angle, "angle"))
    matrix = _EYE16.copy()
    matrix[0] = matrix[5] = math.cos(theta)
    matrix[1] = math.sin(theta)
    matrix[4] = -matrix[1]
    return matrix


def scale(scalar: float, scalar_y: Optional[float] = None) -> ndarray:
    """
    Create a matrix representing 2D scaling.

    The first argument scales both X and Y, unless `scalar_y` is given to
    scale Y on its own. A `scalar_y` of zero is honoured.

    Args:
        scalar: decimal multiplier.
        scalar_y: decimal multiplier for the Y-axis.

    Returns:
        A (16,) float64 array.
    """
    scalar = _finite(scalar, "scalar")
    matrix = _EYE16.copy()
    matrix[0] = scalar
    matrix[5] = scalar if scalar_y is None else _finite(scalar_y, "scalar_y")
    return matrix


def scale_x(scalar: float) -> ndarray:
    matrix = _EYE16.copy()
    matrix[0] = _finite(scalar, "scalar")
    return matrix


def scale_y(scalar: float) -> ndarray:
    matrix = _EYE16.copy()
    matrix[5] = _finite(scalar, "scalar")
    return matrix


def scale_z(scalar: float) -> ndarray:
    matrix = _EYE16.copy()
    matrix[10] = _finite(scalar, "scalar")
    return matrix


def skew(angle_x: float, angle_y: Optional[float] = None) -> ndarray:
    """
    Create a matrix representing shear.

    Args:
        angle_x: X-axis shear, measured in degrees.
        angle_y: Y-axis shear, measured in degrees. Left unsheared when None.

    Returns:
        A (16,) float64 array.
    """
    matrix = _EYE16.copy()
    matrix[4] = math.tan(math.radians(_finite(angle_x, "angle_x")))
    if angle_y is not None:
        matrix[1] = math.tan(math.radians(_finite(angle_y, "angle_y")))
    return matrix


def skew_x(angle: float) -> ndarray:
    """X-axis shear, `angle` in degrees."""
    matrix = _EYE16.copy()
    matrix[4] = math.tan(math.radians(_finite(angle, "angle")))
    return matrix


def skew_y(angle: float) -> ndarray:
    """Y-axis shear, `angle` in degrees."""
    matrix = _EYE16.copy()
    matrix[1] = math.tan(math.radians(_finite(angle, "angle")))
    return matrix


def translate(distance_x: float, distance_y: Optional[float] = None) -> ndarray:
    """
    Create a matrix representing 2D translation.

    Args:
        distance_x: X-axis translation.
        distance_y: Y-axis translation. No Y translation when None.

    Returns:
        A (16,) float64 array.
    """
    matrix = _EYE16.copy()
    matrix[12] = _finite(distance_x, "distance_x")
    if distance_y is not None:
        matrix[13] = _finite(distance_y, "distance_y")
    return matrix


def translate3d(
    distance_x: Optional[float] = None,
    distance_y: Optional[float] = None,
    distance_z: Optional[float] = None,
) -> ndarray:
    """
    Create a matrix representing 3D translation.

    All three distances are written only when all three are given; otherwise
    the identity is returned untouched.

    Args:
        distance_x: X-axis translation.
        distance_y: Y-axis translation.
        distance_z: Z-axis translation.

    Returns:
        A (16,) float64 array.
    """
    matrix = _EYE16.copy()
    if distance_x is not None and distance_y is not None and distance_z is not None:
        matrix[12] = _finite(distance_x, "distance_x")
        matrix[13] = _finite(distance_y, "distance_y")
        matrix[14] = _finite(distance_z, "distance_z")
    return matrix


def translate_x(distance: float) -> ndarray:
    matrix = _EYE16.copy()
    matrix[12] = _finite(distance, "distance")
    return matrix


def translate_y(distance: float) -> ndarray:
    matrix = _EYE16.copy()
    matrix[13] = _finite(distance, "distance")
    return matrix


def translate_z(distance: float) -> ndarray:
    matrix = _EYE16.copy()
    matrix[14] = _finite(distance, "distance")
    return matrix
