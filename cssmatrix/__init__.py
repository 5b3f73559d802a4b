"""
cssmatrix: 2D and 3D CSS transform matrices, with a focus on exact compatibility with the
``matrix()`` and ``matrix3d()`` values browsers compute.

Matrices are (16,) float64 numpy arrays in column-major order. The 6-value short form of
``matrix()`` is accepted everywhere a matrix is.
"""

__version__ = version = "0.1.0"

import logging

# exposing the public API of the package
from cssmatrix._cssmatrix import (
    determinant,
    format,
    from_string,
    from_string_or_identity,
    inverse,
    is_2d,
    multiply,
    multiply_all,
    round_significant,
    to_short,
    to_string,
)
from cssmatrix.creation import (
    identity,
    perspective,
    rotate,
    rotate_x,
    rotate_y,
    rotate_z,
    scale,
    scale_x,
    scale_y,
    scale_z,
    skew,
    skew_x,
    skew_y,
    translate,
    translate3d,
    translate_x,
    translate_y,
    translate_z,
)
from cssmatrix.errors import (
    InvalidInputError,
    InvalidLengthError,
    MatrixError,
    MatrixParseError,
    SingularMatrixError,
)
from cssmatrix.transform_matrix import TransformMatrix

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "determinant",
    "format",
    "from_string",
    "from_string_or_identity",
    "identity",
    "inverse",
    "is_2d",
    "multiply",
    "multiply_all",
    "perspective",
    "rotate",
    "rotate_x",
    "rotate_y",
    "rotate_z",
    "round_significant",
    "scale",
    "scale_x",
    "scale_y",
    "scale_z",
    "skew",
    "skew_x",
    "skew_y",
    "to_short",
    "to_string",
    "translate",
    "translate3d",
    "translate_x",
    "translate_y",
    "translate_z",
    "TransformMatrix",
    "InvalidInputError",
    "InvalidLengthError",
    "MatrixError",
    "MatrixParseError",
    "SingularMatrixError",
]
