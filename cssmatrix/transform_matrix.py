import numpy as np
from numpy import array as np_array
from numpy import asarray as np_asarray
from numpy import float64 as np_float64
from numpy import ndarray
from typing import Iterator, Optional, Union

from cssmatrix import creation
from cssmatrix._cssmatrix import MatrixLike, format, from_string, inverse, multiply, to_string
from cssmatrix.errors import InvalidInputError


class TransformMatrix:
    """
    An immutable CSS transform matrix.

    Wraps one canonical (16,) float64 array, column-major like ``matrix3d()``.
    Composition with ``@`` follows `multiply`: ``a @ b`` applies ``b`` first.
    """
    __slots__ = ('_values',)
    # make numpy defer `ndarray @ TransformMatrix` to __rmatmul__
    __array_ufunc__ = None

    def __init__(self, source: Optional[MatrixLike] = None):
        if source is None:
            values = creation.identity()
        else:
            values = np_array(format(source), dtype=np_float64)
        values.setflags(write=False)
        self._values = values

    @classmethod
    def from_unsafe(cls, values: ndarray) -> 'TransformMatrix':
        """Wrap a fresh canonical array without formatting or copying it.

        Args:
            values (np.ndarray): (16,) float64 array owned by nobody else.

        Returns:
            TransformMatrix: An instance viewing `values`, now read-only.
        """
        instance = object.__new__(cls)
        values.setflags(write=False)
        instance._values = values
        return instance

    @classmethod
    def identity(cls) -> 'TransformMatrix':
        """Create an identity transform."""
        return cls.from_unsafe(creation.identity())

    @classmethod
    def from_string(cls, source: str) -> 'TransformMatrix':
        """Parse a ``matrix()``, ``matrix3d()`` or ``none`` CSS value."""
        return cls.from_unsafe(from_string(source))

    @classmethod
    def from_array(cls, matrix: ndarray) -> 'TransformMatrix':
        """
        Create a transform from a 4x4 array indexed ``[row, column]``.

        Args:
            matrix: 4x4 array-like of finite numbers.

        Returns:
            TransformMatrix: the same matrix in CSS column-major order.
        """
        matrix = np_asarray(matrix)
        if matrix.shape != (4, 4):
            raise InvalidInputError(
                f"Matrix must be 4x4, got {matrix.shape}")
        return cls(matrix.flatten(order="F"))

    @classmethod
    def translate(cls, distance_x: float, distance_y: Optional[float] = None) -> 'TransformMatrix':
        return cls.from_unsafe(creation.translate(distance_x, distance_y))

    @classmethod
    def translate3d(cls, distance_x: float, distance_y: float, distance_z: float) -> 'TransformMatrix':
        return cls.from_unsafe(creation.translate3d(distance_x, distance_y, distance_z))

    @classmethod
    def scale(cls, scalar: float, scalar_y: Optional[float] = None) -> 'TransformMatrix':
        return cls.from_unsafe(creation.scale(scalar, scalar_y))

    @classmethod
    def rotate(cls, angle: float) -> 'TransformMatrix':
        return cls.from_unsafe(creation.rotate(angle))

    @classmethod
    def rotate_x(cls, angle: float) -> 'TransformMatrix':
        return cls.from_unsafe(creation.rotate_x(angle))

    @classmethod
    def rotate_y(cls, angle: float) -> 'TransformMatrix':
        return cls.from_unsafe(creation.rotate_y(angle))

    @classmethod
    def rotate_z(cls, angle: float) -> 'TransformMatrix':
        return cls.from_unsafe(creation.rotate_z(angle))

    @classmethod
    def skew(cls, angle_x: float, angle_y: Optional[float] = None) -> 'TransformMatrix':
        return cls.from_unsafe(creation.skew(angle_x, angle_y))

    @classmethod
    def perspective(cls, distance: float) -> 'TransformMatrix':
        return cls.from_unsafe(creation.perspective(distance))

    @property
    def values(self) -> ndarray:
        """
        Get the canonical values.

        Returns:
            The read-only (16,) float64 array, column-major.
        """
        return self._values

    def to_array(self) -> ndarray:
        """
        Get the matrix as a writable 4x4 array indexed ``[row, column]``.
        """
        return self._values.reshape((4, 4), order="F").copy()

    def to_string(self) -> str:
        """The CSS ``matrix3d(...)`` value of this transform."""
        return to_string(self._values)

    def inverse(self) -> 'TransformMatrix':
        """Return the inverse of this transform."""
        return TransformMatrix.from_unsafe(inverse(self._values))

    def then(self, other: Union['TransformMatrix', MatrixLike]) -> 'TransformMatrix':
        """Apply `other` after this transform, i.e. ``other @ self``."""
        return TransformMatrix.from_unsafe(multiply(_values_of(other), self._values))

    def transform_point(self, x: float, y: float, z: float = 0.0) -> ndarray:
        """
        Apply this transform to a point, dividing through by w.

        Returns:
            The transformed point as a (3,) float64 array.

        Raises:
            ZeroDivisionError: the projective w coordinate is zero.
        """
        ph = self.to_array() @ np_array([x, y, z, 1.0], dtype=np_float64)
        if ph[3] == 0.0:
            raise ZeroDivisionError("projective w coordinate is zero")
        return ph[:3] / ph[3]

    def isclose(self, other: Union['TransformMatrix', MatrixLike], atol: float = 1e-9) -> bool:
        """Element-wise comparison within an absolute tolerance."""
        return bool(np.allclose(self._values, _values_of(other), rtol=0.0, atol=atol))

    def __matmul__(self, other: Union['TransformMatrix', MatrixLike]) -> 'TransformMatrix':
        return TransformMatrix.from_unsafe(multiply(self._values, _values_of(other)))

    def __rmatmul__(self, other: MatrixLike) -> 'TransformMatrix':
        return TransformMatrix.from_unsafe(multiply(_values_of(other), self._values))

    def __iter__(self) -> Iterator[float]:
        return iter(self._values.tolist())

    def __len__(self) -> int:
        return len(self._values)

    def __getitem__(self, index):
        return self._values[index]

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self._values.tolist()})"

    def __str__(self) -> str:
        return self.to_string()

    def __eq__(self, other: object) -> bool:
        if isinstance(other, TransformMatrix):
            return np.array_equal(self._values, other._values)
        elif isinstance(other, ndarray):
            return np.array_equal(self._values, other)
        return NotImplemented

    def __hash__(self) -> int:
        return hash(tuple(self._values.tolist()))


def _values_of(other: Union[TransformMatrix, MatrixLike]) -> ndarray:
    if isinstance(other, TransformMatrix):
        return other._values
    return format(other)
