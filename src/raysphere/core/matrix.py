"""Small square matrices of 64-bit floats.

Matrix3 and Matrix4 wrap a read-only NumPy array whose shape is fixed by the
class, so a Matrix3 can only ever meet a Vector3 or another Matrix3. Mixing
sizes raises TypeError instead of silently broadcasting.

Example:
    >>> from raysphere.core.matrix import Matrix3
    >>> from raysphere.core.vector import Vector3
    >>> m = Matrix3([[2, 0, 0], [0, 2, 0], [0, 0, 2]])
    >>> m @ Vector3(1, 2, 3)
    Vector3(x=2.0, y=4.0, z=6.0)
"""

from __future__ import annotations

from typing import ClassVar

import numpy as np
import numpy.typing as npt

from raysphere.core.constants import ABS_TOL, REL_TOL
from raysphere.core.errors import SingularMatrixError
from raysphere.core.vector import Vector3, Vector4


class _SquareMatrix:
    """Shared storage and algebra for the fixed-size matrix types."""

    __slots__ = ("_m",)

    _size: ClassVar[int]
    _vector_type: ClassVar[type]

    def __init__(self, rows: npt.ArrayLike) -> None:
        m = np.array(rows, dtype=np.float64)
        if m.shape != (self._size, self._size):
            raise ValueError(
                f"{type(self).__name__} requires shape ({self._size}, {self._size}), "
                f"got {m.shape}"
            )
        m.setflags(write=False)
        self._m = m

    @classmethod
    def identity(cls):
        return cls(np.identity(cls._size, dtype=np.float64))

    def to_array(self) -> npt.NDArray[np.float64]:
        """Return a writable copy of the underlying array."""
        return self._m.copy()

    def row(self, i: int):
        return self._vector_type.from_array(self._m[i, :])

    def column(self, j: int):
        return self._vector_type.from_array(self._m[:, j])

    def __getitem__(self, index: tuple[int, int]) -> float:
        return float(self._m[index])

    def __matmul__(self, other):
        if type(other) is type(self):
            return type(self)(self._m @ other._m)
        if isinstance(other, self._vector_type):
            return self._vector_type.from_array(self._m @ other.to_array())
        return NotImplemented

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return bool(np.array_equal(self._m, other._m))

    def __hash__(self) -> int:
        return hash((type(self).__name__, self._m.tobytes()))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._m.tolist()!r})"

    def transpose(self):
        return type(self)(self._m.T)

    def determinant(self) -> float:
        return float(np.linalg.det(self._m))

    def inverse(self):
        """Return the matrix inverse.

        Raises:
            SingularMatrixError: If the matrix is singular or its inverse is
                not finite.
        """
        # No determinant test: det() underflows for small but invertible matrices
        try:
            inv = np.linalg.inv(self._m)
        except np.linalg.LinAlgError as exc:
            raise SingularMatrixError(f"{type(self).__name__} is singular: {exc}") from exc
        if not np.isfinite(inv).all():
            raise SingularMatrixError(f"{type(self).__name__} has a non-finite inverse")
        return type(self)(inv)

    def inverse_transpose(self):
        """(M^-1)^T, the matrix that carries surface normals."""
        return self.inverse().transpose()

    def is_close(self, other, *, rel_tol: float = REL_TOL, abs_tol: float = ABS_TOL) -> bool:
        if type(other) is not type(self):
            raise TypeError(
                f"Cannot compare {type(self).__name__} with {type(other).__name__}"
            )
        return bool(np.allclose(self._m, other._m, rtol=rel_tol, atol=abs_tol))


class Matrix3(_SquareMatrix):
    """An immutable 3x3 matrix. Multiplies Vector3 and Matrix3."""

    __slots__ = ()
    _size = 3
    _vector_type = Vector3


class Matrix4(_SquareMatrix):
    """An immutable 4x4 matrix. Multiplies Vector4 and Matrix4."""

    __slots__ = ()
    _size = 4
    _vector_type = Vector4

    def upper_left(self) -> Matrix3:
        """The 3x3 linear block."""
        return Matrix3(self._m[:3, :3])
