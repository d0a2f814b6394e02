"""Fixed-arity vector value types.

Vector3 is used both for points and for directions; the caller decides which
one a value means. Vector4 is the homogeneous form used when a point or
direction has to meet a Matrix4.

Example:
    >>> from raysphere.core.vector import Vector3
    >>> a = Vector3(1.0, 0.0, 0.0)
    >>> b = Vector3(0.0, 1.0, 0.0)
    >>> a.cross(b)
    Vector3(x=0.0, y=0.0, z=1.0)
"""

from __future__ import annotations

import math
from collections.abc import Iterator
from dataclasses import dataclass

import numpy as np
import numpy.typing as npt

from raysphere.core.constants import ABS_TOL, REL_TOL
from raysphere.core.errors import InvalidDirectionError


def _check_shape(array: npt.ArrayLike, size: int) -> npt.NDArray[np.float64]:
    arr = np.asarray(array, dtype=np.float64)
    if arr.shape != (size,):
        raise ValueError(f"Expected an array of shape ({size},), got {arr.shape}")
    return arr


@dataclass(frozen=True)
class Vector3:
    """An immutable 3-component vector of 64-bit floats.

    Attributes:
        x: First component.
        y: Second component.
        z: Third component.
    """

    x: float
    y: float
    z: float

    # NumPy scalars defer to __rmul__ instead of converting the vector to an array
    __array_ufunc__ = None

    def __post_init__(self) -> None:
        # Coerce ints and numpy scalars so equality and hashing are by float value.
        object.__setattr__(self, "x", float(self.x))
        object.__setattr__(self, "y", float(self.y))
        object.__setattr__(self, "z", float(self.z))

    @classmethod
    def zero(cls) -> Vector3:
        return cls(0.0, 0.0, 0.0)

    @classmethod
    def unit_x(cls) -> Vector3:
        return cls(1.0, 0.0, 0.0)

    @classmethod
    def unit_y(cls) -> Vector3:
        return cls(0.0, 1.0, 0.0)

    @classmethod
    def unit_z(cls) -> Vector3:
        return cls(0.0, 0.0, 1.0)

    @classmethod
    def from_array(cls, array: npt.ArrayLike) -> Vector3:
        """Build a vector from any array-like of shape (3,).

        Raises:
            ValueError: If the input does not have exactly three components.
        """
        arr = _check_shape(array, 3)
        return cls(arr[0], arr[1], arr[2])

    def to_array(self) -> npt.NDArray[np.float64]:
        return np.array([self.x, self.y, self.z], dtype=np.float64)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def __getitem__(self, index: int) -> float:
        return (self.x, self.y, self.z)[index]

    def __len__(self) -> int:
        return 3

    def __add__(self, other: Vector3) -> Vector3:
        if not isinstance(other, Vector3):
            return NotImplemented
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vector3) -> Vector3:
        if not isinstance(other, Vector3):
            return NotImplemented
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __neg__(self) -> Vector3:
        return Vector3(-self.x, -self.y, -self.z)

    def __mul__(self, scalar: float) -> Vector3:
        if not isinstance(scalar, (int, float, np.floating, np.integer)):
            return NotImplemented
        return Vector3(self.x * scalar, self.y * scalar, self.z * scalar)

    def __rmul__(self, scalar: float) -> Vector3:
        return self.__mul__(scalar)

    def __truediv__(self, scalar: float) -> Vector3:
        if not isinstance(scalar, (int, float, np.floating, np.integer)):
            return NotImplemented
        return Vector3(self.x / scalar, self.y / scalar, self.z / scalar)

    def dot(self, other: Vector3) -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: Vector3) -> Vector3:
        return Vector3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def length_squared(self) -> float:
        return self.dot(self)

    def length(self) -> float:
        return math.sqrt(self.length_squared())

    def normalize(self) -> Vector3:
        """Return a unit vector in the same direction.

        Raises:
            InvalidDirectionError: If the vector has zero length or is not finite.
        """
        if not self.is_finite():
            raise InvalidDirectionError(f"Cannot normalize non-finite vector {self}")
        largest = self.max_abs()
        if largest == 0.0:
            raise InvalidDirectionError("Cannot normalize a zero-length vector")
        # Scale to unit max component first so length() neither underflows nor overflows
        scaled = self / largest
        return scaled / scaled.length()

    def max_abs(self) -> float:
        """The largest absolute component (the infinity norm)."""
        return max(abs(self.x), abs(self.y), abs(self.z))

    def is_finite(self) -> bool:
        return math.isfinite(self.x) and math.isfinite(self.y) and math.isfinite(self.z)

    def is_close(
        self, other: Vector3, *, rel_tol: float = REL_TOL, abs_tol: float = ABS_TOL
    ) -> bool:
        """Component-wise math.isclose()."""
        if not isinstance(other, Vector3):
            raise TypeError(f"Cannot compare Vector3 with {type(other).__name__}")
        return all(
            math.isclose(a, b, rel_tol=rel_tol, abs_tol=abs_tol)
            for a, b in zip(self, other)
        )


@dataclass(frozen=True)
class Vector4:
    """An immutable homogeneous 4-vector of 64-bit floats.

    Points carry w=1 and take part in translation; directions carry w=0
    and do not.
    """

    x: float
    y: float
    z: float
    w: float

    __array_ufunc__ = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "x", float(self.x))
        object.__setattr__(self, "y", float(self.y))
        object.__setattr__(self, "z", float(self.z))
        object.__setattr__(self, "w", float(self.w))

    @classmethod
    def from_point(cls, v: Vector3) -> Vector4:
        return cls(v.x, v.y, v.z, 1.0)

    @classmethod
    def from_direction(cls, v: Vector3) -> Vector4:
        return cls(v.x, v.y, v.z, 0.0)

    @classmethod
    def from_array(cls, array: npt.ArrayLike) -> Vector4:
        arr = _check_shape(array, 4)
        return cls(arr[0], arr[1], arr[2], arr[3])

    @property
    def xyz(self) -> Vector3:
        """The first three components, dropping w."""
        return Vector3(self.x, self.y, self.z)

    def to_array(self) -> npt.NDArray[np.float64]:
        return np.array([self.x, self.y, self.z, self.w], dtype=np.float64)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z
        yield self.w

    def __getitem__(self, index: int) -> float:
        return (self.x, self.y, self.z, self.w)[index]

    def __len__(self) -> int:
        return 4

    def __add__(self, other: Vector4) -> Vector4:
        if not isinstance(other, Vector4):
            return NotImplemented
        return Vector4(self.x + other.x, self.y + other.y, self.z + other.z, self.w + other.w)

    def __sub__(self, other: Vector4) -> Vector4:
        if not isinstance(other, Vector4):
            return NotImplemented
        return Vector4(self.x - other.x, self.y - other.y, self.z - other.z, self.w - other.w)

    def __neg__(self) -> Vector4:
        return Vector4(-self.x, -self.y, -self.z, -self.w)

    def __mul__(self, scalar: float) -> Vector4:
        if not isinstance(scalar, (int, float, np.floating, np.integer)):
            return NotImplemented
        return Vector4(self.x * scalar, self.y * scalar, self.z * scalar, self.w * scalar)

    def __rmul__(self, scalar: float) -> Vector4:
        return self.__mul__(scalar)

    def __truediv__(self, scalar: float) -> Vector4:
        if not isinstance(scalar, (int, float, np.floating, np.integer)):
            return NotImplemented
        return Vector4(self.x / scalar, self.y / scalar, self.z / scalar, self.w / scalar)

    def dot(self, other: Vector4) -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z + self.w * other.w

    def length(self) -> float:
        return math.sqrt(self.dot(self))

    def is_close(
        self, other: Vector4, *, rel_tol: float = REL_TOL, abs_tol: float = ABS_TOL
    ) -> bool:
        if not isinstance(other, Vector4):
            raise TypeError(f"Cannot compare Vector4 with {type(other).__name__}")
        return all(
            math.isclose(a, b, rel_tol=rel_tol, abs_tol=abs_tol)
            for a, b in zip(self, other)
        )
