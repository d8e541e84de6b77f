"""
Vector3 class for 3D math operations.

This is the fundamental building block of the ray tracer, used for:
- Points in 3D space
- Direction vectors
- RGB color values

Components are stored as float64 so degenerate cases (normalizing the zero
vector, dividing by zero) propagate inf/nan instead of raising.
"""

from __future__ import annotations
import math
import operator
from numbers import Real
from typing import Iterator, Optional, Union
import numpy as np


class Vec3:
    """A 3D vector class supporting common vector operations.

    Uses numpy internally for efficient computation while providing
    a clean, Pythonic API. ``*`` between two vectors is the elementwise
    product; use :func:`dot` and :func:`cross` for the others.
    """

    __slots__ = ('_data',)

    # Make numpy scalars on the left of an operator defer to our reflected ops
    __array_ufunc__ = None

    def __init__(self, x: float = 0.0, y: Optional[float] = None, z: Optional[float] = None):
        if y is None and z is None:
            self._data = np.full(3, x, dtype=np.float64)
        elif y is None or z is None:
            raise TypeError("Vec3 takes 0, 1 or 3 components")
        else:
            self._data = np.array([x, y, z], dtype=np.float64)

    @classmethod
    def from_array(cls, arr) -> Vec3:
        """Create Vec3 from a length-3 array-like (the data is copied)."""
        return cls._wrap(np.array(arr, dtype=np.float64).reshape(3))

    @classmethod
    def _wrap(cls, data: np.ndarray) -> Vec3:
        v = cls.__new__(cls)
        v._data = data
        return v

    @property
    def x(self) -> float:
        return float(self._data[0])

    @property
    def y(self) -> float:
        return float(self._data[1])

    @property
    def z(self) -> float:
        return float(self._data[2])

    # Aliases for color operations
    @property
    def r(self) -> float:
        return self.x

    @property
    def g(self) -> float:
        return self.y

    @property
    def b(self) -> float:
        return self.z

    def __repr__(self) -> str:
        return f"Vec3({self.x!r}, {self.y!r}, {self.z!r})"

    def __str__(self) -> str:
        return f"(x:{self.x:g} y:{self.y:g} z:{self.z:g})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Vec3):
            return bool(np.array_equal(self._data, other._data))
        if isinstance(other, Real):
            return bool(np.all(self._data == other))
        return NotImplemented

    def __le__(self, other: float) -> bool:
        # True only if every component satisfies the relation
        if isinstance(other, Real):
            return bool(np.all(self._data <= other))
        return NotImplemented

    # Mutable through normalize(), += and /=
    __hash__ = None

    def __neg__(self) -> Vec3:
        return Vec3._wrap(-self._data)

    def __add__(self, other: Union[Vec3, float]) -> Vec3:
        if isinstance(other, Vec3):
            return Vec3._wrap(self._data + other._data)
        if isinstance(other, Real):
            return Vec3._wrap(self._data + other)
        return NotImplemented

    def __radd__(self, other: float) -> Vec3:
        if isinstance(other, Real):
            return Vec3._wrap(other + self._data)
        return NotImplemented

    def __iadd__(self, other: Union[Vec3, float]) -> Vec3:
        if isinstance(other, Vec3):
            self._data += other._data
        elif isinstance(other, Real):
            self._data += other
        else:
            return NotImplemented
        return self

    def __sub__(self, other: Union[Vec3, float]) -> Vec3:
        if isinstance(other, Vec3):
            return Vec3._wrap(self._data - other._data)
        if isinstance(other, Real):
            return Vec3._wrap(self._data - other)
        return NotImplemented

    def __mul__(self, other: Union[Vec3, float]) -> Vec3:
        if isinstance(other, Vec3):
            return Vec3._wrap(self._data * other._data)
        if isinstance(other, Real):
            return Vec3._wrap(self._data * other)
        return NotImplemented

    def __rmul__(self, other: float) -> Vec3:
        if isinstance(other, Real):
            return Vec3._wrap(other * self._data)
        return NotImplemented

    def __truediv__(self, other: Union[Vec3, float]) -> Vec3:
        if isinstance(other, Vec3):
            other = other._data
        elif not isinstance(other, Real):
            return NotImplemented
        with np.errstate(divide='ignore', invalid='ignore'):
            return Vec3._wrap(self._data / other)

    def __itruediv__(self, other: Union[Vec3, float]) -> Vec3:
        if isinstance(other, Vec3):
            other = other._data
        elif not isinstance(other, Real):
            return NotImplemented
        with np.errstate(divide='ignore', invalid='ignore'):
            self._data /= other
        return self

    def __getitem__(self, index: int) -> float:
        index = operator.index(index)
        if 0 <= index <= 2:
            return float(self._data[index])
        return 0.0

    def __iter__(self) -> Iterator[float]:
        # __getitem__ never raises, so the legacy sequence protocol would not stop
        return iter((self.x, self.y, self.z))

    def __len__(self) -> int:
        return 3

    def floor(self) -> Vec3:
        """Return a copy with every component rounded down."""
        return Vec3._wrap(np.floor(self._data))

    def sum(self) -> float:
        return float(self._data.sum())

    def length(self) -> float:
        """Return the magnitude (length) of the vector."""
        return math.sqrt(self.squared_length())

    def squared_length(self) -> float:
        """Return the squared magnitude (avoids sqrt for comparisons)."""
        return float(np.dot(self._data, self._data))

    def normalized(self) -> Vec3:
        """Return a unit vector in the same direction.

        The zero vector has no direction; its result has nan components.
        """
        return self / self.length()

    def normalize(self) -> None:
        """Normalize this vector in place."""
        self /= self.length()

    def dot(self, other: Vec3) -> float:
        """Compute dot product with another vector."""
        return dot(self, other)

    def cross(self, other: Vec3) -> Vec3:
        """Compute cross product with another vector."""
        return cross(self, other)

    def copy(self) -> Vec3:
        return Vec3._wrap(self._data.copy())

    def to_array(self) -> np.ndarray:
        """Return the underlying numpy array (copy)."""
        return self._data.copy()


def dot(l: Vec3, r: Vec3) -> float:
    """Dot product of two vectors."""
    return float(l._data[0] * r._data[0] + l._data[1] * r._data[1] + l._data[2] * r._data[2])


def cross(l: Vec3, r: Vec3) -> Vec3:
    """Cross product of two vectors (right-handed)."""
    return Vec3(
        l.y * r.z - l.z * r.y,
        -(l.x * r.z - l.z * r.x),
        l.x * r.y - l.y * r.x
    )


# Convenience type aliases
Point3 = Vec3
Color = Vec3
