"""
Vector2 class for 2D math (texture and screen coordinates).
"""

from __future__ import annotations
import math
from typing import Iterator, Optional
import numpy as np


class Vec2:
    """A 2D vector with the same float64 storage as :class:`Vec3`."""

    __slots__ = ('_data',)

    __array_ufunc__ = None

    def __init__(self, x: Optional[float] = None, y: Optional[float] = None):
        if x is None and y is None:
            self._data = np.zeros(2, dtype=np.float64)
        elif x is None or y is None:
            raise TypeError("Vec2 takes 0 or 2 components")
        else:
            self._data = np.array([x, y], dtype=np.float64)

    @classmethod
    def _wrap(cls, data: np.ndarray) -> Vec2:
        v = cls.__new__(cls)
        v._data = data
        return v

    @property
    def x(self) -> float:
        return float(self._data[0])

    @property
    def y(self) -> float:
        return float(self._data[1])

    # Aliases for texture coordinates
    @property
    def u(self) -> float:
        return self.x

    @property
    def v(self) -> float:
        return self.y

    def __repr__(self) -> str:
        return f"Vec2({self.x!r}, {self.y!r})"

    def __str__(self) -> str:
        return f"(x:{self.x:g} y:{self.y:g})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vec2):
            return NotImplemented
        return bool(np.array_equal(self._data, other._data))

    __hash__ = None

    def __add__(self, other: Vec2) -> Vec2:
        if not isinstance(other, Vec2):
            return NotImplemented
        return Vec2._wrap(self._data + other._data)

    def __sub__(self, other: Vec2) -> Vec2:
        if not isinstance(other, Vec2):
            return NotImplemented
        return Vec2._wrap(self._data - other._data)

    def __iter__(self) -> Iterator[float]:
        return iter((self.x, self.y))

    def sum(self) -> float:
        """Sum of the components."""
        return float(self._data.sum())

    def floor(self) -> Vec2:
        return Vec2._wrap(np.floor(self._data))

    def dot(self, other: Vec2) -> float:
        return float(self._data[0] * other._data[0] + self._data[1] * other._data[1])

    def length(self) -> float:
        return math.sqrt(self.dot(self))

    def normalized(self) -> Vec2:
        """Return a unit vector in the same direction (nan for the zero vector)."""
        with np.errstate(divide='ignore', invalid='ignore'):
            return Vec2._wrap(self._data / self.length())

    def normalize(self) -> None:
        with np.errstate(divide='ignore', invalid='ignore'):
            self._data /= self.length()

    def to_array(self) -> np.ndarray:
        return self._data.copy()
