# objmesh/math/vec3.py
"""
Трёхмерный вектор (float64) на базе NumPy – для нормалей и тангентов.
"""

import numpy as np
from typing import Tuple


class Vec3:
    """Короткий вектор‑3; операторы возвращают новый объект."""

    __slots__ = ("_v",)

    def __init__(self, x: float = 0.0, y: float = 0.0, z: float = 0.0):
        self._v = np.array([x, y, z], dtype=np.float64)

    @classmethod
    def from_seq(cls, seq) -> "Vec3":
        return cls(seq[0], seq[1], seq[2])

    # -----------------------------------------------------------------
    # свойства
    # -----------------------------------------------------------------
    @property
    def x(self) -> float:
        return float(self._v[0])

    @property
    def y(self) -> float:
        return float(self._v[1])

    @property
    def z(self) -> float:
        return float(self._v[2])

    # -----------------------------------------------------------------
    # арифметика (не меняет исходный объект)
    # -----------------------------------------------------------------
    def __add__(self, other: "Vec3") -> "Vec3":
        return Vec3(*(self._v + other._v))

    def __sub__(self, other: "Vec3") -> "Vec3":
        return Vec3(*(self._v - other._v))

    def __mul__(self, scalar: float) -> "Vec3":
        return Vec3(*(self._v * scalar))

    __rmul__ = __mul__

    def __truediv__(self, scalar: float) -> "Vec3":
        return Vec3(*(self._v / scalar))

    def __neg__(self) -> "Vec3":
        return Vec3(*(-self._v))

    # -----------------------------------------------------------------
    # вспомогательные методы
    # -----------------------------------------------------------------
    def dot(self, other: "Vec3") -> float:
        """Скалярное произведение."""
        return float(np.dot(self._v, other._v))

    def cross(self, other: "Vec3") -> "Vec3":
        """Векторное произведение."""
        return Vec3(*np.cross(self._v, other._v))

    def length(self) -> float:
        """Евклидова длина."""
        return float(np.linalg.norm(self._v))

    def normalized(self) -> "Vec3":
        """Нормализованный вектор (нулевой остаётся нулевым)."""
        n = self.length()
        if n == 0.0:
            return Vec3()
        return Vec3(*(self._v / n))

    def as_np(self) -> np.ndarray:
        """Копия 3‑компонентного ndarray (float64)."""
        return self._v.copy()

    def __repr__(self) -> str:
        return f"Vec3({self.x:.3f}, {self.y:.3f}, {self.z:.3f})"

    def to_tuple(self) -> Tuple[float, float, float]:
        return tuple(self._v.tolist())
