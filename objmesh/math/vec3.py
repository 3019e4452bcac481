# -*- coding: utf-8 -*-
"""
Трёхмерный вектор на базе NumPy: позиции и нормали OBJ‑файла.
"""
import numpy as np
from typing import Iterable, Tuple


class Vec3:
    __slots__ = ("_v",)

    def __init__(self, x=0.0, y=0.0, z=0.0):
        self._v = np.array([x, y, z], dtype=np.float32)

    @classmethod
    def from_iterable(cls, values: Iterable[float]) -> "Vec3":
        """Первые три компоненты; остальные (w) отбрасываются."""
        x, y, z = list(values)[:3]
        return cls(x, y, z)

    # -------------------------------------------------
    # свойства
    # -------------------------------------------------
    @property
    def x(self) -> float:
        return float(self._v[0])

    @property
    def y(self) -> float:
        return float(self._v[1])

    @property
    def z(self) -> float:
        return float(self._v[2])

    # -------------------------------------------------
    # арифметика (не меняет исходный объект)
    # -------------------------------------------------
    def __add__(self, other: "Vec3") -> "Vec3":
        return Vec3(*(self._v + other._v))

    def __sub__(self, other: "Vec3") -> "Vec3":
        return Vec3(*(self._v - other._v))

    def __mul__(self, scalar: float) -> "Vec3":
        return Vec3(*(self._v * scalar))

    __rmul__ = __mul__

    def __eq__(self, other) -> bool:
        if not isinstance(other, Vec3):
            return NotImplemented
        return bool(np.array_equal(self._v, other._v))

    __hash__ = None

    # -------------------------------------------------
    # вспомогательные методы
    # -------------------------------------------------
    def dot(self, other: "Vec3") -> float:
        return float(np.dot(self._v, other._v))

    def cross(self, other: "Vec3") -> "Vec3":
        return Vec3(*np.cross(self._v, other._v))

    def length(self) -> float:
        return float(np.linalg.norm(self._v))

    def normalized(self) -> "Vec3":
        n = self.length()
        if n == 0.0:
            return Vec3()
        return Vec3(*(self._v / n))

    def isclose(self, other: "Vec3", atol: float = 1e-6) -> bool:
        return bool(np.allclose(self._v, other._v, atol=atol))

    def as_np(self) -> np.ndarray:
        """Возврат копии 3‑элементного массива float32."""
        return self._v.copy()

    def to_tuple(self) -> Tuple[float, float, float]:
        return tuple(self._v.tolist())

    def __repr__(self):
        return f"Vec3({self.x:.3f}, {self.y:.3f}, {self.z:.3f})"
