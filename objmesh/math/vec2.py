# -*- coding: utf-8 -*-
"""
Двухмерный вектор (float32) – текстурные координаты (u, v).
"""
import numpy as np
from typing import Iterable, Tuple


class Vec2:
    __slots__ = ("_v",)

    def __init__(self, u=0.0, v=0.0):
        self._v = np.array([u, v], dtype=np.float32)

    @classmethod
    def from_iterable(cls, values: Iterable[float]) -> "Vec2":
        """Первые две компоненты; глубина (w) отбрасывается."""
        u, v = list(values)[:2]
        return cls(u, v)

    @property
    def u(self) -> float:
        return float(self._v[0])

    @property
    def v(self) -> float:
        return float(self._v[1])

    def __eq__(self, other) -> bool:
        if not isinstance(other, Vec2):
            return NotImplemented
        return bool(np.array_equal(self._v, other._v))

    __hash__ = None

    def as_np(self) -> np.ndarray:
        return self._v.copy()

    def to_tuple(self) -> Tuple[float, float]:
        return tuple(self._v.tolist())

    def __repr__(self) -> str:
        return f"Vec2({self.u:.3f}, {self.v:.3f})"
