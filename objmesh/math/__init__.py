"""
Математический суб‑пакет: Vec2 (uv) и Vec3 (позиции, нормали).
"""

from objmesh.math.vec2 import Vec2
from objmesh.math.vec3 import Vec3

__all__ = ["Vec2", "Vec3"]
