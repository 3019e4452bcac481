# -*- coding: utf-8 -*-
"""
Операции над топологией ObjMesh (изменяют меш на месте):

* tessellate_quads     – каждый четырёхугольник → два треугольника;
* compute_face_normals – нормаль каждой треугольной грани.
"""

import numpy as np
from numba import njit

from objmesh.math import Vec3
from objmesh.mesh.topology import Face, ObjMesh
from objmesh.utils.logger import logger


def tessellate_quads(mesh: ObjMesh) -> int:
    """
    [v0, v1, v2, v3] → [v0, v1, v2] (на месте) + [v0, v2, v3] (в конец группы).
    Треугольники и n‑угольники (n > 4) не трогаем. Возвращает число
    разбитых четырёхугольников.
    """
    split = 0
    for group in mesh.groups:
        num_faces = len(group.faces)
        for i in range(num_faces):
            face = group.faces[i]
            if not face.is_quad:
                continue
            v0, _, v2, v3 = face.vertices
            face.vertices.pop()
            face.normal = None
            group.faces.append(Face([v0, v2, v3]))
            split += 1
    if split:
        logger.debug(f"[Processing] Tessellated {split} quad(s).")
    return split


@njit
def _triangle_normals(positions, triangles):
    out = np.zeros((triangles.shape[0], 3), dtype=np.float32)
    for i in range(triangles.shape[0]):
        p0 = positions[triangles[i, 0]]
        p1 = positions[triangles[i, 1]]
        p2 = positions[triangles[i, 2]]
        ax = p1[0] - p0[0]
        ay = p1[1] - p0[1]
        az = p1[2] - p0[2]
        bx = p2[0] - p0[0]
        by = p2[1] - p0[1]
        bz = p2[2] - p0[2]
        nx = ay * bz - az * by
        ny = az * bx - ax * bz
        nz = ax * by - ay * bx
        length = np.sqrt(nx * nx + ny * ny + nz * nz)
        if length > 0.0:
            out[i, 0] = nx / length
            out[i, 1] = ny / length
            out[i, 2] = nz / length
    return out


def triangle_normals(positions: np.ndarray, triangles: np.ndarray) -> np.ndarray:
    """
    normalize(cross(p1 - p0, p2 - p0)) для каждой строки `triangles` (M, 3).
    Вырожденный треугольник даёт нулевой вектор.
    """
    triangles = np.ascontiguousarray(triangles, dtype=np.int64).reshape(-1, 3)
    if triangles.shape[0] == 0:
        return np.zeros((0, 3), dtype=np.float32)
    positions = np.ascontiguousarray(positions, dtype=np.float32).reshape(-1, 3)
    return _triangle_normals(positions, triangles)


def compute_face_normals(mesh: ObjMesh) -> int:
    """
    Записать нормаль в каждую треугольную грань. Нетреугольные грани
    молча пропускаются – при необходимости сначала tessellate_quads().
    """
    faces = [f for f in mesh.iter_faces() if f.is_triangle]
    if not faces:
        return 0

    triangles = np.array([f.position_indices() for f in faces], dtype=np.int64)
    normals = triangle_normals(mesh.positions_array(), triangles)
    for face, n in zip(faces, normals):
        face.normal = Vec3(*n)

    logger.debug(f"[Processing] Computed {len(faces)} face normal(s).")
    return len(faces)


def triangulate(mesh: ObjMesh) -> ObjMesh:
    """tessellate_quads + compute_face_normals, как перед экспортом."""
    tessellate_quads(mesh)
    compute_face_normals(mesh)
    return mesh
