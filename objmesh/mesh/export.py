# -*- coding: utf-8 -*-
"""
Экспорт одной группы ObjMesh в плоские (неиндексированные) массивы атрибутов.

На каждую треугольную грань – ровно три вершины; общие вершины
дублируются. Массивы копируются, поэтому буфер живёт независимо от меша.
"""

from enum import Enum
from typing import List, Optional, Tuple

import numpy as np

from objmesh.mesh.processing import triangle_normals
from objmesh.mesh.topology import ABSENT, ObjMesh
from objmesh.utils.logger import logger


class AttributeLayout(Enum):
    """Набор атрибутов буфера; зависит только от непустоты пулов меша."""
    POSITION = (3,)
    POSITION_NORMAL = (3, 3)
    POSITION_UV = (3, 2)
    POSITION_NORMAL_UV = (3, 3, 2)

    @classmethod
    def from_pools(cls, has_normals: bool, has_uvs: bool) -> "AttributeLayout":
        if has_normals and has_uvs:
            return cls.POSITION_NORMAL_UV
        if has_normals:
            return cls.POSITION_NORMAL
        if has_uvs:
            return cls.POSITION_UV
        return cls.POSITION

    @property
    def arities(self) -> List[int]:
        return list(self.value)

    @property
    def has_normals(self) -> bool:
        return self in (AttributeLayout.POSITION_NORMAL,
                        AttributeLayout.POSITION_NORMAL_UV)

    @property
    def has_uvs(self) -> bool:
        return self in (AttributeLayout.POSITION_UV,
                        AttributeLayout.POSITION_NORMAL_UV)


class ExportedMeshBuffer:
    """Параллельные float32‑массивы: positions (N,3), normals (N,3)?, uvs (N,2)?."""

    primitive = "triangles"

    def __init__(self,
                 positions: np.ndarray,
                 normals: Optional[np.ndarray] = None,
                 uvs: Optional[np.ndarray] = None,
                 name: str = ""):
        self.positions = np.array(positions, dtype=np.float32).reshape(-1, 3)
        self.normals = (np.array(normals, dtype=np.float32).reshape(-1, 3)
                        if normals is not None else None)
        self.uvs = (np.array(uvs, dtype=np.float32).reshape(-1, 2)
                    if uvs is not None else None)
        self.name = name

        n = len(self.positions)
        for label, arr in (("normals", self.normals), ("uvs", self.uvs)):
            if arr is not None and len(arr) != n:
                raise ValueError(f"{label} has {len(arr)} entries, positions has {n}")

    @property
    def layout(self) -> AttributeLayout:
        return AttributeLayout.from_pools(self.normals is not None,
                                          self.uvs is not None)

    @property
    def vertex_attrib_list(self) -> List[int]:
        return self.layout.arities

    @property
    def attributes(self) -> List[Tuple[int, np.ndarray]]:
        """Пары (арность, массив) в порядке layout – для загрузки в GPU."""
        out = [(3, self.positions)]
        if self.normals is not None:
            out.append((3, self.normals))
        if self.uvs is not None:
            out.append((2, self.uvs))
        return out

    @property
    def num_vertices(self) -> int:
        return len(self.positions)

    @property
    def num_elements(self) -> int:
        # Буфер неиндексированный: один элемент на вершину.
        return len(self.positions)

    @property
    def num_faces(self) -> int:
        return len(self.positions) // 3

    def interleaved(self) -> np.ndarray:
        """(N, stride) – атрибуты вершины подряд, как в vertex buffer."""
        return np.column_stack([a for _, a in self.attributes]).astype(np.float32)

    def __repr__(self) -> str:
        return (f"ExportedMeshBuffer({self.name!r}, vertices={self.num_vertices}, "
                f"layout={self.vertex_attrib_list})")


def export_group(mesh: ObjMesh, group_index: int,
                 smooth_lighting: bool = True) -> ExportedMeshBuffer:
    """
    Развернуть группу `group_index` в ExportedMeshBuffer.

    Грани считаются треугольными (берутся первые три вершины каждой).
    Нормали экспортируются, только если пул нормалей не пуст:

    * smooth_lighting=True  – нормаль из ссылки вершины; при её отсутствии
      подставляется нормаль грани;
    * smooth_lighting=False – нормаль грани для всех трёх вершин.

    Нормаль грани, которую ещё не посчитали, вычисляется по позициям
    без изменения меша. Вершина без uv получает (0, 0).
    """
    group = mesh.group(group_index)
    layout = AttributeLayout.from_pools(mesh.has_normals, mesh.has_uvs)

    refs = np.array(
        [[tuple(v) for v in face.vertices[:3]] for face in group.faces],
        dtype=np.int64,
    ).reshape(-1, 3, 3)
    num_vertices = 3 * len(group.faces)

    pos_idx = refs[:, :, 0].reshape(-1)
    positions = mesh.positions_array()[pos_idx]

    normals = None
    if layout.has_normals:
        nor_idx = refs[:, :, 2].reshape(-1)
        present = nor_idx != ABSENT
        if smooth_lighting and present.all():
            normals = mesh.normals_array()[nor_idx]
        else:
            normals = np.repeat(_face_normals(mesh, group, refs), 3, axis=0)
            if smooth_lighting:
                normals[present] = mesh.normals_array()[nor_idx[present]]

    uvs = None
    if layout.has_uvs:
        uv_idx = refs[:, :, 1].reshape(-1)
        present = uv_idx != ABSENT
        uvs = np.zeros((num_vertices, 2), dtype=np.float32)
        uvs[present] = mesh.uvs_array()[uv_idx[present]]

    buffer = ExportedMeshBuffer(positions, normals, uvs, name=group.name)
    logger.debug(f"[Export] Group {group_index} ('{group.name}'): "
                 f"{num_vertices} vertices, layout {buffer.vertex_attrib_list}")
    return buffer


def export_all(mesh: ObjMesh, smooth_lighting: bool = True) -> List[ExportedMeshBuffer]:
    return [export_group(mesh, i, smooth_lighting) for i in range(len(mesh.groups))]


def _face_normals(mesh: ObjMesh, group, refs: np.ndarray) -> np.ndarray:
    stored = [f.normal for f in group.faces]
    missing = [i for i, n in enumerate(stored) if n is None]
    out = np.zeros((len(stored), 3), dtype=np.float32)
    if missing:
        out[missing] = triangle_normals(mesh.positions_array(), refs[missing, :, 0])
    for i, n in enumerate(stored):
        if n is not None:
            out[i] = n.as_np()
    return out
