# -*- coding: utf-8 -*-
"""
ObjMesh – индексированная топология OBJ‑файла.

Три пула атрибутов (позиции, нормали, uv) хранятся в порядке объявления,
грани ссылаются на них только по индексу (с нуля). Грани разбиты на
именованные группы; группа «default» создаётся лениво, если грань
добавлена раньше первой записи `g`.
"""

from typing import Iterator, List, NamedTuple, Optional

import numpy as np

from objmesh.errors import InvalidGroupIndex, TooFewVertices, UnresolvedReference
from objmesh.math import Vec2, Vec3
from objmesh.utils.logger import logger

ABSENT = -1
DEFAULT_GROUP = "default"


class VertexRef(NamedTuple):
    """Угол полигона: индексы (позиция, uv, нормаль); ABSENT – нет данных."""
    position: int
    uv: int = ABSENT
    normal: int = ABSENT

    @property
    def has_uv(self) -> bool:
        return self.uv != ABSENT

    @property
    def has_normal(self) -> bool:
        return self.normal != ABSENT


class Face:
    """Полигон: упорядоченный список VertexRef (порядок = обход) + нормаль грани."""

    __slots__ = ("vertices", "normal")

    def __init__(self, vertices=None, normal: Optional[Vec3] = None):
        self.vertices: List[VertexRef] = [VertexRef(*v) for v in (vertices or [])]
        self.normal = normal

    def __len__(self) -> int:
        return len(self.vertices)

    def __iter__(self) -> Iterator[VertexRef]:
        return iter(self.vertices)

    def __getitem__(self, i) -> VertexRef:
        return self.vertices[i]

    def __eq__(self, other) -> bool:
        if not isinstance(other, Face):
            return NotImplemented
        return self.vertices == other.vertices

    __hash__ = None

    @property
    def is_triangle(self) -> bool:
        return len(self.vertices) == 3

    @property
    def is_quad(self) -> bool:
        return len(self.vertices) == 4

    def position_indices(self) -> List[int]:
        return [v.position for v in self.vertices]

    def __repr__(self) -> str:
        return f"Face({self.vertices!r})"


class Group:
    """Именованный список граней; экспорт выполняется по группам."""

    __slots__ = ("name", "faces")

    def __init__(self, name: str, faces=None):
        self.name = name
        self.faces: List[Face] = list(faces or [])

    def __len__(self) -> int:
        return len(self.faces)

    def __repr__(self) -> str:
        return f"Group({self.name!r}, faces={len(self.faces)})"


class ObjMesh:
    """Хранилище топологии: пулы атрибутов + группы граней."""

    def __init__(self):
        self.vertices: List[Vec3] = []
        self.normals: List[Vec3] = []
        self.uvs: List[Vec2] = []
        self.groups: List[Group] = []
        self._current: Optional[int] = None
        self._ready = True

    # -----------------------------------------------------------------
    # состояние загрузки
    # -----------------------------------------------------------------
    @property
    def ready(self) -> bool:
        """False, пока идёт загрузка или после неудачной загрузки."""
        return self._ready

    def mark_loading(self) -> None:
        self._ready = False

    def mark_ready(self) -> None:
        self._ready = True

    # -----------------------------------------------------------------
    # пулы атрибутов
    # -----------------------------------------------------------------
    def add_vertex(self, attrib: Vec3) -> int:
        self.vertices.append(attrib)
        return len(self.vertices) - 1

    def add_normal(self, attrib: Vec3) -> int:
        self.normals.append(attrib)
        return len(self.normals) - 1

    def add_uv(self, attrib: Vec2) -> int:
        self.uvs.append(attrib)
        return len(self.uvs) - 1

    @property
    def has_normals(self) -> bool:
        return len(self.normals) > 0

    @property
    def has_uvs(self) -> bool:
        return len(self.uvs) > 0

    def pool_sizes(self):
        """(позиции, uv, нормали) – в порядке слотов VertexRef."""
        return len(self.vertices), len(self.uvs), len(self.normals)

    # -----------------------------------------------------------------
    # группы и грани
    # -----------------------------------------------------------------
    def add_group(self, name: str) -> Group:
        """Создать группу или переключиться на уже объявленную с тем же именем."""
        found = self.find_group(name)
        if found is None:
            self.groups.append(Group(name))
            found = len(self.groups) - 1
        self._current = found
        return self.groups[found]

    @property
    def current_group(self) -> Optional[Group]:
        if self._current is None:
            return None
        return self.groups[self._current]

    def add_face(self, face) -> Face:
        """
        Проверить грань и добавить её в текущую группу.
        Индексы сверяются с текущими размерами пулов: ссылка вперёд
        (на ещё не объявленную вершину) – ошибка.
        """
        if not isinstance(face, Face):
            face = Face(face)
        if len(face) < 3:
            raise TooFewVertices(len(face))
        for ref in face:
            self._check_ref(ref)

        # If no group was created previously -> create a default one.
        if self._current is None:
            self.add_group(DEFAULT_GROUP)
        self.groups[self._current].faces.append(face)
        return face

    def _check_ref(self, ref: VertexRef) -> None:
        if not 0 <= ref.position < len(self.vertices):
            raise UnresolvedReference("position", ref.position, len(self.vertices))
        if ref.uv != ABSENT and not 0 <= ref.uv < len(self.uvs):
            raise UnresolvedReference("uv", ref.uv, len(self.uvs))
        if ref.normal != ABSENT and not 0 <= ref.normal < len(self.normals):
            raise UnresolvedReference("normal", ref.normal, len(self.normals))

    def group(self, index: int) -> Group:
        if not 0 <= index < len(self.groups):
            raise InvalidGroupIndex(index, len(self.groups))
        return self.groups[index]

    def find_group(self, name: str) -> Optional[int]:
        for i, g in enumerate(self.groups):
            if g.name == name:
                return i
        return None

    def group_names(self) -> List[str]:
        return [g.name for g in self.groups]

    def iter_faces(self) -> Iterator[Face]:
        for g in self.groups:
            yield from g.faces

    def num_faces(self) -> int:
        return sum(len(g.faces) for g in self.groups)

    def num_faces_in_group(self, index: int) -> int:
        return len(self.group(index).faces)

    def clear(self) -> None:
        """Сбросить пулы и грани (имена групп сохраняются)."""
        self.vertices.clear()
        self.normals.clear()
        self.uvs.clear()
        for g in self.groups:
            g.faces.clear()

    # -----------------------------------------------------------------
    # numpy‑представление пулов
    # -----------------------------------------------------------------
    def positions_array(self) -> np.ndarray:
        return _stack(self.vertices, 3)

    def normals_array(self) -> np.ndarray:
        return _stack(self.normals, 3)

    def uvs_array(self) -> np.ndarray:
        return _stack(self.uvs, 2)

    # -----------------------------------------------------------------
    # статистика
    # -----------------------------------------------------------------
    def stats(self) -> dict:
        return {
            "vertices": len(self.vertices),
            "normals": len(self.normals),
            "uvs": len(self.uvs),
            "faces": self.num_faces(),
            "groups": len(self.groups),
        }

    def log_data(self) -> None:
        s = self.stats()
        logger.info(
            f"[ObjMesh] #vertices = {s['vertices']}, #normals = {s['normals']}, "
            f"#uvs = {s['uvs']}, #faces = {s['faces']}, #groups = {s['groups']}"
        )
        for g in self.groups:
            logger.info(f"[ObjMesh]     {g.name}: {len(g.faces)} face(s)")

    def __repr__(self) -> str:
        s = self.stats()
        return (f"ObjMesh(vertices={s['vertices']}, normals={s['normals']}, "
                f"uvs={s['uvs']}, faces={s['faces']}, groups={s['groups']})")


def _stack(pool, arity: int) -> np.ndarray:
    if not pool:
        return np.zeros((0, arity), dtype=np.float32)
    return np.stack([a.as_np() for a in pool]).astype(np.float32, copy=False)
