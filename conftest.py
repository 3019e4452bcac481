# -*- coding: utf-8 -*-
"""
conftest.py – общие фикстуры: OBJ‑файлы во временном каталоге,
готовые меши и мок‑бэкенд, записывающий вызовы загрузки буферов.
"""

from typing import Any, List, Sequence, Tuple

import numpy as np
import pytest

from objmesh.graphics.backend import GraphicsBackend
from objmesh.math import Vec2, Vec3
from objmesh.mesh import Face, ObjMesh


CUBE_OBJ = """\
# unit cube, quads
v 0 0 0
v 1 0 0
v 1 1 0
v 0 1 0
v 0 0 1
v 1 0 1
v 1 1 1
v 0 1 1
vt 0 0
vt 1 0
vt 1 1
vt 0 1
vn 0 0 -1
vn 0 0 1
vn 0 -1 0
vn 0 1 0
vn -1 0 0
vn 1 0 0
g cube
f 1/1/1 4/4/1 3/3/1 2/2/1
f 5/1/2 6/2/2 7/3/2 8/4/2
f 1/1/3 2/2/3 6/3/3 5/4/3
f 4/1/4 8/2/4 7/3/4 3/4/4
f 1/1/5 5/2/5 8/3/5 4/4/5
f 2/1/6 3/2/6 7/3/6 6/4/6
"""


# ----------------------------------------------------------------------
# MockBackend – реализует интерфейс GraphicsBackend без GPU.
# ----------------------------------------------------------------------
class MockBackend(GraphicsBackend):
    """Каждый метод только записывает вызов в `self.calls`."""

    def __init__(self) -> None:
        # (method_name, args, kwargs)
        self.calls: List[Tuple[str, Tuple[Any, ...], dict]] = []
        self.buffers: dict = {}
        self._next_handle = 0xB0B0

    def _record(self, name: str, *a, **kw) -> None:
        self.calls.append((name, a, kw))

    def create_buffer(self, data: Any, usage: str = "vertex") -> Any:
        self._record("create_buffer", data, usage)
        handle = self._next_handle
        self._next_handle += 1
        self.buffers[handle] = np.array(data, copy=True)
        return handle

    def set_vertex_buffers(self, bindings: Sequence[Tuple[int, int, Any]]) -> None:
        self._record("set_vertex_buffers", list(bindings))

    def draw(self, vertex_count: int, start_vertex: int = 0) -> None:
        self._record("draw", vertex_count, start_vertex)

    def release_resource(self, resource: Any) -> None:
        self._record("release_resource", resource)
        self.buffers.pop(resource, None)

    def called(self, name: str) -> bool:
        """True, если метод `name` был вызван хотя бы один раз."""
        return any(call[0] == name for call in self.calls)

    def count(self, name: str) -> int:
        return sum(1 for call in self.calls if call[0] == name)


@pytest.fixture
def backend():
    return MockBackend()


@pytest.fixture
def write_obj(tmp_path):
    """write_obj(text, name="model.obj") -> путь к файлу."""
    def _write(text: str, name: str = "model.obj"):
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path
    return _write


@pytest.fixture
def cube_path(write_obj):
    return write_obj(CUBE_OBJ, "cube.obj")


@pytest.fixture
def triangle_mesh():
    """Один треугольник в плоскости XY с нормалью и uv на каждой вершине."""
    mesh = ObjMesh()
    mesh.add_vertex(Vec3(0, 0, 0))
    mesh.add_vertex(Vec3(1, 0, 0))
    mesh.add_vertex(Vec3(0, 1, 0))
    mesh.add_uv(Vec2(0, 0))
    mesh.add_uv(Vec2(1, 0))
    mesh.add_uv(Vec2(0, 1))
    mesh.add_normal(Vec3(0, 0, 1))
    mesh.add_face(Face([(0, 0, 0), (1, 1, 0), (2, 2, 0)]))
    return mesh


@pytest.fixture
def quad_mesh():
    """Квадрат [0,1]x[0,1] одной гранью из четырёх вершин, без нормалей и uv."""
    mesh = ObjMesh()
    for x, y in ((0, 0), (1, 0), (1, 1), (0, 1)):
        mesh.add_vertex(Vec3(x, y, 0))
    mesh.add_group("quad")
    mesh.add_face(Face([(0,), (1,), (2,), (3,)]))
    return mesh
