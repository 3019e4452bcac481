# -*- coding: utf-8 -*-
import numpy as np
import pytest

from objmesh import load_obj
from objmesh.errors import InvalidGroupIndex
from objmesh.math import Vec2, Vec3
from objmesh.mesh import (
    AttributeLayout, ExportedMeshBuffer, Face, ObjMesh,
    compute_face_normals, export_all, export_group, tessellate_quads,
)


def test_cube_export_sizes(cube_path):
    mesh = load_obj(cube_path)
    tessellate_quads(mesh)
    buf = export_group(mesh, 0)
    n = mesh.num_faces_in_group(0)
    assert n == 12
    assert buf.positions.shape == (3 * n, 3)
    assert buf.normals.shape == (3 * n, 3)
    assert buf.uvs.shape == (3 * n, 2)
    assert buf.num_vertices == buf.num_elements == 36
    assert buf.vertex_attrib_list == [3, 3, 2]
    assert buf.layout is AttributeLayout.POSITION_NORMAL_UV
    assert buf.name == "cube"

def test_face_then_vertex_order(triangle_mesh):
    triangle_mesh.add_vertex(Vec3(5, 5, 5))
    triangle_mesh.add_face([(3, 2, 0), (0, 0, 0), (2, 1, 0)])
    buf = export_group(triangle_mesh, 0)
    assert buf.positions.tolist() == [
        [0, 0, 0], [1, 0, 0], [0, 1, 0],
        [5, 5, 5], [0, 0, 0], [0, 1, 0],
    ]
    assert buf.uvs.tolist() == [[0, 0], [1, 0], [0, 1], [0, 1], [0, 0], [1, 0]]

def test_invalid_group_index(triangle_mesh):
    with pytest.raises(InvalidGroupIndex) as info:
        export_group(triangle_mesh, 1)
    assert info.value.count == 1
    with pytest.raises(InvalidGroupIndex):
        export_group(triangle_mesh, -1)
    with pytest.raises(InvalidGroupIndex):
        export_group(ObjMesh(), 0)

def test_position_only_layout(quad_mesh):
    tessellate_quads(quad_mesh)
    buf = export_group(quad_mesh, 0)
    assert buf.normals is None and buf.uvs is None
    assert buf.vertex_attrib_list == [3]
    assert buf.layout is AttributeLayout.POSITION
    assert [a for a, _ in buf.attributes] == [3]

def test_uv_without_normals_layout(quad_mesh):
    quad_mesh.add_uv(Vec2(0.5, 0.5))
    tessellate_quads(quad_mesh)
    buf = export_group(quad_mesh, 0)
    assert buf.vertex_attrib_list == [3, 2]
    # Вершины без индекса uv получают (0, 0).
    assert np.allclose(buf.uvs, 0.0)

def test_buffer_owns_its_data(triangle_mesh):
    buf = export_group(triangle_mesh, 0)
    buf.positions[0] = [9, 9, 9]
    assert triangle_mesh.vertices[0] == Vec3(0, 0, 0)
    triangle_mesh.clear()
    assert buf.positions.tolist()[1] == [1, 0, 0]

def test_interleaved_stride(triangle_mesh):
    data = export_group(triangle_mesh, 0).interleaved()
    assert data.shape == (3, 8)
    assert data.dtype == np.float32
    assert data[1].tolist() == [1, 0, 0, 0, 0, 1, 1, 0]


# ---------------------------------------------------------------------
# сглаженные / плоские нормали
# ---------------------------------------------------------------------
def make_bent_triangle():
    """Треугольник в XY, но нормали вершин наклонены."""
    mesh = ObjMesh()
    for p in ((0, 0, 0), (1, 0, 0), (0, 1, 0)):
        mesh.add_vertex(Vec3(*p))
    mesh.add_normal(Vec3(1, 0, 0))
    mesh.add_normal(Vec3(0, 1, 0))
    mesh.add_face([(0, -1, 0), (1, -1, 1), (2, -1, -1)])
    return mesh

def test_smooth_lighting_uses_vertex_normals():
    mesh = make_bent_triangle()
    buf = export_group(mesh, 0, smooth_lighting=True)
    # третья вершина без нормали – подставляется нормаль грани
    assert buf.normals.tolist() == [[1, 0, 0], [0, 1, 0], [0, 0, 1]]

def test_flat_lighting_uses_face_normal():
    mesh = make_bent_triangle()
    buf = export_group(mesh, 0, smooth_lighting=False)
    assert np.allclose(buf.normals, [[0, 0, 1]] * 3)

def test_flat_lighting_prefers_stored_face_normal():
    mesh = make_bent_triangle()
    compute_face_normals(mesh)
    mesh.groups[0].faces[0].normal = Vec3(0, 0, -1)
    buf = export_group(mesh, 0, smooth_lighting=False)
    assert np.allclose(buf.normals, [[0, 0, -1]] * 3)

def test_export_does_not_mutate_mesh():
    mesh = make_bent_triangle()
    export_group(mesh, 0, smooth_lighting=False)
    assert mesh.groups[0].faces[0].normal is None


def test_export_all_groups():
    mesh = ObjMesh()
    for p in ((0, 0, 0), (1, 0, 0), (0, 1, 0)):
        mesh.add_vertex(Vec3(*p))
    for name in ("a", "b", "c"):
        mesh.add_group(name)
        mesh.add_face(Face([(0,), (1,), (2,)]))
    buffers = export_all(mesh)
    assert [b.name for b in buffers] == ["a", "b", "c"]
    assert all(b.num_vertices == 3 for b in buffers)

def test_empty_group_exports_empty_buffer():
    mesh = ObjMesh()
    mesh.add_normal(Vec3(0, 0, 1))
    mesh.add_group("empty")
    buf = export_group(mesh, 0)
    assert buf.num_vertices == 0
    assert buf.normals.shape == (0, 3)

def test_buffer_rejects_mismatched_arrays():
    with pytest.raises(ValueError):
        ExportedMeshBuffer(np.zeros((3, 3)), normals=np.zeros((2, 3)))
