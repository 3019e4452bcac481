"""
objmesh – загрузчик Wavefront OBJ для Python.

Разбирает v / vn / vt / f / g в индексированную топологию (ObjMesh),
разбивает четырёхугольники, считает нормали граней и экспортирует
группы в плоские буферы атрибутов для рендера.
"""

from objmesh.utils import logger, Config
from objmesh.errors import (
    ObjMeshError, SourceUnavailable, MalformedDocument, ObjParseError,
    MalformedNumber, InvalidArity, InvalidIndexFormat, TooFewVertices,
    UnresolvedReference, InvalidGroupIndex,
)
from objmesh.math import Vec2, Vec3
from objmesh.mesh import (
    ABSENT, Face, Group, ObjMesh, VertexRef,
    tessellate_quads, compute_face_normals, triangulate,
    AttributeLayout, ExportedMeshBuffer, export_group, export_all,
)
from objmesh.parser import ObjLoader, load_obj

__version__ = "1.0.0"

__all__ = [
    "logger",
    "Config",
    "ObjMeshError",
    "SourceUnavailable",
    "MalformedDocument",
    "ObjParseError",
    "MalformedNumber",
    "InvalidArity",
    "InvalidIndexFormat",
    "TooFewVertices",
    "UnresolvedReference",
    "InvalidGroupIndex",
    "Vec2",
    "Vec3",
    "ABSENT",
    "Face",
    "Group",
    "ObjMesh",
    "VertexRef",
    "tessellate_quads",
    "compute_face_normals",
    "triangulate",
    "AttributeLayout",
    "ExportedMeshBuffer",
    "export_group",
    "export_all",
    "ObjLoader",
    "load_obj",
]
