"""
Пакет mesh – топология OBJ (ObjMesh), её обработка и экспорт в буферы.
"""

from objmesh.mesh.topology import (
    ABSENT, DEFAULT_GROUP, Face, Group, ObjMesh, VertexRef
)
from objmesh.mesh.processing import (
    compute_face_normals, tessellate_quads, triangle_normals, triangulate
)
from objmesh.mesh.export import (
    AttributeLayout, ExportedMeshBuffer, export_all, export_group
)

__all__ = [
    "ABSENT", "DEFAULT_GROUP", "Face", "Group", "ObjMesh", "VertexRef",
    "compute_face_normals", "tessellate_quads", "triangle_normals", "triangulate",
    "AttributeLayout", "ExportedMeshBuffer", "export_all", "export_group",
]
