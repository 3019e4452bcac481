"""
Графический слой – только загрузка экспортированных буферов.
GLBackend импортируется лениво через select_backend("gl").
"""

from objmesh.graphics.backend import GraphicsBackend, select_backend
from objmesh.graphics.gpu_mesh import GpuMesh

__all__ = [
    "GraphicsBackend",
    "GpuMesh",
    "select_backend",
]
