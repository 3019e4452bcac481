"""
GpuMesh – лениво загружает ExportedMeshBuffer в бэкенд при первом draw().
"""

from typing import Any, List, Optional, Sequence

from objmesh.graphics.backend import GraphicsBackend
from objmesh.mesh.export import ExportedMeshBuffer
from objmesh.utils.logger import logger


class GpuMesh:
    """Один буфер на атрибут; `locations` – слоты атрибутов в шейдере."""

    def __init__(self, buffer: ExportedMeshBuffer,
                 locations: Optional[Sequence[int]] = None):
        self.buffer = buffer
        arities = buffer.vertex_attrib_list
        if locations is None:
            locations = range(len(arities))
        self.locations = list(locations)
        if len(self.locations) != len(arities):
            raise ValueError(
                f"{len(arities)} attributes but {len(self.locations)} locations"
            )
        self.handles: List[Any] = []

    @property
    def vertex_attrib_list(self) -> List[int]:
        return self.buffer.vertex_attrib_list

    @property
    def uploaded(self) -> bool:
        return bool(self.handles)

    def upload(self, backend: GraphicsBackend) -> None:
        if self.uploaded:
            return
        self.handles = [backend.create_buffer(data, usage="vertex")
                        for _, data in self.buffer.attributes]
        logger.debug(f"[GpuMesh] Uploaded '{self.buffer.name}': "
                     f"{self.buffer.num_vertices} vertices, "
                     f"layout {self.vertex_attrib_list}")

    def draw(self, backend: GraphicsBackend) -> None:
        """Отрисовать меш, создавая буферы «лениво»."""
        self.upload(backend)
        bindings = [(loc, arity, handle) for loc, arity, handle
                    in zip(self.locations, self.vertex_attrib_list, self.handles)]
        backend.set_vertex_buffers(bindings)
        backend.draw(self.buffer.num_elements)

    def release(self, backend: GraphicsBackend) -> None:
        for handle in self.handles:
            backend.release_resource(handle)
        self.handles = []
