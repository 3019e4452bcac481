"""
Абстрактный интерфейс загрузки буферов в графический API.
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Any, Sequence, Tuple


class GraphicsBackend(ABC):
    """Base interface for the buffer-upload side of a renderer."""

    @abstractmethod
    def create_buffer(self, data: Any, usage: str = "vertex") -> Any:
        pass

    @abstractmethod
    def set_vertex_buffers(self, bindings: Sequence[Tuple[int, int, Any]]) -> None:
        """bindings: (attribute location, arity, buffer handle)."""
        pass

    @abstractmethod
    def draw(self, vertex_count: int, start_vertex: int = 0) -> None:
        pass

    @abstractmethod
    def release_resource(self, resource: Any) -> None:
        pass


def select_backend(name: str = "gl") -> GraphicsBackend:
    """Select graphics backend by name."""
    name = name.lower()
    if name == "gl":
        from .gl_backend import GLBackend
        return GLBackend()
    raise ValueError(f"Unknown graphics backend: {name}")
