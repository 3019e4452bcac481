"""
OpenGL backend: vertex buffers + glDrawArrays. Requires a current GL context.
"""

from typing import Any, Sequence, Tuple

import numpy as np
from OpenGL import GL

from objmesh.graphics.backend import GraphicsBackend
from objmesh.utils.logger import logger


def gl_check_error(context: str = "") -> None:
    """Проверить glGetError и вывести в лог, если что‑то не так."""
    err = GL.glGetError()
    if err != GL.GL_NO_ERROR:
        logger.error(f"OpenGL error 0x{int(err):04x} [{context}]")


class GLBackend(GraphicsBackend):
    """One VAO per backend; one VBO per exported attribute."""

    def __init__(self):
        self._vao = None

    def create_buffer(self, data: Any, usage: str = "vertex") -> Any:
        target = GL.GL_ARRAY_BUFFER if usage == "vertex" else GL.GL_ELEMENT_ARRAY_BUFFER
        arr = np.ascontiguousarray(data)
        buf = GL.glGenBuffers(1)
        GL.glBindBuffer(target, buf)
        GL.glBufferData(target, arr.nbytes, arr, GL.GL_STATIC_DRAW)
        GL.glBindBuffer(target, 0)
        gl_check_error("create_buffer")
        return buf

    def set_vertex_buffers(self, bindings: Sequence[Tuple[int, int, Any]]) -> None:
        if self._vao is None:
            self._vao = GL.glGenVertexArrays(1)
        GL.glBindVertexArray(self._vao)
        for location, arity, buf in bindings:
            GL.glBindBuffer(GL.GL_ARRAY_BUFFER, buf)
            GL.glEnableVertexAttribArray(location)
            GL.glVertexAttribPointer(location, arity, GL.GL_FLOAT, False, 0, None)
        GL.glBindBuffer(GL.GL_ARRAY_BUFFER, 0)
        gl_check_error("set_vertex_buffers")

    def draw(self, vertex_count: int, start_vertex: int = 0) -> None:
        GL.glDrawArrays(GL.GL_TRIANGLES, start_vertex, vertex_count)
        GL.glBindVertexArray(0)

    def release_resource(self, resource: Any) -> None:
        GL.glDeleteBuffers(1, [resource])
