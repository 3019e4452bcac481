# -*- coding: utf-8 -*-
"""
Загрузчик Wavefront OBJ (позиции, нормали, texcoords, грани, группы).
Материалы MTL, сглаживающие группы и объекты `o` игнорируются.

Любая ошибка разбора прерывает загрузку: бросается MalformedDocument
с номером строки (с 1) и исходным текстом, меш остаётся `ready == False`
и должен быть выброшен вызывающим кодом.
"""

from pathlib import Path
from typing import Iterable, Optional

from objmesh.errors import MalformedDocument, ObjParseError, SourceUnavailable
from objmesh.mesh.topology import DEFAULT_GROUP, ObjMesh
from objmesh.parser.attributes import parse_vec2, parse_vec3
from objmesh.parser.faces import parse_face
from objmesh.parser.lexer import SPACE, tokenize
from objmesh.utils.logger import logger
from objmesh.utils.profiler import Profiler

V = "v"     # Vertex.
VT = "vt"   # Vertex texture.
VN = "vn"   # Vertex normal.
F = "f"     # Face.
G = "g"     # Group.


class ObjLoader:
    """Построчный разбор OBJ в ObjMesh."""

    _records = {
        V: "_on_vertex",
        VN: "_on_normal",
        VT: "_on_uv",
        F: "_on_face",
        G: "_on_group",
    }

    def __init__(self,
                 encoding: str = "utf-8",
                 strip_comments: bool = True,
                 relative_indices: bool = False,
                 verbose: bool = False):
        self.encoding = encoding
        self.strip_comments = strip_comments
        self.relative_indices = relative_indices
        self.verbose = verbose
        self.last_load_ms = 0.0

    # -----------------------------------------------------------------
    # публичный интерфейс
    # -----------------------------------------------------------------
    def load(self, path, mesh: Optional[ObjMesh] = None) -> ObjMesh:
        """
        Открыть файл и разобрать его в `mesh` (или в новый ObjMesh).
        Файл закрывается на любом пути выхода.
        """
        path = Path(path)
        try:
            stream = path.open("r", encoding=self.encoding)
        except OSError as exc:
            if self.verbose:
                logger.error(f"[Loader] Could not open .obj file at '{path}': {exc}")
            raise SourceUnavailable(str(path), exc.strerror or str(exc)) from exc
        except LookupError as exc:
            raise SourceUnavailable(str(path), f"unknown encoding '{self.encoding}'") from exc

        with stream:
            return self.load_stream(stream, mesh, source=str(path))

    def load_stream(self, stream: Iterable[str], mesh: Optional[ObjMesh] = None,
                    source: str = "<stream>") -> ObjMesh:
        """Разобрать уже открытый поток строк; поток не закрывается."""
        if mesh is None:
            mesh = ObjMesh()
        mesh.mark_loading()
        ignored = set()

        with Profiler(f"load {source}") as prof:
            for line_number, raw in self._numbered_lines(stream, source):
                line = raw.rstrip("\r\n")
                try:
                    keyword = self._parse_line(line, mesh)
                except ObjParseError as exc:
                    if self.verbose:
                        logger.error(f"[Loader] {exc}\n\t^ at line {line_number} "
                                     f"('{source}')\n{line_number}: '{line}'")
                    raise MalformedDocument(line_number, line, source, str(exc)) from exc
                if keyword is not None and keyword not in ignored:
                    ignored.add(keyword)
                    logger.debug(f"[Loader] Ignoring '{keyword}' records in {source}")

        self.last_load_ms = prof.elapsed_ms
        mesh.mark_ready()
        s = mesh.stats()
        logger.info(f"[Loader] Loaded {source}: {s['vertices']} vertices, "
                    f"{s['faces']} faces, {s['groups']} group(s) "
                    f"in {prof.elapsed_ms:.1f} ms")
        return mesh

    @staticmethod
    def _numbered_lines(stream: Iterable[str], source: str):
        """(номер строки с 1, строка); ошибка декодирования → MalformedDocument."""
        lines = iter(stream)
        line_number = 0
        while True:
            try:
                raw = next(lines)
            except StopIteration:
                return
            except UnicodeDecodeError as exc:
                raise MalformedDocument(line_number + 1, "<undecodable>",
                                        source, str(exc)) from exc
            line_number += 1
            yield line_number, raw

    # -----------------------------------------------------------------
    # обработка одной строки
    # -----------------------------------------------------------------
    def _parse_line(self, line: str, mesh: ObjMesh) -> Optional[str]:
        """Вернуть ключевое слово, если запись пропущена как неизвестная."""
        tokens = tokenize(line, self.strip_comments)
        if not tokens:
            return None
        keyword, data = tokens[0], tokens[1:]
        handler = self._records.get(keyword)
        if handler is None:
            return keyword
        getattr(self, handler)(data, mesh)
        return None

    def _on_vertex(self, data, mesh: ObjMesh) -> None:
        mesh.add_vertex(parse_vec3(data, "position"))

    def _on_normal(self, data, mesh: ObjMesh) -> None:
        mesh.add_normal(parse_vec3(data, "normal"))

    def _on_uv(self, data, mesh: ObjMesh) -> None:
        mesh.add_uv(parse_vec2(data, "uv"))

    def _on_face(self, data, mesh: ObjMesh) -> None:
        pool_sizes = mesh.pool_sizes() if self.relative_indices else None
        mesh.add_face(parse_face(data, pool_sizes))

    def _on_group(self, data, mesh: ObjMesh) -> None:
        mesh.add_group(SPACE.join(data) or DEFAULT_GROUP)


def load_obj(path, mesh: Optional[ObjMesh] = None, **options) -> ObjMesh:
    """Короткий путь: ObjLoader(**options).load(path, mesh)."""
    return ObjLoader(**options).load(path, mesh)
