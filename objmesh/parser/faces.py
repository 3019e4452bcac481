# -*- coding: utf-8 -*-
"""
Разбор записи f: один токен на вершину полигона.

Форматы вершины: v, v/vt, v//vn, v/vt/vn. Индексы OBJ начинаются
с единицы и сразу переводятся в индексы с нуля; пустой подтокен –
ABSENT. Отрицательные (относительные) индексы разрешаются только
при переданных размерах пулов: -k → size - k.
"""

import re
from typing import Optional, Sequence, Tuple

from objmesh.errors import InvalidIndexFormat, TooFewVertices
from objmesh.mesh.topology import ABSENT, Face, VertexRef
from objmesh.parser.lexer import split_by_string

INDEX_SEPARATOR = "/"
SLOTS = ("position", "uv", "normal")
INDEX_LITERAL = re.compile(r"[+-]?[0-9]+")


def parse_index(token: str, slot: int,
                pool_sizes: Optional[Tuple[int, int, int]] = None) -> int:
    if not token:
        return ABSENT
    if not INDEX_LITERAL.fullmatch(token):
        raise InvalidIndexFormat(token, "not an integer")
    value = int(token)

    if value > 0:
        return value - 1
    if value == 0:
        raise InvalidIndexFormat(token, "indices start at 1")
    if pool_sizes is None:
        raise InvalidIndexFormat(token, "relative indices are disabled")
    resolved = pool_sizes[slot] + value
    if resolved < 0:
        raise InvalidIndexFormat(
            token, f"relative index reaches before the first {SLOTS[slot]}"
        )
    return resolved


def parse_vertex_ref(token: str,
                     pool_sizes: Optional[Tuple[int, int, int]] = None) -> VertexRef:
    subtokens = split_by_string(token, INDEX_SEPARATOR, remove_empty=False)
    if not 1 <= len(subtokens) <= 3:
        raise InvalidIndexFormat(token)
    indices = [ABSENT, ABSENT, ABSENT]
    for slot, sub in enumerate(subtokens):
        indices[slot] = parse_index(sub, slot, pool_sizes)
    return VertexRef(*indices)


def parse_face(tokens: Sequence[str],
               pool_sizes: Optional[Tuple[int, int, int]] = None) -> Face:
    """
    Токены записи f → Face. Размер проверяется по числу ссылок,
    а не по их уникальности: «1 1 1» – корректная грань.
    """
    face = Face([parse_vertex_ref(t, pool_sizes) for t in tokens])
    if len(face) < 3:
        raise TooFewVertices(len(face))
    return face
