# -*- coding: utf-8 -*-
"""
Разбор числовых записей v / vn / vt (токены уже без ключевого слова).

Лишние компоненты (w у позиций и нормалей, глубина у uv) допускаются
и отбрасываются – это усечение, а не ошибка.
"""

import math
import re
from typing import List, Sequence, Tuple

from objmesh.errors import InvalidArity, MalformedNumber
from objmesh.math import Vec2, Vec3

VEC3_ARITY = (3, 4)
VEC2_ARITY = (2, 3)

# Только десятичная запись: без nan/inf, подчёркиваний и не‑ASCII цифр.
FLOAT_LITERAL = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")


def parse_float(token: str) -> float:
    if not FLOAT_LITERAL.fullmatch(token):
        raise MalformedNumber(token)
    value = float(token)
    if not math.isfinite(value):
        raise MalformedNumber(token)
    return value


def parse_floats(tokens: Sequence[str], arity: Tuple[int, int],
                 kind: str = "attribute") -> List[float]:
    lo, hi = arity
    if not lo <= len(tokens) <= hi:
        raise InvalidArity(kind, len(tokens), arity)
    return [parse_float(t) for t in tokens]


def parse_vec3(tokens: Sequence[str], kind: str = "position") -> Vec3:
    return Vec3.from_iterable(parse_floats(tokens, VEC3_ARITY, kind))


def parse_vec2(tokens: Sequence[str], kind: str = "uv") -> Vec2:
    return Vec2.from_iterable(parse_floats(tokens, VEC2_ARITY, kind))
