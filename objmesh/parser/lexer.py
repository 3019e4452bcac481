# objmesh/parser/lexer.py
# ---------------------------------------------------------------
# Предобработка строки и разбиение на токены.
# ---------------------------------------------------------------

import re
from typing import List, Optional

COMMENT = "#"
SPACE = " "

_WHITESPACE_RUN = re.compile(r"\s+")


def preprocess_line(raw: str, canonical: Optional[str] = None) -> str:
    """
    Каждая серия пробельных символов сворачивается в один символ: первый
    символ серии или `canonical`, если он задан. Остальные символы
    (в том числе в начале строки) не трогаем, обрезки нет.
    """
    if canonical is None:
        return _WHITESPACE_RUN.sub(lambda m: m.group(0)[0], raw)
    return _WHITESPACE_RUN.sub(canonical, raw)


def strip_comment(line: str) -> str:
    """Отбросить всё, начиная с первого '#'."""
    return line.split(COMMENT, 1)[0]


def split_by_string(text: str, separator: str,
                    remove_empty: bool = False) -> List[str]:
    """
    Разбить `text` по каждому вхождению `separator`, сохраняя порядок.

    >>> split_by_string("a//b", "/")
    ['a', '', 'b']
    >>> split_by_string("a//b", "/", remove_empty=True)
    ['a', 'b']
    """
    if not separator:
        raise ValueError("separator must be a non-empty string")
    tokens = text.split(separator)
    if remove_empty:
        tokens = [t for t in tokens if t]
    return tokens


def tokenize(line: str, strip_comments: bool = True) -> List[str]:
    """Полный путь строки документа: комментарий → пробелы → токены."""
    if strip_comments:
        line = strip_comment(line)
    return split_by_string(preprocess_line(line, SPACE), SPACE, remove_empty=True)
