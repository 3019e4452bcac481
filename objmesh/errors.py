# objmesh/errors.py
# ---------------------------------------------------------------
# Иерархия исключений загрузчика. Парсеры бросают ObjParseError,
# загрузчик оборачивает её в MalformedDocument с номером строки.
# ---------------------------------------------------------------


class ObjMeshError(Exception):
    """Базовый класс для всех ошибок пакета."""


class SourceUnavailable(ObjMeshError, OSError):
    """Файл не удалось открыть."""

    def __init__(self, path: str, reason: str = ""):
        self.path = str(path)
        self.reason = reason
        msg = f"Could not open .obj file at '{self.path}'"
        if reason:
            msg += f": {reason}"
        super().__init__(msg)


class MalformedDocument(ObjMeshError, ValueError):
    """Ошибка разбора с контекстом: номер строки (с 1) и исходный текст."""

    def __init__(self, line_number: int, text: str, source: str = "<stream>",
                 detail: str = ""):
        self.line_number = line_number
        self.text = text
        self.source = source
        self.detail = detail
        msg = f"{source}:{line_number}: '{text}'"
        if detail:
            msg += f" ({detail})"
        super().__init__(msg)


class ObjParseError(ObjMeshError, ValueError):
    """Базовый класс ошибок уровня одной записи (v/vn/vt/f)."""


class MalformedNumber(ObjParseError):
    def __init__(self, token: str):
        self.token = token
        super().__init__(f"Could not read number: '{token}'")


class InvalidArity(ObjParseError):
    def __init__(self, kind: str, count: int, expected: tuple):
        self.kind = kind
        self.count = count
        self.expected = expected
        lo, hi = expected
        super().__init__(
            f"The {kind} attribute must have {lo}-{hi} values, got {count}"
        )


class InvalidIndexFormat(ObjParseError):
    def __init__(self, token: str, reason: str = "wrong vertex indices format"):
        self.token = token
        self.reason = reason
        super().__init__(f"Could not read index '{token}': {reason}")


class TooFewVertices(ObjParseError):
    def __init__(self, count: int):
        self.count = count
        super().__init__(
            f"A face (polygon) must contain at least 3 vertices, got {count}"
        )


class UnresolvedReference(ObjParseError):
    """Грань ссылается на ещё не объявленную (или отсутствующую) вершину."""

    def __init__(self, slot: str, index: int, pool_size: int):
        self.slot = slot
        self.index = index
        self.pool_size = pool_size
        super().__init__(
            f"Face refers to {slot} index {index}, "
            f"but only {pool_size} {slot}(s) are declared"
        )


class InvalidGroupIndex(ObjMeshError, IndexError):
    def __init__(self, index: int, count: int):
        self.index = index
        self.count = count
        super().__init__(f"Invalid group index {index} (mesh has {count} group(s))")


def describe(exc: BaseException) -> str:
    """Короткое описание вместе с первопричиной (для логов и CLI)."""
    cause = exc.__cause__
    if cause is None or str(cause) in str(exc):
        return str(exc)
    return f"{exc} <- {type(cause).__name__}: {cause}"
