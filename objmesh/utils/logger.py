# objmesh/utils/logger.py
# ---------------------------------------------------------------
# Минимальный логгер пакета. Ошибки разбора не логируются здесь,
# а пробрасываются вызывающему коду.
# ---------------------------------------------------------------

import logging

LOGGER_NAME = "objmesh"


def init_logger(level=logging.INFO):
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    return logging.getLogger(LOGGER_NAME)


def set_level(level) -> None:
    """Уровень принимает int или имя ('DEBUG', 'INFO', ...)."""
    if isinstance(level, str):
        resolved = logging.getLevelName(level.upper())
        if not isinstance(resolved, int):
            raise ValueError(f"Unknown log level: {level}")
        level = resolved
    elif not isinstance(level, int):
        raise ValueError(f"Unknown log level: {level!r}")
    logger.setLevel(level)


logger = init_logger()
