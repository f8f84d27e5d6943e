# objmesh/utils/logger.py
# ---------------------------------------------------------------
# Минимальный логгер пакета.
# ---------------------------------------------------------------

import logging

LOGGER_NAME = "ObjMesh"


def init_logger(level=logging.INFO):
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    return logging.getLogger(LOGGER_NAME)


logger = init_logger()


def set_level(level) -> None:
    """Уровень по имени ("DEBUG") или числу (logging.DEBUG)."""
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
    logger.setLevel(level)
