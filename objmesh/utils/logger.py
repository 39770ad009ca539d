# objmesh/utils/logger.py
# ---------------------------------------------------------------
# Минимальный логгер пакета.
# ---------------------------------------------------------------

import logging


def init_logger():
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    return logging.getLogger("objmesh")


logger = init_logger()


def set_log_level(level) -> None:
    """Сменить уровень логгера (имя уровня или число)."""
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
    if not isinstance(level, int):
        logger.warning(f"[Logger] Unknown log level {level!r} – keeping {logger.level}")
        return
    logger.setLevel(level)
