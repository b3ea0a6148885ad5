from __future__ import annotations
import logging
import os


# Defaults
_DEFAULT_LOG_LEVEL = 'WARNING'
_LOG_FORMAT = '%(asctime)s %(name)s %(levelname)s %(message)s'


def level_from_env(var: str, default: str) -> int:
    raw = os.environ.get(var)
    name = raw.strip().upper() if raw and raw.strip() else default
    level = logging.getLevelName(name)
    # getLevelName returns a string for names it does not know
    if not isinstance(level, int):
        level = logging.getLevelName(default)
    return level


def get_log_level() -> int:
    return level_from_env('FORMULA_LOG_LEVEL', _DEFAULT_LOG_LEVEL)


def configure_logging(level: int | None = None) -> logging.Logger:
    """Attach a stream handler to the ``formula`` logger.

    Library modules only create loggers; a host (shell, test harness) opts in
    to output by calling this once.
    """
    logger = logging.getLogger('formula')
    logger.setLevel(get_log_level() if level is None else level)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(_LOG_FORMAT))
        logger.addHandler(handler)
    return logger
