# utils/logger.py
import logging
import os
import sys
from config.paths import LOG_PATH

# package loggers whose records also go to the run log
ENGINE_LOGGERS = ("scheduler", "core", "utils")

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()


def _build_handlers():
    LOG_PATH.parent.mkdir(parents=True, exist_ok=True)

    file_handler = logging.FileHandler(LOG_PATH, encoding="utf-8")
    file_handler.setFormatter(
        logging.Formatter(
            "%(asctime)s - %(levelname)s - %(name)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )

    # stdout -> container logs
    stream_handler = logging.StreamHandler(sys.stdout)
    stream_handler.setFormatter(logging.Formatter("[%(levelname)s] %(name)s: %(message)s"))
    return [file_handler, stream_handler]


def setup_logger(name: str = "roster") -> logging.Logger:
    """
    Return the API logger, attaching the run-log and stdout handlers once.
    The engine package loggers share the same handlers so a request and the
    generation run it triggers end up in the same file.
    """
    log = logging.getLogger(name)
    if log.handlers:
        return log

    handlers = _build_handlers()
    for logger_name in (name,) + ENGINE_LOGGERS:
        target = logging.getLogger(logger_name)
        target.setLevel(LOG_LEVEL)
        target.propagate = False
        for handler in handlers:
            target.addHandler(handler)
    return log


logger = setup_logger()
