"""Logger configuration shared by all layers."""

import logging
import sys

from src.core.config import get_settings

_ROOT_LOGGER_NAME = "simple_chess"
_HANDLER_NAME = "simple_chess.stdout"
_DEFAULT_FORMATTER = logging.Formatter(
    "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
)


def _has_own_handler(logger: logging.Logger) -> bool:
    """Other handlers (e.g. pytest's capture handlers) may be attached too, only ours counts."""
    return any(handler.name == _HANDLER_NAME for handler in logger.handlers)


def _configure_root_logger() -> logging.Logger:
    """One stdout handler on the package logger. Child loggers propagate into it."""
    root = logging.getLogger(_ROOT_LOGGER_NAME)
    if not _has_own_handler(root):
        handler = logging.StreamHandler(sys.stdout)
        handler.name = _HANDLER_NAME
        handler.setFormatter(_DEFAULT_FORMATTER)
        root.addHandler(handler)
        root.setLevel(get_settings().log_level)
        root.propagate = False
    return root


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a logger below the package logger, e.g. `simple_chess.src.chess.game`."""
    root = _configure_root_logger()
    if not name:
        return root
    return root.getChild(name)


def set_level(level: int | str) -> None:
    _configure_root_logger().setLevel(level)
