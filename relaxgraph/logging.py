"""Package-wide logging setup for relaxgraph.

Every module obtains its logger through :func:`get_logger`, so all records
flow through one ``relaxgraph`` root logger that owns a single handler.
Child loggers stay at NOTSET and inherit the root level.

On top of that plain single-handler setup this module adds:
  - level names (``"debug"``, ``"WARNING"``) wherever a level is accepted,
    with ``ValueError`` for unknown names;
  - an initial level read from the ``RELAXGRAPH_LOG_LEVEL`` environment
    variable, falling back to INFO when it is unset or not a level name.

The relaxation engine logs run start (including the number of Steps it will
record), per-pass relaxation counts and negative-cycle outcomes at DEBUG.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import Optional, Union

ROOT_LOGGER_NAME = "relaxgraph"
LOG_LEVEL_ENV_VAR = "RELAXGRAPH_LOG_LEVEL"
DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

_configured = False


def _coerce_level(level: Union[int, str]) -> int:
    """Translate a level name such as ``"debug"`` into its numeric value.

    Raises:
        ValueError: If ``level`` is a string that names no logging level.
    """
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.strip().upper())
    if not isinstance(resolved, int):
        raise ValueError(f"Unknown log level: {level!r}")
    return resolved


def _level_from_env(default: int) -> int:
    raw = os.environ.get(LOG_LEVEL_ENV_VAR)
    if not raw:
        return default
    try:
        return _coerce_level(raw)
    except ValueError:
        return default


def setup_root_logger(
    level: Optional[Union[int, str]] = None,
    format_string: Optional[str] = None,
    handler: Optional[logging.Handler] = None,
) -> None:
    """Attach the single handler to the ``relaxgraph`` root logger.

    Only the first call has an effect; later calls return immediately so that
    handlers never accumulate.

    Args:
        level: Initial level. Defaults to ``RELAXGRAPH_LOG_LEVEL`` or INFO.
        format_string: Formatter pattern (defaults to ``DEFAULT_FORMAT``).
        handler: Handler to install; a stdout ``StreamHandler`` by default.
    """
    global _configured

    if _configured:
        return

    if level is None:
        resolved_level = _level_from_env(logging.INFO)
    else:
        resolved_level = _coerce_level(level)

    root = logging.getLogger(ROOT_LOGGER_NAME)
    root.setLevel(resolved_level)
    root.handlers.clear()

    if handler is None:
        handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(format_string or DEFAULT_FORMAT))
    root.addHandler(handler)

    # pytest's caplog relies on propagation
    root.propagate = True

    _configured = True


def get_logger(name: str) -> logging.Logger:
    """Return a logger that inherits the ``relaxgraph`` root configuration.

    Args:
        name: Logger name, normally ``__name__`` of the calling module.

    Returns:
        The logger, with its own level left at NOTSET.
    """
    setup_root_logger()
    logger = logging.getLogger(name)
    logger.setLevel(logging.NOTSET)
    return logger


def set_global_log_level(level: Union[int, str]) -> None:
    """Change the level of the root logger and of its handlers."""
    setup_root_logger()
    numeric = _coerce_level(level)
    root = logging.getLogger(ROOT_LOGGER_NAME)
    root.setLevel(numeric)
    for handler in root.handlers:
        handler.setLevel(numeric)


def enable_debug_logging() -> None:
    """Switch every relaxgraph logger to DEBUG."""
    set_global_log_level(logging.DEBUG)


def disable_debug_logging() -> None:
    """Return every relaxgraph logger to INFO."""
    set_global_log_level(logging.INFO)


def reset_logging() -> None:
    """Drop handlers and forget the setup so the next call starts over."""
    global _configured
    _configured = False

    root = logging.getLogger(ROOT_LOGGER_NAME)
    root.handlers.clear()
    root.setLevel(logging.NOTSET)


setup_root_logger()
