"""Logging setup for spgraph.

Every module logs through a child of the ``spgraph`` logger obtained with
``get_logger(__name__)``. The engine reports search start, result and
unreachable outcomes at DEBUG; ``spgraph.report.print_path`` writes at INFO.
"""

import logging
import sys
from typing import Optional, Union

PACKAGE_LOGGER = "spgraph"
DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

_configured = False


def setup_root_logger(
    level: int = logging.INFO,
    format_string: Optional[str] = None,
    handler: Optional[logging.Handler] = None,
    force: bool = False,
) -> None:
    """Attach a single formatted handler to the ``spgraph`` logger.

    Later calls are ignored unless ``force`` is set, in which case the
    existing handler is replaced.

    Args:
        level: Level for the package logger (default: INFO).
        format_string: Record format; defaults to ``DEFAULT_FORMAT``.
        handler: Destination handler; defaults to a stdout StreamHandler.
        force: Reconfigure even if already set up.
    """
    global _configured

    if _configured and not force:
        return

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.setLevel(level)
    package_logger.handlers.clear()

    if handler is None:
        handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(format_string or DEFAULT_FORMAT))
    package_logger.addHandler(handler)

    # Records still reach the root logger so pytest's caplog sees them
    package_logger.propagate = True

    _configured = True


def get_logger(name: str) -> logging.Logger:
    """Return the logger for ``name`` (typically ``__name__``).

    Child loggers carry no handlers or level of their own and inherit both
    from the ``spgraph`` logger.
    """
    setup_root_logger()
    logger = logging.getLogger(name)
    logger.setLevel(logging.NOTSET)
    return logger


def set_log_level(level: Union[int, str]) -> None:
    """Set the level of every spgraph logger.

    Args:
        level: Numeric level or a case-insensitive name such as ``"debug"``.

    Raises:
        ValueError: If ``level`` names no known logging level.
    """
    if isinstance(level, str):
        resolved = logging.getLevelName(level.upper())
        if not isinstance(resolved, int):
            raise ValueError(f"Unknown log level '{level}'.")
        level = resolved

    setup_root_logger()
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.setLevel(level)
    for handler in package_logger.handlers:
        handler.setLevel(level)


setup_root_logger()
