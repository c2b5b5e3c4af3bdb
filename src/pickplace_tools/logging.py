"""
Logging configuration for pickplace-tools.

All modules log through children of the "pickplace_tools" logger, which
is silent until enable_verbose() is called.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from .config import Config

_logger = logging.getLogger("pickplace_tools")
_logger.addHandler(logging.NullHandler())  # Default: no output


def enable_verbose(level: str = "INFO", format: Optional[str] = None) -> None:
    """Enable verbose logging.

    Args:
        level: Logging level - "DEBUG", "INFO", "WARNING", "ERROR"
        format: Optional custom format string

    Example:
        enable_verbose("DEBUG")
        data = generate_pick_place(board)  # Logs one line per device
        disable_verbose()
    """
    _logger.setLevel(getattr(logging, level.upper()))

    # Remove existing handlers
    for handler in _logger.handlers[:]:
        if not isinstance(handler, logging.NullHandler):
            _logger.removeHandler(handler)

    handler = logging.StreamHandler()
    handler.setLevel(getattr(logging, level.upper()))

    if format is None:
        format = "[%(levelname)s] %(name)s: %(message)s"

    handler.setFormatter(logging.Formatter(format))
    _logger.addHandler(handler)


def disable_verbose() -> None:
    """Disable verbose logging."""
    _logger.setLevel(logging.WARNING)
    for handler in _logger.handlers[:]:
        if not isinstance(handler, logging.NullHandler):
            _logger.removeHandler(handler)


def configure_from(config: Config) -> None:
    """Apply the [defaults] verbose/quiet settings of a loaded config."""
    if config.defaults.quiet:
        enable_verbose("ERROR")
    elif config.defaults.verbose:
        enable_verbose("DEBUG")
    else:
        disable_verbose()
