from __future__ import annotations

import logging

DEFAULT_FORMAT = "%(levelname)s %(name)s - %(message)s"
LIBRARY_LOGGER = "template_helpers"


def parse_level(level: int | str) -> int:
    """Accept ``logging`` constants or names like ``"debug"``."""
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.strip().upper())
    if not isinstance(resolved, int):
        raise ValueError(f"unknown log level '{level}'")
    return resolved


def configure_library_logging(
    level: int | str = logging.INFO, format: str = DEFAULT_FORMAT, **kwargs
):
    """Configure a basic logging setup if none is present and set the library level."""

    level = parse_level(level)
    logging.getLogger(LIBRARY_LOGGER).setLevel(level)

    root_logger = logging.getLogger()
    if root_logger.handlers:
        return

    logging.basicConfig(level=level, format=format, **kwargs)
