from template_helpers.utilities.logger import (
    DEFAULT_FORMAT,
    configure_library_logging,
    parse_level,
)

__all__ = [
    "DEFAULT_FORMAT",
    "configure_library_logging",
    "parse_level",
]
