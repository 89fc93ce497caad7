from __future__ import annotations

import logging

from template_helpers.capabilities import Capabilities
from template_helpers.core import HelperRegistry, ParamSpec
from template_helpers.errors import HelperIOError

logger = logging.getLogger(__name__)


def make_read_to_str(capabilities: Capabilities):
    def read_to_str(path: str) -> str:
        target = capabilities.resolve_path(path)
        try:
            return target.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise HelperIOError(target=str(target), message=str(exc)) from exc

    return read_to_str


def make_write_to_file(capabilities: Capabilities):
    def write_to_file(path: str, content: str) -> str:
        target = capabilities.resolve_path(path)
        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text(content, encoding="utf-8")
        except OSError as exc:
            raise HelperIOError(target=str(target), message=str(exc)) from exc
        logger.debug("wrote %d characters to %s", len(content), target)
        return ""

    return write_to_file


def register(registry: HelperRegistry, capabilities: Capabilities) -> None:
    registry.register_function(
        "read_to_str",
        make_read_to_str(capabilities),
        (ParamSpec(name="path"),),
        description="Content of a UTF-8 text file.",
    )
    registry.register_function(
        "write_to_file",
        make_write_to_file(capabilities),
        (ParamSpec(name="path"), ParamSpec(name="content")),
        description="Write content to a file; renders as an empty string.",
    )
