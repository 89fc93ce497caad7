"""Helper catalog, grouped so settings can enable or disable whole families."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from template_helpers.capabilities import Capabilities
from template_helpers.config import HelperGroup
from template_helpers.core import HelperRegistry

from . import (
    data_helpers,
    env_helpers,
    file_helpers,
    http_helpers,
    path_helpers,
    string_helpers,
)

logger = logging.getLogger(__name__)


def register(
    registry: HelperRegistry,
    capabilities: Capabilities | None = None,
    groups: Iterable[HelperGroup] | None = None,
) -> HelperRegistry:
    """Register the selected helper groups (all by default) into ``registry``."""
    capabilities = capabilities or Capabilities()
    enabled = frozenset(HelperGroup) if groups is None else frozenset(groups)

    if HelperGroup.STRING in enabled:
        string_helpers.register(registry)
    if HelperGroup.HTTP in enabled:
        http_helpers.register(registry, capabilities)
    if HelperGroup.PATH in enabled:
        path_helpers.register(registry, capabilities)
    if HelperGroup.ENV in enabled:
        env_helpers.register(registry, capabilities)
    if HelperGroup.DATA in enabled:
        data_helpers.register(registry)
    if HelperGroup.FILE in enabled:
        file_helpers.register(registry, capabilities)

    logger.debug("registered helper groups: %s", ", ".join(sorted(enabled)))
    return registry


__all__ = [
    "register",
    "data_helpers",
    "env_helpers",
    "file_helpers",
    "http_helpers",
    "path_helpers",
    "string_helpers",
]
