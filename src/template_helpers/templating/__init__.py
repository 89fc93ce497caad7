from .environment import (
    build_registry,
    capabilities_from_settings,
    create_environment,
    get_default_environment,
    get_default_registry,
    render_template,
    setup_environment,
)

__all__ = [
    "build_registry",
    "capabilities_from_settings",
    "create_environment",
    "setup_environment",
    "get_default_registry",
    "get_default_environment",
    "render_template",
]
