from __future__ import annotations

from collections.abc import Callable

from template_helpers.capabilities import Capabilities
from template_helpers.core import HelperRegistry, ParamSpec


def make_env_var(capabilities: Capabilities) -> Callable[[str], str]:
    environ = capabilities.environ

    def env_var(name: str) -> str:
        # Unset variables render as "" so first_non_empty can fall through.
        return environ.get(name) or ""

    return env_var


def register(registry: HelperRegistry, capabilities: Capabilities) -> None:
    registry.register_function(
        "env_var",
        make_env_var(capabilities),
        (ParamSpec(name="name"),),
        description="Value of an environment variable, empty when unset.",
    )
