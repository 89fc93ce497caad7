import threading
from collections.abc import Mapping
from typing import Any

from jinja2 import BaseLoader, Environment, StrictUndefined, Undefined
from jinja2.sandbox import SandboxedEnvironment

from template_helpers import helpers
from template_helpers.capabilities import Capabilities
from template_helpers.config import HelperSettings
from template_helpers.core import HelperRegistry


def capabilities_from_settings(settings: HelperSettings) -> Capabilities:
    return Capabilities(base_dir=settings.base_dir, http_timeout=settings.http_timeout)


def build_registry(
    settings: HelperSettings | None = None,
    capabilities: Capabilities | None = None,
) -> HelperRegistry:
    """Register the configured helper groups and complete the setup phase."""
    settings = settings or HelperSettings()
    capabilities = capabilities or capabilities_from_settings(settings)
    registry = HelperRegistry()
    helpers.register(registry, capabilities, settings.groups)
    return registry.freeze()


def setup_environment(
    env: Environment,
    registry: HelperRegistry | None = None,
    settings: HelperSettings | None = None,
) -> Environment:
    """Configure an existing environment the way helpers expect and install them.

    HTML escaping is turned off since rendered values are usually code-like
    tokens, and undefined variables raise unless ``strict_undefined`` is off.
    """
    settings = settings or HelperSettings()
    registry = registry or build_registry(settings)
    env.autoescape = settings.autoescape
    env.undefined = StrictUndefined if settings.strict_undefined else Undefined
    registry.freeze().install(env, as_filters=settings.register_filters)
    return env


def create_environment(
    settings: HelperSettings | None = None,
    registry: HelperRegistry | None = None,
    loader: BaseLoader | None = None,
    **kwargs: Any,
) -> Environment:
    """Create a Jinja2 environment with helpers installed.

    Extra keyword arguments are forwarded to the ``Environment`` constructor.
    """
    settings = settings or HelperSettings()
    env_cls = SandboxedEnvironment if settings.use_sandbox else Environment
    config: dict[str, Any] = {"keep_trailing_newline": True}
    config.update(kwargs)
    env = env_cls(loader=loader, **config)
    return setup_environment(env, registry=registry, settings=settings)


# Singleton instances shared by every render once built
_default_registry: HelperRegistry | None = None
_default_env: Environment | None = None
_default_lock = threading.Lock()


def get_default_registry() -> HelperRegistry:
    """Get the process-wide registry with every helper group, built once."""
    global _default_registry

    with _default_lock:
        if _default_registry is None:
            _default_registry = build_registry()
        return _default_registry


def get_default_environment() -> Environment:
    """Get a cached environment backed by the default registry."""
    global _default_env

    registry = get_default_registry()
    with _default_lock:
        if _default_env is None:
            _default_env = create_environment(registry=registry)
        return _default_env


def render_template(
    template: str,
    context: Mapping[str, Any] | None = None,
    env: Environment | None = None,
    **kwargs: Any,
) -> str:
    """Render a template string; helper errors propagate to the caller."""
    env = env or get_default_environment()
    return env.from_string(template).render(dict(context or {}), **kwargs)
