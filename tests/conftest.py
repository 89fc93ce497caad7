import pytest

from template_helpers import (
    Capabilities,
    HelperSettings,
    build_registry,
    create_environment,
)


@pytest.fixture
def fake_environ() -> dict[str, str]:
    """Environment variables visible to env_var; mutate it inside a test."""
    return {}


@pytest.fixture
def capabilities(fake_environ, tmp_path) -> Capabilities:
    return Capabilities(environ=fake_environ, base_dir=tmp_path)


@pytest.fixture
def registry(capabilities):
    return build_registry(HelperSettings(), capabilities)


@pytest.fixture
def env(registry):
    return create_environment(registry=registry)


@pytest.fixture
def render(env):
    def _render(template: str, **context) -> str:
        return env.from_string(template).render(context)

    return _render
