import pytest
from jinja2 import Environment, UndefinedError
from jinja2.sandbox import SandboxedEnvironment

from template_helpers import (
    HelperSettings,
    build_registry,
    create_environment,
    get_default_environment,
    get_default_registry,
    render_template,
    setup_environment,
)
from template_helpers.errors import RegistryFrozenError


def test_html_is_not_escaped(render):
    assert render("{{ value }}", value="<a href='x'>&</a>") == "<a href='x'>&</a>"


def test_undefined_variables_are_errors(render):
    with pytest.raises(UndefinedError):
        render("{{ missing }}")


def test_lenient_undefined_when_configured(registry):
    env = create_environment(HelperSettings(strict_undefined=False), registry=registry)
    assert env.from_string("[{{ missing }}]").render() == "[]"


def test_sandbox_setting():
    env = create_environment(HelperSettings(use_sandbox=True, groups={"string"}))
    assert isinstance(env, SandboxedEnvironment)
    assert env.from_string("{{ to_kebab_case('A B') }}").render() == "a-b"


def test_groups_limit_registered_helpers():
    registry = build_registry(HelperSettings(groups={"string"}))
    assert "to_upper_case" in registry
    assert "env_var" not in registry
    assert "json_str_query" not in registry
    assert registry.configured


def test_built_registry_is_frozen():
    registry = build_registry(HelperSettings(groups={"data"}))
    with pytest.raises(RegistryFrozenError):
        registry.register_function("late", str)


def test_setup_existing_environment(registry):
    env = setup_environment(Environment(autoescape=True), registry=registry)
    assert env.autoescape is False
    assert env.from_string("{{ to_upper_case('<b>') }}").render() == "<B>"


def test_kwargs_are_forwarded_to_environment(registry):
    env = create_environment(registry=registry, trim_blocks=True)
    assert env.trim_blocks is True
    assert env.keep_trailing_newline is True


def test_default_registry_and_environment_are_shared():
    assert get_default_registry() is get_default_registry()
    assert get_default_environment() is get_default_environment()
    assert get_default_registry().configured


def test_render_template_uses_default_environment():
    assert render_template('{{ to_upper_case(to_singular("Hello foo-bars")) }}') == "BAR"


def test_render_template_with_context_and_env(env):
    assert render_template("{{ to_title_case(name) }}", {"name": "ada_lovelace"}, env=env) == (
        "Ada Lovelace"
    )
