"""Tests for the structured-data helpers and their composition with other helpers."""

import pytest

from template_helpers.errors import (
    DecodeFailure,
    MissingParameter,
    PathNotFound,
    TypeMismatch,
    UnexpectedParameter,
)
from template_helpers.helpers.data_helpers import json_str_query

CARGO_TOML = """\
[package]
name = "demo"
version = "0.3.0"
edition = "2021"

[dependencies]
serde = { version = "1", features = ["derive"] }
"""

EDITION_DOCUMENTS = {
    "toml": '[package]\nedition = "2021"\n',
    "json": '{"package": {"edition": "2021"}}',
    "yaml": "package:\n  edition: '2021'\n",
}

QUERY_CHAIN = (
    '{{ first_non_empty(unquote(json_str_query("package.edition", doc, format=fmt)), '
    '"0.0.0") }}'
)


@pytest.mark.parametrize("fmt", sorted(EDITION_DOCUMENTS))
def test_query_chain_renders_edition(render, fmt):
    assert render(QUERY_CHAIN, doc=EDITION_DOCUMENTS[fmt], fmt=fmt) == "2021"


def test_query_chain_with_integer_value(render):
    doc = "[package]\nedition = 2021\n"
    assert render(QUERY_CHAIN, doc=doc, fmt="toml") == "2021"


def test_full_chain_from_file_with_env_fallback(render, tmp_path, fake_environ):
    (tmp_path / "Cargo.toml").write_text(CARGO_TOML, encoding="utf-8")
    template = (
        '{{ first_non_empty(unquote(json_str_query("package.edition", '
        'read_to_str("Cargo.toml"), format="toml")), env_var("MY_VERSION"), "0.0.0") }}'
    )

    assert render(template) == "2021"


class TestJsonStrQuery:
    def test_strings_come_back_quoted(self):
        assert json_str_query("package.name", CARGO_TOML, format="toml") == '"demo"'

    def test_indexed_path(self):
        rendered = json_str_query(
            "dependencies.serde.features[0]", CARGO_TOML, format="toml"
        )
        assert rendered == '"derive"'

    def test_scalars_are_not_quoted(self):
        assert json_str_query("a", '{"a": 1.5}', format="json") == "1.5"
        assert json_str_query("a", "a: true", format="yaml") == "true"
        assert json_str_query("a", '{"a": null}', format="json") == "null"

    def test_container_result_is_type_mismatch(self):
        with pytest.raises(TypeMismatch) as exc_info:
            json_str_query("dependencies", CARGO_TOML, format="toml")

        assert exc_info.value.actual == "mapping"

    @pytest.mark.parametrize("fmt", ["TOML", "Toml", " toml "])
    def test_format_tag_case_is_ignored(self, render, fmt):
        rendered = render(
            '{{ unquote(json_str_query("package.name", doc, format=fmt)) }}',
            doc=CARGO_TOML,
            fmt=fmt,
        )
        assert rendered == "demo"


class TestErrorPropagation:
    def test_missing_path_aborts_the_whole_chain(self, render):
        with pytest.raises(PathNotFound) as exc_info:
            render(QUERY_CHAIN.replace("package.edition", "package.missing"),
                   doc=CARGO_TOML, fmt="toml")

        error = exc_info.value
        assert error.helper == "json_str_query"
        assert error.path == "package.missing"
        assert error.at_segment == 1
        assert error.segment == "missing"

    def test_malformed_document(self, render):
        with pytest.raises(DecodeFailure) as exc_info:
            render(QUERY_CHAIN, doc="[package\nedition=", fmt="toml")

        assert exc_info.value.format == "toml"
        assert exc_info.value.helper == "json_str_query"

    def test_format_is_required(self, render):
        with pytest.raises(MissingParameter) as exc_info:
            render('{{ json_str_query("a", doc) }}', doc="{}")

        assert exc_info.value.name == "format"
        assert "format=<json|json_pretty|yaml|toml>" in exc_info.value.signature

    def test_unsupported_format(self, render):
        with pytest.raises(TypeMismatch) as exc_info:
            render('{{ json_str_query("a", doc, format="xml") }}', doc="{}")

        assert exc_info.value.name == "format"

    def test_unknown_keyword(self, render):
        with pytest.raises(UnexpectedParameter):
            render('{{ json_str_query("a", doc, format="json", strict=true) }}', doc="{}")

    def test_missing_document_argument(self, render):
        with pytest.raises(MissingParameter) as exc_info:
            render('{{ json_str_query("a", format="json") }}')

        assert (exc_info.value.position, exc_info.value.name) == (2, "data")

    def test_structured_value_into_string_helper(self, render):
        with pytest.raises(TypeMismatch) as exc_info:
            render('{{ to_upper_case(json_query("a", data)) }}', data={"a": [1, 2]})

        assert exc_info.value.helper == "to_upper_case"
        assert exc_info.value.actual == "sequence"


class TestOtherDataHelpers:
    def test_json_query_returns_raw_value(self, render):
        template = "{% for n in json_query('a.b', data) %}{{ n }};{% endfor %}"
        assert render(template, data={"a": {"b": [1, 2, 3]}}) == "1;2;3;"

    def test_str_to_json_then_query(self, render):
        template = '{{ json_query("items[1].name", str_to_json(raw, format="yaml")) }}'
        raw = "items:\n  - name: first\n  - name: second\n"
        assert render(template, raw=raw) == "second"

    def test_json_to_str_defaults_to_json(self, render):
        assert render("{{ json_to_str(data) }}", data={"a": 1}) == '{"a": 1}'

    def test_json_to_str_yaml(self, render):
        assert render('{{ json_to_str(data, format="yaml") }}', data={"a": 1}) == "a: 1\n"

    def test_round_trip_between_formats(self, render):
        template = '{{ json_to_str(str_to_json(raw, format="toml"), format="json") }}'
        assert render(template, raw='a = 1\nb = "x"\n') == '{"a": 1, "b": "x"}'
