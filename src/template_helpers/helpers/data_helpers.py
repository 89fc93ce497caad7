"""Structured-data helpers: decode, query, and re-encode documents.

``json_str_query`` is the one intended for chaining into string helpers. It
decodes a raw document, follows a path, and returns the addressed scalar with
strings wrapped in double quotes so the result reads like a literal argument;
pass it through ``unquote`` to get the bare value.
"""

from __future__ import annotations

from typing import Any

from template_helpers.core import (
    DataFormat,
    HelperRegistry,
    ParamKind,
    ParamSpec,
    decode,
    encode,
    evaluate,
    to_template_string,
)

FORMAT = ParamSpec(name="format", choices=DataFormat.tags())
PATH = ParamSpec(name="path")
DATA = ParamSpec(name="data")


def json_str_query(path: str, data: str, *, format: str) -> str:  # noqa: A002
    document = decode(data, format)
    return to_template_string(evaluate(document, path), quote_strings=True)


def json_query(path: str, value: Any) -> Any:
    return evaluate(value, path)


def str_to_json(data: str, *, format: str) -> Any:  # noqa: A002
    return decode(data, format)


def json_to_str(value: Any, *, format: str = DataFormat.JSON.value) -> str:  # noqa: A002
    return encode(value, format)


def register(registry: HelperRegistry) -> None:
    registry.register_function(
        "json_str_query",
        json_str_query,
        (PATH, DATA),
        keywords=(FORMAT,),
        description="Scalar at `path` in a raw document, strings quoted.",
    )
    registry.register_function(
        "json_query",
        json_query,
        (PATH, ParamSpec(name="value", kind=ParamKind.ANY)),
        description="Sub-value at `path` in an already decoded value.",
    )
    registry.register_function(
        "str_to_json",
        str_to_json,
        (DATA,),
        keywords=(FORMAT,),
        description="Decode a raw document.",
    )
    registry.register_function(
        "json_to_str",
        json_to_str,
        (ParamSpec(name="value", kind=ParamKind.ANY),),
        keywords=(FORMAT.model_copy(update={"required": False}),),
        description="Encode a value as json, json_pretty or yaml.",
    )
