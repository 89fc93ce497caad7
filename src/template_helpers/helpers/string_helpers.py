"""String case conversion, inflection, trimming and fallback helpers."""

from __future__ import annotations

import re
from typing import Any

import inflection

from template_helpers.core import (
    HelperRegistry,
    ParamKind,
    ParamSpec,
    quote,
    to_template_string,
    unquote,
)

_WORD_RE = re.compile(r"[A-Z]+(?![a-z])|[A-Z]?[a-z]+|\d+")

VALUE = ParamSpec(name="value")


def _words(value: str) -> list[str]:
    return _WORD_RE.findall(value)


def _capitalize(word: str) -> str:
    return word[:1].upper() + word[1:].lower()


def to_lower_case(value: str) -> str:
    return value.lower()


def to_upper_case(value: str) -> str:
    return value.upper()


def to_camel_case(value: str) -> str:
    words = _words(value)
    if not words:
        return ""
    return words[0].lower() + "".join(_capitalize(w) for w in words[1:])


def to_pascal_case(value: str) -> str:
    return "".join(_capitalize(w) for w in _words(value))


def to_snake_case(value: str) -> str:
    return "_".join(w.lower() for w in _words(value))


def to_kebab_case(value: str) -> str:
    return "-".join(w.lower() for w in _words(value))


def to_shouty_snake_case(value: str) -> str:
    return "_".join(w.upper() for w in _words(value))


def to_shouty_kebab_case(value: str) -> str:
    return "-".join(w.upper() for w in _words(value))


def to_title_case(value: str) -> str:
    return " ".join(_capitalize(w) for w in _words(value))


def to_train_case(value: str) -> str:
    return "-".join(_capitalize(w) for w in _words(value))


def to_singular(value: str) -> str:
    """Singular form of the last word, e.g. ``"Hello foo-bars"`` -> ``"bar"``."""
    words = _words(value)
    return inflection.singularize(words[-1]) if words else ""


def to_plural(value: str) -> str:
    """Plural form of the last word, e.g. ``"my box"`` -> ``"boxes"``."""
    words = _words(value)
    return inflection.pluralize(words[-1]) if words else ""


def trim(value: str) -> str:
    return value.strip()


def trim_start(value: str) -> str:
    return value.lstrip()


def trim_end(value: str) -> str:
    return value.rstrip()


def replace(value: str, old: str, new: str) -> str:
    return value.replace(old, new)


def first_non_empty(*values: Any) -> str:
    """Return the first value that is neither null nor an empty string.

    Non-string scalars come back in their template form, so ``false`` stays ``false``.
    """
    for value in values:
        if value is None or value == "":
            continue
        return value if isinstance(value, str) else to_template_string(value)
    return ""


CASE_HELPERS = {
    "to_lower_case": to_lower_case,
    "to_upper_case": to_upper_case,
    "to_camel_case": to_camel_case,
    "to_pascal_case": to_pascal_case,
    "to_snake_case": to_snake_case,
    "to_kebab_case": to_kebab_case,
    "to_shouty_snake_case": to_shouty_snake_case,
    "to_shouty_kebab_case": to_shouty_kebab_case,
    "to_title_case": to_title_case,
    "to_train_case": to_train_case,
    "to_singular": to_singular,
    "to_plural": to_plural,
    "trim": trim,
    "trim_start": trim_start,
    "trim_end": trim_end,
    "quote": quote,
    "unquote": unquote,
}


def register(registry: HelperRegistry) -> None:
    for name, implementation in CASE_HELPERS.items():
        registry.register_function(name, implementation, (VALUE,))
    registry.register_function(
        "replace",
        replace,
        (VALUE, ParamSpec(name="from"), ParamSpec(name="to")),
        description="Replace every occurrence of `from` with `to`.",
    )
    registry.register_function(
        "first_non_empty",
        first_non_empty,
        variadic=ParamSpec(name="values", kind=ParamKind.SCALAR),
        description="First argument that is not null or empty.",
    )
