"""Classification of the plain Python values that flow between helpers."""

from __future__ import annotations

import datetime
from collections.abc import Mapping, Sequence
from typing import Any, TypeAlias

from jinja2 import Undefined

Scalar: TypeAlias = None | bool | int | float | str | datetime.date | datetime.time
StructuredValue: TypeAlias = "Scalar | list[StructuredValue] | dict[str, StructuredValue]"

TEMPORAL_TYPES = (datetime.date, datetime.time)


def is_mapping(value: Any) -> bool:
    return isinstance(value, Mapping)


def is_sequence(value: Any) -> bool:
    """True for list-like containers; strings and bytes are scalars here."""
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray))


def is_scalar(value: Any) -> bool:
    if isinstance(value, Undefined):
        return False
    return value is None or isinstance(value, (bool, int, float, str, *TEMPORAL_TYPES))


def kind_of(value: Any) -> str:
    """Name the kind of a runtime value for error messages."""
    if isinstance(value, Undefined):
        return "undefined"
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "bool"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, TEMPORAL_TYPES):
        return "datetime"
    if is_mapping(value):
        return "mapping"
    if is_sequence(value):
        return "sequence"
    return type(value).__name__
