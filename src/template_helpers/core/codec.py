"""Scalar codec: render leaf values as template text and strip quoting layers.

Quoting wraps a string in one pair of double quotes without escaping interior
quote characters; ``unquote`` removes exactly one matching pair of ``"`` or ``'``
and leaves anything else untouched.
"""

from __future__ import annotations

import datetime
import math
from decimal import Decimal
from typing import Any

from template_helpers.errors import TypeMismatch

from .values import is_scalar, kind_of

QUOTE = '"'
QUOTE_CHARS = ('"', "'")


def quote(value: str) -> str:
    return f"{QUOTE}{value}{QUOTE}"


def unquote(value: str) -> str:
    if len(value) >= 2 and value[0] in QUOTE_CHARS and value[-1] == value[0]:
        return value[1:-1]
    return value


def to_template_string(value: Any, quote_strings: bool = False) -> str:
    """Render a scalar in its canonical template form.

    Raises:
        TypeMismatch: ``value`` is a sequence, a mapping or not a scalar at all.
    """
    if not is_scalar(value):
        raise TypeMismatch(expected="scalar", actual=kind_of(value))
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        return _format_float(value)
    if isinstance(value, (datetime.date, datetime.time)):
        return value.isoformat()
    return quote(value) if quote_strings else value


def _format_float(value: float) -> str:
    # Shortest round-tripping digits, written positionally: 1e16 -> 10000000000000000.0
    if not math.isfinite(value):
        return "nan" if math.isnan(value) else ("inf" if value > 0 else "-inf")
    text = format(Decimal(repr(value)), "f")
    return text if "." in text else f"{text}.0"
