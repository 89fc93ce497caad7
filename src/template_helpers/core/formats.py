"""Format decoder and encoder for the serialization formats helpers understand."""

from __future__ import annotations

import datetime
import json
import logging
import tomllib
from enum import StrEnum
from typing import Any

import yaml

from template_helpers.errors import DecodeFailure, TypeMismatch

from .values import kind_of

logger = logging.getLogger(__name__)


class DataFormat(StrEnum):
    """Closed set of format tags accepted by ``format=`` arguments."""

    JSON = "json"
    JSON_PRETTY = "json_pretty"
    YAML = "yaml"
    TOML = "toml"

    @classmethod
    def parse(cls, tag: DataFormat | str) -> DataFormat:
        if isinstance(tag, cls):
            return tag
        try:
            return cls(str(tag).strip().lower())
        except ValueError:
            raise TypeMismatch(
                expected=f"one of {', '.join(cls.tags())}",
                actual=f"format '{tag}'",
                name="format",
            ) from None

    @classmethod
    def tags(cls) -> tuple[str, ...]:
        return tuple(member.value for member in cls)


ENCODABLE_FORMATS = (DataFormat.JSON, DataFormat.JSON_PRETTY, DataFormat.YAML)


def decode(raw: str, format: DataFormat | str) -> Any:  # noqa: A002
    """Parse ``raw`` as ``format`` into plain Python values.

    Raises:
        DecodeFailure: the parser rejected the input.
        TypeMismatch: ``format`` is not a supported tag or ``raw`` is not a string.
    """
    fmt = DataFormat.parse(format)
    if not isinstance(raw, str):
        raise TypeMismatch(expected="string", actual=kind_of(raw), name="data")

    try:
        match fmt:
            case DataFormat.JSON | DataFormat.JSON_PRETTY:
                return json.loads(raw)
            case DataFormat.YAML:
                return yaml.safe_load(raw)
            case DataFormat.TOML:
                return tomllib.loads(raw)
    except (ValueError, RecursionError, yaml.YAMLError) as exc:
        # JSONDecodeError and TOMLDecodeError are ValueError subclasses.
        logger.debug("decode failed for %s input: %s", fmt, exc)
        raise DecodeFailure(format=fmt.value, message=_single_line(exc)) from exc


def _json_default(value: Any) -> Any:
    if isinstance(value, (datetime.date, datetime.time)):
        return value.isoformat()
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def encode(value: Any, format: DataFormat | str = DataFormat.JSON) -> str:  # noqa: A002
    """Serialize ``value`` in ``format``; TOML output is not supported."""
    fmt = DataFormat.parse(format)
    if fmt not in ENCODABLE_FORMATS:
        raise TypeMismatch(
            expected=f"one of {', '.join(f.value for f in ENCODABLE_FORMATS)}",
            actual=f"format '{fmt.value}'",
            name="format",
        )

    try:
        if fmt is DataFormat.YAML:
            return yaml.safe_dump(
                value, sort_keys=False, allow_unicode=True, default_flow_style=False
            )
        indent = 2 if fmt is DataFormat.JSON_PRETTY else None
        return json.dumps(value, ensure_ascii=False, indent=indent, default=_json_default)
    except (TypeError, ValueError, yaml.YAMLError) as exc:
        raise TypeMismatch(
            expected=f"{fmt.value}-serializable value", actual=kind_of(value)
        ) from exc


def _single_line(exc: Exception) -> str:
    return " ".join(str(exc).split())
