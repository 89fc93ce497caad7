"""Helper signatures and the fail-fast argument validator."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from enum import StrEnum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator

from template_helpers.errors import MissingParameter, TypeMismatch, UnexpectedParameter

from .values import is_mapping, is_scalar, is_sequence, kind_of


class ParamKind(StrEnum):
    STRING = "string"
    SCALAR = "scalar"
    STRUCTURED = "structured"
    ANY = "any"

    def accepts(self, value: Any) -> bool:
        match self:
            case ParamKind.STRING:
                return isinstance(value, str)
            case ParamKind.SCALAR:
                return is_scalar(value)
            case ParamKind.STRUCTURED:
                return is_mapping(value) or is_sequence(value)
            case ParamKind.ANY:
                return kind_of(value) != "undefined"
        return False


class ParamSpec(BaseModel):
    """One declared parameter of a helper."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(min_length=1)
    kind: ParamKind = ParamKind.STRING
    required: bool = True
    choices: tuple[str, ...] = ()
    description: str = ""

    def render(self, *, keyword: bool = False) -> str:
        text = self.name
        if keyword or self.choices:
            shape = "|".join(self.choices) if self.choices else self.kind.value
            text = f"{text}=<{shape}>"
        return text if self.required else f"[{text}]"

    def allows(self, value: Any) -> bool:
        """Choice check; tags compare case-insensitively, ignoring surrounding blanks."""
        if not self.choices:
            return True
        if not isinstance(value, str):
            return False
        return value.strip().lower() in {choice.lower() for choice in self.choices}


class HelperSignature(BaseModel):
    """Declared call shape of a helper: positional params, variadic tail, keywords."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(min_length=1)
    params: tuple[ParamSpec, ...] = ()
    variadic: ParamSpec | None = None
    keywords: tuple[ParamSpec, ...] = ()
    description: str = ""

    @model_validator(mode="after")
    def _required_params_come_first(self) -> HelperSignature:
        seen_optional = False
        for param in self.params:
            if not param.required:
                seen_optional = True
            elif seen_optional:
                raise ValueError(
                    f"required param '{param.name}' of '{self.name}' follows an optional one"
                )
        names = [p.name for p in (*self.params, *self.keywords)]
        if len(names) != len(set(names)):
            raise ValueError(f"duplicate parameter names in '{self.name}'")
        return self

    @property
    def min_positional(self) -> int:
        return sum(1 for p in self.params if p.required)

    @property
    def max_positional(self) -> int | None:
        return None if self.variadic is not None else len(self.params)

    def keyword(self, name: str) -> ParamSpec | None:
        for param in self.keywords:
            if param.name == name:
                return param
        return None

    def __str__(self) -> str:
        parts = [self.name, *(p.render() for p in self.params)]
        if self.variadic is not None:
            parts.append(f"{self.variadic.name}...")
        parts.extend(p.render(keyword=True) for p in self.keywords)
        return " ".join(parts)


def _check(param: ParamSpec, value: Any, *, position: int | None) -> None:
    if not param.kind.accepts(value):
        raise TypeMismatch(
            expected=param.kind.value,
            actual=kind_of(value),
            name=param.name,
            position=position,
        )
    if not param.allows(value):
        raise TypeMismatch(
            expected=f"one of {', '.join(param.choices)}",
            actual=repr(value),
            name=param.name,
            position=position,
        )


def validate(
    signature: HelperSignature,
    args: Sequence[Any],
    kwargs: Mapping[str, Any] | None = None,
) -> None:
    """Check ``args``/``kwargs`` against ``signature``; raise on the first violation.

    Positions in errors are 1-based, matching how template authors count arguments.
    """
    kwargs = kwargs or {}

    if len(args) < signature.min_positional:
        missing = signature.params[len(args)]
        raise MissingParameter(
            position=len(args) + 1, name=missing.name, signature=str(signature)
        )

    maximum = signature.max_positional
    if maximum is not None and len(args) > maximum:
        raise UnexpectedParameter(
            expected=f"at most {maximum} positional argument(s)",
            actual=f"{len(args)} in '{signature}'",
        )

    for index, value in enumerate(args):
        if index < len(signature.params):
            param = signature.params[index]
        else:
            param = signature.variadic
        _check(param, value, position=index + 1)

    for key in kwargs:
        if signature.keyword(key) is None:
            raise UnexpectedParameter(
                expected=f"keywords of '{signature}'", actual=f"unknown keyword '{key}'"
            )
    for param in signature.keywords:
        if param.name not in kwargs:
            if param.required:
                raise MissingParameter(
                    position=None, name=param.name, signature=str(signature)
                )
            continue
        _check(param, kwargs[param.name], position=None)
