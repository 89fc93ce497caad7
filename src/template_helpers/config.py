"""Settings that control which helpers are installed and how Jinja2 is configured."""

from __future__ import annotations

import os
from collections.abc import Mapping
from enum import StrEnum
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator

ENV_PREFIX = "TEMPLATE_HELPERS_"


class HelperGroup(StrEnum):
    STRING = "string"
    ENV = "env"
    PATH = "path"
    FILE = "file"
    HTTP = "http"
    DATA = "data"


class HelperSettings(BaseModel):
    """Configuration for building a helper registry and its Jinja2 environment."""

    model_config = ConfigDict(frozen=True)

    groups: frozenset[HelperGroup] = Field(default_factory=lambda: frozenset(HelperGroup))
    strict_undefined: bool = True
    autoescape: bool = False
    use_sandbox: bool = False
    register_filters: bool = True
    base_dir: Path | None = None
    http_timeout: float = Field(default=30.0, gt=0)

    @field_validator("groups", mode="before")
    @classmethod
    def _split_groups(cls, value):
        if isinstance(value, str):
            return frozenset(part.strip() for part in value.split(",") if part.strip())
        return value

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None, **overrides) -> HelperSettings:
        """Build settings from ``TEMPLATE_HELPERS_*`` variables, then apply overrides."""
        environ = os.environ if environ is None else environ
        values: dict[str, object] = {}
        for field_name, key in (
            ("groups", "GROUPS"),
            ("base_dir", "BASE_DIR"),
            ("http_timeout", "HTTP_TIMEOUT"),
            ("use_sandbox", "SANDBOX"),
        ):
            raw = environ.get(f"{ENV_PREFIX}{key}")
            if raw is not None and raw != "":
                values[field_name] = raw
        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls.model_validate(values)
