"""Path manipulation helpers; only ``canonicalize`` touches the filesystem."""

from __future__ import annotations

from pathlib import Path

from template_helpers.capabilities import Capabilities
from template_helpers.core import HelperRegistry, ParamSpec
from template_helpers.errors import HelperIOError

PATH = ParamSpec(name="path")


def parent(path: str) -> str:
    return str(Path(path).parent)


def file_name(path: str) -> str:
    return Path(path).name


def extension(path: str) -> str:
    return Path(path).suffix.removeprefix(".")


def join_path(*parts: str) -> str:
    if not parts:
        return ""
    return str(Path(*parts))


def make_canonicalize(capabilities: Capabilities):
    def canonicalize(path: str) -> str:
        try:
            return str(capabilities.resolve_path(path).resolve(strict=True))
        except OSError as exc:
            raise HelperIOError(target=path, message=exc.strerror or str(exc)) from exc

    return canonicalize


def register(registry: HelperRegistry, capabilities: Capabilities) -> None:
    registry.register_function("parent", parent, (PATH,))
    registry.register_function("file_name", file_name, (PATH,))
    registry.register_function("extension", extension, (PATH,))
    registry.register_function("canonicalize", make_canonicalize(capabilities), (PATH,))
    registry.register_function(
        "join_path", join_path, variadic=ParamSpec(name="parts")
    )
