"""Helper registry with a one-shot setup phase.

A ``HelperRegistry`` starts unconfigured and accepts registrations. ``freeze()``
moves it to the configured state, after which it is read-only and can be shared
by any number of concurrent renders. ``install()`` exposes every helper to a
Jinja2 environment as a global function and, where no built-in filter already
uses the name, as a filter.

Example:
```python
registry = HelperRegistry()
registry.register_function(
    "shout",
    lambda value: value.upper() + "!",
    params=(ParamSpec(name="value"),),
)
registry.freeze()
registry.install(env)
env.from_string("{{ shout('hi') }}").render()  # "HI!"
```
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from typing import Any

from jinja2 import Environment

from template_helpers.errors import HelperError, RegistryFrozenError, UnknownHelperError

from .signature import HelperSignature, ParamSpec, validate

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RegisteredHelper:
    """A helper signature paired with its implementation.

    Calling the instance validates the arguments, then runs the implementation.
    Errors raised inside are tagged with the helper name and re-raised unchanged.
    """

    signature: HelperSignature
    implementation: Callable[..., Any]

    @property
    def name(self) -> str:
        return self.signature.name

    def invoke(self, *args: Any, **kwargs: Any) -> Any:
        try:
            validate(self.signature, args, kwargs)
            return self.implementation(*args, **kwargs)
        except HelperError as exc:
            if exc.helper is None:
                exc.helper = self.name
            raise

    __call__ = invoke


class HelperRegistry:
    """Name → ``RegisteredHelper`` mapping, immutable once frozen."""

    def __init__(self) -> None:
        self._helpers: dict[str, RegisteredHelper] = {}
        self._configured = False

    @property
    def configured(self) -> bool:
        return self._configured

    def register(self, helper: RegisteredHelper) -> RegisteredHelper:
        if self._configured:
            raise RegistryFrozenError(
                f"cannot register '{helper.name}': registry setup is complete"
            )
        name = helper.name.strip()
        if not name or name != helper.name:
            raise ValueError(f"invalid helper name '{helper.name}'")
        if name in self._helpers:
            raise ValueError(f"helper '{name}' is already registered")
        self._helpers[name] = helper
        logger.debug("registered helper %s", helper.signature)
        return helper

    def register_function(
        self,
        name: str,
        implementation: Callable[..., Any],
        params: Iterable[ParamSpec] = (),
        *,
        variadic: ParamSpec | None = None,
        keywords: Iterable[ParamSpec] = (),
        description: str = "",
    ) -> RegisteredHelper:
        signature = HelperSignature(
            name=name,
            params=tuple(params),
            variadic=variadic,
            keywords=tuple(keywords),
            description=description,
        )
        return self.register(RegisteredHelper(signature, implementation))

    def freeze(self) -> HelperRegistry:
        if not self._configured:
            self._configured = True
            logger.debug("helper registry configured with %d helpers", len(self))
        return self

    def get(self, name: str) -> RegisteredHelper:
        try:
            return self._helpers[name]
        except KeyError:
            valid = ", ".join(sorted(self._helpers))
            raise UnknownHelperError(
                f"unknown helper '{name}'. Registered helpers: {valid}"
            ) from None

    def names(self) -> tuple[str, ...]:
        return tuple(self._helpers)

    def signatures(self) -> tuple[HelperSignature, ...]:
        return tuple(helper.signature for helper in self._helpers.values())

    def install(self, env: Environment, *, as_filters: bool = True) -> Environment:
        """Expose helpers to ``env``; the registry must be configured."""
        if not self._configured:
            raise RegistryFrozenError("registry setup is not complete; call freeze() first")
        env.globals.update(self._helpers)
        if as_filters:
            for name, helper in self._helpers.items():
                if name in env.filters:
                    logger.debug("keeping built-in filter %s over helper", name)
                    continue
                env.filters[name] = helper
        return env

    def __contains__(self, name: object) -> bool:
        return name in self._helpers

    def __iter__(self) -> Iterator[RegisteredHelper]:
        return iter(self._helpers.values())

    def __len__(self) -> int:
        return len(self._helpers)
