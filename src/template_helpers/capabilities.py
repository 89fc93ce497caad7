"""Side-effecting capabilities handed to the helpers that need them.

Helpers never reach for ``os.environ``, the working directory or a network
client directly; they close over a ``Capabilities`` instance built at setup
time, so tests can substitute fakes.
"""

from __future__ import annotations

import os
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from pathlib import Path

import httpx


def _default_http_client() -> httpx.Client:
    return httpx.Client(follow_redirects=True)


@dataclass(frozen=True)
class Capabilities:
    environ: Mapping[str, str] = field(default_factory=lambda: os.environ)
    base_dir: Path | None = None
    http_client_factory: Callable[[], httpx.Client] = _default_http_client
    http_timeout: float = 30.0

    def resolve_path(self, path: str | os.PathLike[str]) -> Path:
        candidate = Path(path).expanduser()
        if candidate.is_absolute() or self.base_dir is None:
            return candidate
        return self.base_dir / candidate
