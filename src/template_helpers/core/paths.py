"""Dotted/indexed path expressions and their evaluation against decoded documents.

Syntax is deliberately small: ``a.b.c`` walks mapping keys, ``items[0]`` or
``items.0`` addresses a sequence element. A plain segment that is a non-negative
integer literal indexes a sequence when the current value is a sequence and is a
literal string key otherwise. Bracketed indices only ever address sequences.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, TypeAlias

from template_helpers.errors import PathNotFound

from .values import is_mapping, is_sequence, kind_of

_PIECE_RE = re.compile(r"^(?P<key>[^\[\]]*)(?P<indices>(?:\[-?\d+\])*)$")
_INDEX_RE = re.compile(r"\[(-?\d+)\]")


@dataclass(frozen=True)
class KeySegment:
    key: str

    def __str__(self) -> str:
        return self.key


@dataclass(frozen=True)
class IndexSegment:
    index: int

    def __str__(self) -> str:
        return f"[{self.index}]"


Segment: TypeAlias = KeySegment | IndexSegment


@dataclass(frozen=True)
class PathExpression:
    """A parsed path; zero segments addresses the document root."""

    source: str
    segments: tuple[Segment, ...]

    @classmethod
    def parse(cls, source: str) -> PathExpression:
        segments: list[Segment] = []
        if source != "":
            for piece in source.split("."):
                match = _PIECE_RE.match(piece)
                if match is None:
                    # Unbalanced brackets: the whole piece is a literal key.
                    segments.append(KeySegment(piece))
                    continue
                key, indices = match.group("key"), match.group("indices")
                if key or not indices:
                    segments.append(KeySegment(key))
                segments.extend(IndexSegment(int(i)) for i in _INDEX_RE.findall(indices))
        return cls(source=source, segments=tuple(segments))

    def __str__(self) -> str:
        return self.source

    def __len__(self) -> int:
        return len(self.segments)


def _is_index_literal(text: str) -> bool:
    return text.isascii() and text.isdigit()


def _step(current: Any, segment: Segment) -> tuple[bool, Any, str]:
    """Resolve one segment; returns (found, value, reason)."""
    if isinstance(segment, IndexSegment):
        if not is_sequence(current):
            return False, None, f"cannot index into {kind_of(current)}"
        if 0 <= segment.index < len(current):
            return True, current[segment.index], ""
        return False, None, f"index out of range for sequence of length {len(current)}"

    key = segment.key
    if key == "":
        return False, None, "empty key"
    if is_mapping(current):
        if key in current:
            return True, current[key], ""
        if _is_index_literal(key) and int(key) in current:
            return True, current[int(key)], ""
        return False, None, "key not found"
    if is_sequence(current):
        if not _is_index_literal(key):
            return False, None, "sequence index must be a non-negative integer"
        index = int(key)
        if index < len(current):
            return True, current[index], ""
        return False, None, f"index out of range for sequence of length {len(current)}"
    return False, None, f"cannot look up key in {kind_of(current)}"


def evaluate(doc: Any, path: PathExpression | str) -> Any:
    """Return the sub-value of ``doc`` addressed by ``path``.

    The returned value is the document's own object, not a copy.

    Raises:
        PathNotFound: naming the full path and the first segment that did not resolve.
    """
    expression = path if isinstance(path, PathExpression) else PathExpression.parse(path)
    current = doc
    for position, segment in enumerate(expression.segments):
        found, current, reason = _step(current, segment)
        if not found:
            raise PathNotFound(
                path=expression.source,
                at_segment=position,
                segment=str(segment),
                reason=reason,
            )
    return current
