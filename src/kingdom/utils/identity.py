"""Identifier and clock collaborators for entity construction.

Structures never reach for a global id generator or the wall clock
directly. They receive an :class:`IdentitySource`, so tests can swap in
deterministic ids and timestamps.

Examples:
    >>> source = IdentitySource(next_id=SequentialIds("tower"), now=fixed_clock(EPOCH))
    >>> source.next_id()
    'tower-1'
    >>> source.next_id()
    'tower-2'
"""

from __future__ import annotations

import itertools
from collections.abc import Callable
from dataclasses import dataclass
from datetime import UTC, datetime
from uuid import uuid4

IdFactory = Callable[[], str]
Clock = Callable[[], datetime]

EPOCH = datetime(1970, 1, 1, tzinfo=UTC)


def uuid_id() -> str:
    """Return a random 128-bit identifier as a string."""
    return str(uuid4())


def utc_now() -> datetime:
    return datetime.now(UTC)


def fixed_clock(moment: datetime) -> Clock:
    """Return a clock that always reports ``moment``."""

    def _now() -> datetime:
        return moment

    return _now


class SequentialIds:
    """Deterministic ``<prefix>-<n>`` identifiers, counting from 1."""

    def __init__(self, prefix: str = "structure", start: int = 1):
        if not prefix:
            raise ValueError("prefix cannot be empty")
        self.prefix = prefix
        self._counter = itertools.count(start)

    def __call__(self) -> str:
        return f"{self.prefix}-{next(self._counter)}"


@dataclass(frozen=True, slots=True)
class IdentitySource:
    """Pair of collaborators handing out ids and creation timestamps."""

    next_id: IdFactory = uuid_id
    now: Clock = utc_now


DEFAULT_IDENTITY = IdentitySource()
