"""Utility helpers for the kingdom package."""

from kingdom.utils.identity import (
    DEFAULT_IDENTITY,
    IdentitySource,
    SequentialIds,
    fixed_clock,
    utc_now,
    uuid_id,
)

__all__ = [
    "DEFAULT_IDENTITY",
    "IdentitySource",
    "SequentialIds",
    "fixed_clock",
    "utc_now",
    "uuid_id",
]
