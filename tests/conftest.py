"""Pytest configuration to ensure the `src` package layout is importable.

This adds the `src/` directory to `sys.path` so tests can import the
`kingdom` package without requiring an editable install in CI. Shared
fixtures hand out deterministic identities.
"""

import sys
from datetime import UTC, datetime
from pathlib import Path

import pytest

SRC_PATH = Path(__file__).resolve().parents[1] / "src"
if str(SRC_PATH) not in sys.path:
    sys.path.insert(0, str(SRC_PATH))

from kingdom.utils.identity import IdentitySource, SequentialIds, fixed_clock  # noqa: E402

FOUNDING_MOMENT = datetime(2024, 5, 1, 12, 0, tzinfo=UTC)


@pytest.fixture
def identity() -> IdentitySource:
    """Deterministic ids (``s-1``, ``s-2``...) and a frozen clock."""
    return IdentitySource(next_id=SequentialIds("s"), now=fixed_clock(FOUNDING_MOMENT))
