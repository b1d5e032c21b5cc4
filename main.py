"""Development entrypoint for the kingdom demonstration."""

from __future__ import annotations

from kingdom.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
