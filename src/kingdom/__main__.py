"""Allow ``python -m kingdom``."""

from kingdom.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
