"""Module entry point for ``python -m app_secret_config``."""

from __future__ import annotations

from .entry import main

if __name__ == "__main__":
    raise SystemExit(main())
