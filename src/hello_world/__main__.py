"""``python -m hello_world`` runs the same production-wired entry as the console script."""

from __future__ import annotations

from .entry import main

if __name__ == "__main__":
    raise SystemExit(main())
