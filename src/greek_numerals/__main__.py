"""``python -m greek_numerals`` runs the same entry point as the console script."""

from __future__ import annotations

from .entry import main

if __name__ == "__main__":
    raise SystemExit(main())
