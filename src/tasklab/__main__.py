"""``python -m tasklab`` behaves exactly like the ``tasklab`` console script."""

from __future__ import annotations

from .entry import main

if __name__ == "__main__":
    raise SystemExit(main())
