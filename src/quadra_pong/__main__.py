"""
Allow ``python -m quadra_pong``.
"""

from __future__ import annotations

from quadra_pong.app import main

if __name__ == "__main__":
    raise SystemExit(main())
