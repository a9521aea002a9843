"""Listen address configuration (env-resolved constants only)."""

from __future__ import annotations

import os

HOST: str = (os.getenv("HOST") or "").strip() or "0.0.0.0"

_PORT_RAW = (os.getenv("PORT") or "").strip()
try:
    PORT: int = int(_PORT_RAW) if _PORT_RAW else 3000
except Exception:
    PORT = 3000
if PORT <= 0 or PORT > 65535:
    raise ValueError("PORT must be between 1 and 65535")

__all__ = ["HOST", "PORT"]
