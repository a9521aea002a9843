"""Run the pairline server under uvicorn on the configured host/port."""

from __future__ import annotations

import uvicorn

from pairline.config.logging import LOG_LEVEL
from pairline.runtime.settings import load_settings


def main() -> None:
    server = load_settings().server
    uvicorn.run(
        "pairline.server:app",
        host=server.host,
        port=server.port,
        log_level=LOG_LEVEL.lower(),
        reload=False,
    )


if __name__ == "__main__":
    main()
