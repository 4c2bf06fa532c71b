"""Run the service with uvicorn."""
from __future__ import annotations

import uvicorn

from .core.config import get_settings
from .main import create_app


def run() -> None:
    settings = get_settings()
    uvicorn.run(
        create_app(),
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":  # pragma: no cover - manual execution helper
    run()
