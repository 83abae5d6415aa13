from __future__ import annotations

import logging

import uvicorn

from .config import Settings, setup_logging
from .index import app as _app

logger = logging.getLogger(__name__)

settings = Settings.from_env()
setup_logging(settings)

app = _app

if not settings.seed_contacts:
    logger.info("Sample contacts disabled (CONTACTS_SEED=false); starting with an empty store")
if "*" in settings.cors_origins:
    logger.warning("CORS allows any origin. Set CORS_ORIGINS to restrict it.")


def main() -> None:
    logger.info(f"Starting Contact Manager on {settings.host}:{settings.port}")
    uvicorn.run(app, host=settings.host, port=settings.port, log_config=None)


if __name__ == "__main__":
    main()
