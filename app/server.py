"""
Run the API with uvicorn. From project root:

  python -m app.server

HOST, PORT and LOG_LEVEL come from the environment (see app.core.config).
"""

import logging
import sys

import uvicorn

from app.core.config import get_settings
from app.core.logging import configure_logging

logger = logging.getLogger(__name__)


def main() -> int:
    settings = get_settings()
    configure_logging(settings.LOG_LEVEL)
    logger.info("App is listening on http://%s:%s", settings.HOST, settings.PORT)
    uvicorn.run(
        "app.main:app",
        host=settings.HOST,
        port=settings.PORT,
        log_level=settings.LOG_LEVEL.lower(),
        reload=settings.APP_ENV == "dev" and settings.DEBUG,
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
