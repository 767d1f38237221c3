"""Process entrypoint: serve the books API with uvicorn on the configured port."""

from __future__ import annotations

import logging
import sys

import uvicorn

from bookshelf.api.api_config import get_api_config
from bookshelf.common.logging import configure_logging

LOGGER = logging.getLogger("bookshelf.api")


def main() -> int:
    config = get_api_config()
    configure_logging(config.log_level)
    LOGGER.info("Starting %s on %s:%s", config.api_name, config.host, config.port)

    # uvicorn exits non-zero by itself when the port cannot be bound or startup fails.
    uvicorn.run(
        "bookshelf.api.app:app",
        host=config.host,
        port=config.port,
        lifespan="on",
        log_level=config.log_level.lower(),
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
