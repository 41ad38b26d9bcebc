"""Run the decode API with ``python -m server``."""

import os

import uvicorn

from json2sections.config import JSON2SECTIONS_LOG_LEVEL
from json2sections.utils.logging_config import configure_logging, get_logger

configure_logging(JSON2SECTIONS_LOG_LEVEL)
logger = get_logger(__name__)


def main() -> None:
    host = os.getenv("HOST", "127.0.0.1")
    port = int(os.getenv("PORT", "8000"))
    reload = os.getenv("RELOAD", "false").lower() == "true"

    logger.info("Starting json2sections API", extra={"host": host, "port": port, "reload": reload})

    # uvicorn keeps its own handlers unless log_config is None
    uvicorn.run("server.main:app", host=host, port=port, reload=reload, log_config=None)


if __name__ == "__main__":
    main()
