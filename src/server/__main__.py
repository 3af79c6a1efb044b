"""Server module entry point for running with python -m server."""

import os

import uvicorn

# Import logging configuration first so uvicorn logs through our handler
from checklist_nav.config import CHECKLIST_NAV_CONTENT_PATH, CHECKLIST_NAV_LOG_LEVEL
from checklist_nav.utils.logging_config import get_logger

logger = get_logger(__name__)

if __name__ == "__main__":
    host = os.getenv("HOST", "127.0.0.1")
    port = int(os.getenv("PORT", "8000"))
    reload = os.getenv("RELOAD", "false").lower() == "true"

    logger.info(
        "Starting checklist server on %s:%d",
        host,
        port,
        extra={"content_path": str(CHECKLIST_NAV_CONTENT_PATH)},
    )

    uvicorn.run(
        "server.main:app",
        host=host,
        port=port,
        reload=reload,
        log_level=CHECKLIST_NAV_LOG_LEVEL.lower(),
        log_config=None,
    )
