"""Local configuration for checklist_nav."""

from __future__ import annotations

import os
from pathlib import Path


DEFAULT_CONTENT_PATH = Path(__file__).resolve().parent / "data" / "checklist.json"
# Shrinks the viewport by half from the bottom so only the top half counts.
DEFAULT_ROOT_MARGIN = "0px 0px -50% 0px"
DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_PAGE_TITLE = "FastAPI + Uvicorn on AWS EC2 Deployment Checklist"
DEFAULT_PAGE_DESCRIPTION = (
    "A comprehensive checklist for deploying FastAPI and Uvicorn applications on AWS EC2 "
    "instances, covering setup, security, and best practices. Includes platform-specific "
    "commands and common pitfalls."
)

CHECKLIST_NAV_CONTENT_PATH = Path(
    os.getenv("CHECKLIST_NAV_CONTENT_PATH", str(DEFAULT_CONTENT_PATH))
).expanduser().resolve()
CHECKLIST_NAV_ROOT_MARGIN = os.getenv("CHECKLIST_NAV_ROOT_MARGIN", DEFAULT_ROOT_MARGIN)
CHECKLIST_NAV_LOG_LEVEL = os.getenv("CHECKLIST_NAV_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()
CHECKLIST_NAV_PAGE_TITLE = os.getenv("CHECKLIST_NAV_PAGE_TITLE", DEFAULT_PAGE_TITLE)
CHECKLIST_NAV_PAGE_DESCRIPTION = os.getenv("CHECKLIST_NAV_PAGE_DESCRIPTION", DEFAULT_PAGE_DESCRIPTION)
