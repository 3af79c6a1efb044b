"""FastAPI application setup."""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from checklist_nav.content import load_content
from checklist_nav.seo import PAGE_TITLE
from checklist_nav.utils.logging_config import get_logger
from server.models import HealthResponse
from server.routers import checklist

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Load the content tree once for the lifetime of the app."""
    app.state.tree = load_content()
    logger.info("Checklist content ready", extra={"sections": len(app.state.tree)})
    yield


app = FastAPI(title=PAGE_TITLE, lifespan=lifespan)
app.include_router(checklist.router)


@app.get("/health")
async def health() -> HealthResponse:
    return HealthResponse()
