"""FastAPI application entry point for the document rendering API."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from resume_tailor import __version__
from resume_tailor.api.routes import documents, health, templates
from resume_tailor.config import get_settings
from resume_tailor.templates import list_templates

if TYPE_CHECKING:
    from collections.abc import AsyncIterator

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Log the loaded template catalogue on startup."""
    logger.info("Loaded %d templates: %s", len(list_templates()), ", ".join(list_templates()))
    yield


app = FastAPI(
    title="Resume Tailor API",
    description="Render tailored resumes and cover letters as PDF or DOCX",
    version=__version__,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=list(get_settings().cors_origins),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(documents.router, prefix="/api")
app.include_router(templates.router, prefix="/api")


def main() -> None:
    """Start the development server."""
    import uvicorn

    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    uvicorn.run(
        "resume_tailor.api.main:app",
        host=settings.host,
        port=settings.port,
        reload=True,
    )


if __name__ == "__main__":
    main()
