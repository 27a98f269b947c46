"""Route handlers for the API."""

from resume_tailor.api.routes import documents, health, templates

__all__ = [
    "documents",
    "health",
    "templates",
]
