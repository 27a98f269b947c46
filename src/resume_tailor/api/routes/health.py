"""Health check routes."""

from __future__ import annotations

from fastapi import APIRouter

from resume_tailor import __version__

router = APIRouter(tags=["health"])


@router.get("/health")
def health_check() -> dict[str, str]:
    """Report liveness and the running package version."""
    return {"status": "healthy", "version": __version__}
