"""Template catalogue routes."""

from __future__ import annotations

from fastapi import APIRouter

from resume_tailor.api.schemas.documents import TemplateListResponse, TemplateSummary
from resume_tailor.templates import DEFAULT_TEMPLATE_KEY, describe_templates

router = APIRouter(tags=["templates"])


@router.get("/templates", response_model=TemplateListResponse)
def list_available_templates() -> TemplateListResponse:
    """List every preset with its layout family and accent color."""
    return TemplateListResponse(
        default=DEFAULT_TEMPLATE_KEY,
        templates=[TemplateSummary(**entry) for entry in describe_templates()],
    )
