"""Pydantic schemas for document export endpoints.

Supports four render endpoints that share one request body:
- POST /export-pdf: resume as PDF
- POST /export-pdf-cover: cover letter as PDF
- POST /export-docx: resume as DOCX
- POST /export-docx-cover: cover letter as DOCX

``parsed`` and ``tailored`` are accepted loosely; the normalizer owns
coercing them into the canonical content model.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class CoverLetterRequest(BaseModel):
    """Cover-letter body plus optional header and sign-off overrides.

    Fields are loose; null or odd values fall back to the defaults in the
    normalizer.
    """

    model_config = ConfigDict(populate_by_name=True)

    body: Any = Field(None, description="Letter body; blank lines separate paragraphs")
    date: Any = Field(None, description="Explicit date line; defaults to today")
    recipient_name: Any = Field(None, alias="recipientName")
    recipient_title: Any = Field(None, alias="recipientTitle")
    company: Any = Field(None, description="Recipient company")
    address_line1: Any = Field(None, alias="address1")
    address_line2: Any = Field(None, alias="address2")
    greeting: Any = Field(None, description="Salutation, e.g. 'Dear Ms. Lee,'")
    closing: Any = Field(None, description="Sign-off, e.g. 'Best regards,'")


class ExportRequest(BaseModel):
    """Body shared by every ``/export-*`` endpoint."""

    model_config = ConfigDict(populate_by_name=True)

    parsed: Any = Field(None, description="Parsed resume profile (JSON object)")
    tailored: Any = Field(
        None,
        description="Optional tailoring overlay for a specific job description",
    )
    template_key: str | None = Field(
        None,
        alias="templateKey",
        description="Template identifier; unknown keys fall back to 'classic'",
    )
    limit_to_one_page: bool = Field(
        False,
        alias="limitToOnePage",
        description="Apply the one-page length policy",
    )
    cover: CoverLetterRequest | str | None = Field(
        None,
        description="Cover-letter content (object or plain body text)",
    )

    def to_payload(self) -> dict[str, Any]:
        """Return the raw payload shape consumed by ``RenderRequest.from_payload``."""
        cover = self.cover
        if isinstance(cover, CoverLetterRequest):
            cover = cover.model_dump()
        return {
            "parsed": self.parsed,
            "tailored": self.tailored,
            "templateKey": self.template_key,
            "limitToOnePage": self.limit_to_one_page,
            "cover": cover,
        }


class TemplateSummary(BaseModel):
    """One entry in the template catalogue."""

    key: str
    label: str
    layout: str
    accent: str


class TemplateListResponse(BaseModel):
    """Response for ``GET /api/templates``."""

    default: str = Field(..., description="Key used when none or an unknown one is given")
    templates: list[TemplateSummary]
