"""Document export routes for the API."""

from __future__ import annotations

from fastapi import APIRouter, HTTPException, status
from fastapi.responses import Response

from resume_tailor.api.schemas.documents import ExportRequest
from resume_tailor.config import get_settings
from resume_tailor.services.document_generator import (
    CONTENT_TYPES,
    DocumentGenerationError,
    DocumentKind,
    InvalidRenderRequestError,
    OutputFormat,
    RenderRequest,
    generate_document,
)

router = APIRouter(tags=["documents"])


def _failure_detail(kind: DocumentKind, fmt: OutputFormat) -> str:
    suffix = " cover letter" if kind is DocumentKind.COVER_LETTER else ""
    return f"Failed to generate {fmt.value.upper()}{suffix}."


def _export(data: ExportRequest, kind: DocumentKind, fmt: OutputFormat) -> Response:
    """Render *data* and wrap the bytes in a download response.

    Raises:
        HTTPException: 400 if the profile is missing, 500 if rendering fails.
    """
    try:
        request = RenderRequest.from_payload(data.to_payload(), kind)
    except InvalidRenderRequestError:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Missing parsed resume data.",
        ) from None

    try:
        document = generate_document(request, fmt, pagesize=get_settings().page_size)
    except DocumentGenerationError:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=_failure_detail(kind, fmt),
        ) from None

    return Response(
        content=document.content,
        media_type=document.media_type,
        headers={"Content-Disposition": f'attachment; filename="{document.filename}"'},
    )


@router.post(
    "/export-pdf",
    responses={200: {"content": {CONTENT_TYPES[OutputFormat.PDF]: {}}}},
)
def export_resume_pdf(data: ExportRequest) -> Response:
    """Download the resume as a PDF."""
    return _export(data, DocumentKind.RESUME, OutputFormat.PDF)


@router.post(
    "/export-pdf-cover",
    responses={200: {"content": {CONTENT_TYPES[OutputFormat.PDF]: {}}}},
)
def export_cover_letter_pdf(data: ExportRequest) -> Response:
    """Download the cover letter as a PDF."""
    return _export(data, DocumentKind.COVER_LETTER, OutputFormat.PDF)


@router.post(
    "/export-docx",
    responses={200: {"content": {CONTENT_TYPES[OutputFormat.DOCX]: {}}}},
)
def export_resume_docx(data: ExportRequest) -> Response:
    """Download the resume as a Word document."""
    return _export(data, DocumentKind.RESUME, OutputFormat.DOCX)


@router.post(
    "/export-docx-cover",
    responses={200: {"content": {CONTENT_TYPES[OutputFormat.DOCX]: {}}}},
)
def export_cover_letter_docx(data: ExportRequest) -> Response:
    """Download the cover letter as a Word document."""
    return _export(data, DocumentKind.COVER_LETTER, OutputFormat.DOCX)
