"""Dispatch a rendering request to the right engine and collect the bytes.

This is the boundary the delivery layers (HTTP, CLI) talk to.  Each call
renders into a fresh in-memory buffer; bytes are handed back only once the
whole document has been written and saved, so a failed render never leaks a
partial file.
"""

from __future__ import annotations

import io
import logging
from collections.abc import Mapping
from dataclasses import dataclass
from datetime import date
from enum import Enum

from resume_tailor.services.docx_builder import FlowDocument
from resume_tailor.services.docx_renderer import render_cover_letter_docx, render_resume_docx
from resume_tailor.services.normalizer import (
    normalize_cover_letter,
    normalize_profile,
    normalize_tailoring,
)
from resume_tailor.services.pdf_canvas import PageCanvas
from resume_tailor.services.pdf_renderer import render_cover_letter_pdf, render_resume_pdf
from resume_tailor.services.resume_data import (
    CoverLetterContent,
    ResumeProfile,
    TailoringResult,
)
from resume_tailor.templates import coerce_template_key, resolve_template

logger = logging.getLogger(__name__)

__all__ = [
    "CONTENT_TYPES",
    "DocumentGenerationError",
    "DocumentKind",
    "GeneratedDocument",
    "InvalidRenderRequestError",
    "OutputFormat",
    "RenderRequest",
    "generate_document",
    "output_filename",
    "render_docx",
    "render_pdf",
]


class DocumentKind(str, Enum):
    RESUME = "resume"
    COVER_LETTER = "cover-letter"


class OutputFormat(str, Enum):
    PDF = "pdf"
    DOCX = "docx"


CONTENT_TYPES: dict[OutputFormat, str] = {
    OutputFormat.PDF: "application/pdf",
    OutputFormat.DOCX: (
        "application/vnd.openxmlformats-officedocument.wordprocessingml.document"
    ),
}


class DocumentGenerationError(RuntimeError):
    """Raised when a document could not be produced.

    The message is fixed. The internal cause is chained and logged, never
    shown to end users.
    """

    def __init__(self, message: str = "Failed to generate document.") -> None:
        super().__init__(message)


class InvalidRenderRequestError(ValueError):
    """Raised when a payload has no usable resume profile."""


def output_filename(kind: DocumentKind, fmt: OutputFormat) -> str:
    """Conventional download name, e.g. ``resume.pdf`` or ``cover-letter.docx``."""
    return f"{DocumentKind(kind).value}.{OutputFormat(fmt).value}"


@dataclass(frozen=True)
class RenderRequest:
    """A complete, normalized snapshot of everything one render needs."""

    kind: DocumentKind
    profile: ResumeProfile
    tailoring: TailoringResult | None = None
    template_key: str = "classic"
    one_page: bool = False
    cover: CoverLetterContent | None = None

    @classmethod
    def from_payload(cls, payload: Mapping, kind: DocumentKind | str) -> RenderRequest:
        """Build a request from a raw ``parsed``/``tailored``/``cover`` payload.

        An explicit ``templateKey`` wins; otherwise the tailoring step's
        recommendation is used.  Either way the key is coerced into the
        registry, falling back to ``classic``.

        Raises:
            InvalidRenderRequestError: If ``parsed`` is missing or not an object.
        """
        parsed = payload.get("parsed")
        if not isinstance(parsed, Mapping):
            raise InvalidRenderRequestError("Missing parsed resume data.")

        tailoring = normalize_tailoring(payload.get("tailored"))
        requested = payload.get("templateKey")
        if not requested and tailoring is not None:
            requested = tailoring["recommended_template"]

        kind = DocumentKind(kind)
        cover = None
        if kind is DocumentKind.COVER_LETTER:
            cover = normalize_cover_letter(payload.get("cover"))

        return cls(
            kind=kind,
            profile=normalize_profile(parsed),
            tailoring=tailoring,
            template_key=coerce_template_key(requested),
            one_page=bool(payload.get("limitToOnePage")),
            cover=cover,
        )


@dataclass(frozen=True)
class GeneratedDocument:
    content: bytes
    filename: str
    media_type: str


# -----------------------------------------------------------------------
# Engines


def render_pdf(
    request: RenderRequest,
    *,
    pagesize: tuple[float, float] | None = None,
    today: date | None = None,
) -> bytes:
    """Render *request* on a paginating canvas and return the PDF bytes."""
    template = resolve_template(request.template_key)
    buffer = io.BytesIO()
    kwargs = {"margin": template.pdf.margin}
    if pagesize is not None:
        kwargs["pagesize"] = pagesize
    canvas = PageCanvas(buffer, **kwargs)
    if request.kind is DocumentKind.COVER_LETTER:
        render_cover_letter_pdf(
            canvas,
            request.profile,
            template.key,
            request.cover or normalize_cover_letter(None),
            request.one_page,
            today=today,
        )
    else:
        render_resume_pdf(
            canvas, request.profile, request.tailoring, template.key, request.one_page
        )
    canvas.save()
    return buffer.getvalue()


def render_docx(request: RenderRequest, *, today: date | None = None) -> bytes:
    """Render *request* as a flow document and return the DOCX bytes."""
    document = FlowDocument()
    if request.kind is DocumentKind.COVER_LETTER:
        render_cover_letter_docx(
            document,
            request.profile,
            request.template_key,
            request.cover or normalize_cover_letter(None),
            request.one_page,
            today=today,
        )
    else:
        render_resume_docx(
            document, request.profile, request.tailoring, request.template_key, request.one_page
        )
    buffer = io.BytesIO()
    document.save(buffer)
    return buffer.getvalue()


def generate_document(
    request: RenderRequest,
    fmt: OutputFormat | str,
    *,
    pagesize: tuple[float, float] | None = None,
    today: date | None = None,
) -> GeneratedDocument:
    """Render *request* in *fmt*.

    Raises:
        DocumentGenerationError: If rendering or saving fails for any reason.
    """
    fmt = OutputFormat(fmt)
    try:
        if fmt is OutputFormat.PDF:
            content = render_pdf(request, pagesize=pagesize, today=today)
        else:
            content = render_docx(request, today=today)
    except Exception as exc:
        logger.exception(
            "Failed to generate %s %s with template %s",
            request.kind.value,
            fmt.value,
            request.template_key,
        )
        raise DocumentGenerationError() from exc

    logger.info(
        "Generated %s %s with template %s (%d bytes)",
        request.kind.value,
        fmt.value,
        request.template_key,
        len(content),
    )
    return GeneratedDocument(
        content=content,
        filename=output_filename(request.kind, fmt),
        media_type=CONTENT_TYPES[fmt],
    )
