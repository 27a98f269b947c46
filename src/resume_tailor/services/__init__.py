"""Services"""

from resume_tailor.services.document_generator import (
    DocumentGenerationError,
    DocumentKind,
    GeneratedDocument,
    InvalidRenderRequestError,
    OutputFormat,
    RenderRequest,
    generate_document,
)
from resume_tailor.services.normalizer import (
    apply_tailoring,
    normalize_cover_letter,
    normalize_profile,
    normalize_tailoring,
)

__all__ = [
    "DocumentGenerationError",
    "DocumentKind",
    "GeneratedDocument",
    "InvalidRenderRequestError",
    "OutputFormat",
    "RenderRequest",
    "generate_document",
    "apply_tailoring",
    "normalize_cover_letter",
    "normalize_profile",
    "normalize_tailoring",
]
