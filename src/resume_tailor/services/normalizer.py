"""Normalize loosely-typed resume payloads into the canonical content model.

Upstream parsing and tailoring steps may emit the same field as a string, a
list, or not at all.  Everything here is pure and total: unrecognized shapes
degrade to the empty value for that field instead of raising, so a partially
renderable document is always produced.

Normalizing an already-canonical record returns an equal record.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping

from resume_tailor.services.resume_data import (
    CoverLetterContent,
    ResumeCredential,
    ResumePosition,
    ResumeProfile,
    ResumeProject,
    TailoringResult,
)

logger = logging.getLogger(__name__)

__all__ = [
    "apply_tailoring",
    "normalize_cover_letter",
    "normalize_profile",
    "normalize_tailoring",
]

_BULLET_MARKER = re.compile(r"^\s*(?:[-*•‣◦]\s*)+")
# XML 1.0 forbids these; python-docx refuses to write them.
_CONTROL_CHARS = re.compile(r"[\x00-\x08\x0e-\x1f]")
_PAGE_BREAKS = re.compile(r"[\x0b\x0c]")


# -----------------------------------------------------------------------
# Scalar helpers


def _clean(value: str) -> str:
    """Strip surrounding space and drop characters a flow document can't hold."""
    return _CONTROL_CHARS.sub("", _PAGE_BREAKS.sub(" ", value)).strip()


def _text(value: object) -> str:
    """Coerce a scalar to a stripped string; anything else becomes ``""``."""
    if isinstance(value, str):
        return _clean(value)
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    return ""


def _first_text(raw: Mapping, *keys: str) -> str:
    for key in keys:
        value = _text(raw.get(key))
        if value:
            return value
    return ""


def _prose(value: object) -> str:
    """A free-text field: a string, or a list of strings joined by newlines."""
    if isinstance(value, list):
        return "\n".join(part for part in (_text(v) for v in value) if part)
    return _text(value)


def _string_list(value: object, *, split_commas: bool = False) -> list[str]:
    if isinstance(value, str):
        parts = value.split(",") if split_commas else value.splitlines()
        return [item for item in (_clean(p) for p in parts) if item]
    if isinstance(value, list):
        return [item for item in (_text(v) for v in value) if item]
    if value is not None:
        logger.debug("Discarding unrecognized list value of type %s", type(value).__name__)
    return []


def _bullets(value: object) -> list[str]:
    """Bullet lines; markers are only stripped from newline-separated text."""
    items = _string_list(value)
    if not isinstance(value, str):
        return items
    cleaned = (_BULLET_MARKER.sub("", item).strip() for item in items)
    return [item for item in cleaned if item]


# -----------------------------------------------------------------------
# Entry builders


def _position(raw: object) -> ResumePosition | None:
    if isinstance(raw, str):
        raw = {"description": raw}
    if not isinstance(raw, Mapping):
        return None
    entry: ResumePosition = {
        "title": _first_text(raw, "title", "role"),
        "company": _text(raw.get("company")),
        "dates": _text(raw.get("dates")),
        "description": _prose(raw.get("description")),
        "bullets": _bullets(raw.get("bullets")),
    }
    if not any(entry.values()):
        return None
    return entry


def _credential(raw: object) -> ResumeCredential | None:
    if isinstance(raw, str):
        raw = {"institution": raw}
    if not isinstance(raw, Mapping):
        return None
    entry: ResumeCredential = {
        "degree": _text(raw.get("degree")),
        "field": _first_text(raw, "field", "field_of_study"),
        "institution": _first_text(raw, "institution", "school"),
        "dates": _text(raw.get("dates")),
    }
    if not any(entry.values()):
        return None
    return entry


def _project(raw: object) -> ResumeProject | None:
    if isinstance(raw, str):
        raw = {"description": raw}
    if not isinstance(raw, Mapping):
        return None
    entry: ResumeProject = {
        "name": _first_text(raw, "name", "title"),
        "organization": _text(raw.get("organization")),
        "dates": _text(raw.get("dates")),
        "description": _prose(raw.get("description")),
        "technologies": _string_list(raw.get("technologies"), split_commas=True),
    }
    if not any(entry.values()):
        return None
    return entry


def _entries(value: object, build) -> list:
    """Normalize a repeating section.

    A list keeps its order; a bare string becomes a single free-text entry.
    """
    if isinstance(value, str):
        value = [value] if value.strip() else []
    if not isinstance(value, list):
        if value is not None:
            logger.debug("Discarding unrecognized section of type %s", type(value).__name__)
        return []
    return [entry for entry in (build(item) for item in value) if entry is not None]


# -----------------------------------------------------------------------
# Public API


def normalize_profile(raw: object) -> ResumeProfile:
    """Return a canonical :class:`ResumeProfile` for any input."""
    if not isinstance(raw, Mapping):
        raw = {}

    skills = _string_list(raw.get("skills"), split_commas=True)
    if not skills:
        skills = _string_list(raw.get("technical_skills"), split_commas=True)

    return {
        "name": _text(raw.get("name")),
        "email": _text(raw.get("email")),
        "phone": _text(raw.get("phone")),
        "location": _text(raw.get("location")),
        "summary": _prose(raw.get("summary")) or _prose(raw.get("objective")),
        "skills": skills,
        "experience": _entries(raw.get("experience"), _position),
        "education": _entries(raw.get("education"), _credential),
        "projects": _entries(raw.get("projects"), _project),
    }


def normalize_tailoring(raw: object) -> TailoringResult | None:
    """Return a canonical :class:`TailoringResult`, or *None* when absent."""
    if not isinstance(raw, Mapping):
        return None
    return {
        "tailored_summary": _prose(raw.get("tailored_summary")),
        "target_skills": _string_list(raw.get("target_skills"), split_commas=True),
        "tailored_experience": _entries(raw.get("tailored_experience"), _position),
        "recommended_template": _text(raw.get("recommended_template")),
    }


def normalize_cover_letter(raw: object) -> CoverLetterContent:
    """Return canonical cover-letter content; accepts the camel-case aliases."""
    if isinstance(raw, str):
        raw = {"body": raw}
    if not isinstance(raw, Mapping):
        raw = {}
    body = raw.get("body")
    return {
        "body": _clean(body) if isinstance(body, str) else "",
        "date": _text(raw.get("date")),
        "recipient_name": _first_text(raw, "recipient_name", "recipientName"),
        "recipient_title": _first_text(raw, "recipient_title", "recipientTitle"),
        "company": _text(raw.get("company")),
        "address_line1": _first_text(raw, "address_line1", "address1"),
        "address_line2": _first_text(raw, "address_line2", "address2"),
        "greeting": _text(raw.get("greeting")),
        "closing": _text(raw.get("closing")),
    }


def apply_tailoring(profile: ResumeProfile, tailoring: TailoringResult | None) -> ResumeProfile:
    """Overlay *tailoring* onto *profile*.

    Each overlay field replaces the base field only when it is non-empty.
    Tailored experience replaces the base list wholesale; education and
    projects always come from the base profile.
    """
    if tailoring is None:
        return profile
    merged: ResumeProfile = dict(profile)  # type: ignore[assignment]
    if tailoring["tailored_summary"]:
        merged["summary"] = tailoring["tailored_summary"]
    if tailoring["target_skills"]:
        merged["skills"] = tailoring["target_skills"]
    if tailoring["tailored_experience"]:
        merged["experience"] = tailoring["tailored_experience"]
    return merged
