"""Text assembly shared by the PDF and DOCX renderers.

Anything that decides *what words* appear (as opposed to how they are
styled) lives here so both formats produce identical text.
"""

from __future__ import annotations

import re
from datetime import date

from resume_tailor.services.resume_data import CoverLetterContent, ResumeProfile

__all__ = [
    "CONTACT_SEPARATOR",
    "DEFAULT_CLOSING",
    "DEFAULT_GREETING",
    "DEFAULT_RESUME_TITLE",
    "DEFAULT_SIGNATURE",
    "body_paragraphs",
    "contact_line",
    "credential_heading",
    "format_letter_date",
    "letter_date",
    "position_heading",
    "project_heading",
    "recipient_lines",
]

DEFAULT_RESUME_TITLE = "Resume"
DEFAULT_GREETING = "Dear Hiring Manager,"
DEFAULT_CLOSING = "Sincerely,"
DEFAULT_SIGNATURE = "Your Name"
CONTACT_SEPARATOR = " · "

_PARAGRAPH_BREAK = re.compile(r"\n+")


def _join(separator: str, *parts: str) -> str:
    return separator.join(p for p in parts if p)


def contact_line(profile: ResumeProfile) -> str:
    """``email · phone · location`` with empty parts omitted."""
    return _join(CONTACT_SEPARATOR, profile["email"], profile["phone"], profile["location"])


def position_heading(title: str, company: str) -> str:
    return _join(" at ", title, company)


def credential_heading(degree: str, field: str) -> str:
    return _join(" in ", degree, field)


def project_heading(name: str, organization: str) -> str:
    return _join(" — ", name, organization)


# -----------------------------------------------------------------------
# Cover letters


def format_letter_date(day: date) -> str:
    """Format *day* as ``Month Day, Year`` (e.g. ``March 4, 2025``)."""
    return f"{day:%B} {day.day}, {day.year}"


def letter_date(cover: CoverLetterContent, today: date | None = None) -> str:
    """Return the explicit date override, or today's date formatted."""
    if cover["date"]:
        return cover["date"]
    return format_letter_date(today or date.today())


def recipient_lines(cover: CoverLetterContent) -> list[str]:
    """Non-empty recipient block lines, in letter order."""
    return [
        line
        for line in (
            cover["recipient_name"],
            cover["recipient_title"],
            cover["company"],
            cover["address_line1"],
            cover["address_line2"],
        )
        if line
    ]


def body_paragraphs(cover: CoverLetterContent, profile: ResumeProfile) -> list[str]:
    """Split the letter body into paragraphs.

    Literal two-character ``\\n`` sequences (as emitted by some LLM
    responses) are unescaped first.  An empty body falls back to the
    profile summary as a single paragraph.
    """
    body = cover["body"].replace("\\n", "\n").replace("\r\n", "\n")
    paragraphs = [p.strip() for p in _PARAGRAPH_BREAK.split(body) if p.strip()]
    if paragraphs:
        return paragraphs
    return [profile["summary"]] if profile["summary"] else []
