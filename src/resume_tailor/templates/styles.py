"""Resolve template style tokens to concrete per-format primitives.

The PDF canvas only knows six built-in fonts, so declared family names are
collapsed onto serif / sans / monospace by keyword.  The DOCX format accepts
any family name and uses the declared one verbatim.  Every resolver here is
total: it always returns a usable value.
"""

from __future__ import annotations

import re

from docx.shared import RGBColor
from reportlab.lib.colors import Color, HexColor

__all__ = [
    "PDF_BUILTIN_FONTS",
    "resolve_docx_color",
    "resolve_docx_font",
    "resolve_pdf_color",
    "resolve_pdf_font",
]

PDF_BUILTIN_FONTS = frozenset(
    {"Helvetica", "Helvetica-Bold", "Times-Roman", "Times-Bold", "Courier", "Courier-Bold"}
)

_SERIF = ("Times-Roman", "Times-Bold")
_SANS = ("Helvetica", "Helvetica-Bold")
_MONO = ("Courier", "Courier-Bold")

# Checked in order; first keyword hit wins.
_FAMILY_KEYWORDS: tuple[tuple[str, tuple[str, str]], ...] = (
    ("georgia", _SERIF),
    ("arial", _SANS),
    ("courier", _MONO),
    ("times", _SERIF),
    ("helvetica", _SANS),
)

_DEFAULT_DOCX_FONT = "Calibri"
_HEX_RE = re.compile(r"^#?([0-9a-fA-F]{6}|[0-9a-fA-F]{3})$")


def resolve_pdf_font(name: str | None, is_heading: bool = False) -> str:
    """Return a built-in canvas font for the declared family *name*."""
    if name in PDF_BUILTIN_FONTS:
        return name
    family = _SANS
    lowered = (name or "").lower()
    for keyword, candidate in _FAMILY_KEYWORDS:
        if keyword in lowered:
            family = candidate
            break
    regular, bold = family
    return bold if is_heading else regular


def resolve_docx_font(name: str | None) -> str:
    """Return the declared family name, or the document default when blank."""
    if name and name.strip():
        return name.strip()
    return _DEFAULT_DOCX_FONT


def _normalize_hex(value: str | None) -> str:
    match = _HEX_RE.match((value or "").strip())
    if not match:
        return "000000"
    digits = match.group(1)
    if len(digits) == 3:
        digits = "".join(ch * 2 for ch in digits)
    return digits.lower()


def resolve_pdf_color(value: str | None) -> Color:
    """Return a reportlab color for a ``#rrggbb`` (or bare) hex token."""
    return HexColor(f"#{_normalize_hex(value)}")


def resolve_docx_color(value: str | None) -> RGBColor:
    """Return a python-docx color for a bare (or ``#``-prefixed) hex token."""
    return RGBColor.from_string(_normalize_hex(value).upper())
