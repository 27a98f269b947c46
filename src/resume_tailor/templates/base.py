"""Immutable style presets shared by the PDF and DOCX renderers.

A :class:`Template` pairs a layout family with two parallel style blocks:
:class:`PdfStyle` (points, ``#rrggbb`` colors) for the paginating canvas and
:class:`DocxStyle` (half-points, twips, ``rrggbb`` colors) for the flow
document.  Both blocks are built from the same palette and point sizes so the
two outputs stay visually aligned.

The layout-family predicates live here as well; both renderers call the same
ones rather than re-deriving alignment, case or underline rules.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

__all__ = [
    "DOCX_SIZE_SCALE",
    "DocxStyle",
    "LayoutFamily",
    "Palette",
    "PdfStyle",
    "Template",
    "build_template",
]

# PDF sizes are points, DOCX sizes are half-points.
DOCX_SIZE_SCALE = 2

_CENTERED_TITLE_LAYOUTS = frozenset({"centered", "formal", "minimalist", "minimal"})
_CENTERED_HEADING_LAYOUTS = frozenset({"block-headers"})
_UNDERLINED_HEADING_LAYOUTS = frozenset({"accented", "minimalist"})
_UPPERCASE_HEADING_LAYOUTS = frozenset({"formal"})


class LayoutFamily(str, Enum):
    """Structural rendering variant selected by a template."""

    TRADITIONAL = "traditional"
    CENTERED = "centered"
    FORMAL = "formal"
    MINIMALIST = "minimalist"
    ACCENTED = "accented"
    BLOCK_HEADERS = "block-headers"
    HIGH_CONTRAST = "high-contrast"
    MINIMAL = "minimal"


@dataclass(frozen=True)
class Palette:
    """Named colors as bare ``rrggbb`` hex strings."""

    title: str
    heading: str
    body: str
    contact: str
    accent: str
    muted: str = "666666"


@dataclass(frozen=True)
class PdfStyle:
    """Canvas style block. Sizes and gaps are in points / lines."""

    font: str
    heading_font: str
    title_size: float
    heading_size: float
    subheading_size: float
    body_size: float
    margin: float
    line_gap: float
    section_gap: float
    title_color: str
    heading_color: str
    body_color: str
    contact_color: str
    accent_color: str
    muted_color: str

    @property
    def date_size(self) -> float:
        return self.body_size - 1


@dataclass(frozen=True)
class DocxStyle:
    """Flow-document style block. Sizes are half-points, spacing is twips."""

    font: str
    heading_font: str
    title_size: int
    heading_size: int
    subheading_size: int
    body_size: int
    date_size: int
    title_after: int
    contact_after: int
    heading_before: int
    heading_after: int
    body_after: int
    bullet_spacing: int
    title_color: str
    heading_color: str
    body_color: str
    contact_color: str
    accent_color: str
    muted_color: str


@dataclass(frozen=True)
class Template:
    """A named, immutable style preset."""

    key: str
    label: str
    layout: LayoutFamily
    pdf: PdfStyle
    docx: DocxStyle

    # ------------------------------------------------------------------
    # Layout-family predicates (shared by both renderers)
    # ------------------------------------------------------------------

    @property
    def title_centered(self) -> bool:
        """Whether the name and contact lines are centered."""
        return self.layout.value in _CENTERED_TITLE_LAYOUTS

    @property
    def heading_centered(self) -> bool:
        """Whether section titles are centered."""
        return self.layout.value in _CENTERED_HEADING_LAYOUTS

    @property
    def underline_headings(self) -> bool:
        """Whether section titles carry an underline."""
        return self.layout.value in _UNDERLINED_HEADING_LAYOUTS

    def format_heading(self, text: str) -> str:
        """Apply the layout's case transform to a section title."""
        if self.layout.value in _UPPERCASE_HEADING_LAYOUTS:
            return text.upper()
        return text


def _half_points(points: float) -> int:
    return round(points * DOCX_SIZE_SCALE)


def build_template(
    key: str,
    label: str,
    layout: LayoutFamily,
    *,
    font: str,
    palette: Palette,
    heading_font: str | None = None,
    title_size: float = 22,
    heading_size: float = 13,
    subheading_size: float = 11.5,
    body_size: float = 10.5,
    margin: float = 50,
    line_gap: float = 2,
    section_gap: float = 0.5,
    title_after: int = 120,
    contact_after: int = 200,
    heading_before: int = 240,
    heading_after: int = 100,
    body_after: int = 120,
    bullet_spacing: int = 60,
) -> Template:
    """Build a :class:`Template` whose two style blocks share one palette.

    DOCX font sizes are derived from the PDF point sizes so the heading/body
    ratio is identical in both formats.
    """
    heading_font = heading_font or font
    pdf = PdfStyle(
        font=font,
        heading_font=heading_font,
        title_size=title_size,
        heading_size=heading_size,
        subheading_size=subheading_size,
        body_size=body_size,
        margin=margin,
        line_gap=line_gap,
        section_gap=section_gap,
        title_color=f"#{palette.title}",
        heading_color=f"#{palette.heading}",
        body_color=f"#{palette.body}",
        contact_color=f"#{palette.contact}",
        accent_color=f"#{palette.accent}",
        muted_color=f"#{palette.muted}",
    )
    docx = DocxStyle(
        font=font,
        heading_font=heading_font,
        title_size=_half_points(title_size),
        heading_size=_half_points(heading_size),
        subheading_size=_half_points(subheading_size),
        body_size=_half_points(body_size),
        date_size=_half_points(body_size - 1),
        title_after=title_after,
        contact_after=contact_after,
        heading_before=heading_before,
        heading_after=heading_after,
        body_after=body_after,
        bullet_spacing=bullet_spacing,
        title_color=palette.title,
        heading_color=palette.heading,
        body_color=palette.body,
        contact_color=palette.contact,
        accent_color=palette.accent,
        muted_color=palette.muted,
    )
    return Template(key=key, label=label, layout=layout, pdf=pdf, docx=docx)
