"""Paragraph/run descriptors and a builder that writes them with python-docx.

The DOCX renderer never touches python-docx objects directly; it appends
:class:`ParagraphSpec` records to a :class:`FlowDocument`, which can be
inspected in tests and materialized into a ``.docx`` on save.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import BinaryIO

from docx import Document
from docx.enum.text import WD_ALIGN_PARAGRAPH
from docx.shared import Pt, Twips

from resume_tailor.templates.styles import resolve_docx_color, resolve_docx_font

__all__ = [
    "ALIGN_CENTER",
    "ALIGN_LEFT",
    "FlowDocument",
    "ParagraphSpec",
    "RunSpec",
]

ALIGN_LEFT = "left"
ALIGN_CENTER = "center"

_ALIGNMENTS = {
    ALIGN_LEFT: WD_ALIGN_PARAGRAPH.LEFT,
    ALIGN_CENTER: WD_ALIGN_PARAGRAPH.CENTER,
}

# Bullet styles shipped with python-docx's default template, by level.
_BULLET_STYLES = ("List Bullet", "List Bullet 2", "List Bullet 3")


@dataclass(frozen=True)
class RunSpec:
    """A styled text run. *size* is in half-points."""

    text: str
    font: str
    size: int
    color: str
    bold: bool = False
    underline: bool = False


@dataclass(frozen=True)
class ParagraphSpec:
    """A paragraph. Spacing and indent are in twips."""

    runs: tuple[RunSpec, ...]
    alignment: str = ALIGN_LEFT
    space_before: int | None = None
    space_after: int | None = None
    style: str | None = None
    bullet_level: int | None = None
    indent: int = 0

    @property
    def text(self) -> str:
        return "".join(run.text for run in self.runs)

    @property
    def is_bullet(self) -> bool:
        return self.bullet_level is not None


class FlowDocument:
    """Ordered collection of paragraph descriptors for one document."""

    def __init__(self) -> None:
        self.paragraphs: list[ParagraphSpec] = []

    def add(self, paragraph: ParagraphSpec) -> None:
        self.paragraphs.append(paragraph)

    def text_lines(self) -> list[str]:
        """Paragraph text in document order."""
        return [p.text for p in self.paragraphs]

    # ------------------------------------------------------------------
    # materialization
    # ------------------------------------------------------------------

    def build(self):
        """Return a python-docx ``Document`` holding every paragraph."""
        document = Document()
        for spec in self.paragraphs:
            style = spec.style
            if spec.is_bullet:
                style = _BULLET_STYLES[min(spec.bullet_level, len(_BULLET_STYLES) - 1)]
            paragraph = document.add_paragraph(style=style)
            fmt = paragraph.paragraph_format
            paragraph.alignment = _ALIGNMENTS.get(spec.alignment, WD_ALIGN_PARAGRAPH.LEFT)
            if spec.space_before is not None:
                fmt.space_before = Twips(spec.space_before)
            if spec.space_after is not None:
                fmt.space_after = Twips(spec.space_after)
            if spec.indent:
                fmt.left_indent = Twips(spec.indent)
            for run_spec in spec.runs:
                run = paragraph.add_run(run_spec.text)
                run.bold = run_spec.bold
                run.font.name = resolve_docx_font(run_spec.font)
                run.font.size = Pt(run_spec.size / 2)
                run.font.color.rgb = resolve_docx_color(run_spec.color)
                if run_spec.underline:
                    run.font.underline = True
        return document

    def save(self, stream: BinaryIO) -> None:
        self.build().save(stream)
