"""A small paginating canvas over :mod:`reportlab.pdfgen`.

Exposes a top-down vertical cursor, word-wrapped text drawing, explicit
"move down by N lines" and horizontal rules.  A new page starts
automatically whenever the next line would cross the bottom margin, so
callers only emit content in order.

Every line and rule drawn is also recorded as a :class:`DrawOp`, giving an
ordered, inspectable log of the rendered document.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import BinaryIO

from reportlab.lib.pagesizes import A4
from reportlab.lib.utils import simpleSplit
from reportlab.pdfbase.pdfmetrics import stringWidth
from reportlab.pdfgen import canvas

from resume_tailor.templates.styles import resolve_pdf_color, resolve_pdf_font

__all__ = ["ALIGN_CENTER", "ALIGN_LEFT", "LINE_HEIGHT", "DrawOp", "PageCanvas"]

ALIGN_LEFT = "left"
ALIGN_CENTER = "center"

# Line height as a multiple of font size, before any extra line gap.
LINE_HEIGHT = 1.2


@dataclass(frozen=True)
class DrawOp:
    """One absolutely-positioned draw operation.

    For ``kind == "text"`` *width* is the measured string width; for
    ``kind == "rule"`` it is the rule length.
    """

    kind: str
    page: int
    x: float
    y: float
    width: float
    text: str = ""
    font: str = ""
    size: float = 0.0
    color: str = ""


class PageCanvas:
    """Stateful paginating canvas writing a PDF to *output*."""

    def __init__(
        self,
        output: BinaryIO,
        *,
        pagesize: tuple[float, float] = A4,
        margin: float = 50,
    ) -> None:
        self._canvas = canvas.Canvas(output, pagesize=pagesize)
        self.page_width, self.page_height = pagesize
        self.margin = margin
        self.page = 1
        self.y = self.page_height - margin
        self.operations: list[DrawOp] = []
        self._font = "Helvetica"
        self._size = 12.0
        self._color = "#000000"

    # ------------------------------------------------------------------
    # geometry
    # ------------------------------------------------------------------

    @property
    def left(self) -> float:
        return self.margin

    @property
    def right(self) -> float:
        return self.page_width - self.margin

    @property
    def content_width(self) -> float:
        return self.right - self.left

    # ------------------------------------------------------------------
    # state
    # ------------------------------------------------------------------

    def set_font(self, font: str, size: float) -> PageCanvas:
        self._font = resolve_pdf_font(font)
        self._size = size
        return self

    def set_color(self, color: str) -> PageCanvas:
        self._color = color
        return self

    def string_width(self, text: str) -> float:
        return stringWidth(text, self._font, self._size)

    # ------------------------------------------------------------------
    # drawing
    # ------------------------------------------------------------------

    def new_page(self) -> None:
        self._canvas.showPage()
        self.page += 1
        self.y = self.page_height - self.margin

    def move_down(self, lines: float = 1.0) -> None:
        """Advance the cursor by *lines* multiples of the current line height."""
        self.y -= lines * self._size * LINE_HEIGHT

    def text(
        self,
        text: str,
        *,
        align: str = ALIGN_LEFT,
        line_gap: float = 0.0,
        indent: float = 0.0,
    ) -> list[DrawOp]:
        """Draw *text* word-wrapped to the content width.

        Returns the draw operations for the lines emitted.
        """
        if not text:
            return []
        avail = self.content_width - indent
        leading = self._size * LINE_HEIGHT + line_gap
        drawn: list[DrawOp] = []
        for line in simpleSplit(text, self._font, self._size, avail):
            if self.y - leading < self.margin:
                self.new_page()
            width = self.string_width(line)
            x = self.left + indent
            if align == ALIGN_CENTER:
                x = self.left + indent + max(0.0, (avail - width) / 2)
            baseline = self.y - self._size
            self._canvas.setFont(self._font, self._size)
            self._canvas.setFillColor(resolve_pdf_color(self._color))
            self._canvas.drawString(x, baseline, line)
            op = DrawOp(
                kind="text",
                page=self.page,
                x=x,
                y=baseline,
                width=width,
                text=line,
                font=self._font,
                size=self._size,
                color=self._color,
            )
            self.operations.append(op)
            drawn.append(op)
            self.y -= leading
        return drawn

    def rule(self, x0: float, x1: float, *, color: str, line_width: float = 0.5) -> DrawOp:
        """Draw a horizontal rule at the current cursor position."""
        if self.y < self.margin:
            self.new_page()
        self._canvas.setStrokeColor(resolve_pdf_color(color))
        self._canvas.setLineWidth(line_width)
        self._canvas.line(x0, self.y, x1, self.y)
        op = DrawOp(kind="rule", page=self.page, x=x0, y=self.y, width=x1 - x0, color=color)
        self.operations.append(op)
        return op

    def save(self) -> None:
        """Finalize the document and flush it to the output stream."""
        self._canvas.save()

    # ------------------------------------------------------------------
    # inspection
    # ------------------------------------------------------------------

    def text_lines(self) -> list[str]:
        """Text of every drawn line, in document order."""
        return [op.text for op in self.operations if op.kind == "text"]
