"""Render resumes and cover letters onto a :class:`PageCanvas`.

The renderer walks the canonical content model in a fixed section order
and emits text and rules in document order; pagination is left entirely to
the canvas.  Missing optional fields are omitted, never errors.
"""

from __future__ import annotations

from datetime import date

from resume_tailor.services.document_text import (
    DEFAULT_CLOSING,
    DEFAULT_GREETING,
    DEFAULT_RESUME_TITLE,
    DEFAULT_SIGNATURE,
    body_paragraphs,
    contact_line,
    credential_heading,
    letter_date,
    position_heading,
    project_heading,
    recipient_lines,
)
from resume_tailor.services.length_policy import LengthPolicy
from resume_tailor.services.normalizer import apply_tailoring
from resume_tailor.services.pdf_canvas import ALIGN_CENTER, ALIGN_LEFT, PageCanvas
from resume_tailor.services.resume_data import (
    CoverLetterContent,
    ResumeCredential,
    ResumePosition,
    ResumeProfile,
    ResumeProject,
    TailoringResult,
)
from resume_tailor.templates import Template, resolve_template
from resume_tailor.templates.styles import resolve_pdf_font

__all__ = [
    "BULLET_GLYPH",
    "PdfRenderer",
    "render_cover_letter_pdf",
    "render_resume_pdf",
]

BULLET_GLYPH = "•"
_BULLET_LINE_GAP = 1.6
_TECH_LINE_GAP = 1.55

# Headings are always bold, even when a preset names a regular built-in.
_BOLD = {"Helvetica": "Helvetica-Bold", "Times-Roman": "Times-Bold", "Courier": "Courier-Bold"}


class PdfRenderer:
    """Draws one document for a given template and length policy."""

    def __init__(self, canvas: PageCanvas, template: Template, policy: LengthPolicy) -> None:
        self.canvas = canvas
        self.template = template
        self.style = template.pdf
        self.policy = policy
        heading_font = resolve_pdf_font(self.style.heading_font, is_heading=True)
        self.heading_font = _BOLD.get(heading_font, heading_font)
        self.body_font = resolve_pdf_font(self.style.font, is_heading=False)
        self.title_align = ALIGN_CENTER if template.title_centered else ALIGN_LEFT
        self.heading_align = ALIGN_CENTER if template.heading_centered else ALIGN_LEFT

    # ------------------------------------------------------------------
    # public API
    # ------------------------------------------------------------------

    def resume(self, profile: ResumeProfile) -> None:
        self._add_header(profile["name"] or DEFAULT_RESUME_TITLE, contact_line(profile))

        if profile["summary"]:
            self._add_section_title("Summary")
            self._body(profile["summary"])

        if profile["skills"]:
            self._add_section_title("Skills")
            self._body(", ".join(profile["skills"]))

        if profile["education"]:
            self._add_education(profile["education"])

        experience = self.policy.entries(profile["experience"])
        if experience:
            self._add_experience(experience)

        if self.policy.include_projects and profile["projects"]:
            self._add_projects(profile["projects"])

    def cover_letter(
        self,
        profile: ResumeProfile,
        cover: CoverLetterContent,
        today: date | None = None,
    ) -> None:
        name = profile["name"] or DEFAULT_SIGNATURE
        self._add_header(name, contact_line(profile))

        self._body(letter_date(cover, today))
        self.canvas.move_down(0.3)

        for line in recipient_lines(cover):
            self._body(line, line_gap=0)
        self.canvas.move_down(self.style.section_gap)

        self._body(cover["greeting"] or DEFAULT_GREETING, line_gap=0)
        self.canvas.move_down(0.4)

        for paragraph in body_paragraphs(cover, profile):
            self._body(paragraph)
            self.canvas.move_down(0.2)

        self.canvas.move_down(0.6)
        self._body(cover["closing"] or DEFAULT_CLOSING, line_gap=0)
        self.canvas.move_down(0.4)
        self._subheading(name)

    # ------------------------------------------------------------------
    # building blocks
    # ------------------------------------------------------------------

    def _add_header(self, title: str, contact: str) -> None:
        c = self.canvas
        c.set_font(self.heading_font, self.style.title_size).set_color(self.style.title_color)
        c.text(title, align=self.title_align)
        if contact:
            c.move_down(0.18)
            c.set_font(self.body_font, self.style.body_size).set_color(self.style.contact_color)
            c.text(contact, align=self.title_align)
        c.move_down(0.3)
        c.rule(c.left, c.right, color=self.style.accent_color, line_width=0.5)
        c.move_down(self.style.section_gap)

    def _add_section_title(self, text: str) -> None:
        c = self.canvas
        c.move_down(self.style.section_gap)
        c.set_font(self.heading_font, self.style.heading_size).set_color(self.style.heading_color)
        drawn = c.text(self.template.format_heading(text), align=self.heading_align)
        if self.template.underline_headings and drawn:
            last = drawn[-1]
            c.rule(last.x, last.x + last.width, color=self.style.accent_color, line_width=1)
        c.move_down(0.3)

    def _subheading(self, text: str) -> None:
        if not text:
            return
        self.canvas.set_font(self.heading_font, self.style.subheading_size)
        self.canvas.set_color(self.style.heading_color)
        self.canvas.text(text)

    def _body(self, text: str, line_gap: float | None = None) -> None:
        if not text:
            return
        self.canvas.set_font(self.body_font, self.style.body_size).set_color(self.style.body_color)
        self.canvas.text(text, line_gap=self.style.line_gap if line_gap is None else line_gap)

    def _dates(self, text: str) -> None:
        if not text:
            return
        self.canvas.set_font(self.body_font, self.style.date_size).set_color(self.style.muted_color)
        self.canvas.text(text)

    # -- sections ----------------------------------------------------------

    def _add_education(self, entries: list[ResumeCredential]) -> None:
        self._add_section_title("Education")
        for entry in entries:
            self._subheading(credential_heading(entry["degree"], entry["field"]))
            self._body(entry["institution"], line_gap=0)
            self._dates(entry["dates"])
            self.canvas.move_down(0.5)

    def _add_experience(self, entries: list[ResumePosition]) -> None:
        self._add_section_title("Experience")
        for entry in entries:
            self._subheading(position_heading(entry["title"], entry["company"]))
            self._dates(entry["dates"])
            self._body(entry["description"])
            bullets = self.policy.bullets(entry["bullets"])
            if bullets:
                self.canvas.move_down(0.15)
                for bullet in bullets:
                    self._body(f"{BULLET_GLYPH} {bullet}", line_gap=_BULLET_LINE_GAP)
            self.canvas.move_down(self.style.section_gap)

    def _add_projects(self, entries: list[ResumeProject]) -> None:
        self._add_section_title("Projects")
        for entry in entries:
            self._subheading(project_heading(entry["name"], entry["organization"]))
            self._dates(entry["dates"])
            self._body(entry["description"])
            if entry["technologies"]:
                self.canvas.move_down(0.15)
                technologies = ", ".join(entry["technologies"])
                self._body(f"Technologies: {technologies}", line_gap=_TECH_LINE_GAP)
            self.canvas.move_down(0.5)


# -----------------------------------------------------------------------
# Entry points


def render_resume_pdf(
    canvas: PageCanvas,
    profile: ResumeProfile,
    tailoring: TailoringResult | None,
    template_key: str | None,
    one_page: bool = False,
) -> None:
    """Draw a resume onto *canvas*. The caller owns saving the canvas."""
    template = resolve_template(template_key)
    renderer = PdfRenderer(canvas, template, LengthPolicy(compact=one_page))
    renderer.resume(apply_tailoring(profile, tailoring))


def render_cover_letter_pdf(
    canvas: PageCanvas,
    profile: ResumeProfile,
    template_key: str | None,
    cover: CoverLetterContent,
    one_page: bool = False,
    *,
    today: date | None = None,
) -> None:
    """Draw a cover letter onto *canvas*.

    A cover letter has no repeating sections, so the one-page policy has
    nothing to truncate on the canvas.
    """
    template = resolve_template(template_key)
    renderer = PdfRenderer(canvas, template, LengthPolicy(compact=one_page))
    renderer.cover_letter(profile, cover, today)
