"""Render resumes and cover letters as flow-document paragraph sequences.

Mirrors :mod:`resume_tailor.services.pdf_renderer` section for section, but
emits :class:`ParagraphSpec` descriptors instead of positioned draws.  The
host word processor owns line wrapping and pagination, so the one-page
policy also compresses paragraph spacing here.
"""

from __future__ import annotations

from datetime import date

from resume_tailor.services.docx_builder import (
    ALIGN_CENTER,
    ALIGN_LEFT,
    FlowDocument,
    ParagraphSpec,
    RunSpec,
)
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
from resume_tailor.services.resume_data import (
    CoverLetterContent,
    ResumeCredential,
    ResumePosition,
    ResumeProfile,
    ResumeProject,
    TailoringResult,
)
from resume_tailor.templates import Template, resolve_template
from resume_tailor.templates.styles import resolve_docx_font

__all__ = [
    "DocxRenderer",
    "render_cover_letter_docx",
    "render_resume_docx",
]

_TITLE_STYLE = "Title"
_HEADING_STYLE = "Heading 2"


class DocxRenderer:
    """Emits paragraphs for one document into a :class:`FlowDocument`."""

    def __init__(self, document: FlowDocument, template: Template, policy: LengthPolicy) -> None:
        self.document = document
        self.template = template
        self.style = template.docx
        self.policy = policy
        self.heading_font = resolve_docx_font(self.style.heading_font)
        self.body_font = resolve_docx_font(self.style.font)
        self.title_align = ALIGN_CENTER if template.title_centered else ALIGN_LEFT
        self.heading_align = ALIGN_CENTER if template.heading_centered else ALIGN_LEFT

    # ------------------------------------------------------------------
    # public API
    # ------------------------------------------------------------------

    def resume(self, profile: ResumeProfile) -> None:
        p = self.policy
        body_after = p.body_spacing(self.style.body_after)
        self._add_header(
            profile["name"] or DEFAULT_RESUME_TITLE,
            contact_line(profile),
            title_after=p.header_spacing(self.style.title_after),
            contact_after=p.header_spacing(self.style.contact_after),
        )

        if profile["summary"]:
            self._add_section_title("Summary")
            self._body(profile["summary"], body_after)

        if profile["skills"]:
            self._add_section_title("Skills")
            self._body(", ".join(profile["skills"]), body_after)

        if profile["education"]:
            self._add_education(profile["education"])

        experience = p.entries(profile["experience"])
        if experience:
            self._add_experience(experience)

        if p.include_projects and profile["projects"]:
            self._add_projects(profile["projects"])

    def cover_letter(
        self,
        profile: ResumeProfile,
        cover: CoverLetterContent,
        today: date | None = None,
    ) -> None:
        p = self.policy
        body_after = p.body_spacing(self.style.body_after)
        name = profile["name"] or DEFAULT_SIGNATURE
        self._add_header(
            name,
            contact_line(profile),
            title_after=p.body_spacing(self.style.title_after),
            contact_after=p.body_spacing(self.style.contact_after),
        )

        self._body(letter_date(cover, today), body_after)
        for line in recipient_lines(cover):
            self._body(line, p.pick(80, 40))
        self._body(cover["greeting"] or DEFAULT_GREETING, body_after)

        for paragraph in body_paragraphs(cover, profile):
            self._body(paragraph, body_after)

        self._body(cover["closing"] or DEFAULT_CLOSING, p.pick(120, 80))
        self._subheading(name, space_before=0, space_after=body_after)

    # ------------------------------------------------------------------
    # building blocks
    # ------------------------------------------------------------------

    def _run(self, text: str, *, heading: bool = False, **overrides) -> RunSpec:
        fields = {
            "text": text,
            "font": self.heading_font if heading else self.body_font,
            "size": self.style.body_size,
            "color": self.style.body_color,
        }
        fields.update(overrides)
        return RunSpec(**fields)

    def _add_header(
        self, title: str, contact: str, *, title_after: int, contact_after: int
    ) -> None:
        self.document.add(
            ParagraphSpec(
                runs=(
                    self._run(
                        title,
                        heading=True,
                        bold=True,
                        size=self.style.title_size,
                        color=self.style.title_color,
                    ),
                ),
                alignment=self.title_align,
                space_after=title_after,
                style=_TITLE_STYLE,
            )
        )
        if contact:
            self.document.add(
                ParagraphSpec(
                    runs=(self._run(contact, color=self.style.contact_color),),
                    alignment=self.title_align,
                    space_after=contact_after,
                )
            )

    def _add_section_title(self, text: str) -> None:
        self.document.add(
            ParagraphSpec(
                runs=(
                    self._run(
                        self.template.format_heading(text),
                        heading=True,
                        bold=True,
                        size=self.style.heading_size,
                        color=self.style.heading_color,
                        underline=self.template.underline_headings,
                    ),
                ),
                alignment=self.heading_align,
                space_before=self.policy.body_spacing(self.style.heading_before),
                space_after=self.policy.body_spacing(self.style.heading_after),
                style=_HEADING_STYLE,
            )
        )

    def _subheading(
        self,
        text: str,
        *,
        space_before: int | None = None,
        space_after: int | None = None,
    ) -> None:
        if not text:
            return
        self.document.add(
            ParagraphSpec(
                runs=(
                    self._run(
                        text,
                        heading=True,
                        bold=True,
                        size=self.style.subheading_size,
                        color=self.style.heading_color,
                    ),
                ),
                space_before=self.policy.pick(100, 60) if space_before is None else space_before,
                space_after=self.policy.pick(60, 40) if space_after is None else space_after,
            )
        )

    def _body(self, text: str, space_after: int) -> None:
        if not text:
            return
        self.document.add(ParagraphSpec(runs=(self._run(text),), space_after=space_after))

    def _dates(self, text: str, space_after: int) -> None:
        if not text:
            return
        run = self._run(text, size=self.style.date_size, color=self.style.muted_color)
        self.document.add(ParagraphSpec(runs=(run,), space_after=space_after))

    def _bullet(self, text: str, level: int = 0) -> None:
        if not text:
            return
        self.document.add(
            ParagraphSpec(
                runs=(self._run(text),),
                space_after=self.policy.body_spacing(self.style.bullet_spacing),
                bullet_level=level,
            )
        )

    # -- sections ----------------------------------------------------------

    def _add_education(self, entries: list[ResumeCredential]) -> None:
        body_after = self.policy.body_spacing(self.style.body_after)
        self._add_section_title("Education")
        for entry in entries:
            self._subheading(credential_heading(entry["degree"], entry["field"]))
            self._body(entry["institution"], self.policy.pick(80, 40))
            self._dates(entry["dates"], body_after)

    def _add_experience(self, entries: list[ResumePosition]) -> None:
        self._add_section_title("Experience")
        for entry in entries:
            self._subheading(position_heading(entry["title"], entry["company"]))
            self._dates(entry["dates"], self.policy.pick(80, 40))
            self._body(entry["description"], self.policy.pick(100, 60))
            for bullet in self.policy.bullets(entry["bullets"]):
                self._bullet(bullet)

    def _add_projects(self, entries: list[ResumeProject]) -> None:
        body_after = self.policy.body_spacing(self.style.body_after)
        self._add_section_title("Projects")
        for entry in entries:
            self._subheading(project_heading(entry["name"], entry["organization"]))
            self._dates(entry["dates"], 80)
            self._body(entry["description"], 100)
            if entry["technologies"]:
                self.document.add(
                    ParagraphSpec(
                        runs=(
                            self._run("Technologies: ", bold=True),
                            self._run(", ".join(entry["technologies"])),
                        ),
                        space_after=body_after,
                    )
                )


# -----------------------------------------------------------------------
# Entry points


def render_resume_docx(
    document: FlowDocument,
    profile: ResumeProfile,
    tailoring: TailoringResult | None,
    template_key: str | None,
    one_page: bool = False,
) -> None:
    """Append a resume's paragraphs to *document*."""
    template = resolve_template(template_key)
    renderer = DocxRenderer(document, template, LengthPolicy(compact=one_page))
    renderer.resume(apply_tailoring(profile, tailoring))


def render_cover_letter_docx(
    document: FlowDocument,
    profile: ResumeProfile,
    template_key: str | None,
    cover: CoverLetterContent,
    one_page: bool = False,
    *,
    today: date | None = None,
) -> None:
    """Append a cover letter's paragraphs to *document*."""
    template = resolve_template(template_key)
    renderer = DocxRenderer(document, template, LengthPolicy(compact=one_page))
    renderer.cover_letter(profile, cover, today)
