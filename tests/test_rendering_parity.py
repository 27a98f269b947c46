"""Cross-format parity between the canvas and flow-document renderers."""

from __future__ import annotations

import io

import pytest

from resume_tailor.services.docx_builder import FlowDocument
from resume_tailor.services.docx_renderer import render_resume_docx
from resume_tailor.services.pdf_canvas import PageCanvas
from resume_tailor.services.pdf_renderer import BULLET_GLYPH, render_resume_pdf
from resume_tailor.templates import resolve_template
from resume_tailor.templates.base import DOCX_SIZE_SCALE
from resume_tailor.templates.presets import PRESETS

SECTIONS = ("Summary", "Skills", "Education", "Experience", "Projects")


def _render_both(profile, template_key: str, one_page: bool = False):
    canvas = PageCanvas(io.BytesIO())
    render_resume_pdf(canvas, profile, None, template_key, one_page)
    document = FlowDocument()
    render_resume_docx(document, profile, None, template_key, one_page)
    return canvas, document


def _pdf_sections(canvas: PageCanvas, template) -> list[str]:
    wanted = {template.format_heading(s) for s in SECTIONS}
    return [line for line in canvas.text_lines() if line in wanted]


def _docx_sections(document: FlowDocument) -> list[str]:
    return [p.text for p in document.paragraphs if p.style == "Heading 2"]


@pytest.mark.parametrize("template", PRESETS, ids=lambda t: t.key)
class TestParity:
    """Every preset keeps both formats in step."""

    def test_same_section_order(self, template, full_profile) -> None:
        canvas, document = _render_both(full_profile, template.key)
        assert _pdf_sections(canvas, template) == _docx_sections(document)

    def test_heading_to_body_ratio(self, template, profile) -> None:
        canvas, document = _render_both(profile, template.key)
        heading = template.format_heading("Summary")
        pdf_heading = next(op for op in canvas.operations if op.text == heading)
        pdf_body = next(op for op in canvas.operations if op.text == "Builds things.")
        docx_heading = next(p for p in document.paragraphs if p.text == heading).runs[0]
        docx_body = next(p for p in document.paragraphs if p.text == "Builds things.").runs[0]

        assert docx_heading.size == pdf_heading.size * DOCX_SIZE_SCALE
        assert docx_body.size == pdf_body.size * DOCX_SIZE_SCALE
        assert pdf_heading.size / pdf_body.size == pytest.approx(
            docx_heading.size / docx_body.size
        )

    def test_headings_are_bold_in_both_formats(self, template, profile) -> None:
        canvas, document = _render_both(profile, template.key)
        for text in (template.format_heading("Summary"), "Eng at Acme"):
            pdf_op = next(op for op in canvas.operations if op.text == text)
            docx_run = next(p for p in document.paragraphs if p.text == text).runs[0]
            assert pdf_op.font.endswith("-Bold")
            assert docx_run.bold

    def test_same_alignment_predicates(self, template, profile) -> None:
        canvas, document = _render_both(profile, template.key)
        title = next(op for op in canvas.operations if op.text == "A. Smith")
        pdf_centered = title.x > canvas.left
        assert pdf_centered is (document.paragraphs[0].alignment == "center")

    def test_one_page_caps_match(self, template, full_profile) -> None:
        canvas, document = _render_both(full_profile, template.key, one_page=True)
        pdf_bullets = [line for line in canvas.text_lines() if line.startswith(BULLET_GLYPH)]
        docx_bullets = [p.text for p in document.paragraphs if p.is_bullet]
        assert [b.removeprefix(f"{BULLET_GLYPH} ") for b in pdf_bullets] == docx_bullets
        assert len(docx_bullets) == 6
        assert template.format_heading("Projects") not in _docx_sections(document)
        assert template.format_heading("Projects") not in _pdf_sections(canvas, template)

    def test_projects_present_without_one_page(self, template, full_profile) -> None:
        canvas, document = _render_both(full_profile, template.key)
        assert template.format_heading("Projects") in _docx_sections(document)
        assert template.format_heading("Projects") in _pdf_sections(canvas, template)


def test_unknown_template_matches_classic_in_both_formats(profile) -> None:
    canvas, document = _render_both(profile, "does-not-exist")
    classic_canvas, classic_document = _render_both(profile, "classic")
    assert canvas.operations == classic_canvas.operations
    assert document.paragraphs == classic_document.paragraphs
    assert resolve_template("does-not-exist") is resolve_template("classic")
