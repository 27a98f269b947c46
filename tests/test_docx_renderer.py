"""Tests for the flow-document builder and the DOCX renderer."""

from __future__ import annotations

import io
from datetime import date

import docx
from conftest import in_order
from docx.enum.text import WD_ALIGN_PARAGRAPH
from docx.shared import Pt, RGBColor, Twips

from resume_tailor.services.docx_builder import FlowDocument, ParagraphSpec, RunSpec
from resume_tailor.services.docx_renderer import render_cover_letter_docx, render_resume_docx
from resume_tailor.services.normalizer import normalize_cover_letter, normalize_profile
from resume_tailor.templates import resolve_template


def _resume(profile, template_key="classic", tailoring=None, one_page=False) -> FlowDocument:
    document = FlowDocument()
    render_resume_docx(document, profile, tailoring, template_key, one_page)
    return document


def _paragraph(document: FlowDocument, text: str) -> ParagraphSpec:
    return next(p for p in document.paragraphs if p.text == text)


def _headings(document: FlowDocument) -> list[str]:
    return [p.text for p in document.paragraphs if p.style == "Heading 2"]


class TestFlowDocument:
    """Tests for materializing paragraph descriptors with python-docx."""

    def _spec(self, **kwargs) -> ParagraphSpec:
        run = RunSpec(text="Hello", font="Georgia", size=21, color="0f766e", bold=True)
        return ParagraphSpec(runs=(run,), **kwargs)

    def test_build_applies_run_formatting(self) -> None:
        flow = FlowDocument()
        flow.add(self._spec(space_after=120, alignment="center"))
        paragraph = flow.build().paragraphs[0]
        run = paragraph.runs[0]
        assert paragraph.text == "Hello"
        assert paragraph.alignment == WD_ALIGN_PARAGRAPH.CENTER
        assert paragraph.paragraph_format.space_after == Twips(120)
        assert run.bold is True
        assert run.font.name == "Georgia"
        assert run.font.size == Pt(10.5)
        assert run.font.color.rgb == RGBColor(0x0F, 0x76, 0x6E)

    def test_bullet_levels_map_to_list_styles(self) -> None:
        flow = FlowDocument()
        flow.add(self._spec(bullet_level=0))
        flow.add(self._spec(bullet_level=1))
        flow.add(self._spec(bullet_level=5))
        styles = [p.style.name for p in flow.build().paragraphs]
        assert styles == ["List Bullet", "List Bullet 2", "List Bullet 3"]

    def test_save_round_trips(self) -> None:
        flow = FlowDocument()
        flow.add(self._spec(style="Title"))
        out = io.BytesIO()
        flow.save(out)
        reopened = docx.Document(io.BytesIO(out.getvalue()))
        assert reopened.paragraphs[0].text == "Hello"
        assert reopened.paragraphs[0].style.name == "Title"


class TestRenderResumeDocx:
    """Tests for section order, styling and policy in the flow document."""

    def test_reference_profile_order(self, profile) -> None:
        lines = _resume(profile).text_lines()
        assert in_order(
            lines,
            [
                "A. Smith",
                "Builds things.",
                "Go, SQL",
                "Eng at Acme",
                "2020-2024",
                "Shipped X",
                "Fixed Y",
                "Mentored Z",
            ],
        )

    def test_bullets_are_list_paragraphs(self, profile) -> None:
        document = _resume(profile)
        bullets = [p for p in document.paragraphs if p.is_bullet]
        assert [p.text for p in bullets] == ["Shipped X", "Fixed Y", "Mentored Z"]
        assert all(p.bullet_level == 0 for p in bullets)

    def test_title_and_heading_styles(self, profile) -> None:
        document = _resume(profile)
        assert document.paragraphs[0].style == "Title"
        assert _headings(document) == ["Summary", "Skills", "Experience"]

    def test_section_order(self, full_profile) -> None:
        assert _headings(_resume(full_profile)) == [
            "Summary",
            "Skills",
            "Education",
            "Experience",
            "Projects",
        ]

    def test_education_lines(self, full_profile) -> None:
        lines = _resume(full_profile).text_lines()
        assert in_order(lines, ["B.Sc. in Computer Science", "State University", "2008-2012"])

    def test_technologies_prefix_is_bold_run(self, full_profile) -> None:
        paragraph = _paragraph(_resume(full_profile), "Technologies: Rust, WebAssembly")
        label, value = paragraph.runs
        assert label.text == "Technologies: "
        assert label.bold is True
        assert value.bold is False

    def test_missing_name_uses_default_title(self) -> None:
        assert _resume(normalize_profile({})).text_lines() == ["Resume"]

    def test_tailoring_overrides_summary(self, profile, tailoring) -> None:
        lines = _resume(profile, tailoring=tailoring).text_lines()
        assert "Tailored summary for the data role." in lines
        assert "Builds things." not in lines

    def test_one_page_caps(self, full_profile) -> None:
        document = _resume(full_profile, one_page=True)
        headings = [line for line in document.text_lines() if line.startswith("Role ")]
        assert headings == ["Role 1 at Company 1", "Role 2 at Company 2", "Role 3 at Company 3"]
        assert len([p for p in document.paragraphs if p.is_bullet]) == 6
        assert "Projects" not in _headings(document)

    def test_one_page_compresses_spacing(self, profile) -> None:
        style = resolve_template("classic").docx
        normal = _resume(profile)
        compact = _resume(profile, one_page=True)
        assert normal.paragraphs[0].space_after == style.title_after
        assert compact.paragraphs[0].space_after == int(style.title_after * 0.7)
        assert compact.paragraphs[1].space_after == int(style.contact_after * 0.7)
        heading = _paragraph(compact, "Summary")
        assert heading.space_before == int(style.heading_before * 0.6)
        assert heading.space_after == int(style.heading_after * 0.6)
        bullet = _paragraph(compact, "Shipped X")
        assert bullet.space_after == int(style.bullet_spacing * 0.6)
        assert _paragraph(compact, "Eng at Acme").space_before == 60
        assert _paragraph(normal, "Eng at Acme").space_before == 100

    def test_font_sizes_are_half_points(self, profile) -> None:
        document = _resume(profile)
        style = resolve_template("classic")
        assert document.paragraphs[0].runs[0].size == style.pdf.title_size * 2
        assert _paragraph(document, "Summary").runs[0].size == style.pdf.heading_size * 2
        assert _paragraph(document, "Builds things.").runs[0].size == style.pdf.body_size * 2
        dates = _paragraph(document, "2020-2024").runs[0]
        assert dates.size == (style.pdf.body_size - 1) * 2
        assert dates.color == style.docx.muted_color

    def test_declared_fonts_are_kept(self, profile) -> None:
        document = _resume(profile, "executive")
        assert document.paragraphs[0].runs[0].font == "Times New Roman"
        assert _paragraph(document, "Builds things.").runs[0].font == "Georgia"

    def test_layout_predicates(self, profile) -> None:
        assert _resume(profile, "midnight").paragraphs[0].alignment == "center"
        assert _resume(profile, "classic").paragraphs[0].alignment == "left"
        assert _paragraph(_resume(profile, "sidebar"), "Summary").alignment == "center"
        assert _paragraph(_resume(profile, "modern"), "Summary").runs[0].underline is True
        assert _paragraph(_resume(profile, "classic"), "Summary").runs[0].underline is False
        assert "SKILLS" in _headings(_resume(profile, "executive"))

    def test_builds_real_document(self, full_profile) -> None:
        built = _resume(full_profile).build()
        texts = [p.text for p in built.paragraphs]
        assert texts[0] == "Jordan Lee"
        assert "Role 5 at Company 5" in texts

    def test_control_characters_build(self) -> None:
        profile = normalize_profile({"name": "N\x00", "summary": "Built\x0cthings\x00."})
        texts = [p.text for p in _resume(profile).build().paragraphs]
        assert texts[0] == "N"
        assert "Built things." in texts


class TestRenderCoverLetterDocx:
    """Tests for cover-letter paragraphs."""

    def _render(self, profile, cover, one_page=False) -> FlowDocument:
        document = FlowDocument()
        render_cover_letter_docx(
            document, profile, "classic", cover, one_page, today=date(2025, 3, 4)
        )
        return document

    def test_letter_order(self, profile, cover) -> None:
        lines = self._render(profile, cover).text_lines()
        assert lines == [
            "A. Smith",
            "a@x.com",
            "March 4, 2025",
            "Sam Rivera",
            "Engineering Manager",
            "Acme Corp",
            "1 Main St",
            "Springfield",
            "Dear Hiring Manager,",
            "I am excited to apply.",
            "I have shipped many things.",
            "Sincerely,",
            "A. Smith",
        ]

    def test_escaped_newline_is_paragraph_break(self, profile) -> None:
        cover = normalize_cover_letter({"body": "First para.\\nSecond para."})
        lines = self._render(profile, cover).text_lines()
        assert in_order(lines, ["First para.", "Second para."])
        assert not any("\\n" in line for line in lines)

    def test_empty_body_falls_back_to_summary(self, profile) -> None:
        lines = self._render(profile, normalize_cover_letter("")).text_lines()
        assert in_order(lines, ["Dear Hiring Manager,", "Builds things.", "Sincerely,"])

    def test_one_page_scales_all_spacing(self, profile, cover) -> None:
        style = resolve_template("classic").docx
        document = self._render(profile, cover, one_page=True)
        assert document.paragraphs[0].space_after == int(style.title_after * 0.6)
        assert _paragraph(document, "Sam Rivera").space_after == 40
        assert _paragraph(document, "Sincerely,").space_after == 80
        normal = self._render(profile, cover)
        assert _paragraph(normal, "Sam Rivera").space_after == 80
        assert _paragraph(normal, "Sincerely,").space_after == 120

    def test_signature_is_subheading(self, profile, cover) -> None:
        document = self._render(profile, cover)
        signature = document.paragraphs[-1]
        assert signature.text == "A. Smith"
        assert signature.runs[0].bold is True
        assert signature.space_before == 0
