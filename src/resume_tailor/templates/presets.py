"""The closed catalogue of resume / cover-letter style presets."""

from __future__ import annotations

from resume_tailor.templates.base import LayoutFamily, Palette, Template, build_template

__all__ = ["PRESETS"]


PRESETS: tuple[Template, ...] = (
    build_template(
        "classic",
        "Classic",
        LayoutFamily.TRADITIONAL,
        font="Times New Roman",
        palette=Palette(
            title="111111", heading="111111", body="222222", contact="444444", accent="111111"
        ),
    ),
    build_template(
        "modern",
        "Modern Accent",
        LayoutFamily.ACCENTED,
        font="Arial",
        palette=Palette(
            title="0b4f4a", heading="0b4f4a", body="1f1b16", contact="4a5a58", accent="0f766e"
        ),
        heading_size=12.5,
    ),
    build_template(
        "minimal",
        "Minimal",
        LayoutFamily.MINIMAL,
        font="Helvetica",
        palette=Palette(
            title="333333", heading="333333", body="111111", contact="777777", accent="dddddd"
        ),
        title_size=20,
        heading_size=12,
        margin=56,
    ),
    build_template(
        "midnight",
        "Midnight",
        LayoutFamily.CENTERED,
        font="Georgia",
        palette=Palette(
            title="12326f", heading="12326f", body="0e172a", contact="3b4a6b", accent="1f4b99"
        ),
    ),
    build_template(
        "sunrise",
        "Sunrise",
        LayoutFamily.ACCENTED,
        font="Arial",
        palette=Palette(
            title="9a3412", heading="9a3412", body="4a2b16", contact="7c4a2d", accent="f97316"
        ),
    ),
    build_template(
        "mint",
        "Mint",
        LayoutFamily.MINIMALIST,
        font="Helvetica",
        palette=Palette(
            title="115e59", heading="115e59", body="064e3b", contact="3f6f66", accent="2dd4bf"
        ),
        heading_size=12.5,
    ),
    build_template(
        "sidebar",
        "Sidebar",
        LayoutFamily.BLOCK_HEADERS,
        font="Arial",
        palette=Palette(
            title="1e40af", heading="1e40af", body="1a1a1a", contact="4b5563", accent="1e40af"
        ),
    ),
    build_template(
        "executive",
        "Executive",
        LayoutFamily.FORMAL,
        font="Georgia",
        heading_font="Times New Roman",
        palette=Palette(
            title="1a1a1a", heading="d97706", body="1a1a1a", contact="4b5563", accent="d97706"
        ),
        title_size=24,
        margin=54,
    ),
    build_template(
        "clean",
        "Clean Modern",
        LayoutFamily.MINIMALIST,
        font="Calibri",
        palette=Palette(
            title="7c3aed", heading="7c3aed", body="374151", contact="6b7280", accent="7c3aed"
        ),
    ),
    build_template(
        "bold",
        "Bold Impact",
        LayoutFamily.HIGH_CONTRAST,
        font="Arial",
        heading_font="Arial Black",
        palette=Palette(
            title="dc2626", heading="dc2626", body="1a1a1a", contact="374151", accent="dc2626"
        ),
        title_size=26,
        heading_size=14,
    ),
    build_template(
        "creative",
        "Creative",
        LayoutFamily.ACCENTED,
        font="Trebuchet MS",
        palette=Palette(
            title="059669", heading="059669", body="1f2937", contact="4b5563", accent="059669"
        ),
    ),
    build_template(
        "centered_serif",
        "Centered Serif",
        LayoutFamily.CENTERED,
        font="Times New Roman",
        palette=Palette(
            title="374151", heading="374151", body="1f2937", contact="6b7280", accent="374151"
        ),
    ),
    build_template(
        "compact_pro",
        "Compact Professional",
        LayoutFamily.TRADITIONAL,
        font="Helvetica",
        palette=Palette(
            title="1f2937", heading="1f2937", body="111827", contact="4b5563", accent="4b5563"
        ),
        title_size=18,
        heading_size=11.5,
        subheading_size=10.5,
        body_size=9.5,
        margin=40,
        line_gap=1,
        section_gap=0.3,
        title_after=80,
        contact_after=120,
        heading_before=160,
        heading_after=60,
        body_after=80,
        bullet_spacing=40,
    ),
    build_template(
        "left_bar",
        "Left Bar",
        LayoutFamily.TRADITIONAL,
        font="Georgia",
        heading_font="Arial",
        palette=Palette(
            title="1f2937", heading="1f2937", body="111827", contact="4b5563", accent="374151"
        ),
    ),
)
