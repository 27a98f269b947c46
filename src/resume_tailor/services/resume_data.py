"""Canonical data contracts consumed by both document renderers.

These TypedDicts describe the shape produced by
:mod:`resume_tailor.services.normalizer`.  After normalization every key is
present, scalar prose fields are strings and repeating fields are lists, so
renderers never need to re-check shapes.
"""

from __future__ import annotations

from typing import TypedDict

__all__ = [
    "CoverLetterContent",
    "ResumeCredential",
    "ResumePosition",
    "ResumeProfile",
    "ResumeProject",
    "TailoringResult",
]


class ResumePosition(TypedDict):
    """A single work-experience entry."""

    title: str
    company: str
    dates: str  # free text, e.g. "2020-2024"
    description: str
    bullets: list[str]


class ResumeCredential(TypedDict):
    """A single education entry."""

    degree: str
    field: str
    institution: str
    dates: str


class ResumeProject(TypedDict):
    """A single project entry."""

    name: str
    organization: str
    dates: str
    description: str
    technologies: list[str]


class ResumeProfile(TypedDict):
    """The base resume as parsed from the candidate's upload."""

    name: str
    email: str
    phone: str
    location: str
    summary: str
    skills: list[str]
    experience: list[ResumePosition]
    education: list[ResumeCredential]
    projects: list[ResumeProject]


class TailoringResult(TypedDict):
    """Per-job overlay. Empty values mean "use the base profile field"."""

    tailored_summary: str
    target_skills: list[str]
    tailored_experience: list[ResumePosition]
    recommended_template: str


class CoverLetterContent(TypedDict):
    """Cover-letter body plus optional header and sign-off overrides."""

    body: str
    date: str
    recipient_name: str
    recipient_title: str
    company: str
    address_line1: str
    address_line2: str
    greeting: str
    closing: str
