from __future__ import annotations

from typing import Any

import pytest

from resume_tailor.services.normalizer import (
    normalize_cover_letter,
    normalize_profile,
    normalize_tailoring,
)
from resume_tailor.services.resume_data import ResumeProfile


def in_order(lines: list[str], expected: list[str]) -> bool:
    """Whether every string in *expected* occurs in *lines*, in that order."""
    joined = "\n".join(lines)
    cursor = 0
    for needle in expected:
        found = joined.find(needle, cursor)
        if found < 0:
            return False
        cursor = found + len(needle)
    return True


@pytest.fixture
def raw_profile() -> dict[str, Any]:
    """The reference single-entry profile."""
    return {
        "name": "A. Smith",
        "email": "a@x.com",
        "phone": "",
        "location": "",
        "summary": "Builds things.",
        "skills": ["Go", "SQL"],
        "experience": [
            {
                "title": "Eng",
                "company": "Acme",
                "dates": "2020-2024",
                "description": "",
                "bullets": ["Shipped X", "Fixed Y", "Mentored Z"],
            }
        ],
        "education": [],
        "projects": [],
    }


@pytest.fixture
def profile(raw_profile: dict[str, Any]) -> ResumeProfile:
    return normalize_profile(raw_profile)


@pytest.fixture
def full_profile() -> ResumeProfile:
    """A profile exercising every section, with more content than fits one page."""
    return normalize_profile(
        {
            "name": "Jordan Lee",
            "email": "jordan@example.com",
            "phone": "555-0100",
            "location": "Vancouver, BC",
            "summary": "Backend engineer focused on data pipelines.",
            "skills": "Python, SQL, Kafka",
            "experience": [
                {
                    "title": f"Role {i}",
                    "company": f"Company {i}",
                    "dates": f"201{i}-201{i + 1}",
                    "description": f"Worked on system {i}.",
                    "bullets": [f"Bullet {i}.{j}" for j in range(1, 5)],
                }
                for i in range(1, 6)
            ],
            "education": [
                {
                    "degree": "B.Sc.",
                    "field_of_study": "Computer Science",
                    "school": "State University",
                    "dates": "2008-2012",
                }
            ],
            "projects": [
                {
                    "name": "Widget",
                    "organization": "Open Source",
                    "dates": "2021",
                    "description": "A widget toolkit.",
                    "technologies": ["Rust", "WebAssembly"],
                }
            ],
        }
    )


@pytest.fixture
def tailoring():
    return normalize_tailoring(
        {
            "tailored_summary": "Tailored summary for the data role.",
            "target_skills": ["Python", "Airflow"],
            "tailored_experience": [],
            "recommended_template": "modern",
        }
    )


@pytest.fixture
def cover():
    return normalize_cover_letter(
        {
            "body": "I am excited to apply.\n\nI have shipped many things.",
            "recipientName": "Sam Rivera",
            "recipientTitle": "Engineering Manager",
            "company": "Acme Corp",
            "address1": "1 Main St",
            "address2": "Springfield",
        }
    )
