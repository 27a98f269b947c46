"""Template registry for resume and cover-letter rendering."""

from __future__ import annotations

import logging
from types import MappingProxyType

from resume_tailor.templates.base import LayoutFamily, Template
from resume_tailor.templates.presets import PRESETS

logger = logging.getLogger(__name__)

__all__ = [
    "DEFAULT_TEMPLATE_KEY",
    "LayoutFamily",
    "Template",
    "coerce_template_key",
    "describe_templates",
    "list_templates",
    "resolve_template",
]

DEFAULT_TEMPLATE_KEY = "classic"

_REGISTRY: MappingProxyType[str, Template] = MappingProxyType({t.key: t for t in PRESETS})


def resolve_template(key: str | None) -> Template:
    """Return the template registered under *key*.

    Unknown or empty keys fall back to the ``classic`` preset; template
    selection is advisory and never fails.
    """
    if key:
        template = _REGISTRY.get(key.strip().lower())
        if template is not None:
            return template
        logger.debug("Unknown template %r, falling back to %s", key, DEFAULT_TEMPLATE_KEY)
    return _REGISTRY[DEFAULT_TEMPLATE_KEY]


def coerce_template_key(key: object) -> str:
    """Map a suggested template key (e.g. an LLM recommendation) into the registry."""
    if isinstance(key, str):
        return resolve_template(key).key
    return DEFAULT_TEMPLATE_KEY


def list_templates() -> list[str]:
    """Return sorted keys of all registered templates."""
    return sorted(_REGISTRY)


def describe_templates() -> list[dict[str, str]]:
    """Return a UI-friendly summary of every preset, in catalogue order."""
    return [
        {
            "key": t.key,
            "label": t.label,
            "layout": t.layout.value,
            "accent": t.pdf.accent_color,
        }
        for t in PRESETS
    ]
