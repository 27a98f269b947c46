"""One-page length-reduction rules shared by both renderers.

Both the canvas and the flow-document renderers consult a
:class:`LengthPolicy` before every section decision; neither hard-codes its
own caps.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import TypeVar

__all__ = [
    "COMPACT_BULLETS_PER_ENTRY",
    "COMPACT_ENTRY_LIMIT",
    "LengthPolicy",
]

T = TypeVar("T")

COMPACT_ENTRY_LIMIT = 3
COMPACT_BULLETS_PER_ENTRY = 2

# Flow-format spacing scale factors when compact.
_HEADER_SPACING_SCALE = 0.7
_BODY_SPACING_SCALE = 0.6


@dataclass(frozen=True)
class LengthPolicy:
    """Truncation view over repeating sections.

    ``compact=False`` passes everything through unchanged.
    """

    compact: bool = False

    @property
    def include_projects(self) -> bool:
        """Projects are optional and space-expensive; dropped when compact."""
        return not self.compact

    def entries(self, items: Sequence[T]) -> list[T]:
        """Experience entries to render."""
        if self.compact:
            return list(items[:COMPACT_ENTRY_LIMIT])
        return list(items)

    def bullets(self, items: Sequence[str]) -> list[str]:
        """Bullets to render for one entry."""
        if self.compact:
            return list(items[:COMPACT_BULLETS_PER_ENTRY])
        return list(items)

    def pick(self, normal: int, compact: int) -> int:
        """Choose between a normal and a compact fixed spacing value."""
        return compact if self.compact else normal

    def header_spacing(self, value: int) -> int:
        """Scale title/contact spacing."""
        if self.compact:
            return int(value * _HEADER_SPACING_SCALE)
        return value

    def body_spacing(self, value: int) -> int:
        """Scale heading, body and bullet spacing."""
        if self.compact:
            return int(value * _BODY_SPACING_SCALE)
        return value
