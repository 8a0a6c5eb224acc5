"""Event categories as published by the events service."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Any

from eonetmap.models import _text


@dataclass
class Category:
    """A category of natural events."""

    id: str = ""
    title: str = ""
    description: str = ""
    link: str = ""
    layers: str = ""

    @classmethod
    def from_json(cls, data: dict[str, Any]) -> Category:
        """Build a category from a JSON object; missing members become empty."""
        return cls(
            id=_text(data, "id"),
            title=_text(data, "title"),
            description=_text(data, "description"),
            link=_text(data, "link"),
            layers=_text(data, "layers"),
        )

    def to_json(self) -> dict[str, str]:
        """Serialise to a JSON object."""
        return {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "link": self.link,
            "layers": self.layers,
        }

    def describe(self) -> str:
        """Return a human-readable multi-line summary."""
        return (
            f"[{self.id}] {self.title}\n"
            f"{self.description}\n"
            f"link:   {self.link}\n"
            f"layers: {self.layers}\n\n"
        )

    def show(self) -> str:
        """Write the summary to standard output and return it."""
        text = self.describe()
        sys.stdout.write(text)
        sys.stdout.flush()
        return text