"""Natural events with their categories, sources and geometry."""

from __future__ import annotations

import json
import sys
from dataclasses import dataclass, field
from typing import Any

from eonetmap.models import (
    CategoryRef,
    Geometry,
    Source,
    _optional_text,
    _text,
)


class GeometryError(ValueError):
    """Raised when an event's geometry cannot be read."""


@dataclass
class Event:
    """A natural event record."""

    id: str = ""
    title: str = ""
    description: str | None = None
    link: str = ""
    closed: str | None = None
    categories: list[CategoryRef] = field(default_factory=list)
    sources: list[Source] = field(default_factory=list)
    geometry: list[Geometry] = field(default_factory=list)

    @classmethod
    def from_json(cls, data: dict[str, Any]) -> Event:
        """Build an event from a JSON object.

        Raises GeometryError when a geometry entry is malformed and
        TypeError when another member has the wrong type.
        """
        event = cls(
            id=_text(data, "id"),
            title=_text(data, "title"),
            description=_optional_text(data, "description"),
            link=_text(data, "link"),
            closed=_optional_text(data, "closed"),
        )

        categories = data.get("categories")
        if isinstance(categories, list):
            event.categories = [
                CategoryRef(id=_text(c, "id"), title=_text(c, "title"))
                for c in categories
            ]

        sources = data.get("sources")
        if isinstance(sources, list):
            event.sources = [
                Source(id=_text(s, "id"), url=_optional_text(s, "url"))
                for s in sources
            ]

        geometry = data.get("geometry")
        if isinstance(geometry, list):
            for entry in geometry:
                try:
                    event.geometry.append(Geometry.from_json(entry))
                except (TypeError, ValueError, AttributeError) as exc:
                    raise GeometryError(
                        f"Error while processing geometry.coordinates: {exc}"
                    ) from exc
        return event

    def to_json(self) -> dict[str, Any]:
        """Serialise to a JSON object; missing optional text becomes empty."""
        return {
            "id": self.id,
            "title": self.title,
            "description": self.description or "",
            "link": self.link,
            "closed": self.closed or "",
            "categories": [{"id": c.id, "title": c.title} for c in self.categories],
            "sources": [{"id": s.id, "url": s.url} for s in self.sources],
            "geometry": [g.to_json() for g in self.geometry],
        }

    def print_json(self) -> str:
        """Write the JSON form, indented by four spaces, to standard output and return it."""
        text = json.dumps(self.to_json(), indent=4, ensure_ascii=False)
        sys.stdout.write(text)
        sys.stdout.flush()
        return text

    def position(self) -> tuple[float, float]:
        """Return the first two coordinates of the first geometry, or (0.0, 0.0)."""
        if self.geometry and len(self.geometry[0].coordinates) >= 2:
            first, second = self.geometry[0].coordinates[:2]
            return first, second
        return 0.0, 0.0

    def set_position(self, lat: float, lon: float) -> None:
        """Replace all geometry with a single point holding the given pair."""
        self.geometry = [Geometry(coordinates=[lat, lon])]