"""Plain data records shared by events, categories and API requests."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


def _text(data: Any, key: str, default: str = "") -> str:
    """Read a string member of a JSON object, falling back to ``default`` when absent."""
    if not isinstance(data, dict):
        raise TypeError(f"cannot read {key!r} from a non-object value")
    value = data.get(key, default)
    if not isinstance(value, str):
        raise TypeError(f"{key!r} must be a string, got {type(value).__name__}")
    return value


def _optional_text(data: Any, key: str) -> str | None:
    """Read a string member that may be missing or null."""
    if not isinstance(data, dict):
        raise TypeError(f"cannot read {key!r} from a non-object value")
    value = data.get(key)
    if value is None:
        return None
    if not isinstance(value, str):
        raise TypeError(f"{key!r} must be a string, got {type(value).__name__}")
    return value


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _to_floats(values: Any) -> list[float]:
    if not isinstance(values, list):
        raise TypeError("coordinates must be an array of numbers")
    if not all(_is_number(v) for v in values):
        raise TypeError("coordinates must contain only numbers")
    return [float(v) for v in values]


def _extract_points(points: list[Any]) -> list[list[float]]:
    return [_to_floats(p) for p in points if isinstance(p, list) and len(p) >= 2]


@dataclass
class ApiRequest:
    """An HTTP request description: endpoint URL, query parameters and headers."""

    url: str = ""
    params: dict[str, str] = field(default_factory=dict)
    headers: dict[str, str] = field(default_factory=dict)


@dataclass
class CategoryRef:
    """A short reference to a category, as embedded in an event."""

    id: str = ""
    title: str = ""


@dataclass
class Source:
    """A data source of an event, with an optional URL."""

    id: str = ""
    url: str | None = None


@dataclass
class Geometry:
    """A dated position of an event, optionally with an outline and a magnitude."""

    date: str = ""
    type: str = ""
    coordinates: list[float] = field(default_factory=list)
    coordinates_list: list[list[float]] | None = None
    magnitude_unit: str | None = None
    magnitude_value: float | None = None

    @classmethod
    def from_json(cls, data: dict[str, Any]) -> Geometry:
        """Build a geometry from a JSON object.

        Accepts a point ``[lon, lat]``, a list of points, or a polygon whose
        first ring is used. For lists, ``coordinates`` is the first point.
        Raises TypeError on malformed members.
        """
        geometry = cls(date=_text(data, "date"), type=_text(data, "type"))

        coords = data.get("coordinates")
        if isinstance(coords, list) and coords:
            first = coords[0]
            if len(coords) >= 2 and _is_number(first):
                geometry.coordinates = _to_floats(coords)
            elif isinstance(first, list) and first:
                if _is_number(first[0]):
                    extracted = _extract_points(coords)
                elif isinstance(first[0], list):
                    extracted = _extract_points(first)
                else:
                    extracted = []
                if extracted:
                    geometry.coordinates_list = extracted
                    geometry.coordinates = list(extracted[0])

        geometry.magnitude_unit = _optional_text(data, "magnitudeUnit")
        magnitude = data.get("magnitudeValue")
        if magnitude is not None:
            if not _is_number(magnitude):
                raise TypeError("'magnitudeValue' must be a number")
            geometry.magnitude_value = float(magnitude)
        return geometry

    def to_json(self) -> dict[str, Any]:
        """Serialise to a JSON object; optional members appear only when set."""
        result: dict[str, Any] = {
            "date": self.date,
            "type": self.type,
            "coordinates": list(self.coordinates),
        }
        if self.coordinates_list is not None:
            result["coordinatesList"] = [list(p) for p in self.coordinates_list]
        if self.magnitude_unit is not None:
            result["magnitudeUnit"] = self.magnitude_unit
        if self.magnitude_value is not None:
            result["magnitudeValue"] = self.magnitude_value
        return result