"""Coordination between event data and a map view.

The controller fetches categories and events, keeps them, and notifies
listeners when markers should be added or cleared and when the list of
recent events is ready.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Callable, Iterable

from eonetmap.api import Api
from eonetmap.category import Category
from eonetmap.event import Event
from eonetmap.file_handler import FileHandler

TYPE_COLORS: dict[str, str] = {
    "wildfires": "#ff4500",
    "volcanoes": "#8b0000",
    "seaLakeIce": "#00ced1",
    "severeStorms": "#9370db",
    "drought": "#deb887",
    "dustHaze": "#d2b48c",
    "earthquakes": "#a9a9a9",
    "floods": "#1e90ff",
    "landslides": "#a0522d",
    "manmade": "#ff1493",
    "snow": "#f0f8ff",
    "tempExtremes": "#ffa500",
    "waterColor": "#7fffd4",
}
DEFAULT_COLOR = "#ff0000"

# Length of the suffix that follows the status in a button identifier.
_BUTTON_SUFFIX_LENGTH = 17


@dataclass(frozen=True)
class Marker:
    """Everything the map needs to draw one event."""

    name: str
    latitude: float
    longitude: float
    type: str
    color: str
    date: str
    description: str
    link: str
    magnitude: str
    sources: str
    categories: str
    coordinates: str


@dataclass(frozen=True)
class RecentEvent:
    """A recent event reduced to its title and a rounded position."""

    title: str
    latitude: float
    longitude: float


def _format_shortest(value: float) -> str:
    """Format a number in its shortest form, without a trailing ``.0``."""
    if math.isnan(value):
        return "nan"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    if value.is_integer() and abs(value) < 1e15:
        return str(int(value))
    return repr(value)


def _round3(value: float) -> float:
    """Round to three decimals, halves away from zero."""
    scaled = math.floor(abs(value) * 1000.0 + 0.5) / 1000.0
    return math.copysign(scaled, value)


def _ordered(data: Any) -> Any:
    """Return a JSON object with its members in key order."""
    if isinstance(data, dict):
        return dict(sorted(data.items()))
    return data


class MapController:
    """Fetches, stores and publishes events for display on a map."""

    def __init__(
        self,
        api: Api | None = None,
        file_handler: FileHandler | None = None,
    ) -> None:
        self.api = api if api is not None else Api()
        self.file_handler = file_handler if file_handler is not None else FileHandler()
        self.categories: list[Category] = []
        self.current_events: list[Event] = []
        self.recent_events: list[Event] = []
        self.marker_listeners: list[Callable[[Marker], None]] = []
        self.clear_listeners: list[Callable[[], None]] = []
        self.recent_listeners: list[Callable[[list[RecentEvent]], None]] = []

    def add_event(self, event: Event) -> Marker:
        """Record an event and announce a marker for it."""
        latitude = longitude = math.nan
        date = "N/A"
        magnitude = ""
        if event.geometry:
            first = event.geometry[0]
            if len(first.coordinates) < 2:
                raise ValueError(
                    "Invalid coordinates in geometry data for event: " + event.title
                )
            longitude, latitude = first.coordinates[0], first.coordinates[1]
            date = first.date
            if first.magnitude_value is not None:
                magnitude = f"Magnitude: {first.magnitude_value:g}"
                if first.magnitude_unit is not None:
                    magnitude += " " + first.magnitude_unit

        if not event.categories:
            raise ValueError("Event has no categories: " + event.title)
        event_type = event.categories[0].id

        sources = ", ".join(
            f"{s.id} ({s.url})" if s.url is not None else s.id for s in event.sources
        )
        titles = ", ".join(c.title for c in event.categories)
        location = (
            f"Location: {_format_shortest(latitude)}, {_format_shortest(longitude)}"
        )

        marker = Marker(
            name=event.title,
            latitude=latitude,
            longitude=longitude,
            type=event_type,
            color=TYPE_COLORS.get(event_type, DEFAULT_COLOR),
            date=date,
            description=event.description or "",
            link=event.link,
            magnitude=magnitude,
            sources=sources,
            categories=titles,
            coordinates=location,
        )
        self.current_events.append(event)
        for listener in self.marker_listeners:
            listener(marker)
        return marker

    def generate_categories(self, status: str) -> list[Category]:
        """Download categories and keep those that currently have events.

        The category list and each active category's events are saved in
        the data directory.
        """
        handler = self.file_handler
        self.api.request_categories()
        handler.data = _ordered(self.api.get_data())
        handler.write_to_json("categories.json")

        handler.read_from_json("categories.json")
        active: list[Category] = []
        for category in handler.create_categories():
            self.api.request_category_by_id(category.id, status)
            data = self.api.get_data()
            if isinstance(data, dict) and data.get("events"):
                handler.data = _ordered(data)
                handler.write_to_json(category.id + ".json")
                active.append(category)
        self.categories = active
        return active

    def generate_events(self, button_id: str) -> None:
        """Fetch categories for the status named by a button and show their events."""
        if len(button_id) >= _BUTTON_SUFFIX_LENGTH:
            status = button_id[: len(button_id) - _BUTTON_SUFFIX_LENGTH]
        else:
            status = ""
        self.generate_categories(status)
        self.show_events(self.categories)

    def show_events(self, wanted_cats: Iterable[Category]) -> None:
        """Add a marker for every saved event of the given categories."""
        for category in list(wanted_cats):
            self.file_handler.read_from_json(category.id + ".json")
            for event in self.file_handler.create_events():
                self.add_event(event)

    def clear_events(self) -> None:
        """Forget the shown events and ask the map to remove its markers."""
        self.current_events.clear()
        for listener in self.clear_listeners:
            listener()

    def select_events(self, category_id: str) -> None:
        """Show only the events of the category with the given identifier."""
        self.clear_events()
        self.show_events([c for c in self.categories if c.id == category_id])

    def generate_recent_events(self, days: int) -> list[RecentEvent]:
        """Fetch the events of the last ``days`` days and publish a short list."""
        self.api.request_events_days(days)
        self.file_handler.data = self.api.get_data()
        events = self.file_handler.create_recent_events()

        simplified: list[RecentEvent] = []
        for event in events:
            if not event.title or not event.geometry:
                continue
            coords = event.geometry[0].coordinates
            if len(coords) < 2:
                continue
            self.recent_events.append(event)
            simplified.append(
                RecentEvent(
                    title=event.title,
                    latitude=_round3(coords[1]),
                    longitude=_round3(coords[0]),
                )
            )
        for listener in self.recent_listeners:
            listener(simplified)
        return simplified

    def center_map_on(self, title: str) -> Marker:
        """Show the recent event with the given title."""
        for event in self.recent_events:
            if event.title == title:
                return self.add_event(event)
        raise LookupError("Event with given title not found: " + title)