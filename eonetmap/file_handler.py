"""Reading, writing and interpreting JSON files in the data directory."""

from __future__ import annotations

import copy
import json
from pathlib import Path
from typing import Any

from eonetmap.category import Category
from eonetmap.event import Event

_EVENTS_FORMAT_ERROR = "Error: invalid JSON file format for creating Events"


class FileHandlerError(RuntimeError):
    """Raised when data files cannot be read, written or interpreted."""


def _values(data: Any) -> list[Any]:
    """Return the members of a JSON value in iteration order."""
    if data is None:
        return []
    if isinstance(data, dict):
        return list(data.values())
    if isinstance(data, list):
        return list(data)
    return [data]


class FileHandler:
    """Keeps a JSON document and moves it between memory and the data directory.

    The data directory is ``data`` inside the parent of the working directory.
    """

    def __init__(self, data: Any = None) -> None:
        self.data = data

    def parent_path(self) -> Path:
        """Return the parent of the current working directory."""
        return Path.cwd().parent

    def data_path(self) -> Path:
        """Return the path of the data directory."""
        return self.parent_path() / "data"

    def create_folder(self) -> Path:
        """Create the data directory if needed and return its path."""
        target = self.data_path()
        target.mkdir(exist_ok=True)
        return target

    def categories_exist(self) -> bool:
        """Tell whether ``categories.json`` is present in the data directory."""
        return (self.data_path() / "categories.json").exists()

    def read_from_json(self, filename: str) -> Any:
        """Load a JSON file from the data directory into :attr:`data` and return it."""
        directory = self.data_path()
        if not directory.exists():
            raise FileHandlerError("Error: data directory does not exist")
        try:
            text = (directory / filename).read_text(encoding="utf-8")
        except OSError as exc:
            raise FileHandlerError("Error: cannot open file") from exc
        try:
            loaded = json.loads(text)
        except ValueError as exc:
            raise FileHandlerError(f"JSON parsing error: {exc}") from exc
        self.data = loaded
        return loaded

    def write_to_json(self, filename: str) -> Path:
        """Write the members of :attr:`data` as a JSON array into the data directory.

        Returns the path of the written file.
        """
        try:
            filepath = self.create_folder() / filename
            filepath.parent.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise FileHandlerError(f"Cannot save file: {filename}: {exc}") from exc

        text = json.dumps(_values(self.data), indent=4, ensure_ascii=False)
        try:
            filepath.write_text(text, encoding="utf-8")
        except OSError as exc:
            raise FileHandlerError(f"Cannot save file: {filepath}") from exc
        return filepath

    def clear_data_dir(self) -> None:
        """Delete every regular file in the data directory."""
        directory = self.data_path()
        if not directory.is_dir():
            raise FileHandlerError(
                f"Folder does not exist or is not a directory: {directory}"
            )
        for entry in directory.iterdir():
            if entry.is_file():
                try:
                    entry.unlink()
                except OSError as exc:
                    raise FileHandlerError(
                        f"Error deleting file {entry}: {exc}"
                    ) from exc

    def create_events(self) -> list[Event]:
        """Build events from a stored array whose second member lists them."""
        data = self.data
        if isinstance(data, list) and len(data) > 1 and isinstance(data[1], list):
            return [Event.from_json(item) for item in data[1]]
        raise FileHandlerError(_EVENTS_FORMAT_ERROR)

    def create_recent_events(self) -> list[Event]:
        """Build events from a stored object's ``events`` array.

        For an event with geometry, the first geometry entry takes the date
        of the last one.
        """
        data = self.data
        if not (isinstance(data, dict) and isinstance(data.get("events"), list)):
            raise FileHandlerError(_EVENTS_FORMAT_ERROR)

        recent: list[Event] = []
        for item in data["events"]:
            event = Event.from_json(item)
            if event.geometry:
                modified = copy.deepcopy(item)
                modified["geometry"][0]["date"] = event.geometry[-1].date
                event = Event.from_json(modified)
            recent.append(event)
        return recent

    def create_categories(self) -> list[Category]:
        """Build categories from the first member of the stored array."""
        data = self.data
        if not (isinstance(data, list) and data):
            raise FileHandlerError(
                "Error: invalid JSON file format for creating Categories"
            )
        return [Category.from_json(item) for item in _values(data[0])]