# eonetmap

Fetch natural events (wildfires, volcanoes, severe storms and more) from the
EONET events API, keep them as JSON files on disk, and turn them into map
marker records with coordinates, colours and descriptive metadata.

## Installation

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Command line

```
eonetmap
eonetmap --days 3
```

This downloads the events of the last seven days (or of `--days` days) and
prints one line per event: its title, latitude and longitude, separated by
tabs, with the position rounded to three decimals. Events without a title
or without a position are left out. If the data cannot be interpreted, an
error is printed to standard error and the exit status is 1.

## Library use

```python
from eonetmap.api import Api
from eonetmap.file_handler import FileHandler

api = Api()
api.request_events_days(7)
data = api.get_data()           # empty dict on request, HTTP or parse failure

handler = FileHandler(data)
for event in handler.create_recent_events():
    print(event.title, event.position())
```

### Modules

- `eonetmap.models` – the small records `ApiRequest`, `CategoryRef`,
  `Source` and `Geometry`. `Geometry.from_json` accepts a point, a list of
  points or a polygon (its first ring is used); `coordinates` then holds the
  first point and `coordinates_list` the whole list.
- `eonetmap.category` – `Category` with `from_json`, `to_json`, `describe`
  (a readable multi-line summary) and `show` (writes that summary to
  standard output).
- `eonetmap.event` – `Event` with `from_json`, `to_json`, `print_json`,
  `position` and `set_position`. A malformed geometry raises
  `GeometryError`.
- `eonetmap.api` – `Api` prepares requests (`request_events`,
  `request_events_days`, `request_categories`, `request_category_by_id`,
  `request_sources`, `request_magnitudes`, `request_single_event`,
  `set_category`, `set_limit`, `set_api_key`), shows the prepared request
  through `current_request`, and sends it with `get_data`. Failures are
  logged and yield an empty dict.
- `eonetmap.file_handler` – `FileHandler` keeps a JSON document in `data`
  and reads and writes files in the `data` directory inside the parent of
  the working directory (`read_from_json`, `write_to_json`,
  `clear_data_dir`, `categories_exist`). `write_to_json` writes the members
  of the document as a JSON array. `create_events`, `create_recent_events`
  and `create_categories` interpret the document; problems raise
  `FileHandlerError`.
- `eonetmap.map_controller` – `MapController` ties the pieces together:
  - `generate_recent_events(days)` returns a list of `RecentEvent` entries
    and passes it to every callable in `recent_listeners`;
  - `generate_categories(status)` saves the category list and each category
    that has events as JSON in the data directory;
  - `generate_events(button_id)` does the same for the status at the start
    of the button identifier and adds a marker for every saved event;
  - `select_events(category_id)` clears and shows one category again;
  - `add_event(event)` builds a `Marker` (colour chosen by the first
    category) and passes it to every callable in `marker_listeners`;
  - `clear_events()` calls every callable in `clear_listeners`;
  - `center_map_on(title)` adds the recent event with that title, or raises
    `LookupError`.

```python
from eonetmap.map_controller import MapController

controller = MapController()
controller.marker_listeners.append(lambda marker: print(marker.name, marker.color))
for entry in controller.generate_recent_events(7):
    print(entry.title, entry.latitude, entry.longitude)
```

## What it does not do

The package draws no map and has no graphical interface. `MapController`
produces `Marker` and `RecentEvent` records and hands them to listeners; a
map view that displays them has to be supplied by the caller.