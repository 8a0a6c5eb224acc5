"""Command that lists the natural events of the last few days."""

from __future__ import annotations

import argparse
import sys

from eonetmap.file_handler import FileHandlerError
from eonetmap.map_controller import MapController

DEFAULT_DAYS = 7


def main(argv: list[str] | None = None) -> int:
    """Fetch recent events and print one line per event: title, latitude, longitude."""
    parser = argparse.ArgumentParser(
        prog="eonetmap",
        description="List recent natural events with their positions.",
    )
    parser.add_argument(
        "--days",
        type=int,
        default=DEFAULT_DAYS,
        help=f"how many past days to include (default: {DEFAULT_DAYS})",
    )
    args = parser.parse_args(argv)

    controller = MapController()
    try:
        recent = controller.generate_recent_events(args.days)
    except (FileHandlerError, ValueError, TypeError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    for event in recent:
        print(f"{event.title}\t{event.latitude}\t{event.longitude}")
    return 0


if __name__ == "__main__":
    sys.exit(main())