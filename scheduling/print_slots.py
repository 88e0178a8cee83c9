"""Print the currently bookable slots to stdout.

Usage:
    python -m scheduling.print_slots
"""
import sys

from scheduling.core import config
from scheduling.core.errors import ExternalServiceError
from scheduling.services.calendar_service import CalendarService
from scheduling.services.slot_computer import SlotComputer


def main() -> None:
    calendar = CalendarService(config.load_calendar_settings())
    try:
        events = calendar.list_upcoming_events()
    except ExternalServiceError as exc:
        print("Could not read the calendar:", exc, file=sys.stderr)
        sys.exit(1)

    windows = SlotComputer(config.LOCAL_TIME_ZONE).compute_page_windows(events)
    if not windows:
        print("No availability windows found.")
        return

    for window in windows:
        print(f"{window.summary}: {window.start} -> {window.end}")
        for slot in window.times:
            print(f"  {slot.time}")


if __name__ == "__main__":
    main()
