import logging
from collections.abc import Sequence
from datetime import datetime

from scheduling.core.errors import MalformedEventError
from scheduling.core.zoned_time import add_hours, format_zoned, get_zone, parse_absolute_to_local
from scheduling.models.calendar_event import CalendarEvent
from scheduling.models.slot import Slot, WindowSlots

logger = logging.getLogger(__name__)


class SlotComputer:
    """Turns a day's calendar events into bookable one-hour slots.

    Availability windows are events whose ``kind`` is ``availability``. Every
    whole hour from the window start is a candidate, and a candidate is taken
    when a busy event on the same local day starts at exactly that instant.
    """

    def __init__(self, local_time_zone: str):
        get_zone(local_time_zone)
        self.local_time_zone = local_time_zone

    def _local_start(self, event: CalendarEvent) -> datetime:
        return self._parse(event, 'start', event.start.date_time)

    def _local_end(self, event: CalendarEvent) -> datetime:
        return self._parse(event, 'end', event.end.date_time)

    def _parse(self, event: CalendarEvent, field: str, value: str | None) -> datetime:
        try:
            return parse_absolute_to_local(value, self.local_time_zone)
        except (TypeError, ValueError) as exc:
            raise MalformedEventError(event.title, f'{field}.dateTime', value) from exc

    def _busy_starts(self, events: Sequence[CalendarEvent], skip_malformed: bool = False) -> list[datetime]:
        starts: list[datetime] = []
        for event in events:
            if event.is_availability_window:
                continue
            try:
                starts.append(self._local_start(event))
            except MalformedEventError as exc:
                if not skip_malformed:
                    raise
                logger.warning('Ignoring busy event %r: %s', event.title, exc)
        return starts

    def _window_slots(self, window: CalendarEvent, busy_starts: Sequence[datetime]) -> WindowSlots:
        window_start = self._local_start(window)
        window_end = self._local_end(window)
        # Hour-of-day difference; windows crossing midnight yield nothing.
        hour_span = window_end.hour - window_start.hour

        taken = {format_zoned(start) for start in busy_starts if start.date() == window_start.date()}

        times: list[Slot] = []
        for offset in range(max(hour_span, 0)):
            candidate = add_hours(window_start, offset)
            zoned = format_zoned(candidate)
            slot = Slot(start=candidate, time=zoned, reserved=zoned in taken)
            if not slot.reserved:
                times.append(slot)

        return WindowSlots(
            summary=window.title,
            start=window.start.date_time,
            end=window.end.date_time,
            times=times,
        )

    def compute_window_slots(self, window: CalendarEvent, events: Sequence[CalendarEvent]) -> WindowSlots:
        return self._window_slots(window, self._busy_starts(events))

    def compute_available_slots(self, events: Sequence[CalendarEvent]) -> list[WindowSlots]:
        busy_starts = self._busy_starts(events)
        return [
            self._window_slots(window, busy_starts)
            for window in events
            if window.is_availability_window
        ]

    def compute_page_windows(self, events: Sequence[CalendarEvent]) -> list[WindowSlots]:
        """Like :meth:`compute_available_slots`, but tolerant of bad events.

        Busy events without a usable start (all-day entries carry only a date)
        are ignored, and a window that fails to parse drops only itself.
        """
        busy_starts = self._busy_starts(events, skip_malformed=True)
        windows: list[WindowSlots] = []
        for window in events:
            if not window.is_availability_window:
                continue
            try:
                windows.append(self._window_slots(window, busy_starts))
            except MalformedEventError as exc:
                logger.warning('Skipping availability window %r: %s', window.title, exc)
        return windows
