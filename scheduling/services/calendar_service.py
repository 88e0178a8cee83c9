"""Google Calendar client for the schedule page."""

import logging
from typing import Any, Dict, List

from google.oauth2 import service_account
from googleapiclient.discovery import build
from googleapiclient.errors import HttpError
from httplib2 import HttpLib2Error
from google.auth.exceptions import GoogleAuthError
from pydantic import ValidationError

from scheduling.core.config import CalendarSettings
from scheduling.core.errors import ExternalServiceError
from scheduling.core.zoned_time import format_offset, start_of_today_utc, zone_name_of
from scheduling.models.booking import BookingRequest
from scheduling.models.calendar_event import CalendarEvent, EventKind

logger = logging.getLogger(__name__)

TOKEN_URI = "https://oauth2.googleapis.com/token"
BOOKING_STATUS = "tentative"


class CalendarService:
    """Reads upcoming events from, and writes bookings to, one shared calendar."""

    def __init__(self, settings: CalendarSettings, service: Any = None):
        self.settings = settings
        self.service: Any = service

    def _get_credentials(self) -> service_account.Credentials:
        if not self.settings.client_email or not self.settings.private_key:
            raise ExternalServiceError("calendar", "service account credentials are not configured")

        return service_account.Credentials.from_service_account_info(
            {
                "client_email": self.settings.client_email,
                "private_key": self.settings.private_key,
                "token_uri": TOKEN_URI,
            },
            scopes=list(self.settings.scopes),
        )

    def connect(self) -> None:
        """Initialize the Calendar service."""
        try:
            self.service = build("calendar", "v3", credentials=self._get_credentials(), cache_discovery=False)
            logger.info("Connected to Google Calendar API")
        except (GoogleAuthError, ValueError) as exc:
            logger.exception("Failed to connect to Google Calendar")
            raise ExternalServiceError("calendar", exc) from exc

    def _ensure_connected(self) -> Any:
        if not self.service:
            self.connect()
        return self.service

    def to_calendar_event(self, item: Dict[str, Any]) -> CalendarEvent:
        summary = item.get("summary") or ""
        kind = EventKind.AVAILABILITY if summary == self.settings.free_event_title else EventKind.BUSY
        return CalendarEvent(
            title=summary,
            start=item.get("start") or {},
            end=item.get("end") or {},
            status=item.get("status") or "confirmed",
            kind=kind,
        )

    def list_upcoming_events(self) -> List[CalendarEvent]:
        """List upcoming single-instance events from the start of today, ordered by start time."""
        service = self._ensure_connected()
        time_min = start_of_today_utc(self.settings.local_time_zone, self.settings.reference_time_zone)

        try:
            events_result = (
                service.events()
                .list(
                    calendarId=self.settings.calendar_id,
                    showDeleted=False,
                    singleEvents=True,
                    maxResults=self.settings.max_results,
                    timeMin=time_min,
                    orderBy="startTime",
                )
                .execute()
            )
        except (HttpError, HttpLib2Error, GoogleAuthError, OSError) as exc:
            logger.exception("Failed to list calendar events")
            raise ExternalServiceError("calendar", exc) from exc

        try:
            events = [self.to_calendar_event(item) for item in events_result.get("items", [])]
        except ValidationError as exc:
            logger.exception("Calendar returned an unexpected event payload")
            raise ExternalServiceError("calendar", exc) from exc

        logger.info("Fetched %d upcoming events", len(events))
        return events

    def build_booking_body(self, booking: BookingRequest) -> Dict[str, Any]:
        start = booking.start
        end = booking.end
        time_zone = zone_name_of(start)
        return {
            "summary": booking.event_summary,
            "start": {"dateTime": format_offset(start), "timeZone": time_zone},
            "end": {"dateTime": format_offset(end), "timeZone": time_zone},
            "status": BOOKING_STATUS,
        }

    def insert_booking(self, booking: BookingRequest) -> Dict[str, Any]:
        """Create a tentative event for the booking and notify attendees."""
        service = self._ensure_connected()

        try:
            event = (
                service.events()
                .insert(
                    calendarId=self.settings.calendar_id,
                    sendUpdates="all",
                    body=self.build_booking_body(booking),
                )
                .execute()
            )
        except (HttpError, HttpLib2Error, GoogleAuthError, OSError) as exc:
            logger.exception("Failed to insert booking into calendar")
            raise ExternalServiceError("calendar", exc) from exc

        logger.info("Created tentative event: %s", event.get("htmlLink"))
        return event
