import logging
from dataclasses import dataclass
from typing import Any, Callable

from scheduling.core.errors import ExternalServiceError
from scheduling.models.booking import BookingRequest
from scheduling.services.calendar_service import CalendarService
from scheduling.services.email_service import EmailService

logger = logging.getLogger(__name__)


@dataclass
class OperationResult:
    name: str
    value: Any = None
    error: ExternalServiceError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


def _attempt(name: str, operation: Callable[[], Any]) -> OperationResult:
    try:
        return OperationResult(name=name, value=operation())
    except ExternalServiceError as exc:
        return OperationResult(name=name, error=exc)


class BookingService:
    """Sends the operator notification and writes the calendar event for a booking.

    Both calls are attempted once each, independently of one another. If
    either fails, the first failure in submission order is raised.
    """

    def __init__(self, calendar: CalendarService, email: EmailService):
        self.calendar = calendar
        self.email = email

    def submit(self, booking: BookingRequest) -> list[OperationResult]:
        results = [
            _attempt('email', lambda: self.email.send_booking_notification(booking)),
            _attempt('calendar', lambda: self.calendar.insert_booking(booking)),
        ]

        failures = [result for result in results if not result.ok]
        for failure in failures:
            logger.error('Booking step %s failed for %s: %s', failure.name, booking.email, failure.error)
        if failures:
            raise failures[0].error

        logger.info('Booked %s for %s', booking.start_time, booking.email)
        return results
