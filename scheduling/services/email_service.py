"""Booking notifications sent through the Mailgun HTTP API."""

import logging

import requests

from scheduling.core.config import EmailSettings
from scheduling.core.errors import ExternalServiceError
from scheduling.core.zoned_time import format_hour_12
from scheduling.models.booking import BookingRequest

logger = logging.getLogger(__name__)

MAILGUN_API_BASE = "https://api.mailgun.net/v3"


def build_notification_text(booking: BookingRequest) -> str:
    return (
        f"Date: {booking.date}\n"
        f"Time: {format_hour_12(booking.start)}\n"
        f"Name: {booking.name}\n"
        f"Email: {booking.email}\n"
        f"Service: {booking.service}"
    )


class EmailService:
    def __init__(self, settings: EmailSettings):
        self.settings = settings

    @property
    def messages_url(self) -> str:
        return f"{MAILGUN_API_BASE}/{self.settings.domain}/messages"

    def send_booking_notification(self, booking: BookingRequest) -> None:
        """Email the operator about a new booking request."""
        if not self.settings.api_key or not self.settings.domain or not self.settings.recipient:
            raise ExternalServiceError("email", "Mailgun credentials are not configured")

        try:
            response = requests.post(
                self.messages_url,
                auth=("api", self.settings.api_key),
                data={
                    "from": self.settings.sender,
                    "to": self.settings.recipient,
                    "subject": self.settings.subject,
                    "text": build_notification_text(booking),
                },
                timeout=self.settings.timeout_seconds,
            )
            response.raise_for_status()
        except requests.RequestException as exc:
            logger.exception("Failed to send booking notification")
            raise ExternalServiceError("email", exc) from exc

        logger.info("Sent booking notification to %s", self.settings.recipient)
