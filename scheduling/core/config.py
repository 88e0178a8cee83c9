import os
from dataclasses import dataclass

from dotenv import load_dotenv


load_dotenv()


def _get_bool(value: str | None, default: bool = False) -> bool:
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _get_list(value: str | None, default: list[str]) -> list[str]:
    if not value:
        return default
    return [item.strip() for item in value.split(",") if item.strip()]

APP_ENV = os.getenv("APP_ENV", "development")
DEBUG = _get_bool(os.getenv("DEBUG"), default=False)

CORS_ALLOW_ORIGINS = _get_list(os.getenv("CORS_ALLOW_ORIGINS"), ["http://localhost:5173"])

CALENDAR_ID = os.getenv("CALENDAR_ID", "")
CALENDAR_CLIENT_EMAIL = os.getenv("CALENDAR_CLIENT_EMAIL", "")
CALENDAR_PRIVATE_KEY = os.getenv("CALENDAR_PRIVATE_KEY", "").replace("\\n", "\n")
CALENDAR_SCOPES = [
    "https://www.googleapis.com/auth/calendar",
    "https://www.googleapis.com/auth/calendar.events",
]
MAX_UPCOMING_EVENTS = int(os.getenv("MAX_UPCOMING_EVENTS", "10"))

LOCAL_TIME_ZONE = os.getenv("LOCAL_TIME_ZONE", "America/Denver")
REFERENCE_TIME_ZONE = os.getenv("REFERENCE_TIME_ZONE", "America/Denver")
FREE_EVENT_TITLE = os.getenv("FREE_EVENT_TITLE", "Free")

EMAIL_API_KEY = os.getenv("EMAIL_API_KEY", "")
EMAIL_DOMAIN = os.getenv("EMAIL_DOMAIN", "")
EMAIL_FROM = os.getenv("EMAIL_FROM", f"mailgun@{EMAIL_DOMAIN}" if EMAIL_DOMAIN else "")
EMAIL_TO = os.getenv("EMAIL_TO", "")
EMAIL_SUBJECT = os.getenv("EMAIL_SUBJECT", "New Meeting Request")
EMAIL_TIMEOUT_SECONDS = float(os.getenv("EMAIL_TIMEOUT_SECONDS", "30"))

BOOKING_CONFIRMATION_PATH = os.getenv("BOOKING_CONFIRMATION_PATH", "/schedule/reserved")
BOOKING_FAILURE_PATH = os.getenv("BOOKING_FAILURE_PATH", "/schedule?error=booking-failed")


@dataclass(frozen=True)
class CalendarSettings:
    calendar_id: str
    client_email: str
    private_key: str
    scopes: tuple[str, ...]
    max_results: int
    reference_time_zone: str
    local_time_zone: str
    free_event_title: str


@dataclass(frozen=True)
class EmailSettings:
    api_key: str
    domain: str
    sender: str
    recipient: str
    subject: str
    timeout_seconds: float


@dataclass(frozen=True)
class PageSettings:
    local_time_zone: str
    confirmation_path: str
    failure_path: str


def load_calendar_settings() -> CalendarSettings:
    return CalendarSettings(
        calendar_id=CALENDAR_ID,
        client_email=CALENDAR_CLIENT_EMAIL,
        private_key=CALENDAR_PRIVATE_KEY,
        scopes=tuple(CALENDAR_SCOPES),
        max_results=MAX_UPCOMING_EVENTS,
        reference_time_zone=REFERENCE_TIME_ZONE,
        local_time_zone=LOCAL_TIME_ZONE,
        free_event_title=FREE_EVENT_TITLE,
    )


def load_email_settings() -> EmailSettings:
    return EmailSettings(
        api_key=EMAIL_API_KEY,
        domain=EMAIL_DOMAIN,
        sender=EMAIL_FROM,
        recipient=EMAIL_TO,
        subject=EMAIL_SUBJECT,
        timeout_seconds=EMAIL_TIMEOUT_SECONDS,
    )


def load_page_settings() -> PageSettings:
    return PageSettings(
        local_time_zone=LOCAL_TIME_ZONE,
        confirmation_path=BOOKING_CONFIRMATION_PATH,
        failure_path=BOOKING_FAILURE_PATH,
    )


def missing_settings(calendar: CalendarSettings, email: EmailSettings) -> list[str]:
    required = {
        "CALENDAR_ID": calendar.calendar_id,
        "CALENDAR_CLIENT_EMAIL": calendar.client_email,
        "CALENDAR_PRIVATE_KEY": calendar.private_key,
        "EMAIL_API_KEY": email.api_key,
        "EMAIL_DOMAIN": email.domain,
        "EMAIL_TO": email.recipient,
    }
    return [name for name, value in required.items() if not value]


def validate_runtime_config() -> None:
    if APP_ENV.lower() != "production":
        return
    missing = missing_settings(load_calendar_settings(), load_email_settings())
    if missing:
        raise RuntimeError(f"Missing required settings in production: {', '.join(missing)}.")
