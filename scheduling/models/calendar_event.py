"""Calendar event model definitions."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class EventStatus(str, Enum):
    CONFIRMED = 'confirmed'
    TENTATIVE = 'tentative'
    CANCELLED = 'cancelled'


class EventKind(str, Enum):
    """Set by the calendar integration when it reads events."""
    AVAILABILITY = 'availability'
    BUSY = 'busy'


class EventTime(BaseModel):
    """Start or end of an event as delivered by the calendar API."""
    model_config = ConfigDict(populate_by_name=True)

    date_time: str | None = Field(default=None, alias='dateTime')
    time_zone: str | None = Field(default=None, alias='timeZone')


class CalendarEvent(BaseModel):
    """Represents a block of time on the shared calendar."""

    title: str
    start: EventTime
    end: EventTime
    status: EventStatus = EventStatus.CONFIRMED
    kind: EventKind = EventKind.BUSY

    @property
    def is_availability_window(self) -> bool:
        return self.kind is EventKind.AVAILABILITY
