"""Booking request model definitions."""

from datetime import datetime

from pydantic import BaseModel, field_validator

from scheduling.core.zoned_time import add_hours, parse_zoned

BOOKING_DURATION_HOURS = 1
MAX_FIELD_LENGTH = 200


class BookingRequest(BaseModel):
    """A visitor's request for one slot, as submitted by the schedule form."""

    date: str
    start_time: str
    name: str
    email: str
    service: str

    @field_validator('date', 'name', 'service')
    @classmethod
    def validate_required_text(cls, value: str) -> str:
        normalized = value.strip()
        if not normalized:
            raise ValueError('This field is required.')
        if len(normalized) > MAX_FIELD_LENGTH:
            raise ValueError(f'Must be {MAX_FIELD_LENGTH} characters or fewer.')
        return normalized

    @field_validator('email')
    @classmethod
    def validate_email(cls, value: str) -> str:
        normalized = value.strip().lower()
        if not normalized:
            raise ValueError('Email is required.')
        if '@' not in normalized:
            raise ValueError('Email address is invalid.')
        return normalized

    @field_validator('start_time')
    @classmethod
    def validate_start_time(cls, value: str) -> str:
        normalized = value.strip()
        parse_zoned(normalized)
        return normalized

    @property
    def start(self) -> datetime:
        return parse_zoned(self.start_time)

    @property
    def end(self) -> datetime:
        return add_hours(self.start, BOOKING_DURATION_HOURS)

    @property
    def event_summary(self) -> str:
        return f'{self.name} - {self.service}'
