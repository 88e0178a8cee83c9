import logging

from fastapi import APIRouter, Depends, Form, HTTPException, Query, status
from fastapi.responses import RedirectResponse
from pydantic import BaseModel, ValidationError

from scheduling.core import config
from scheduling.core.errors import ExternalServiceError
from scheduling.models.booking import BookingRequest
from scheduling.services.booking_service import BookingService
from scheduling.services.calendar_service import CalendarService
from scheduling.services.email_service import EmailService
from scheduling.services.slot_computer import SlotComputer

router = APIRouter(tags=['schedule'])

logger = logging.getLogger(__name__)


class SlotTimeResponse(BaseModel):
    time: str
    reserved: bool


class AvailabilityWindowResponse(BaseModel):
    summary: str
    start: str | None
    end: str | None
    times: list[SlotTimeResponse]


class SchedulePageResponse(BaseModel):
    events: list[AvailabilityWindowResponse]
    error: str | None = None


class ReservedResponse(BaseModel):
    status: str
    message: str


def get_page_settings() -> config.PageSettings:
    return config.load_page_settings()


def get_calendar_service() -> CalendarService:
    return CalendarService(config.load_calendar_settings())


def get_email_service() -> EmailService:
    return EmailService(config.load_email_settings())


def get_slot_computer(page_settings: config.PageSettings = Depends(get_page_settings)) -> SlotComputer:
    return SlotComputer(page_settings.local_time_zone)


def get_booking_service(
    calendar: CalendarService = Depends(get_calendar_service),
    email: EmailService = Depends(get_email_service),
) -> BookingService:
    return BookingService(calendar=calendar, email=email)


@router.get('', response_model=SchedulePageResponse)
def load_schedule(
    error: str | None = Query(default=None),
    calendar: CalendarService = Depends(get_calendar_service),
    slot_computer: SlotComputer = Depends(get_slot_computer),
):
    try:
        events = calendar.list_upcoming_events()
    except ExternalServiceError as exc:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail='Calendar unavailable. Please try again later.',
        ) from exc

    windows = slot_computer.compute_page_windows(events)

    return SchedulePageResponse(
        events=[
            AvailabilityWindowResponse(
                summary=window.summary,
                start=window.start,
                end=window.end,
                times=[SlotTimeResponse(time=slot.time, reserved=slot.reserved) for slot in window.times],
            )
            for window in windows
        ],
        error=error,
    )


@router.post('')
def submit_booking(
    date: str = Form(...),
    start_time: str = Form(..., alias='startTime'),
    name: str = Form(...),
    email: str = Form(...),
    service: str = Form(...),
    booking_service: BookingService = Depends(get_booking_service),
    page_settings: config.PageSettings = Depends(get_page_settings),
):
    try:
        booking = BookingRequest(date=date, start_time=start_time, name=name, email=email, service=service)
    except ValidationError as exc:
        raise HTTPException(
            status_code=422,
            detail=exc.errors(include_url=False, include_context=False),
        ) from exc

    try:
        booking_service.submit(booking)
    except ExternalServiceError:
        logger.exception('Booking failed for %s at %s', booking.email, booking.start_time)
        return RedirectResponse(url=page_settings.failure_path, status_code=status.HTTP_303_SEE_OTHER)

    return RedirectResponse(url=page_settings.confirmation_path, status_code=status.HTTP_303_SEE_OTHER)


@router.get('/reserved', response_model=ReservedResponse)
def booking_reserved():
    return ReservedResponse(
        status='reserved',
        message='Your request has been received. A confirmation will follow by email.',
    )
