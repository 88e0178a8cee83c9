"""Error types raised by the scheduling services."""


class SchedulingError(Exception):
    """Base class for scheduling failures."""


class MalformedEventError(SchedulingError):
    """A calendar event carries a timestamp that is not a valid zoned timestamp."""

    def __init__(self, event_title: str, field: str, value: object):
        self.event_title = event_title
        self.field = field
        self.value = value
        super().__init__(f'Event {event_title!r} has an invalid {field}: {value!r}')


class ExternalServiceError(SchedulingError):
    """An email or calendar call failed.

    ``cause`` is the underlying exception, or a short reason when the call
    was never attempted.
    """

    def __init__(self, service: str, cause: BaseException | str):
        self.service = service
        self.cause = cause
        super().__init__(f'{service}: {cause}')
