"""Helpers for zoned timestamps.

Slots travel between the page and the form as zoned strings, an ISO-8601
timestamp with its UTC offset followed by the IANA zone name in brackets::

    2024-01-05T09:00:00-07:00[America/Denver]

Two instants are considered the same slot only when these strings match.
"""

import re
from datetime import datetime, time, timedelta

import pytz

ZONED_PATTERN = re.compile(r'^(?P<instant>[^\[\]]+)\[(?P<zone>[^\[\]]+)\]$')


def get_zone(zone_name: str):
    try:
        return pytz.timezone(zone_name)
    except pytz.UnknownTimeZoneError as exc:
        raise ValueError(f'Unknown time zone: {zone_name!r}') from exc


def _parse_offset_iso(value: str) -> datetime:
    normalized = value.strip()
    if normalized.endswith('Z'):
        normalized = normalized[:-1] + '+00:00'
    parsed = datetime.fromisoformat(normalized)
    if parsed.tzinfo is None:
        raise ValueError(f'Timestamp has no UTC offset: {value!r}')
    return parsed


def parse_absolute_to_local(value: str, zone_name: str) -> datetime:
    """Parse an offset timestamp and express it in ``zone_name``."""
    if not isinstance(value, str) or not value:
        raise ValueError(f'Not a timestamp: {value!r}')
    return _parse_offset_iso(value).astimezone(get_zone(zone_name))


def parse_zoned(value: str) -> datetime:
    """Parse a zoned string produced by :func:`format_zoned`."""
    match = ZONED_PATTERN.match(value.strip()) if isinstance(value, str) else None
    if match is None:
        raise ValueError(f'Not a zoned timestamp: {value!r}')
    return _parse_offset_iso(match.group('instant')).astimezone(get_zone(match.group('zone')))


def format_zoned(moment: datetime) -> str:
    return f'{format_offset(moment)}[{zone_name_of(moment)}]'


def format_offset(moment: datetime) -> str:
    return moment.isoformat(timespec='seconds')


def zone_name_of(moment: datetime) -> str:
    zone = getattr(moment.tzinfo, 'zone', None)
    if zone is None:
        raise ValueError(f'Timestamp is not bound to a named time zone: {moment!r}')
    return zone


def add_hours(moment: datetime, hours: int) -> datetime:
    # pytz offsets are fixed per datetime; normalize picks the right one across DST.
    return moment.tzinfo.normalize(moment + timedelta(hours=hours))


def start_of_today_utc(local_zone_name: str, reference_zone_name: str, now: datetime | None = None) -> str:
    """Midnight of today's local date, taken in the reference zone, as a UTC ISO string."""
    local_now = now.astimezone(get_zone(local_zone_name)) if now else datetime.now(get_zone(local_zone_name))
    reference_midnight = get_zone(reference_zone_name).localize(datetime.combine(local_now.date(), time.min))
    return reference_midnight.astimezone(pytz.utc).strftime('%Y-%m-%dT%H:%M:%S.000Z')


def format_hour_12(moment: datetime) -> str:
    suffix = 'AM' if moment.hour < 12 else 'PM'
    return f'{moment.hour % 12 or 12} {suffix}'
