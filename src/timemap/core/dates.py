"""Proleptic Gregorian calendar helpers over integer-second instants.

An instant is a plain ``int`` counting seconds since 1970-01-01 00:00:00.
There is no time zone: every conversion here is naive and UTC-equivalent.
"""

from __future__ import annotations

import calendar
from datetime import datetime, timedelta

from timemap.utils.exceptions import InvalidCalendarDateError

_EPOCH = datetime(1970, 1, 1)

SECONDS_PER_DAY = 86400

# Days from 0000-03-01 to 1970-01-01 and days per 400-year cycle.
_EPOCH_SHIFT = 719468
_DAYS_PER_ERA = 146097


def _civil_from_days(days: int) -> tuple[int, int, int]:
    """Convert days since the epoch to ``(day, month, year)``.

    Pure integer arithmetic over 400-year eras with years starting in
    March, so there is no limit on the year range.
    """
    z = days + _EPOCH_SHIFT
    era = z // _DAYS_PER_ERA
    doe = z - era * _DAYS_PER_ERA
    yoe = (doe - doe // 1460 + doe // 36524 - doe // 146096) // 365
    doy = doe - (365 * yoe + yoe // 4 - yoe // 100)
    mp = (5 * doy + 2) // 153
    day = doy - (153 * mp + 2) // 5 + 1
    month = mp + 3 if mp < 10 else mp - 9
    year = yoe + era * 400 + (1 if month <= 2 else 0)
    return day, month, year


def to_datetime(instant: int) -> datetime:
    """Return the naive datetime for an instant.

    Raises:
        InvalidCalendarDateError: If the instant falls outside years 1-9999.
    """
    try:
        return _EPOCH + timedelta(seconds=instant)
    except OverflowError as exc:
        raise InvalidCalendarDateError(f"Instant {instant} is outside years 1-9999") from exc


def date_values(instant: int) -> tuple[int, int, int]:
    """Return the ``(day, month, year)`` of an instant."""
    return _civil_from_days(instant // SECONDS_PER_DAY)


def format_date(instant: int) -> str:
    """ISO-8601 date text (``YYYY-MM-DD``) for an instant of any year."""
    day, month, year = date_values(instant)
    return f"{year:04d}-{month:02d}-{day:02d}"


def format_instant(instant: int) -> str:
    """ISO-8601 text (``YYYY-MM-DDTHH:MM:SS``) for an instant of any year."""
    days, secs = divmod(instant, SECONDS_PER_DAY)
    day, month, year = _civil_from_days(days)
    hour, rest = divmod(secs, 3600)
    minute, second = divmod(rest, 60)
    return f"{year:04d}-{month:02d}-{day:02d}T{hour:02d}:{minute:02d}:{second:02d}"


def make_instant(
    year: int,
    month: int,
    day: int,
    hour: int = 0,
    minute: int = 0,
    second: int = 0,
) -> int:
    """Build an instant from calendar fields.

    Day, hour, minute and second are combined arithmetically, so values
    past their natural range roll into the next unit. The resulting date
    is then read back and compared with the input; any roll-over of the
    day, month or year (e.g. January 33 or 24:00:00 on the 31st) is
    rejected.

    Raises:
        InvalidCalendarDateError: If the fields do not name a real date.
    """
    try:
        instant = calendar.timegm((year, month, day, hour, minute, second, 0, 0, 0))
        out_day, out_month, out_year = date_values(instant)
    except (ValueError, OverflowError) as exc:
        raise InvalidCalendarDateError(
            f"Invalid date {year:04d}-{month:02d}-{day:02d}: {exc}"
        ) from exc

    if (out_day, out_month, out_year) != (day, month, year):
        raise InvalidCalendarDateError(
            f"Invalid date {year:04d}-{month:02d}-{day:02d} "
            f"(normalizes to {out_year:04d}-{out_month:02d}-{out_day:02d})"
        )
    return instant


def make_date(year: int, month: int, day: int) -> int:
    """Build the instant at midnight of a calendar date."""
    return make_instant(year, month, day, 0, 0, 0)


def forward(instant: int, hours: int = 0, minutes: int = 0, seconds: int = 0) -> int:
    """Shift an instant forward by a whole number of hours, minutes and seconds."""
    return instant + seconds + minutes * 60 + hours * 3600
