"""Apply DATES and TSTEP directives to a TimeMap."""

from __future__ import annotations

import logging
import math
import re

from timemap.config.defaults import MONTH_INDICES, default_start
from timemap.config.schema import (
    AbsoluteDate,
    DatesKeyword,
    RelativeAdvance,
    ScheduleConfig,
    TStepKeyword,
)
from timemap.core.dates import SECONDS_PER_DAY, make_instant
from timemap.core.timemap import TimeMap
from timemap.utils.exceptions import (
    InvalidStepLengthError,
    UnknownMonthNameError,
    WrongDirectiveKindError,
)

logger = logging.getLogger(__name__)

# Three signed integers separated by colons; trailing text is ignored.
_TIME_RE = re.compile(r"\s*([+-]?\d+):\s*([+-]?\d+):\s*([+-]?\d+)")


def parse_time_of_day(text: str | None) -> tuple[int, int, int]:
    """Parse ``"HH:MM:SS"`` into ``(hour, minute, second)``.

    Missing or malformed text (anything without three numeric fields)
    gives midnight instead of an error.
    """
    if text is None:
        return 0, 0, 0
    match = _TIME_RE.match(text)
    if match is None:
        logger.debug("Malformed time %r, using 00:00:00", text)
        return 0, 0, 0
    hour, minute, second = (int(g) for g in match.groups())
    return hour, minute, second


def month_index(month: str | int) -> int:
    """Resolve a month token (e.g. ``"JAN"``, ``"OKT"``) or number to 1-12.

    Raises:
        UnknownMonthNameError: If the token is not in the month table.
    """
    if isinstance(month, int):
        return month
    try:
        return MONTH_INDICES[month]
    except KeyError:
        raise UnknownMonthNameError(f"Unknown month name: {month!r}") from None


def instant_from_date(record: AbsoluteDate) -> int:
    """Convert a DATES/START record into an instant."""
    hour, minute, second = parse_time_of_day(record.time)
    return make_instant(
        record.year,
        month_index(record.month),
        record.day,
        hour,
        minute,
        second,
    )


def advance_seconds(advance: RelativeAdvance) -> int:
    """Whole seconds in a TSTEP value, truncated toward zero.

    Raises:
        InvalidStepLengthError: If the length in seconds is infinite or NaN.
    """
    seconds = advance.days * SECONDS_PER_DAY
    if not math.isfinite(seconds):
        raise InvalidStepLengthError(f"TSTEP length must be finite, got {advance.days}")
    return int(seconds)


def apply_absolute_date(time_map: TimeMap, record: AbsoluteDate) -> None:
    instant = instant_from_date(record)
    time_map.append(instant)
    logger.debug(
        "DATES %s %s %s -> step %d", record.day, record.month, record.year, time_map.last()
    )


def apply_relative_advance(time_map: TimeMap, advance: RelativeAdvance) -> None:
    time_map.add_step(advance_seconds(advance))
    logger.debug("TSTEP %s days -> step %d", advance.days, time_map.last())


def add_from_dates_keyword(time_map: TimeMap, keyword: DatesKeyword) -> None:
    """Append one instant per DATES record, in record order.

    Raises:
        WrongDirectiveKindError: If ``keyword`` is not a DATES keyword.
    """
    if keyword.name != "DATES":
        raise WrongDirectiveKindError(f"Method requires DATES keyword input, got {keyword.name}")
    for record in keyword.records:
        apply_absolute_date(time_map, record)


def add_from_tstep_keyword(time_map: TimeMap, keyword: TStepKeyword) -> None:
    """Append one instant per TSTEP value, in value order.

    Raises:
        WrongDirectiveKindError: If ``keyword`` is not a TSTEP keyword.
    """
    if keyword.name != "TSTEP":
        raise WrongDirectiveKindError(f"Method requires TSTEP keyword input, got {keyword.name}")
    for advance in keyword.advances:
        apply_relative_advance(time_map, advance)


def build_time_map(schedule: ScheduleConfig) -> TimeMap:
    """Build a TimeMap from a schedule.

    The timeline starts at ``schedule.start`` (1 JAN 1983 when absent) and
    the keywords are applied in document order.

    Args:
        schedule: Parsed schedule document.

    Returns:
        The fully built TimeMap.
    """
    start = schedule.start if schedule.start is not None else default_start()
    time_map = TimeMap(instant_from_date(start))

    for keyword in schedule.keywords:
        if isinstance(keyword, DatesKeyword):
            add_from_dates_keyword(time_map, keyword)
        else:
            add_from_tstep_keyword(time_map, keyword)

    logger.info(
        "Built timeline: %d steps, %d month and %d year boundaries",
        time_map.num_steps(),
        len(time_map.first_timestep_months),
        len(time_map.first_timestep_years),
    )
    return time_map
