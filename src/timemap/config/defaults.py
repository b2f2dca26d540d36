"""Default configuration values for timemap."""

from __future__ import annotations

from types import MappingProxyType

from timemap.config.schema import AbsoluteDate, ScheduleConfig

# Month tokens are matched case-sensitively. Regional spellings (MAI, OKT,
# DES) and the JLY abbreviation map to the same months as the English ones.
MONTH_INDICES: MappingProxyType[str, int] = MappingProxyType(
    {
        "JAN": 1,
        "FEB": 2,
        "MAR": 3,
        "APR": 4,
        "MAI": 5,
        "MAY": 5,
        "JUN": 6,
        "JUL": 7,
        "JLY": 7,
        "AUG": 8,
        "SEP": 9,
        "OCT": 10,
        "OKT": 10,
        "NOV": 11,
        "DEC": 12,
        "DES": 12,
    }
)

# Start date assumed when a schedule does not give one.
DEFAULT_START_YEAR = 1983
DEFAULT_START_MONTH = "JAN"
DEFAULT_START_DAY = 1


def default_start() -> AbsoluteDate:
    """Start date used when a schedule omits ``start``: 1 JAN 1983."""
    return AbsoluteDate(day=DEFAULT_START_DAY, month=DEFAULT_START_MONTH, year=DEFAULT_START_YEAR)


def default_schedule() -> ScheduleConfig:
    """An empty schedule starting at the default start date."""
    return ScheduleConfig(start=default_start(), keywords=[])
