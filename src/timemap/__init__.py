"""timemap — report-step timeline builder with month/year boundary queries."""

__version__ = "0.1.0"

from timemap.config.defaults import default_schedule as default_schedule
from timemap.config.schema import AbsoluteDate as AbsoluteDate
from timemap.config.schema import DatesKeyword as DatesKeyword
from timemap.config.schema import RelativeAdvance as RelativeAdvance
from timemap.config.schema import ScheduleConfig as ScheduleConfig
from timemap.config.schema import TStepKeyword as TStepKeyword
from timemap.core.dates import make_date as make_date
from timemap.core.dates import make_instant as make_instant
from timemap.core.timemap import TimeMap as TimeMap
from timemap.schedule.directives import build_time_map as build_time_map
