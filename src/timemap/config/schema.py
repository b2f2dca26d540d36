"""Pydantic v2 models for schedule directives."""

from __future__ import annotations

from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field, FiniteFloat


class AbsoluteDate(BaseModel):
    """One DATES record: jump to an absolute calendar instant.

    ``month`` is either a month token such as ``"JAN"`` or ``"OKT"`` or a
    month number. ``time`` is optional ``"HH:MM:SS"`` text; anything that
    does not have three fields is read as midnight.
    """

    model_config = ConfigDict(extra="forbid")

    day: int
    month: str | int
    year: int
    time: str | None = Field(default=None, description="Time of day as HH:MM:SS")


class RelativeAdvance(BaseModel):
    """One TSTEP value: advance the timeline by a number of days."""

    model_config = ConfigDict(extra="forbid")

    days: FiniteFloat = Field(description="Step length in days, may be fractional")


class DatesKeyword(BaseModel):
    """A DATES keyword holding one or more absolute-date records."""

    model_config = ConfigDict(extra="forbid")

    name: Literal["DATES"] = "DATES"
    records: list[AbsoluteDate] = Field(min_length=1)


class TStepKeyword(BaseModel):
    """A TSTEP keyword holding one or more step lengths in days."""

    model_config = ConfigDict(extra="forbid")

    name: Literal["TSTEP"] = "TSTEP"
    days: list[FiniteFloat] = Field(min_length=1)

    @property
    def advances(self) -> list[RelativeAdvance]:
        return [RelativeAdvance(days=d) for d in self.days]


TimeKeyword = Annotated[DatesKeyword | TStepKeyword, Field(discriminator="name")]


class ScheduleConfig(BaseModel):
    """Start date plus the time keywords of a schedule, in document order."""

    model_config = ConfigDict(extra="forbid")

    start: AbsoluteDate | None = Field(
        default=None, description="Start date; defaults to 1 JAN 1983 when omitted"
    )
    keywords: list[TimeKeyword] = Field(default_factory=list)
