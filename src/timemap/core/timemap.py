"""Append-only timeline of report-step instants."""

from __future__ import annotations

import logging
from typing import Any

import numpy as np
from numpy.typing import NDArray

from timemap.core.boundaries import BoundaryIndex, Granularity
from timemap.core.dates import SECONDS_PER_DAY, date_values, forward
from timemap.utils.exceptions import IndexOutOfRangeError, NonMonotonicTimeError

logger = logging.getLogger(__name__)


class TimeMap:
    """Strictly increasing sequence of instants with month/year boundary tracking.

    ``T[0]`` is the start instant; step ``i`` (``1 <= i <= num_steps()``)
    spans ``[T[i-1], T[i]]``. Each append compares the calendar month and
    year of the new instant against the previous one and records the new
    step in the matching boundary index.

    Args:
        start: Start instant in seconds since the epoch.
    """

    def __init__(self, start: int) -> None:
        self._times: list[int] = [int(start)]
        self._months = BoundaryIndex("month")
        self._years = BoundaryIndex("year")

    def __len__(self) -> int:
        return len(self._times)

    def __getitem__(self, index: int) -> int:
        return self.instant_at(index)

    def __repr__(self) -> str:
        return (
            f"TimeMap(start={self._times[0]}, num_steps={self.num_steps()}, "
            f"end={self._times[-1]})"
        )

    # --- Mutation ---

    def append(self, instant: int) -> None:
        """Append an instant to the end of the timeline.

        Raises:
            NonMonotonicTimeError: If ``instant`` is not later than the last one.
        """
        instant = int(instant)
        last = self._times[-1]
        if instant <= last:
            raise NonMonotonicTimeError(
                f"Times added must be in strictly increasing order: {instant} <= {last}"
            )

        step = len(self._times)
        _, new_month, new_year = date_values(instant)
        _, last_month, last_year = date_values(last)
        if new_month != last_month:
            self._months.append(step)
            logger.debug("Step %d starts month %d", step, new_month)
        if new_year != last_year:
            self._years.append(step)
            logger.debug("Step %d starts year %d", step, new_year)

        self._times.append(instant)

    def add_step(self, seconds: int) -> None:
        """Append the instant ``seconds`` after the current end of the timeline."""
        self.append(forward(self._times[-1], seconds=seconds))

    # --- Queries ---

    def length(self) -> int:
        return len(self._times)

    def num_steps(self) -> int:
        return len(self._times) - 1

    def last(self) -> int:
        """Index of the final step."""
        return self.num_steps()

    def instant_at(self, index: int) -> int:
        """Return ``T[index]``.

        Raises:
            IndexOutOfRangeError: If ``index`` is negative or ``>= length()``.
        """
        if 0 <= index < len(self._times):
            return self._times[index]
        raise IndexOutOfRangeError(
            f"Index {index} out of range for timeline of length {len(self._times)}"
        )

    def start_time(self, index: int) -> int:
        """Instant at which step ``index + 1`` starts."""
        return self.instant_at(index)

    def end_time(self) -> int:
        return self._times[-1]

    def elapsed_since_start(self, index: int) -> float:
        """Seconds between the start instant and ``T[index]``."""
        return float(self.instant_at(index) - self._times[0])

    def step_duration(self, index: int) -> float:
        """Length in seconds of the step from ``T[index]`` to ``T[index + 1]``.

        Raises:
            IndexOutOfRangeError: If ``index >= num_steps()``.
        """
        if not 0 <= index < self.num_steps():
            raise IndexOutOfRangeError(
                f"Step {index} out of range for timeline with {self.num_steps()} steps"
            )
        return float(self._times[index + 1] - self._times[index])

    def total_duration(self) -> float:
        if len(self._times) < 2:
            return 0.0
        return float(self._times[-1] - self._times[0])

    def instants(self) -> NDArray[np.int64]:
        """All instants as an int64 array."""
        return np.asarray(self._times, dtype=np.int64)

    def elapsed_days(self) -> NDArray[np.floating[Any]]:
        """Days elapsed since the start instant, one entry per instant."""
        times = self.instants()
        return (times - times[0]) / SECONDS_PER_DAY

    # --- Boundaries ---

    @property
    def first_timestep_months(self) -> tuple[int, ...]:
        """Read-only view of the month boundary steps."""
        return tuple(self._months.steps)

    @property
    def first_timestep_years(self) -> tuple[int, ...]:
        """Read-only view of the year boundary steps."""
        return tuple(self._years.steps)

    def _boundary_index(self, granularity: Granularity) -> BoundaryIndex:
        if granularity == "month":
            return self._months
        if granularity == "year":
            return self._years
        raise ValueError(f"Unknown granularity: {granularity!r}")

    def is_periodic_boundary(
        self,
        step: int,
        granularity: Granularity,
        anchor_step: int,
        frequency: int,
    ) -> bool:
        """Check whether ``step`` is a periodic month/year boundary from ``anchor_step``.

        Counting starts at the first boundary at or after ``anchor_step``
        (that boundary is number 1) and every ``frequency``-th boundary is
        flagged. See :meth:`BoundaryIndex.is_periodic`.
        """
        return self._boundary_index(granularity).is_periodic(step, anchor_step, frequency)

    def periodic_boundaries(
        self,
        granularity: Granularity,
        anchor_step: int = 0,
        frequency: int = 1,
    ) -> list[int]:
        """Every step flagged by :meth:`is_periodic_boundary`."""
        return self._boundary_index(granularity).periodic_steps(anchor_step, frequency)
