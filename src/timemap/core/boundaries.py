"""Month/year boundary indexes and the periodic membership predicate."""

from __future__ import annotations

import bisect
from dataclasses import dataclass, field
from typing import Literal

Granularity = Literal["month", "year"]


@dataclass(slots=True)
class BoundaryIndex:
    """Ascending step indices that start a new calendar month or year.

    Entries are only ever appended, and each appended step must be greater
    than the last one, so the sequence stays sorted and binary search can
    be used for every lookup.

    Attributes:
        granularity: ``"month"`` or ``"year"``.
        steps: Step indices, strictly ascending, all ``>= 1``.
    """

    granularity: Granularity
    steps: list[int] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.steps)

    def __contains__(self, step: object) -> bool:
        return isinstance(step, int) and self.position(step) is not None

    def append(self, step: int) -> None:
        """Record ``step`` as the first step of a new period."""
        if step < 1:
            raise ValueError(f"Boundary step must be >= 1, got {step}")
        if self.steps and step <= self.steps[-1]:
            raise ValueError(
                f"Boundary steps must be strictly increasing: {step} after {self.steps[-1]}"
            )
        self.steps.append(step)

    def position(self, step: int) -> int | None:
        """Return the 0-based position of ``step`` in the index, or None."""
        pos = bisect.bisect_left(self.steps, step)
        if pos < len(self.steps) and self.steps[pos] == step:
            return pos
        return None

    def resolve_anchor(self, anchor_step: int) -> int | None:
        """Return the position of the first boundary at or after ``anchor_step``.

        An anchor that is itself a boundary resolves to its own position.
        Returns None when the anchor lies past the last boundary.
        """
        pos = bisect.bisect_left(self.steps, anchor_step)
        if pos < len(self.steps):
            return pos
        return None

    def is_periodic(self, step: int, anchor_step: int, frequency: int) -> bool:
        """Check whether ``step`` is every ``frequency``-th boundary from the anchor.

        Boundaries are counted by their position in the index, with the
        resolved anchor boundary counted as 1. A step that is not a
        boundary is never flagged; with ``frequency <= 1`` every boundary
        is flagged regardless of the anchor.
        """
        q_pos = self.position(step)
        if q_pos is None:
            return False
        if frequency <= 1:
            return True

        anchor_pos = self.resolve_anchor(anchor_step)
        if anchor_pos is None or q_pos < anchor_pos:
            return False
        return (q_pos - anchor_pos + 1) % frequency == 0

    def periodic_steps(self, anchor_step: int, frequency: int) -> list[int]:
        """All boundary steps flagged by :meth:`is_periodic`."""
        return [s for s in self.steps if self.is_periodic(s, anchor_step, frequency)]
