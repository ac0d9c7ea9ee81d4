import logging
from datetime import date
from typing import Any, List, Mapping, Sequence, Union

import numpy as np

from caltools.calendar import CalendarError, DatePeriod
from caltools.calendar.instants import format_dmy, parse_dmy

logger = logging.getLogger(__name__)

DayLike = Union[str, date, "np.datetime64"]


def _to_day(value: DayLike) -> np.datetime64:
    if isinstance(value, np.datetime64):
        return value.astype("datetime64[D]")
    return np.datetime64(parse_dmy(value), "D")


class WorkCycle:
    """
    Repeating shift pattern: ``work_days`` on, then ``off_days`` off.

    The cycle is anchored at the first day passed to ``working_days``;
    day *i* after the anchor works when ``i % cycle_length < work_days``.
    """

    def __init__(self, work_days: int, off_days: int) -> None:
        if work_days < 1:
            raise CalendarError(f"A cycle needs at least one work day; got {work_days}.")
        if off_days < 0:
            raise CalendarError(f"Off days must be non-negative; got {off_days}.")

        self._work_days: int = int(work_days)
        self._off_days: int = int(off_days)
        self._n: int = self._work_days + self._off_days
        self._np_pattern: np.ndarray = np.arange(self._n) < self._work_days

    # ── masks ────────────────────────────────────────────────────────────

    def mask(self, n_days: int) -> np.ndarray:
        """Boolean array: which of the first ``n_days`` days are work days."""
        if n_days <= 0:
            return np.zeros(0, dtype=bool)
        return self._np_pattern[np.arange(n_days, dtype=np.int64) % self._n]

    def working_days(self, start: DayLike, end: DayLike) -> np.ndarray:
        """Work days between ``start`` and ``end`` inclusive, as ``datetime64[D]``."""
        first = _to_day(start)
        last = _to_day(end)
        n_days = int((last - first).astype(np.int64)) + 1
        days = first + np.arange(max(n_days, 0), dtype=np.int64)
        return days[self.mask(n_days)]

    def count_working_days(self, start: DayLike, end: DayLike) -> int:
        return int(self.working_days(start, end).size)

    # ── properties / repr ────────────────────────────────────────────────

    @property
    def work_days(self) -> int:
        return self._work_days

    @property
    def off_days(self) -> int:
        return self._off_days

    @property
    def cycle_length(self) -> int:
        return self._n

    def __repr__(self) -> str:
        return (
            f"WorkCycle(work_days={self._work_days}, "
            f"off_days={self._off_days}, "
            f"cycle_length={self._n})"
        )


def get_work_schedule(
    period: Union[DatePeriod, Mapping[str, Any], Sequence[Any]],
    count_work_days: int,
    count_off_days: int,
) -> List[str]:
    """
    Working days of a repeating shift pattern within an inclusive period.

    ``period`` holds ``start``/``end`` in ``DD-MM-YYYY`` form; the result
    uses the same format.

        >>> get_work_schedule({"start": "01-01-2024", "end": "15-01-2024"}, 1, 3)
        ['01-01-2024', '05-01-2024', '09-01-2024', '13-01-2024']
    """
    bounds = DatePeriod.of(period)
    cycle = WorkCycle(count_work_days, count_off_days)
    days = cycle.working_days(bounds.start, bounds.end)
    logger.debug(
        "%r over %s..%s yields %d working days",
        cycle, bounds.start, bounds.end, days.size,
    )
    return [format_dmy(day) for day in days.tolist()]
