import logging
import math
from datetime import datetime, timedelta, timezone
from itertools import islice
from typing import Any, Iterator, Mapping, Optional, Sequence, Tuple, Union

import numpy as np

from caltools.config import LeapRule, get_settings

from ._exceptions import CalendarError
from .instants import EPOCH, DateLike, DatePeriod, as_local, as_utc

logger = logging.getLogger(__name__)

DAY_NAMES: Tuple[str, ...] = (
    "Sunday",
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
)

_DAYS_IN_MONTH: Tuple[int, ...] = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)
_FRIDAY: int = 5  # Sunday-based day-of-week
_WEEKEND_MASK: str = "0000011"  # numpy weekmasks start on Monday

# A Friday the 13th occurs at least once in any 14 consecutive months.
_MAX_MONTHS_TO_FRIDAY_13TH: int = 15


# ── helpers ──────────────────────────────────────────────────────────────────

def _day_of_week(dt: datetime) -> int:
    """0 = Sunday ... 6 = Saturday."""
    return dt.isoweekday() % 7


def _pad(value: int, legacy: Optional[bool] = None) -> str:
    if legacy is None:
        legacy = get_settings().legacy_zero_pad
    threshold = 9 if legacy else 10
    return f"0{value}" if value < threshold else str(value)


def _check_month(month: int) -> None:
    if not 1 <= month <= 12:
        raise CalendarError(f"Month must be in 1..12; got {month}.")


def _iter_months(year: int, month: int) -> Iterator[Tuple[int, int]]:
    """Yield (year, month) pairs forward from the given month, month in 1..12."""
    index = year * 12 + (month - 1)
    while True:
        y, m = divmod(index, 12)
        yield y, m + 1
        index += 1


def is_leap(year: int, rule: Optional[LeapRule] = None) -> bool:
    if rule is None:
        rule = get_settings().leap_rule
    if rule == "simplified":
        return year % 4 == 0
    if rule == "gregorian":
        return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)
    raise CalendarError(f"Unknown leap rule {rule!r}.")


# ── timestamps and time of day ───────────────────────────────────────────────

def date_to_timestamp(date: DateLike) -> int:
    """Milliseconds elapsed since 1970-01-01T00:00:00Z."""
    return (as_utc(date) - EPOCH) // timedelta(milliseconds=1)


def get_time(date: DateLike, *, legacy_zero_pad: Optional[bool] = None) -> str:
    """Local time of day as ``HH:MM:SS``."""
    local = as_local(date)
    return ":".join(
        _pad(v, legacy_zero_pad) for v in (local.hour, local.minute, local.second)
    )


def format_date(date: DateLike, *, legacy_zero_pad: Optional[bool] = None) -> str:
    """
    UTC date and time as ``M/D/YYYY, h:mm:ss AM``.

    Month, day and hour are not padded. Midnight is ``12 AM``, noon ``12 PM``.
    """
    utc = as_utc(date)
    suffix = "PM" if utc.hour >= 12 else "AM"
    hour = utc.hour % 12 or 12
    minutes = _pad(utc.minute, legacy_zero_pad)
    seconds = _pad(utc.second, legacy_zero_pad)
    return f"{utc.month}/{utc.day}/{utc.year}, {hour}:{minutes}:{seconds} {suffix}"


# ── weekdays ─────────────────────────────────────────────────────────────────

def get_day_name(date: DateLike) -> str:
    return DAY_NAMES[_day_of_week(as_utc(date))]


def get_next_friday(date: DateLike) -> datetime:
    """Same time of day on the first Friday strictly after ``date`` (UTC)."""
    utc = as_utc(date)
    day = _day_of_week(utc)
    if day < _FRIDAY:
        ahead = _FRIDAY - day
    else:
        ahead = 7 - day + _FRIDAY
    return utc + timedelta(days=ahead)


def get_next_friday_the_13th(date: DateLike) -> datetime:
    """
    First Friday the 13th, searching forward from the month of ``date``.

    The starting month itself is included, whatever the day of ``date``.
    Returns local midnight (naive).
    """
    local = as_local(date)
    for year, month in islice(
        _iter_months(local.year, local.month), _MAX_MONTHS_TO_FRIDAY_13TH
    ):
        candidate = datetime(year, month, 13)
        if _day_of_week(candidate) == _FRIDAY:
            logger.debug("next Friday the 13th after %s is %s", local, candidate)
            return candidate
    raise CalendarError(
        f"No Friday the 13th within {_MAX_MONTHS_TO_FRIDAY_13TH} months of {local}."
    )


def get_count_weekends_in_month(month: int, year: int) -> int:
    """Number of Saturdays and Sundays in the given month."""
    _check_month(month)
    first = np.datetime64(f"{year:04d}-{month:02d}", "M")
    begin = first.astype("datetime64[D]")
    end = (first + 1).astype("datetime64[D]")
    return int(np.busday_count(begin, end, weekmask=_WEEKEND_MASK))


# ── months, periods and years ────────────────────────────────────────────────

def get_count_days_in_month(
    month: int, year: int, *, rule: Optional[LeapRule] = None
) -> int:
    _check_month(month)
    if month == 2 and is_leap(year, rule):
        return 29
    return _DAYS_IN_MONTH[month - 1]


def get_count_days_on_period(date_start: DateLike, date_end: DateLike) -> float:
    """Days from ``date_start`` to ``date_end``, counting both ends."""
    elapsed = as_utc(date_end) - as_utc(date_start)
    return elapsed / timedelta(days=1) + 1


def is_date_in_period(
    date: DateLike, period: Union[DatePeriod, Mapping[str, Any], Sequence[Any]]
) -> bool:
    """True when ``period.start <= date <= period.end``."""
    return DatePeriod.of(period).contains(date)


def get_week_number_by_date(date: DateLike) -> int:
    """
    Week of the year as ``ceil(day_of_year / 7)``.

    Counted on local wall-clock fields; this is not ISO 8601 numbering.
    """
    local = as_local(date)
    wall = local.replace(tzinfo=timezone.utc)
    first_day = datetime(local.year, 1, 1, tzinfo=timezone.utc)
    return math.ceil(get_count_days_on_period(first_day, wall) / 7)


def get_quarter(date: DateLike) -> int:
    return (as_local(date).month - 1) // 3 + 1


def is_leap_year(date: DateLike, *, rule: Optional[LeapRule] = None) -> bool:
    return is_leap(as_local(date).year, rule)
