# src/caltools/calendar/__init__.py
"""
caltools.calendar
~~~~~~~~~~~~~~~~~

Small, independent date calculations: timestamps, weekdays, month lengths,
periods, quarters and leap years.  Every function is pure and accepts any
"date-like" value: a ``datetime``, a ``date``, an ISO 8601 or free-form
string, a ``numpy.datetime64`` or a millisecond timestamp.

Basic usage::

    from caltools.calendar import get_day_name, format_date

    get_day_name("01 Jan 1970 00:00:00 UTC")      # → 'Thursday'
    format_date("2024-02-01T15:00:00.000Z")       # → '2/1/2024, 3:00:00 PM'

Functions reading UTC fields: ``get_day_name``, ``get_next_friday``,
``format_date``.  Functions reading local fields: ``get_time``,
``get_week_number_by_date``, ``get_next_friday_the_13th``, ``get_quarter``,
``is_leap_year``.  Naive datetimes are local time.

Public API
----------
date_to_timestamp, get_time, get_day_name, get_next_friday,
get_count_days_in_month, get_count_days_on_period, is_date_in_period,
format_date, get_count_weekends_in_month, get_week_number_by_date,
get_next_friday_the_13th, get_quarter, is_leap_year, is_leap
    The calculations.
to_instant, DatePeriod
    Date coercion and the inclusive period type.
CalendarError, InvalidDateError
    Exceptions.
"""

from __future__ import annotations

from caltools.calendar._exceptions import CalendarError, InvalidDateError
from caltools.calendar.calendar import (
    DAY_NAMES,
    date_to_timestamp,
    format_date,
    get_count_days_in_month,
    get_count_days_on_period,
    get_count_weekends_in_month,
    get_day_name,
    get_next_friday,
    get_next_friday_the_13th,
    get_quarter,
    get_time,
    get_week_number_by_date,
    is_date_in_period,
    is_leap,
    is_leap_year,
)
from caltools.calendar.instants import DatePeriod, parse_dmy, to_instant

__all__ = [
    "DAY_NAMES",
    "CalendarError",
    "DatePeriod",
    "InvalidDateError",
    "date_to_timestamp",
    "format_date",
    "get_count_days_in_month",
    "get_count_days_on_period",
    "get_count_weekends_in_month",
    "get_day_name",
    "get_next_friday",
    "get_next_friday_the_13th",
    "get_quarter",
    "get_time",
    "get_week_number_by_date",
    "is_date_in_period",
    "is_leap",
    "is_leap_year",
    "parse_dmy",
    "to_instant",
]
