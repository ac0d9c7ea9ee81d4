"""Coercion of date-like values into ``datetime`` instants.

Naive datetimes carry local wall-clock fields; aware datetimes are absolute.
Strings follow the usual ECMAScript conventions: a bare ``YYYY``, ``YYYY-MM``
or ``YYYY-MM-DD`` is UTC midnight, a date-time without an offset is local, and
anything that is not ISO 8601 is handed to :mod:`dateutil`.  Fields missing from
a free-form string default to January 1st; a string without a year is rejected.
"""

from __future__ import annotations

import logging
import math
import re
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from datetime import date, datetime, timedelta, timezone
from typing import Any, Union

import numpy as np
from dateutil import parser as _dateutil_parser

from ._exceptions import CalendarError, InvalidDateError

logger = logging.getLogger(__name__)

DateLike = Union[str, date, datetime, "np.datetime64", int, float]

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
DMY_FORMAT = "%d-%m-%Y"

_ISO_DATE_ONLY = re.compile(r"^(\d{4})(?:-(\d{2})(?:-(\d{2}))?)?$")

# Fields missing from a free-form string come from here, never from today.
_FREE_FORM_DEFAULT = datetime(2001, 1, 1)
_FREE_FORM_OTHER_YEAR = datetime(2002, 1, 1)


def _replace_z_suffix(value: str) -> str:
    if value.endswith(("Z", "z")):
        return value[:-1] + "+00:00"
    return value


def _parse_iso_date_only(text: str, match: re.Match) -> datetime:
    year, month, day = match.groups()
    try:
        return datetime(int(year), int(month or 1), int(day or 1), tzinfo=timezone.utc)
    except ValueError as exc:
        raise InvalidDateError(f"Invalid date: {text!r}.") from exc


def _parse_free_form(text: str, value: str) -> datetime:
    try:
        parsed = _dateutil_parser.parse(value, default=_FREE_FORM_DEFAULT)
        other = _dateutil_parser.parse(value, default=_FREE_FORM_OTHER_YEAR)
    except (ValueError, OverflowError) as exc:
        raise InvalidDateError(f"Invalid date: {text!r}.") from exc
    if parsed != other:
        raise InvalidDateError(f"Date has no year: {text!r}.")
    return parsed


def _parse_string(text: str) -> datetime:
    value = text.strip()
    match = _ISO_DATE_ONLY.match(value)
    if match:
        return _parse_iso_date_only(text, match)

    try:
        return datetime.fromisoformat(_replace_z_suffix(value))
    except ValueError:
        logger.debug("%r is not ISO 8601; falling back to dateutil", text)

    return _parse_free_form(text, value)


def _from_milliseconds(ms: float) -> datetime:
    if not math.isfinite(ms):
        raise InvalidDateError(f"Timestamp must be finite; got {ms}.")
    try:
        return EPOCH + timedelta(milliseconds=ms)
    except OverflowError as exc:
        raise InvalidDateError(f"Timestamp out of range: {ms}.") from exc


def _from_datetime64(value: np.datetime64) -> datetime:
    if np.isnat(value):
        raise InvalidDateError("NaT is not a valid date.")
    converted = value.astype("datetime64[us]").astype(datetime)
    if not isinstance(converted, datetime):
        raise InvalidDateError(f"datetime64 value out of range: {value}.")
    return converted.replace(tzinfo=timezone.utc)


def to_instant(value: DateLike) -> datetime:
    """
    Convert a date-like value into a ``datetime``.

    * ``datetime``     -> returned unchanged
    * ``date``         -> local midnight (naive)
    * ``datetime64``   -> UTC-aware
    * ``int``/``float``-> milliseconds since the epoch, UTC-aware
    * ``str``          -> parsed (see module docstring)

    Raises InvalidDateError for anything else.
    """
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day)
    if isinstance(value, np.datetime64):
        return _from_datetime64(value)
    if isinstance(value, bool):
        raise InvalidDateError("Booleans are not dates.")
    if isinstance(value, (int, float, np.integer, np.floating)):
        return _from_milliseconds(float(value))
    if isinstance(value, str):
        return _parse_string(value)
    raise InvalidDateError(f"Unsupported type for date: {type(value).__name__}.")


def as_utc(value: DateLike) -> datetime:
    """Instant as a UTC-aware datetime; naive values are read as local time."""
    return to_instant(value).astimezone(timezone.utc)


def as_local(value: DateLike) -> datetime:
    """Instant with local wall-clock fields; naive values pass through."""
    dt = to_instant(value)
    if dt.tzinfo is None:
        return dt
    return dt.astimezone()


def parse_dmy(value: str | date) -> date:
    """Parse a ``DD-MM-YYYY`` string; ``date`` objects pass through."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    try:
        return datetime.strptime(value.strip(), DMY_FORMAT).date()
    except (AttributeError, ValueError) as exc:
        raise InvalidDateError(f"Expected a DD-MM-YYYY date; got {value!r}.") from exc


def format_dmy(value: date) -> str:
    return f"{value.day:02d}-{value.month:02d}-{value.year:04d}"


@dataclass(frozen=True)
class DatePeriod:
    """
    Inclusive range between two date-like values.

    ``start <= end`` is assumed, not enforced.
    """

    start: Any
    end: Any

    @classmethod
    def of(cls, value: DatePeriod | Mapping[str, Any] | Sequence[Any]) -> DatePeriod:
        if isinstance(value, DatePeriod):
            return value
        if isinstance(value, Mapping):
            try:
                return cls(value["start"], value["end"])
            except KeyError as exc:
                raise CalendarError(
                    f"Period mapping must have 'start' and 'end'; missing {exc}."
                ) from exc
        if isinstance(value, Sequence) and not isinstance(value, str) and len(value) == 2:
            return cls(value[0], value[1])
        raise CalendarError(f"Cannot build a period from {value!r}.")

    def contains(self, value: DateLike) -> bool:
        moment = as_utc(value)
        return as_utc(self.start) <= moment <= as_utc(self.end)
