"""Environment configuration for caltools.

Two compatibility switches are read from the environment (or a ``.env``
file in the working directory)::

    export CALTOOLS_LEAP_RULE=gregorian       # default: simplified
    export CALTOOLS_LEGACY_ZERO_PAD=true      # default: false

``simplified`` treats every year divisible by 4 as a leap year; ``gregorian``
applies the 4/100/400 rule.  ``legacy_zero_pad`` restores the historical
formatting in which a field equal to 9 is not zero-padded.

Usage::

    from caltools.config import get_settings
    get_settings().leap_rule
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

LeapRule = Literal["simplified", "gregorian"]


class CalendarSettings(BaseSettings):
    """Settings loaded from ``CALTOOLS_*`` environment variables."""

    leap_rule: LeapRule = Field(
        default="simplified",
        description="Leap-year rule shared by is_leap_year and get_count_days_in_month",
    )
    legacy_zero_pad: bool = Field(
        default=False,
        description="Skip zero-padding of the value 9 in get_time and format_date",
    )

    model_config = SettingsConfigDict(
        env_prefix="CALTOOLS_",
        case_sensitive=False,
        env_file=(".env",),
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )


def load_settings() -> CalendarSettings:
    """Build settings from the current environment, ignoring the cache."""
    return CalendarSettings()


@lru_cache(maxsize=1)
def get_settings() -> CalendarSettings:
    """Process-wide settings; call ``get_settings.cache_clear()`` to reload."""
    return load_settings()
