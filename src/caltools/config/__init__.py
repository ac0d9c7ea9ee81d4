# src/caltools/config/__init__.py
from caltools.config.settings import CalendarSettings, LeapRule, get_settings, load_settings

__all__ = [
    "CalendarSettings",
    "LeapRule",
    "get_settings",
    "load_settings",
]
