# src/caltools/schedule/__init__.py
"""
caltools.schedule
~~~~~~~~~~~~~~~~~

Shift schedules built from a repeating work/off cycle.

Basic usage::

    from caltools.schedule import get_work_schedule, WorkCycle

    get_work_schedule({"start": "01-01-2024", "end": "10-01-2024"}, 1, 1)
    # → ['01-01-2024', '03-01-2024', '05-01-2024', '07-01-2024', '09-01-2024']

    cycle = WorkCycle(4, 3)
    cycle.count_working_days("01-01-2024", "31-01-2024")   # → 19

Public API
----------
WorkCycle          The repeating pattern.
get_work_schedule  Working days of a period as ``DD-MM-YYYY`` strings.
"""

from __future__ import annotations

from caltools.schedule.cycle import WorkCycle, get_work_schedule

__all__ = [
    "WorkCycle",
    "get_work_schedule",
]
