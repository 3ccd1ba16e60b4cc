"""
Descriptive reports over flattened schedules.
"""

from .report import ScheduleReport, summarize_schedule

__all__ = ["ScheduleReport", "summarize_schedule"]
