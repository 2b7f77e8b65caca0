from __future__ import annotations

from enum import Enum


class AttendanceMark(str, Enum):
    """Per-day attendance mark as submitted by the attendance sheet."""

    PRESENT = "present"
    ABSENT = "absent"


class StatusTier(str, Enum):
    """Coarse health classification of an attendance percentage."""

    GOOD = "Good"
    WARNING = "Warning"
    CRITICAL = "Critical"


class Division(str, Enum):
    """Closed set of student sections."""

    I = "I"
    II = "II"
