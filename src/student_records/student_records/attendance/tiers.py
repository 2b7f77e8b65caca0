from __future__ import annotations

from ..core.constants import GOOD_ATTENDANCE_THRESHOLD, WARNING_ATTENDANCE_THRESHOLD
from ..core.enums import StatusTier


def classify(percentage: int) -> StatusTier:
    """Map a percentage to its tier; lower bounds are inclusive."""
    if percentage >= GOOD_ATTENDANCE_THRESHOLD:
        return StatusTier.GOOD
    if percentage >= WARNING_ATTENDANCE_THRESHOLD:
        return StatusTier.WARNING
    return StatusTier.CRITICAL
