"""Display helpers for student identifiers, names and dates."""

from __future__ import annotations

from typing import Optional

from ..core.constants import INVALID_DATE_PLACEHOLDER, ROLL_NO_MIN_WIDTH, STUDENT_ID_PREFIX
from .datetime_utils import DateLike, coerce_date

# Fixed English month names: strftime("%B") would follow the process locale.
_MONTH_NAMES = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)


def format_student_id(roll_no: str, division: str) -> str:
    """Build the display ID, e.g. ("1", "I") -> "STUI001".

    The roll number is padded to a minimum width, longer ones are kept whole.
    """
    return f"{STUDENT_ID_PREFIX}{division}{roll_no.rjust(ROLL_NO_MIN_WIDTH, '0')}"


def format_display_date(value: Optional[DateLike]) -> str:
    """Render a date as "January 15, 2024".

    Unparseable input gives a placeholder instead of an error, this is for
    display only.
    """
    d = coerce_date(value)
    if d is None:
        return INVALID_DATE_PLACEHOLDER
    return f"{_MONTH_NAMES[d.month - 1]} {d.day}, {d.year}"


def format_display_name(name: str) -> str:
    return name.strip().upper()
