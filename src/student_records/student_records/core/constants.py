"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

GOOD_ATTENDANCE_THRESHOLD = 75
WARNING_ATTENDANCE_THRESHOLD = 50

STUDENT_ID_PREFIX = "STU"
ROLL_NO_MIN_WIDTH = 3

MIN_NAME_LENGTH = 2
DEFAULT_SUBJECT = "General"

INVALID_DATE_PLACEHOLDER = "Invalid Date"
