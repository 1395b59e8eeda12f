"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

MINUTES_PER_HOUR = 60
MINUTES_PER_DAY = 24 * 60
DAYS_IN_WEEK = 7
MAX_WEEKS_IN_MONTH = 6

# Day numbering: 1=Sunday .. 7=Saturday
DEFAULT_WEEK_START_DAY = 7

DAY_NAMES = ("Sunday", "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday")
SHORT_DAY_NAMES = ("Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat")

HOLIDAY_COLOR = "#f44336"
DEFAULT_BACKGROUND_COLOR = "#ffffff"
DARK_TEXT_COLOR = "#000000"
LIGHT_TEXT_COLOR = "#ffffff"
BRIGHTNESS_THRESHOLD = 128
BORDER_DARKEN_FACTOR = 0.2

HOLIDAY_LABEL = "Holiday"
LEAVE_FALLBACK_LABEL = "Leave"
# Leave type ids that mean "no leave"
NO_LEAVE_TYPE_IDS = ("", "0")

EXPORT_SHEET_NAME = "Timetable"
EXPORT_NAME_COLUMN_WIDTH = 20
EXPORT_DAY_COLUMN_WIDTH = 25
