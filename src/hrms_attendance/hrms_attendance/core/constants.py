"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_API_BASE_URL = "https://hrms-backend-gtjd.onrender.com/api/"
DEFAULT_API_TIMEOUT_SECONDS = 10.0

EMPLOYEES_PATH = "employees/"
ATTENDANCE_PATH = "attendance/"

ISO_DATE_FORMAT = "%Y-%m-%d"
DISPLAY_DATE_FORMAT = "%A, %B %d, %Y"
