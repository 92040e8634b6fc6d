"""Global, project-wide configuration constants.

This module intentionally contains **no business logic** – only the fixed
datetime format, field bounds and cross-cutting constants that many modules
can import.
"""

import re

# Distribution name, used to look up the installed version
PACKAGE_NAME = "utckit"

# Canonical datetime format: exactly 19 characters, YYYY-MM-DD hh:mm:ss (UTC)
DATETIME_FORMAT = "%Y-%m-%d %H:%M:%S"
DATETIME_PATTERN = re.compile(r"^(\d{4})-(\d{2})-(\d{2}) (\d{2}):(\d{2}):(\d{2})$", re.ASCII)

DATE_LENGTH = 10
DATE_PATTERN = re.compile(r"^(\d{4})-(\d{2})-(\d{2})$", re.ASCII)

TIME_LENGTH = 8
TIME_PATTERN = re.compile(r"^(\d{2}):(\d{2}):(\d{2})$", re.ASCII)

# Field bounds. Years above MAX_YEAR cannot be represented by datetime.
MIN_YEAR = 0
MAX_YEAR = 9999

# Zone used for the throwaway interpretation step of to_utc()
REFERENCE_TZ = "UTC"


# Environment variable read by the CLI to pick a log level
LOG_LEVEL_ENV = "UTCKIT_LOG_LEVEL"
