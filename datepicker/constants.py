"""Shared constants for the date picker engine."""

# Month view is always 6 weeks of 7 days
GRID_ROWS = 6
GRID_COLUMNS = 7
GRID_CELLS = GRID_ROWS * GRID_COLUMNS

# Year selector pages through fixed 12-year windows
YEAR_PAGE_SIZE = 12

# Nearest-enabled search probes this many days in each direction
NEAREST_ENABLED_LIMIT = 366

# Event store and disabled-date keys (yyyy-MM-dd)
ISO_KEY_PATTERN = "yyyy-MM-dd"

DEFAULT_LOCALE = "en-US"
DEFAULT_DATE_FORMAT = "yyyy-MM-dd"
