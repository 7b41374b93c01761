"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_DATA_FILE = "employees_data.json"
DEFAULT_BACKUP_DIR = "backups"
DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 5000

# Per-leave deduction, by category.
STANDARD_LEAVE_DEDUCTION = 100
FULL_TIME_LEAVE_DEDUCTION = 150
PART_TIME_LEAVE_DEDUCTION = 50

STORE_FORMAT_VERSION = 1
