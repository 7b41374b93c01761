import os

from ..core.constants import DEFAULT_BACKUP_DIR, DEFAULT_HOST, DEFAULT_PORT

# Empty DATA_FILE keeps the session in memory.
DATA_FILE = os.getenv("DATA_FILE", "")
BACKUP_DIR = os.getenv("BACKUP_DIR", DEFAULT_BACKUP_DIR)

HOST = DEFAULT_HOST
PORT = DEFAULT_PORT

DEBUG = False
TESTING = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "WARNING")
