import os

from ..core.constants import DEFAULT_BACKUP_DIR, DEFAULT_DATA_FILE, DEFAULT_HOST, DEFAULT_PORT

DATA_FILE = os.getenv("DATA_FILE", DEFAULT_DATA_FILE)
BACKUP_DIR = os.getenv("BACKUP_DIR", DEFAULT_BACKUP_DIR)

HOST = os.getenv("HOST", DEFAULT_HOST)
PORT = int(os.getenv("PORT", str(DEFAULT_PORT)))

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
