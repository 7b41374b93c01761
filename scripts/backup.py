"""Backup the employee data file.

Note: Copies the configured DATA_FILE into BACKUP_DIR with a timestamp.
Restore by copying a backup back over DATA_FILE while the app is stopped.
"""

from __future__ import annotations

import importlib
import shutil
from datetime import datetime
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from payroll_desk.config import get_settings_module


def backup(data_file: Path, out_dir: Path, *, now: Optional[datetime] = None) -> Path:
    if not data_file.is_file():
        raise SystemExit(f"No data file at {data_file}, nothing to back up.")

    out_dir.mkdir(parents=True, exist_ok=True)
    ts = (now or datetime.now()).strftime("%Y%m%d_%H%M%S")
    out_file = out_dir / f"{data_file.stem}_{ts}{data_file.suffix}"
    shutil.copy2(data_file, out_file)
    return out_file


def main() -> None:
    load_dotenv(override=False)
    settings = importlib.import_module(get_settings_module())
    if not settings.DATA_FILE:
        raise SystemExit("DATA_FILE is empty (in-memory session), nothing to back up.")

    out_file = backup(Path(settings.DATA_FILE), Path(settings.BACKUP_DIR))
    print(f"OK: Backup created: {out_file}")


if __name__ == "__main__":
    main()
