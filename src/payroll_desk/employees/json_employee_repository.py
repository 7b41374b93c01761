from __future__ import annotations

import json
import logging
import os
import stat
import tempfile
from pathlib import Path
from typing import Any, Sequence, Union

from ..core.constants import STORE_FORMAT_VERSION
from ..core.exceptions import PersistenceError, StoreNotFoundError
from .model import Employee

logger = logging.getLogger(__name__)


def dump_employees(employees: Sequence[Employee]) -> dict:
    return {
        "version": STORE_FORMAT_VERSION,
        "employees": [employee.to_dict() for employee in employees],
    }


def parse_employees(payload: Any) -> list[Employee]:
    if not isinstance(payload, dict):
        raise PersistenceError("Saved data is not a JSON object")
    version = payload.get("version")
    if version != STORE_FORMAT_VERSION:
        raise PersistenceError(f"Unsupported data version: {version!r}")
    items = payload.get("employees")
    if not isinstance(items, list):
        raise PersistenceError("Saved data has no employee list")

    employees = []
    for index, item in enumerate(items):
        if not isinstance(item, dict):
            raise PersistenceError(f"Employee #{index} is not an object")
        try:
            employees.append(Employee.from_dict(item))
        except (KeyError, TypeError, ValueError) as exc:
            raise PersistenceError(f"Employee #{index} is malformed: {exc}") from exc
    return employees


class JsonFileEmployeeRepository:
    """Whole-registry store in one JSON file.

    Saves go through a temporary file in the same directory and ``os.replace``,
    so a failed write leaves the previous file intact.
    """

    def __init__(self, path: Union[str, Path]):
        self._path = Path(path)

    def load(self) -> list[Employee]:
        try:
            with self._path.open("r", encoding="utf-8") as f:
                payload = json.load(f)
        except FileNotFoundError:
            raise StoreNotFoundError(f"No data file at {self._path}") from None
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as exc:
            raise PersistenceError(str(exc)) from exc

        employees = parse_employees(payload)
        logger.debug("Loaded %d employees from %s", len(employees), self._path)
        return employees

    def save(self, employees: Sequence[Employee]) -> None:
        payload = dump_employees(employees)
        tmp_name = None
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            mode = self._file_mode()
            fd, tmp_name = tempfile.mkstemp(prefix=f".{self._path.name}.", dir=self._path.parent)
            os.chmod(tmp_name, mode)
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(payload, f, ensure_ascii=False, indent=2)
            os.replace(tmp_name, self._path)
            tmp_name = None
        except OSError as exc:
            raise PersistenceError(str(exc)) from exc
        finally:
            if tmp_name is not None and os.path.exists(tmp_name):
                os.remove(tmp_name)
        logger.debug("Saved %d employees to %s", len(employees), self._path)

    def _file_mode(self) -> int:
        """Mode for the saved file: keep the current one, else follow the umask."""
        try:
            return stat.S_IMODE(self._path.stat().st_mode)
        except FileNotFoundError:
            umask = os.umask(0)
            os.umask(umask)
            return 0o666 & ~umask


class InMemoryEmployeeRepository:
    """Keeps the last saved payload in memory (tests, throwaway sessions)."""

    def __init__(self, payload: Any = None):
        self._payload = payload
        self.save_count = 0

    def load(self) -> list[Employee]:
        if self._payload is None:
            raise StoreNotFoundError("Nothing saved yet")
        return parse_employees(self._payload)

    def save(self, employees: Sequence[Employee]) -> None:
        self._payload = json.loads(json.dumps(dump_employees(employees)))
        self.save_count += 1
