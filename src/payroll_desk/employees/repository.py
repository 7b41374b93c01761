from __future__ import annotations

from typing import Protocol, Sequence

from .model import Employee


class EmployeeRepository(Protocol):
    """Storage interface for the whole employee registry.

    Note (DIP): the service depends on this interface, not on a concrete file format.
    """

    def load(self) -> list[Employee]:
        """Raise StoreNotFoundError when nothing was saved yet, PersistenceError when unreadable."""

        raise NotImplementedError

    def save(self, employees: Sequence[Employee]) -> None:
        raise NotImplementedError
