from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Employee


class EmployeeRepository(Protocol):
    """Repository interface for employees.

    Services depend on this protocol, never on a concrete database.
    """

    def get_by_id(self, employee_id: str) -> Optional[Employee]:
        raise NotImplementedError

    def list(self, *, cafeteria_id: Optional[str] = None, search: Optional[str] = None) -> Sequence[Employee]:
        """Ordered by name; ``search`` matches name or number, case insensitive."""

        raise NotImplementedError

    def list_with_activity(self, *, cafeteria_id: Optional[str] = None) -> Sequence[Employee]:
        """Employees with a non-null last_active_date, with cafeteria name."""

        raise NotImplementedError

    def create(self, employee: Employee) -> bool:
        """Insert; returns False when the id already exists."""

        raise NotImplementedError

    def update(
        self,
        employee_id: str,
        *,
        name: str,
        number: Optional[str],
        type: Optional[str],
        pin: Optional[str],
    ) -> bool:
        raise NotImplementedError

    def delete_by_id(self, employee_id: str) -> bool:
        raise NotImplementedError
