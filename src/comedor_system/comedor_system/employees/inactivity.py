from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Iterable, List, Optional

from ..common.datetime_utils import today_local
from ..core.constants import INACTIVITY_THRESHOLD_DAYS
from ..core.exceptions import ValidationError
from .model import Employee
from .repository import EmployeeRepository


@dataclass(frozen=True)
class InactiveEmployee:
    employee_id: str
    name: str
    number: Optional[str]
    type: Optional[str]
    last_active_date: date
    days_inactive: int
    cafeteria_id: str
    cafeteria_name: Optional[str]

    def to_dict(self) -> dict:
        return {
            "internal_id": self.employee_id,
            "empleado_nombre": self.name,
            "empleado_numero": self.number,
            "empleado_tipo": self.type,
            "last_active_date": self.last_active_date.isoformat(),
            "dias_inactivo": self.days_inactive,
            "comedor_id": self.cafeteria_id,
            "comedor_nombre": self.cafeteria_name,
        }


def classify_inactive(
    employees: Iterable[Employee],
    *,
    today: date,
    threshold_days: int = INACTIVITY_THRESHOLD_DAYS,
) -> List[InactiveEmployee]:
    """Employees unseen for strictly more than ``threshold_days``.

    Employees who never registered (last_active_date is None) are not inactive.
    Result is sorted by days inactive, longest first.
    """
    out: List[InactiveEmployee] = []
    for e in employees:
        if e.last_active_date is None:
            continue
        days = (today - e.last_active_date).days
        if days <= threshold_days:
            continue
        out.append(
            InactiveEmployee(
                employee_id=e.employee_id,
                name=e.name,
                number=e.number,
                type=e.type,
                last_active_date=e.last_active_date,
                days_inactive=days,
                cafeteria_id=e.cafeteria_id,
                cafeteria_name=e.cafeteria_name,
            )
        )

    out.sort(key=lambda r: (-r.days_inactive, r.name))
    return out


class InactivityService:
    def __init__(self, employees: EmployeeRepository, *, threshold_days: int = INACTIVITY_THRESHOLD_DAYS):
        self._employees = employees
        self._threshold_days = int(threshold_days)

    def list_inactive(
        self,
        *,
        cafeteria_id: Optional[str] = None,
        threshold_days: Optional[int] = None,
        today: Optional[date] = None,
    ) -> List[InactiveEmployee]:
        threshold = self._threshold_days if threshold_days is None else int(threshold_days)
        if threshold < 0:
            raise ValidationError("El umbral de inactividad no puede ser negativo")

        candidates = self._employees.list_with_activity(cafeteria_id=cafeteria_id)
        return classify_inactive(candidates, today=today or today_local(), threshold_days=threshold)
