from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from typing import List, Optional

from ..cafeterias.repository import CafeteriaRepository
from ..common.datetime_utils import day_name, get_week_id, now_local, today_local, week_monday, week_range_label
from ..common.validators import require_non_empty
from ..core.exceptions import ConflictError, InvalidReferenceError, NotFoundError
from ..employees.model import Employee
from ..employees.repository import EmployeeRepository
from ..events.broker import ConsumptionEvent, ConsumptionEventBroker
from ..history.repository import HistoryRepository
from .model import DailySummary, LedgerRow, RegistrationResult
from .repository import ConsumptionRepository

logger = logging.getLogger(__name__)


class ConsumptionRegistrar:
    """Use case: register a meal, at most one ledger entry per employee per day."""

    def __init__(
        self,
        consumption: ConsumptionRepository,
        employees: EmployeeRepository,
        *,
        history: Optional[HistoryRepository] = None,
        broker: Optional[ConsumptionEventBroker] = None,
    ):
        self._consumption = consumption
        self._employees = employees
        self._history = history
        self._broker = broker

    def register(
        self,
        employee_id: str,
        cafeteria_id: str,
        consumption_date: Optional[date] = None,
        *,
        today: Optional[date] = None,
    ) -> RegistrationResult:
        employee_id = require_non_empty(employee_id, "employee_id")
        cafeteria_id = require_non_empty(cafeteria_id, "comedor_id")
        today = today or today_local()
        consumption_date = consumption_date or today

        employee = self._employees.get_by_id(employee_id)
        if not employee:
            raise NotFoundError(f"Empleado {employee_id} no encontrado")
        if employee.cafeteria_id != cafeteria_id:
            raise InvalidReferenceError(f"El empleado {employee_id} no pertenece al comedor {cafeteria_id}")

        week_id = get_week_id(consumption_date)
        label = day_name(consumption_date)
        if week_monday(consumption_date) < week_monday(today):
            self._check_backfill(employee_id, cafeteria_id, week_id)

        count = self._consumption.register(
            employee_id=employee_id,
            cafeteria_id=cafeteria_id,
            consumption_date=consumption_date,
            week_id=week_id,
            day_name=label,
        )
        logger.info(
            "Consumption registered employee=%s comedor=%s date=%s count=%d",
            employee_id,
            cafeteria_id,
            consumption_date,
            count,
        )

        self._notify(employee, consumption_date, count)

        return RegistrationResult(
            success=True,
            employee_id=employee_id,
            employee_name=employee.name,
            cafeteria_id=cafeteria_id,
            consumption_date=consumption_date,
            week_id=week_id,
            day_name=label,
            count=count,
        )

    def _check_backfill(self, employee_id: str, cafeteria_id: str, week_id: str) -> None:
        # An archived week is never re-archived, so its ledger must stay frozen.
        if self._history and self._history.get_by_week(cafeteria_id, week_id):
            raise ConflictError(f"La semana {week_id} del comedor {cafeteria_id} ya fue archivada")
        logger.warning(
            "Backfilling consumption employee=%s comedor=%s into past week %s",
            employee_id,
            cafeteria_id,
            week_id,
        )

    def _notify(self, employee: Employee, consumption_date: date, count: int) -> None:
        if not self._broker:
            return
        try:
            self._broker.publish(
                ConsumptionEvent(
                    employee_id=employee.employee_id,
                    employee_name=employee.name,
                    employee_type=employee.type,
                    cafeteria_id=employee.cafeteria_id,
                    consumption_date=consumption_date,
                    count=count,
                    timestamp=now_local(),
                )
            )
        except Exception:
            # Registration is already committed at this point.
            logger.exception("Failed to broadcast consumption of employee %s", employee.employee_id)


@dataclass(frozen=True)
class WeekView:
    week_id: str
    label: str
    rows: List[LedgerRow]
    days: List[DailySummary]

    @property
    def total_count(self) -> int:
        return sum(r.count for r in self.rows)

    def to_dict(self) -> dict:
        return {
            "week_id": self.week_id,
            "label": self.label,
            "total_consumos": self.total_count,
            "consumos": [r.to_dict() for r in self.rows],
            "dias": [d.to_dict() for d in self.days],
        }


class WeeklyLedger:
    """Use case: read and clear the current week's consumption ledger of a cafeteria."""

    def __init__(self, consumption: ConsumptionRepository, cafeterias: CafeteriaRepository):
        self._consumption = consumption
        self._cafeterias = cafeterias

    def current_week(self, cafeteria_id: str, *, today: Optional[date] = None) -> List[LedgerRow]:
        return list(self._consumption.list_week(cafeteria_id, get_week_id(today or today_local())))

    def week_view(self, cafeteria_id: str, *, today: Optional[date] = None) -> WeekView:
        today = today or today_local()
        self._require_cafeteria(cafeteria_id)
        week_id = get_week_id(today)
        return WeekView(
            week_id=week_id,
            label=week_range_label(today),
            rows=list(self._consumption.list_week(cafeteria_id, week_id)),
            days=list(self._consumption.daily_summary(cafeteria_id, week_id)),
        )

    def clear_log(self, cafeteria_id: str, *, today: Optional[date] = None) -> int:
        """Delete every current-week entry of the cafeteria. Irreversible."""
        self._require_cafeteria(cafeteria_id)
        week_id = get_week_id(today or today_local())
        deleted = self._consumption.clear_week(cafeteria_id, week_id)
        logger.warning("Cleared %d consumption entries of comedor=%s week=%s", deleted, cafeteria_id, week_id)
        return deleted

    def _require_cafeteria(self, cafeteria_id: str) -> None:
        if not self._cafeterias.get_by_id(cafeteria_id):
            raise NotFoundError("Comedor no encontrado")
