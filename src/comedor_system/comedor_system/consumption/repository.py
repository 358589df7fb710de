from __future__ import annotations

from datetime import date
from typing import Protocol, Sequence

from .model import DailySummary, LedgerRow


class ConsumptionRepository(Protocol):
    def register(
        self,
        *,
        employee_id: str,
        cafeteria_id: str,
        consumption_date: date,
        week_id: str,
        day_name: str,
    ) -> int:
        """Create the (employee, cafeteria, date) entry with count 1 or increment it.

        Must be one atomic upsert that also stamps the employee's
        last_active_date. Returns the resulting count.
        """

        raise NotImplementedError

    def list_week(self, cafeteria_id: str, week_id: str) -> Sequence[LedgerRow]:
        """Entries ordered by employee name, then date."""

        raise NotImplementedError

    def daily_summary(self, cafeteria_id: str, week_id: str) -> Sequence[DailySummary]:
        raise NotImplementedError

    def clear_week(self, cafeteria_id: str, week_id: str) -> int:
        raise NotImplementedError
