from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional


@dataclass(frozen=True)
class LedgerRow:
    """Read-model: one employee/day entry of the weekly ledger joined with the employee."""

    employee_id: str
    employee_name: Optional[str]
    employee_number: Optional[str]
    day_name: str
    count: int
    consumption_date: date
    week_id: str

    def to_dict(self) -> dict:
        return {
            "employee_id": self.employee_id,
            "employee_name": self.employee_name,
            "employee_number": self.employee_number,
            "day_name": self.day_name,
            "consumption_count": self.count,
            "consumption_date": self.consumption_date.isoformat(),
            "week_id": self.week_id,
        }


@dataclass(frozen=True)
class DailySummary:
    consumption_date: date
    day_name: str
    total_count: int
    employee_count: int

    def to_dict(self) -> dict:
        return {
            "consumption_date": self.consumption_date.isoformat(),
            "day_name": self.day_name,
            "total_consumos": self.total_count,
            "total_empleados": self.employee_count,
        }


@dataclass(frozen=True)
class RegistrationResult:
    success: bool
    employee_id: str
    employee_name: str
    cafeteria_id: str
    consumption_date: date
    week_id: str
    day_name: str
    count: int

    def to_dict(self) -> dict:
        return {
            "success": self.success,
            "employee_id": self.employee_id,
            "employee_name": self.employee_name,
            "comedor_id": self.cafeteria_id,
            "consumption_date": self.consumption_date.isoformat(),
            "week_id": self.week_id,
            "day_name": self.day_name,
            "consumption_count": self.count,
        }
