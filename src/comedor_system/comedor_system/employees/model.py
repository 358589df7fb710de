from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional


@dataclass(frozen=True)
class Employee:
    """Empleado de un comedor.

    ``last_active_date`` only moves when a consumption is registered; it stays
    None for employees who never registered a meal.
    """

    employee_id: str
    cafeteria_id: str
    name: str
    number: Optional[str] = None
    type: Optional[str] = None
    pin: Optional[str] = None
    last_active_date: Optional[date] = None
    cafeteria_name: Optional[str] = None

    @property
    def has_pin(self) -> bool:
        return bool(self.pin)

    def to_dict(self) -> dict:
        return {
            "internal_id": self.employee_id,
            "comedor_id": self.cafeteria_id,
            "name": self.name,
            "number": self.number,
            "type": self.type,
            "tiene_pin": self.has_pin,
            "last_active_date": self.last_active_date.isoformat() if self.last_active_date else None,
        }
