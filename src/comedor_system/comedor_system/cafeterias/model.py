from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Cafeteria:
    """Comedor: unidad donde se registran consumos y se vinculan tablets."""

    cafeteria_id: str
    name: str
    company_id: str
    require_pin: bool = True
    company_name: Optional[str] = None
    employee_count: Optional[int] = None

    def to_dict(self) -> dict:
        out = {
            "comedor_id": self.cafeteria_id,
            "comedor_nombre": self.name,
            "require_pin": self.require_pin,
            "empresa_id": self.company_id,
            "empresa_nombre": self.company_name,
        }
        if self.employee_count is not None:
            out["total_empleados"] = self.employee_count
        return out
