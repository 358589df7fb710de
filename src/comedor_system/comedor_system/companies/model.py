from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Company:
    """Empresa: agrupa uno o más comedores."""

    company_id: str
    name: str
    description: Optional[str] = None
    logo_url: Optional[str] = None
    is_active: bool = True

    def to_dict(self) -> dict:
        return {
            "id": self.company_id,
            "nombre": self.name,
            "descripcion": self.description,
            "logo_url": self.logo_url,
            "activa": self.is_active,
        }


@dataclass(frozen=True)
class CompanyStats:
    total_cafeterias: int
    total_employees: int
    consumptions_today: int
    consumptions_week: int

    def to_dict(self) -> dict:
        return {
            "total_comedores": self.total_cafeterias,
            "total_empleados": self.total_employees,
            "total_consumos_hoy": self.consumptions_today,
            "total_consumos_semana": self.consumptions_week,
        }
