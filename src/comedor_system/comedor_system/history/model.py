from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional

from ..core.enums import ArchiveStatus


@dataclass(frozen=True)
class ConsumptionHistory:
    """Resumen inmutable de una semana archivada de un comedor."""

    history_id: int
    cafeteria_id: str
    week_id: str
    total_count: int
    employee_count: int
    archived_at: Optional[datetime] = None

    def to_dict(self) -> dict:
        return {
            "history_id": self.history_id,
            "comedor_id": self.cafeteria_id,
            "week_id": self.week_id,
            "total_consumos": self.total_count,
            "total_empleados": self.employee_count,
            "archived_at": self.archived_at.isoformat(timespec="seconds") if self.archived_at else None,
        }


@dataclass(frozen=True)
class HistoryDetail:
    history_id: int
    employee_id: str
    employee_name: Optional[str]
    employee_number: Optional[str]
    count: int

    def to_dict(self) -> dict:
        return {
            "employee_id": self.employee_id,
            "employee_name": self.employee_name,
            "employee_number": self.employee_number,
            "consumption_count": self.count,
        }


@dataclass(frozen=True)
class ArchiveResult:
    cafeteria_id: str
    week_id: str
    status: ArchiveStatus
    history_id: Optional[int] = None
    total_count: Optional[int] = None
    error: Optional[str] = None

    @property
    def success(self) -> bool:
        return self.status != ArchiveStatus.FAILED

    @property
    def message(self) -> str:
        return {
            ArchiveStatus.ARCHIVED: "Semana guardada en el historial",
            ArchiveStatus.ALREADY_ARCHIVED: "La semana ya estaba archivada",
            ArchiveStatus.FAILED: f"Error: {self.error}",
        }[self.status]

    def to_dict(self) -> dict:
        out = {
            "comedor_id": self.cafeteria_id,
            "week_id": self.week_id,
            "success": self.success,
            "status": self.status.value,
            "message": self.message,
            "history_id": self.history_id,
            "total_consumos": self.total_count,
        }
        if self.error:
            out["error"] = self.error
        return out


@dataclass(frozen=True)
class ArchiveReport:
    week_id: str
    processed_at: datetime
    results: List[ArchiveResult] = field(default_factory=list)

    @property
    def failed(self) -> List[ArchiveResult]:
        return [r for r in self.results if not r.success]

    def to_dict(self) -> dict:
        return {
            "message": "Migración completada",
            "processed_at": self.processed_at.isoformat(timespec="seconds"),
            "week_id": self.week_id,
            "details": [r.to_dict() for r in self.results],
        }
