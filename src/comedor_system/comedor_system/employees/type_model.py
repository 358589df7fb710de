from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class EmployeeType:
    type_id: int
    description: str
    is_active: bool = True

    def to_dict(self) -> dict:
        return {"id_tipo": self.type_id, "descripcion": self.description, "activo": self.is_active}
