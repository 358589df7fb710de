from __future__ import annotations

import uuid
from typing import Optional

from ..cafeterias.repository import CafeteriaRepository
from ..common.validators import optional_text, require_non_empty
from ..core.exceptions import ConflictError, NotFoundError, ValidationError
from .model import Employee
from .repository import EmployeeRepository
from .type_model import EmployeeType
from .type_repository import EmployeeTypeRepository


class EmployeeService:
    """Use case: manage the employee roster of a cafeteria (admin)."""

    def __init__(self, employees: EmployeeRepository, cafeterias: CafeteriaRepository):
        self._employees = employees
        self._cafeterias = cafeterias

    def list(self, *, cafeteria_id: Optional[str] = None, search: Optional[str] = None):
        return self._employees.list(cafeteria_id=cafeteria_id, search=optional_text(search))

    def get(self, employee_id: str) -> Employee:
        employee = self._employees.get_by_id(employee_id)
        if not employee:
            raise NotFoundError("Empleado no encontrado")
        return employee

    def create(
        self,
        *,
        cafeteria_id: str,
        name: str,
        number: Optional[str] = None,
        type: Optional[str] = None,
        pin: Optional[str] = None,
        employee_id: Optional[str] = None,
    ) -> Employee:
        cafeteria_id = require_non_empty(cafeteria_id, "comedor_id")
        if not self._cafeterias.get_by_id(cafeteria_id):
            raise NotFoundError("Comedor no encontrado")

        employee = Employee(
            employee_id=optional_text(employee_id) or str(uuid.uuid4()),
            cafeteria_id=cafeteria_id,
            name=require_non_empty(name, "name"),
            number=optional_text(number),
            type=optional_text(type),
            pin=self._clean_pin(pin),
        )
        if not self._employees.create(employee):
            raise ConflictError(f"El empleado {employee.employee_id} ya existe")
        return employee

    def update(
        self,
        employee_id: str,
        *,
        name: str,
        number: Optional[str] = None,
        type: Optional[str] = None,
        pin: Optional[str] = None,
    ) -> Employee:
        name = require_non_empty(name, "name")
        updated = self._employees.update(
            employee_id,
            name=name,
            number=optional_text(number),
            type=optional_text(type),
            pin=self._clean_pin(pin),
        )
        if not updated:
            raise NotFoundError("Empleado no encontrado")
        return self.get(employee_id)

    def delete(self, employee_id: str) -> Employee:
        employee = self.get(employee_id)
        if not self._employees.delete_by_id(employee_id):
            raise NotFoundError("Empleado no encontrado")
        return employee

    def verify_pin(self, employee_id: str, pin: Optional[str]) -> bool:
        """True when the employee has no PIN or ``pin`` matches it."""
        employee = self.get(employee_id)
        if not employee.pin:
            return True
        return (pin or "").strip() == employee.pin

    @staticmethod
    def _clean_pin(pin: Optional[str]) -> Optional[str]:
        pin = optional_text(pin)
        if pin is not None and not pin.isdigit():
            raise ValidationError("El PIN debe contener solo dígitos")
        return pin


class EmployeeTypeService:
    def __init__(self, types: EmployeeTypeRepository):
        self._types = types

    def list_active(self):
        return self._types.list_active()

    def create(self, description: str) -> EmployeeType:
        description = require_non_empty(description, "descripcion")
        type_id = self._types.create(description)
        if type_id is None:
            raise ConflictError(f"El tipo {description} ya existe")
        return EmployeeType(type_id=type_id, description=description)
