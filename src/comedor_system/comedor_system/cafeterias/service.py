from __future__ import annotations

import uuid
from typing import Optional

from ..common.validators import require_non_empty
from ..companies.repository import CompanyRepository
from ..core.exceptions import ConflictError, NotFoundError
from .model import Cafeteria
from .repository import CafeteriaRepository


class CafeteriaService:
    """Use case: manage cafeterias (comedores) of a company."""

    def __init__(self, cafeterias: CafeteriaRepository, companies: CompanyRepository):
        self._cafeterias = cafeterias
        self._companies = companies

    def list(self, *, company_id: Optional[str] = None):
        return self._cafeterias.list(company_id=company_id)

    def get(self, cafeteria_id: str) -> Cafeteria:
        cafeteria = self._cafeterias.get_by_id(cafeteria_id)
        if not cafeteria:
            raise NotFoundError("Comedor no encontrado")
        return cafeteria

    def create(
        self,
        *,
        name: str,
        company_id: str,
        require_pin: Optional[bool] = None,
        cafeteria_id: Optional[str] = None,
    ) -> Cafeteria:
        name = require_non_empty(name, "name")
        company_id = require_non_empty(company_id, "empresa_id")
        if not self._companies.get_by_id(company_id):
            raise NotFoundError("Empresa no encontrada")

        cafeteria = Cafeteria(
            cafeteria_id=(cafeteria_id or "").strip() or f"comedor_{uuid.uuid4().hex[:12]}",
            name=name,
            company_id=company_id,
            # Only an explicit False disables the PIN.
            require_pin=require_pin is not False,
        )
        if not self._cafeterias.create(cafeteria):
            raise ConflictError(f"El comedor {cafeteria.cafeteria_id} ya existe")
        return self.get(cafeteria.cafeteria_id)

    def update(self, cafeteria_id: str, *, name: Optional[str] = None, require_pin: Optional[bool] = None) -> Cafeteria:
        current = self.get(cafeteria_id)
        new_name = require_non_empty(name, "name") if name is not None else current.name
        new_pin = bool(require_pin) if require_pin is not None else current.require_pin

        if not self._cafeterias.update(cafeteria_id, name=new_name, require_pin=new_pin):
            raise NotFoundError("Comedor no encontrado")
        return self.get(cafeteria_id)

    def delete(self, cafeteria_id: str) -> Cafeteria:
        cafeteria = self.get(cafeteria_id)
        if not self._cafeterias.delete_by_id(cafeteria_id):
            raise NotFoundError("Comedor no encontrado")
        return cafeteria
