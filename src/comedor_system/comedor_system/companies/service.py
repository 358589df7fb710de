from __future__ import annotations

from datetime import date
from typing import Optional

from ..common.datetime_utils import get_week_id, today_local
from ..common.validators import optional_text, require_non_empty
from ..core.exceptions import ConflictError, NotFoundError
from .model import Company, CompanyStats
from .repository import CompanyRepository


class CompanyService:
    """Use case: manage companies (empresas)."""

    def __init__(self, companies: CompanyRepository):
        self._companies = companies

    def list_active(self):
        return self._companies.list_active()

    def get(self, company_id: str) -> Company:
        company = self._companies.get_by_id(company_id)
        if not company:
            raise NotFoundError("Empresa no encontrada")
        return company

    def create(
        self,
        *,
        company_id: str,
        name: str,
        description: Optional[str] = None,
        logo_url: Optional[str] = None,
    ) -> Company:
        company = Company(
            company_id=require_non_empty(company_id, "id"),
            name=require_non_empty(name, "nombre"),
            description=optional_text(description),
            logo_url=optional_text(logo_url),
            is_active=True,
        )
        if not self._companies.create(company):
            raise ConflictError(f"La empresa {company.company_id} ya existe")
        return company

    def stats(self, company_id: str, *, today: Optional[date] = None) -> CompanyStats:
        self.get(company_id)
        today = today or today_local()
        return self._companies.get_stats(company_id, today=today, week_id=get_week_id(today))
