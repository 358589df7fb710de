from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from .model import Company, CompanyStats


class CompanyRepository(Protocol):
    def list_active(self) -> Sequence[Company]:
        raise NotImplementedError

    def get_by_id(self, company_id: str) -> Optional[Company]:
        raise NotImplementedError

    def create(self, company: Company) -> bool:
        """Insert; returns False when the id already exists."""

        raise NotImplementedError

    def get_stats(self, company_id: str, *, today: date, week_id: str) -> CompanyStats:
        raise NotImplementedError
