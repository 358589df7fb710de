from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Cafeteria


class CafeteriaRepository(Protocol):
    def list(self, *, company_id: Optional[str] = None) -> Sequence[Cafeteria]:
        """Cafeterias with company name and employee count, ordered by name."""

        raise NotImplementedError

    def list_ids(self) -> Sequence[str]:
        raise NotImplementedError

    def get_by_id(self, cafeteria_id: str) -> Optional[Cafeteria]:
        raise NotImplementedError

    def create(self, cafeteria: Cafeteria) -> bool:
        """Insert; returns False when the id already exists."""

        raise NotImplementedError

    def update(self, cafeteria_id: str, *, name: str, require_pin: bool) -> bool:
        raise NotImplementedError

    def delete_by_id(self, cafeteria_id: str) -> bool:
        raise NotImplementedError
