from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .type_model import EmployeeType


class EmployeeTypeRepository(Protocol):
    def list_active(self) -> Sequence[EmployeeType]:
        raise NotImplementedError

    def create(self, description: str) -> Optional[int]:
        """Insert; returns None when the description already exists."""

        raise NotImplementedError
