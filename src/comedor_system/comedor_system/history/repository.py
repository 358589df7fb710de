from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import ConsumptionHistory, HistoryDetail


class HistoryRepository(Protocol):
    def create_from_ledger(self, cafeteria_id: str, week_id: str) -> Optional[ConsumptionHistory]:
        """Snapshot the week's ledger into one history row plus one detail per employee.

        Atomic per (cafeteria, week): returns None, writing nothing, when the
        week was already archived.
        """

        raise NotImplementedError

    def get_by_week(self, cafeteria_id: str, week_id: str) -> Optional[ConsumptionHistory]:
        raise NotImplementedError

    def get_by_id(self, history_id: int) -> Optional[ConsumptionHistory]:
        raise NotImplementedError

    def list_for_cafeteria(self, cafeteria_id: str, *, limit: int) -> Sequence[ConsumptionHistory]:
        """Most recently archived first."""

        raise NotImplementedError

    def list_details(self, history_id: int) -> Sequence[HistoryDetail]:
        raise NotImplementedError
