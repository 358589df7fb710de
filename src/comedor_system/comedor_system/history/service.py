from __future__ import annotations

import logging
from datetime import date
from typing import List, Optional, Tuple

from ..cafeterias.repository import CafeteriaRepository
from ..common.datetime_utils import get_week_id, now_local, parse_week_id, today_local
from ..core.constants import DEFAULT_HISTORY_LIMIT
from ..core.enums import ArchiveStatus
from ..core.exceptions import NotFoundError, ValidationError
from .model import ArchiveReport, ArchiveResult, ConsumptionHistory, HistoryDetail
from .repository import HistoryRepository

logger = logging.getLogger(__name__)


class HistoryArchiver:
    """Use case: snapshot a cafeteria's weekly ledger into permanent history.

    ``archive_week`` is safe to re-run: a week that is already archived yields
    ALREADY_ARCHIVED and writes nothing.
    """

    def __init__(self, history: HistoryRepository, cafeterias: CafeteriaRepository):
        self._history = history
        self._cafeterias = cafeterias

    def _resolve_week(self, week_id: Optional[str], today: date) -> str:
        if not week_id:
            return get_week_id(today)
        monday = parse_week_id(week_id)
        if monday > today:
            raise ValidationError(f"La semana {week_id} aún no comienza")
        # Normalizes zero padded input ("2024-06-03") to the stored form.
        return get_week_id(monday)

    def archive_week(
        self,
        cafeteria_id: str,
        week_id: Optional[str] = None,
        *,
        today: Optional[date] = None,
    ) -> ArchiveResult:
        week_id = self._resolve_week(week_id, today or today_local())
        if not self._cafeterias.get_by_id(cafeteria_id):
            raise NotFoundError(f"Comedor {cafeteria_id} no encontrado")

        created = self._history.create_from_ledger(cafeteria_id, week_id)
        if created is None:
            existing = self._history.get_by_week(cafeteria_id, week_id)
            logger.info("Week %s of comedor=%s already archived", week_id, cafeteria_id)
            return ArchiveResult(
                cafeteria_id=cafeteria_id,
                week_id=week_id,
                status=ArchiveStatus.ALREADY_ARCHIVED,
                history_id=existing.history_id if existing else None,
                total_count=existing.total_count if existing else None,
            )

        logger.info(
            "Archived week %s of comedor=%s history_id=%d total=%d employees=%d",
            week_id,
            cafeteria_id,
            created.history_id,
            created.total_count,
            created.employee_count,
        )
        return ArchiveResult(
            cafeteria_id=cafeteria_id,
            week_id=week_id,
            status=ArchiveStatus.ARCHIVED,
            history_id=created.history_id,
            total_count=created.total_count,
        )

    def archive_all(self, week_id: Optional[str] = None, *, today: Optional[date] = None) -> ArchiveReport:
        """Archive the week for every cafeteria; one failure never stops the others."""
        today = today or today_local()
        week_id = self._resolve_week(week_id, today)
        cafeteria_ids = self._cafeterias.list_ids()
        logger.info("Archiving week %s for %d cafeterias", week_id, len(cafeteria_ids))

        results: List[ArchiveResult] = []
        for cafeteria_id in cafeteria_ids:
            try:
                results.append(self.archive_week(cafeteria_id, week_id, today=today))
            except Exception as e:
                logger.exception("Archiving comedor=%s week=%s failed", cafeteria_id, week_id)
                results.append(
                    ArchiveResult(
                        cafeteria_id=cafeteria_id,
                        week_id=week_id,
                        status=ArchiveStatus.FAILED,
                        error=str(e) or e.__class__.__name__,
                    )
                )

        return ArchiveReport(week_id=week_id, processed_at=now_local(), results=results)

    def list_for_cafeteria(self, cafeteria_id: str, *, limit: int = DEFAULT_HISTORY_LIMIT) -> List[ConsumptionHistory]:
        if not self._cafeterias.get_by_id(cafeteria_id):
            raise NotFoundError("Comedor no encontrado")
        return list(self._history.list_for_cafeteria(cafeteria_id, limit=limit))

    def get_detail(self, history_id: int) -> Tuple[ConsumptionHistory, List[HistoryDetail]]:
        history = self._history.get_by_id(history_id)
        if not history:
            raise NotFoundError("Historial no encontrado")
        return history, list(self._history.list_details(history_id))
