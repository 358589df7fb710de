from __future__ import annotations

import logging
from typing import Optional

from ..cafeterias.repository import CafeteriaRepository
from ..common.validators import optional_text, require_non_empty
from ..core.constants import DEFAULT_TABLET_NICKNAME
from ..core.exceptions import NotFoundError
from .model import TabletConfig
from .repository import TabletRepository

logger = logging.getLogger(__name__)


class TabletService:
    """Use case: bind devices to a cafeteria."""

    def __init__(self, tablets: TabletRepository, cafeterias: CafeteriaRepository):
        self._tablets = tablets
        self._cafeterias = cafeterias

    def get(self, tablet_id: str) -> TabletConfig:
        tablet = self._tablets.get_by_id(tablet_id)
        if not tablet:
            raise NotFoundError("Tablet no encontrada")
        return tablet

    def list_all(self):
        return self._tablets.list_all()

    def save(
        self,
        *,
        tablet_id: str,
        active_cafeteria_id: Optional[str] = None,
        nickname: Optional[str] = None,
    ) -> TabletConfig:
        tablet_id = require_non_empty(tablet_id, "tablet_id")
        active_cafeteria_id = optional_text(active_cafeteria_id)
        if active_cafeteria_id and not self._cafeterias.get_by_id(active_cafeteria_id):
            raise NotFoundError("Comedor no encontrado")

        tablet = self._tablets.upsert(
            tablet_id=tablet_id,
            active_cafeteria_id=active_cafeteria_id,
            nickname=optional_text(nickname) or DEFAULT_TABLET_NICKNAME,
        )
        logger.info("Tablet %s bound to comedor=%s", tablet_id, active_cafeteria_id)
        return tablet

    def delete(self, tablet_id: str) -> None:
        if not self._tablets.delete_by_id(tablet_id):
            raise NotFoundError("Tablet no encontrada")

    def delete_all(self) -> int:
        deleted = self._tablets.delete_all()
        logger.warning("Removed all %d registered tablets", deleted)
        return deleted
