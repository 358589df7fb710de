from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class TabletConfig:
    """Device bound to (at most) one active cafeteria."""

    tablet_id: str
    active_cafeteria_id: Optional[str]
    nickname: str
    updated_at: Optional[datetime] = None

    def to_dict(self) -> dict:
        return {
            "tablet_id": self.tablet_id,
            "active_comedor_id": self.active_cafeteria_id,
            "nickname": self.nickname,
            "updated_at": self.updated_at.isoformat(timespec="seconds") if self.updated_at else None,
        }
