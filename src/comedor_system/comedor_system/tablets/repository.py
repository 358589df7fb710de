from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import TabletConfig


class TabletRepository(Protocol):
    def get_by_id(self, tablet_id: str) -> Optional[TabletConfig]:
        raise NotImplementedError

    def list_all(self) -> Sequence[TabletConfig]:
        raise NotImplementedError

    def upsert(self, *, tablet_id: str, active_cafeteria_id: Optional[str], nickname: str) -> TabletConfig:
        raise NotImplementedError

    def delete_by_id(self, tablet_id: str) -> bool:
        raise NotImplementedError

    def delete_all(self) -> int:
        raise NotImplementedError
