from __future__ import annotations

from enum import Enum


class ArchiveStatus(str, Enum):
    """Resultado de archivar la semana de un comedor."""

    ARCHIVED = "ARCHIVED"
    ALREADY_ARCHIVED = "ALREADY_ARCHIVED"
    FAILED = "FAILED"
