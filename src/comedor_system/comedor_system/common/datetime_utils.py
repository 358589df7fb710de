from __future__ import annotations

from datetime import date, datetime, timedelta

from ..core.constants import DAY_NAMES, MONTH_NAMES
from ..core.exceptions import ValidationError


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    try:
        return datetime.strptime(value, "%Y-%m-%d").date()
    except (TypeError, ValueError):
        raise ValidationError(f"Fecha inválida: {value!r}")


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()


def today_local() -> date:
    return now_local().date()


def week_monday(d: date) -> date:
    """Monday of the Monday-Sunday week containing ``d``."""
    return d - timedelta(days=d.weekday())


def get_week_id(d: date) -> str:
    """Week key of ``d``: its Monday as ``{year}-{month}-{day}``.

    Month and day are not zero padded ("2024-6-3"); stored ``week_id`` values
    use this exact format.
    """
    monday = week_monday(d)
    return f"{monday.year}-{monday.month}-{monday.day}"


def parse_week_id(week_id: str) -> date:
    """Inverse of :func:`get_week_id`; rejects keys that are not a Monday."""
    try:
        year, month, day = (int(p) for p in str(week_id).split("-"))
        monday = date(year, month, day)
    except (TypeError, ValueError):
        raise ValidationError(f"Semana inválida: {week_id!r}")
    if monday.weekday() != 0:
        raise ValidationError(f"La semana {week_id} no inicia en lunes")
    return monday


def day_name(d: date) -> str:
    return DAY_NAMES[d.weekday()]


def week_range_label(d: date) -> str:
    monday = week_monday(d)
    sunday = monday + timedelta(days=6)
    return (
        f"Semana del Lunes {monday.day} de {MONTH_NAMES[monday.month - 1]} "
        f"al Domingo {sunday.day} de {MONTH_NAMES[sunday.month - 1]}"
    )
