from datetime import date

import pytest

from src.comedor_system.comedor_system.consumption.service import ConsumptionRegistrar, WeeklyLedger
from src.comedor_system.comedor_system.core.exceptions import NotFoundError


def _register(repos, employee_id, cafeteria_id, d, times=1):
    svc = ConsumptionRegistrar(repos.consumption, repos.employees)
    for _ in range(times):
        svc.register(employee_id, cafeteria_id, d)


def test_current_week_lists_only_this_week_of_this_cafeteria(repos, fixed_today):
    _register(repos, "E1", "C", date(2024, 6, 3), times=2)
    _register(repos, "E2", "C", date(2024, 6, 4))
    _register(repos, "E1", "C", date(2024, 5, 31))  # previous week
    _register(repos, "E3", "D", date(2024, 6, 3))  # other cafeteria

    rows = WeeklyLedger(repos.consumption, repos.cafeterias).current_week("C", today=fixed_today)

    assert [(r.employee_id, r.count, r.day_name) for r in rows] == [
        ("E1", 2, "Lunes"),
        ("E2", 1, "Martes"),
    ]
    assert {r.week_id for r in rows} == {"2024-6-3"}


def test_week_view_adds_label_total_and_daily_summary(repos, fixed_today):
    _register(repos, "E1", "C", date(2024, 6, 3), times=2)
    _register(repos, "E2", "C", date(2024, 6, 3))

    view = WeeklyLedger(repos.consumption, repos.cafeterias).week_view("C", today=fixed_today)

    assert view.week_id == "2024-6-3"
    assert view.label == "Semana del Lunes 3 de junio al Domingo 9 de junio"
    assert view.total_count == 3
    assert [(d.day_name, d.total_count, d.employee_count) for d in view.days] == [("Lunes", 3, 2)]


def test_clear_log_removes_current_week_only(repos, fixed_today):
    _register(repos, "E1", "C", date(2024, 6, 3))
    _register(repos, "E2", "C", date(2024, 6, 5))
    _register(repos, "E1", "C", date(2024, 5, 27))

    deleted = WeeklyLedger(repos.consumption, repos.cafeterias).clear_log("C", today=fixed_today)

    assert deleted == 2
    assert list(repos.consumption.entries) == [("E1", "C", date(2024, 5, 27))]


def test_clear_log_unknown_cafeteria(repos, fixed_today):
    with pytest.raises(NotFoundError):
        WeeklyLedger(repos.consumption, repos.cafeterias).clear_log("X", today=fixed_today)
