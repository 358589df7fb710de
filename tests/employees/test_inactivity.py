from datetime import date, timedelta

import pytest

from src.comedor_system.comedor_system.core.exceptions import ValidationError
from src.comedor_system.comedor_system.employees.inactivity import InactivityService, classify_inactive
from src.comedor_system.comedor_system.employees.model import Employee
from tests.fakes import InMemoryEmployees

TODAY = date(2024, 6, 24)


def _emp(employee_id: str, name: str, days_ago, cafeteria_id: str = "C") -> Employee:
    last = TODAY - timedelta(days=days_ago) if days_ago is not None else None
    return Employee(employee_id=employee_id, cafeteria_id=cafeteria_id, name=name, last_active_date=last)


def test_threshold_is_strict_and_never_active_is_excluded():
    employees = [_emp("a", "A", 22), _emp("b", "B", 21), _emp("c", "C", None)]

    result = classify_inactive(employees, today=TODAY, threshold_days=21)

    assert [r.employee_id for r in result] == ["a"]
    assert result[0].days_inactive == 22


def test_sorted_longest_inactive_first():
    employees = [_emp("a", "Ana", 30), _emp("b", "Beto", 90), _emp("c", "Caro", 45)]

    result = classify_inactive(employees, today=TODAY)

    assert [r.days_inactive for r in result] == [90, 45, 30]


def test_service_filters_by_cafeteria_and_custom_threshold():
    repo = InMemoryEmployees(_emp("a", "Ana", 10), _emp("b", "Beto", 40), _emp("d", "Dani", 40, cafeteria_id="D"))
    svc = InactivityService(repo, threshold_days=21)

    assert [r.employee_id for r in svc.list_inactive(cafeteria_id="C", today=TODAY)] == ["b"]
    assert [r.employee_id for r in svc.list_inactive(cafeteria_id="C", threshold_days=7, today=TODAY)] == ["b", "a"]


def test_negative_threshold_rejected():
    svc = InactivityService(InMemoryEmployees())
    with pytest.raises(ValidationError):
        svc.list_inactive(threshold_days=-1, today=TODAY)
