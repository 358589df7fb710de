import pytest

from src.comedor_system.comedor_system.core.exceptions import ConflictError, NotFoundError, ValidationError
from src.comedor_system.comedor_system.employees.service import EmployeeService, EmployeeTypeService


def test_create_generates_id_and_starts_without_activity(repos):
    svc = EmployeeService(repos.employees, repos.cafeterias)

    employee = svc.create(cafeteria_id="C", name="  Diego Mora ", number="400", pin="9876")

    assert employee.employee_id
    assert employee.name == "Diego Mora"
    assert employee.last_active_date is None
    assert employee.to_dict()["tiene_pin"] is True
    assert "pin" not in employee.to_dict()


def test_create_rejects_unknown_cafeteria_duplicate_id_and_bad_pin(repos):
    svc = EmployeeService(repos.employees, repos.cafeterias)

    with pytest.raises(NotFoundError):
        svc.create(cafeteria_id="X", name="Nadie")
    with pytest.raises(ConflictError):
        svc.create(cafeteria_id="C", name="Otra Ana", employee_id="E1")
    with pytest.raises(ValidationError):
        svc.create(cafeteria_id="C", name="Pin Raro", pin="12ab")


def test_search_matches_name_or_number(repos):
    svc = EmployeeService(repos.employees, repos.cafeterias)

    assert [e.employee_id for e in svc.list(search="bruno")] == ["E2"]
    assert [e.employee_id for e in svc.list(search="100")] == ["E1"]
    assert [e.employee_id for e in svc.list(cafeteria_id="D")] == ["E3"]


def test_update_and_delete(repos):
    svc = EmployeeService(repos.employees, repos.cafeterias)

    updated = svc.update("E1", name="Ana María López", number="101", type="Externo")
    assert updated.name == "Ana María López"

    svc.delete("E1")
    with pytest.raises(NotFoundError):
        svc.get("E1")
    with pytest.raises(NotFoundError):
        svc.update("E1", name="X")


def test_verify_pin(repos):
    svc = EmployeeService(repos.employees, repos.cafeterias)

    assert svc.verify_pin("E2", "1234") is True
    assert svc.verify_pin("E2", "0000") is False
    assert svc.verify_pin("E1", None) is True


def test_employee_types_conflict_on_duplicate(repos):
    svc = EmployeeTypeService(repos.types)

    created = svc.create("Visitante")
    assert created.description == "Visitante"
    assert [t.description for t in svc.list_active()][-1] == "Visitante"
    with pytest.raises(ConflictError):
        svc.create("guardia")
