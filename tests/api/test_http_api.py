from __future__ import annotations

from datetime import date

import pytest

from src.comedor_system.comedor_system.common.datetime_utils import get_week_id, today_local
from src.comedor_system.comedor_system.main import create_app


@pytest.fixture
def client(monkeypatch, container):
    monkeypatch.setenv("APP_ENV", "testing")
    app = create_app(container=container)
    return app.test_client()


def test_health(client):
    resp = client.get("/api/health")
    assert resp.status_code == 200
    assert resp.get_json()["database"] == "Connected"


def test_register_and_read_current_week(client):
    today = today_local().isoformat()
    for employee_id in ("E1", "E1", "E2"):
        resp = client.post("/api/consumos", json={"employee_id": employee_id, "comedor_id": "C", "consumption_date": today})
        assert resp.status_code == 200

    body = client.get("/api/consumos/semana-actual/C").get_json()

    assert body["success"] is True
    assert body["data"]["week_id"] == get_week_id(today_local())
    assert body["data"]["total_consumos"] == 3
    counts = {row["employee_id"]: row["consumption_count"] for row in body["data"]["consumos"]}
    assert counts == {"E1": 2, "E2": 1}


def test_register_error_statuses(client):
    assert client.post("/api/consumos", json={"employee_id": "NOPE", "comedor_id": "C"}).status_code == 404
    assert client.post("/api/consumos", json={"employee_id": "E3", "comedor_id": "C"}).status_code == 422
    assert client.post("/api/consumos", json={"comedor_id": "C"}).status_code == 400
    assert client.post("/api/consumos", data="not json").status_code == 400

    resp = client.post("/api/consumos", json={"employee_id": "E1", "comedor_id": "C", "consumption_date": "ayer"})
    assert resp.status_code == 400
    assert resp.get_json()["success"] is False


def test_archive_twice_reports_already_archived(client):
    client.post("/api/consumos", json={"employee_id": "E1", "comedor_id": "C"})

    first = client.post("/api/historial/C").get_json()
    second = client.post("/api/historial/C").get_json()

    assert first["data"]["status"] == "ARCHIVED"
    assert first["data"]["total_consumos"] == 1
    assert second["success"] is True
    assert second["data"]["status"] == "ALREADY_ARCHIVED"

    listing = client.get("/api/historial/C").get_json()["data"]
    assert len(listing) == 1

    detail = client.get(f"/api/historial/detalle/{listing[0]['history_id']}").get_json()["data"]
    assert detail["detalles"][0]["employee_name"] == "Ana López"


def test_migrate_all_cafeterias(client):
    body = client.post("/api/historial/migrar").get_json()

    assert body["success"] is True
    assert body["failed"] == 0
    assert {d["comedor_id"] for d in body["data"]["details"]} == {"C", "D"}


def test_clear_week(client):
    client.post("/api/consumos", json={"employee_id": "E1", "comedor_id": "C"})

    body = client.delete("/api/consumos/semana-actual/C").get_json()

    assert body["data"]["deleted"] == 1
    assert client.get("/api/consumos/semana-actual/C").get_json()["data"]["consumos"] == []
    assert client.delete("/api/consumos/semana-actual/X").status_code == 404


def test_company_conflict_and_cafeteria_listing(client):
    assert client.post("/api/empresas", json={"id": "emp_1", "nombre": "Duplicada"}).status_code == 409
    assert client.post("/api/empresas", json={"id": "emp_2", "nombre": "Clínica Sur"}).status_code == 201

    cafeterias = client.get("/api/comedores?empresa_id=emp_1").get_json()["data"]
    assert [c["comedor_id"] for c in cafeterias] == ["C", "D"]


def test_employee_crud_and_inactive(client, repos):
    created = client.post("/api/empleados", json={"comedor_id": "C", "name": "Nuevo", "pin": "4321"})
    assert created.status_code == 201
    employee_id = created.get_json()["data"]["internal_id"]

    assert client.get(f"/api/empleados/{employee_id}").get_json()["data"]["tiene_pin"] is True
    check = client.post(f"/api/empleados/{employee_id}/verificar-pin", json={"pin": "4321"}).get_json()
    assert check["data"]["valid"] is True

    repos.employees.touch("E1", date(2000, 1, 1))
    inactive = client.get("/api/empleados/inactivos/list?comedor_id=C").get_json()["data"]
    assert [i["internal_id"] for i in inactive] == ["E1"]

    assert client.delete(f"/api/empleados/{employee_id}").status_code == 200
    assert client.get(f"/api/empleados/{employee_id}").status_code == 404


def test_tablets(client):
    saved = client.post("/api/tablets", json={"tablet_id": "tab-1", "active_comedor_id": "C"}).get_json()
    assert saved["data"]["nickname"] == "Sin sobrenombre"

    assert len(client.get("/api/tablets").get_json()["data"]) == 1
    assert client.delete("/api/tablets/tab-1").status_code == 200
    assert client.get("/api/tablets/tab-1").status_code == 404


def test_inactive_threshold_accepts_zero_and_rejects_negative(client, repos):
    repos.employees.touch("E1", date(2000, 1, 1))

    zero = client.get("/api/empleados/inactivos/list?comedor_id=C&dias=0")
    assert zero.status_code == 200
    assert [i["internal_id"] for i in zero.get_json()["data"]] == ["E1"]

    assert client.get("/api/empleados/inactivos/list?dias=-1").status_code == 400
    assert client.get("/api/empleados/inactivos/list?dias=abc").status_code == 400
