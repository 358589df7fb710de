from __future__ import annotations

import logging
import threading
from datetime import date

import pytest

from src.comedor_system.comedor_system.consumption.service import ConsumptionRegistrar
from src.comedor_system.comedor_system.core.exceptions import (
    ConflictError,
    InvalidReferenceError,
    NotFoundError,
    ValidationError,
)
from src.comedor_system.comedor_system.employees.inactivity import InactivityService
from src.comedor_system.comedor_system.events.broker import ConsumptionEventBroker
from src.comedor_system.comedor_system.history.service import HistoryArchiver

MONDAY = date(2024, 6, 3)


class ExplodingBroker:
    def publish(self, event):
        raise RuntimeError("broker down")


def test_register_twice_same_day_increments_single_entry(repos):
    svc = ConsumptionRegistrar(repos.consumption, repos.employees)

    first = svc.register("E1", "C", MONDAY)
    second = svc.register("E1", "C", MONDAY)

    assert first.count == 1
    assert second.count == 2
    assert len(repos.consumption.entries) == 1
    assert repos.consumption.entries[("E1", "C", MONDAY)]["count"] == 2


def test_register_stamps_week_day_and_last_active(repos):
    svc = ConsumptionRegistrar(repos.consumption, repos.employees)

    result = svc.register("E1", "C", date(2024, 6, 5))

    assert result.week_id == "2024-6-3"
    assert result.day_name == "Miércoles"
    assert result.employee_name == "Ana López"
    assert repos.employees.get_by_id("E1").last_active_date == date(2024, 6, 5)


def test_two_employees_same_day_get_independent_entries(repos):
    svc = ConsumptionRegistrar(repos.consumption, repos.employees)

    svc.register("E1", "C", MONDAY)
    svc.register("E2", "C", MONDAY)

    assert repos.consumption.entries[("E1", "C", MONDAY)]["count"] == 1
    assert repos.consumption.entries[("E2", "C", MONDAY)]["count"] == 1


def test_concurrent_registrations_end_in_one_entry_with_count_n(repos):
    svc = ConsumptionRegistrar(repos.consumption, repos.employees)
    n = 25
    barrier = threading.Barrier(n)

    def worker():
        barrier.wait()
        svc.register("E1", "C", MONDAY)

    threads = [threading.Thread(target=worker) for _ in range(n)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert len(repos.consumption.entries) == 1
    assert repos.consumption.entries[("E1", "C", MONDAY)]["count"] == n


def test_unknown_employee_is_not_found(repos):
    svc = ConsumptionRegistrar(repos.consumption, repos.employees)

    with pytest.raises(NotFoundError):
        svc.register("NOPE", "C", MONDAY)
    assert repos.consumption.entries == {}


def test_employee_of_other_cafeteria_is_invalid_reference(repos):
    svc = ConsumptionRegistrar(repos.consumption, repos.employees)

    with pytest.raises(InvalidReferenceError):
        svc.register("E3", "C", MONDAY)
    assert repos.consumption.entries == {}


def test_missing_ids_are_validation_errors(repos):
    svc = ConsumptionRegistrar(repos.consumption, repos.employees)

    with pytest.raises(ValidationError):
        svc.register("", "C", MONDAY)
    with pytest.raises(ValidationError):
        svc.register("E1", None, MONDAY)


def test_registration_publishes_event(repos):
    broker = ConsumptionEventBroker(queue_size=5)
    q = broker.subscribe()
    svc = ConsumptionRegistrar(repos.consumption, repos.employees, broker=broker)

    svc.register("E2", "C", MONDAY)

    event = q.get_nowait()
    assert event.employee_id == "E2"
    assert event.cafeteria_id == "C"
    assert event.employee_type == "Guardia"
    assert event.count == 1


def test_broker_failure_does_not_fail_registration(repos):
    svc = ConsumptionRegistrar(repos.consumption, repos.employees, broker=ExplodingBroker())

    result = svc.register("E1", "C", MONDAY)

    assert result.success is True
    assert repos.consumption.entries[("E1", "C", MONDAY)]["count"] == 1


def test_backdated_registration_keeps_most_recent_activity(repos):
    svc = ConsumptionRegistrar(repos.consumption, repos.employees)
    today = date(2024, 6, 24)

    svc.register("E1", "C", today, today=today)
    svc.register("E1", "C", date(2024, 5, 1), today=today)

    assert repos.employees.get_by_id("E1").last_active_date == today
    assert InactivityService(repos.employees).list_inactive(cafeteria_id="C", today=today) == []


def test_backfill_into_archived_week_is_rejected(repos):
    svc = ConsumptionRegistrar(repos.consumption, repos.employees, history=repos.history)
    HistoryArchiver(repos.history, repos.cafeterias).archive_week("C", "2024-6-3", today=date(2024, 6, 9))

    with pytest.raises(ConflictError):
        svc.register("E1", "C", date(2024, 6, 5), today=date(2024, 6, 12))
    assert repos.consumption.entries == {}


def test_backfill_into_open_past_week_is_logged(repos, caplog):
    svc = ConsumptionRegistrar(repos.consumption, repos.employees, history=repos.history)

    with caplog.at_level(logging.WARNING):
        result = svc.register("E1", "C", date(2024, 6, 5), today=date(2024, 6, 12))

    assert result.count == 1
    assert "past week 2024-6-3" in caplog.text


def test_same_week_registration_is_not_a_backfill(repos, caplog):
    svc = ConsumptionRegistrar(repos.consumption, repos.employees, history=repos.history)

    with caplog.at_level(logging.WARNING):
        svc.register("E1", "C", date(2024, 6, 3), today=date(2024, 6, 9))

    assert "past week" not in caplog.text
