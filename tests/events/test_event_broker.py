from datetime import date, datetime

from src.comedor_system.comedor_system.events.broker import ConsumptionEvent, ConsumptionEventBroker


def _event(employee_id: str = "E1") -> ConsumptionEvent:
    return ConsumptionEvent(
        employee_id=employee_id,
        employee_name="Ana",
        employee_type=None,
        cafeteria_id="C",
        consumption_date=date(2024, 6, 3),
        count=1,
        timestamp=datetime(2024, 6, 3, 13, 5),
    )


def test_publish_reaches_every_subscriber():
    broker = ConsumptionEventBroker(queue_size=5)
    a, b = broker.subscribe(), broker.subscribe()

    assert broker.publish(_event()) == 2
    assert a.get_nowait().employee_id == "E1"
    assert b.get_nowait().employee_id == "E1"


def test_full_queue_drops_without_blocking():
    broker = ConsumptionEventBroker(queue_size=1)
    slow = broker.subscribe()
    fast = broker.subscribe()

    broker.publish(_event("E1"))
    fast.get_nowait()
    delivered = broker.publish(_event("E2"))

    assert delivered == 1
    assert slow.qsize() == 1
    assert slow.get_nowait().employee_id == "E1"
    assert fast.get_nowait().employee_id == "E2"


def test_listen_yields_heartbeat_and_unsubscribes_on_close():
    broker = ConsumptionEventBroker(queue_size=5)
    stream = broker.listen(heartbeat_seconds=0.01)

    assert next(stream) is None
    assert broker.subscriber_count == 1

    broker.publish(_event())
    assert next(stream).employee_id == "E1"

    stream.close()
    assert broker.subscriber_count == 0


def test_publish_without_subscribers():
    assert ConsumptionEventBroker().publish(_event()) == 0
