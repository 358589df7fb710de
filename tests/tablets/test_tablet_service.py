import pytest

from src.comedor_system.comedor_system.core.constants import DEFAULT_TABLET_NICKNAME
from src.comedor_system.comedor_system.core.exceptions import NotFoundError
from src.comedor_system.comedor_system.tablets.service import TabletService


def test_save_defaults_nickname_and_rebinds(repos):
    svc = TabletService(repos.tablets, repos.cafeterias)

    first = svc.save(tablet_id="tab-1", active_cafeteria_id="C")
    assert first.nickname == DEFAULT_TABLET_NICKNAME == "Sin sobrenombre"

    svc.save(tablet_id="tab-1", active_cafeteria_id="D", nickname="Caja 2")
    tablet = svc.get("tab-1")
    assert (tablet.active_cafeteria_id, tablet.nickname) == ("D", "Caja 2")
    assert len(svc.list_all()) == 1


def test_save_rejects_unknown_cafeteria(repos):
    with pytest.raises(NotFoundError):
        TabletService(repos.tablets, repos.cafeterias).save(tablet_id="tab-1", active_cafeteria_id="X")


def test_delete_one_and_all(repos):
    svc = TabletService(repos.tablets, repos.cafeterias)
    svc.save(tablet_id="a")
    svc.save(tablet_id="b")

    svc.delete("a")
    with pytest.raises(NotFoundError):
        svc.delete("a")
    assert svc.delete_all() == 1
    assert svc.list_all() == []
