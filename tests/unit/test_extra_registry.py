import pytest
from telnyxbridge.core.extra import ExtraRegistry


@pytest.mark.unit
def test_get_set_delete():
    reg = ExtraRegistry()
    assert reg.get("u1") is None
    reg.set("u1", {"label": "A"})
    assert reg.get("u1") == {"label": "A"}
    assert "u1" in reg and len(reg) == 1
    assert reg.delete("u1") is True
    assert reg.delete("u1") is False
    assert reg.get("u1") is None


@pytest.mark.unit
def test_set_copies_the_bag():
    bag = {"label": "A"}
    reg = ExtraRegistry()
    reg.set("u1", bag)
    bag["label"] = "mutated"
    assert reg.get("u1") == {"label": "A"}


@pytest.mark.unit
def test_register_if_absent_keeps_first():
    reg = ExtraRegistry()
    assert reg.register_if_absent("u1", {"label": "first"}) is True
    assert reg.register_if_absent("u1", {"label": "second"}) is False
    assert reg.get("u1") == {"label": "first"}


@pytest.mark.unit
def test_reset_drops_everything():
    reg = ExtraRegistry()
    reg.set("u1", {})
    reg.set("u2", {})
    reg.reset()
    assert len(reg) == 0 and list(reg) == []
