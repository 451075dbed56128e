import pytest

from zoneprof.registry import ZoneRegistry


@pytest.mark.fast
def test_register_assigns_increasing_ids():
    registry = ZoneRegistry()

    assert registry.register_or_get("update") == 1
    assert registry.register_or_get("draw") == 2
    assert registry.names() == ["update", "draw"]
    assert len(registry) == 2


@pytest.mark.fast
def test_register_same_name_returns_same_id():
    registry = ZoneRegistry()
    first = registry.register_or_get("update")
    registry.register_or_get("draw")

    assert registry.register_or_get("update") == first
    assert len(registry) == 2


@pytest.mark.fast
def test_lookups_are_consistent_both_ways():
    registry = ZoneRegistry()
    zone_id = registry.register_or_get("update")

    assert registry.name_of(zone_id) == "update"
    assert registry.id_of("update") == zone_id
    assert registry.id_of("missing") is None
    assert "update" in registry
    assert "missing" not in registry
