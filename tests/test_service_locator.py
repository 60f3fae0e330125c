import pytest

from admin_gui.services.service_locator import (
    ServiceAlreadyRegisteredError,
    ServiceLocator,
    ServiceNotFoundError,
)


def test_register_and_get():
    loc = ServiceLocator()
    loc.register("a", 1)
    assert loc.get("a") == 1
    assert loc.get_typed("a", int) == 1
    with pytest.raises(TypeError):
        loc.get_typed("a", str)


def test_double_registration_guard():
    loc = ServiceLocator()
    loc.register("a", 1)
    with pytest.raises(ServiceAlreadyRegisteredError):
        loc.register("a", 2)
    loc.register("a", 2, allow_override=True)
    assert loc.get("a") == 2


def test_missing_service():
    loc = ServiceLocator()
    with pytest.raises(ServiceNotFoundError):
        loc.get("nope")
    assert loc.try_get("nope", "fallback") == "fallback"


def test_override_context_restores():
    loc = ServiceLocator()
    loc.register("bus", "real")
    with loc.override_context(bus="fake", extra=1):
        assert loc.get("bus") == "fake"
        assert loc.get("extra") == 1
    assert loc.get("bus") == "real"
    assert "extra" not in loc.list_keys()
    loc.unregister("bus")
    assert loc.list_keys() == []
