"""
Service Locator Tests
"""

import pytest

from iaxscore.services.instance_aware import InstanceAware, InstanceAwareServiceLocator
from iaxscore.services.service_locator import (
    CircularDependencyError, ServiceLocator, ServiceLocatorError, ServiceNotFoundError
)


class Counter:
    def __init__(self):
        self.value = 0


def test_set_service_returns_same_object(service_locator):
    config = {"debug": True}
    service_locator.set_service("Config", config)

    assert service_locator.get("Config") is config
    assert service_locator.has("Config")


def test_unknown_service_raises(service_locator):
    with pytest.raises(ServiceNotFoundError, match="Service not registered: Missing"):
        service_locator.get("Missing")


def test_unknown_service_is_a_key_error(service_locator):
    with pytest.raises(KeyError):
        service_locator.get("Missing")


def test_shared_factory_builds_once(service_locator):
    service_locator.set_factory("Counter", lambda sl: Counter())

    assert service_locator.get("Counter") is service_locator.get("Counter")


def test_unshared_factory_builds_every_time(service_locator):
    service_locator.set_factory("Counter", lambda sl: Counter(), shared=False)

    assert service_locator.get("Counter") is not service_locator.get("Counter")


def test_factory_receives_locator(service_locator):
    service_locator.set_service("Greeting", "hello")
    service_locator.set_factory("Message", lambda sl: sl.get("Greeting").upper())

    assert service_locator.get("Message") == "HELLO"


def test_factory_exception_propagates_unchanged(service_locator):
    def broken(sl):
        raise ConnectionError("database offline")

    service_locator.set_factory("Database", broken)

    with pytest.raises(ConnectionError, match="database offline"):
        service_locator.get("Database")


def test_factory_can_be_retried_after_failure(service_locator):
    attempts = []

    def flaky(sl):
        attempts.append(1)
        if len(attempts) == 1:
            raise ConnectionError("first attempt")
        return "connected"

    service_locator.set_factory("Database", flaky)

    with pytest.raises(ConnectionError):
        service_locator.get("Database")
    assert service_locator.get("Database") == "connected"


def test_circular_dependency_detected(service_locator):
    service_locator.set_factory("A", lambda sl: sl.get("B"))
    service_locator.set_factory("B", lambda sl: sl.get("A"))

    with pytest.raises(CircularDependencyError, match="A -> B -> A"):
        service_locator.get("A")


def test_alias_resolves_to_service(service_locator):
    service_locator.set_service("EventManager", "events")
    service_locator.set_alias("events", "EventManager")

    assert service_locator.get("events") == "events"
    assert service_locator.has("events")


def test_override_disabled_by_default(service_locator):
    service_locator.set_service("Config", {})

    with pytest.raises(ServiceLocatorError):
        service_locator.set_service("Config", {})


def test_override_allowed_when_enabled():
    services = ServiceLocator(allow_override=True)
    services.set_service("Config", {"a": 1})
    services.set_service("Config", {"a": 2})

    assert services.get("Config") == {"a": 2}


def test_non_callable_factory_rejected(service_locator):
    with pytest.raises(ServiceLocatorError):
        service_locator.set_factory("Broken", "not a factory")


def test_scope_falls_back_to_parent(service_locator):
    service_locator.set_service("Config", {"root": True})
    scope = service_locator.create_scope()
    scope.set_service("Local", "local")

    assert scope.get("Config") == {"root": True}
    assert scope.has("Config")
    assert not service_locator.has("Local")


class TestInstanceAwareServiceLocator:

    def test_satisfies_instance_aware_protocol(self):
        assert isinstance(InstanceAwareServiceLocator(), InstanceAware)

    def test_plain_locator_is_not_instance_aware(self, service_locator):
        assert not isinstance(service_locator, InstanceAware)

    def test_factories_see_attached_instance(self, articles):
        scope = InstanceAwareServiceLocator()
        scope.set_factory("Title", lambda sl: sl.get_instance().title)
        first, second = list(articles)[:2]

        scope.set_instance(first)
        assert scope.get("Title") == "First"

        scope.set_instance(second)
        assert scope.get("Title") == "Second"

    def test_shared_services_kept_for_same_instance(self, articles):
        scope = InstanceAwareServiceLocator()
        scope.set_factory("Counter", lambda sl: Counter())
        article = list(articles)[0]

        scope.set_instance(article)
        counter = scope.get("Counter")
        scope.set_instance(article)

        assert scope.get("Counter") is counter

    def test_registered_services_survive_instance_change(self, articles):
        scope = InstanceAwareServiceLocator()
        config = {"page_size": 10}
        scope.set_service("Config", config)

        scope.set_instance(list(articles)[0])
        scope.set_instance(None)

        assert scope.get("Config") is config

    def test_created_as_child_scope(self, service_locator):
        service_locator.set_service("Config", {})
        scope = service_locator.create_scope(InstanceAwareServiceLocator)

        assert isinstance(scope, InstanceAwareServiceLocator)
        assert scope.get_instance() is None
        assert scope.get("Config") == {}
