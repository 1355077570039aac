"""
Instance-Aware Services

A service is instance-aware when it can be told which domain instance it is
currently working on. The InstanceIterator plugin attaches each instance to
an instance-aware contextual locator before triggering the iteration events,
and detaches it afterwards.
"""

from typing import Any, Optional, Protocol, runtime_checkable

from .service_locator import ServiceLocator


@runtime_checkable
class InstanceAware(Protocol):
    """Capability of tracking the instance currently being operated on"""

    def set_instance(self, instance: Any) -> None:
        ...

    def get_instance(self) -> Any:
        ...


class InstanceAwareServiceLocator(ServiceLocator):
    """
    Service locator scoped to one domain instance at a time.

    Factories registered here can read the attached instance through
    get_instance(). Shared services built by factories belong to the instance
    they were built for and are dropped whenever the attached instance
    changes; services registered with set_service() are kept.

    Example:
        orders = InstanceAwareServiceLocator(parent=root)
        orders.set_factory("Invoice", lambda sl: Invoice(sl.get_instance()))
        root.set_service("OrderServices", orders)
    """

    def __init__(self, parent: Optional[ServiceLocator] = None, allow_override: bool = False):
        super().__init__(parent=parent, allow_override=allow_override)
        self._instance: Any = None

    def set_instance(self, instance: Any) -> None:
        if instance is not self._instance:
            self._drop_instance_services()
        self._instance = instance

    def get_instance(self) -> Any:
        return self._instance

    def _drop_instance_services(self):
        for name, registration in self._registrations.items():
            if registration.factory is not None:
                self._shared_instances.pop(name, None)


__all__ = ["InstanceAware", "InstanceAwareServiceLocator"]
