"""
Iteration Event

The event triggered by the InstanceIterator plugin for each instance it
iterates over, once per phase: iterate.pre, iterate, iterate.post.

One IterationEvent is created per iterate() call and reused for every
instance of that call. Listeners must not keep a reference to it beyond
their own invocation: its instance and contextual service locator change
on the next iteration.
"""

from typing import Any, Optional, TYPE_CHECKING

from ...events.event import Event

if TYPE_CHECKING:
    from ...services.service_locator import ServiceLocator
    from ..controller import ActionController


class IterationEvent(Event):
    """Event envelope carrying the instance currently being iterated"""

    EVENT_ITERATE_PRE = "iterate.pre"
    EVENT_ITERATE = "iterate"
    EVENT_ITERATE_POST = "iterate.post"

    PHASES = (EVENT_ITERATE_PRE, EVENT_ITERATE, EVENT_ITERATE_POST)

    def __init__(self, name: Optional[str] = None, target: Any = None):
        super().__init__(name, target)
        self._controller: Optional["ActionController"] = None
        self._instance: Any = None
        self._default_service_locator: Optional["ServiceLocator"] = None
        self._contextual_service_locator: Any = None

    @property
    def controller(self) -> Optional["ActionController"]:
        return self._controller

    @property
    def instance(self) -> Any:
        return self._instance

    @property
    def default_service_locator(self) -> Optional["ServiceLocator"]:
        return self._default_service_locator

    @property
    def contextual_service_locator(self) -> Any:
        return self._contextual_service_locator

    def get_controller(self) -> Optional["ActionController"]:
        return self._controller

    def set_controller(self, controller: Optional["ActionController"]):
        self._controller = controller
        self.set_param("controller", controller)

    def get_instance(self) -> Any:
        return self._instance

    def set_instance(self, instance: Any):
        self._instance = instance
        self.set_param("instance", instance)

    def get_default_service_locator(self) -> Optional["ServiceLocator"]:
        return self._default_service_locator

    def set_default_service_locator(self, service_locator: "ServiceLocator"):
        self._default_service_locator = service_locator
        self.set_param("default_service_locator", service_locator)

    def get_contextual_service_locator(self) -> Any:
        """Get the per-instance service locator, None when not requested"""
        return self._contextual_service_locator

    def set_contextual_service_locator(self, service_locator: Any):
        self._contextual_service_locator = service_locator
        self.set_param("contextual_service_locator", service_locator)

    def get_service_locator(self) -> Optional["ServiceLocator"]:
        """Get the contextual service locator, falling back to the default one"""
        if self._contextual_service_locator is not None:
            return self._contextual_service_locator
        return self._default_service_locator


__all__ = ["IterationEvent"]
