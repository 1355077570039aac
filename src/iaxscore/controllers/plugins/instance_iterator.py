"""
Instance Iterator - Controller Plugin

🎯 Per-Instance Lifecycle Events:
Controller plugin that triggers the iteration events for each instance of
an iterable, passing the instance and the service locators to listeners.

For every instance, in iteration order:
1. The instance is set on the shared IterationEvent
2. The contextual service locator is resolved (when a service name is given)
   and attached to the instance if it is instance-aware
3. iterate.pre, iterate and iterate.post are triggered, in that order
4. The instance is detached from the contextual service locator

Example:
    def render_row(event):
        rows.append(event.instance.title)

    controller.plugin("instance_iterator").iterate(
        articles, "ArticleServices", render_row
    )
"""

import logging
from typing import Any, Callable, Iterable, Optional, TYPE_CHECKING

from ..events.iteration_event import IterationEvent
from ..exceptions import InvalidArgumentError, MissingDependencyError
from ...events.event_manager import EventManager
from ...services.instance_aware import InstanceAware
from ...services.service_locator import ServiceLocator
from .base import ControllerPlugin

if TYPE_CHECKING:
    from ..controller import ActionController

logger = logging.getLogger(__name__)


class InstanceIterator(ControllerPlugin):
    """
    Triggers iteration events for each instance in an iterable.

    The event manager and the service locator are injected through the
    constructor or the setters; iterate() fails with MissingDependencyError
    when either was never provided.
    """

    def __init__(
        self,
        event_manager: Optional[EventManager] = None,
        service_locator: Optional[ServiceLocator] = None,
        controller: Optional["ActionController"] = None
    ):
        super().__init__(controller)
        self._event_manager = event_manager
        self._service_locator = service_locator

    def iterate(
        self,
        iterator: Iterable[Any],
        context_service_name: Optional[str] = None,
        callback: Optional[Callable[[IterationEvent], Any]] = None
    ) -> int:
        """
        Trigger the iteration events for each instance in the iterator.

        Args:
            iterator: The instances to iterate over
            context_service_name: Name of the service holding the service
                locator specific to the type of instance being iterated on
            callback: Listener attached to the 'iterate' event before
                iterating and detached afterwards

        Returns:
            int: Number of instances iterated
        """
        if callback is not None and not callable(callback):
            raise InvalidArgumentError("Invalid callback provided as 'callback' parameter.")

        event_manager = self.get_event_manager()
        service_locator = self.get_service_locator()

        event = IterationEvent()
        event.set_target(self)
        event.set_controller(self.get_controller())
        event.set_default_service_locator(service_locator)

        callback_handle = None
        if callback is not None:
            callback_handle = event_manager.attach(IterationEvent.EVENT_ITERATE, callback)

        count = 0
        try:
            for instance in iterator:
                event.set_instance(instance)

                contextual_service_locator = (
                    service_locator.get(context_service_name)
                    if context_service_name
                    else None
                )
                event.set_contextual_service_locator(contextual_service_locator)

                self._trigger_phases(event_manager, event, contextual_service_locator)
                count += 1
        finally:
            if callback_handle is not None:
                event_manager.detach(callback_handle)

        logger.debug(f"Iterated {count} instances (context service: {context_service_name})")
        return count

    def _trigger_phases(
        self,
        event_manager: EventManager,
        event: IterationEvent,
        contextual_service_locator: Any
    ):
        """Trigger the three phases with the instance attached to the contextual locator"""
        instance_aware = isinstance(contextual_service_locator, InstanceAware)

        if instance_aware:
            contextual_service_locator.set_instance(event.instance)

        # The contextual locator must not stay associated with the instance
        # once its iteration is over, even when a listener raises
        try:
            for phase in IterationEvent.PHASES:
                event_manager.trigger(phase, event)
        finally:
            if instance_aware:
                contextual_service_locator.set_instance(None)

    def set_event_manager(self, event_manager: EventManager):
        self._event_manager = event_manager

    def get_event_manager(self) -> EventManager:
        if self._event_manager is None:
            raise MissingDependencyError("Event manager not provided.")
        return self._event_manager

    def set_service_locator(self, service_locator: ServiceLocator):
        self._service_locator = service_locator

    def get_service_locator(self) -> ServiceLocator:
        if self._service_locator is None:
            raise MissingDependencyError("Service locator not provided.")
        return self._service_locator


__all__ = ["InstanceIterator"]
