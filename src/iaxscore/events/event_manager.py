"""
Event Manager - Synchronous Listener Registry

🚀 Named Events, Inline Delivery:
The event manager keeps listeners per event name and delivers triggered
events to them synchronously, on the caller's thread, in a deterministic
order:

- Higher priority listeners run first
- Listeners with equal priority run in registration order
- A listener may stop propagation to skip the remaining listeners
- Listener exceptions propagate to the caller unchanged

Attaching returns a ListenerHandle, which is the only way to detach the
listener again.
"""

import itertools
import logging
from collections import defaultdict
from datetime import datetime
from typing import Any, Callable, Dict, List, Optional

from .event import Event

logger = logging.getLogger(__name__)

Listener = Callable[[Event], Any]


class EventManagerError(Exception):
    """Base exception for event manager errors"""
    pass


class InvalidListenerError(EventManagerError, TypeError):
    """Raised when a listener is not callable"""
    pass


class ListenerHandle:
    """Represents one listener attached to one event name"""

    def __init__(self, event_name: str, listener: Listener, priority: int, sequence: int):
        self.event_name = event_name
        self.listener = listener
        self.priority = priority
        self.sequence = sequence
        self.attached_at = datetime.now()

    def __call__(self, event: Event) -> Any:
        return self.listener(event)

    def __repr__(self) -> str:
        return (
            f"ListenerHandle(event_name={self.event_name!r}, "
            f"priority={self.priority}, sequence={self.sequence})"
        )


class ResponseCollection(list):
    """Return values of the listeners called by one trigger"""

    def __init__(self, *args):
        super().__init__(*args)
        self.stopped = False

    def first(self) -> Any:
        return self[0] if self else None

    def last(self) -> Any:
        return self[-1] if self else None


class EventManager:
    """
    In-process, synchronous event manager.

    Example:
        events = EventManager()
        handle = events.attach("iterate", lambda e: print(e.get_param("instance")))
        events.trigger("iterate", params={"instance": 42})
        events.detach(handle)
    """

    def __init__(self, default_priority: int = 1):
        self.default_priority = default_priority
        self._listeners: Dict[str, List[ListenerHandle]] = defaultdict(list)
        self._sequence = itertools.count()

    def attach(
        self,
        event_name: str,
        listener: Listener,
        priority: Optional[int] = None
    ) -> ListenerHandle:
        """
        Attach a listener to an event name.

        Args:
            event_name: Name of the event to listen to
            listener: Callable receiving the triggered event
            priority: Listener priority (higher = called first)

        Returns:
            ListenerHandle: Handle to pass to detach()
        """
        if not callable(listener):
            raise InvalidListenerError(
                f"Listener for '{event_name}' must be callable, got {type(listener).__name__}"
            )

        handle = ListenerHandle(
            event_name=event_name,
            listener=listener,
            priority=self.default_priority if priority is None else priority,
            sequence=next(self._sequence)
        )
        self._listeners[event_name].append(handle)

        logger.debug(f"Attached listener to '{event_name}' with priority {handle.priority}")
        return handle

    def detach(self, handle: ListenerHandle) -> bool:
        """
        Detach a previously attached listener.

        Returns:
            bool: False if the handle was not attached
        """
        listeners = self._listeners.get(handle.event_name)
        if not listeners or handle not in listeners:
            return False

        listeners.remove(handle)
        if not listeners:
            del self._listeners[handle.event_name]

        logger.debug(f"Detached listener from '{handle.event_name}'")
        return True

    def trigger(
        self,
        event_name: str,
        event: Optional[Event] = None,
        target: Any = None,
        params: Optional[Dict[str, Any]] = None
    ) -> ResponseCollection:
        """
        Trigger an event and call its listeners inline.

        When no event object is given one is created from target and params.
        The event name is stamped on the event before delivery.
        """
        if event is None:
            event = Event(event_name, target, params)
        else:
            event.set_name(event_name)
            if target is not None:
                event.set_target(target)
            if params:
                for key, value in params.items():
                    event.set_param(key, value)

        responses = ResponseCollection()

        # Snapshot so listeners attached or detached during delivery only
        # take effect on the next trigger
        for handle in self.get_listeners(event_name):
            responses.append(handle(event))

            if event.propagation_is_stopped():
                responses.stopped = True
                break

        return responses

    def get_listeners(self, event_name: str) -> List[ListenerHandle]:
        """Get listeners for an event name in delivery order"""
        listeners = list(self._listeners.get(event_name, ()))
        listeners.sort(key=lambda h: (-h.priority, h.sequence))
        return listeners

    def get_events(self) -> List[str]:
        """Get the names of all events with attached listeners"""
        return list(self._listeners.keys())

    def clear_listeners(self, event_name: str):
        self._listeners.pop(event_name, None)


__all__ = [
    "EventManager", "ListenerHandle", "ResponseCollection", "Listener",
    "EventManagerError", "InvalidListenerError"
]
