"""
Events - Named Events and Synchronous Delivery

Structure:
- event: the Event envelope passed to listeners
- event_manager: listener registry with attach / detach / trigger
"""

from .event import Event
from .event_manager import (
    EventManager, ListenerHandle, ResponseCollection,
    EventManagerError, InvalidListenerError
)

__all__ = [
    "Event", "EventManager", "ListenerHandle", "ResponseCollection",
    "EventManagerError", "InvalidListenerError"
]
