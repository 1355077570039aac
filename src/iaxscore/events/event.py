"""
Event - Synchronous Event Envelope

🚀 Event-Driven Controllers:
An event carries a name, the object that triggered it and a bag of
parameters. Listeners receive the same event object in turn and may stop
propagation to prevent lower-priority listeners from running.
"""

from typing import Any, Dict, Optional


class Event:
    """
    Basic event envelope passed to every listener of a trigger.

    The event is mutable: the event manager stamps the name on it and
    listeners may set parameters or stop propagation.
    """

    def __init__(
        self,
        name: Optional[str] = None,
        target: Any = None,
        params: Optional[Dict[str, Any]] = None
    ):
        self._name = name
        self._target = target
        self._params: Dict[str, Any] = dict(params or {})
        self._propagation_stopped = False

    @property
    def name(self) -> Optional[str]:
        return self._name

    @property
    def target(self) -> Any:
        return self._target

    @property
    def params(self) -> Dict[str, Any]:
        """Get a copy of all event parameters"""
        return dict(self._params)

    def get_name(self) -> Optional[str]:
        return self._name

    def set_name(self, name: str):
        self._name = name

    def get_target(self) -> Any:
        return self._target

    def set_target(self, target: Any):
        self._target = target

    def get_param(self, name: str, default: Any = None) -> Any:
        """Get a single parameter, falling back to default"""
        return self._params.get(name, default)

    def set_param(self, name: str, value: Any):
        self._params[name] = value

    def set_params(self, params: Dict[str, Any]):
        """Replace all parameters"""
        self._params = dict(params)

    def stop_propagation(self, flag: bool = True):
        """Stop (or resume) delivery to the remaining listeners"""
        self._propagation_stopped = flag

    def propagation_is_stopped(self) -> bool:
        return self._propagation_stopped

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name={self._name!r}, target={self._target!r})"


__all__ = ["Event"]
