"""
Controller Plugins - Base Class and Plugin Manager

Plugins are small helpers that controllers look up by name. The plugin
manager builds a fresh plugin per lookup and binds it to the requesting
controller. A registered object is copied before binding, so controllers
never steal it from each other.
"""

import copy
import logging
from typing import Callable, Dict, List, Optional, Union, TYPE_CHECKING

from ..exceptions import InvalidArgumentError, PluginNotFoundError

if TYPE_CHECKING:
    from ..controller import ActionController

logger = logging.getLogger(__name__)


class ControllerPlugin:
    """Base class for controller plugins"""

    def __init__(self, controller: Optional["ActionController"] = None):
        self._controller = controller

    @property
    def controller(self) -> Optional["ActionController"]:
        return self._controller

    def set_controller(self, controller: Optional["ActionController"]):
        self._controller = controller

    def get_controller(self) -> Optional["ActionController"]:
        return self._controller


PluginFactory = Callable[[], ControllerPlugin]


class PluginManager:
    """
    Registry of controller plugins.

    A plugin is registered either as an object or as a zero-argument
    factory called on each lookup. Looking up an object for a controller
    returns a shallow copy bound to that controller; its collaborators stay
    shared.
    """

    def __init__(self):
        self._plugins: Dict[str, ControllerPlugin] = {}
        self._factories: Dict[str, PluginFactory] = {}

    def register(self, name: str, plugin: Union[ControllerPlugin, PluginFactory]) -> "PluginManager":
        key = self._normalize(name)

        if isinstance(plugin, ControllerPlugin):
            self._plugins[key] = plugin
            self._factories.pop(key, None)
        elif callable(plugin):
            self._factories[key] = plugin
            self._plugins.pop(key, None)
        else:
            raise InvalidArgumentError(
                f"Plugin '{name}' must be a ControllerPlugin or a factory, got {type(plugin).__name__}"
            )

        logger.debug(f"Registered controller plugin '{key}'")
        return self

    def has(self, name: str) -> bool:
        key = self._normalize(name)
        return key in self._plugins or key in self._factories

    def get(self, name: str, controller: Optional["ActionController"] = None) -> ControllerPlugin:
        """Get a plugin bound to the given controller"""
        key = self._normalize(name)

        if key in self._plugins:
            plugin = self._plugins[key]
        elif key in self._factories:
            plugin = self._factories[key]()
        else:
            raise PluginNotFoundError(f"Controller plugin not registered: {name}")

        if controller is not None:
            if key in self._plugins:
                plugin = copy.copy(plugin)
            plugin.set_controller(controller)
        return plugin

    def get_registered_names(self) -> List[str]:
        return sorted(set(self._plugins) | set(self._factories))

    @staticmethod
    def _normalize(name: str) -> str:
        # instanceIterator, instance-iterator and instance_iterator are the same plugin
        return "".join(ch for ch in name.lower() if ch.isalnum())


__all__ = ["ControllerPlugin", "PluginManager", "PluginFactory"]
