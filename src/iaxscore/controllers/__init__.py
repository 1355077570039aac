"""
Controllers - Actions, Plugins and Iteration Events

Structure:
- controller: ActionController base class
- plugins/: controller plugins and the plugin manager
- events/: events triggered by controller plugins
- exceptions: controller error hierarchy
"""

from .controller import ActionController
from .events.iteration_event import IterationEvent
from .exceptions import (
    ControllerError, InvalidArgumentError, MissingDependencyError,
    PluginNotFoundError, ActionNotFoundError
)
from .plugins.base import ControllerPlugin, PluginManager
from .plugins.instance_iterator import InstanceIterator

__all__ = [
    "ActionController", "IterationEvent",
    "ControllerPlugin", "PluginManager", "InstanceIterator",
    "ControllerError", "InvalidArgumentError", "MissingDependencyError",
    "PluginNotFoundError", "ActionNotFoundError"
]
