from .base import ControllerPlugin, PluginManager
from .instance_iterator import InstanceIterator

__all__ = ["ControllerPlugin", "PluginManager", "InstanceIterator"]
