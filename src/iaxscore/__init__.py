"""
IaxsCore - Controller Layer for Instance-Centric Web Applications

Structure:

🎯 entities/       - Domain instances and instance collections
🚀 events/         - Named events and the synchronous event manager
🔧 services/       - Service locator and instance-aware service scopes
🎮 controllers/    - Action controllers, plugins and iteration events
⚙️ infrastructure/ - Configuration, logging and application wiring
⚡ web/            - Starlette endpoints for controller actions

Quick Start:
    from iaxscore import ActionController, Instance, InstanceCollection, configure_iaxs

    class Article(Instance):
        title: str

    class ArticleController(ActionController):
        def titles_action(self):
            titles = []
            self.plugin("instance_iterator").iterate(
                articles, callback=lambda event: titles.append(event.instance.title)
            )
            return {"titles": titles}

    services = configure_iaxs()
    ArticleController(services).dispatch("titles")
"""

from .entities.instance import Instance, InstanceCollection
from .events.event import Event
from .events.event_manager import EventManager, ListenerHandle
from .services.service_locator import ServiceLocator, ServiceNotFoundError
from .services.instance_aware import InstanceAware, InstanceAwareServiceLocator
from .controllers.controller import ActionController
from .controllers.events.iteration_event import IterationEvent
from .controllers.exceptions import (
    ControllerError, InvalidArgumentError, MissingDependencyError
)
from .controllers.plugins.base import ControllerPlugin, PluginManager
from .controllers.plugins.instance_iterator import InstanceIterator
from .infrastructure.configuration import ApplicationConfig, Environment, get_config, set_config
from .infrastructure.configurator import IaxsConfigurator, configure_iaxs

__version__ = "0.1.0"

__all__ = [
    # Domain
    "Instance", "InstanceCollection",

    # Events and services
    "Event", "EventManager", "ListenerHandle",
    "ServiceLocator", "ServiceNotFoundError", "InstanceAware", "InstanceAwareServiceLocator",

    # Controllers
    "ActionController", "ControllerPlugin", "PluginManager",
    "InstanceIterator", "IterationEvent",
    "ControllerError", "InvalidArgumentError", "MissingDependencyError",

    # Configuration
    "ApplicationConfig", "Environment", "get_config", "set_config",
    "IaxsConfigurator", "configure_iaxs",
]
