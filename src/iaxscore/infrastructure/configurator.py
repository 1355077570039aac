"""
IaxsCore Application Configurator

🚀 Application Setup:
Wires the root service locator: configuration, event manager, controller
plugin manager and the built-in controller plugins.

Registered services:
- Config: the ApplicationConfig
- EventManager: shared EventManager
- PluginManager: shared PluginManager with the instance_iterator plugin
"""

import logging
from typing import Callable, Dict, Optional

from ..controllers.plugins.base import ControllerPlugin, PluginManager
from ..controllers.plugins.instance_iterator import InstanceIterator
from ..events.event_manager import EventManager
from ..services.service_locator import ServiceLocator
from .configuration import ApplicationConfig, get_config
from .logging_setup import configure_logging

logger = logging.getLogger(__name__)


class IaxsConfigurator:
    """
    Main configurator for IaxsCore applications.

    Example:
        services = (
            IaxsConfigurator(config)
            .add_service("ArticleServices", article_services)
            .configure()
        )
    """

    def __init__(self, config: Optional[ApplicationConfig] = None):
        self.config = config or get_config()
        self.service_locator = ServiceLocator()
        self._services: Dict[str, object] = {}
        self._plugins: Dict[str, Callable[[], ControllerPlugin]] = {}
        self._is_configured = False

    def add_service(self, name: str, service: object) -> "IaxsConfigurator":
        """Add an application service to the root locator"""
        self._services[name] = service
        return self

    def add_plugin(self, name: str, factory: Callable[[], ControllerPlugin]) -> "IaxsConfigurator":
        """Add a controller plugin factory"""
        self._plugins[name] = factory
        return self

    def configure(self) -> ServiceLocator:
        """Configure all components and return the root service locator"""
        if self._is_configured:
            return self.service_locator

        # 1. Logging
        configure_logging(self.config.logging)

        # 2. Core services
        self.service_locator.set_service("Config", self.config)
        self.service_locator.set_factory("EventManager", self._create_event_manager)
        self.service_locator.set_factory("PluginManager", self._create_plugin_manager)

        # 3. Application services
        for name, service in self._services.items():
            self.service_locator.set_service(name, service)

        self._is_configured = True
        logger.info(
            f"IaxsCore configured for {self.config.environment.value} "
            f"with {len(self.service_locator.get_registered_names())} services"
        )
        return self.service_locator

    def _create_event_manager(self, services: ServiceLocator) -> EventManager:
        return EventManager(default_priority=self.config.event_manager.default_priority)

    def _create_plugin_manager(self, services: ServiceLocator) -> PluginManager:
        plugins = PluginManager()

        event_manager = services.get("EventManager")
        plugins.register(
            "instance_iterator",
            lambda: InstanceIterator(event_manager=event_manager, service_locator=services)
        )

        for name, factory in self._plugins.items():
            plugins.register(name, factory)

        return plugins


def configure_iaxs(
    config: Optional[ApplicationConfig] = None,
    services: Optional[Dict[str, object]] = None
) -> ServiceLocator:
    """Configure an IaxsCore application and return its root service locator"""
    configurator = IaxsConfigurator(config)
    for name, service in (services or {}).items():
        configurator.add_service(name, service)
    return configurator.configure()


__all__ = ["IaxsConfigurator", "configure_iaxs"]
