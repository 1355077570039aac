"""
Service Locator - Named Service Resolution

🔧 Service Composition:
The service locator maps names to services. A name is either bound to a
ready-made object or to a factory that builds the service on demand.

Features:
- Shared factories (one instance per locator, created lazily)
- Unshared factories (a new object on every get)
- Aliases
- Circular dependency detection
- Child scopes that fall back to their parent
"""

import logging
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Callable, Dict, List, Optional, Type

logger = logging.getLogger(__name__)

Factory = Callable[["ServiceLocator"], Any]


class ServiceLocatorError(Exception):
    """Base exception for service locator errors"""
    pass


class ServiceNotFoundError(ServiceLocatorError, KeyError):
    """Raised when a service name is not registered"""

    def __str__(self) -> str:
        return Exception.__str__(self)


class CircularDependencyError(ServiceLocatorError):
    """Raised when a factory ends up requesting the service it is building"""
    pass


@dataclass
class ServiceRegistration:
    """Service registration information"""
    name: str
    factory: Optional[Factory] = None
    instance: Any = None
    shared: bool = True
    registered_at: datetime = field(default_factory=datetime.now)

    def __post_init__(self):
        if self.factory is not None and not callable(self.factory):
            raise ServiceLocatorError(f"Factory for '{self.name}' must be callable")


class ServiceLocator:
    """
    Synchronous service locator.

    Example:
        services = ServiceLocator()
        services.set_service("Config", config)
        services.set_factory("Mailer", lambda sl: Mailer(sl.get("Config")))
        services.set_factory("Report", build_report, shared=False)

        mailer = services.get("Mailer")
    """

    def __init__(self, parent: Optional["ServiceLocator"] = None, allow_override: bool = False):
        self.parent = parent
        self.allow_override = allow_override

        self._registrations: Dict[str, ServiceRegistration] = {}
        self._shared_instances: Dict[str, Any] = {}
        self._aliases: Dict[str, str] = {}
        self._resolution_stack: List[str] = []

    def set_service(self, name: str, service: Any) -> "ServiceLocator":
        """Register a ready-made service object"""
        self._check_override(name)
        self._registrations[name] = ServiceRegistration(name=name, instance=service)
        self._shared_instances[name] = service
        return self

    def set_factory(self, name: str, factory: Factory, shared: bool = True) -> "ServiceLocator":
        """
        Register a factory for a service.

        Args:
            name: Service name
            factory: Callable receiving this locator and returning the service
            shared: Reuse the first created instance for later lookups

        Returns:
            Self for method chaining
        """
        self._check_override(name)
        self._registrations[name] = ServiceRegistration(name=name, factory=factory, shared=shared)
        self._shared_instances.pop(name, None)
        return self

    def set_alias(self, alias: str, name: str) -> "ServiceLocator":
        self._check_override(alias)
        self._aliases[alias] = name
        return self

    def has(self, name: str) -> bool:
        """Check if a service can be resolved here or in a parent scope"""
        key = self._resolve_name(name)
        if key in self._registrations:
            return True
        return self.parent is not None and self.parent.has(key)

    def get(self, name: str) -> Any:
        """
        Get a service by name.

        Raises:
            ServiceNotFoundError: the name is unknown in this locator and its parents
            CircularDependencyError: the service depends on itself
        """
        key = self._resolve_name(name)

        if key not in self._registrations:
            if self.parent is not None:
                return self.parent.get(key)
            raise ServiceNotFoundError(f"Service not registered: {name}")

        if key in self._shared_instances:
            return self._shared_instances[key]

        if key in self._resolution_stack:
            cycle = " -> ".join(self._resolution_stack + [key])
            raise CircularDependencyError(f"Circular dependency detected: {cycle}")

        registration = self._registrations[key]

        try:
            self._resolution_stack.append(key)
            service = registration.factory(self)
        finally:
            self._resolution_stack.pop()

        if registration.shared:
            self._shared_instances[key] = service

        logger.debug(f"Created service '{key}' ({type(service).__name__})")
        return service

    def create_scope(self, cls: Optional[Type["ServiceLocator"]] = None, **kwargs) -> "ServiceLocator":
        """Create a child locator that falls back to this one"""
        scope_cls = cls or ServiceLocator
        return scope_cls(parent=self, **kwargs)

    def get_registered_names(self) -> List[str]:
        return list(self._registrations.keys())

    def _resolve_name(self, name: str) -> str:
        seen = set()
        while name in self._aliases:
            if name in seen:
                raise CircularDependencyError(f"Alias loop detected at '{name}'")
            seen.add(name)
            name = self._aliases[name]
        return name

    def _check_override(self, name: str):
        if self.allow_override:
            return
        if name in self._registrations or name in self._aliases:
            raise ServiceLocatorError(f"Service '{name}' is already registered and overrides are disabled")


__all__ = [
    "ServiceLocator", "ServiceRegistration", "Factory",
    "ServiceLocatorError", "ServiceNotFoundError", "CircularDependencyError"
]
