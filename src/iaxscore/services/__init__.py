"""
Services - Service Location and Instance Context

Components:
- ServiceLocator: named services, factories, aliases and scopes
- InstanceAware: capability protocol for per-instance services
- InstanceAwareServiceLocator: a locator scoped to the current instance
"""

from .service_locator import (
    ServiceLocator, ServiceRegistration,
    ServiceLocatorError, ServiceNotFoundError, CircularDependencyError
)
from .instance_aware import InstanceAware, InstanceAwareServiceLocator

__all__ = [
    "ServiceLocator", "ServiceRegistration",
    "ServiceLocatorError", "ServiceNotFoundError", "CircularDependencyError",
    "InstanceAware", "InstanceAwareServiceLocator"
]
