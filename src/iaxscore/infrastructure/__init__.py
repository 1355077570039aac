"""
Infrastructure - Configuration, Logging and Wiring
"""

from .configuration import (
    ApplicationConfig, Environment, EventManagerConfig, WebConfig, LoggingConfig,
    get_config, set_config
)
from .configurator import IaxsConfigurator, configure_iaxs
from .logging_setup import configure_logging

__all__ = [
    "ApplicationConfig", "Environment", "EventManagerConfig", "WebConfig", "LoggingConfig",
    "get_config", "set_config", "IaxsConfigurator", "configure_iaxs", "configure_logging"
]
