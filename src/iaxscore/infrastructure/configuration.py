"""
Configuration Management for IaxsCore Applications

🔧 Unified Configuration System:
Dataclass-based configuration with per-environment presets, loadable from
a dict, a JSON or YAML file, or IAXS_* environment variables.
"""

import json
import os
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Optional, Union


class Environment(Enum):
    """Application environments"""
    DEVELOPMENT = "development"
    TESTING = "testing"
    STAGING = "staging"
    PRODUCTION = "production"


@dataclass
class LoggingConfig:
    """Logging configuration"""
    level: str = "INFO"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    file_path: Optional[str] = None
    max_file_size: int = 10 * 1024 * 1024  # 10MB
    backup_count: int = 5


@dataclass
class EventManagerConfig:
    """Event manager configuration"""
    default_priority: int = 1


@dataclass
class WebConfig:
    """Web binding configuration"""
    # Starlette debug tracebacks, applied by web.build_app
    debug: bool = False


@dataclass
class ApplicationConfig:
    """Complete application configuration"""
    environment: Environment = Environment.DEVELOPMENT
    debug: bool = False

    event_manager: EventManagerConfig = field(default_factory=EventManagerConfig)
    web: WebConfig = field(default_factory=WebConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    # Custom configuration
    custom: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def for_environment(cls, environment: Environment) -> "ApplicationConfig":
        """Create configuration for specific environment"""
        config = cls(environment=environment)

        if environment == Environment.DEVELOPMENT:
            config.debug = True
            config.web.debug = True
            config.logging.level = "DEBUG"

        elif environment == Environment.TESTING:
            config.logging.level = "WARNING"

        elif environment == Environment.PRODUCTION:
            config.debug = False
            config.web.debug = False
            config.logging.level = "INFO"

        return config

    @classmethod
    def from_dict(cls, config_dict: Dict[str, Any]) -> "ApplicationConfig":
        """Create configuration from dictionary"""
        environment = Environment(config_dict.get("environment", Environment.DEVELOPMENT.value))
        config = cls.for_environment(environment)

        if "debug" in config_dict:
            config.debug = bool(config_dict["debug"])

        for section in ("event_manager", "web", "logging"):
            section_config = getattr(config, section)
            for key, value in config_dict.get(section, {}).items():
                if not hasattr(section_config, key):
                    raise ValueError(f"Unknown configuration key: {section}.{key}")
                setattr(section_config, key, value)

        config.custom.update(config_dict.get("custom", {}))
        return config

    @classmethod
    def from_file(cls, config_path: Union[str, Path]) -> "ApplicationConfig":
        """Load configuration from a JSON or YAML file"""
        config_path = Path(config_path)

        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {config_path}")

        if config_path.suffix == ".json":
            with open(config_path) as f:
                config_dict = json.load(f)
        elif config_path.suffix in (".yml", ".yaml"):
            try:
                import yaml
            except ImportError:
                raise ImportError("PyYAML is required for YAML configuration files")
            with open(config_path) as f:
                config_dict = yaml.safe_load(f) or {}
        else:
            raise ValueError(f"Unsupported configuration file format: {config_path.suffix}")

        return cls.from_dict(config_dict)

    @classmethod
    def from_environment(cls) -> "ApplicationConfig":
        """Create configuration from environment variables"""
        environment = Environment(os.getenv("IAXS_ENV", "development"))
        config = cls.for_environment(environment)

        if os.getenv("IAXS_DEBUG"):
            config.debug = os.getenv("IAXS_DEBUG").lower() == "true"

        if os.getenv("IAXS_LOG_LEVEL"):
            config.logging.level = os.getenv("IAXS_LOG_LEVEL").upper()

        if os.getenv("IAXS_LOG_FILE"):
            config.logging.file_path = os.getenv("IAXS_LOG_FILE")

        return config

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary"""
        return {
            "environment": self.environment.value,
            "debug": self.debug,
            "event_manager": {
                "default_priority": self.event_manager.default_priority
            },
            "web": {
                "debug": self.web.debug
            },
            "logging": {
                "level": self.logging.level,
                "format": self.logging.format,
                "file_path": self.logging.file_path,
                "max_file_size": self.logging.max_file_size,
                "backup_count": self.logging.backup_count
            },
            "custom": dict(self.custom)
        }


# Global configuration management
_current_config: Optional[ApplicationConfig] = None


def set_config(config: Optional[ApplicationConfig]):
    """Set the global configuration"""
    global _current_config
    _current_config = config


def get_config() -> ApplicationConfig:
    """Get the current global configuration"""
    global _current_config

    if _current_config is None:
        # Auto-create from environment if not set
        _current_config = ApplicationConfig.from_environment()

    return _current_config


__all__ = [
    "ApplicationConfig", "Environment", "EventManagerConfig", "WebConfig",
    "LoggingConfig", "set_config", "get_config"
]
