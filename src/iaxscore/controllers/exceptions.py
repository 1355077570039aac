"""
Controller Exceptions

All errors raised by controllers and controller plugins derive from
ControllerError, so the web layer can turn them into error responses.
"""


class ControllerError(Exception):
    """Base exception for controller errors"""
    pass


class InvalidArgumentError(ControllerError, ValueError):
    """Raised when a controller or plugin receives an unusable argument"""
    pass


class MissingDependencyError(ControllerError):
    """Raised when a required collaborator was never provided"""
    pass


class PluginNotFoundError(ControllerError, KeyError):
    """Raised when a controller plugin name is not registered"""

    def __str__(self) -> str:
        return Exception.__str__(self)


class ActionNotFoundError(ControllerError):
    """Raised when a controller has no method for the requested action"""
    pass


__all__ = [
    "ControllerError", "InvalidArgumentError", "MissingDependencyError",
    "PluginNotFoundError", "ActionNotFoundError"
]
