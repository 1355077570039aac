"""
Action Controller

A controller groups related actions. Each action is a method named
``<action>_action``; dispatch() looks it up and calls it with the request
parameters. Controllers reach shared services through their service locator
and helpers through their plugins.
"""

import inspect
import logging
from typing import Any, Dict, Optional, TYPE_CHECKING

from .exceptions import ActionNotFoundError, MissingDependencyError
from .plugins.base import ControllerPlugin, PluginManager

if TYPE_CHECKING:
    from starlette.requests import Request
    from ..services.service_locator import ServiceLocator

logger = logging.getLogger(__name__)


class ActionController:
    """
    Base class for controllers.

    Example:
        class ArticleController(ActionController):
            def list_action(self):
                rows = []
                self.plugin("instance_iterator").iterate(
                    self.articles, callback=lambda e: rows.append(e.instance.title)
                )
                return {"titles": rows}
    """

    ACTION_SUFFIX = "_action"

    def __init__(
        self,
        service_locator: "ServiceLocator",
        plugins: Optional[PluginManager] = None,
        request: Optional["Request"] = None
    ):
        self._service_locator = service_locator
        self._plugins = plugins
        self.request = request

    @property
    def service_locator(self) -> "ServiceLocator":
        return self._service_locator

    def get_service_locator(self) -> "ServiceLocator":
        return self._service_locator

    def get_plugin_manager(self) -> PluginManager:
        """Get the plugin manager, falling back to the one registered as a service"""
        if self._plugins is None:
            if not self._service_locator.has("PluginManager"):
                raise MissingDependencyError("Plugin manager not provided.")
            self._plugins = self._service_locator.get("PluginManager")
        return self._plugins

    def plugin(self, name: str) -> ControllerPlugin:
        """Get a plugin bound to this controller"""
        return self.get_plugin_manager().get(name, self)

    def has_action(self, action: str) -> bool:
        return callable(getattr(self, self._method_name(action), None))

    def dispatch(self, action: str, **params) -> Any:
        """Run an action and return its result"""
        method = getattr(self, self._method_name(action), None)
        if not callable(method):
            raise ActionNotFoundError(f"Action '{action}' not found on {self.__class__.__name__}")

        logger.debug(f"Dispatching {self.__class__.__name__}.{action}")
        return method(**params)

    def action_params(self, action: str, params: Dict[str, Any]) -> Dict[str, Any]:
        """Keep only the params the action accepts, or all of them if it takes **kwargs"""
        method = getattr(self, self._method_name(action), None)
        if not callable(method):
            return dict(params)

        parameters = inspect.signature(method).parameters.values()
        if any(p.kind is inspect.Parameter.VAR_KEYWORD for p in parameters):
            return dict(params)

        names = {
            p.name for p in parameters
            if p.kind in (inspect.Parameter.POSITIONAL_OR_KEYWORD, inspect.Parameter.KEYWORD_ONLY)
        }
        return {key: value for key, value in params.items() if key in names}

    def _method_name(self, action: str) -> str:
        return action.replace("-", "_") + self.ACTION_SUFFIX


__all__ = ["ActionController"]
