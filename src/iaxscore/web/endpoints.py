"""
Starlette Endpoints - Controller Actions over HTTP

⚡ Starlette Integration:
Turns controller actions into Starlette endpoints. A new controller is
built for every request. Query and path parameters are merged, path
parameters winning, and those the action accepts are passed as keyword
arguments. The action runs in the threadpool so listeners never block the
event loop, and the request stays reachable as ``controller.request``.

Action results are rendered as follows:
- Response objects are returned unchanged
- dict and list become JSON
- str becomes HTML
- None becomes an empty 204 response
"""

import logging
from typing import Any, Dict, Iterable, List, Mapping, Type, Union

from starlette.applications import Starlette
from starlette.concurrency import run_in_threadpool
from starlette.requests import Request
from starlette.responses import HTMLResponse, JSONResponse, Response
from starlette.routing import Route

from ..controllers.controller import ActionController
from ..controllers.exceptions import (
    ActionNotFoundError, ControllerError, InvalidArgumentError, PluginNotFoundError
)
from ..services.service_locator import ServiceLocator

logger = logging.getLogger(__name__)

# Map controller errors to HTTP status codes
ERROR_STATUS: Dict[Type[ControllerError], int] = {
    InvalidArgumentError: 400,
    ActionNotFoundError: 404,
    PluginNotFoundError: 404,
}


def error_status(error: ControllerError) -> int:
    for error_cls, status_code in ERROR_STATUS.items():
        if isinstance(error, error_cls):
            return status_code
    return 500


def render_result(result: Any) -> Response:
    """Render an action result as a Starlette response"""
    if isinstance(result, Response):
        return result
    if result is None:
        return Response(status_code=204)
    if isinstance(result, (dict, list)):
        return JSONResponse(result)
    if isinstance(result, str):
        return HTMLResponse(result)
    raise TypeError(f"Cannot render action result of type {type(result).__name__}")


def controller_endpoint(
    controller_cls: Type[ActionController],
    action: str,
    service_locator: ServiceLocator
):
    """Create an async Starlette endpoint running one controller action"""

    async def endpoint(request: Request) -> Response:
        controller = controller_cls(service_locator, request=request)
        params = controller.action_params(
            action, {**request.query_params, **request.path_params}
        )

        try:
            result = await run_in_threadpool(controller.dispatch, action, **params)
        except ControllerError as e:
            status_code = error_status(e)
            if status_code >= 500:
                logger.error(f"{controller_cls.__name__}.{action} failed: {e}")
            return JSONResponse(
                {"error": e.__class__.__name__, "message": str(e)},
                status_code=status_code
            )

        return render_result(result)

    endpoint.__name__ = f"{controller_cls.__name__}_{action}".replace("-", "_")
    return endpoint


def build_routes(
    controller_cls: Type[ActionController],
    actions: Union[Mapping[str, str], Iterable[str]],
    service_locator: ServiceLocator,
    prefix: str = "",
    methods: Iterable[str] = ("GET", "POST")
) -> List[Route]:
    """
    Build Starlette routes for controller actions.

    Args:
        controller_cls: Controller class to instantiate per request
        actions: Mapping of path to action name, or action names routed
            as ``{prefix}/{action}``
        service_locator: Root service locator handed to each controller
        prefix: Path prefix for every route
    """
    if not isinstance(actions, Mapping):
        actions = {f"/{action}": action for action in actions}

    return [
        Route(
            f"{prefix}{path}",
            controller_endpoint(controller_cls, action, service_locator),
            methods=list(methods)
        )
        for path, action in actions.items()
    ]


def build_app(routes: Iterable[Route], service_locator: ServiceLocator) -> Starlette:
    """Create a Starlette app for the routes, honouring the configured web debug flag"""
    debug = False
    if service_locator.has("Config"):
        debug = service_locator.get("Config").web.debug

    return Starlette(debug=debug, routes=list(routes))


__all__ = ["controller_endpoint", "build_routes", "build_app", "render_result", "error_status", "ERROR_STATUS"]
