"""
Web - Starlette binding for controllers
"""

from .endpoints import controller_endpoint, build_routes, build_app, render_result

__all__ = ["controller_endpoint", "build_routes", "build_app", "render_result"]
