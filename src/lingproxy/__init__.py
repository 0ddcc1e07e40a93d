"""Compile a language service registry into proxy routes and an API directory page."""

from __future__ import annotations

__version__ = "0.3.0"

from .errors import IngestionError, LingproxyError, OutputWriteError
from .registry import Registry, ServiceCategory, load_registry
from .routes import RouteSpec, compile_routes

__all__ = [
    "__version__",
    "IngestionError",
    "LingproxyError",
    "OutputWriteError",
    "Registry",
    "RouteSpec",
    "ServiceCategory",
    "compile_routes",
    "load_registry",
]
