"""FastAPI application serving the API directory page and registry dump.

The registry and the rendered page are computed once per application and
kept on ``app.state``; request handlers only read them.
"""

from __future__ import annotations

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from lingproxy import __version__
from lingproxy.registry import Registry, load_registry
from lingproxy.render.directory_page import render_directory_page
from lingproxy.routes import compile_routes

from .routes.directory import router as directory_router


def create_app(registry: Registry | None = None, template: str | None = None) -> FastAPI:
    """Build the application.

    Args:
        registry: Registry to serve; the embedded document when omitted.
        template: Page template; the packaged ``index.html`` when omitted.

    Raises:
        IngestionError: If the embedded registry is invalid.
    """
    if registry is None:
        registry = load_registry()

    app = FastAPI(title="Language Tools Directory", version=__version__)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.state.registry = registry
    app.state.page = render_directory_page(registry, template)
    app.state.routes = [route.to_dict() for route in compile_routes(registry)]
    app.include_router(directory_router)
    return app
