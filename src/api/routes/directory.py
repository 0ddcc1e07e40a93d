"""Directory endpoints: landing page, liveness probe and registry listing."""

from typing import Any

from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse

router = APIRouter()


@router.get("/", response_class=HTMLResponse)
async def index(request: Request) -> str:
    """Return the rendered API directory page."""
    return request.app.state.page


@router.get("/health")
async def health() -> dict[str, str]:
    return {"status": "ok"}


@router.get("/languages")
async def languages(request: Request) -> dict[str, Any]:
    """Return the registry as JSON, keyed by category then tag.

    Returns:
        dict[str, Any]: ``global`` settings plus one object per category.
    """
    return request.app.state.registry.to_json()


@router.get("/routes")
async def routes(request: Request) -> list[dict[str, Any]]:
    """List the compiled proxy routes in generation order."""
    return request.app.state.routes
