"""Render compiled routes as nginx ``location`` blocks."""

from __future__ import annotations

from collections.abc import Iterable

from ..routes import RouteSpec

__all__ = ["HEADERS_INCLUDE", "render_location", "render_locations", "render_proxy_headers"]

HEADERS_INCLUDE = "proxy-headers.conf"

_PROXY_HEADERS = """\
proxy_http_version 1.1;
proxy_set_header Upgrade $http_upgrade;
proxy_set_header Connection "upgrade";
proxy_set_header Host $host;
proxy_set_header X-Real-IP $remote_addr;
proxy_set_header X-Forwarded-For $proxy_add_x_forwarded_for;
proxy_set_header X-Forwarded-Proto $scheme;
proxy_set_header X-Forwarded-Host $host;
"""


def render_location(route: RouteSpec) -> str:
    """Return the ``location`` block for one route, without a trailing newline."""
    return (
        f"location {route.public_path} {{\n"
        f"    proxy_pass {route.proxy_target()};\n"
        f"    include {HEADERS_INCLUDE};\n"
        "}"
    )


def render_locations(routes: Iterable[RouteSpec]) -> str:
    """Join the blocks of ``routes`` with blank lines, in the given order.

    The result ends with a single newline, or is empty when there are no routes.
    """
    blocks = [render_location(route) for route in routes]
    if not blocks:
        return ""
    return "\n\n".join(blocks) + "\n"


def render_proxy_headers() -> str:
    """Return the shared header directives included by every location."""
    return _PROXY_HEADERS
