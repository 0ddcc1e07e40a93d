"""Defaults for the command-line entry points.

Only the service shell reads the environment; the compiler and renderers
take everything they need as arguments.
"""

from __future__ import annotations

import os

__all__ = ["DEFAULT_HOST", "DEFAULT_PORT", "LOCATIONS_FILE", "HEADERS_FILE", "serve_defaults"]

DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 4000

LOCATIONS_FILE = "locations.conf"
HEADERS_FILE = "proxy-headers.conf"


def serve_defaults() -> tuple[str, int]:
    """Return ``(host, port)`` honouring ``LINGPROXY_HOST`` / ``LINGPROXY_PORT``."""
    host = os.getenv("LINGPROXY_HOST") or DEFAULT_HOST
    try:
        port = int(os.getenv("LINGPROXY_PORT", DEFAULT_PORT))
    except ValueError:
        port = DEFAULT_PORT
    if not 0 <= port <= 65535:
        port = DEFAULT_PORT
    return host, port
