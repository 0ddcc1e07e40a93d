"""Text renderers for the compiled registry."""

from .directory_page import render_directory_page, render_fragments
from .proxy_config import render_location, render_locations, render_proxy_headers

__all__ = [
    "render_directory_page",
    "render_fragments",
    "render_location",
    "render_locations",
    "render_proxy_headers",
]
