"""Compile a :class:`Registry` into an ordered list of proxy routes.

Ordering is part of the output contract: categories follow
:meth:`ServiceCategory.ordered`, tags ascend lexicographically inside a
category and TTS voice ids ascend inside a tag. Two compilations of the same
registry therefore produce identical route lists.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from .registry.models import Registry, ServiceCategory, VoiceEntry

__all__ = ["BACKEND_HOST", "RouteSpec", "compile_category", "compile_routes", "voice_query"]

BACKEND_HOST = "127.0.0.1"


@dataclass(frozen=True, slots=True)
class RouteSpec:
    """A public path and the backend request it is forwarded to.

    Attributes:
        category: Category the route belongs to.
        public_path: Path exposed by the proxy, e.g. ``/grammar/sme``.
        backend_port: Local port of the backend process.
        backend_subpath: Path appended after the port; empty for per-language backends.
        query_params: Query parameters in rendering order.
    """

    category: ServiceCategory
    public_path: str
    backend_port: int
    backend_subpath: str = ""
    query_params: dict[str, str] = field(default_factory=dict)

    def query_string(self) -> str:
        """Return ``?k=v&...`` or an empty string when there are no parameters."""
        if not self.query_params:
            return ""
        return "?" + "&".join(f"{k}={v}" for k, v in self.query_params.items())

    def proxy_target(self) -> str:
        return f"http://{BACKEND_HOST}:{self.backend_port}/{self.backend_subpath}{self.query_string()}"

    def to_dict(self) -> dict[str, Any]:
        return {
            "category": self.category.value,
            "path": self.public_path,
            "port": self.backend_port,
            "subpath": self.backend_subpath,
            "query": dict(self.query_params),
        }


def voice_query(voice: VoiceEntry) -> dict[str, str]:
    """Build the query parameters selecting ``voice`` on the shared TTS backend.

    ``language`` is always inserted before ``speaker``.
    """
    params: dict[str, str] = {}
    if voice.language is not None:
        params["language"] = str(voice.language)
    if voice.speaker is not None:
        params["speaker"] = str(voice.speaker)
    return params


def _compile_languages(registry: Registry, category: ServiceCategory) -> list[RouteSpec]:
    languages = registry.languages(category)
    return [
        RouteSpec(
            category=category,
            public_path=f"/{category.value}/{tag}",
            backend_port=languages[tag].port,
        )
        for tag in registry.sorted_tags(category)
    ]


def _compile_tts(registry: Registry) -> list[RouteSpec]:
    # All voices share one backend; per-language ports do not apply here.
    routes: list[RouteSpec] = []
    for tag in registry.sorted_tags(ServiceCategory.TTS):
        for voice_id, voice in registry.tts[tag].sorted_voices():
            routes.append(
                RouteSpec(
                    category=ServiceCategory.TTS,
                    public_path=f"/tts/{tag}/{voice_id}",
                    backend_port=registry.tts_port,
                    backend_subpath=voice.model,
                    query_params=voice_query(voice),
                )
            )
    return routes


def compile_category(registry: Registry, category: ServiceCategory) -> list[RouteSpec]:
    """Compile the routes of a single category (empty list if it has no entries)."""
    if category is ServiceCategory.TTS:
        return _compile_tts(registry)
    return _compile_languages(registry, category)


def compile_routes(registry: Registry) -> list[RouteSpec]:
    """Compile every category of ``registry`` in output order."""
    routes: list[RouteSpec] = []
    for category in ServiceCategory.ordered():
        routes.extend(compile_category(registry, category))
    return routes
