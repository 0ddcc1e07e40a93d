"""Render the HTML API directory page from the registry.

Each non-empty category contributes one ``<div class="endpoint">`` fragment.
The fragments are joined with blank lines and substituted for
:data:`ENDPOINTS_PLACEHOLDER` in the page template. Hyphenation has no
fragment: its request/response payloads are not documented yet.
"""

from __future__ import annotations

import logging
from html import escape
from importlib import resources

from ..registry.models import Registry, ServiceCategory, TtsEntry

__all__ = [
    "DOCUMENTED_CATEGORIES",
    "ENDPOINTS_PLACEHOLDER",
    "FEMALE_GLYPH",
    "OTHER_GLYPH",
    "load_template",
    "render_directory_page",
    "render_fragments",
]

logger = logging.getLogger(__name__)

ENDPOINTS_PLACEHOLDER = "<!-- lingproxy:endpoints -->"
DOCUMENTED_CATEGORIES = (ServiceCategory.GRAMMAR, ServiceCategory.SPELLER, ServiceCategory.TTS)

FEMALE_GLYPH = "♀"
OTHER_GLYPH = "♂"

_TEXT_REQUEST = """{
    "text": "sami"
}"""

_GRAMMAR_RESPONSE = """{
  "text": "sami",
  "errs": [
    {
      "error_text": "sami",
      "start_index": 0,
      "end_index": 4,
      "error_code": "typo",
      "description": "Ii leat sátnelisttus",
      "suggestions": [
        "sámi"
      ],
      "title": "Čállinmeattáhus"
    }
  ]
}"""

_SPELLER_SUGGESTIONS = (
    ("sámi", "14.529631"),
    ("sama", "40.2973"),
    ("sáme", "45.896103"),
    ("sabmi", "50.2973"),
    ("samai", "50.2973"),
    ("sapmi", "50.2973"),
    ("satmi", "50.2973"),
    ("samo", "55.2973"),
    ("samu", "55.2973"),
    ("somá", "56.623154"),
)

_SPELLER_RESPONSE = (
    '{\n  "text": "sami",\n  "results": [\n    {\n      "word": "sami",\n'
    '      "is_correct": false,\n      "suggestions": [\n'
    + ",\n".join(
        f'        {{\n          "value": "{value}",\n          "weight": {weight}\n        }}'
        for value, weight in _SPELLER_SUGGESTIONS
    )
    + "\n      ]\n    }\n  ]\n}"
)

_TTS_REQUEST = """{
    "text": "Sample text to convert to speech"
}"""

_INDENT = " " * 16


def _details(summary: str, body: str) -> str:
    return (
        f"{_INDENT}<details>\n"
        f"{_INDENT}    <summary>{summary}</summary>\n"
        f"{_INDENT}    {body}\n"
        f"{_INDENT}</details>"
    )


def _code_block(payload: str) -> str:
    return f"<pre><code>{escape(payload, quote=False)}</code></pre>"


def _endpoint(
    anchor: str,
    title: str,
    route: str,
    response_type: str,
    blurb: str,
    items: list[str],
    request: str,
    response: str,
) -> str:
    return "\n".join(
        [
            f'            <div class="endpoint" id="{anchor}">',
            f"{_INDENT}<h3>{title}</h3>",
            f'{_INDENT}<p><span class="method post">POST</span> <code>{route}</code>'
            f' <span class="response-type">{response_type}</span></p>',
            f"{_INDENT}<p>{blurb}</p>",
            f"{_INDENT}<ul>",
            *items,
            f"{_INDENT}</ul>",
            _details("Request", request),
            _details("Response", response),
            "            </div>",
        ]
    )


def _language_items(registry: Registry, category: ServiceCategory) -> list[str]:
    languages = registry.languages(category)
    return [
        f'{_INDENT}<li><a href="/{category.value}/{tag}"><code>{tag}</code></a> - {escape(languages[tag].name)}</li>'
        for tag in registry.sorted_tags(category)
    ]


def _tts_item(tag: str, entry: TtsEntry) -> str:
    voices = ", ".join(
        f'<code>{voice_id}</code> <a href="/tts/{tag}/{voice_id}">{escape(voice.name)} '
        f"{FEMALE_GLYPH if voice.is_female else OTHER_GLYPH}</a>"
        for voice_id, voice in entry.sorted_voices()
    )
    return f"{_INDENT}<li><code>{tag}</code> - {escape(entry.name)} (voices: {voices})</li>"


def _grammar_fragment(registry: Registry) -> str:
    return _endpoint(
        "grammar",
        "Grammar Check",
        "/grammar/:tag",
        "application/json",
        "Check grammar for text. Available languages:",
        _language_items(registry, ServiceCategory.GRAMMAR),
        _code_block(_TEXT_REQUEST),
        _code_block(_GRAMMAR_RESPONSE),
    )


def _speller_fragment(registry: Registry) -> str:
    return _endpoint(
        "speller",
        "Spell Check",
        "/speller/:tag",
        "application/json",
        "Check spelling for text. Available languages:",
        _language_items(registry, ServiceCategory.SPELLER),
        _code_block(_TEXT_REQUEST),
        _code_block(_SPELLER_RESPONSE),
    )


def _tts_fragment(registry: Registry) -> str:
    items = [_tts_item(tag, registry.tts[tag]) for tag in registry.sorted_tags(ServiceCategory.TTS)]
    return _endpoint(
        "tts",
        "Text-to-Speech",
        "/tts/:tag/:voice",
        "audio/wav",
        "Convert text to speech. Available languages and voices:",
        items,
        _code_block(_TTS_REQUEST),
        "<p>WAV audio file containing the synthesized speech.</p>",
    )


_FRAGMENTS = {
    ServiceCategory.GRAMMAR: _grammar_fragment,
    ServiceCategory.SPELLER: _speller_fragment,
    ServiceCategory.TTS: _tts_fragment,
}


def render_fragments(registry: Registry) -> list[str]:
    """Return one HTML fragment per documented, non-empty category.

    Order is grammar, speller, tts. Empty categories are skipped entirely.
    """
    return [_FRAGMENTS[c](registry) for c in DOCUMENTED_CATEGORIES if registry.entries(c)]


def load_template() -> str:
    """Return the page template shipped with the package."""
    return (resources.files("lingproxy") / "data" / "index.html").read_text(encoding="utf-8")


def render_directory_page(registry: Registry, template: str | None = None) -> str:
    """Substitute the registry fragments into ``template``.

    Args:
        registry: Registry to document.
        template: Page template; the packaged ``index.html`` when omitted.

    Returns:
        The rendered page. A template without :data:`ENDPOINTS_PLACEHOLDER`
        is returned unchanged.
    """
    if template is None:
        template = load_template()
    if ENDPOINTS_PLACEHOLDER not in template:
        logger.debug("template has no %s marker; serving it unchanged", ENDPOINTS_PLACEHOLDER)
        return template
    return template.replace(ENDPOINTS_PLACEHOLDER, "\n\n".join(render_fragments(registry)), 1)
