from __future__ import annotations

import pytest

from lingproxy.registry import Registry, parse_registry
from lingproxy.render.directory_page import (
    ENDPOINTS_PLACEHOLDER,
    FEMALE_GLYPH,
    OTHER_GLYPH,
    load_template,
    render_directory_page,
    render_fragments,
)

TEMPLATE = f"<html><body><h2>Endpoints</h2>\n{ENDPOINTS_PLACEHOLDER}\n</body></html>"


def test_fragments_in_documented_order(sample_registry: Registry) -> None:
    fragments = render_fragments(sample_registry)
    assert len(fragments) == 3
    assert 'id="grammar"' in fragments[0]
    assert 'id="speller"' in fragments[1]
    assert 'id="tts"' in fragments[2]


def test_hyphenation_not_documented(sample_registry: Registry) -> None:
    page = render_directory_page(sample_registry, TEMPLATE)
    assert "/hyphenation/" not in page


def test_grammar_items_sorted_and_linked(sample_registry: Registry) -> None:
    grammar = render_fragments(sample_registry)[0]
    se = grammar.index('<li><a href="/grammar/se"><code>se</code></a> - North Sámi</li>')
    smj = grammar.index('<li><a href="/grammar/smj"><code>smj</code></a> - Lule Sámi</li>')
    assert se < smj


def test_tts_voices_inline_with_glyphs(sample_registry: Registry) -> None:
    tts = render_fragments(sample_registry)[2]
    assert (
        "<li><code>smj</code> - Lule Sámi (voices: "
        f'<code>abmut</code> <a href="/tts/smj/abmut">Ábmut {OTHER_GLYPH}</a>, '
        f'<code>sigga</code> <a href="/tts/smj/sigga">Siggá {FEMALE_GLYPH}</a>)</li>'
    ) in tts
    assert tts.index("<code>se</code> - North Sámi") < tts.index("<code>smj</code> - Lule Sámi")


@pytest.mark.parametrize("gender", ["male", "other", "unknown", None])
def test_non_female_glyph(gender: str | None) -> None:
    extra = "" if gender is None else f", gender: {gender}"
    reg = parse_registry(
        "global: {tts_port: 6000}\n"
        f"tts:\n  se:\n    name: X\n    voices:\n      v: {{name: A, model: m{extra}}}\n"
    )
    (fragment,) = render_fragments(reg)
    assert f"A {OTHER_GLYPH}</a>" in fragment
    assert FEMALE_GLYPH not in fragment


def test_empty_categories_omitted() -> None:
    reg = parse_registry("global: {tts_port: 6000}\nspeller:\n  se: {name: North Sámi, port: 5101}\n")
    fragments = render_fragments(reg)
    assert len(fragments) == 1
    page = render_directory_page(reg, TEMPLATE)
    assert 'id="grammar"' not in page
    assert 'id="tts"' not in page


def test_placeholder_replaced(sample_registry: Registry) -> None:
    page = render_directory_page(sample_registry, TEMPLATE)
    assert ENDPOINTS_PLACEHOLDER not in page
    assert page.startswith("<html><body><h2>Endpoints</h2>\n")
    assert page.endswith("\n</body></html>")
    assert "\n".join(render_fragments(sample_registry)[:1]) in page
    assert "</div>\n\n            <div" in page


def test_missing_marker_returns_template_unchanged(sample_registry: Registry) -> None:
    template = "<html><body><h2>Nothing here</h2></body></html>"
    assert render_directory_page(sample_registry, template) == template


def test_display_names_escaped() -> None:
    reg = parse_registry('global: {tts_port: 6000}\ngrammar:\n  x: {name: "<b>X & Y</b>", port: 1}\n')
    (fragment,) = render_fragments(reg)
    assert "&lt;b&gt;X &amp; Y&lt;/b&gt;" in fragment


def test_page_is_deterministic(sample_registry: Registry) -> None:
    assert render_directory_page(sample_registry, TEMPLATE) == render_directory_page(sample_registry, TEMPLATE)


def test_packaged_template_has_marker(sample_registry: Registry) -> None:
    template = load_template()
    assert ENDPOINTS_PLACEHOLDER in template
    page = render_directory_page(sample_registry)
    assert 'id="speller"' in page
    assert "<h2>Endpoints</h2>" in page
