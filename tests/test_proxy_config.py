from __future__ import annotations

from lingproxy.registry import Registry, ServiceCategory, parse_registry
from lingproxy.render.proxy_config import render_location, render_locations, render_proxy_headers
from lingproxy.routes import RouteSpec, compile_routes


def test_plain_location_block() -> None:
    route = RouteSpec(ServiceCategory.GRAMMAR, "/grammar/sme", 5001)
    assert render_location(route) == (
        "location /grammar/sme {\n"
        "    proxy_pass http://127.0.0.1:5001/;\n"
        "    include proxy-headers.conf;\n"
        "}"
    )


def test_tts_location_block_with_query() -> None:
    route = RouteSpec(ServiceCategory.TTS, "/tts/se/biret", 6000, "sami-multi", {"language": "0", "speaker": "2"})
    assert "    proxy_pass http://127.0.0.1:6000/sami-multi?language=0&speaker=2;\n" in render_location(route)


def test_empty_subpath_with_query_still_valid() -> None:
    route = RouteSpec(ServiceCategory.TTS, "/tts/se/x", 6000, "", {"speaker": "1"})
    assert "proxy_pass http://127.0.0.1:6000/?speaker=1;" in render_location(route)


def test_blocks_separated_by_blank_line(sample_registry: Registry) -> None:
    text = render_locations(compile_routes(sample_registry))
    blocks = text.rstrip("\n").split("\n\n")
    assert len(blocks) == 7
    assert blocks[0].startswith("location /grammar/se {")
    assert blocks[-1].startswith("location /tts/smj/sigga {")
    assert text.endswith("}\n")
    assert not text.endswith("\n\n")


def test_round_trip_shape() -> None:
    reg = parse_registry('global: {tts_port: 6000}\ngrammar:\n  sme: {name: "North Sámi", port: 5001}\n')
    assert render_locations(compile_routes(reg)) == (
        "location /grammar/sme {\n"
        "    proxy_pass http://127.0.0.1:5001/;\n"
        "    include proxy-headers.conf;\n"
        "}\n"
    )


def test_no_routes_renders_empty() -> None:
    assert render_locations([]) == ""


def test_rendering_is_byte_stable(sample_registry: Registry) -> None:
    first = render_locations(compile_routes(sample_registry))
    again = parse_registry(sample_registry.model_dump_json(by_alias=True, indent=2))
    assert render_locations(compile_routes(again)) == first


def test_proxy_headers_static() -> None:
    headers = render_proxy_headers()
    assert headers == render_proxy_headers()
    assert "proxy_set_header Upgrade $http_upgrade;" in headers
    assert 'proxy_set_header Connection "upgrade";' in headers
    assert "proxy_set_header Host $host;" in headers
    assert "X-Forwarded-For" in headers
    assert headers.endswith(";\n")
