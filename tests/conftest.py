from __future__ import annotations

import sys
import textwrap
from pathlib import Path

import pytest

# Ensure src/ is on sys.path so tests run without an editable install.
ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from lingproxy.registry import Registry, parse_registry  # noqa: E402
from logging_setup import setup_logging  # noqa: E402

SAMPLE_REGISTRY = textwrap.dedent(
    """
    global:
      tts_port: 6000
    grammar:
      smj:
        name: Lule Sámi
        port: 5003
      se:
        name: North Sámi
        port: 5001
    speller:
      se:
        name: North Sámi
        port: 5101
    hyphenation:
      sma:
        name: South Sámi
        port: 5202
    tts:
      smj:
        name: Lule Sámi
        voices:
          sigga:
            name: Siggá
            gender: female
            model: sami-multi
            speaker: 5
            language: 1
          abmut:
            name: Ábmut
            gender: male
            model: sami-multi
            speaker: 3
            language: 1
      se:
        name: North Sámi
        voices:
          biret:
            name: Biret
            gender: female
            model: sami-multi
            speaker: 0
    """
)


@pytest.fixture(autouse=True)
def _no_log_handlers(monkeypatch: pytest.MonkeyPatch) -> None:
    # Keep CLI tests from installing console/file handlers on the root logger.
    monkeypatch.setattr(setup_logging, "_configured", True, raising=False)


@pytest.fixture
def sample_registry() -> Registry:
    return parse_registry(SAMPLE_REGISTRY, source="sample")


@pytest.fixture
def registry_file(tmp_path: Path) -> Path:
    p = tmp_path / "languages.yaml"
    p.write_text(SAMPLE_REGISTRY, encoding="utf-8")
    return p
