"""Load the registry document from YAML into a :class:`Registry`.

Every failure on the way (I/O, YAML syntax, duplicate keys, schema
violations) is reported as a single :class:`IngestionError`.
"""

from __future__ import annotations

import logging
from importlib import resources
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from logging_setup import log_call

from ..errors import IngestionError
from .models import Registry

__all__ = ["EMBEDDED_REGISTRY", "load_registry", "parse_registry"]

logger = logging.getLogger(__name__)

EMBEDDED_REGISTRY = "languages.yaml"

_MERGE_TAG = "tag:yaml.org,2002:merge"


class _UniqueKeyLoader(yaml.SafeLoader):
    """SafeLoader that refuses mappings with repeated keys."""

    def construct_mapping(self, node: yaml.MappingNode, deep: bool = False) -> dict[Any, Any]:
        seen: set[Any] = set()
        for key_node, _ in node.value:
            if key_node.tag == _MERGE_TAG:
                continue
            key = self.construct_object(key_node, deep=True)
            try:
                duplicate = key in seen
            except TypeError:
                continue  # unhashable, reported by the base constructor
            if duplicate:
                raise yaml.constructor.ConstructorError(
                    "while constructing a mapping",
                    node.start_mark,
                    f"found duplicate key {key!r}",
                    key_node.start_mark,
                )
            seen.add(key)
        return super().construct_mapping(node, deep=deep)


def _format_validation_error(exc: ValidationError) -> list[str]:
    problems = []
    for err in exc.errors():
        loc = ".".join(str(part) for part in err["loc"]) or "<root>"
        problems.append(f"{loc}: {err['msg']}")
    return problems


def parse_registry(text: str, source: str = "<string>") -> Registry:
    """Parse registry YAML ``text``.

    Args:
        text: YAML document.
        source: Name used in error messages.

    Returns:
        The validated, immutable registry.

    Raises:
        IngestionError: On malformed YAML, duplicate keys or schema violations.
    """
    try:
        data = yaml.load(text, Loader=_UniqueKeyLoader)  # noqa: S506
    except yaml.YAMLError as exc:
        raise IngestionError(source, [str(exc)]) from exc
    if not isinstance(data, dict):
        raise IngestionError(source, [f"top level must be a mapping, got {type(data).__name__}"])
    try:
        registry = Registry.model_validate(data)
    except ValidationError as exc:
        raise IngestionError(source, _format_validation_error(exc)) from exc
    logger.debug("parsed registry %s: %s", source, registry.counts())
    return registry


def _read_embedded() -> str:
    return (resources.files("lingproxy") / "data" / EMBEDDED_REGISTRY).read_text(encoding="utf-8")


@log_call()
def load_registry(path: str | Path | None = None) -> Registry:
    """Load a registry from ``path`` or, when omitted, the embedded document.

    Raises:
        IngestionError: If the file cannot be read or does not validate.
    """
    if path is None:
        source = f"<embedded {EMBEDDED_REGISTRY}>"
        try:
            text = _read_embedded()
        except OSError as exc:
            raise IngestionError(source, [str(exc)]) from exc
    else:
        src = Path(path)
        source = str(src)
        try:
            text = src.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise IngestionError(source, [str(exc)]) from exc
    registry = parse_registry(text, source=source)
    logger.info("loaded registry from %s (%s routes)", source, sum(registry.counts().values()))
    return registry
