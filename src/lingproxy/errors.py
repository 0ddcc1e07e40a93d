"""Exception types raised by the registry loader and artifact writer."""

from __future__ import annotations

from pathlib import Path

__all__ = ["LingproxyError", "IngestionError", "OutputWriteError"]


class LingproxyError(Exception):
    """Base class for fatal errors surfaced to the operator."""


class IngestionError(LingproxyError):
    """The registry document could not be turned into a :class:`Registry`.

    Attributes:
        source: Name of the document (file path or ``<string>``).
        problems: Individual problems found, one per entry.
    """

    def __init__(self, source: str, problems: list[str]) -> None:
        self.source = source
        self.problems = problems
        super().__init__(f"invalid registry {source}: " + "; ".join(problems))


class OutputWriteError(LingproxyError):
    """A generated artifact could not be written."""

    def __init__(self, path: Path, cause: OSError) -> None:
        self.path = path
        self.cause = cause
        super().__init__(f"cannot write {path}: {cause.strerror or cause}")
