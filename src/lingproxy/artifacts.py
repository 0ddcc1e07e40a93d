"""Write the generated proxy configuration to disk."""

from __future__ import annotations

import logging
import os
import tempfile
from pathlib import Path

from logging_setup import log_call

from .config import HEADERS_FILE, LOCATIONS_FILE
from .errors import OutputWriteError
from .registry.models import Registry
from .render.proxy_config import render_locations, render_proxy_headers
from .routes import compile_routes

__all__ = ["write_artifacts"]

logger = logging.getLogger(__name__)


def _write(path: Path, text: str) -> None:
    """Write ``text`` to a sibling temp file, then rename it over ``path``.

    Readers see either the previous file or the complete new one.
    """
    tmp: Path | None = None
    try:
        with tempfile.NamedTemporaryFile(
            "w", encoding="utf-8", dir=path.parent, prefix=f".{path.name}.", suffix=".tmp", delete=False
        ) as fh:
            tmp = Path(fh.name)
            fh.write(text)
        os.chmod(tmp, 0o644)
        os.replace(tmp, path)
    except OSError as exc:
        if tmp is not None:
            tmp.unlink(missing_ok=True)
        raise OutputWriteError(path, exc) from exc
    logger.info("wrote %s (%d bytes)", path, len(text.encode("utf-8")))


@log_call()
def write_artifacts(registry: Registry, out_dir: str | Path) -> tuple[Path, Path]:
    """Render and write ``locations.conf`` and ``proxy-headers.conf``.

    Args:
        registry: Registry to compile.
        out_dir: Target directory; created (with parents) when missing.

    Returns:
        Paths of the locations file and the headers file.

    Raises:
        OutputWriteError: If the directory or either file cannot be written.
    """
    target = Path(out_dir)
    try:
        target.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise OutputWriteError(target, exc) from exc

    routes = compile_routes(registry)
    locations = target / LOCATIONS_FILE
    headers = target / HEADERS_FILE
    _write(locations, render_locations(routes))
    _write(headers, render_proxy_headers())
    return locations, headers
