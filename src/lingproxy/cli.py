"""Command-line entry point: ``serve``, ``generate`` and ``inspect``."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from logging_setup import setup_logging

from . import __version__
from .artifacts import write_artifacts
from .config import serve_defaults
from .errors import LingproxyError
from .registry import load_registry

logger = logging.getLogger(__name__)

__all__ = ["build_parser", "main"]


def _port(value: str) -> int:
    try:
        port = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid port: {value!r}") from None
    if not 0 <= port <= 65535:
        raise argparse.ArgumentTypeError(f"port out of range 0-65535: {port}")
    return port


def _cmd_serve(args: argparse.Namespace) -> int:
    import uvicorn

    from api.app import create_app

    app = create_app(load_registry(args.registry))
    logger.info("serving on http://%s:%d", args.host, args.port)
    uvicorn.run(app, host=args.host, port=args.port, log_config=None)
    return 0


def _cmd_generate(args: argparse.Namespace) -> int:
    registry = load_registry(args.registry)
    locations, headers = write_artifacts(registry, args.path)
    print(f"Wrote {locations} and {headers}")
    return 0


def _cmd_inspect(args: argparse.Namespace) -> int:
    counts = load_registry(args.registry).counts()
    if args.json:
        print(json.dumps({"routes": counts, "total": sum(counts.values())}, indent=2))
        return 0
    for category, count in counts.items():
        print(f"{category:<12} {count}")
    print(f"{'total':<12} {sum(counts.values())}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    host, port = serve_defaults()
    parser = argparse.ArgumentParser(
        prog="lingproxy",
        description="Serve the language tools directory or generate its proxy configuration.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("--log-level", default=None, help="DEBUG, INFO, ... or TRACE (default: $LOG_LEVEL or INFO)")
    parser.add_argument(
        "--log-dir",
        default=None,
        help="directory for rotating log files; empty disables them (default: $LINGPROXY_LOG_DIR or logs)",
    )
    sub = parser.add_subparsers(dest="cmd", required=True)

    registry_opts = argparse.ArgumentParser(add_help=False)
    registry_opts.add_argument(
        "--registry", type=Path, default=None, help="registry YAML to load instead of the embedded one"
    )

    p_serve = sub.add_parser("serve", parents=[registry_opts], help="run the HTTP server")
    p_serve.add_argument("--host", default=host)
    p_serve.add_argument("--port", type=_port, default=port)
    p_serve.set_defaults(func=_cmd_serve)

    p_gen = sub.add_parser("generate", parents=[registry_opts], help="write nginx location and header files")
    p_gen.add_argument("path", type=Path, help="output directory")
    p_gen.set_defaults(func=_cmd_generate)

    p_inspect = sub.add_parser("inspect", parents=[registry_opts], help="print route counts per category")
    p_inspect.add_argument("--json", action="store_true")
    p_inspect.set_defaults(func=_cmd_inspect)
    return parser


def main(argv: list[str] | None = None) -> int:
    """Entry point for the ``lingproxy`` CLI."""
    args = build_parser().parse_args(argv)
    setup_logging(level=args.log_level, log_dir=args.log_dir)
    try:
        return args.func(args)
    except LingproxyError as exc:
        logger.error("%s", exc)
        print(f"error: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
