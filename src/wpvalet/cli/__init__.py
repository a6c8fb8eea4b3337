"""wpvalet CLI — inspect routing decisions and serve parked sites.

Entry point registered as ``wpvalet`` in ``pyproject.toml``::

    [project.scripts]
    wpvalet = "wpvalet.cli:main"
"""

import argparse
import logging
import sys


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``wpvalet`` command."""
    parser = argparse.ArgumentParser(
        prog="wpvalet",
        description="wpvalet — WordPress request routing for local development.",
    )
    parser.add_argument(
        "--log-level",
        default="warning",
        choices=("debug", "info", "warning", "error"),
        help="Logging verbosity",
    )
    subparsers = parser.add_subparsers(dest="command")

    # -- wpvalet resolve --------------------------------------------------
    resolve_parser = subparsers.add_parser("resolve", help="Show how a URI is routed")
    resolve_parser.add_argument("site_path", help="Site root directory")
    resolve_parser.add_argument("uri", help="Request path, e.g. /wp-content/uploads/a.jpg")
    resolve_parser.add_argument("--name", default=None, help="Site name (default: directory name)")
    resolve_parser.add_argument("--host", default=None, help="Host header (default: <name>.test)")

    # -- wpvalet serve ----------------------------------------------------
    serve_parser = subparsers.add_parser("serve", help="Serve parked sites")
    serve_parser.add_argument(
        "--path",
        action="append",
        dest="paths",
        default=None,
        help="Parked directory holding sites (repeatable, default: cwd)",
    )
    serve_parser.add_argument("--tld", default="test", help="Local top-level domain")
    serve_parser.add_argument("--host", default="127.0.0.1", help="Bind host address")
    serve_parser.add_argument("--port", type=int, default=8000, help="Bind port number")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    logging.basicConfig(
        level=args.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.command == "resolve":
        from wpvalet.cli._resolve import run_resolve

        run_resolve(args)
    elif args.command == "serve":
        from wpvalet.cli._serve import run_serve

        run_serve(args)
