"""``wpvalet serve`` — run the ASGI app over parked site directories."""

import argparse
import sys
from pathlib import Path

from wpvalet.config import ValetConfig
from wpvalet.errors import ConfigurationError
from wpvalet.server.app import ValetApp


def run_serve(args: argparse.Namespace) -> None:
    """Build a ValetApp from CLI flags and start the pounce server."""
    paths = tuple(Path(p).expanduser().resolve() for p in (args.paths or [Path.cwd()]))
    try:
        config = ValetConfig(
            host=args.host,
            port=args.port,
            paths=paths,
            tld=args.tld,
            log_level=args.log_level,
        )
    except ConfigurationError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(2) from exc

    from wpvalet.server.dev import run_server

    run_server(ValetApp(config), config.host, config.port)
