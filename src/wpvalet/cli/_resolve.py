"""``wpvalet resolve`` — print the routing decision for one URI.

Runs the same policy the server uses, without a server::

    $ wpvalet resolve ~/Sites/blog /wp-content/uploads/2024/photo.jpg
    remote https://blog.com/wp-content/uploads/2024/photo.jpg
"""

import argparse
import sys
from pathlib import Path

from wpvalet.classify import is_script_request
from wpvalet.drivers.wordpress import WordPressSiteDriver
from wpvalet.errors import HTTPError
from wpvalet.outcome import Local, Remote
from wpvalet.router import RoutingPolicy


def run_resolve(args: argparse.Namespace) -> None:
    """Print ``local <path>``, ``remote <url>``, or the front controller."""
    site_path = Path(args.site_path).expanduser().resolve()
    site_name = args.name or site_path.name
    host = args.host or f"{site_name}.test"

    policy = RoutingPolicy(WordPressSiteDriver())
    ctx = policy.serves(site_path, site_name, args.uri, host=host)
    if ctx is None:
        print(f"Error: {site_path} is not a WordPress site", file=sys.stderr)
        raise SystemExit(1)

    if not is_script_request(args.uri):
        outcome = policy.is_static_file(ctx, args.uri)
        if isinstance(outcome, Local):
            print(f"local {outcome.path}")
            return
        if isinstance(outcome, Remote):
            print(f"remote {outcome.url}")
            return

    try:
        script = policy.front_controller_path(ctx, args.uri)
    except HTTPError as exc:
        location = dict(exc.headers).get("Location", "")
        print(f"redirect {exc.status} {location}".rstrip())
        return

    if script is None:
        print("not-found")
        raise SystemExit(1)
    print(f"front-controller {script}")
