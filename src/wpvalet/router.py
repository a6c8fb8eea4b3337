"""Routing policy — multisite rewriting and upload redirects for WordPress.

Wraps a ``SiteDriver`` and adds, in order:

1. Subdirectory-multisite core files resolved against the network root.
2. The wrapped driver's own static-file lookup.
3. Uploads missing locally redirected to the production host.

Anything left over is handed to the front controller, with subsite
prefixes stripped from core-directory URIs on multisite networks.

All per-request state lives on the ``RequestContext`` returned by
``serves()``; the policy itself holds only configuration and can be
shared across concurrent requests.
"""

import logging
from pathlib import Path

from wpvalet.classify import is_upload_request
from wpvalet.config import DriverConfig
from wpvalet.context import RequestContext
from wpvalet.drivers.base import SiteDriver
from wpvalet.http.response import Response, redirect
from wpvalet.multisite import detect_multisite
from wpvalet.outcome import Local, NotFound, Remote, RoutingOutcome
from wpvalet.paths import resolve_static_file, rewrite_front_controller_uri
from wpvalet.remote import resolve_remote_origin

logger = logging.getLogger("wpvalet.router")


class RoutingPolicy:
    """Request routing for local WordPress sites.

    Usage::

        policy = RoutingPolicy(WordPressSiteDriver())
        ctx = policy.serves(site_path, "blog", uri, host="blog.test")
        if ctx is not None:
            outcome = policy.is_static_file(ctx, uri)
    """

    __slots__ = ("_base", "_config")

    def __init__(self, base: SiteDriver, config: DriverConfig | None = None) -> None:
        self._base = base
        self._config = config or DriverConfig()

    @property
    def config(self) -> DriverConfig:
        return self._config

    def serves(
        self,
        site_path: str | Path,
        site_name: str,
        uri: str,
        *,
        host: str = "",
    ) -> RequestContext | None:
        """Build the request context if the wrapped driver serves this site."""
        site_path = Path(site_path)
        if not self._base.serves(site_path, site_name, uri):
            return None

        ctx = RequestContext(
            site_path=site_path,
            site_name=site_name,
            is_multisite=detect_multisite(site_path, self._config),
            host=host,
        )
        logger.debug("%s: multisite=%s", site_name, ctx.is_multisite)
        return ctx

    def is_static_file(self, ctx: RequestContext, uri: str) -> RoutingOutcome:
        """Decide whether ``uri`` is a local file, a remote upload, or neither.

        A local file always wins over a remote redirect.
        """
        ctx.is_remote_request = False

        if ctx.is_multisite:
            path = resolve_static_file(ctx.site_path, uri)
            if path is not None:
                logger.debug("%s %s -> network core file %s", ctx.site_name, uri, path)
                return Local(path)

        path = self._base.is_static_file(ctx.site_path, ctx.site_name, uri)
        if path is not None:
            return Local(path)

        if is_upload_request(uri, self._config):
            ctx.is_remote_request = True
            url = resolve_remote_origin(ctx.site_path, ctx.site_name, self._config) + uri
            logger.debug("%s %s -> remote %s", ctx.site_name, uri, url)
            return Remote(url)

        return NotFound()

    def serve_static_file(self, ctx: RequestContext, outcome: Local | Remote, uri: str) -> Response:
        """Redirect to production for remote uploads, otherwise stream the file."""
        if ctx.is_remote_request:
            ctx.is_remote_request = False
            if not isinstance(outcome, Remote):
                msg = f"Remote request flagged but outcome is {outcome!r}"
                raise TypeError(msg)
            return redirect(outcome.url, 302)

        if not isinstance(outcome, Local):
            msg = f"Cannot stream {outcome!r} without a preceding remote lookup"
            raise TypeError(msg)
        return self._base.serve_static_file(outcome.path, ctx.site_path, ctx.site_name, uri)

    def front_controller_path(self, ctx: RequestContext, uri: str) -> Path | None:
        """Resolve the front controller, rewriting subsite URIs on networks.

        Populates ``ctx.server`` the way a front-end web server would before
        the wrapped driver adds its script variables.
        """
        ctx.server["PHP_SELF"] = uri
        ctx.server["SERVER_ADDR"] = self._config.server_addr
        ctx.server["SERVER_NAME"] = ctx.host

        if ctx.is_multisite:
            rewritten = rewrite_front_controller_uri(ctx.site_path, uri)
            if rewritten != uri:
                logger.debug("%s %s -> %s", ctx.site_name, uri, rewritten)
            uri = rewritten

        return self._base.front_controller_path(ctx.site_path, ctx.site_name, uri, ctx.server)
