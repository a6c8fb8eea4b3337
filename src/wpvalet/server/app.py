"""ASGI application serving parked WordPress sites.

The only component that touches raw ASGI directly. Resolves the site
from the ``Host`` header, runs the routing policy in a worker thread
(every decision is blocking filesystem work), and sends back a file, a
redirect, or whatever the front controller produces.
"""

import inspect
import logging
from collections.abc import Awaitable, Callable
from pathlib import Path
from typing import TypeAlias

import anyio.to_thread

from wpvalet._internal.asgi import HTTPScope, Receive, Scope, Send
from wpvalet.classify import is_script_request
from wpvalet.config import ValetConfig
from wpvalet.context import RequestContext, context_var
from wpvalet.drivers.base import SiteDriver
from wpvalet.drivers.wordpress import WordPressSiteDriver
from wpvalet.errors import HTTPError, NotFound
from wpvalet.http.response import Response
from wpvalet.outcome import Local, Remote
from wpvalet.router import RoutingPolicy
from wpvalet.server.sender import send_response
from wpvalet.sites import Site, SiteResolver

logger = logging.getLogger("wpvalet.server")

# Runs the chosen PHP script; gets the script path and the routing context
FrontController: TypeAlias = Callable[[Path, RequestContext], Response | Awaitable[Response]]


class ValetApp:
    """ASGI 3.0 application for local WordPress development.

    Usage::

        app = ValetApp(ValetConfig(paths=("~/Sites",)))

    PHP execution is out of scope; pass ``front_controller`` to bridge to
    a PHP runtime. Without one, requests that reach a front controller
    get a 501.
    """

    __slots__ = ("_config", "_front_controller", "_policy", "_sites")

    def __init__(
        self,
        config: ValetConfig | None = None,
        *,
        driver: SiteDriver | None = None,
        front_controller: FrontController | None = None,
    ) -> None:
        self._config = config or ValetConfig()
        self._policy = RoutingPolicy(driver or WordPressSiteDriver(), self._config.driver)
        self._sites = SiteResolver(self._config.paths, tld=self._config.tld)
        self._front_controller = front_controller

    @property
    def config(self) -> ValetConfig:
        return self._config

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        """ASGI 3.0 entry point."""
        if scope["type"] == "lifespan":
            await self._handle_lifespan(receive, send)
            return

        if scope["type"] != "http":
            return

        request = HTTPScope.from_scope(scope)
        try:
            response = await self._handle(request)
        except HTTPError as exc:
            response = Response(body=exc.detail or str(exc.status), status=exc.status)
            response = response.with_headers(dict(exc.headers))
        except Exception:
            logger.exception("Unhandled error serving %s %s", request.method, request.path)
            response = Response(body="Internal Server Error", status=500)

        logger.info("%s %s%s -> %d", request.method, request.host, request.path, response.status)
        head = request.method == "HEAD"
        try:
            await send_response(response, send, head=head)
        except UnicodeEncodeError:
            logger.exception("Response headers for %s are not latin-1 encodable", request.path)
            await send_response(Response(body="Internal Server Error", status=500), send, head=head)

    async def _handle_lifespan(self, receive: Receive, send: Send) -> None:
        while True:
            message = await receive()
            if message["type"] == "lifespan.startup":
                logger.info("Serving .%s sites from %s", self._config.tld, ", ".join(map(str, self._config.paths)))
                await send({"type": "lifespan.startup.complete"})
            elif message["type"] == "lifespan.shutdown":
                await send({"type": "lifespan.shutdown.complete"})
                return

    async def _handle(self, request: HTTPScope) -> Response:
        site = self._sites.resolve(request.host)
        if site is None:
            raise NotFound(f"No site is parked for {request.host!r}")

        ctx, response, script = await anyio.to_thread.run_sync(self._route, site, request)
        if response is not None:
            return response
        if script is None:
            raise NotFound()
        return await self._run_front_controller(script, ctx)

    def _route(
        self,
        site: Site,
        request: HTTPScope,
    ) -> tuple[RequestContext, Response | None, Path | None]:
        """Blocking half of request handling: static lookup, then front controller."""
        ctx = self._policy.serves(site.path, site.name, request.path, host=request.host)
        if ctx is None:
            raise NotFound(f"{site.name} is not a WordPress site")

        ctx.server.update(
            {
                "REQUEST_METHOD": request.method,
                "REQUEST_URI": _request_uri(request),
                "QUERY_STRING": request.query_string.decode("latin-1"),
                "HTTP_HOST": request.host,
            }
        )

        if not is_script_request(request.path):
            outcome = self._policy.is_static_file(ctx, request.path)
            if isinstance(outcome, Local | Remote):
                return ctx, self._policy.serve_static_file(ctx, outcome, request.path), None

        return ctx, None, self._policy.front_controller_path(ctx, request.path)

    async def _run_front_controller(self, script: Path, ctx: RequestContext) -> Response:
        if self._front_controller is None:
            name = ctx.server.get("SCRIPT_NAME", script.name)
            raise HTTPError(status=501, detail=f"No PHP runtime configured to run {name}")

        token = context_var.set(ctx)
        try:
            result = self._front_controller(script, ctx)
            if inspect.isawaitable(result):
                result = await result
            return result
        finally:
            context_var.reset(token)


def _request_uri(request: HTTPScope) -> str:
    if request.query_string:
        return f"{request.path}?{request.query_string.decode('latin-1')}"
    return request.path
