"""Request-scoped routing state.

A ``RequestContext`` is built once per incoming request by
``RoutingPolicy.serves`` and dropped when the request completes. Nothing
here is shared between requests, so concurrent handling needs no locks.

``context_var`` exposes the active context to front controllers that
run downstream of the router, the same way the request itself would be.
"""

from contextvars import ContextVar
from dataclasses import dataclass, field
from pathlib import Path


@dataclass(slots=True)
class RequestContext:
    """Routing state for one request against one site.

    ``is_multisite`` is detected once when the context is built and is
    never reassigned afterwards. ``is_remote_request`` records whether the
    most recent static-file lookup produced a redirect; the router resets
    it at the start of every lookup.
    """

    site_path: Path
    site_name: str
    is_multisite: bool
    host: str = ""
    is_remote_request: bool = False

    # Values a front-end web server would hand to the PHP front controller
    server: dict[str, str] = field(default_factory=dict)


context_var: ContextVar[RequestContext] = ContextVar("wpvalet_context")
"""The current routing context. Set by ``ValetApp`` around dispatch."""


def get_context() -> RequestContext:
    """Return the routing context of the request being handled.

    Raises ``LookupError`` if called outside a request.
    """
    return context_var.get()
