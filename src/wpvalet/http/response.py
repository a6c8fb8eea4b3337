"""HTTP response with chainable .with_*() transformation API.

Each transformation returns a new Response. Immutable by convention,
built incrementally by design.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, replace
from urllib.parse import quote

# Path and authority characters, plus "%" so existing escapes survive
_URL_SAFE = "/%:@!$&'()*+,;=~"


@dataclass(frozen=True, slots=True)
class Response:
    """An HTTP response built through immutable transformations.

    Construct with a body, then chain ``.with_*()`` calls to add
    headers. Each call returns a new ``Response``.
    """

    body: str | bytes = ""
    status: int = 200
    content_type: str = "text/plain; charset=utf-8"
    headers: tuple[tuple[str, str], ...] = ()

    # -- Chainable transformations --

    def with_header(self, name: str, value: str) -> Response:
        """Return a new Response with an additional header."""
        return replace(self, headers=(*self.headers, (name, value)))

    def with_headers(self, headers: Mapping[str, str]) -> Response:
        """Return a new Response with additional headers."""
        new = tuple(headers.items())
        return replace(self, headers=(*self.headers, *new))

    # -- Accessors --

    def header(self, name: str) -> str | None:
        """First value of a header (case-insensitive), or None."""
        lowered = name.lower()
        for key, value in self.headers:
            if key.lower() == lowered:
                return value
        return None

    @property
    def body_bytes(self) -> bytes:
        """Body as bytes."""
        if isinstance(self.body, str):
            return self.body.encode("utf-8")
        return self.body


def quote_url(url: str) -> str:
    """Percent-encode characters a header-safe URL cannot carry."""
    return quote(url, safe=_URL_SAFE)


def redirect(url: str, status: int = 302) -> Response:
    """Build an empty-bodied redirect to ``url``.

    ASGI paths arrive percent-decoded, so spaces and non-ASCII characters
    are escaped again here; the ``Location`` header must be plain ASCII.
    """
    return Response(body="", status=status).with_header("Location", quote_url(url))
