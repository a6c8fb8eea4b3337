"""ASGI response sending — translates wpvalet Responses to ASGI messages.

Header values must be latin-1 encodable; ``send_response`` encodes every
header before the first ``send()`` so a bad value fails with nothing on
the wire and the caller can still answer with an error.
"""

from wpvalet._internal.asgi import Send
from wpvalet.http.response import Response


def _body_allowed(status: int) -> bool:
    """Whether an HTTP status code permits a response body."""
    # RFC: 1xx, 204, and 304 responses do not include a message body.
    return not (100 <= status < 200 or status in {204, 304})


def _raw_headers(response: Response, content_length: int) -> list[tuple[bytes, bytes]]:
    pairs = [("content-type", response.content_type), *response.headers]
    raw = [(name.lower().encode("latin-1"), value.encode("latin-1")) for name, value in pairs]
    raw.append((b"content-length", str(content_length).encode("latin-1")))
    return raw


async def send_response(response: Response, send: Send, *, head: bool = False) -> None:
    """Translate a Response into ASGI send() calls.

    For ``HEAD`` requests the body is dropped but ``Content-Length`` still
    reports the size a ``GET`` would have returned.
    """
    body = response.body_bytes if _body_allowed(response.status) else b""
    raw_headers = _raw_headers(response, len(body))

    await send(
        {
            "type": "http.response.start",
            "status": response.status,
            "headers": raw_headers,
        }
    )
    await send(
        {
            "type": "http.response.body",
            "body": b"" if head else body,
        }
    )
