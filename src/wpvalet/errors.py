"""wpvalet exception hierarchy.

Routing itself never raises: missing artifacts degrade to absence. These
types cover invalid configuration and the HTTP serving surface.
"""

from dataclasses import dataclass


class ValetError(Exception):
    """Base for all wpvalet-specific errors."""


class ConfigurationError(ValetError):
    """Raised when driver or server configuration is invalid.

    Checked once, when the config dataclass is constructed.
    """


@dataclass(frozen=True, slots=True)
class HTTPError(ValetError):
    """An error that maps directly to an HTTP status code.

    Raised by site drivers and the ASGI app. ``ValetApp`` catches these
    and turns them into plain-text responses, headers included.
    """

    status: int
    detail: str = ""
    headers: tuple[tuple[str, str], ...] = ()

    def __str__(self) -> str:
        if self.detail:
            return f"{self.status}: {self.detail}"
        return str(self.status)


class NotFound(HTTPError):  # noqa: N818 — conventional name in web frameworks
    """404 — no site or front controller matched the request."""

    def __init__(self, detail: str = "Not Found") -> None:
        super().__init__(status=404, detail=detail)
