"""Routing outcomes for a static-file lookup.

Exactly one variant is produced per lookup. ``Remote`` tells the serving
step to emit a redirect instead of streaming bytes.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import TypeAlias


@dataclass(frozen=True, slots=True)
class Local:
    """A file on disk that should be served as-is."""

    path: Path


@dataclass(frozen=True, slots=True)
class Remote:
    """An asset missing locally; the client is redirected to ``url``."""

    url: str


@dataclass(frozen=True, slots=True)
class NotFound:
    """No static asset matched. The front controller gets the request."""


RoutingOutcome: TypeAlias = Local | Remote | NotFound
