"""Site driver protocol.

A site driver is the host runtime's view of one kind of site: whether it
can serve a directory, how static files are found and streamed, and which
PHP script is the front controller. ``RoutingPolicy`` wraps one and calls
through to it whenever its own rules defer.

No base class required. The router checks the shape, not the lineage.
"""

from pathlib import Path
from typing import Protocol, runtime_checkable

from wpvalet.http.response import Response


@runtime_checkable
class SiteDriver(Protocol):
    """Protocol for host-runtime site drivers.

    ``environ`` is the per-request server environment; drivers add the
    script variables (``SCRIPT_FILENAME`` and friends) to it when they
    pick a front controller.
    """

    def serves(self, site_path: Path, site_name: str, uri: str) -> bool: ...

    def is_static_file(self, site_path: Path, site_name: str, uri: str) -> Path | None: ...

    def front_controller_path(
        self,
        site_path: Path,
        site_name: str,
        uri: str,
        environ: dict[str, str],
    ) -> Path | None: ...

    def serve_static_file(
        self,
        static_file_path: Path,
        site_path: Path,
        site_name: str,
        uri: str,
    ) -> Response: ...
