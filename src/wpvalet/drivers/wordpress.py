"""Stock WordPress site driver.

The behaviour the host runtime applies to any WordPress checkout before
the routing policy adds multisite and upload handling: plain files are
served from the site root, PHP scripts and pretty permalinks go to a
front controller.
"""

import mimetypes
from pathlib import Path

from wpvalet._internal.fs import site_file
from wpvalet.errors import HTTPError
from wpvalet.http.response import Response, quote_url


class WordPressSiteDriver:
    """Serves WordPress checkouts identified by their ``wp-config`` file.

    Usage::

        driver = WordPressSiteDriver()
        if driver.serves(site_path, "blog", "/"):
            path = driver.is_static_file(site_path, "blog", "/style.css")
    """

    __slots__ = ("_cache_control",)

    def __init__(self, *, cache_control: str = "no-cache") -> None:
        self._cache_control = cache_control

    def serves(self, site_path: Path, site_name: str, uri: str) -> bool:
        """True for directories holding ``wp-config.php`` or its sample."""
        return (site_path / "wp-config.php").is_file() or (
            site_path / "wp-config-sample.php"
        ).is_file()

    def is_static_file(self, site_path: Path, site_name: str, uri: str) -> Path | None:
        """Return the file under the site root for ``uri``, unless it is a script."""
        path = site_file(site_path, uri)
        if path is None or path.suffix.lower() == ".php":
            return None
        return path

    def front_controller_path(
        self,
        site_path: Path,
        site_name: str,
        uri: str,
        environ: dict[str, str],
    ) -> Path | None:
        """Pick the PHP script that should handle ``uri``.

        Tries the URI itself when it names a script, then ``<uri>/index.php``,
        then the root ``index.php``. The winner is recorded in ``environ``.

        Raises:
            HTTPError: 301 to the slash form for a bare ``/wp-admin``, so
                relative links inside the dashboard resolve.
        """
        if uri.endswith("/wp-admin"):
            location = quote_url(environ.get("PHP_SELF", uri) + "/")
            raise HTTPError(status=301, detail="Moved Permanently", headers=(("Location", location),))

        candidates: list[str] = []
        if uri.lower().endswith(".php"):
            candidates.append(uri)
        candidates.append(uri.rstrip("/") + "/index.php")
        candidates.append("/index.php")

        for candidate in candidates:
            script = site_file(site_path, candidate)
            if script is not None:
                environ["SCRIPT_FILENAME"] = str(script)
                environ["SCRIPT_NAME"] = "/" + script.relative_to(site_path).as_posix()
                environ["DOCUMENT_ROOT"] = str(site_path)
                return script
        return None

    def serve_static_file(
        self,
        static_file_path: Path,
        site_path: Path,
        site_name: str,
        uri: str,
    ) -> Response:
        """Read a file and build a response."""
        content_type, _ = mimetypes.guess_type(str(static_file_path))
        if content_type is None:
            content_type = "application/octet-stream"

        body = static_file_path.read_bytes()

        return (
            Response(body=body, content_type=content_type)
            .with_header("Cache-Control", self._cache_control)
        )
