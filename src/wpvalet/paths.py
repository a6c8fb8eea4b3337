"""Subdirectory-multisite path rewriting.

A subdirectory network serves every subsite's core files (``wp-admin``,
``wp-includes``, ``wp-content``) from the network root, so
``/blog2/wp-admin/edit.php`` really lives at ``/wp-admin/edit.php``.
These helpers strip the subsite prefix from core-directory URIs. Non-core
URIs and the network admin keep their prefix.

Only meaningful for multisite installations; the router guards the calls.
"""

from pathlib import Path

from wpvalet._internal.fs import site_file
from wpvalet.classify import is_wordpress_directory


def truncate_to_core(uri: str) -> str:
    """Return ``uri`` from its first ``/wp-`` (case-insensitive) onwards.

    The URI is returned unchanged when it has no ``/wp-`` segment.
    Truncating an already-truncated URI is a no-op.
    """
    index = uri.lower().find("/wp-")
    if index == -1:
        return uri
    return uri[index:]


def resolve_static_file(site_path: Path, uri: str) -> Path | None:
    """Find the shared core file a subsite URI points at.

    Directory URIs (trailing ``/``) are never resolved here, whatever is
    on disk.
    """
    if not is_wordpress_directory(uri):
        return None
    if uri.endswith("/"):
        return None
    return site_file(site_path, truncate_to_core(uri))


def rewrite_front_controller_uri(site_path: Path, uri: str) -> str:
    """Rewrite a subsite URI before front-controller resolution."""
    if not is_wordpress_directory(uri):
        return uri

    lowered = uri.lower()
    if "wp-admin/network" in lowered:
        return uri

    if "wp-cron.php" in lowered:
        truncated = truncate_to_core(uri)
        if site_file(site_path, truncated) is not None:
            return truncated
        return uri

    return truncate_to_core(uri)
