"""Filesystem helpers shared by the path resolver and site drivers."""

from pathlib import Path, PurePosixPath


def site_file(site_path: Path, uri: str) -> Path | None:
    """Map a URI onto the site root and return it if it is a regular file.

    URIs containing ``..`` segments are rejected outright rather than
    resolved, so symlinked WordPress cores inside the root keep working.
    """
    relative = PurePosixPath(uri.lstrip("/"))
    if ".." in relative.parts:
        return None
    candidate = site_path / relative
    return candidate if candidate.is_file() else None
