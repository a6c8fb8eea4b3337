"""Parked-directory site discovery.

Every child directory of a parked path is a site named after the
directory and reachable as ``<name>.<tld>``. Subdomains resolve to
their parent site, so ``shop.blog.test`` serves ``blog``.
"""

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True, slots=True)
class Site:
    """A discovered site: its root directory and short name."""

    path: Path
    name: str


class SiteResolver:
    """Map ``Host`` headers onto parked site directories.

    Usage::

        resolver = SiteResolver(["~/Sites"], tld="test")
        site = resolver.resolve("blog.test:8000")
    """

    __slots__ = ("_paths", "_suffix")

    def __init__(self, paths: tuple[str | Path, ...] | list[str | Path], *, tld: str = "test") -> None:
        self._paths = tuple(Path(p).expanduser() for p in paths)
        self._suffix = "." + tld

    def site_name(self, host: str) -> str:
        """Strip port, TLD and a leading ``www.`` from a host header."""
        name = host.partition(":")[0].lower().rstrip(".")
        name = name.removesuffix(self._suffix)
        return name.removeprefix("www.")

    def resolve(self, host: str) -> Site | None:
        """Find the site for ``host``, or None if nothing is parked under that name.

        Names that are not a single path component (``/``, ``\\``, ``..``)
        never match, so a crafted ``Host`` cannot leave the parked paths.
        """
        name = self.site_name(host)
        if not name or "/" in name or "\\" in name or ".." in name:
            return None

        site = self._find(name)
        if site is None and "." in name:
            site = self._find(name.rsplit(".", 1)[-1])
        return site

    def _find(self, name: str) -> Site | None:
        for parked in self._paths:
            exact = parked / name
            if exact.parent == parked and exact.is_dir():
                return Site(path=exact, name=name)
            if not parked.is_dir():
                continue
            for child in parked.iterdir():
                if child.name.lower() == name and child.is_dir():
                    return Site(path=child, name=child.name)
        return None
