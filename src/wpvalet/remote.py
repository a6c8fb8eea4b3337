"""Production origin resolution for missing uploads."""

import logging
from pathlib import Path

from wpvalet.config import DriverConfig

logger = logging.getLogger("wpvalet.router")

_DEFAULT_CONFIG = DriverConfig()


def resolve_remote_origin(
    site_path: str | Path,
    site_name: str,
    config: DriverConfig = _DEFAULT_CONFIG,
) -> str:
    """Return the production base URL (scheme and host) for a local site.

    A ``.valet-proxy`` file in the site root wins: its trimmed content,
    minus trailing slashes, is used verbatim. Otherwise the local TLD is
    swapped for the production one::

        resolve_remote_origin(path, "example")  # "https://example.com"
    """
    override = Path(site_path) / config.proxy_file
    try:
        origin = override.read_text(encoding="utf-8").strip().rstrip("/")
    except FileNotFoundError:
        origin = ""
    except OSError as exc:
        logger.warning("Ignoring unreadable %s: %s", override, exc)
        origin = ""

    if origin:
        return origin

    local_domain = site_name + config.local_tld
    return config.remote_scheme + local_domain.replace(config.local_tld, config.remote_tld)
