"""Driver and server configuration.

Both configs are frozen dataclasses — immutable after creation,
IDE-autocompletable, no string-key dict lookups.
"""

import re
from dataclasses import dataclass, field
from pathlib import Path

from wpvalet.errors import ConfigurationError


@dataclass(frozen=True, slots=True)
class DriverConfig:
    """Routing rules for a WordPress site. Immutable after creation.

    The defaults match the stock local environment (``.test`` sites,
    production on ``https://<name>.com``). Override what you need::

        config = DriverConfig(remote_tld=".org")
    """

    # Remote origin synthesis: <name><local_tld> -> <name><remote_tld>
    local_tld: str = ".test"
    remote_tld: str = ".com"
    remote_scheme: str = "https://"

    # Per-site artifacts, relative to the site root
    proxy_file: str = ".valet-proxy"
    wp_config_file: str = "wp-config.php"

    # Reported to the front controller as SERVER_ADDR
    server_addr: str = "127.0.0.1"

    # Substrings marking a network (multisite) installation
    multisite_markers: tuple[str, ...] = ("MULTISITE", "WP_ALLOW_MULTISITE")

    # Upload URIs redirected to production when missing locally
    upload_patterns: tuple[str, ...] = (
        r"^/wp-content/uploads/",
        r"^/files/",
        r"^/[^/]+/files/",
    )

    def __post_init__(self) -> None:
        if not self.local_tld or not self.remote_tld:
            msg = "local_tld and remote_tld must be non-empty"
            raise ConfigurationError(msg)
        for pattern in self.upload_patterns:
            try:
                re.compile(pattern)
            except re.error as exc:
                msg = f"Invalid upload pattern {pattern!r}: {exc}"
                raise ConfigurationError(msg) from exc


@dataclass(frozen=True, slots=True)
class ValetConfig:
    """Server configuration for serving parked WordPress sites.

    ``paths`` are parked directories: every child directory is a site,
    reachable as ``http://<child>.<tld>``.
    """

    # Server
    host: str = "127.0.0.1"
    port: int = 8000

    # Site discovery
    paths: tuple[str | Path, ...] = ()
    tld: str = "test"

    # Logging
    log_level: str = "info"

    driver: DriverConfig = field(default_factory=DriverConfig)

    def __post_init__(self) -> None:
        if not self.tld or self.tld.startswith("."):
            msg = f"tld must be a bare label like 'test', got {self.tld!r}"
            raise ConfigurationError(msg)
