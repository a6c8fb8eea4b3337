"""Network (multisite) installation detection.

The check is a plain substring scan of ``wp-config.php``. The file is
arbitrary PHP this package does not own, so no attempt is made to parse
it: a commented-out ``MULTISITE`` define still counts.
"""

from pathlib import Path

from wpvalet.config import DriverConfig

_DEFAULT_CONFIG = DriverConfig()


def detect_multisite(site_path: str | Path, config: DriverConfig = _DEFAULT_CONFIG) -> bool:
    """Return True if the site's config file mentions a multisite marker.

    A missing or unreadable config file means single-site.
    """
    wp_config = Path(site_path) / config.wp_config_file
    try:
        text = wp_config.read_text(encoding="utf-8", errors="replace")
    except OSError:
        return False
    return any(marker in text for marker in config.multisite_markers)
