"""URI classification.

Categories overlap in the raw text (``/wp-content/uploads/...`` is both a
core-directory URI and an upload). The router never asks for a single
category: it applies ``is_wordpress_directory`` and ``is_upload_request``
at fixed points of its lookup order. ``classify`` is a convenience view
with upload taking precedence.
"""

import re
from enum import Enum
from functools import lru_cache
from pathlib import PurePosixPath

from wpvalet.config import DriverConfig

_CORE_DIRECTORIES = ("wp-admin", "wp-content", "wp-includes")

_DEFAULT_CONFIG = DriverConfig()


class AssetKind(Enum):
    WORDPRESS_CORE = "wordpress-core"
    UPLOAD = "upload"
    ORDINARY = "ordinary"


@lru_cache(maxsize=32)
def _compile(patterns: tuple[str, ...]) -> tuple[re.Pattern[str], ...]:
    return tuple(re.compile(p) for p in patterns)


def is_wordpress_directory(uri: str) -> bool:
    """True if the URI mentions wp-admin, wp-content or wp-includes anywhere."""
    lowered = uri.lower()
    return any(name in lowered for name in _CORE_DIRECTORIES)


def is_upload_request(uri: str, config: DriverConfig = _DEFAULT_CONFIG) -> bool:
    """True if the URI matches one of the upload prefixes.

    The default patterns are ``/wp-content/uploads/``, ``/files/`` and
    ``/<one segment>/files/`` (legacy multisite uploads). Deeper paths
    such as ``/a/b/files/`` are not uploads.
    """
    return any(p.search(uri) for p in _compile(config.upload_patterns))


def classify(uri: str, config: DriverConfig = _DEFAULT_CONFIG) -> AssetKind:
    """Classify a request URI by pattern alone. No filesystem access."""
    if is_upload_request(uri, config):
        return AssetKind.UPLOAD
    if is_wordpress_directory(uri):
        return AssetKind.WORDPRESS_CORE
    return AssetKind.ORDINARY


def is_script_request(uri: str) -> bool:
    """True for the site root and ``.php`` URIs.

    These always go to the front controller; the host never serves them
    as static files, whatever the routing policy would say.
    """
    return uri == "/" or PurePosixPath(uri).suffix == ".php"
