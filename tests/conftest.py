"""Shared fixtures: throwaway WordPress checkouts on disk."""

from pathlib import Path

import pytest


def _touch(path: Path, content: str = "<?php\n") -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content)


@pytest.fixture
def site(tmp_path: Path) -> Path:
    """A single-site WordPress checkout named ``site``."""
    root = tmp_path / "site"
    _touch(root / "wp-config.php", "<?php\ndefine('DB_NAME', 'wordpress');\n")
    _touch(root / "index.php", "<?php require __DIR__ . '/wp-blog-header.php';\n")
    _touch(root / "wp-cron.php")
    _touch(root / "wp-admin" / "index.php")
    _touch(root / "wp-admin" / "edit.php")
    _touch(root / "wp-admin" / "network" / "sites.php")
    _touch(root / "wp-includes" / "js" / "jquery.js", "window.jQuery = {};")
    _touch(root / "wp-content" / "themes" / "twenty" / "style.css", "body { margin: 0; }")
    _touch(root / "style.css", "body { color: red; }")
    return root


@pytest.fixture
def multisite(site: Path) -> Path:
    """The same checkout, configured as a subdirectory network."""
    config = site / "wp-config.php"
    config.write_text(
        config.read_text()
        + "define('MULTISITE', true);\ndefine('SUBDOMAIN_INSTALL', false);\n"
    )
    return site
