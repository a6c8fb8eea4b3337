"""Tests for wpvalet.classify — URI categories."""

import pytest

from wpvalet.classify import (
    AssetKind,
    classify,
    is_script_request,
    is_upload_request,
    is_wordpress_directory,
)
from wpvalet.config import DriverConfig


class TestIsWordPressDirectory:
    @pytest.mark.parametrize(
        "uri",
        [
            "/wp-admin/edit.php",
            "/blog2/wp-includes/js/jquery.js",
            "/wp-content/themes/twenty/style.css",
            "/WP-ADMIN/",
            "/sub/Wp-Content/x.png",
            "/foo?next=wp-admin",
        ],
    )
    def test_core_directories(self, uri: str) -> None:
        assert is_wordpress_directory(uri) is True

    @pytest.mark.parametrize("uri", ["/", "/about/", "/wp-cron.php", "/wp-login.php", "/files/a.jpg"])
    def test_other_uris(self, uri: str) -> None:
        assert is_wordpress_directory(uri) is False


class TestIsUploadRequest:
    @pytest.mark.parametrize(
        "uri",
        [
            "/wp-content/uploads/2024/photo.jpg",
            "/files/2012/01/logo.png",
            "/blog2/files/2012/01/logo.png",
            "/blog2/files/",
        ],
    )
    def test_upload_prefixes(self, uri: str) -> None:
        assert is_upload_request(uri) is True

    @pytest.mark.parametrize(
        "uri",
        [
            "/a/b/files/logo.png",
            "/filesystem/logo.png",
            "/blog2/wp-content/uploads/photo.jpg",
            "/WP-CONTENT/UPLOADS/photo.jpg",
            "/wp-content/themes/twenty/style.css",
            "/",
        ],
    )
    def test_not_uploads(self, uri: str) -> None:
        assert is_upload_request(uri) is False

    def test_custom_patterns(self) -> None:
        config = DriverConfig(upload_patterns=(r"^/media/",))
        assert is_upload_request("/media/a.jpg", config) is True
        assert is_upload_request("/files/a.jpg", config) is False


class TestClassify:
    def test_upload_wins_over_core_directory(self) -> None:
        assert classify("/wp-content/uploads/2024/photo.jpg") is AssetKind.UPLOAD

    def test_legacy_multisite_upload(self) -> None:
        assert classify("/blog2/files/photo.jpg") is AssetKind.UPLOAD

    def test_core_asset(self) -> None:
        assert classify("/blog2/wp-admin/edit.php") is AssetKind.WORDPRESS_CORE

    def test_ordinary_asset(self) -> None:
        assert classify("/about/team/") is AssetKind.ORDINARY


class TestIsScriptRequest:
    @pytest.mark.parametrize("uri", ["/", "/wp-login.php", "/blog2/wp-admin/edit.php", "/wp-cron.php"])
    def test_scripts(self, uri: str) -> None:
        assert is_script_request(uri) is True

    @pytest.mark.parametrize("uri", ["/style.css", "/wp-admin/", "/about/", "/php/", "/phpinfo"])
    def test_everything_else(self, uri: str) -> None:
        assert is_script_request(uri) is False
