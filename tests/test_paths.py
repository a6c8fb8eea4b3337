"""Tests for wpvalet.paths — subdirectory-multisite rewriting."""

import pytest

from wpvalet.paths import resolve_static_file, rewrite_front_controller_uri, truncate_to_core


class TestTruncateToCore:
    def test_strips_subsite_prefix(self) -> None:
        assert truncate_to_core("/blog2/wp-admin/edit.php") == "/wp-admin/edit.php"

    def test_case_insensitive_match_preserves_case(self) -> None:
        assert truncate_to_core("/Blog2/WP-Admin/Edit.php") == "/WP-Admin/Edit.php"

    def test_first_occurrence_wins(self) -> None:
        assert truncate_to_core("/a/wp-content/b/wp-includes/c.js") == "/wp-content/b/wp-includes/c.js"

    def test_without_core_segment_unchanged(self) -> None:
        assert truncate_to_core("/about/team/") == "/about/team/"

    @pytest.mark.parametrize(
        "uri",
        ["/wp-admin/edit.php", "/blog2/wp-includes/js/jquery.js", "/x/y/wp-cron.php", "/about/"],
    )
    def test_idempotent(self, uri: str) -> None:
        once = truncate_to_core(uri)
        assert truncate_to_core(once) == once


class TestResolveStaticFile:
    def test_subsite_core_file(self, site) -> None:
        assert resolve_static_file(site, "/blog2/wp-includes/js/jquery.js") == (
            site / "wp-includes" / "js" / "jquery.js"
        )

    def test_unprefixed_core_file(self, site) -> None:
        assert resolve_static_file(site, "/wp-admin/edit.php") == site / "wp-admin" / "edit.php"

    def test_directory_uri_always_declines(self, site) -> None:
        assert (site / "wp-admin" / "index.php").is_file()
        assert resolve_static_file(site, "/blog2/wp-admin/") is None
        assert resolve_static_file(site, "/wp-admin/") is None

    def test_directory_without_slash_declines(self, site) -> None:
        assert resolve_static_file(site, "/blog2/wp-admin") is None

    def test_non_core_uri_declines(self, site) -> None:
        assert resolve_static_file(site, "/blog2/style.css") is None

    def test_missing_file_declines(self, site) -> None:
        assert resolve_static_file(site, "/blog2/wp-admin/missing.php") is None

    def test_parent_segments_decline(self, site) -> None:
        assert resolve_static_file(site, "/blog2/wp-content/../wp-config.php") is None


class TestRewriteFrontControllerUri:
    def test_non_core_uri_unchanged(self, site) -> None:
        assert rewrite_front_controller_uri(site, "/blog2/about/") == "/blog2/about/"

    def test_network_admin_unchanged(self, site) -> None:
        uri = "/blog2/wp-admin/network/sites.php"
        assert rewrite_front_controller_uri(site, uri) == uri

    def test_network_admin_case_insensitive(self, site) -> None:
        uri = "/blog2/WP-ADMIN/Network/"
        assert rewrite_front_controller_uri(site, uri) == uri

    def test_core_uri_truncated(self, site) -> None:
        assert rewrite_front_controller_uri(site, "/blog2/wp-admin/edit.php") == "/wp-admin/edit.php"

    def test_core_uri_truncated_even_if_missing(self, site) -> None:
        assert (
            rewrite_front_controller_uri(site, "/blog2/wp-admin/options-general.php")
            == "/wp-admin/options-general.php"
        )

    def test_cron_rewritten_when_target_exists(self, site) -> None:
        (site / "wp-content" / "wp-cron.php").write_text("<?php\n")
        assert rewrite_front_controller_uri(site, "/blog2/wp-content/wp-cron.php") == "/wp-content/wp-cron.php"

    def test_cron_left_alone_when_target_missing(self, site) -> None:
        uri = "/blog2/wp-content/wp-cron.php"
        assert rewrite_front_controller_uri(site, uri) == uri

    def test_idempotent_on_truncated_uri(self, site) -> None:
        assert rewrite_front_controller_uri(site, "/wp-admin/edit.php") == "/wp-admin/edit.php"
