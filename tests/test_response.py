"""Tests for wpvalet.http.response — immutable responses."""

import pytest

from wpvalet.http.response import Response, quote_url, redirect


class TestResponse:
    def test_defaults(self) -> None:
        response = Response()
        assert response.status == 200
        assert response.body == ""
        assert response.headers == ()

    def test_with_header_returns_copy(self) -> None:
        original = Response("x")
        changed = original.with_header("Cache-Control", "no-cache")
        assert changed.headers == (("Cache-Control", "no-cache"),)
        assert original.headers == ()

    def test_with_headers_appends(self) -> None:
        response = Response().with_header("A", "1").with_headers({"B": "2"})
        assert response.headers == (("A", "1"), ("B", "2"))

    def test_header_lookup_case_insensitive(self) -> None:
        response = Response().with_header("Cache-Control", "no-cache")
        assert response.header("cache-control") == "no-cache"
        assert response.header("Location") is None

    def test_body_bytes(self) -> None:
        assert Response("héllo").body_bytes == "héllo".encode()
        assert Response(b"bytes").body_bytes == b"bytes"

    def test_frozen(self) -> None:
        with pytest.raises(AttributeError):
            Response().status = 500  # type: ignore[misc]


class TestQuoteUrl:
    def test_ascii_url_unchanged(self) -> None:
        url = "https://blog.com:8443/wp-content/uploads/a-(1)_b~c.jpg"
        assert quote_url(url) == url

    def test_non_ascii_and_spaces_encoded(self) -> None:
        assert quote_url("/files/café menu.pdf") == "/files/caf%C3%A9%20menu.pdf"

    def test_existing_escapes_kept(self) -> None:
        assert quote_url("/files/a%20b.jpg") == "/files/a%20b.jpg"

    def test_fragment_and_query_markers_in_path_encoded(self) -> None:
        assert quote_url("/files/a#1?.jpg") == "/files/a%231%3F.jpg"


class TestRedirect:
    def test_found(self) -> None:
        response = redirect("https://blog.com/files/a.png")
        assert response.status == 302
        assert response.header("Location") == "https://blog.com/files/a.png"
        assert response.body == ""

    def test_custom_status(self) -> None:
        assert redirect("/wp-admin/", 301).status == 301

    def test_location_is_latin1_safe(self) -> None:
        location = redirect("https://blog.com/wp-content/uploads/2024/写真.jpg").header("Location")
        assert location == "https://blog.com/wp-content/uploads/2024/%E5%86%99%E7%9C%9F.jpg"
        location.encode("latin-1")
