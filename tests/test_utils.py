"""Tests for schema loading and output helpers."""

import pytest
import requests

from xsd_explorer import utils
from xsd_explorer.utils import (
    SchemaLoaderError,
    fetch_schema,
    is_valid_url,
    list_files,
    prepare_output_dir,
    write_output,
)

SCHEMA_URL = "https://example.com/schemas/order.xsd"


class FakeResponse:
    """Minimal stand-in for requests.Response."""

    def __init__(self, status_code, content=b""):
        self.status_code = status_code
        self.content = content


# =============================================================================
# fetch_schema
# =============================================================================


class TestFetchSchema:
    """Tests for fetch_schema()."""

    def test_ok_returns_body(self, monkeypatch):
        """A 200 response yields its body."""
        calls = []

        def fake_get(url, timeout):
            calls.append((url, timeout))
            return FakeResponse(200, b"<xs:schema/>")

        monkeypatch.setattr(utils.requests, "get", fake_get)
        assert fetch_schema(SCHEMA_URL, timeout=5) == b"<xs:schema/>"
        assert calls == [(SCHEMA_URL, 5)]

    @pytest.mark.parametrize("status", [201, 301, 404, 500])
    def test_non_ok_status_returns_empty_body(self, monkeypatch, status):
        """Anything but 200 is an empty-body success."""
        monkeypatch.setattr(
            utils.requests, "get", lambda url, timeout: FakeResponse(status, b"error page")
        )
        assert fetch_schema(SCHEMA_URL) == b""

    def test_invalid_url(self):
        """Malformed URLs are rejected before any request."""
        with pytest.raises(SchemaLoaderError, match="Invalid URL"):
            fetch_schema("not a url")

    @pytest.mark.parametrize(
        "exc,message",
        [
            (requests.exceptions.Timeout, "timeout"),
            (requests.exceptions.ConnectionError, "Connection error"),
            (requests.exceptions.TooManyRedirects, "Request error"),
        ],
    )
    def test_request_failures_wrapped(self, monkeypatch, exc, message):
        """Transport errors are wrapped with the original as cause."""

        def fake_get(url, timeout):
            raise exc("boom")

        monkeypatch.setattr(utils.requests, "get", fake_get)
        with pytest.raises(SchemaLoaderError, match=message) as info:
            fetch_schema(SCHEMA_URL)
        assert isinstance(info.value.__cause__, exc)


class TestIsValidUrl:
    """Tests for is_valid_url()."""

    @pytest.mark.parametrize("url", [SCHEMA_URL, "http://localhost:8080/a.xsd"])
    def test_valid(self, url):
        """Scheme and host make a valid URL."""
        assert is_valid_url(url)

    @pytest.mark.parametrize("url", ["", "order.xsd", "/tmp/order.xsd", "http://"])
    def test_invalid(self, url):
        """Relative paths and hostless URLs are invalid."""
        assert not is_valid_url(url)


# =============================================================================
# Filesystem helpers
# =============================================================================


class TestListFiles:
    """Tests for list_files()."""

    def test_single_file(self, tmp_path):
        """A file lists itself."""
        path = tmp_path / "order.xsd"
        path.write_text("<xs:schema/>")
        assert list_files(path) == [path]

    def test_directory_walk(self, tmp_path):
        """A directory lists its walk, then itself once more."""
        (tmp_path / "a.xsd").write_text("")
        (tmp_path / "sub").mkdir()
        (tmp_path / "sub" / "b.xsd").write_text("")

        assert list_files(str(tmp_path)) == [
            tmp_path,
            tmp_path / "a.xsd",
            tmp_path / "sub",
            tmp_path / "sub" / "b.xsd",
            tmp_path,
        ]

    def test_files_and_directories_interleaved(self, tmp_path):
        """Entries are visited in one name order, files and folders mixed."""
        (tmp_path / "a.xsd").write_text("")
        (tmp_path / "b").mkdir()
        (tmp_path / "b" / "inner.xsd").write_text("")
        (tmp_path / "c.xsd").write_text("")

        assert list_files(tmp_path) == [
            tmp_path,
            tmp_path / "a.xsd",
            tmp_path / "b",
            tmp_path / "b" / "inner.xsd",
            tmp_path / "c.xsd",
            tmp_path,
        ]

    def test_missing_path(self, tmp_path):
        """A missing path is an error."""
        with pytest.raises(SchemaLoaderError, match="Path not found"):
            list_files(tmp_path / "absent")


class TestPrepareOutputDir:
    """Tests for prepare_output_dir() and write_output()."""

    @pytest.mark.parametrize("path", ["", None])
    def test_empty_path_is_noop(self, path):
        """An empty path does nothing."""
        assert prepare_output_dir(path) is None

    def test_creates_parents(self, tmp_path):
        """Missing parents are created."""
        target = tmp_path / "out" / "go" / "schema"
        prepare_output_dir(target)
        assert target.is_dir()

    def test_existing_directory(self, tmp_path):
        """An existing directory is left alone."""
        prepare_output_dir(tmp_path)
        assert tmp_path.is_dir()

    def test_file_in_the_way(self, tmp_path):
        """A file where a directory should go is reported."""
        blocker = tmp_path / "blocker"
        blocker.write_text("")
        with pytest.raises(SchemaLoaderError, match="Error creating directory"):
            prepare_output_dir(blocker / "child")

    def test_write_output(self, tmp_path):
        """Generated code is written under a created directory."""
        target = tmp_path / "gen" / "schema.go"
        assert write_output(target, "package schema\n") == target
        assert target.read_text(encoding="utf-8") == "package schema\n"
