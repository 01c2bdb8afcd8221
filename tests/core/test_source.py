"""Tests for query source resolution."""

import io
from pathlib import Path

import pytest

from httpsql.core.errors import SourceUnavailableError
from httpsql.core.source import (
    FileSource,
    LiteralSource,
    SourceResolver,
    StdinSource,
    UrlSource,
    read_source,
)


class TestSourceResolver:
    """Tests for SourceResolver precedence."""

    def test_resolve_literal(self):
        assert SourceResolver.resolve("SELECT 1") == LiteralSource("SELECT 1")

    def test_resolve_none_is_stdin(self):
        assert SourceResolver.resolve(None) == StdinSource()

    def test_resolve_existing_file(self, tmp_path):
        query_file = tmp_path / "queries.sql"
        query_file.write_text("SELECT 1;")

        assert SourceResolver.resolve(str(query_file)) == FileSource(query_file)

    def test_existing_file_wins_over_literal(self, tmp_path, monkeypatch):
        """A file named like a statement is read, not executed literally."""
        monkeypatch.chdir(tmp_path)
        Path("select 1").write_text("SELECT 42;")

        source = SourceResolver.resolve("select 1")

        assert source == FileSource(Path("select 1"))
        assert read_source(source) == "SELECT 42;"

    def test_resolve_urls(self):
        assert SourceResolver.resolve("http://host/q.sql") == UrlSource("http://host/q.sql")
        assert SourceResolver.resolve("https://host/q.sql") == UrlSource("https://host/q.sql")

    def test_resolve_url_like_literal(self):
        """Only an exact scheme prefix selects the url source."""
        assert SourceResolver.resolve("SELECT 'http://x'") == LiteralSource("SELECT 'http://x'")

    def test_resolve_empty_string_is_literal(self):
        """An empty argument is not the current directory."""
        assert SourceResolver.resolve("") == LiteralSource("")

    def test_resolve_invalid_path_is_literal(self):
        assert SourceResolver.resolve("SELECT '\0'") == LiteralSource("SELECT '\0'")


class TestReadSource:
    """Tests for the blocking source reads."""

    def test_read_literal(self):
        assert read_source(LiteralSource("SELECT 1; SELECT 2")) == "SELECT 1; SELECT 2"

    def test_read_file_replaces_invalid_utf8(self, tmp_path):
        query_file = tmp_path / "queries.sql"
        query_file.write_bytes(b"SELECT '\xff';")

        assert read_source(FileSource(query_file)) == "SELECT '\ufffd';"

    def test_read_directory_fails(self, tmp_path):
        with pytest.raises(SourceUnavailableError, match="cannot read query from file"):
            read_source(FileSource(tmp_path))

    def test_read_stdin_verbatim(self, monkeypatch):
        monkeypatch.setattr("sys.stdin", io.StringIO("SELECT 1;\nSELECT 2;;\n"))

        assert read_source(StdinSource()) == "SELECT 1;\nSELECT 2;;\n"

    def test_read_url(self, query_service):
        query_service.documents["/queries.sql"] = "SELECT 1; SELECT 2;"

        text = read_source(UrlSource(query_service.url("/queries.sql")))

        assert text == "SELECT 1; SELECT 2;"

    def test_read_url_without_charset_is_utf8(self, query_service):
        """text/plain without a declared charset is decoded as UTF-8."""
        query_service.documents["/queries.sql"] = "SELECT 'caf\u00e9';"

        text = read_source(UrlSource(query_service.url("/queries.sql")))

        assert text == "SELECT 'caf\u00e9';"

    def test_read_url_not_found(self, query_service):
        address = query_service.url("/missing.sql")

        with pytest.raises(SourceUnavailableError) as exc_info:
            read_source(UrlSource(address))

        assert exc_info.value.source == f"url {address}"

    def test_read_url_unreachable(self):
        with pytest.raises(SourceUnavailableError):
            read_source(UrlSource("http://127.0.0.1:1/queries.sql"), timeout=5)
