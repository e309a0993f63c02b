"""
Tests for the guideline fetch service.
"""

import http.client
import urllib.error
from pathlib import Path

import pytest

from guidedist.core.errors import FetchError, GuidelineError
from guidedist.core.services.fetch import fetch_guideline


class TestFetchFileSource:
    def test_reads_text_verbatim(self, source_uri: str, guidelines: str):
        doc = fetch_guideline(source_uri)
        assert doc.text == guidelines
        assert doc.source_uri == source_uri

    def test_missing_file(self, missing_uri: str):
        with pytest.raises(FetchError) as exc:
            fetch_guideline(missing_uri)
        assert exc.value.source_uri == missing_uri
        assert exc.value.status is None

    def test_strips_bom(self, tmp_path: Path):
        path = tmp_path / "bom.md"
        path.write_bytes(b"\xef\xbb\xbf# Title\n")
        assert fetch_guideline(path.as_uri()).text == "# Title\n"

    def test_rejects_non_utf8(self, tmp_path: Path):
        path = tmp_path / "latin1.md"
        path.write_bytes("# Café\n".encode("latin-1"))
        with pytest.raises(FetchError, match="UTF-8"):
            fetch_guideline(path.as_uri())


class TestFetchHttpSource:
    def test_success(self, fake_http, guidelines: str):
        doc = fetch_guideline("https://example.com/CLAUDE.md", timeout=2.0, user_agent="test/1")
        assert doc.text == guidelines
        req = fake_http["requests"][0]
        assert req["url"] == "https://example.com/CLAUDE.md"
        assert req["timeout"] == 2.0
        assert req["headers"]["User-agent"] == "test/1"

    def test_default_user_agent(self, fake_http):
        fetch_guideline("https://example.com/CLAUDE.md")
        assert fake_http["requests"][0]["headers"]["User-agent"].startswith("guidedist/")

    def test_http_404(self, fake_http):
        fake_http["status"] = 404
        with pytest.raises(FetchError) as exc:
            fetch_guideline("https://example.com/missing.md")
        assert exc.value.status == 404
        assert "404" in str(exc.value)

    def test_non_2xx_status(self, fake_http):
        fake_http["status"] = 304
        with pytest.raises(FetchError) as exc:
            fetch_guideline("https://example.com/CLAUDE.md")
        assert exc.value.status == 304

    def test_unreachable(self, fake_http):
        fake_http["error"] = urllib.error.URLError("Name or service not known")
        with pytest.raises(FetchError, match="Cannot reach"):
            fetch_guideline("https://unreachable.invalid/CLAUDE.md")

    def test_timeout(self, fake_http):
        fake_http["error"] = TimeoutError("timed out")
        with pytest.raises(FetchError, match="timed out"):
            fetch_guideline("https://slow.example.com/CLAUDE.md")

    def test_malformed_response(self, fake_http):
        fake_http["error"] = http.client.BadStatusLine("garbage")
        with pytest.raises(FetchError, match="Bad response"):
            fetch_guideline("https://example.com/CLAUDE.md")

class TestFetchSchemes:
    @pytest.mark.parametrize("uri", ["ftp://example.com/x.md", "CLAUDE.md", "data:text/plain,hi"])
    def test_unsupported(self, uri: str):
        with pytest.raises(FetchError, match="Unsupported"):
            fetch_guideline(uri)

    def test_is_a_guideline_error(self):
        with pytest.raises(GuidelineError):
            fetch_guideline("gopher://example.com/")

    @pytest.mark.parametrize(
        "uri",
        ["https://example.com/my guidelines.md", "http://example.com:abc/CLAUDE.md"],
    )
    def test_malformed_uri(self, uri: str):
        with pytest.raises(FetchError, match="Invalid source URI") as exc:
            fetch_guideline(uri)
        assert exc.value.source_uri == uri
