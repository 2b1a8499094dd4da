"""
Tests for release metadata lookup (toolchain_audit/fetch.py).
"""

import urllib.error
from unittest.mock import MagicMock, patch

import pytest

from toolchain_audit.fetch import (
    NetworkError,
    ParseError,
    ReleaseFetcher,
    fetch_json,
    http_get,
)


def response(body: bytes):
    resp = MagicMock()
    resp.read.return_value = body
    resp.__enter__.return_value = resp
    resp.__exit__.return_value = False
    return resp


class TestHttpGet:
    """Tests for http_get."""

    @patch("toolchain_audit.fetch.urllib.request.urlopen")
    def test_returns_body(self, mock_urlopen):
        mock_urlopen.return_value = response(b"hello")
        assert http_get("https://example.com") == b"hello"

        req = mock_urlopen.call_args.args[0]
        assert req.get_header("User-agent").startswith("toolchain-audit/")
        # No timeout configured by default
        assert "timeout" not in mock_urlopen.call_args.kwargs

    @patch("toolchain_audit.fetch.urllib.request.urlopen")
    def test_timeout_passed(self, mock_urlopen):
        mock_urlopen.return_value = response(b"{}")
        http_get("https://example.com", timeout=7)
        assert mock_urlopen.call_args.kwargs["timeout"] == 7

    @patch("toolchain_audit.fetch.urllib.request.urlopen")
    def test_failure_raises_network_error(self, mock_urlopen):
        mock_urlopen.side_effect = urllib.error.URLError("unreachable")
        with pytest.raises(NetworkError, match="Failed to fetch https://example.com"):
            http_get("https://example.com")


class TestFetchJson:
    """Tests for fetch_json."""

    @patch("toolchain_audit.fetch.urllib.request.urlopen")
    def test_decodes_json(self, mock_urlopen):
        mock_urlopen.return_value = response(b'{"tag_name": "v2.1.4"}')
        assert fetch_json("https://example.com") == {"tag_name": "v2.1.4"}

    @patch("toolchain_audit.fetch.urllib.request.urlopen")
    def test_malformed_json(self, mock_urlopen):
        mock_urlopen.return_value = response(b"<html>rate limited</html>")
        with pytest.raises(ParseError, match="Invalid JSON"):
            fetch_json("https://example.com")


class TestReleaseFetcher:
    """Tests for ReleaseFetcher."""

    @patch("toolchain_audit.fetch.urllib.request.urlopen")
    def test_latest_release_url(self, mock_urlopen):
        mock_urlopen.return_value = response(b'{"tag_name": "1.80.0"}')
        body = ReleaseFetcher(token="").latest_release("rust-lang", "rust")

        assert body == {"tag_name": "1.80.0"}
        req = mock_urlopen.call_args.args[0]
        assert req.full_url == "https://api.github.com/repos/rust-lang/rust/releases/latest"
        assert req.get_header("Authorization") is None

    @patch("toolchain_audit.fetch.urllib.request.urlopen")
    def test_token_header(self, mock_urlopen):
        mock_urlopen.return_value = response(b"{}")
        ReleaseFetcher(token="abc123").latest_release("denoland", "deno")

        req = mock_urlopen.call_args.args[0]
        assert req.get_header("Authorization") == "token abc123"

    def test_token_from_environment(self, monkeypatch):
        monkeypatch.setenv("GITHUB_TOKEN", "from-env")
        assert ReleaseFetcher().token == "from-env"

    def test_no_token_in_environment(self, monkeypatch):
        monkeypatch.delenv("GITHUB_TOKEN", raising=False)
        assert ReleaseFetcher().token == ""
