"""
Tests for status reporting (toolchain_audit/reporter.py) and the console port.
"""

import io
from unittest.mock import patch

import pytest

from conftest import CapturedConsole, FakeFetcher, FakeRunner
from toolchain_audit.checks import CheckResult, CheckStatus
from toolchain_audit.console import Console, InputReader
from toolchain_audit.fetch import NetworkError
from toolchain_audit.reporter import (
    check_deno_version,
    check_node_lts_version,
    check_rust_version,
    check_tool,
    format_outdated,
    format_success,
    report,
)
from toolchain_audit.tools import TOOLS, get_tool

NODE = get_tool("node")
RUST = get_tool("rust")


class TestTemplates:
    """Tests for the success and outdated templates."""

    def test_success_node(self):
        assert format_success(NODE, "20.1.0") == "Your Node.js version (20.1.0) is the latest LTS version."

    def test_success_rust(self):
        assert format_success(RUST, "1.80.0") == "Your Rust version (1.80.0) is the latest."

    def test_outdated_rust(self):
        warning, remediation = format_outdated(RUST, "1.79.0", "1.80.0")
        assert warning == "Your Rust version (1.79.0) is not the latest (1.80.0)."
        assert remediation == "Run 'rustup update' to update."

    @pytest.mark.parametrize("tool", TOOLS, ids=lambda t: t.name)
    def test_outdated_contains_remediation(self, tool):
        _, remediation = format_outdated(tool, "1", "2")
        assert tool.remediation in remediation

    def test_node_remediation(self):
        _, remediation = format_outdated(NODE, "18.0.0", "20.1.0")
        assert "fnm install --lts && fnm default lts-latest" in remediation


class TestReport:
    """Tests for report()."""

    def test_up_to_date(self, console):
        report(CheckResult(RUST, CheckStatus.UP_TO_DATE, "1.80.0", "1.80.0"), console)
        assert console.out == "✅  Your Rust version (1.80.0) is the latest.\n"

    def test_outdated(self, console):
        report(CheckResult(RUST, CheckStatus.OUTDATED, "1.79.0", "1.80.0"), console)
        lines = console.out.splitlines()
        assert lines == [
            "⚠️  Your Rust version (1.79.0) is not the latest (1.80.0).",
            "   Run 'rustup update' to update.",
        ]

    def test_not_installed(self, console):
        report(CheckResult(NODE, CheckStatus.NOT_INSTALLED), console)
        assert console.out == "⚠️  Node.js is not installed.\n"

    def test_helper_missing(self, console):
        report(CheckResult(NODE, CheckStatus.HELPER_MISSING), console)
        lines = console.out.splitlines()
        assert lines[0] == "⚠️  'fnm' (Fast Node Manager) is not installed."
        assert "recommended to use fnm" in lines[1]
        assert lines[2] == "   Install: https://github.com/Schniz/fnm#installation"

    def test_error_on_stderr(self, console):
        report(CheckResult(RUST, CheckStatus.ERROR, error="offline"), console)
        assert console.out == ""
        assert console.err == "❌⚠️  Error checking Rust version: offline\n"

    def test_plain_symbols(self):
        console = CapturedConsole(use_emoji=False)
        report(CheckResult(RUST, CheckStatus.UP_TO_DATE, "1.80.0", "1.80.0"), console)
        assert console.out.startswith("[ok]  Your Rust version")


def node_runner(installed="v20.1.0", listing="v18.0.0 lts\nv20.1.0 lts"):
    return FakeRunner({
        ("node", "-v"): installed,
        ("fnm", "--version"): "fnm 1.37.1",
        ("fnm", "list-remote", "--lts"): listing,
    })


class TestCheckWrappers:
    """Tests for check_tool and the named wrappers."""

    def test_check_tool_reports(self, console, fetcher):
        result = check_tool(NODE, node_runner(), fetcher, console)
        assert result.is_up_to_date
        assert "Node.js" in console.out

    def test_end_to_end_success_line(self, console, fetcher):
        """Installed v20.1.0 vs latest 20.1.0 prints one success line."""
        check_node_lts_version(node_runner(installed="v20.1.0", listing="20.1.0"), fetcher, console)

        assert console.out.count("20.1.0") == 1
        assert "✅" in console.out
        assert "fnm install" not in console.out
        assert console.err == ""

    def test_check_deno_version(self, console):
        runner = FakeRunner({("deno", "--version"): "deno 2.0.0 (stable)"})
        fetcher = FakeFetcher({("denoland", "deno"): {"tag_name": "v2.1.4"}})

        result = check_deno_version(runner, fetcher, console)
        assert result.status is CheckStatus.OUTDATED
        assert "Run 'deno upgrade' to update." in console.out

    def test_check_rust_version_error_goes_to_stderr(self, console):
        runner = FakeRunner({("rustc", "--version"): "rustc 1.80.0"})
        fetcher = FakeFetcher({("rust-lang", "rust"): NetworkError("offline")})

        check_rust_version(runner, fetcher, console)
        assert "Error checking Rust version: offline" in console.err
        assert console.out == ""

    def test_unknown_tool_raises(self, console, fetcher):
        with patch("toolchain_audit.reporter.get_tool", return_value=None):
            with pytest.raises(KeyError, match="Unknown tool: rust"):
                check_rust_version(FakeRunner({}), fetcher, console)


class TestConsole:
    """Tests for Console coloring."""

    def test_colors(self):
        out = io.StringIO()
        console = Console(stream=out, err_stream=io.StringIO())
        console.success("done")
        assert out.getvalue() == "\033[32m✅  done\033[0m\n"

    def test_bold(self):
        out = io.StringIO()
        console = Console(stream=out, err_stream=io.StringIO())
        console.success("done", bold=True)
        assert out.getvalue().startswith("\033[1;32m")

    def test_hint_is_blue(self):
        out = io.StringIO()
        Console(stream=out).hint("Run 'x'")
        assert out.getvalue() == "\033[34m   Run 'x'\033[0m\n"

    def test_no_color(self):
        out = io.StringIO()
        Console(stream=out, use_color=False).warning("careful")
        assert "\033[" not in out.getvalue()


class TestInputReader:
    """Tests for single-byte input."""

    def test_reads_one_byte(self):
        stream = io.BytesIO(b"Yes\n")
        assert InputReader(stream).read_char() == "y"
        # Only one byte consumed
        assert stream.read() == b"es\n"

    def test_newline_is_empty(self):
        assert InputReader(io.BytesIO(b"\n")).read_char() == ""

    def test_end_of_input(self):
        assert InputReader(io.BytesIO(b"")).read_char() == ""
