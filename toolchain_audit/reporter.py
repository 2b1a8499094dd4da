"""
Status reporting for version checks, and the check-then-report entry points.
"""

from __future__ import annotations

from .checks import CheckResult, CheckStatus, evaluate_tool
from .console import Console
from .fetch import ReleaseFetcher
from .runner import CommandRunner
from .tools import ToolSpec, get_tool


def format_success(tool: ToolSpec, installed: str) -> str:
    return f"Your {tool.display_name} version ({installed}) is the {tool.latest_label}."


def format_outdated(tool: ToolSpec, installed: str, latest: str) -> tuple[str, str]:
    """Return the warning line and the remediation line for an outdated tool."""
    return (
        f"Your {tool.display_name} version ({installed}) is not the {tool.latest_label} ({latest}).",
        f"Run '{tool.remediation}' to update.",
    )


def report(result: CheckResult, console: Console) -> None:
    """
    Print the status lines for a check result.

    Args:
        result: Check outcome
        console: Console to write to
    """
    tool = result.tool

    if result.status is CheckStatus.UP_TO_DATE:
        console.success(format_success(tool, result.installed))
    elif result.status is CheckStatus.OUTDATED:
        warning, remediation = format_outdated(tool, result.installed, result.latest)
        console.warning(warning)
        console.hint(remediation)
    elif result.status is CheckStatus.NOT_INSTALLED:
        console.warning(f"{tool.display_name} is not installed.")
    elif result.status is CheckStatus.HELPER_MISSING and tool.helper is not None:
        console.warning(f"{tool.helper.display_name} is not installed.")
        console.hint(tool.helper.advice)
        console.hint(f"Install: {tool.helper.url}")
    else:
        console.error(f"Error checking {tool.display_name} version: {result.error or 'unknown error'}")


def check_tool(
    tool: ToolSpec,
    runner: CommandRunner,
    fetcher: ReleaseFetcher,
    console: Console,
) -> CheckResult:
    """Evaluate a toolchain and print its status."""
    result = evaluate_tool(tool, runner, fetcher)
    report(result, console)
    return result


def _check_named(name: str, runner: CommandRunner, fetcher: ReleaseFetcher, console: Console) -> CheckResult:
    tool = get_tool(name)
    if tool is None:
        raise KeyError(f"Unknown tool: {name}")
    return check_tool(tool, runner, fetcher, console)


def check_node_lts_version(runner: CommandRunner, fetcher: ReleaseFetcher, console: Console) -> CheckResult:
    """Check Node.js against the latest LTS release listed by fnm."""
    return _check_named("node", runner, fetcher, console)


def check_deno_version(runner: CommandRunner, fetcher: ReleaseFetcher, console: Console) -> CheckResult:
    """Check Deno against its latest GitHub release."""
    return _check_named("deno", runner, fetcher, console)


def check_rust_version(runner: CommandRunner, fetcher: ReleaseFetcher, console: Console) -> CheckResult:
    """Check rustc against the latest Rust GitHub release."""
    return _check_named("rust", runner, fetcher, console)
