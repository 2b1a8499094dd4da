"""
Runs every enabled check in a fixed order, then the Homebrew updater.
"""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from typing import Sequence

from .brew import BrewOutcome, check_and_update_brew
from .checks import CheckResult, evaluate_tool
from .config import Config
from .console import Console, InputReader
from .fetch import ReleaseFetcher
from .reporter import report
from .runner import CommandRunner
from .tools import ToolSpec, all_tools

logger = logging.getLogger(__name__)


@dataclass
class AuditRun:
    """Everything a single run produced."""
    results: list[CheckResult] = field(default_factory=list)
    brew: BrewOutcome | None = None


def evaluate_all(
    tools: Sequence[ToolSpec],
    runner: CommandRunner,
    fetcher: ReleaseFetcher,
    parallel: bool = False,
) -> list[CheckResult]:
    """
    Evaluate tools and return results in the same order as ``tools``.

    With ``parallel`` the evaluations share a thread pool; results are still
    returned in input order.
    """
    if not parallel or len(tools) < 2:
        return [evaluate_tool(tool, runner, fetcher) for tool in tools]

    with ThreadPoolExecutor(max_workers=len(tools)) as executor:
        futures = [executor.submit(evaluate_tool, tool, runner, fetcher) for tool in tools]
        return [future.result() for future in futures]


def run_checks(
    config: Config,
    runner: CommandRunner,
    fetcher: ReleaseFetcher,
    console: Console,
    reader: InputReader,
    tools: Sequence[ToolSpec] | None = None,
) -> AuditRun:
    """
    Check every enabled toolchain, then run the Homebrew updater.

    Args:
        config: Run configuration
        runner: Command runner
        fetcher: Release metadata fetcher
        console: Console for status lines
        reader: Input source for the updater prompt
        tools: Tools to check (default: all, in node/deno/rust order)

    Returns:
        AuditRun with one result per checked tool and the updater outcome
    """
    selected = [t for t in (tools if tools is not None else all_tools()) if config.is_enabled(t.name)]
    run = AuditRun()

    if config.parallel:
        logger.debug(f"Evaluating {len(selected)} tool(s) in parallel")
        run.results = evaluate_all(selected, runner, fetcher, parallel=True)
        for result in run.results:
            report(result, console)
    else:
        for tool in selected:
            result = evaluate_tool(tool, runner, fetcher)
            report(result, console)
            run.results.append(result)

    if config.is_enabled("brew"):
        run.brew = check_and_update_brew(runner, console, reader, assume_yes=config.assume_yes)

    return run


def build_ports(config: Config) -> tuple[CommandRunner, ReleaseFetcher, Console, InputReader]:
    """Create the real process, network, console and input ports for a config."""
    return (
        CommandRunner(timeout=config.command_timeout_seconds),
        ReleaseFetcher(timeout=config.http_timeout_seconds),
        Console(use_color=config.color, use_emoji=config.emoji),
        InputReader(),
    )


def check(config: Config | None = None) -> AuditRun:
    """Run the full check-everything sequence with real ports."""
    config = config or Config()
    return run_checks(config, *build_ports(config))
