"""
Per-toolchain version checks.

Each check discovers the installed version, obtains the latest one, and
compares them. A check never raises: every failure becomes an ERROR result so
that one broken toolchain cannot stop the others from being checked.
"""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass

from .fetch import ReleaseFetcher
from .runner import CommandRunner
from .tools import ToolSpec
from .versions import (
    installed_ahead,
    normalize_version,
    parse_lts_listing,
    parse_release_tag,
    parse_version_output,
    versions_match,
)

logger = logging.getLogger(__name__)


class CheckStatus(enum.Enum):
    UP_TO_DATE = "up-to-date"
    OUTDATED = "outdated"
    NOT_INSTALLED = "not-installed"
    HELPER_MISSING = "helper-missing"
    ERROR = "error"


@dataclass(frozen=True)
class CheckResult:
    """
    Outcome of checking a single toolchain.

    Attributes:
        tool: Tool definition that was checked
        status: Check outcome
        installed: Normalized installed version (empty if unknown)
        latest: Normalized latest version (empty if unknown)
        error: Error message for ERROR results
    """
    tool: ToolSpec
    status: CheckStatus
    installed: str = ""
    latest: str = ""
    error: str = ""

    @property
    def is_up_to_date(self) -> bool:
        return self.status is CheckStatus.UP_TO_DATE


def _latest_version(tool: ToolSpec, runner: CommandRunner, fetcher: ReleaseFetcher) -> str:
    if tool.latest_kind == "lts_listing":
        program, *args = tool.latest_source
        return normalize_version(parse_lts_listing(runner.run(program, args)))
    owner, repo = tool.latest_source
    return parse_release_tag(fetcher.latest_release(owner, repo), tool.display_name)


def evaluate_tool(tool: ToolSpec, runner: CommandRunner, fetcher: ReleaseFetcher) -> CheckResult:
    """
    Determine whether a toolchain is on its latest release.

    Args:
        tool: Tool definition
        runner: Command runner used for local commands
        fetcher: Release metadata fetcher used for GitHub lookups

    Returns:
        CheckResult; NOT_INSTALLED results involve no further commands or
        network requests
    """
    try:
        program, *args = tool.version_command
        output = runner.run(program, args)
        if output is None:
            logger.debug(f"{tool.name}: {program} not found")
            return CheckResult(tool, CheckStatus.NOT_INSTALLED)

        if tool.helper is not None and not runner.exists(tool.helper.program):
            logger.debug(f"{tool.name}: helper {tool.helper.program} not found")
            return CheckResult(tool, CheckStatus.HELPER_MISSING)

        installed = normalize_version(parse_version_output(output, tool.version_field))
        latest = _latest_version(tool, runner, fetcher)
    except Exception as e:
        logger.debug(f"{tool.name}: check failed", exc_info=True)
        return CheckResult(tool, CheckStatus.ERROR, error=str(e) or type(e).__name__)

    logger.debug(f"{tool.name}: installed={installed} latest={latest}")
    if versions_match(installed, latest):
        return CheckResult(tool, CheckStatus.UP_TO_DATE, installed=installed, latest=latest)

    if installed_ahead(installed, latest):
        logger.debug(f"{tool.name}: installed {installed} is newer than latest release {latest}")
    return CheckResult(tool, CheckStatus.OUTDATED, installed=installed, latest=latest)
