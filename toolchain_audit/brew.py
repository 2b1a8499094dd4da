"""
Interactive Homebrew updater.

Refreshes the Homebrew index, lists outdated packages and, after a single
"y" keypress, upgrades them and removes old versions.
"""

from __future__ import annotations

import enum
import logging

from .console import Console, InputReader
from .runner import CommandRunner

logger = logging.getLogger(__name__)

BREW = "brew"


class BrewOutcome(enum.Enum):
    NOT_INSTALLED = "not-installed"
    UP_TO_DATE = "up-to-date"
    UPGRADED = "upgraded"
    SKIPPED = "skipped"
    ERROR = "error"


def list_outdated(runner: CommandRunner) -> str:
    """Refresh the package index and return the outdated package listing."""
    runner.run(BREW, ("update",))
    return runner.run(BREW, ("outdated",)) or ""


def upgrade_all(runner: CommandRunner, console: Console) -> None:
    """Upgrade every outdated package, then clean up old versions."""
    console.step("upgrade", "Updating Homebrew and packages...")
    runner.run(BREW, ("upgrade",))
    console.step("cleanup", "Cleaning up old versions...")
    runner.run(BREW, ("cleanup",))
    console.success("Update complete!", bold=True)


def check_and_update_brew(
    runner: CommandRunner,
    console: Console,
    reader: InputReader,
    assume_yes: bool = False,
) -> BrewOutcome:
    """
    Check Homebrew packages and offer to upgrade them.

    Args:
        runner: Command runner
        console: Console for status lines
        reader: Source of the y/N answer
        assume_yes: Answer the prompt with "y" without reading input

    Returns:
        Final state of the update flow
    """
    try:
        if runner.run(BREW, ("--version",)) is None:
            console.warning("Homebrew is not installed.")
            return BrewOutcome.NOT_INSTALLED

        console.step("search", "Checking for Homebrew updates...")
        outdated = list_outdated(runner)

        if not outdated:
            console.success("Homebrew and all packages are up to date.", bold=True)
            return BrewOutcome.UP_TO_DATE

        console.warning("The following packages have updates available:", bold=True)
        console.plain(outdated)
        console.plain("Do you want to update all packages? (y/N)")

        answer = "y" if assume_yes else reader.read_char()
        logger.debug(f"brew prompt answer: {answer!r}")

        if answer != "y":
            console.step("skip", "Skipping update.")
            return BrewOutcome.SKIPPED

        upgrade_all(runner, console)
        return BrewOutcome.UPGRADED
    except Exception as e:
        logger.debug("brew update failed", exc_info=True)
        console.error(f"Error updating Homebrew: {e}")
        return BrewOutcome.ERROR
