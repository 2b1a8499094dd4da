"""
Toolchain Audit - checks whether developer toolchains are on their latest release.

Core Modules:
- Ports: command runner, release metadata fetcher, console and input
- Checks: Node.js (LTS via fnm), Deno and Rust (GitHub releases)
- Updater: interactive Homebrew upgrade
- Orchestration: fixed-order run of every check plus the updater
"""

__version__ = "1.0.0"
__author__ = "Toolchain Audit Contributors"

VERSION = __version__

# Ports
from .runner import CommandRunner, CommandError
from .fetch import (
    ReleaseFetcher,
    CollectionError,
    NetworkError,
    ParseError,
    http_get,
    fetch_json,
)
from .console import Console, InputReader

# Versions and tools
from .versions import (
    normalize_version,
    versions_match,
    installed_ahead,
    parse_lts_listing,
    parse_version_output,
    parse_release_tag,
)
from .tools import ToolSpec, HelperSpec, TOOLS, get_tool, all_tools, filter_tools

# Checks and reporting
from .checks import (
    CheckStatus,
    CheckResult,
    evaluate_tool,
)
from .reporter import (
    report,
    format_success,
    format_outdated,
    check_tool,
    check_node_lts_version,
    check_deno_version,
    check_rust_version,
)
from .brew import BrewOutcome, check_and_update_brew

# Orchestration
from .config import Config, load_config, load_config_file, validate_config
from .orchestrator import AuditRun, run_checks, evaluate_all, build_ports, check

# Logging configuration
from .logging_config import setup_logging, get_logger

__all__ = [
    "__version__",
    "VERSION",
    # Ports
    "CommandRunner",
    "CommandError",
    "ReleaseFetcher",
    "CollectionError",
    "NetworkError",
    "ParseError",
    "http_get",
    "fetch_json",
    "Console",
    "InputReader",
    # Versions and tools
    "normalize_version",
    "versions_match",
    "installed_ahead",
    "parse_lts_listing",
    "parse_version_output",
    "parse_release_tag",
    "ToolSpec",
    "HelperSpec",
    "TOOLS",
    "get_tool",
    "all_tools",
    "filter_tools",
    # Checks and reporting
    "CheckStatus",
    "CheckResult",
    "evaluate_tool",
    "check_tool",
    "check_node_lts_version",
    "check_deno_version",
    "check_rust_version",
    "report",
    "format_success",
    "format_outdated",
    "BrewOutcome",
    "check_and_update_brew",
    # Orchestration
    "Config",
    "load_config",
    "load_config_file",
    "validate_config",
    "AuditRun",
    "run_checks",
    "evaluate_all",
    "build_ports",
    "check",
    # Logging
    "setup_logging",
    "get_logger",
]
