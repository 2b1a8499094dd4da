#!/usr/bin/env python3
"""
Toolchain Audit - are Node.js, Deno, Rust and Homebrew up to date?

Usage:
    check.py                  # Check everything, then offer Homebrew upgrades
    check.py node rust        # Check only the named tools
    check.py --no-brew        # Skip the Homebrew updater
    check.py --parallel       # Evaluate checks concurrently
"""

import argparse
import logging
import os
import sys
from dataclasses import replace

# Add current directory to path
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from toolchain_audit.config import load_config, validate_config
from toolchain_audit.logging_config import setup_logging
from toolchain_audit.orchestrator import build_ports, run_checks
from toolchain_audit.tools import KNOWN_NAMES, filter_tools

logger = logging.getLogger("toolchain_audit.cli")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Toolchain Audit - check developer toolchains against their latest release",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--config",
        help="Path to a YAML configuration file",
    )
    parser.add_argument(
        "--parallel",
        action="store_true",
        help="Evaluate version checks concurrently",
    )
    parser.add_argument(
        "--no-brew",
        action="store_true",
        help="Do not run the Homebrew updater",
    )
    parser.add_argument(
        "--yes", "-y",
        action="store_true",
        help="Upgrade outdated Homebrew packages without prompting",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Verbose output",
    )
    parser.add_argument(
        "--quiet", "-q",
        action="store_true",
        help="Only log warnings and errors",
    )
    parser.add_argument(
        "--log-file",
        help="Also write debug logs to this file",
    )
    parser.add_argument(
        "tools",
        nargs="*",
        help=f"Specific tools to check ({', '.join(sorted(KNOWN_NAMES))})",
    )
    return parser


def main(argv=None) -> int:
    """Main entry point for toolchain audit."""
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging(verbose=args.verbose, quiet=args.quiet, log_file=args.log_file)

    unknown = [name for name in args.tools if name.lower() not in KNOWN_NAMES]
    if unknown:
        parser.error(f"unknown tool(s): {', '.join(unknown)}")

    try:
        config = load_config(args.config, verbose=args.verbose)
    except ValueError as e:
        parser.error(str(e))

    overrides = {}
    if args.parallel:
        overrides["parallel"] = True
    if args.yes:
        overrides["assume_yes"] = True
    if args.no_brew or (args.tools and "brew" not in {n.lower() for n in args.tools}):
        overrides["update_brew"] = False
    if overrides:
        config = replace(config, **overrides)

    for warning in validate_config(config):
        logger.warning(warning)

    tools = filter_tools(args.tools) if args.tools else None
    run_checks(config, *build_ports(config), tools=tools)
    return 0


if __name__ == "__main__":
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        print("\nInterrupted", file=sys.stderr)
        sys.exit(130)
