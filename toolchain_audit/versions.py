"""
Version string parsing and comparison.

Versions are free-form tokens compared for exact equality once a single
leading ``v`` is stripped. Status decisions only ever go through
``versions_match``; ordered comparison is limited to diagnostics.
"""

from __future__ import annotations

import logging
from typing import Any

from packaging.version import InvalidVersion, Version

from .fetch import ParseError

logger = logging.getLogger(__name__)


def normalize_version(version: str) -> str:
    """Strip surrounding whitespace and at most one leading ``v``.

    Args:
        version: Raw version string (e.g., "v1.2.3", "1.2.3")

    Returns:
        Normalized version (e.g., "1.2.3")
    """
    version = version.strip()
    if version.startswith("v"):
        version = version[1:]
    return version


def versions_match(installed: str, latest: str) -> bool:
    """Return True if ``installed`` is exactly the ``latest`` release."""
    return normalize_version(installed) == normalize_version(latest)


def installed_ahead(installed: str, latest: str) -> bool:
    """Return True if ``installed`` orders strictly after ``latest``.

    Used to annotate mismatches caused by local pre-release or nightly
    builds. Versions that do not parse return False.
    """
    try:
        return Version(normalize_version(installed)) > Version(normalize_version(latest))
    except InvalidVersion:
        return False


def parse_lts_listing(text: str | None) -> str:
    """Extract the newest entry from a remote LTS listing.

    The listing is ordered oldest to newest, one release per line, with the
    version as the first whitespace-delimited field.

    Raises:
        ParseError: If the listing has no entries
    """
    lines = [line for line in (text or "").split("\n") if line.strip()]
    if not lines:
        raise ParseError("No LTS releases listed")
    return lines[-1].split()[0]


def parse_version_output(text: str, field: int) -> str:
    """Return whitespace field ``field`` of the first line of ``--version`` output.

    Examples:
        "rustc 1.80.0 (051478957 2024-07-21)", field 1 -> "1.80.0"
        "v20.1.0", field 0 -> "v20.1.0"

    Raises:
        ParseError: If the output has fewer fields
    """
    first_line = text.strip().split("\n", 1)[0] if text else ""
    fields = first_line.split()
    if len(fields) <= field:
        raise ParseError(f"Unexpected version output: {first_line!r}")
    return fields[field]


def parse_release_tag(body: Any, tool_name: str) -> str:
    """Extract the normalized ``tag_name`` from a release metadata body.

    Args:
        body: Decoded JSON body of a latest-release endpoint
        tool_name: Display name used in the error message

    Raises:
        ParseError: If the body carries no usable tag name
    """
    tag = body.get("tag_name") if isinstance(body, dict) else None
    if not isinstance(tag, str) or not normalize_version(tag):
        raise ParseError(f"Could not fetch latest {tool_name} version from GitHub.")
    return normalize_version(tag)
