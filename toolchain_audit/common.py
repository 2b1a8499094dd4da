"""
Common utilities shared across toolchain_audit modules.
"""

from __future__ import annotations

import os

DEBUG_ENV = "TOOLCHAIN_AUDIT_DEBUG"


def env_flag(name: str, default: bool) -> bool:
    """
    Read a boolean flag from the environment.

    Accepts 1/0, true/false, yes/no, on/off (case-insensitive). Unset or
    unrecognised values fall back to ``default``.
    """
    raw = os.environ.get(name)
    if raw is None:
        return default
    value = raw.strip().lower()
    if value in ("1", "true", "yes", "on"):
        return True
    if value in ("0", "false", "no", "off"):
        return False
    return default


def vlog(msg: str, verbose: bool = False) -> None:
    """
    Log verbose message using structured logging.

    Args:
        msg: Message to log
        verbose: Whether verbose mode is enabled
    """
    if verbose or os.environ.get(DEBUG_ENV, "0") == "1":
        from .logging_config import get_logger
        get_logger().info(msg)
