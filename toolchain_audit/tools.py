"""
Tracked toolchain definitions.

Each entry describes where the installed version comes from, where the latest
version comes from, and what to run when the two differ.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class HelperSpec:
    """A companion tool that must be present before a check can run."""
    program: str
    display_name: str
    advice: str
    url: str


@dataclass(frozen=True)
class ToolSpec:
    """
    Version check definition for a single toolchain.

    Attributes:
        name: Short identifier (e.g., "node")
        display_name: Human-readable name used in messages
        version_command: Command printing the installed version
        version_field: Whitespace field of the first output line holding the version
        latest_kind: "lts_listing" (local listing command) or "github" (release API)
        latest_source: Listing command for "lts_listing", (owner, repo) for "github"
        remediation: Command the user should run when outdated
        latest_label: How the latest release is described ("latest", "latest LTS version")
        helper: Companion tool required to discover the latest version
    """
    name: str
    display_name: str
    version_command: tuple[str, ...]
    version_field: int
    latest_kind: str
    latest_source: tuple[str, ...]
    remediation: str
    latest_label: str = "latest"
    helper: HelperSpec | None = None

    def __post_init__(self):
        if self.latest_kind not in {"lts_listing", "github"}:
            raise ValueError(f"Invalid latest_kind for {self.name}: {self.latest_kind}")
        if not self.version_command:
            raise ValueError(f"Empty version_command for {self.name}")


FNM = HelperSpec(
    program="fnm",
    display_name="'fnm' (Fast Node Manager)",
    advice="It is recommended to use fnm to manage and switch Node.js versions.",
    url="https://github.com/Schniz/fnm#installation",
)

# Report order is fixed: node, deno, rust
TOOLS: tuple[ToolSpec, ...] = (
    ToolSpec(
        name="node",
        display_name="Node.js",
        version_command=("node", "-v"),
        version_field=0,
        latest_kind="lts_listing",
        latest_source=("fnm", "list-remote", "--lts"),
        remediation="fnm install --lts && fnm default lts-latest",
        latest_label="latest LTS version",
        helper=FNM,
    ),
    ToolSpec(
        name="deno",
        display_name="Deno",
        version_command=("deno", "--version"),
        version_field=1,
        latest_kind="github",
        latest_source=("denoland", "deno"),
        remediation="deno upgrade",
    ),
    ToolSpec(
        name="rust",
        display_name="Rust",
        version_command=("rustc", "--version"),
        version_field=1,
        latest_kind="github",
        latest_source=("rust-lang", "rust"),
        remediation="rustup update",
    ),
)

TOOL_MAP: dict[str, ToolSpec] = {t.name: t for t in TOOLS}

# Names accepted by the "skip" setting and CLI filters, including the updater
KNOWN_NAMES: frozenset[str] = frozenset(TOOL_MAP) | {"brew"}


def get_tool(name: str) -> ToolSpec | None:
    """Get tool definition by name."""
    return TOOL_MAP.get(name)


def all_tools() -> list[ToolSpec]:
    """Get all tool definitions in report order."""
    return list(TOOLS)


def filter_tools(names: list[str]) -> list[ToolSpec]:
    """Filter tools by name list (case-insensitive), keeping report order."""
    name_set = {n.lower() for n in names}
    return [t for t in TOOLS if t.name in name_set]
