# Core data models for lmcp
from dataclasses import dataclass, field
from typing import Any

# ABOUTME: Server entries are opaque - command, args, env and any extra keys pass through
ServerEntry = dict[str, Any]

# ABOUTME: Top-level key holding the server map in both config files
SERVERS_KEY = "mcpServers"


@dataclass
class ConfigDocument:
    """Parsed JSON config file (~/.claude.json or ~/.lmcp.json).

    ABOUTME: Wraps the raw JSON object so unrelated top-level fields survive a rewrite
    ABOUTME: Only the mcpServers section is ever replaced
    """
    data: dict[str, Any] = field(default_factory=dict)

    @property
    def servers(self) -> dict[str, ServerEntry]:
        """Server map, or an empty dict if absent or malformed."""
        servers = self.data.get(SERVERS_KEY)
        if not isinstance(servers, dict):
            return {}
        return dict(servers)

    def with_servers(self, servers: dict[str, ServerEntry]) -> "ConfigDocument":
        """Return a copy with mcpServers replaced.

        ABOUTME: Keeps key order - mcpServers stays where it was, or is appended
        """
        data = dict(self.data)
        data[SERVERS_KEY] = dict(servers)
        return ConfigDocument(data=data)


@dataclass(frozen=True)
class ToggleItem:
    """One row of the interactive checkbox list."""
    label: str
    name: str
    active: bool


@dataclass
class ToggleReport:
    """Outcome of a toggle run.

    ABOUTME: Names are recorded in the order they were written
    """
    enabled: list[str] = field(default_factory=list)
    disabled: list[str] = field(default_factory=list)

    @property
    def active_count(self) -> int:
        return len(self.enabled)

    @property
    def disabled_count(self) -> int:
        return len(self.disabled)
