# Redistribution of servers between the active and disabled config files
import logging
from collections.abc import Iterable
from pathlib import Path

from lmcp.config import (
    get_active_config_path,
    get_disabled_config_path,
    read_document,
    write_document,
)
from lmcp.models import ServerEntry, ToggleReport
from lmcp.registry import merge_servers, sort_names

logger = logging.getLogger(__name__)


def partition_servers(
    all_servers: dict[str, ServerEntry],
    selected: Iterable[str],
) -> tuple[dict[str, ServerEntry], dict[str, ServerEntry]]:
    """Split known servers into active and disabled maps.

    ABOUTME: Selected names go active, everything else goes disabled
    ABOUTME: Entries are passed through untouched; unknown names are ignored
    ABOUTME: Result maps are disjoint and together cover all_servers

    Examples:
        >>> active, disabled = partition_servers(
        ...     {"github": {"command": "x"}, "docker": {"command": "y"}}, ["docker"]
        ... )
        >>> active
        {'docker': {'command': 'y'}}
        >>> disabled
        {'github': {'command': 'x'}}
    """
    selected_set = set(selected)

    unknown = selected_set - set(all_servers)
    if unknown:
        logger.debug(f"Ignoring unknown server(s): {', '.join(sorted(unknown))}")

    active: dict[str, ServerEntry] = {}
    disabled: dict[str, ServerEntry] = {}
    for name in sort_names(all_servers):
        if name in selected_set:
            active[name] = all_servers[name]
        else:
            disabled[name] = all_servers[name]
    return active, disabled


def toggle_servers(
    selected: Iterable[str],
    active_path: Path | None = None,
    disabled_path: Path | None = None,
) -> ToggleReport:
    """Move selected servers to the active file and the rest to the disabled file.

    ABOUTME: Re-reads both files, merges (active wins on name clash), rewrites both
    ABOUTME: Non-server top-level fields of each file are carried through
    ABOUTME: Write errors propagate - no retry, no rollback

    Args:
        selected: Names that should end up active
        active_path: Active config file (defaults to ~/.claude.json)
        disabled_path: Disabled config file (defaults to ~/.lmcp.json)

    Returns:
        ToggleReport with per-server results

    Raises:
        OSError: If either file cannot be written
    """
    active_path = active_path or get_active_config_path()
    disabled_path = disabled_path or get_disabled_config_path()

    active_doc = read_document(active_path)
    disabled_doc = read_document(disabled_path)

    all_servers = merge_servers(active_doc.servers, disabled_doc.servers)
    active, disabled = partition_servers(all_servers, selected)

    write_document(active_path, active_doc.with_servers(active))
    write_document(disabled_path, disabled_doc.with_servers(disabled))

    logger.debug(f"Wrote {len(active)} active server(s) to {active_path}")
    logger.debug(f"Wrote {len(disabled)} disabled server(s) to {disabled_path}")

    return ToggleReport(enabled=list(active), disabled=list(disabled))
