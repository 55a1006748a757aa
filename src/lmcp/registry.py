# Merged view of active and disabled MCP servers
import locale
import logging
from collections.abc import Iterable
from pathlib import Path

from lmcp.config import get_active_config_path, get_disabled_config_path, read_document
from lmcp.models import ServerEntry

logger = logging.getLogger(__name__)


def get_all_servers(
    active_path: Path | None = None,
    disabled_path: Path | None = None,
) -> tuple[dict[str, ServerEntry], dict[str, ServerEntry]]:
    """Load server maps from both config files.

    ABOUTME: Pure projection - never writes or mutates the documents
    ABOUTME: Missing or corrupt files yield empty maps

    Args:
        active_path: Active config file (defaults to ~/.claude.json)
        disabled_path: Disabled config file (defaults to ~/.lmcp.json)

    Returns:
        Tuple of (active servers, disabled servers)

    Examples:
        >>> active, disabled = get_all_servers()
        >>> sorted(active)
        ['context7', 'github']
    """
    active_doc = read_document(active_path or get_active_config_path())
    disabled_doc = read_document(disabled_path or get_disabled_config_path())
    return active_doc.servers, disabled_doc.servers


def merge_servers(
    active: dict[str, ServerEntry],
    disabled: dict[str, ServerEntry],
) -> dict[str, ServerEntry]:
    """Union of active and disabled servers.

    ABOUTME: Active entry wins when a name exists in both files
    ABOUTME: Returns new dict (doesn't mutate inputs)
    """
    overlap = set(active) & set(disabled)
    for name in sorted(overlap):
        if active[name] != disabled[name]:
            logger.debug(f"Server '{name}' differs between files, keeping active entry")

    result: dict[str, ServerEntry] = dict(disabled)
    result.update(active)
    return result


def sort_names(names: Iterable[str]) -> list[str]:
    """Sort server names for display.

    ABOUTME: Locale-aware, case-insensitive; raw name breaks ties
    """
    return sorted(names, key=lambda name: (locale.strxfrm(name.casefold()), name))
