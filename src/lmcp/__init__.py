# lmcp - Lightweight MCP server toggle for Claude
# ABOUTME: Version information
__version__ = "0.1.0"

# ABOUTME: Export core data models
# ABOUTME: Export config store, registry and toggle functions
from lmcp.config import (
    get_active_config_path,
    get_disabled_config_path,
    read_document,
    write_document,
)
from lmcp.manager import partition_servers, toggle_servers
from lmcp.models import ConfigDocument, ServerEntry, ToggleItem, ToggleReport
from lmcp.registry import get_all_servers, merge_servers
from lmcp.selector import SelectionCancelled, build_toggle_list, present_selector

__all__ = [
    "__version__",
    "ConfigDocument",
    "ServerEntry",
    "ToggleItem",
    "ToggleReport",
    "get_active_config_path",
    "get_disabled_config_path",
    "read_document",
    "write_document",
    "get_all_servers",
    "merge_servers",
    "build_toggle_list",
    "present_selector",
    "SelectionCancelled",
    "partition_servers",
    "toggle_servers",
]
