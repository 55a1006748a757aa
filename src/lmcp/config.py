# Configuration file locations and JSON document I/O for lmcp
import json
import logging
import os
import shutil
import tempfile
from pathlib import Path

from lmcp.models import SERVERS_KEY, ConfigDocument

logger = logging.getLogger(__name__)

# ABOUTME: Active servers live in Claude's own config file
ACTIVE_CONFIG_FILE = Path.home() / ".claude.json"

# ABOUTME: Disabled servers are parked here until re-enabled
DISABLED_CONFIG_FILE = Path.home() / ".lmcp.json"

# ABOUTME: Environment variables that relocate the two files
ACTIVE_CONFIG_ENV = "LMCP_ACTIVE_CONFIG"
DISABLED_CONFIG_ENV = "LMCP_DISABLED_CONFIG"


def _path_from_env(var_name: str, default: Path) -> Path:
    value = os.environ.get(var_name)
    if value:
        return Path(value).expanduser()
    return default


def get_active_config_path() -> Path:
    """Return the path to the active config file.

    ABOUTME: Returns ~/.claude.json unless LMCP_ACTIVE_CONFIG is set
    """
    return _path_from_env(ACTIVE_CONFIG_ENV, ACTIVE_CONFIG_FILE)


def get_disabled_config_path() -> Path:
    """Return the path to the disabled config file.

    ABOUTME: Returns ~/.lmcp.json unless LMCP_DISABLED_CONFIG is set
    """
    return _path_from_env(DISABLED_CONFIG_ENV, DISABLED_CONFIG_FILE)


def read_document(path: Path) -> ConfigDocument:
    """Read a JSON config document, tolerating missing or broken files.

    ABOUTME: Returns empty document if file doesn't exist
    ABOUTME: Logs a warning and returns empty document on read/parse errors
    ABOUTME: Never raises - the tool must stay usable with a corrupt file

    Args:
        path: Path to the JSON file

    Returns:
        Parsed ConfigDocument (empty on any problem)
    """
    try:
        if not path.exists():
            logger.debug(f"Config file not found, treating as empty: {path}")
            return ConfigDocument()

        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        logger.warning(f"Failed to parse {path}: {e}")
        return ConfigDocument()
    except (OSError, UnicodeDecodeError) as e:
        logger.warning(f"Failed to read {path}: {e}")
        return ConfigDocument()

    if not isinstance(data, dict):
        logger.warning(f"Ignoring {path}: top-level JSON value is not an object")
        return ConfigDocument()

    if SERVERS_KEY in data and not isinstance(data[SERVERS_KEY], dict):
        logger.warning(f"Ignoring '{SERVERS_KEY}' in {path}: value is not an object")

    return ConfigDocument(data=data)


def write_document(path: Path, doc: ConfigDocument) -> None:
    """Write a JSON config document, replacing the file in one step.

    ABOUTME: Uses 2-space indentation, keeps key order and non-ASCII text
    ABOUTME: Writes a temp file next to the target, then os.replace()
    ABOUTME: Follows symlinks - the link stays, the file it points at is replaced
    ABOUTME: Keeps permission bits of the file being replaced

    Args:
        path: Path to write
        doc: Document to serialize

    Raises:
        OSError: If the file cannot be written
        TypeError: If the document holds values JSON can't encode
        ValueError: If the document can't be serialized
    """
    tmp_name: str | None = None
    try:
        # Serialize first so an encoding error never leaves a temp file behind
        content = json.dumps(doc.data, indent=2, ensure_ascii=False) + "\n"

        # Symlinked configs: replace the link target, keep the link
        target = path.resolve()
        target.parent.mkdir(parents=True, exist_ok=True)
        with tempfile.NamedTemporaryFile(
            "w",
            encoding="utf-8",
            dir=target.parent,
            prefix=f".{target.name}.",
            suffix=".tmp",
            delete=False,
        ) as tf:
            tmp_name = tf.name
            tf.write(content)

        if target.exists():
            shutil.copymode(target, tmp_name)
        os.replace(tmp_name, target)
        tmp_name = None
    except (OSError, TypeError, ValueError) as e:
        logger.error(f"Failed to write {path}: {e}")
        raise
    finally:
        if tmp_name is not None and os.path.exists(tmp_name):
            os.unlink(tmp_name)
