# Interactive server selection for lmcp
import logging
from pathlib import Path

from lmcp.console import error, muted, success, warning
from lmcp.models import ToggleItem
from lmcp.registry import get_all_servers, sort_names

logger = logging.getLogger(__name__)

PROMPT = "Toggle numbers (e.g. 1 3-5), 'a' = all, 'n' = none, Enter = confirm: "


class SelectionCancelled(Exception):
    """User aborted the prompt (Ctrl+C / Ctrl+D)."""


def format_label(name: str, active: bool) -> str:
    """Display text for one server, e.g. '✓ github (active)'."""
    if active:
        return f"{success('✓')} {name} {muted('(active)')}"
    return f"{error('✗')} {name} {muted('(disabled)')}"


def build_toggle_list(
    active_path: Path | None = None,
    disabled_path: Path | None = None,
) -> list[ToggleItem]:
    """Build the checkbox rows from both config files.

    ABOUTME: One row per known server name, sorted for display
    ABOUTME: A name present in both files is shown as active
    ABOUTME: Returns empty list when no servers are known

    Examples:
        >>> [item.name for item in build_toggle_list()]
        ['context7', 'docker-mcp', 'github']
    """
    active, disabled = get_all_servers(active_path, disabled_path)

    items: list[ToggleItem] = []
    for name in sort_names(set(active) | set(disabled)):
        is_active = name in active
        items.append(ToggleItem(label=format_label(name, is_active), name=name, active=is_active))
    return items


def parse_toggle_input(text: str, count: int) -> list[int]:
    """Parse '1 3-5,7' into zero-based indexes.

    ABOUTME: Accepts numbers and inclusive ranges separated by spaces or commas
    ABOUTME: Raises ValueError on anything out of range or unparseable
    """
    indexes: list[int] = []
    for token in text.replace(",", " ").split():
        if "-" in token:
            start_str, _, end_str = token.partition("-")
            start, end = int(start_str), int(end_str)
            if start > end:
                start, end = end, start
        else:
            start = end = int(token)

        if start < 1 or end > count:
            raise ValueError(f"'{token}' is out of range (1-{count})")
        indexes.extend(range(start - 1, end))
    return indexes


def _render(items: list[ToggleItem], checked: list[bool]) -> None:
    for number, (item, is_checked) in enumerate(zip(items, checked), start=1):
        box = "[x]" if is_checked else "[ ]"
        print(f"  {number:>3}. {box} {item.label}")
    print()


def present_selector(items: list[ToggleItem]) -> set[str]:
    """Ask the user which servers should be active.

    ABOUTME: The only place lmcp waits for input
    ABOUTME: Active servers start checked; Enter confirms (empty selection is valid)
    ABOUTME: Ctrl+C / Ctrl+D raise SelectionCancelled - nothing has been written yet

    Args:
        items: Rows from build_toggle_list()

    Returns:
        Names of the servers that should be active

    Raises:
        SelectionCancelled: If the user interrupts the prompt
    """
    checked = [item.active for item in items]

    while True:
        _render(items, checked)
        try:
            answer = input(PROMPT).strip().lower()
        except (KeyboardInterrupt, EOFError) as e:
            raise SelectionCancelled() from e

        if not answer:
            break
        if answer in ("a", "all"):
            checked = [True] * len(items)
            continue
        if answer in ("n", "none"):
            checked = [False] * len(items)
            continue

        try:
            indexes = parse_toggle_input(answer, len(items))
        except ValueError as e:
            print(warning(f"  Invalid input: {e}"))
            continue

        for index in indexes:
            checked[index] = not checked[index]

    selected = {item.name for item, is_checked in zip(items, checked) if is_checked}
    logger.debug(f"Selected {len(selected)} of {len(items)} server(s)")
    return selected
