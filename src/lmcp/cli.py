# CLI interface for lmcp
import argparse
import sys

from lmcp import __version__
from lmcp.config import get_active_config_path, get_disabled_config_path
from lmcp.console import error, info, muted, setup_logging, success, warning
from lmcp.manager import toggle_servers
from lmcp.selector import SelectionCancelled, build_toggle_list, present_selector

# ABOUTME: Exit codes - cancellation counts as success, only write failure is fatal
EXIT_SUCCESS = 0
EXIT_FATAL = 1


def cmd_list(args: argparse.Namespace) -> int:
    """Print every known server with its state.

    ABOUTME: Read-only - never writes either file
    """
    active_path = get_active_config_path()
    disabled_path = get_disabled_config_path()
    items = build_toggle_list(active_path, disabled_path)

    if not items:
        print(warning(f"No MCP servers found in {active_path} or {disabled_path}"))
        return EXIT_SUCCESS

    for item in items:
        print(f"  {item.label}")

    active_count = sum(1 for item in items if item.active)
    print()
    print(muted(f"Active servers: {active_count}"))
    print(muted(f"Disabled servers: {len(items) - active_count}"))
    return EXIT_SUCCESS


def cmd_toggle(args: argparse.Namespace) -> int:
    """Run the interactive toggle flow.

    ABOUTME: Load -> prompt -> partition -> write -> report
    ABOUTME: Nothing is written unless the user confirms a selection
    """
    active_path = get_active_config_path()
    disabled_path = get_disabled_config_path()
    items = build_toggle_list(active_path, disabled_path)

    if not items:
        print(warning(f"No MCP servers found in {active_path} or {disabled_path}"))
        return EXIT_SUCCESS

    print(info("MCP Server Manager"))
    print(muted("Select which MCP servers should be active in Claude (Ctrl+C to cancel):"))
    print()

    try:
        selected = present_selector(items)
    except SelectionCancelled:
        print()
        print(warning("Cancelled"))
        return EXIT_SUCCESS

    try:
        report = toggle_servers(
            selected,
            active_path=active_path,
            disabled_path=disabled_path,
        )
    except (OSError, TypeError, ValueError) as e:
        print(error(f"Failed to save configuration: {e}"))
        return EXIT_FATAL

    print()
    for name in report.enabled:
        print(success(f"✓ Enabled: {name}"))
    for name in report.disabled:
        print(error(f"✗ Disabled: {name}"))

    print()
    print(info("Configuration updated successfully!"))
    print(muted(f"Active servers: {report.active_count}"))
    print(muted(f"Disabled servers: {report.disabled_count}"))
    return EXIT_SUCCESS


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point.

    ABOUTME: Parses args and dispatches to list or interactive toggle
    ABOUTME: Returns exit code for sys.exit()
    """
    parser = argparse.ArgumentParser(
        prog="lmcp",
        description="Toggle Claude MCP servers on and off without losing their configuration"
    )

    parser.add_argument(
        "--version", "-V",
        action="version",
        version=f"lmcp v{__version__}"
    )

    parser.add_argument(
        "--list", "-l",
        action="store_true",
        help="List servers and their state without changing anything"
    )

    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Show debug logging"
    )

    args = parser.parse_args(argv)

    setup_logging(args.verbose)

    if args.list:
        return cmd_list(args)
    return cmd_toggle(args)


if __name__ == "__main__":
    sys.exit(main())
