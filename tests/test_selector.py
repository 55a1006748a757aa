# ABOUTME: Tests for the interactive checkbox selector
# ABOUTME: Drives present_selector() by patching builtins.input
import json
from pathlib import Path
from unittest.mock import patch

import pytest

from lmcp.models import ToggleItem
from lmcp.selector import (
    SelectionCancelled,
    build_toggle_list,
    format_label,
    parse_toggle_input,
    present_selector,
)


def _items(*rows: tuple[str, bool]) -> list[ToggleItem]:
    return [ToggleItem(label=name, name=name, active=active) for name, active in rows]


class TestBuildToggleList:
    """Tests for build_toggle_list function."""

    def test_empty_when_no_files(self, tmp_path: Path) -> None:
        assert build_toggle_list(tmp_path / ".claude.json", tmp_path / ".lmcp.json") == []

    def test_union_sorted_with_state(self, tmp_path: Path) -> None:
        """Test that rows cover both files, sorted, tagged with state."""
        active_file = tmp_path / ".claude.json"
        disabled_file = tmp_path / ".lmcp.json"
        active_file.write_text(json.dumps({"mcpServers": {"github": {}, "context7": {}}}))
        disabled_file.write_text(json.dumps({"mcpServers": {"docker-mcp": {}}}))

        items = build_toggle_list(active_file, disabled_file)

        assert [(item.name, item.active) for item in items] == [
            ("context7", True),
            ("docker-mcp", False),
            ("github", True),
        ]
        assert "(active)" in items[0].label
        assert "(disabled)" in items[1].label

    def test_name_in_both_files_shown_once_as_active(self, tmp_path: Path) -> None:
        active_file = tmp_path / ".claude.json"
        disabled_file = tmp_path / ".lmcp.json"
        active_file.write_text(json.dumps({"mcpServers": {"github": {"command": "a"}}}))
        disabled_file.write_text(json.dumps({"mcpServers": {"github": {"command": "b"}}}))

        items = build_toggle_list(active_file, disabled_file)

        assert [(item.name, item.active) for item in items] == [("github", True)]


def test_format_label() -> None:
    active_label = format_label("github", True)
    disabled_label = format_label("docker", False)

    assert "✓" in active_label and "github" in active_label and "(active)" in active_label
    assert "✗" in disabled_label and "docker" in disabled_label and "(disabled)" in disabled_label


def test_format_label_plain_when_piped(capsys) -> None:
    """Test that labels carry no color codes when stdout isn't a terminal."""
    assert format_label("github", True) == "✓ github (active)"
    assert format_label("docker", False) == "✗ docker (disabled)"


class TestParseToggleInput:
    """Tests for parse_toggle_input function."""

    def test_numbers_and_ranges(self):
        assert parse_toggle_input("1 3-4,6", 6) == [0, 2, 3, 5]

    def test_reversed_range(self):
        assert parse_toggle_input("3-1", 3) == [0, 1, 2]

    @pytest.mark.parametrize("text", ["0", "4", "2-5", "x", "1-", "-2"])
    def test_invalid(self, text):
        with pytest.raises(ValueError):
            parse_toggle_input(text, 3)


class TestPresentSelector:
    """Tests for present_selector function."""

    def test_enter_keeps_current_state(self):
        """Test that confirming immediately returns the active servers."""
        items = _items(("context7", True), ("docker", False), ("github", True))

        with patch("builtins.input", side_effect=[""]):
            selected = present_selector(items)

        assert selected == {"context7", "github"}

    def test_toggle_numbers(self):
        items = _items(("docker", False), ("github", True))

        with patch("builtins.input", side_effect=["1 2", ""]):
            selected = present_selector(items)

        assert selected == {"docker"}

    def test_select_none_is_valid(self):
        """Test that an empty confirmed selection is returned, not treated as cancel."""
        items = _items(("docker", True), ("github", True))

        with patch("builtins.input", side_effect=["n", ""]):
            selected = present_selector(items)

        assert selected == set()

    def test_select_all(self):
        items = _items(("docker", False), ("github", False))

        with patch("builtins.input", side_effect=["a", ""]):
            selected = present_selector(items)

        assert selected == {"docker", "github"}

    def test_invalid_input_reprompts(self, capsys):
        """Test that bad input warns and leaves the selection unchanged."""
        items = _items(("docker", False), ("github", True))

        with patch("builtins.input", side_effect=["9", "abc", ""]):
            selected = present_selector(items)

        assert selected == {"github"}
        assert capsys.readouterr().out.count("Invalid input") == 2

    def test_renders_checkboxes(self, capsys):
        items = _items(("docker", False), ("github", True))

        with patch("builtins.input", side_effect=[""]):
            present_selector(items)

        out = capsys.readouterr().out
        assert "1. [ ] docker" in out
        assert "2. [x] github" in out

    def test_keyboard_interrupt_cancels(self):
        items = _items(("github", True))

        with patch("builtins.input", side_effect=KeyboardInterrupt):
            with pytest.raises(SelectionCancelled):
                present_selector(items)

    def test_eof_cancels(self):
        items = _items(("github", True))

        with patch("builtins.input", side_effect=["2", EOFError]):
            with pytest.raises(SelectionCancelled):
                present_selector(items)
