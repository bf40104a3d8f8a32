"""Tests for the environment-driven server switches."""

import pytest

from mcp_confluence.utils.environment import (
    get_enabled_tools,
    is_read_only_mode,
    should_include_tool,
)


@pytest.mark.parametrize(
    ("value", "expected"),
    [("true", True), ("1", True), (" Yes ", True), ("false", False), ("", False)],
)
def test_is_read_only_mode(monkeypatch, value, expected):
    monkeypatch.setenv("READ_ONLY_MODE", value)

    assert is_read_only_mode() is expected


def test_is_read_only_mode_unset(clean_confluence_env):
    assert is_read_only_mode() is False


def test_get_enabled_tools(monkeypatch):
    monkeypatch.setenv("ENABLED_TOOLS", "confluence_search, confluence_get_page,")

    assert get_enabled_tools() == ["confluence_search", "confluence_get_page"]


@pytest.mark.parametrize("value", [None, "", " , "])
def test_get_enabled_tools_empty(clean_confluence_env, monkeypatch, value):
    if value is not None:
        monkeypatch.setenv("ENABLED_TOOLS", value)

    assert get_enabled_tools() is None


def test_should_include_tool():
    assert should_include_tool("confluence_search", None) is True
    assert should_include_tool("confluence_search", ["confluence_search"]) is True
    assert should_include_tool("confluence_add_label", ["confluence_search"]) is False
