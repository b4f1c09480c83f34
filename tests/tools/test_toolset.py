"""
Tests for ToolSet.

Tests:
- Mapping behaviour and immutability
- Shape validation
- Execution by name
- Statistics
"""

import pytest
from unittest.mock import Mock

from agent_compose.tools import ToolSet
from agent_compose.utils.errors import ConfigurationError


def test_mapping_behaviour(tools, search_tool):
    tool_set = ToolSet(tools)

    assert len(tool_set) == 2
    assert set(tool_set) == {"search", "sum"}
    assert "search" in tool_set
    assert "translate" not in tool_set
    assert tool_set["search"] is search_tool
    assert tool_set.get_tool("translate") is None


def test_empty_by_default():
    assert len(ToolSet()) == 0
    assert len(ToolSet({})) == 0


def test_copy_of_source_mapping(tools, sum_tool):
    source = dict(tools)
    tool_set = ToolSet(source)

    source["other"] = sum_tool

    assert "other" not in tool_set


def test_key_may_differ_from_tool_name(sum_tool):
    tool_set = ToolSet({"add": sum_tool})

    assert tool_set.execute_tool("add", a=1, b=1).data == 2
    assert tool_set.get_definitions()[0]["name"] == "add"


def test_rejects_non_mapping(search_tool):
    with pytest.raises(ConfigurationError):
        ToolSet([search_tool])


def test_rejects_non_tool_value():
    with pytest.raises(ConfigurationError, match="must be a ToolAction"):
        ToolSet({"search": Mock()})


def test_rejects_non_string_key(search_tool):
    with pytest.raises(ConfigurationError, match="non-empty strings"):
        ToolSet({1: search_tool})


def test_execute_tool(tools):
    result = ToolSet(tools).execute_tool("search", query="capital", k=2)

    assert result.success
    assert [doc["doc_id"] for doc in result.data] == ["doc0", "doc1"]


def test_execute_missing_tool(tools):
    result = ToolSet(tools).execute_tool("translate")

    assert not result.success
    assert result.error == "Tool not found: translate"
    assert result.metadata["available_tools"] == ["search", "sum"]


def test_stats(tools):
    tool_set = ToolSet(tools)
    tool_set.execute_tool("search", query="q")
    tool_set.execute_tool("sum", a=1, b=2)
    tool_set.execute_tool("sum", a="x", b=2)

    stats = tool_set.get_stats()

    assert stats["total_tools"] == 2
    assert stats["total_calls"] == 3
    assert stats["total_errors"] == 1
    assert stats["success_rate"] == pytest.approx(66.7)
    assert {s["name"] for s in stats["tools"]} == {"search", "sum"}


def test_stats_without_calls():
    stats = ToolSet().get_stats()

    assert stats["total_calls"] == 0
    assert stats["success_rate"] == 100.0


def test_stats_count_only_calls_through_this_set(tools, sum_tool):
    first = ToolSet(tools)
    second = ToolSet(tools)

    first.execute_tool("sum", a=1, b=2)
    sum_tool.execute(a=3, b=4)

    assert first.get_stats()["total_calls"] == 1
    assert second.get_stats()["total_calls"] == 0
    assert sum_tool.get_stats()["execution_count"] == 2


def test_missing_tool_not_counted(tools):
    tool_set = ToolSet(tools)
    tool_set.execute_tool("translate")

    assert tool_set.get_stats()["total_calls"] == 0
