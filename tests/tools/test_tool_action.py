"""
Tests for ToolAction base class.

Tests:
- Input validation
- Error handling
- Statistics
- create_tool()
"""

import pytest
from pydantic import Field, ValidationError

from agent_compose.tools import FunctionTool, ToolAction, ToolInput, ToolResult, create_tool


class EchoInput(ToolInput):
    text: str = Field(..., description="Text to echo")


class EchoTool(ToolAction):
    name = "echo"
    description = "Echo text back"
    input_schema = EchoInput

    def execute_impl(self, text: str) -> ToolResult:
        return ToolResult(success=True, data=text)


class BuggyTool(ToolAction):
    name = "buggy"
    description = "Always hits a bug"

    def execute_impl(self) -> ToolResult:
        return {}["missing"]


class FlakyTool(ToolAction):
    name = "flaky"
    description = "Raises an unexpected error"

    def execute_impl(self) -> ToolResult:
        raise ConnectionError("upstream unavailable")


def test_execute_success():
    result = EchoTool().execute(text="hello")

    assert result.success
    assert result.data == "hello"
    assert result.error is None
    assert result.metadata["tool_name"] == "echo"
    assert result.execution_time_ms >= 0


def test_execute_validation_error():
    result = EchoTool().execute(wrong="hello")

    assert not result.success
    assert result.error.startswith("Invalid input")
    assert result.metadata["error_type"] == "validation"


def test_execute_programming_error():
    result = BuggyTool().execute()

    assert not result.success
    assert "this is a bug" in result.error
    assert result.metadata["error_type"] == "programming"


def test_execute_unexpected_error():
    result = FlakyTool().execute()

    assert not result.success
    assert "ConnectionError" in result.error
    assert result.metadata["error_type"] == "unexpected"


def test_stats_track_calls_and_errors():
    tool = EchoTool()
    tool.execute(text="a")
    tool.execute(text="b")
    tool.execute()

    stats = tool.get_stats()

    assert stats["name"] == "echo"
    assert stats["execution_count"] == 3
    assert stats["error_count"] == 1
    assert stats["success_rate"] == pytest.approx(66.7)


def test_stats_without_calls():
    stats = EchoTool().get_stats()

    assert stats["execution_count"] == 0
    assert stats["success_rate"] == 0
    assert stats["avg_time_ms"] == 0


def test_definition():
    definition = EchoTool().get_definition()

    assert definition["name"] == "echo"
    assert definition["description"] == "Echo text back"
    assert definition["input_schema"]["required"] == ["text"]


def test_tool_input_rejects_unknown_fields():
    with pytest.raises(ValidationError):
        EchoInput(text="hi", extra="nope")


@pytest.mark.parametrize(
    "kwargs",
    [
        {"success": True, "data": 1, "error": "oops"},
        {"success": False, "data": None},
        {"success": True, "data": 1, "execution_time_ms": -1.0},
    ],
)
def test_tool_result_invariants(kwargs):
    with pytest.raises(ValueError):
        ToolResult(**kwargs)


def test_create_tool(sum_tool):
    assert isinstance(sum_tool, FunctionTool)
    assert sum_tool.name == "sum"

    result = sum_tool.execute(a=40, b=2)

    assert result.success
    assert result.data == 42


def test_create_tool_validates_input(sum_tool):
    result = sum_tool.execute(a="forty", b=2)

    assert not result.success
    assert result.metadata["error_type"] == "validation"


def test_create_tool_without_inputs():
    ping = create_tool("ping", "Health check", lambda: "pong")

    assert ping.execute().data == "pong"


def test_create_tool_requires_name():
    with pytest.raises(ValueError):
        create_tool("", "Nameless", lambda: None)
