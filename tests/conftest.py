"""
Shared pytest fixtures for agent tests.

Provides sample tools, metrics and configs.
"""

import pytest
from unittest.mock import Mock
from pydantic import Field

from agent_compose.agent import AgentConfig
from agent_compose.eval import ExactMatchMetric, KeywordCoverageMetric
from agent_compose.tools import ToolAction, ToolInput, ToolResult, create_tool


# ============================================================================
# Tool Fixtures
# ============================================================================

class SearchInput(ToolInput):
    """Search input for testing."""

    query: str = Field(..., description="Search query")
    k: int = Field(3, ge=1, description="Number of results")


class SearchTool(ToolAction):
    """Search tool returning canned documents."""

    name = "search"
    description = "Search documents"
    input_schema = SearchInput

    def execute_impl(self, query: str, k: int) -> ToolResult:
        return ToolResult(
            success=True,
            data=[{"doc_id": f"doc{i}", "text": f"{query} {i}"} for i in range(k)],
        )


class SumInput(ToolInput):
    a: int
    b: int


@pytest.fixture
def search_tool():
    return SearchTool()


@pytest.fixture
def sum_tool():
    return create_tool("sum", "Add two integers", lambda a, b: a + b, SumInput)


@pytest.fixture
def tools(search_tool, sum_tool):
    return {"search": search_tool, "sum": sum_tool}


# ============================================================================
# Metric Fixtures
# ============================================================================

@pytest.fixture
def metrics():
    return {
        "exact_match": ExactMatchMetric(["Prague"]),
        "keyword_coverage": KeywordCoverageMetric(),
    }


# ============================================================================
# Config Fixtures
# ============================================================================

@pytest.fixture
def empty_config():
    """Config from the minimal scenario: identifier only."""
    return AgentConfig(name="a1", tools={}, metrics={})


@pytest.fixture
def full_config(tools, metrics):
    return AgentConfig(
        name="researcher",
        tools=tools,
        metrics=metrics,
        instructions="You answer questions about capitals.",
        model="claude-sonnet-4-5",
        options={"max_steps": 5},
    )


@pytest.fixture
def mock_logger():
    """Stub logging collaborator recording calls."""
    return Mock()
