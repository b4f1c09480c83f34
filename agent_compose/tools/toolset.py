"""
Tool Set

Read-only mapping of tool name -> ToolAction held by an agent.
Provides lookup, execution by name, tool definitions and statistics.
"""

import logging
from typing import Any, Dict, Iterator, List, Mapping, Optional

from .base import ToolAction, ToolResult
from ..utils.errors import ConfigurationError

logger = logging.getLogger(__name__)


class ToolSet(Mapping[str, ToolAction]):
    """
    Immutable set of named tools.

    The tool name is the mapping key, which may differ from ``ToolAction.name``.
    The set is fixed at creation: there is no way to add or remove tools.
    """

    def __init__(self, tools: Optional[Mapping[str, ToolAction]] = None):
        """
        Build tool set from a mapping (copied, so later changes to it are ignored).

        Raises:
            ConfigurationError: If a key is not a non-empty string or a value
                is not a ToolAction
        """
        tools = tools if tools is not None else {}
        if not isinstance(tools, Mapping):
            raise ConfigurationError(
                f"tools must be a mapping of name -> ToolAction, got {type(tools).__name__}"
            )

        for tool_name, tool in tools.items():
            if not isinstance(tool_name, str) or not tool_name:
                raise ConfigurationError(f"Tool names must be non-empty strings, got {tool_name!r}")
            if not isinstance(tool, ToolAction):
                raise ConfigurationError(
                    f"Tool '{tool_name}' must be a ToolAction, got {type(tool).__name__}"
                )

        self._tools: Dict[str, ToolAction] = dict(tools)
        # Calls made through this set; tool objects may be shared by several sets
        self._calls: Dict[str, Dict[str, float]] = {
            name: {"execution_count": 0, "error_count": 0, "total_time_ms": 0.0}
            for name in self._tools
        }
        logger.debug(f"Tool set created with {len(self._tools)} tools: {list(self._tools)}")

    def __getitem__(self, name: str) -> ToolAction:
        return self._tools[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._tools)

    def __len__(self) -> int:
        """Number of tools."""
        return len(self._tools)

    def __repr__(self) -> str:
        return f"ToolSet({sorted(self._tools)})"

    def get_tool(self, name: str) -> Optional[ToolAction]:
        """
        Get tool by name.

        Args:
            name: Tool name

        Returns:
            ToolAction or None if not found
        """
        return self._tools.get(name)

    def execute_tool(self, name: str, **kwargs) -> ToolResult:
        """
        Execute a tool by name with input validation.

        Args:
            name: Tool name
            **kwargs: Tool input parameters

        Returns:
            ToolResult (unsuccessful if the tool does not exist)
        """
        tool = self.get_tool(name)
        if tool is None:
            return ToolResult(
                success=False,
                data=None,
                error=f"Tool not found: {name}",
                metadata={"available_tools": list(self._tools.keys())},
            )

        result = tool.execute(**kwargs)

        calls = self._calls[name]
        calls["execution_count"] += 1
        calls["total_time_ms"] += result.execution_time_ms
        if not result.success:
            calls["error_count"] += 1

        return result

    def get_definitions(self) -> List[Dict[str, Any]]:
        """
        Get tool definitions for all tools, named by their key in this set.

        Returns:
            List of tool definition dicts
        """
        definitions = []
        for name, tool in self._tools.items():
            definition = tool.get_definition()
            definition["name"] = name
            definitions.append(definition)
        return definitions

    def get_stats(self) -> Dict[str, Any]:
        """
        Get statistics of calls made through this tool set.

        Calls made to the same tool objects elsewhere (directly or through
        another set) are not counted.

        Returns:
            Dict with statistics per tool and overall stats
        """
        tool_stats = [_call_stats(name, calls) for name, calls in self._calls.items()]

        total_calls = sum(s["execution_count"] for s in tool_stats)
        total_errors = sum(s["error_count"] for s in tool_stats)
        total_time = sum(s["total_time_ms"] for s in tool_stats)

        return {
            "total_tools": len(self._tools),
            "total_calls": total_calls,
            "total_errors": total_errors,
            "total_time_ms": round(total_time, 2),
            "avg_time_ms": round(total_time / total_calls, 2) if total_calls > 0 else 0,
            "success_rate": (
                round((total_calls - total_errors) / total_calls * 100, 1)
                if total_calls > 0
                else 100.0
            ),
            "tools": tool_stats,
        }


def _call_stats(name: str, calls: Dict[str, float]) -> Dict[str, Any]:
    count = calls["execution_count"]
    errors = calls["error_count"]
    total_time = calls["total_time_ms"]
    return {
        "name": name,
        "execution_count": count,
        "error_count": errors,
        "success_rate": round((count - errors) / count * 100, 1) if count > 0 else 0,
        "total_time_ms": round(total_time, 2),
        "avg_time_ms": round(total_time / count, 2) if count > 0 else 0,
    }
