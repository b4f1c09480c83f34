"""
Agent tools.

ToolAction is the contract for a named, invocable, typed tool.
ToolSet is the read-only name -> tool mapping an agent holds.
"""

from .base import FunctionTool, ToolAction, ToolInput, ToolResult, create_tool
from .toolset import ToolSet

__all__ = ["FunctionTool", "ToolAction", "ToolInput", "ToolResult", "ToolSet", "create_tool"]
