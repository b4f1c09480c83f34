"""
Base Tool Abstraction

Provides the ToolAction contract agents are parameterized over:
- Input validation via Pydantic
- Error handling
- Execution statistics
- Tool definitions (JSON schema)
"""

import logging
import time
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Optional, Type

from pydantic import BaseModel, ConfigDict, ValidationError

logger = logging.getLogger(__name__)


class ToolInput(BaseModel):
    """
    Base input validation using Pydantic.

    All tool inputs inherit from this for automatic validation.
    """

    model_config = ConfigDict(extra="forbid")  # Reject unknown fields


@dataclass
class ToolResult:
    """
    Standardized tool execution result.

    All tools return this format for consistency.
    """

    success: bool
    data: Any
    error: Optional[str] = None
    metadata: Dict[str, Any] = field(default_factory=dict)
    execution_time_ms: float = 0.0

    def __post_init__(self):
        """Validate ToolResult invariants."""
        if self.execution_time_ms < 0:
            raise ValueError(f"Execution time cannot be negative: {self.execution_time_ms}")

        if self.success and self.error is not None:
            raise ValueError("Successful results cannot have errors")
        if not self.success and not self.error:
            raise ValueError("Failed results must have an error message")


class ToolAction(ABC):
    """
    Base class for all tools an agent can invoke.

    Provides:
    - Input validation (via Pydantic schemas)
    - Error handling (failures become unsuccessful ToolResults)
    - Execution statistics (call count, avg time)

    Subclasses implement:
    - name: Tool identifier
    - description: What the tool does
    - input_schema: Pydantic model for input validation
    - execute_impl(): Tool-specific logic
    """

    name: str = "base_tool"
    description: str = "Base tool (override in subclass)"
    input_schema: Type[ToolInput] = ToolInput

    def __init__(self, config: Optional[Dict[str, Any]] = None):
        self.config = config or {}

        # Statistics
        self.execution_count = 0
        self.total_time_ms = 0.0
        self.error_count = 0

    @abstractmethod
    def execute_impl(self, **kwargs) -> ToolResult:
        """
        Tool-specific execution logic.

        Args:
            **kwargs: Validated input parameters

        Returns:
            ToolResult with execution results
        """
        pass

    def execute(self, **kwargs) -> ToolResult:
        """
        Execute tool with validation and error handling.

        Flow:
        1. Validate inputs via Pydantic schema
        2. Execute tool logic with timing
        3. Track statistics
        4. Handle errors gracefully

        Args:
            **kwargs: Tool input parameters

        Returns:
            ToolResult
        """
        start_time = time.time()
        self.execution_count += 1

        try:
            validated_input = self.input_schema(**kwargs)
            result = self.execute_impl(**validated_input.model_dump())

            elapsed_ms = (time.time() - start_time) * 1000
            self.total_time_ms += elapsed_ms
            if not result.success:
                self.error_count += 1

            result.execution_time_ms = elapsed_ms
            result.metadata["tool_name"] = self.name

            logger.info(
                f"Tool '{self.name}' executed in {elapsed_ms:.0f}ms (success={result.success})"
            )

            return result

        except ValidationError as e:
            # User input issues
            return self._failure(start_time, "validation", f"Invalid input: {e}")

        except (KeyError, AttributeError, IndexError, TypeError) as e:
            # Bugs in tool implementation
            logger.error(
                f"Tool '{self.name}' implementation error: {e}",
                exc_info=True,
                extra={"tool_kwargs": kwargs},
            )
            return self._failure(
                start_time,
                "programming",
                f"Internal tool error - this is a bug. {type(e).__name__}: {e}",
            )

        except Exception as e:
            logger.error(
                f"Tool '{self.name}' unexpected error: {type(e).__name__}: {e}",
                exc_info=True,
                extra={"tool_kwargs": kwargs},
            )
            return self._failure(
                start_time, "unexpected", f"Unexpected error: {type(e).__name__}: {e}"
            )

    def _failure(self, start_time: float, error_type: str, message: str) -> ToolResult:
        elapsed_ms = (time.time() - start_time) * 1000
        self.total_time_ms += elapsed_ms
        self.error_count += 1

        if error_type == "validation":
            logger.warning(f"Tool '{self.name}' validation failed: {message}")

        return ToolResult(
            success=False,
            data=None,
            error=message,
            metadata={"tool_name": self.name, "error_type": error_type},
            execution_time_ms=elapsed_ms,
        )

    def get_stats(self) -> Dict[str, Any]:
        """Get tool execution statistics."""
        avg_time = self.total_time_ms / self.execution_count if self.execution_count > 0 else 0
        success_rate = (
            (self.execution_count - self.error_count) / self.execution_count
            if self.execution_count > 0
            else 0
        )

        return {
            "name": self.name,
            "execution_count": self.execution_count,
            "error_count": self.error_count,
            "success_rate": round(success_rate * 100, 1),
            "total_time_ms": round(self.total_time_ms, 2),
            "avg_time_ms": round(avg_time, 2),
        }

    def get_definition(self) -> Dict[str, Any]:
        """
        Get tool definition for LLM tool calling.

        Returns:
            Dict with name, description and JSON schema of the input
        """
        return {
            "name": self.name,
            "description": self.description,
            "input_schema": self.input_schema.model_json_schema(),
        }

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r})"


class FunctionTool(ToolAction):
    """ToolAction backed by a plain callable (see create_tool)."""

    def __init__(
        self,
        name: str,
        description: str,
        func: Callable[..., Any],
        input_schema: Type[ToolInput] = ToolInput,
        config: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(config=config)
        self.name = name
        self.description = description
        self.input_schema = input_schema
        self._func = func

    def execute_impl(self, **kwargs) -> ToolResult:
        return ToolResult(success=True, data=self._func(**kwargs))


def create_tool(
    name: str,
    description: str,
    execute: Callable[..., Any],
    input_schema: Type[ToolInput] = ToolInput,
) -> FunctionTool:
    """
    Build a tool from a function.

    The function receives validated input fields as keyword arguments and its
    return value becomes ``ToolResult.data``.

    Example:
        >>> class SumInput(ToolInput):
        ...     a: int
        ...     b: int
        >>> add = create_tool("sum", "Add two numbers", lambda a, b: a + b, SumInput)
        >>> add.execute(a=1, b=2).data
        3
    """
    if not name:
        raise ValueError("Tool name is required")
    return FunctionTool(name=name, description=description, func=execute, input_schema=input_schema)
