"""
agent_compose: agents parameterized by an identifier, tools and metrics.

``Agent`` imported from here is the legacy entry point: it builds the same
agent as ``agent_compose.agent.Agent`` but logs a deprecation warning on
every construction. New code should import from ``agent_compose.agent``.
"""

from .agent import AgentConfig, construct
from .agent.deprecated import construct_legacy as Agent
from .eval import Metric, MetricResult
from .tools import ToolAction, ToolInput, ToolResult, ToolSet, create_tool
from .utils.errors import AgentComposeError, ConfigurationError

__version__ = "1.0.0"
__all__ = [
    "Agent",
    "AgentConfig",
    "construct",
    "Metric",
    "MetricResult",
    "ToolAction",
    "ToolInput",
    "ToolResult",
    "ToolSet",
    "create_tool",
    "AgentComposeError",
    "ConfigurationError",
]
