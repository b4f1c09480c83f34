"""
Agent

An agent is parameterized by an identifier, a set of tools it can invoke and
a set of metrics its outcomes are scored with. All three are fixed when the
agent is constructed.
"""

import logging
from types import MappingProxyType
from typing import Any, Dict, Generic, List, Mapping, Optional

from ..eval.metric import Metric, MetricResult
from ..tools.base import ToolAction, ToolResult
from ..tools.toolset import ToolSet
from .config import AgentConfig, TAgentId, TMetrics, TTools

_logger = logging.getLogger(__name__)


def agent_logger(name: str) -> logging.Logger:
    """Default logger of an agent: ``agent.<name>``."""
    return logging.getLogger(f"agent.{name}")


class Agent(Generic[TAgentId, TTools, TMetrics]):
    """
    Agent built from an AgentConfig.

    The config is validated once here; the tool and metric sets are copied
    into read-only mappings, so they cannot change after construction.
    """

    def __init__(
        self,
        config: AgentConfig[TAgentId, TTools, TMetrics],
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize agent.

        Args:
            config: Agent configuration
            logger: Logger to use (default: ``agent.<name>``)

        Raises:
            ConfigurationError: If the config has the wrong shape
        """
        config.validate()
        self._config = config
        self._name: TAgentId = config.name
        self._tools = ToolSet(config.tools)
        self._metrics: Mapping[str, Metric] = MappingProxyType(dict(config.metrics))
        self._options: Mapping[str, Any] = MappingProxyType(dict(config.options))
        self.logger = logger if logger is not None else agent_logger(config.name)

        message = (
            f"Agent {self._name} constructed with tools={list(self._tools)} "
            f"metrics={list(self._metrics)}"
        )
        try:
            self.logger.debug(message)
        except Exception as e:
            # A broken injected logger must not fail construction
            _logger.debug(f"{message} (agent logger failed: {type(e).__name__}: {e})")

    @property
    def name(self) -> TAgentId:
        return self._name

    @property
    def config(self) -> AgentConfig[TAgentId, TTools, TMetrics]:
        return self._config

    @property
    def instructions(self) -> str:
        return self._config.instructions

    @property
    def model(self) -> Optional[str]:
        return self._config.model

    @property
    def options(self) -> Mapping[str, Any]:
        return self._options

    @property
    def tools(self) -> ToolSet:
        return self._tools

    @property
    def metrics(self) -> Mapping[str, Metric]:
        return self._metrics

    def set_logger(self, logger: logging.Logger) -> None:
        """Replace the agent's logger."""
        self.logger = logger

    def get_tools(self) -> ToolSet:
        """Get the agent's tool set."""
        return self._tools

    def get_tool(self, name: str) -> Optional[ToolAction]:
        """Get tool by name, or None if the agent has no such tool."""
        return self._tools.get_tool(name)

    def get_metrics(self) -> Mapping[str, Metric]:
        """Get the agent's metric set."""
        return self._metrics

    def get_tool_definitions(self) -> List[Dict[str, Any]]:
        """Get definitions of all tools (for LLM tool calling)."""
        return self._tools.get_definitions()

    def execute_tool(self, name: str, **kwargs) -> ToolResult:
        """
        Execute one of the agent's tools.

        Args:
            name: Tool name (key in the tool set)
            **kwargs: Tool input parameters

        Returns:
            ToolResult (unsuccessful for unknown tools or failed calls)
        """
        result = self._tools.execute_tool(name, **kwargs)
        if not result.success:
            self.logger.warning(f"Agent {self._name} tool '{name}' failed: {result.error}")
        return result

    def evaluate(self, input: str, output: str) -> Dict[str, MetricResult]:
        """
        Score an output with every metric of the agent.

        A metric that raises is logged and left out of the results.

        Args:
            input: Input given to the agent
            output: Output the agent produced

        Returns:
            Dict mapping metric name to MetricResult
        """
        results: Dict[str, MetricResult] = {}
        for metric_name, metric in self._metrics.items():
            try:
                results[metric_name] = metric.measure(input, output)
            except Exception as e:
                self.logger.error(
                    f"Agent {self._name} metric '{metric_name}' failed: {type(e).__name__}: {e}",
                    exc_info=True,
                )
        return results

    def get_stats(self) -> Dict[str, Any]:
        """Get agent statistics."""
        return {
            "name": self._name,
            "tool_count": len(self._tools),
            "metric_count": len(self._metrics),
            "tools": self._tools.get_stats(),
        }

    def __repr__(self) -> str:
        return (
            f"Agent(name={self._name!r}, tools={sorted(self._tools)}, "
            f"metrics={sorted(self._metrics)})"
        )


def construct(
    config: AgentConfig[TAgentId, TTools, TMetrics],
    logger: Optional[logging.Logger] = None,
) -> Agent[TAgentId, TTools, TMetrics]:
    """
    Construct an agent from its configuration.

    Args:
        config: Agent configuration
        logger: Logger for the agent (default: ``agent.<name>``)

    Returns:
        Agent instance
    """
    return Agent(config, logger=logger)
