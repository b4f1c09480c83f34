"""
Agent Configuration

Shape a caller supplies to construct an agent: identity, tool set, metric set
and opaque options passed through to the agent.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Generic, Mapping, Optional, TypeVar

from ..eval.metric import Metric
from ..tools.base import ToolAction
from ..utils.errors import ConfigurationError

TAgentId = TypeVar("TAgentId", bound=str)
TTools = TypeVar("TTools", bound=Mapping[str, ToolAction])
TMetrics = TypeVar("TMetrics", bound=Mapping[str, Metric])

_KNOWN_KEYS = ("name", "tools", "metrics", "instructions", "model")


@dataclass
class AgentConfig(Generic[TAgentId, TTools, TMetrics]):
    """
    Per-agent configuration.

    Creating a config performs no validation; validate() is run once when the
    agent is constructed.
    """

    name: TAgentId                  # Agent identifier (e.g., 'researcher')
    tools: TTools = field(default_factory=dict)      # Tool name -> ToolAction
    metrics: TMetrics = field(default_factory=dict)  # Metric name -> Metric
    instructions: str = ""          # System instructions for the agent
    model: Optional[str] = None     # Model identifier, opaque here
    options: Dict[str, Any] = field(default_factory=dict)  # Pass-through options

    def validate(self) -> None:
        """Validate agent configuration shape."""
        if not isinstance(self.name, str) or not self.name:
            raise ConfigurationError(f"Agent name must be a non-empty string, got {self.name!r}")

        _validate_named_mapping(self.name, "tools", self.tools, ToolAction)
        _validate_named_mapping(self.name, "metrics", self.metrics, Metric)

        if not isinstance(self.instructions, str):
            raise ConfigurationError(f"Agent {self.name} instructions must be a string")
        if self.model is not None and not isinstance(self.model, str):
            raise ConfigurationError(f"Agent {self.name} model must be a string or None")
        if not isinstance(self.options, Mapping):
            raise ConfigurationError(f"Agent {self.name} options must be a mapping")

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "AgentConfig":
        """
        Build config from a plain dict.

        Keys other than name/tools/metrics/instructions/model are collected
        into ``options``.

        Raises:
            ConfigurationError: If ``name`` is missing
        """
        if "name" not in data:
            raise ConfigurationError("Agent config requires 'name'")

        options = dict(data.get("options") or {})
        options.update({k: v for k, v in data.items() if k not in _KNOWN_KEYS and k != "options"})

        return cls(
            name=data["name"],
            tools=data.get("tools") or {},
            metrics=data.get("metrics") or {},
            instructions=data.get("instructions", ""),
            model=data.get("model"),
            options=options,
        )


def _validate_named_mapping(agent_name: str, field_name: str, value: Any, item_type: type) -> None:
    if not isinstance(value, Mapping):
        raise ConfigurationError(
            f"Agent {agent_name} {field_name} must be a mapping, got {type(value).__name__}"
        )
    for key, item in value.items():
        if not isinstance(key, str) or not key:
            raise ConfigurationError(
                f"Agent {agent_name} {field_name} keys must be non-empty strings, got {key!r}"
            )
        if not isinstance(item, item_type):
            raise ConfigurationError(
                f"Agent {agent_name} {field_name}['{key}'] must be a {item_type.__name__}, "
                f"got {type(item).__name__}"
            )
