"""
Metric abstraction.

A Metric describes how an agent outcome is scored: given the input the agent
received and the output it produced, measure() returns a score in [0, 1].
"""

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Dict


@dataclass
class MetricResult:
    """Score of one measurement plus metric-specific details."""

    score: float
    info: Dict[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        if not isinstance(self.score, (int, float)) or not math.isfinite(self.score):
            raise ValueError(f"Metric score must be a finite number, got {self.score!r}")
        if not 0.0 <= self.score <= 1.0:
            raise ValueError(f"Metric score must be in [0, 1], got {self.score}")

    def to_dict(self) -> Dict[str, Any]:
        """Serialize for JSON export."""
        return {"score": round(self.score, 4), "info": self.info}


class Metric(ABC):
    """Base class for all metrics."""

    name: str = "metric"

    @abstractmethod
    def measure(self, input: str, output: str) -> MetricResult:
        """
        Score an agent output.

        Args:
            input: Input given to the agent
            output: Output the agent produced

        Returns:
            MetricResult with score in [0, 1]
        """
        pass

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r})"
