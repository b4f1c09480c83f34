"""
Agent evaluation: Metric contract and text-overlap metrics.
"""

from .metric import Metric, MetricResult
from .metrics import ExactMatchMetric, KeywordCoverageMetric, TokenF1Metric

__all__ = [
    "Metric",
    "MetricResult",
    "ExactMatchMetric",
    "KeywordCoverageMetric",
    "TokenF1Metric",
]
