"""
Text-overlap metrics.

- ExactMatchMetric: output equals any reference after normalization
- TokenF1Metric: token-level F1 against the best matching reference
- KeywordCoverageMetric: share of input keywords found in the output

Normalization lowercases, strips punctuation and collapses whitespace, so
"Hello, World!" and "hello world" compare equal.
"""

import re
from typing import Dict, List, Optional, Sequence, Set

from .metric import Metric, MetricResult

# Words ignored by KeywordCoverageMetric
STOP_WORDS = frozenset(
    {
        "a", "an", "and", "are", "as", "at", "be", "by", "for", "from", "has",
        "in", "is", "it", "of", "on", "or", "that", "the", "to", "was", "were",
        "what", "which", "who", "with",
    }
)


def normalize_text(text: str) -> str:
    """
    Normalize text for comparison.

    Example:
        >>> normalize_text("Hello, World!  ")
        'hello world'
    """
    text = text.lower()
    text = re.sub(r"[^\w\s]", " ", text)
    text = re.sub(r"\s+", " ", text)
    return text.strip()


def tokenize(text: str) -> Set[str]:
    """
    Tokenize text into set of words.

    Example:
        >>> tokenize("Hello, World!")
        {'hello', 'world'}
    """
    normalized = normalize_text(text)
    if not normalized:
        return set()
    return set(normalized.split())


def _calculate_token_metrics(predicted: str, references: Sequence[str]) -> Dict[str, float]:
    """
    Calculate precision, recall and F1 for the best matching reference.

    Example:
        >>> _calculate_token_metrics("hello world", ["hello world"])
        {'precision': 1.0, 'recall': 1.0, 'f1_score': 1.0}
    """
    pred_tokens = tokenize(predicted)
    best_metrics = {"precision": 0.0, "recall": 0.0, "f1_score": 0.0}

    if not pred_tokens:
        return best_metrics

    for ref in references:
        ref_tokens = tokenize(ref)
        if not ref_tokens:
            continue

        common_tokens = pred_tokens & ref_tokens
        if not common_tokens:
            continue

        precision = len(common_tokens) / len(pred_tokens)
        recall = len(common_tokens) / len(ref_tokens)
        f1 = 2 * (precision * recall) / (precision + recall)

        if f1 > best_metrics["f1_score"]:
            best_metrics = {"precision": precision, "recall": recall, "f1_score": f1}

    return best_metrics


class _ReferenceMetric(Metric):
    """Metric comparing the output against fixed reference answers."""

    def __init__(self, references: Sequence[str]):
        if isinstance(references, str):
            references = [references]
        self.references: List[str] = list(references)
        if not self.references:
            raise ValueError(f"{type(self).__name__} needs at least one reference")


class ExactMatchMetric(_ReferenceMetric):
    """1.0 if the output matches any reference (case/punctuation-insensitive), else 0.0."""

    name = "exact_match"

    def measure(self, input: str, output: str) -> MetricResult:
        pred_norm = normalize_text(output)
        for ref in self.references:
            if pred_norm == normalize_text(ref):
                return MetricResult(score=1.0, info={"matched_reference": ref})
        return MetricResult(score=0.0, info={"matched_reference": None})


class TokenF1Metric(_ReferenceMetric):
    """
    Token-level F1 score.

    F1 = 2 * (precision * recall) / (precision + recall), maximized over references.
    """

    name = "f1_score"

    def measure(self, input: str, output: str) -> MetricResult:
        token_metrics = _calculate_token_metrics(output, self.references)
        return MetricResult(
            score=token_metrics["f1_score"],
            info={
                "precision": token_metrics["precision"],
                "recall": token_metrics["recall"],
            },
        )


class KeywordCoverageMetric(Metric):
    """Fraction of the input's keywords (stop words removed) present in the output."""

    name = "keyword_coverage"

    def __init__(self, stop_words: Optional[Set[str]] = None):
        self.stop_words = frozenset(stop_words) if stop_words is not None else STOP_WORDS

    def measure(self, input: str, output: str) -> MetricResult:
        keywords = tokenize(input) - self.stop_words
        if not keywords:
            # Nothing to cover
            return MetricResult(score=1.0, info={"total_keywords": 0, "matched_keywords": 0})

        matched = keywords & tokenize(output)
        return MetricResult(
            score=len(matched) / len(keywords),
            info={
                "total_keywords": len(keywords),
                "matched_keywords": len(matched),
                "missing_keywords": sorted(keywords - matched),
            },
        )
