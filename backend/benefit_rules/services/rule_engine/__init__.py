"""Rule engine for evaluating employee records against benefit rules."""

from .base import EvaluationContext, EvaluationResult, RuleEvaluator
from .engine import RuleEngine

__all__ = [
    "EvaluationContext",
    "EvaluationResult",
    "RuleEngine",
    "RuleEvaluator",
]
