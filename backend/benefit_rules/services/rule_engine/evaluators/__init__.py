"""Rule evaluators for the benefit rule types."""

from .disability_evaluator import (
    DISQUALIFYING_CHECKS,
    DisabilityEvaluator,
    first_disqualification,
    is_not_eligible_for_disability,
)
from .rate_evaluator import EmployeeRateEvaluator

__all__ = [
    "DISQUALIFYING_CHECKS",
    "DisabilityEvaluator",
    "EmployeeRateEvaluator",
    "first_disqualification",
    "is_not_eligible_for_disability",
]
