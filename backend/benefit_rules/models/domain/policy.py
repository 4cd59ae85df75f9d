"""Benefit policy domain model."""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from benefit_rules.config import Settings
from benefit_rules.core.enums import RuleType


@dataclass(frozen=True)
class PolicyRule:
    """
    A single benefit rule and the thresholds it is evaluated with.

    Criteria format by rule type:
        EMPLOYEE_RATE: {"min_seniority": 10, "full_rate": 1, "reduced_rate": 0.5}
        DISABILITY_AMOUNT: {"min_seniority": 2, "max_months_disabled": 12, "amount": 1}
    """

    rule_type: RuleType
    name: str
    criteria: Dict[str, Any] = field(default_factory=dict)
    description: Optional[str] = None


def build_default_policy(settings: Optional[Settings] = None) -> List[PolicyRule]:
    """
    Build the ordered list of benefit rules from settings.

    Args:
        settings: Settings to read thresholds from (defaults to the built-in
            thresholds; the environment is not consulted)

    Returns:
        Policy rules in evaluation order
    """
    if settings is None:
        settings = Settings.model_construct()

    return [
        PolicyRule(
            rule_type=RuleType.EMPLOYEE_RATE,
            name="Employee Rate",
            criteria={
                "min_seniority": settings.VACATION_RATE_MIN_SENIORITY,
                "full_rate": settings.FULL_RATE,
                "reduced_rate": settings.REDUCED_RATE,
            },
            description="Full rate for senior employees on vacation",
        ),
        PolicyRule(
            rule_type=RuleType.DISABILITY_AMOUNT,
            name="Disability Amount",
            criteria={
                "min_seniority": settings.DISABILITY_MIN_SENIORITY,
                "max_months_disabled": settings.DISABILITY_MAX_MONTHS,
                "amount": settings.DISABILITY_AMOUNT,
            },
            description="Disability pay unless junior, long-term disabled or part-time",
        ),
    ]
