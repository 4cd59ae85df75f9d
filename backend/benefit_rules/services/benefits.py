"""Benefit calculations backed by the default rule engine."""

from benefit_rules.core.enums import RuleType
from benefit_rules.services.rule_engine.engine import RecordInput, RuleEngine

# Built-in thresholds only; Settings and the environment are not consulted.
_engine = RuleEngine()


def employee_rate(record: RecordInput) -> float:
    """Return 1.0 for employees on vacation with seniority above 10, else 0.5."""
    return float(_engine.evaluate(record, RuleType.EMPLOYEE_RATE).amount)


def disability_amount(record: RecordInput) -> float:
    """Return 0.0 for junior, long-term disabled or part-time employees, else 1.0."""
    return float(_engine.evaluate(record, RuleType.DISABILITY_AMOUNT).amount)
