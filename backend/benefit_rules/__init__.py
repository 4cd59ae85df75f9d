"""Benefit rules: employee rate and disability amount evaluation."""

from benefit_rules.core.enums import RuleType
from benefit_rules.models.schemas.employee import EmployeeRecord
from benefit_rules.services.benefits import disability_amount, employee_rate
from benefit_rules.services.rule_engine import RuleEngine

__all__ = [
    "EmployeeRecord",
    "RuleEngine",
    "RuleType",
    "disability_amount",
    "employee_rate",
]
