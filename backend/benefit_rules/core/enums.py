"""Core enums for type safety across the package."""

from enum import Enum


class RuleType(str, Enum):
    """Benefit rule types."""

    EMPLOYEE_RATE = "employee_rate"
    DISABILITY_AMOUNT = "disability_amount"


class DisqualificationReason(str, Enum):
    """Conditions that disqualify an employee from disability pay, in evaluation order."""

    LOW_SENIORITY = "low_seniority"
    LONG_TERM_DISABILITY = "long_term_disability"
    PART_TIME = "part_time"
