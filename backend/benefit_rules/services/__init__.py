"""Service layer for benefit calculations."""

from benefit_rules.services.benefits import disability_amount, employee_rate

__all__ = ["disability_amount", "employee_rate"]
