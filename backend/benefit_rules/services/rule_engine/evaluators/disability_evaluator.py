"""Disability amount evaluator."""

import logging
from decimal import Decimal
from typing import Callable, Dict, Optional

from benefit_rules.core import constants
from benefit_rules.core.enums import DisqualificationReason, RuleType
from benefit_rules.models.schemas.employee import EmployeeRecord
from benefit_rules.services.rule_engine.base import (
    EvaluationContext,
    EvaluationResult,
    RuleEvaluator,
    greater_than,
    less_than,
)

logger = logging.getLogger(__name__)

Check = Callable[[EmployeeRecord, int, int], bool]

# Evaluation order is insertion order.
DISQUALIFYING_CHECKS: Dict[DisqualificationReason, Check] = {
    DisqualificationReason.LOW_SENIORITY: lambda record, min_seniority, _: less_than(
        record.seniority, min_seniority
    ),
    DisqualificationReason.LONG_TERM_DISABILITY: lambda record, _, max_months: greater_than(
        record.months_disabled, max_months
    ),
    DisqualificationReason.PART_TIME: lambda record, _, __: bool(record.is_part_time),
}


def is_not_eligible_for_disability(
    record: EmployeeRecord, min_seniority: int, max_months_disabled: int
) -> bool:
    """
    Combined disqualification predicate for disability pay.

    The checks are OR-ed left to right and evaluation stops at the first
    one that holds.

    Args:
        record: Employee record
        min_seniority: Seniority below this disqualifies
        max_months_disabled: Months disabled above this disqualifies

    Returns:
        True if any disqualifying condition holds
    """
    return any(
        check(record, min_seniority, max_months_disabled)
        for check in DISQUALIFYING_CHECKS.values()
    )


def first_disqualification(
    record: EmployeeRecord, min_seniority: int, max_months_disabled: int
) -> Optional[DisqualificationReason]:
    """Return the first condition, left to right, that disqualifies the record."""
    return next(
        (
            reason
            for reason, check in DISQUALIFYING_CHECKS.items()
            if check(record, min_seniority, max_months_disabled)
        ),
        None,
    )


class DisabilityEvaluator(RuleEvaluator):
    """
    Evaluator for the DISABILITY_AMOUNT rule.

    Disqualifies when seniority is below the minimum, OR months disabled
    exceed the maximum, OR the employee is part-time. Undefined fields never
    disqualify on their own.
    """

    def evaluate(self, context: EvaluationContext) -> EvaluationResult:
        """
        Evaluate disability eligibility.

        Criteria format: {"min_seniority": 2, "max_months_disabled": 12, "amount": 1}

        Args:
            context: EvaluationContext

        Returns:
            EvaluationResult with amount 0 when disqualified
        """
        self._check_rule_type(context, RuleType.DISABILITY_AMOUNT)

        record = context.record
        criteria = context.rule.criteria

        min_seniority = self._extract_criteria_value(criteria, "min_seniority")
        max_months = self._extract_criteria_value(criteria, "max_months_disabled")
        full_amount = Decimal(
            str(
                self._extract_criteria_value(
                    criteria, "amount", default=constants.DISABILITY_AMOUNT, required=False
                )
            )
        )

        evidence = {
            "seniority": record.seniority,
            "required_min_seniority": min_seniority,
            "months_disabled": record.months_disabled,
            "allowed_max_months_disabled": max_months,
            "is_part_time": record.is_part_time,
        }

        if is_not_eligible_for_disability(record, min_seniority, max_months):
            disqualification = first_disqualification(record, min_seniority, max_months)
            reason = self._describe(disqualification, record, min_seniority, max_months)
            logger.debug(f"Disability amount 0: {reason}")
            return EvaluationResult(
                rule_type=RuleType.DISABILITY_AMOUNT,
                eligible=False,
                amount=constants.NO_DISABILITY_AMOUNT,
                reason=reason,
                evidence={**evidence, "disqualified_by": disqualification.value},
            )

        logger.debug(f"Disability amount {full_amount}: all conditions met")
        return EvaluationResult(
            rule_type=RuleType.DISABILITY_AMOUNT,
            eligible=True,
            amount=full_amount,
            reason="Eligible for disability amount",
            evidence={**evidence, "disqualified_by": None},
        )

    @staticmethod
    def _describe(
        disqualification: DisqualificationReason,
        record: EmployeeRecord,
        min_seniority: int,
        max_months: int,
    ) -> str:
        if disqualification == DisqualificationReason.LOW_SENIORITY:
            return f"Seniority {record.seniority} is below minimum of {min_seniority}"
        if disqualification == DisqualificationReason.LONG_TERM_DISABILITY:
            return (
                f"Disabled for {record.months_disabled} months "
                f"(maximum: {max_months})"
            )
        return "Part-time employees are not eligible"
