"""Employee rate evaluator."""

import logging
from decimal import Decimal

from benefit_rules.core import constants
from benefit_rules.core.enums import RuleType
from benefit_rules.services.rule_engine.base import (
    EvaluationContext,
    EvaluationResult,
    RuleEvaluator,
    greater_than,
)

logger = logging.getLogger(__name__)


class EmployeeRateEvaluator(RuleEvaluator):
    """
    Evaluator for the EMPLOYEE_RATE rule.

    An employee gets the full rate only when on vacation AND their seniority
    is strictly greater than the threshold. Everyone else gets the reduced
    rate.
    """

    def evaluate(self, context: EvaluationContext) -> EvaluationResult:
        self._check_rule_type(context, RuleType.EMPLOYEE_RATE)

        record = context.record
        criteria = context.rule.criteria

        min_seniority = self._extract_criteria_value(criteria, "min_seniority")
        full_rate = Decimal(
            str(
                self._extract_criteria_value(
                    criteria, "full_rate", default=constants.FULL_RATE, required=False
                )
            )
        )
        reduced_rate = Decimal(
            str(
                self._extract_criteria_value(
                    criteria,
                    "reduced_rate",
                    default=constants.REDUCED_RATE,
                    required=False,
                )
            )
        )

        eligible = bool(record.on_vacation) and greater_than(
            record.seniority, min_seniority
        )

        if eligible:
            amount = full_rate
            reason = (
                f"On vacation with seniority {record.seniority} "
                f"(requirement: more than {min_seniority})"
            )
        else:
            amount = reduced_rate
            if not record.on_vacation:
                reason = "Not on vacation"
            else:
                reason = (
                    f"Seniority {record.seniority} does not exceed {min_seniority}"
                )

        logger.debug(f"Employee rate {amount}: {reason}")

        return EvaluationResult(
            rule_type=RuleType.EMPLOYEE_RATE,
            eligible=eligible,
            amount=amount,
            reason=reason,
            evidence={
                "on_vacation": record.on_vacation,
                "seniority": record.seniority,
                "required_seniority_above": min_seniority,
            },
        )
