"""Rule engine foundation with evaluation context, results, and base evaluator."""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any, Optional

from benefit_rules.core.enums import RuleType
from benefit_rules.models.domain.policy import PolicyRule
from benefit_rules.models.schemas.employee import EmployeeRecord


@dataclass(frozen=True)
class EvaluationContext:
    """
    Evaluation context passed to rule evaluators.

    Attributes:
        record: The employee record being evaluated
        rule: The policy rule being evaluated
    """

    record: EmployeeRecord
    rule: PolicyRule


@dataclass
class EvaluationResult:
    """
    Result of evaluating a single rule against an employee record.

    Attributes:
        rule_type: Type of the rule that produced this result
        eligible: Whether the record qualified for the benefit
        amount: Numeric outcome of the rule (rate or amount)
        reason: Human-readable explanation of the result
        evidence: Structured data showing actual vs. required values
    """

    rule_type: RuleType
    eligible: bool
    amount: Decimal
    reason: Optional[str] = None
    evidence: dict = field(default_factory=dict)

    def __post_init__(self):
        """Ensure amount is a Decimal."""
        if not isinstance(self.amount, Decimal):
            self.amount = Decimal(str(self.amount))


def greater_than(actual: Optional[int], threshold: int) -> bool:
    """Compare actual > threshold, where an undefined actual is never greater."""
    return actual is not None and actual > threshold


def less_than(actual: Optional[int], threshold: int) -> bool:
    """Compare actual < threshold, where an undefined actual is never less."""
    return actual is not None and actual < threshold


class RuleEvaluator(ABC):
    """
    Abstract base class for rule evaluators using the Strategy pattern.

    Each concrete evaluator implements the eligibility predicates for one
    rule type and maps the outcome to a numeric result.
    """

    @abstractmethod
    def evaluate(self, context: EvaluationContext) -> EvaluationResult:
        """
        Evaluate a rule against the provided context.

        Args:
            context: EvaluationContext with the record and rule

        Returns:
            EvaluationResult with eligibility, amount, reason, and evidence

        Raises:
            ValueError: If the rule type is not handled or criteria are missing
        """
        pass

    def _check_rule_type(self, context: EvaluationContext, expected: RuleType) -> None:
        if context.rule.rule_type != expected:
            raise ValueError(
                f"{type(self).__name__} cannot handle rule type: "
                f"{context.rule.rule_type.value}"
            )

    def _extract_criteria_value(
        self,
        criteria: dict,
        key: str,
        default: Optional[Any] = None,
        required: bool = True,
    ) -> Any:
        """
        Safely extract a value from rule criteria with validation.

        Args:
            criteria: The rule's criteria dictionary
            key: The key to extract
            default: Default value if key not found (only used if not required)
            required: Whether this field is required

        Returns:
            The extracted value

        Raises:
            ValueError: If required field is missing
        """
        if key not in criteria:
            if required:
                raise ValueError(f"Required criteria field '{key}' is missing")
            return default

        return criteria[key]
