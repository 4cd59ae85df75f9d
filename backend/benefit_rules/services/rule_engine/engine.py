"""Rule engine orchestrator for coordinating benefit rule evaluations."""

import logging
from typing import Any, Dict, List, Mapping, Optional, Union

from benefit_rules.core.enums import RuleType
from benefit_rules.models.domain.policy import PolicyRule, build_default_policy
from benefit_rules.models.schemas.employee import EmployeeRecord
from benefit_rules.services.rule_engine.base import (
    EvaluationContext,
    EvaluationResult,
    RuleEvaluator,
)
from benefit_rules.services.rule_engine.evaluators import (
    DisabilityEvaluator,
    EmployeeRateEvaluator,
)

logger = logging.getLogger(__name__)

RecordInput = Union[EmployeeRecord, Mapping[str, Any]]


class RuleEngine:
    """
    Rule engine orchestrator for coordinating benefit rule evaluations.

    This class:
    - Maintains a registry of rule evaluators
    - Holds the policy rules, one per rule type, in evaluation order
    - Builds evaluation contexts and dispatches to evaluators
    """

    def __init__(self, rules: Optional[List[PolicyRule]] = None):
        """
        Initialize the rule engine with evaluator registry and policy.

        Args:
            rules: Policy rules to evaluate (defaults to build_default_policy())
        """
        self._evaluators: Dict[RuleType, RuleEvaluator] = {}
        self._rules: Dict[RuleType, PolicyRule] = {}
        self._register_default_evaluators()

        for rule in rules if rules is not None else build_default_policy():
            self.set_rule(rule)

    def _register_default_evaluators(self):
        """Register default evaluators for all rule types."""
        self._evaluators[RuleType.EMPLOYEE_RATE] = EmployeeRateEvaluator()
        self._evaluators[RuleType.DISABILITY_AMOUNT] = DisabilityEvaluator()

    def register_evaluator(
        self, rule_type: RuleType, evaluator: RuleEvaluator
    ) -> None:
        """
        Register a custom evaluator for a specific rule type.

        Args:
            rule_type: The rule type to handle
            evaluator: The evaluator instance
        """
        logger.debug(f"Registering {type(evaluator).__name__} for {rule_type.value}")
        self._evaluators[rule_type] = evaluator

    def set_rule(self, rule: PolicyRule) -> None:
        """Add or replace the policy rule for its rule type."""
        self._rules[rule.rule_type] = rule

    @property
    def rules(self) -> List[PolicyRule]:
        """Policy rules in evaluation order."""
        return list(self._rules.values())

    def evaluate(self, record: RecordInput, rule_type: RuleType) -> EvaluationResult:
        """
        Evaluate a single rule against an employee record.

        Args:
            record: EmployeeRecord or mapping of employee attributes
            rule_type: The rule to evaluate

        Returns:
            EvaluationResult for the rule

        Raises:
            ValueError: If no rule or evaluator is registered for the rule type
            pydantic.ValidationError: If the record has invalid values
        """
        rule = self._rules.get(rule_type)
        evaluator = self._evaluators.get(rule_type)

        if rule is None or evaluator is None:
            logger.warning(f"No rule or evaluator registered for {rule_type}")
            raise ValueError(f"No evaluator registered for rule type: {rule_type}")

        context = EvaluationContext(record=EmployeeRecord.coerce(record), rule=rule)
        return evaluator.evaluate(context)

    def evaluate_all(self, record: RecordInput) -> Dict[RuleType, EvaluationResult]:
        """
        Evaluate every policy rule against an employee record.

        Args:
            record: EmployeeRecord or mapping of employee attributes

        Returns:
            Results keyed by rule type, in policy order
        """
        employee = EmployeeRecord.coerce(record)
        results: Dict[RuleType, EvaluationResult] = {}

        for rule in self.rules:
            results[rule.rule_type] = self.evaluate(employee, rule.rule_type)

        return results
