"""Domain models for the benefit rules."""

from benefit_rules.models.domain.policy import PolicyRule, build_default_policy

__all__ = ["PolicyRule", "build_default_policy"]
