"""Pydantic schemas for rule inputs."""

from benefit_rules.models.schemas.employee import EmployeeRecord

__all__ = ["EmployeeRecord"]
