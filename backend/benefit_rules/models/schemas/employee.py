"""Pydantic schemas for employee records."""

from typing import Any, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class EmployeeRecord(BaseModel):
    """
    Immutable snapshot of the employee attributes the benefit rules read.

    Every field is optional. An absent field is kept as None and the
    evaluators treat it as undefined: numeric comparisons against it are
    false and boolean checks are falsy. Values that are present are still
    type-checked, so a negative or non-numeric seniority is rejected.

    Attributes:
        on_vacation: Whether the employee is on a qualifying leave
        seniority: Tenure metric, such as years of service
        months_disabled: Months under a disability condition
        is_part_time: Employment fraction flag
    """

    on_vacation: Optional[bool] = Field(None, alias="onVacation")
    seniority: Optional[int] = Field(None, ge=0)
    months_disabled: Optional[int] = Field(None, ge=0, alias="monthsDisabled")
    is_part_time: Optional[bool] = Field(None, alias="isPartTime")

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        extra="ignore",
    )

    @classmethod
    def coerce(
        cls, record: Union["EmployeeRecord", Mapping[str, Any]]
    ) -> "EmployeeRecord":
        """
        Return the record itself, or validate a mapping into a new record.

        Args:
            record: An EmployeeRecord or a mapping with camelCase or snake_case keys

        Returns:
            EmployeeRecord instance

        Raises:
            pydantic.ValidationError: If a present field has an invalid value
        """
        if isinstance(record, cls):
            return record
        return cls.model_validate(dict(record))
