"""
Unit tests for the employee_rate and disability_amount calculations.
"""

import os
import subprocess
import sys
from pathlib import Path

import pytest

from benefit_rules import EmployeeRecord, disability_amount, employee_rate

BACKEND_DIR = Path(__file__).resolve().parents[1]

SENIORITIES = [None, 0, 1, 2, 10, 11, 40]
MONTHS_DISABLED = [None, 0, 12, 13, 60]
PART_TIME_FLAGS = [None, False, True]


def _record(**fields):
    """Build a camelCase input mapping, leaving out fields that are None."""
    return {key: value for key, value in fields.items() if value is not None}


class TestEmployeeRate:
    """Test cases for employee_rate."""

    def test_on_vacation_with_seniority_above_ten(self):
        """Senior employees on vacation get the full rate."""
        assert employee_rate({"onVacation": True, "seniority": 11}) == 1

    def test_on_vacation_with_seniority_of_ten(self):
        """Seniority must be strictly greater than ten."""
        assert employee_rate({"onVacation": True, "seniority": 10}) == 0.5

    def test_not_on_vacation(self):
        """Employees not on vacation get the reduced rate."""
        assert employee_rate({"onVacation": False, "seniority": 11}) == 0.5

    @pytest.mark.parametrize("seniority", [11, 12, 25, 40])
    def test_on_vacation_above_ten_gets_full_rate(self, seniority):
        assert employee_rate({"onVacation": True, "seniority": seniority}) == 1.0

    @pytest.mark.parametrize("seniority", [None, 0, 5, 11, 40])
    def test_not_on_vacation_regardless_of_seniority(self, seniority):
        record = _record(onVacation=False, seniority=seniority)

        assert employee_rate(record) == 0.5

    @pytest.mark.parametrize("seniority", [0, 1, 9, 10])
    def test_on_vacation_at_or_below_ten_gets_reduced_rate(self, seniority):
        assert employee_rate({"onVacation": True, "seniority": seniority}) == 0.5

    def test_missing_seniority_gets_reduced_rate(self):
        """An undefined seniority never exceeds the threshold."""
        assert employee_rate({"onVacation": True}) == 0.5

    def test_missing_vacation_flag_gets_reduced_rate(self):
        assert employee_rate({"seniority": 20}) == 0.5

    def test_accepts_employee_record(self):
        record = EmployeeRecord(on_vacation=True, seniority=12)

        assert employee_rate(record) == 1.0

    def test_returns_float(self):
        rate = employee_rate({"onVacation": True, "seniority": 11})

        assert isinstance(rate, float)
        assert rate * 0.8 == pytest.approx(0.8)


class TestDisabilityAmount:
    """Test cases for disability_amount."""

    def test_seniority_below_two(self):
        assert disability_amount({"seniority": 1}) == 0

    def test_months_disabled_above_twelve(self):
        assert disability_amount({"seniority": 2, "monthsDisabled": 13}) == 0

    def test_part_time(self):
        assert (
            disability_amount({"seniority": 2, "monthsDisabled": 12, "isPartTime": True})
            == 0
        )

    def test_all_conditions_met(self):
        assert (
            disability_amount({"seniority": 2, "monthsDisabled": 12, "isPartTime": False})
            == 1
        )

    @pytest.mark.parametrize("seniority", [0, 1])
    @pytest.mark.parametrize("months_disabled", MONTHS_DISABLED)
    @pytest.mark.parametrize("is_part_time", PART_TIME_FLAGS)
    def test_seniority_below_two_always_disqualifies(
        self, seniority, months_disabled, is_part_time
    ):
        record = _record(
            seniority=seniority, monthsDisabled=months_disabled, isPartTime=is_part_time
        )

        assert disability_amount(record) == 0

    @pytest.mark.parametrize("months_disabled", [13, 24, 60])
    @pytest.mark.parametrize("seniority", SENIORITIES)
    @pytest.mark.parametrize("is_part_time", PART_TIME_FLAGS)
    def test_months_disabled_above_twelve_always_disqualifies(
        self, months_disabled, seniority, is_part_time
    ):
        record = _record(
            seniority=seniority, monthsDisabled=months_disabled, isPartTime=is_part_time
        )

        assert disability_amount(record) == 0

    @pytest.mark.parametrize("seniority", SENIORITIES)
    @pytest.mark.parametrize("months_disabled", MONTHS_DISABLED)
    def test_part_time_always_disqualifies(self, seniority, months_disabled):
        record = _record(seniority=seniority, monthsDisabled=months_disabled, isPartTime=True)

        assert disability_amount(record) == 0

    @pytest.mark.parametrize("seniority", [2, 3, 10, 40])
    @pytest.mark.parametrize("months_disabled", [0, 1, 12])
    def test_all_conditions_met_pays_full_amount(self, seniority, months_disabled):
        record = {
            "seniority": seniority,
            "monthsDisabled": months_disabled,
            "isPartTime": False,
        }

        assert disability_amount(record) == 1

    def test_months_disabled_without_seniority(self):
        assert disability_amount({"monthsDisabled": 13}) == 0

    def test_part_time_with_high_seniority(self):
        assert disability_amount({"seniority": 30, "monthsDisabled": 0, "isPartTime": True}) == 0

    def test_empty_record_is_eligible(self):
        """Undefined fields make every disqualifying comparison false."""
        assert disability_amount({}) == 1

    def test_snake_case_keys(self):
        assert disability_amount({"seniority": 5, "months_disabled": 14}) == 0

    def test_returns_float(self):
        amount = disability_amount({"seniority": 2})

        assert isinstance(amount, float)
        assert amount * 0.5 == pytest.approx(0.5)

    def test_input_mapping_not_mutated(self):
        record = {"seniority": 2, "monthsDisabled": 12, "isPartTime": False}
        snapshot = dict(record)

        disability_amount(record)
        employee_rate(record)

        assert record == snapshot


class TestEnvironmentIsolation:
    """The package-level functions ignore settings from the environment."""

    SCRIPT = (
        "from benefit_rules import disability_amount, employee_rate\n"
        "print(employee_rate({'onVacation': True, 'seniority': 11}), "
        "disability_amount({}))\n"
    )

    def _run(self, tmp_path, **overrides):
        env = dict(os.environ)
        env.update(overrides)
        env["PYTHONPATH"] = os.pathsep.join(
            filter(None, [str(BACKEND_DIR), env.get("PYTHONPATH")])
        )
        (tmp_path / ".env").write_text("FULL_RATE=5\nBENEFIT_RULES_FULL_RATE=5\n")

        return subprocess.run(
            [sys.executable, "-c", self.SCRIPT],
            cwd=tmp_path,
            env=env,
            capture_output=True,
            text=True,
        )

    @pytest.mark.parametrize(
        "overrides",
        [
            {"FULL_RATE": "3", "DISABILITY_AMOUNT": "9"},
            {"BENEFIT_RULES_FULL_RATE": "3", "BENEFIT_RULES_DISABILITY_AMOUNT": "9"},
            {"FULL_RATE": "high", "BENEFIT_RULES_FULL_RATE": "high"},
        ],
    )
    def test_environment_does_not_change_results(self, tmp_path, overrides):
        completed = self._run(tmp_path, **overrides)

        assert completed.returncode == 0, completed.stderr
        assert completed.stdout.split() == ["1.0", "1.0"]
