"""Default rule thresholds and outcomes."""

from decimal import Decimal

# Employee rate rule
VACATION_RATE_MIN_SENIORITY = 10
FULL_RATE = Decimal("1")
REDUCED_RATE = Decimal("0.5")

# Disability amount rule
DISABILITY_MIN_SENIORITY = 2
DISABILITY_MAX_MONTHS = 12
DISABILITY_AMOUNT = Decimal("1")
NO_DISABILITY_AMOUNT = Decimal("0")
