"""Retirement projection: compound growth of a balance plus monthly contributions."""

from __future__ import annotations

import logging
import math
from typing import Tuple

logger = logging.getLogger(__name__)


def compute_investment(
    current_age: int,
    retirement_age: int,
    current_balance: float,
    monthly_contribution: float,
    annual_return_percent: float,
) -> Tuple[float, float, float]:
    """
    Return (total_contributions, total_value, growth) at retirement.

    Conventions:
      - The existing balance compounds annually at annual_return_percent.
      - Contributions are paid at the end of every month (ordinary annuity)
        and compound monthly at annual_return_percent / 12.
      - A zero (or negative) rate adds contributions without growth.
      - retirement_age <= current_age is not rejected; the horizon is just
        zero or negative.
    """
    years = retirement_age - current_age
    months = years * 12
    monthly_rate = annual_return_percent / 100 / 12

    try:
        balance_fv = current_balance * (1 + annual_return_percent / 100) ** years
        if monthly_rate > 0:
            contributions_fv = (
                monthly_contribution * ((1 + monthly_rate) ** months - 1) / monthly_rate
            )
        else:
            contributions_fv = monthly_contribution * months
    except (ZeroDivisionError, OverflowError):
        balance_fv = contributions_fv = math.nan

    total_value = balance_fv + contributions_fv
    total_contributions = current_balance + monthly_contribution * months
    growth = total_value - total_contributions

    # same clamp as the loan formula
    if not all(math.isfinite(v) for v in (total_contributions, total_value, growth)):
        logger.debug(
            "investment projection not finite for ages %s..%s, clamping to 0",
            current_age,
            retirement_age,
        )
        return 0.0, 0.0, 0.0

    return total_contributions, total_value, growth
