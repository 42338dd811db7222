"""Amortized loan payment."""

from __future__ import annotations

import logging
import math
from typing import Tuple

logger = logging.getLogger(__name__)


def compute_loan(
    principal: float, annual_rate_percent: float, term_years: float
) -> Tuple[float, float]:
    """
    Return (monthly_payment, total_payment) for a fixed-rate loan.

    Rate is an annual percentage (5 means 5 %), compounded monthly over
    term_years * 12 payments. A zero rate falls back to straight principal
    division. Whenever the payment comes out non-finite (no payments,
    overflow) both values are 0.0 instead.
    """
    rate = annual_rate_percent / 100 / 12
    payments = term_years * 12

    try:
        if rate == 0:
            monthly = principal / payments
        else:
            x = (1 + rate) ** payments
            monthly = principal * x * rate / (x - 1)
    except (ZeroDivisionError, OverflowError):
        monthly = math.nan

    if not math.isfinite(monthly):
        logger.debug(
            "loan payment not finite for principal=%s rate=%s term=%s, clamping to 0",
            principal,
            annual_rate_percent,
            term_years,
        )
        return 0.0, 0.0

    return monthly, monthly * payments
