"""en-US display strings for card amounts."""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
from typing import Dict, Union

from calculatrice.models import InvestmentRecord, LoanRecord


def format_currency(value: float, decimals: int = 2) -> str:
    """
    Group thousands with commas and round to `decimals` places.

    Ties round away from zero (2.5 -> "3"), the way toLocaleString('en-US')
    does, rather than to even.
    """
    rounded = Decimal(value).quantize(Decimal(1).scaleb(-decimals), rounding=ROUND_HALF_UP)
    return f"{rounded:,.{decimals}f}"


def display_values(record: Union[LoanRecord, InvestmentRecord]) -> Dict[str, str]:
    """Formatted outputs shown on a card: two decimals for payments and
    totals, whole units for raw amounts."""
    if isinstance(record, LoanRecord):
        return {
            "loanAmount": format_currency(record.loanAmount, 0),
            "monthlyPayment": format_currency(record.monthlyPayment),
            "totalPayment": format_currency(record.totalPayment),
            "interest": format_currency(record.interest, 0),
        }
    if isinstance(record, InvestmentRecord):
        return {
            "currentBalance": format_currency(record.currentBalance, 0),
            "monthlyContribution": format_currency(record.monthlyContribution, 0),
            "totalContributions": format_currency(record.totalContributions),
            "totalValue": format_currency(record.totalValue),
            "growth": format_currency(record.growth),
        }
    raise TypeError(f"not a calculator record: {record!r}")
