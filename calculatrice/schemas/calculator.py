"""Data contracts for the calculator API."""

from typing import Any, Dict, List, Optional, Tuple, Union

from pydantic import BaseModel, Field

from calculatrice.models import FIELD_RANGES, CalculatorRecord


def _bounds(kind: str, name: str) -> Dict[str, Any]:
    """ge/le keyword arguments for a field's editable range."""
    low, high = FIELD_RANGES[kind][name]
    bounds: Dict[str, Any] = {"ge": low}
    if high is not None:
        bounds["le"] = high
    return bounds


class LoanRequest(BaseModel):
    """Inputs for a one-off loan payment calculation."""

    loanAmount: float = Field(
        ..., description="Principal in currency units.", **_bounds("loan", "loanAmount")
    )
    interestRate: float = Field(
        ...,
        description="Annual interest rate in percent (e.g. 5 for 5%).",
        **_bounds("loan", "interestRate"),
    )
    loanTerm: int = Field(..., description="Term in years.", **_bounds("loan", "loanTerm"))


class LoanResponse(BaseModel):
    monthlyPayment: float
    totalPayment: float
    interest: float


class InvestmentRequest(BaseModel):
    """Inputs for a one-off retirement projection."""

    currentAge: int = Field(..., **_bounds("investment", "currentAge"))
    retirementAge: int = Field(..., **_bounds("investment", "retirementAge"))
    currentBalance: float = Field(..., **_bounds("investment", "currentBalance"))
    monthlyContribution: float = Field(..., **_bounds("investment", "monthlyContribution"))
    annualReturn: float = Field(
        ...,
        description="Annual return in percent (e.g. 6 for 6%).",
        **_bounds("investment", "annualReturn"),
    )


class InvestmentResponse(BaseModel):
    totalContributions: float
    totalValue: float
    growth: float


class FieldUpdate(BaseModel):
    """One edit coming from a card input."""

    field: str
    value: Union[float, str] = Field(
        ..., description="Number, or text as typed (may contain thousands separators)."
    )


class CalculatorCard(BaseModel):
    record: CalculatorRecord
    display: Dict[str, str]
    # (min, max) per editable field, max None when unbounded
    ranges: Dict[str, Tuple[float, Optional[float]]]


class CalculatorList(BaseModel):
    calculators: List[CalculatorCard]
