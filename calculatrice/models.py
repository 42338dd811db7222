from __future__ import annotations

from typing import Annotated, ClassVar, Dict, Literal, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field


class LoanRecord(BaseModel):
    """One loan amortization card."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    INPUT_FIELDS: ClassVar[Tuple[str, ...]] = ("loanAmount", "interestRate", "loanTerm")

    kind: Literal["loan"] = "loan"
    id: int
    loanAmount: float
    interestRate: float  # annual percent
    loanTerm: int  # years
    monthlyPayment: float = 0.0
    totalPayment: float = 0.0

    @property
    def interest(self) -> float:
        return self.totalPayment - self.loanAmount


class InvestmentRecord(BaseModel):
    """One retirement-investment projection card."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    INPUT_FIELDS: ClassVar[Tuple[str, ...]] = (
        "currentAge",
        "retirementAge",
        "currentBalance",
        "monthlyContribution",
        "annualReturn",
    )

    kind: Literal["investment"] = "investment"
    id: int
    currentAge: int
    # not required to exceed currentAge, a negative horizon is computed as-is
    retirementAge: int
    currentBalance: float
    monthlyContribution: float
    annualReturn: float  # annual percent
    totalContributions: float = 0.0
    totalValue: float = 0.0
    growth: float = 0.0


CalculatorRecord = Annotated[Union[LoanRecord, InvestmentRecord], Field(discriminator="kind")]


# editable ranges the input widgets enforce: (min, max), None = unbounded
FIELD_RANGES: Dict[str, Dict[str, Tuple[float, Union[float, None]]]] = {
    "loan": {
        "loanAmount": (0, None),
        "interestRate": (0.1, 20),
        "loanTerm": (1, 30),
    },
    "investment": {
        "currentAge": (18, 100),
        "retirementAge": (18, 100),
        "currentBalance": (0, None),
        "monthlyContribution": (0, None),
        "annualReturn": (0, 20),
    },
}
