"""
Ordered, copy-on-write collection of calculator cards.

Every operation takes the current snapshot (a tuple of records) and returns
a new tuple; records themselves are frozen, so a snapshot handed out earlier
never changes underneath its holder.
"""

from __future__ import annotations

import logging
import time
from datetime import date
from typing import Any, Iterable, Optional, Tuple, Union

from calculatrice.config import Settings, get_settings
from calculatrice.core.investment import compute_investment
from calculatrice.core.loan import compute_loan
from calculatrice.models import InvestmentRecord, LoanRecord

logger = logging.getLogger(__name__)

Record = Union[LoanRecord, InvestmentRecord]
Records = Tuple[Record, ...]


# highest id handed out in this process, removed cards included
_last_id = 0


def _next_id(records: Iterable[Record]) -> int:
    """Creation timestamp in ms, bumped past every id issued so far."""
    global _last_id
    stamp = time.time_ns() // 1_000_000
    _last_id = max([stamp, _last_id + 1] + [record.id + 1 for record in records])
    return _last_id


def recompute(record: Record) -> Record:
    """Return the record with its derived fields refreshed from its inputs."""
    if record.kind == "loan":
        monthly, total = compute_loan(record.loanAmount, record.interestRate, record.loanTerm)
        return record.model_copy(update={"monthlyPayment": monthly, "totalPayment": total})

    contributions, value, growth = compute_investment(
        record.currentAge,
        record.retirementAge,
        record.currentBalance,
        record.monthlyContribution,
        record.annualReturn,
    )
    return record.model_copy(
        update={"totalContributions": contributions, "totalValue": value, "growth": growth}
    )


def find(records: Iterable[Record], record_id: int) -> Optional[Record]:
    for record in records:
        if record.id == record_id:
            return record
    return None


def new_loan(
    records: Iterable[Record] = (), settings: Optional[Settings] = None
) -> LoanRecord:
    settings = settings or get_settings()
    return recompute(
        LoanRecord(
            id=_next_id(records),
            loanAmount=settings.default_loan_amount,
            interestRate=settings.default_interest_rate,
            loanTerm=settings.default_loan_term,
        )
    )


def new_investment(
    records: Iterable[Record] = (),
    settings: Optional[Settings] = None,
    today: Optional[date] = None,
) -> InvestmentRecord:
    settings = settings or get_settings()
    if settings.default_birth_year is not None:
        current_age = (today or date.today()).year - settings.default_birth_year
    else:
        current_age = settings.default_current_age

    return recompute(
        InvestmentRecord(
            id=_next_id(records),
            currentAge=current_age,
            retirementAge=settings.default_retirement_age,
            currentBalance=settings.default_current_balance,
            monthlyContribution=settings.default_monthly_contribution,
            annualReturn=settings.default_annual_return,
        )
    )


def initial_records(settings: Optional[Settings] = None) -> Records:
    """Starting collection: a single default loan card."""
    return (new_loan((), settings),)


def add_by_duplicating(records: Iterable[Record], existing: Record) -> Records:
    """Append a copy of `existing` under a fresh id."""
    records = tuple(records)
    copy = recompute(existing.model_copy(update={"id": _next_id(records)}))
    logger.debug("duplicated %s card %s as %s", copy.kind, existing.id, copy.id)
    return records + (copy,)


def add_loan_default(records: Iterable[Record], settings: Optional[Settings] = None) -> Records:
    records = tuple(records)
    record = new_loan(records, settings)
    logger.debug("added loan card %s", record.id)
    return records + (record,)


def add_investment_default(
    records: Iterable[Record],
    settings: Optional[Settings] = None,
    today: Optional[date] = None,
) -> Records:
    records = tuple(records)
    record = new_investment(records, settings, today)
    logger.debug("added investment card %s", record.id)
    return records + (record,)


def update_field(records: Iterable[Record], record_id: int, field: str, value: Any) -> Records:
    """
    Set one input field on the card with `record_id` and recompute it.

    Unknown ids and fields that are not inputs of that card's kind leave the
    collection unchanged. A value that does not fit the field's type raises
    pydantic.ValidationError.
    """
    records = tuple(records)
    target = find(records, record_id)
    if target is None:
        logger.debug("no card with id %s to update", record_id)
        return records
    if field not in target.INPUT_FIELDS:
        logger.debug("ignoring field %r on %s card %s", field, target.kind, record_id)
        return records

    # validate so int fields stay ints
    updated = recompute(type(target).model_validate({**target.model_dump(), field: value}))
    logger.debug("updated %s on %s card %s", field, target.kind, record_id)
    return tuple(updated if record.id == record_id else record for record in records)


def remove(records: Iterable[Record], record_id: int) -> Records:
    records = tuple(records)
    if find(records, record_id) is None:
        logger.debug("no card with id %s to remove", record_id)
        return records
    logger.debug("removed card %s", record_id)
    return tuple(record for record in records if record.id != record_id)


class CalculatorStore:
    """Holds the current snapshot and swaps it for a new one on every change."""

    def __init__(self, records: Optional[Iterable[Record]] = None, settings: Optional[Settings] = None):
        self.settings = settings or get_settings()
        self.records: Records = (
            tuple(records) if records is not None else initial_records(self.settings)
        )

    def get(self, record_id: int) -> Optional[Record]:
        return find(self.records, record_id)

    def duplicate(self, record_id: int) -> Optional[Record]:
        """Duplicate the card with `record_id`; returns the new card or None."""
        existing = self.get(record_id)
        if existing is None:
            return None
        self.records = add_by_duplicating(self.records, existing)
        return self.records[-1]

    def add_loan(self) -> Record:
        self.records = add_loan_default(self.records, self.settings)
        return self.records[-1]

    def add_investment(self, today: Optional[date] = None) -> Record:
        self.records = add_investment_default(self.records, self.settings, today)
        return self.records[-1]

    def update(self, record_id: int, field: str, value: Any) -> Records:
        self.records = update_field(self.records, record_id, field, value)
        return self.records

    def remove(self, record_id: int) -> Records:
        self.records = remove(self.records, record_id)
        return self.records
