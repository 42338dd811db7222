from __future__ import annotations

import logging
from datetime import date
from math import isclose

import pytest
from pydantic import ValidationError

from calculatrice.core import store as store_module
from calculatrice.core.investment import compute_investment
from calculatrice.core.loan import compute_loan
from calculatrice.core.store import (
    CalculatorStore,
    add_by_duplicating,
    add_investment_default,
    add_loan_default,
    initial_records,
    remove,
    update_field,
)
from calculatrice.models import InvestmentRecord, LoanRecord


@pytest.fixture()
def records(settings):
    loans = initial_records(settings)
    return add_investment_default(loans, settings)


def test_initial_collection_is_one_computed_loan(settings):
    (loan,) = initial_records(settings)

    assert isinstance(loan, LoanRecord)
    assert (loan.loanAmount, loan.interestRate, loan.loanTerm) == (100000, 5, 15)
    assert (loan.monthlyPayment, loan.totalPayment) == compute_loan(100000, 5, 15)


def test_investment_default_uses_configured_age(settings):
    (investment,) = add_investment_default((), settings)

    assert investment.currentAge == settings.default_current_age
    assert (investment.totalContributions, investment.totalValue, investment.growth) == (
        compute_investment(45, 56, 300000, 2000, 6)
    )


def test_investment_default_from_birth_year(settings):
    settings = settings.model_copy(update={"default_birth_year": 1980})

    (investment,) = add_investment_default((), settings, today=date(2031, 3, 1))

    assert investment.currentAge == 51


def test_add_appends_and_keeps_previous_snapshot(records, settings):
    grown = add_loan_default(records, settings)

    assert len(records) == 2
    assert grown[:2] == records
    assert grown[-1].kind == "loan"


def test_ids_are_unique(records, settings):
    for _ in range(5):
        records = add_loan_default(records, settings)

    ids = [record.id for record in records]
    assert len(set(ids)) == len(ids)


def test_duplicate_copies_inputs_under_new_id(records):
    source = records[1]

    out = add_by_duplicating(records, source)
    copy = out[-1]

    assert len(out) == 3
    assert copy.id not in {record.id for record in records}
    assert copy.model_dump(exclude={"id"}) == source.model_dump(exclude={"id"})
    assert (copy.totalContributions, copy.totalValue, copy.growth) == compute_investment(
        copy.currentAge,
        copy.retirementAge,
        copy.currentBalance,
        copy.monthlyContribution,
        copy.annualReturn,
    )


def test_duplicate_recomputes_stale_source(records):
    stale = records[0].model_copy(update={"monthlyPayment": 1.0, "totalPayment": 2.0})

    copy = add_by_duplicating(records, stale)[-1]

    assert (copy.monthlyPayment, copy.totalPayment) == compute_loan(100000, 5, 15)


def test_update_recomputes_derived_fields(records):
    loan_id = records[0].id

    out = update_field(records, loan_id, "interestRate", 3)
    loan = out[0]

    assert loan.interestRate == 3
    assert (loan.monthlyPayment, loan.totalPayment) == compute_loan(100000, 3, 15)
    assert out[1] is records[1]
    assert records[0].interestRate == 5


def test_update_keeps_position(records, settings):
    records = add_loan_default(records, settings)
    middle = records[1]

    out = update_field(records, middle.id, "annualReturn", 8)

    assert [record.id for record in out] == [record.id for record in records]
    assert out[1].annualReturn == 8
    assert isclose(out[1].growth, out[1].totalValue - out[1].totalContributions)


def test_update_with_other_variant_field_is_noop(records):
    loan_id = records[0].id

    assert update_field(records, loan_id, "annualReturn", 10) == records
    assert update_field(records, records[1].id, "loanTerm", 10) == records


@pytest.mark.parametrize("field", ["monthlyPayment", "id", "kind", "nonsense"])
def test_update_non_input_field_is_noop(records, field):
    assert update_field(records, records[0].id, field, 1) == records


def test_update_unknown_id_is_noop(records):
    assert update_field(records, -1, "loanAmount", 1) == records


def test_update_is_idempotent(records):
    loan_id = records[0].id

    once = update_field(records, loan_id, "loanAmount", 250000)
    twice = update_field(once, loan_id, "loanAmount", 250000)

    assert once == twice


def test_update_integer_field_rejects_fraction(records):
    with pytest.raises(ValidationError):
        update_field(records, records[0].id, "loanTerm", 7.5)


def test_update_to_zero_term_clamps(records):
    loan = update_field(records, records[0].id, "loanTerm", 0)[0]

    assert loan.loanTerm == 0
    assert (loan.monthlyPayment, loan.totalPayment) == (0.0, 0.0)


def test_remove(records):
    out = remove(records, records[0].id)

    assert len(out) == 1
    assert isinstance(out[0], InvestmentRecord)


def test_remove_unknown_id_is_noop(records):
    assert remove(records, 12345) == records


def test_store_replaces_snapshot_wholesale(settings):
    store = CalculatorStore(settings=settings)
    before = store.records

    copy = store.duplicate(before[0].id)
    store.update(copy.id, "loanAmount", 5000)

    assert len(before) == 1
    assert before[0].loanAmount == 100000
    assert store.get(copy.id).loanAmount == 5000
    assert store.records is not before


def test_store_duplicate_unknown_id(settings):
    store = CalculatorStore(settings=settings)

    assert store.duplicate(-1) is None
    assert len(store.records) == 1


def test_removed_id_is_not_reissued(settings, monkeypatch):
    """
    Ids stay unique for the whole session: a card created in the same
    millisecond as one that was removed must not get the removed card's id.
    """
    monkeypatch.setattr(store_module.time, "time_ns", lambda: 1000 * 1_000_000)
    store = CalculatorStore(settings=settings)
    source = store.records[0]

    first_copy = store.duplicate(source.id)
    store.remove(first_copy.id)
    second_copy = store.duplicate(source.id)

    assert second_copy.id != first_copy.id
    assert second_copy.id > first_copy.id


def test_remove_unknown_id_logs_no_op(records, caplog):
    with caplog.at_level(logging.DEBUG, logger="calculatrice.core.store"):
        remove(records, 12345)

    assert "no card with id 12345 to remove" in caplog.text
    assert "removed card" not in caplog.text
