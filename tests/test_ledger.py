import datetime as dt

import pytest

from tomanbook.jalali import current_date
from tomanbook.ledger import Ledger, LedgerError, load_ledger
from tomanbook.persian import format_number

FARVARDIN_DAY = dt.date(2024, 3, 20)
ORDIBEHESHT_DAY = dt.date(2024, 5, 15)


def test_add_income_item_and_total():
    ledger = Ledger()
    item = ledger.add_income("5000", "حقوق", FARVARDIN_DAY)
    expected = f"{current_date(FARVARDIN_DAY)} - حقوق - {format_number(5000)} تومان "
    assert item == expected
    assert ledger.incomes == [expected]
    assert ledger.total_income == 5000
    assert ledger.balance == 5000


@pytest.mark.parametrize("amount,source", [("", "حقوق"), ("100", "")])
def test_add_income_requires_fields(amount, source):
    with pytest.raises(LedgerError):
        Ledger().add_income(amount, source, FARVARDIN_DAY)


@pytest.mark.parametrize("amount", ["0", "1000000001", "abc"])
def test_add_income_rejects_invalid_amount(amount):
    ledger = Ledger()
    with pytest.raises(LedgerError):
        ledger.add_income(amount, "حقوق", FARVARDIN_DAY)
    assert ledger.incomes == []


def test_remove_income_restores_total():
    ledger = Ledger()
    ledger.add_income(1200, "a", FARVARDIN_DAY)
    ledger.add_income(3400, "b", FARVARDIN_DAY)
    assert ledger.remove_income(0) == 1200
    assert ledger.total_income == 3400
    assert len(ledger.incomes) == 1


def test_remove_income_without_selection():
    with pytest.raises(LedgerError):
        Ledger().remove_income(0)


def test_remove_income_bad_format():
    ledger = Ledger(incomes=["broken"], total_income=10)
    with pytest.raises(LedgerError):
        ledger.remove_income(0)
    assert ledger.incomes == ["broken"]


def test_add_cost_uses_category_as_description():
    ledger = Ledger()
    item = ledger.add_cost("700", "قبوض", "", FARVARDIN_DAY)
    assert item.count("قبوض") == 2
    assert ledger.total_cost == 700
    assert ledger.balance == -700


def test_add_cost_requires_amount():
    with pytest.raises(LedgerError):
        Ledger().add_cost("", "قبوض", "x", FARVARDIN_DAY)


def test_remove_cost_reads_third_field():
    ledger = Ledger()
    ledger.add_cost("1000", "لباس", "250", FARVARDIN_DAY)
    assert ledger.remove_cost(0) == 250
    assert ledger.costs == []
    assert ledger.total_cost == 750


def test_remove_cost_without_selection():
    with pytest.raises(LedgerError):
        Ledger().remove_cost(3)


def test_save_and_load_round_trip(tmp_path):
    path = tmp_path / "data.txt"
    ledger = Ledger()
    ledger.add_income("5000", "حقوق", FARVARDIN_DAY)
    ledger.add_cost("1500", "پزشکی", "دارو", FARVARDIN_DAY)
    ledger.save(path)
    loaded = load_ledger(path)
    assert loaded == ledger
    assert loaded.balance == ledger.balance


def test_load_missing_file(tmp_path):
    loaded = load_ledger(tmp_path / "missing.txt")
    assert loaded == Ledger()


def test_load_ignores_bad_totals(tmp_path):
    path = tmp_path / "data.txt"
    path.write_text("TOTAL_INCOME:abc\nTOTAL_COST:40\nOTHER:1\n", encoding="utf-8")
    loaded = load_ledger(path)
    assert loaded.total_income == 0
    assert loaded.total_cost == 40
    assert loaded.incomes == [] and loaded.costs == []