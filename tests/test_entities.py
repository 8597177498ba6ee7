"""Tests for domain entities."""
import pytest

from stockcalc.domain.entities import (
    CalcValueDefaults, PeriodType, SpcvDeleteCondition, StockPriceCalcValue
)
from stockcalc.domain.exceptions import DomainError


def test_period_type_codes():
    assert [p.code for p in PeriodType] == [1, 2, 3, 4]


@pytest.mark.parametrize("period_type", list(PeriodType))
def test_period_type_from_code(period_type):
    assert PeriodType.from_code(period_type.code) is period_type


def test_period_type_unknown_code_raises():
    with pytest.raises(DomainError):
        PeriodType.from_code(99)


def test_calc_value_defaults_placeholders():
    """Default audit values match the current placeholders."""
    defaults = CalcValueDefaults()
    assert defaults.locale_id == "ja"
    assert defaults.creator == "TSSTS_MAIN_USER"
    assert defaults.updater == "TSSTS_MAIN_USER"


def test_record_defaults():
    """Name and note default to empty strings; audit fields are unset."""
    record = StockPriceCalcValue(stock_brand_id=1, period_type_id=PeriodType.DAILY.code)
    assert record.name == ""
    assert record.note == ""
    assert record.start_date is None
    assert record.created_date is None


def test_delete_condition_dump():
    condition = SpcvDeleteCondition(stock_brand_id=42, period_type_id=1)
    assert condition.model_dump() == {"stock_brand_id": 42, "period_type_id": 1}
