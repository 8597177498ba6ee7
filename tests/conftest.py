"""Pytest configuration and fixtures."""
import pytest
from unittest.mock import MagicMock

from stockcalc.domain.entities import PeriodType, StockPriceCalcValue
from stockcalc.repository.connection import DatabaseConnection, create_schema
from stockcalc.repository.stock_price_calc_value_repository import (
    SqlStockPriceCalcValueRepository,
)


COUNT_BY_BRAND_AND_PERIOD = """
SELECT COUNT(*)
FROM im_stk_stock_price_calc_value
WHERE stock_brand_id = :stock_brand_id
  AND period_type_id = :period_type_id
"""


@pytest.fixture
def connection():
    """In-memory SQLite connection with the calculated value schema."""
    conn = DatabaseConnection(url="sqlite://", echo=False)
    conn.connect()
    create_schema(conn)
    yield conn
    conn.disconnect()


@pytest.fixture
def repository(connection):
    """Repository backed by the in-memory database."""
    return SqlStockPriceCalcValueRepository(connection)


@pytest.fixture
def mock_executor():
    """Mock SQL executor."""
    executor = MagicMock()
    executor.execute = MagicMock(return_value=1)
    return executor


@pytest.fixture
def make_record():
    """Factory for calculated value records."""
    def _make(
        brand_id: int = 1,
        period_type: PeriodType = PeriodType.DAILY,
        series_id: int = 1,
        **kwargs,
    ) -> StockPriceCalcValue:
        return StockPriceCalcValue(
            stock_brand_id=brand_id,
            period_type_id=period_type.code,
            stock_price_time_series_id=series_id,
            calc_value_mgmt_id=kwargs.pop("calc_value_mgmt_id", 1),
            calc_value=kwargs.pop("calc_value", 100.0),
            **kwargs,
        )
    return _make


@pytest.fixture
def count_rows(connection):
    """Count stored rows for a brand and period type."""
    def _count(brand_id: int, period_type: PeriodType) -> int:
        rows = connection.query(
            COUNT_BY_BRAND_AND_PERIOD,
            {"stock_brand_id": brand_id, "period_type_id": period_type.code},
        )
        return rows[0][0]
    return _count
