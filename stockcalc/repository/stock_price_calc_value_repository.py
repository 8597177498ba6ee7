"""SQL implementation of the stock price calculated value repository."""
from datetime import date, datetime
from typing import Callable, Optional
import logging

from stockcalc.domain.entities import (
    CalcValueDefaults, PeriodType, SpcvDeleteCondition, StockPriceCalcValue
)
from stockcalc.domain.exceptions import DomainError
from stockcalc.domain.interfaces import (
    SqlExecutor, SqlStatementResolver, StockPriceCalcValueRepository
)
from stockcalc.repository.sql_path import FileSqlResolver, SqlPath

logger = logging.getLogger(__name__)


class SqlStockPriceCalcValueRepository(StockPriceCalcValueRepository):
    """Runs the packaged calculated value statements through an SqlExecutor."""

    def __init__(
        self,
        executor: SqlExecutor,
        resolver: Optional[SqlStatementResolver] = None,
        defaults: Optional[CalcValueDefaults] = None,
        clock: Callable[[], datetime] = datetime.now,
    ):
        self._executor = executor
        self._resolver = resolver or FileSqlResolver()
        self._defaults = defaults or CalcValueDefaults()
        self._clock = clock

    def delete_by_brand_and_period(self, brand_id: int, period_type: PeriodType) -> int:
        """Delete the calculated values of a brand for a period type.

        Returns the number of rows removed, 0 when nothing matched.
        """
        condition = SpcvDeleteCondition(
            stock_brand_id=brand_id,
            period_type_id=period_type.code,
        )
        sql = self._resolver.resolve(DELETE_BY_BRAND_AND_PERIOD_SQL_PATH)
        deleted = self._executor.execute(sql, condition.model_dump())
        logger.debug(
            f"Deleted {deleted} calculated values for brand {brand_id} ({period_type.name})"
        )
        return deleted

    def insert(self, record: StockPriceCalcValue) -> int:
        """Stamp the audit fields onto the record and insert it.

        The record is modified in place: the validity window is set to the full
        date range, name and note are cleared, and locale, creator, updater and
        both timestamps are overwritten.
        """
        if not isinstance(record, StockPriceCalcValue):
            raise DomainError(f"Cannot insert {type(record).__name__} as a calculated value")

        record.start_date = date.min
        record.end_date = date.max
        record.locale_id = self._defaults.locale_id
        record.creator = self._defaults.creator
        record.created_date = self._clock()
        record.updater = self._defaults.updater
        record.update_date = self._clock()
        record.note = ""
        record.name = ""

        sql = self._resolver.resolve(INSERT_SQL_PATH)
        inserted = self._executor.execute(sql, record.model_dump())
        logger.debug(f"Inserted {inserted} calculated value for brand {record.stock_brand_id}")
        return inserted


DELETE_BY_BRAND_AND_PERIOD_SQL_PATH = SqlPath(
    SqlStockPriceCalcValueRepository, "delete_by_brand_and_period.sql"
)
INSERT_SQL_PATH = SqlPath(SqlStockPriceCalcValueRepository, "insert.sql")
