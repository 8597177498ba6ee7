"""Repository interfaces (Ports) - abstraction for data access."""
from abc import ABC, abstractmethod
from typing import Any, Mapping, TYPE_CHECKING

from stockcalc.domain.entities import PeriodType, StockPriceCalcValue

if TYPE_CHECKING:
    from stockcalc.repository.sql_path import SqlPath


class SqlStatementResolver(ABC):
    """Interface for turning a named SQL resource into executable text."""

    @abstractmethod
    def resolve(self, sql_path: "SqlPath") -> str:
        """Return the SQL text for the given resource."""
        pass


class SqlExecutor(ABC):
    """Interface for named-parameter SQL execution."""

    @abstractmethod
    def execute(self, sql: str, params: Mapping[str, Any]) -> int:
        """Execute a statement and return the affected row count."""
        pass


class StockPriceCalcValueRepository(ABC):
    """Interface for stock price calculated value data access."""

    @abstractmethod
    def delete_by_brand_and_period(self, brand_id: int, period_type: PeriodType) -> int:
        """Delete the calculated values of a brand for a period type."""
        pass

    @abstractmethod
    def insert(self, record: StockPriceCalcValue) -> int:
        """Insert a single calculated value."""
        pass
