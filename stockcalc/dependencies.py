"""Dependency wiring for the calculated value repository."""
from typing import Optional
import logging

from stockcalc.config import app_config, calc_value_defaults_config
from stockcalc.domain.entities import CalcValueDefaults
from stockcalc.domain.interfaces import StockPriceCalcValueRepository
from stockcalc.repository.connection import DatabaseConnection
from stockcalc.repository.sql_path import FileSqlResolver
from stockcalc.repository.stock_price_calc_value_repository import (
    SqlStockPriceCalcValueRepository,
)

logger = logging.getLogger(__name__)


# Application state (set by init_repositories)
_connection: Optional[DatabaseConnection] = None
_calc_value_repository: Optional[StockPriceCalcValueRepository] = None


def configure_logging(level: Optional[str] = None) -> None:
    """Configure root logging for applications embedding the repository."""
    logging.basicConfig(
        level=(level or app_config.LOG_LEVEL).upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )


def default_calc_value_defaults() -> CalcValueDefaults:
    """Build the audit defaults from configuration."""
    return CalcValueDefaults(
        locale_id=calc_value_defaults_config.LOCALE_ID,
        creator=calc_value_defaults_config.CREATOR,
        updater=calc_value_defaults_config.UPDATER,
    )


def init_repositories(
    connection: DatabaseConnection,
    defaults: Optional[CalcValueDefaults] = None,
) -> None:
    """Initialize all repositories with connection."""
    global _connection, _calc_value_repository
    _connection = connection
    _calc_value_repository = SqlStockPriceCalcValueRepository(
        executor=connection,
        resolver=FileSqlResolver(),
        defaults=defaults or default_calc_value_defaults(),
    )
    logger.info("Repositories initialized")


def get_connection() -> DatabaseConnection:
    """Get database connection."""
    if _connection is None:
        raise RuntimeError("Repositories not initialized")
    return _connection


def get_stock_price_calc_value_repository() -> StockPriceCalcValueRepository:
    """Get calculated value repository dependency."""
    if _calc_value_repository is None:
        raise RuntimeError("Repositories not initialized")
    return _calc_value_repository
