"""Domain entities - core business objects."""
from dataclasses import dataclass
from datetime import datetime, date
from enum import Enum
from typing import Optional
from pydantic import BaseModel

from stockcalc.domain.exceptions import DomainError


class PeriodType(Enum):
    """Period a calculated value was computed over."""
    DAILY = 1
    WEEKLY = 2
    MONTHLY = 3
    YEARLY = 4

    @property
    def code(self) -> int:
        """Underlying code stored in the period_type_id column."""
        return self.value

    @classmethod
    def from_code(cls, code: int) -> "PeriodType":
        """Resolve a stored code back to its period type."""
        for member in cls:
            if member.value == code:
                return member
        raise DomainError(f"Unknown period type code: {code}")


@dataclass(frozen=True)
class CalcValueDefaults:
    """Audit values stamped onto every inserted calculated value.

    The locale and user ids are placeholders until locales and users are
    modelled properly.
    """
    locale_id: str = "ja"
    creator: str = "TSSTS_MAIN_USER"
    updater: str = "TSSTS_MAIN_USER"


class StockPriceCalcValue(BaseModel):
    """DTO for a calculated value of a stock brand over a period."""
    id: Optional[int] = None
    stock_brand_id: int
    period_type_id: int
    stock_price_time_series_id: Optional[int] = None
    calc_value_mgmt_id: Optional[int] = None
    calc_value: Optional[float] = None
    name: str = ""
    note: str = ""
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    locale_id: Optional[str] = None
    creator: Optional[str] = None
    created_date: Optional[datetime] = None
    updater: Optional[str] = None
    update_date: Optional[datetime] = None

    class Config:
        from_attributes = True


class SpcvDeleteCondition(BaseModel):
    """Filter selecting the calculated values of one brand and period type."""
    stock_brand_id: int
    period_type_id: int
