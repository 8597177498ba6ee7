"""Named SQL resources stored beside the modules that use them.

A statement is identified by the class that owns it and a file name. The file
is looked up in a directory named after the owner's module:

    stockcalc/repository/
      stock_price_calc_value_repository.py
      sql/
        stock_price_calc_value_repository/
          insert.sql
"""
import logging
import sys
from dataclasses import dataclass
from pathlib import Path

from stockcalc.domain.exceptions import DomainError
from stockcalc.domain.interfaces import SqlStatementResolver

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SqlPath:
    """Reference to an SQL file owned by a class."""
    owner: type
    file_name: str

    def to_path(self) -> Path:
        """Get the file system location of the SQL file."""
        module = sys.modules[self.owner.__module__]
        module_file = Path(module.__file__)
        return module_file.parent / "sql" / module_file.stem / self.file_name

    def __str__(self) -> str:
        return f"{self.owner.__name__}:{self.file_name}"


class FileSqlResolver(SqlStatementResolver):
    """Reads SQL text from the file a SqlPath points at."""

    def __init__(self, encoding: str = "utf-8"):
        self.encoding = encoding

    def resolve(self, sql_path: SqlPath) -> str:
        """Read and return the SQL statement, without surrounding whitespace."""
        path = sql_path.to_path()
        try:
            sql = path.read_text(encoding=self.encoding).strip()
        except (OSError, UnicodeDecodeError) as e:
            logger.error(f"Failed to read SQL {sql_path} from {path}: {e}")
            raise DomainError(f"SQL resource could not be read: {sql_path}") from e
        if not sql:
            raise DomainError(f"SQL resource is empty: {sql_path}")
        return sql
