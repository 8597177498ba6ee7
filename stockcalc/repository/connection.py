"""Relational store connection management."""
from contextlib import contextmanager
from contextvars import ContextVar
from datetime import date, datetime
from pathlib import Path
from typing import Any, Iterator, List, Mapping, Optional
import logging
import re

from sqlalchemy import Date, DateTime, bindparam, create_engine, text
from sqlalchemy.engine import Connection, Engine, Row
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.sql.elements import TextClause

from stockcalc.config import database_config
from stockcalc.domain.exceptions import DomainError
from stockcalc.domain.interfaces import SqlExecutor

logger = logging.getLogger(__name__)

# Drivers raise these unwrapped when a parameter cannot be bound,
# e.g. sqlite3 OverflowError for integers outside 64 bits.
EXECUTION_ERRORS = (SQLAlchemyError, OverflowError, ValueError, TypeError)

# A statement ends at a semicolon closing its line, optionally followed by a comment.
_STATEMENT_END = re.compile(r";[ \t]*(?:--[^\n]*)?$", re.MULTILINE)


def _split_statements(script: str) -> List[str]:
    """Split a script into statements, dropping comment-only chunks."""
    statements = []
    for chunk in _STATEMENT_END.split(script):
        code = [line for line in chunk.splitlines() if not line.strip().startswith("--")]
        if "".join(code).strip():
            statements.append(chunk.strip())
    return statements


def _bind_typed(statement: TextClause, params: Mapping[str, Any]) -> TextClause:
    """Attach date/datetime types to the bind parameters the statement uses."""
    names = set(statement.compile().params)
    typed = []
    for name, value in params.items():
        if name not in names:
            continue
        if isinstance(value, datetime):
            typed.append(bindparam(name, type_=DateTime()))
        elif isinstance(value, date):
            typed.append(bindparam(name, type_=Date()))
    return statement.bindparams(*typed) if typed else statement


class DatabaseConnection(SqlExecutor):
    """Manages the database engine and runs named-parameter SQL."""

    def __init__(self, url: str = None, echo: bool = None):
        self.url = url or database_config.URL
        self.echo = database_config.ECHO if echo is None else echo
        self._engine: Optional[Engine] = None
        self._current: ContextVar[Optional[Connection]] = ContextVar(
            f"stockcalc_connection_{id(self)}", default=None
        )

    def connect(self) -> None:
        """Create the engine for the configured database."""
        try:
            self._engine = create_engine(self.url, echo=self.echo)
            logger.info(f"Connected to database at {self._engine.url!r}")
        except Exception as e:
            logger.error(f"Failed to connect to database: {e}")
            raise

    def disconnect(self) -> None:
        """Dispose of the engine and its pooled connections."""
        if self._engine:
            self._engine.dispose()
            self._engine = None
            logger.info("Disconnected from database")

    @property
    def engine(self) -> Engine:
        """Get underlying engine."""
        if not self._engine:
            raise RuntimeError("Not connected to database")
        return self._engine

    @contextmanager
    def transaction(self) -> Iterator[Connection]:
        """Run every statement issued inside the block in one transaction.

        Commits when the block exits normally and rolls back when it raises.
        """
        if self._current.get() is not None:
            raise RuntimeError("A transaction is already active")
        with self.engine.begin() as conn:
            token = self._current.set(conn)
            try:
                yield conn
            finally:
                self._current.reset(token)

    @contextmanager
    def _connection(self) -> Iterator[Connection]:
        conn = self._current.get()
        if conn is not None:
            yield conn
            return
        with self.engine.begin() as conn:
            yield conn

    def execute(self, sql: str, params: Optional[Mapping[str, Any]] = None) -> int:
        """Execute a statement and return the affected row count."""
        params = dict(params or {})
        statement = _bind_typed(text(sql), params)
        try:
            with self._connection() as conn:
                result = conn.execute(statement, params)
                affected = max(result.rowcount or 0, 0)
        except EXECUTION_ERRORS as e:
            logger.error(f"Statement execution failed: {e}")
            raise DomainError(f"Statement execution failed: {e}") from e
        logger.debug(f"Statement affected {affected} rows")
        return affected

    def query(self, sql: str, params: Optional[Mapping[str, Any]] = None) -> List[Row]:
        """Execute a query and return results."""
        params = dict(params or {})
        statement = _bind_typed(text(sql), params)
        try:
            with self._connection() as conn:
                return list(conn.execute(statement, params).fetchall())
        except EXECUTION_ERRORS as e:
            logger.error(f"Query execution failed: {e}")
            raise DomainError(f"Query execution failed: {e}") from e

    def execute_script(self, script: str) -> None:
        """Run a script of statements, e.g. a schema file.

        Statements are separated by a semicolon at the end of a line, so
        semicolons inside string literals or comments are left alone. A
        string literal that itself ends a line with a semicolon is not
        supported.
        """
        statements = _split_statements(script)
        try:
            with self._connection() as conn:
                for statement in statements:
                    conn.execute(text(statement))
        except EXECUTION_ERRORS as e:
            logger.error(f"Script execution failed: {e}")
            raise DomainError(f"Script execution failed: {e}") from e
        logger.info(f"Executed {len(statements)} script statements")


SCHEMA_PATH = Path(__file__).parent / "sql" / "schema.sql"


def create_schema(connection: DatabaseConnection, path: Path = SCHEMA_PATH) -> None:
    """Create the calculated value tables if they do not exist yet."""
    connection.execute_script(path.read_text(encoding="utf-8"))
