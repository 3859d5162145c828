"""
db/executor.py
--------------
Runs parameterized SQL against the connection pool.

Every call is a self-contained round trip: check out a connection, execute,
commit, give the connection back. Values always travel as bind parameters;
nothing is interpolated into the query text.
"""

from dataclasses import dataclass, field
from typing import Any, Optional, Sequence

import psycopg2
from psycopg2 import pool
from psycopg2.extras import RealDictCursor

from utils.logger import get_logger

logger = get_logger(__name__)


@dataclass
class QueryResult:
    """
    Outcome of a single statement.

    Attributes:
        rows: Returned rows as column-name → value mappings (empty for
            statements that return nothing).
        rowcount: Number of rows produced or affected, as reported by the
            driver.
    """
    rows: list[dict[str, Any]] = field(default_factory=list)
    rowcount: int = 0

    def first(self) -> Optional[dict[str, Any]]:
        """Returns the first row, or None if there are no rows."""
        return self.rows[0] if self.rows else None


class QueryExecutor:
    """Executes parameterized queries using connections from a pool."""

    def __init__(self, db_pool: pool.AbstractConnectionPool):
        self._pool = db_pool

    def query(self, sql: str, params: Optional[Sequence[Any]] = None) -> QueryResult:
        """
        Execute one statement and commit it.

        Args:
            sql: Query text with ``%s`` placeholders.
            params: Bind values, in placeholder order.

        Returns:
            A QueryResult with the fetched rows and the affected row count.

        Raises:
            psycopg2.Error: Any driver or server failure, re-raised unchanged
                after a best-effort rollback.
        """
        conn = self._pool.getconn()
        try:
            with conn.cursor(cursor_factory=RealDictCursor) as cur:
                cur.execute(sql, params)
                rows = [dict(r) for r in cur.fetchall()] if cur.description else []
                rowcount = cur.rowcount
            conn.commit()
            return QueryResult(rows=rows, rowcount=rowcount)
        except Exception as e:
            logger.error(f"Query failed: {e}")
            try:
                conn.rollback()
            except psycopg2.Error as rollback_error:
                logger.error(f"Rollback failed: {rollback_error}")
            raise
        finally:
            self._pool.putconn(conn)
