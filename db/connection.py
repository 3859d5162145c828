"""
db/connection.py
----------------
Creates and closes the PostgreSQL connection pool.
Uses psycopg2's SimpleConnectionPool for efficient connection reuse.
The pool is owned by the application entry point and handed to a
QueryExecutor; repositories never touch it directly.
"""

import psycopg2
from psycopg2 import pool

from config import DATABASE_URL, DB_POOL_MAX, DB_POOL_MIN
from utils.logger import get_logger

logger = get_logger(__name__)


def create_pool(
    dsn: str = DATABASE_URL,
    min_conn: int = DB_POOL_MIN,
    max_conn: int = DB_POOL_MAX,
) -> pool.SimpleConnectionPool:
    """
    Create a database connection pool.

    Args:
        dsn: libpq connection string or URL.
        min_conn: Minimum number of connections to keep open.
        max_conn: Maximum number of connections allowed.

    Returns:
        A ready-to-use SimpleConnectionPool.

    Raises:
        psycopg2.OperationalError: If the database is unreachable.
    """
    try:
        db_pool = pool.SimpleConnectionPool(min_conn, max_conn, dsn)
        logger.info("Database connection pool initialized successfully.")
        return db_pool
    except psycopg2.OperationalError as e:
        logger.error(f"Failed to initialize database pool: {e}")
        raise


def close_pool(db_pool: pool.SimpleConnectionPool | None) -> None:
    """Close all connections in the pool."""
    if db_pool is not None and not db_pool.closed:
        db_pool.closeall()
        logger.info("Database connection pool closed.")
