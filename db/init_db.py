"""
db/init_db.py
-------------
Creates the database schema (tables) if they do not already exist.
Run this module directly to initialize a fresh database:
    python -m db.init_db
"""

from db.executor import QueryExecutor
from utils.logger import get_logger

logger = get_logger(__name__)

SCHEMA_SQL = """
-- Customers table: one row per patron
CREATE TABLE IF NOT EXISTS customers (
    id              SERIAL PRIMARY KEY,
    first_name      TEXT NOT NULL,
    last_name       TEXT NOT NULL,
    phone           TEXT,
    notes           TEXT
);

-- Reservations table: every booking belongs to exactly one customer
CREATE TABLE IF NOT EXISTS reservations (
    id              SERIAL PRIMARY KEY,
    customer_id     INTEGER NOT NULL REFERENCES customers(id),
    start_at        TIMESTAMP NOT NULL,
    num_guests      INTEGER NOT NULL CHECK (num_guests >= 1),
    notes           TEXT
);

-- Index for per-customer lookups and the favorites ranking
CREATE INDEX IF NOT EXISTS idx_reservations_customer ON reservations(customer_id);
"""


def create_tables(executor: QueryExecutor) -> None:
    """
    Execute the schema SQL to create all tables.
    Safe to call multiple times (uses IF NOT EXISTS).
    """
    try:
        executor.query(SCHEMA_SQL)
        logger.info("Database schema initialized successfully.")
    except Exception as e:
        logger.error(f"Failed to initialize schema: {e}")
        raise


if __name__ == "__main__":
    from db.connection import close_pool, create_pool
    db_pool = create_pool()
    try:
        create_tables(QueryExecutor(db_pool))
    finally:
        close_pool(db_pool)
    print("✅ Database schema created successfully.")
