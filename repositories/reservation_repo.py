"""
repositories/reservation_repo.py
--------------------------------
Read access to reservations, as needed by the customer pages.
"""

from db.executor import QueryExecutor
from models.reservation import Reservation
from utils.logger import get_logger

logger = get_logger(__name__)


class ReservationRepository:
    """Repository for queries on the reservations table."""

    def __init__(self, executor: QueryExecutor):
        self.executor = executor

    def get_for_customer(self, customer_id: int) -> list[Reservation]:
        """
        Fetch every reservation owned by a customer.

        Args:
            customer_id: Primary key of the owning customer.

        Returns:
            List of Reservation objects ordered by start time.
        """
        sql = """
            SELECT id, customer_id, start_at, num_guests, notes
            FROM reservations
            WHERE customer_id = %s
            ORDER BY start_at, id;
        """
        result = self.executor.query(sql, (customer_id,))
        logger.debug(f"Loaded {len(result.rows)} reservations for customer #{customer_id}")
        return [self._row_to_reservation(r) for r in result.rows]

    # ── HELPERS ───────────────────────────────────────────

    @staticmethod
    def _row_to_reservation(row: dict) -> Reservation:
        """Convert a database row to a Reservation domain object."""
        return Reservation(
            id=row["id"],
            customer_id=row["customer_id"],
            start_at=row["start_at"],
            num_guests=row["num_guests"],
            notes=row["notes"],
        )
