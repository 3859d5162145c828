"""
repositories/customer_repo.py
-----------------------------
Data access layer for customers.
All SQL queries related to the `customers` table live here, including the
name search and the most-frequent-patrons ranking.
"""

from config import FAVORITES_LIMIT
from db.executor import QueryExecutor
from errors import NotFoundError
from models.customer import Customer, Persisted, Transient
from models.reservation import Reservation
from repositories.reservation_repo import ReservationRepository
from utils.logger import get_logger

logger = get_logger(__name__)

_COLUMNS = "id, first_name, last_name, phone, notes"


class CustomerRepository:
    """Repository for reads and writes on the customers table."""

    def __init__(self, executor: QueryExecutor, reservations: ReservationRepository):
        self.executor = executor
        self.reservations = reservations

    # ── READ ──────────────────────────────────────────────

    def get_all(self) -> list[Customer]:
        """Fetch every customer, ordered by last name then first name."""
        sql = f"SELECT {_COLUMNS} FROM customers ORDER BY last_name, first_name;"
        result = self.executor.query(sql)
        return [self._row_to_customer(r) for r in result.rows]

    def get(self, customer_id: int) -> Customer:
        """
        Fetch a single customer by primary key.

        Args:
            customer_id: Primary key.

        Returns:
            The matching Customer.

        Raises:
            NotFoundError: If no customer has this id.
        """
        sql = f"SELECT {_COLUMNS} FROM customers WHERE id = %s;"
        row = self.executor.query(sql, (customer_id,)).first()
        if row is None:
            raise NotFoundError("customer", customer_id)
        return self._row_to_customer(row)

    def get_reservations(self, customer: Customer) -> list[Reservation]:
        """
        Fetch the reservations belonging to a saved customer.

        Raises:
            ValueError: If the customer has never been saved.
        """
        match customer.identity:
            case Persisted(id=customer_id):
                return self.reservations.get_for_customer(customer_id)
            case _:
                raise ValueError("Unsaved customers have no reservations")

    def search(self, term: str) -> list[Customer]:
        """
        Find customers whose "first last" name contains `term`, ignoring case.

        `%` and `_` in the term keep their ILIKE meaning; they are not escaped.
        An empty term matches every customer.
        """
        sql = f"""
            SELECT {_COLUMNS}
            FROM customers
            WHERE CONCAT(first_name, ' ', last_name) ILIKE %s;
        """
        result = self.executor.query(sql, (f"%{term}%",))
        return [self._row_to_customer(r) for r in result.rows]

    def favorites(self, limit: int = FAVORITES_LIMIT) -> list[Customer]:
        """
        Customers with the most reservations, busiest first.

        Customers without reservations are never included. Equal counts are
        ordered by customer id.
        """
        sql = """
            SELECT c.id, c.first_name, c.last_name, c.phone, c.notes,
                   COUNT(*) AS reservation_count
            FROM reservations r
            JOIN customers c ON c.id = r.customer_id
            GROUP BY c.id
            ORDER BY reservation_count DESC, c.id ASC
            LIMIT %s;
        """
        result = self.executor.query(sql, (limit,))
        return [self._row_to_customer(r) for r in result.rows]

    # ── WRITE ─────────────────────────────────────────────

    def save(self, customer: Customer) -> None:
        """
        Insert a new customer or overwrite an existing one.

        A transient customer is inserted and receives its new id. A persisted
        customer has all four fields rewritten; an id with no row is updated
        silently (zero rows affected).
        """
        params = (customer.first_name, customer.last_name, customer.phone, customer.notes)
        match customer.identity:
            case Transient():
                sql = """
                    INSERT INTO customers (first_name, last_name, phone, notes)
                    VALUES (%s, %s, %s, %s)
                    RETURNING id;
                """
                row = self.executor.query(sql, params).first()
                customer.mark_persisted(row["id"])
                logger.info(f"Added customer #{customer.id} ({customer.full_name()})")
            case Persisted(id=customer_id):
                sql = """
                    UPDATE customers
                    SET first_name = %s, last_name = %s, phone = %s, notes = %s
                    WHERE id = %s;
                """
                result = self.executor.query(sql, (*params, customer_id))
                if result.rowcount > 0:
                    logger.info(f"Updated customer #{customer_id}")
                else:
                    logger.warning(f"Update of customer #{customer_id} matched no rows")

    # ── HELPERS ───────────────────────────────────────────

    @staticmethod
    def _row_to_customer(row: dict) -> Customer:
        """Convert a database row to a persisted Customer domain object."""
        return Customer(
            first_name=row["first_name"],
            last_name=row["last_name"],
            phone=row["phone"],
            notes=row["notes"],
            identity=Persisted(row["id"]),
        )
