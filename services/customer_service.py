"""
services/customer_service.py
----------------------------
Business logic for customer pages: listing, detail, search, the top-10 list,
and add/edit. Turns repository results into display text.
"""

from typing import Optional

from models.customer import Customer
from repositories.customer_repo import CustomerRepository
from utils.logger import get_logger

logger = get_logger(__name__)


class CustomerService:
    """Formats customer data for display and applies edits."""

    def __init__(self, customer_repo: CustomerRepository):
        self.customer_repo = customer_repo

    def list_customers(self) -> str:
        """All customers, alphabetically by last name."""
        return self._format_list(self.customer_repo.get_all(), "📭 No customers yet.")

    def search_customers(self, term: str) -> str:
        """Customers whose full name contains the term."""
        customers = self.customer_repo.search(term)
        return self._format_list(customers, f"🔍 No customers match \"{term}\".")

    def top_customers(self) -> str:
        """Most frequent patrons, busiest first."""
        customers = self.customer_repo.favorites()
        if not customers:
            return "📭 No reservations yet."
        lines = ["⭐ Top customers"]
        for rank, customer in enumerate(customers, start=1):
            lines.append(f"  {rank}. {customer.full_name()} (#{customer.id})")
        return "\n".join(lines)

    def customer_detail(self, customer_id: int) -> str:
        """
        One customer with contact info, notes, and reservations.

        Raises:
            NotFoundError: If the customer does not exist.
        """
        customer = self.customer_repo.get(customer_id)
        reservations = self.customer_repo.get_reservations(customer)

        lines = [f"👤 {customer.full_name()} (#{customer.id})"]
        if customer.phone:
            lines.append(f"  📞 {customer.phone}")
        if customer.notes:
            lines.append(f"  📝 {customer.notes}")
        if reservations:
            lines.append("  📅 Reservations:")
            lines.extend(f"    - {r}" for r in reservations)
        else:
            lines.append("  📅 No reservations.")
        return "\n".join(lines)

    def add_customer(
        self,
        first_name: str,
        last_name: str,
        phone: Optional[str] = None,
        notes: Optional[str] = None,
    ) -> Customer:
        """Create and save a new customer."""
        customer = Customer(first_name=first_name, last_name=last_name, phone=phone, notes=notes)
        self.customer_repo.save(customer)
        return customer

    def edit_customer(self, customer_id: int, **changes: Optional[str]) -> Customer:
        """
        Apply field changes to an existing customer and save it.
        Fields passed as None are left untouched; an empty string clears
        phone or notes.

        Raises:
            NotFoundError: If the customer does not exist.
            ValueError: If a name is set to an empty string.
        """
        customer = self.customer_repo.get(customer_id)
        for name in ("first_name", "last_name"):
            value = changes.get(name)
            if value == "":
                raise ValueError(f"{name.replace('_', ' ')} cannot be empty")
            if value is not None:
                setattr(customer, name, value)
        for name in ("phone", "notes"):
            value = changes.get(name)
            if value is not None:
                setattr(customer, name, value or None)
        self.customer_repo.save(customer)
        return customer

    # ── HELPERS ───────────────────────────────────────────

    @staticmethod
    def _format_list(customers: list[Customer], empty_message: str) -> str:
        if not customers:
            return empty_message
        return "\n".join(f"#{c.id} {c.full_name()}" for c in customers)
