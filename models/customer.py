"""
models/customer.py
------------------
Domain model for restaurant customers.

A customer is either Transient (built in memory, never saved) or Persisted
(carries the surrogate id assigned by the database). The only transition is
Transient -> Persisted, made when the repository inserts the row.
"""

from dataclasses import dataclass, field
from typing import Optional, Union


@dataclass(frozen=True)
class Transient:
    """Identity state of a customer that has no database row yet."""


@dataclass(frozen=True)
class Persisted:
    """Identity state of a customer backed by the row with this id."""
    id: int


Identity = Union[Transient, Persisted]


@dataclass
class Customer:
    """
    Represents one patron of the restaurant.

    Attributes:
        first_name: Given name (required).
        last_name: Family name (required).
        phone: Optional contact number.
        notes: Optional free-text notes.
        identity: Transient() for new records, Persisted(id) once saved.
    """
    first_name: str
    last_name: str
    phone: Optional[str] = None
    notes: Optional[str] = None
    identity: Identity = field(default_factory=Transient)

    @property
    def id(self) -> Optional[int]:
        """Database primary key, or None while the customer is transient."""
        match self.identity:
            case Persisted(id=customer_id):
                return customer_id
            case _:
                return None

    def is_persisted(self) -> bool:
        """Returns True once the customer has a database row."""
        return isinstance(self.identity, Persisted)

    def mark_persisted(self, customer_id: int) -> None:
        """
        Record the id assigned by the database on insert.

        Raises:
            ValueError: If the customer already has an id.
        """
        if self.is_persisted():
            raise ValueError(f"Customer #{self.id} is already persisted")
        self.identity = Persisted(customer_id)

    def full_name(self) -> str:
        """First and last name joined by a single space."""
        return f"{self.first_name} {self.last_name}"

    def __str__(self) -> str:
        return self.full_name()
