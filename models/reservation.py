"""
models/reservation.py
---------------------
Domain model for table reservations.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


def _ordinal(day: int) -> str:
    if 11 <= day % 100 <= 13:
        suffix = "th"
    else:
        suffix = {1: "st", 2: "nd", 3: "rd"}.get(day % 10, "th")
    return f"{day}{suffix}"


@dataclass
class Reservation:
    """
    Represents a single booking.

    Attributes:
        id: Database primary key (None for new records).
        customer_id: Id of the owning customer.
        start_at: When the party is expected.
        num_guests: Party size (at least 1).
        notes: Optional free-text notes.
    """
    customer_id: int
    start_at: datetime
    num_guests: int
    notes: Optional[str] = None
    id: Optional[int] = None

    def formatted_start_at(self) -> str:
        """Human-readable start time, e.g. 'March 5th 2024, 7:30 pm'."""
        hour = self.start_at.hour % 12 or 12
        meridiem = "am" if self.start_at.hour < 12 else "pm"
        return (
            f"{self.start_at.strftime('%B')} {_ordinal(self.start_at.day)} "
            f"{self.start_at.year}, {hour}:{self.start_at.minute:02d} {meridiem}"
        )

    def __str__(self) -> str:
        guests = "guest" if self.num_guests == 1 else "guests"
        return f"{self.formatted_start_at()} | {self.num_guests} {guests}"
