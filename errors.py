"""
errors.py
---------
Application-level exceptions.
Each error carries an HTTP-style `status` so an outer layer can map it to a
client-facing response. Database errors are never wrapped in these; they
propagate as psycopg2 exceptions.
"""


class LunchlyError(Exception):
    """Base class for errors manufactured by the data layer."""

    status: int = 500

    def __init__(self, message: str, status: int | None = None):
        super().__init__(message)
        self.message = message
        if status is not None:
            self.status = status


class NotFoundError(LunchlyError):
    """Raised when a lookup by primary key matches no row."""

    status = 404

    def __init__(self, resource: str, resource_id):
        super().__init__(f"No such {resource}: {resource_id}")
        self.resource = resource
        self.resource_id = resource_id
