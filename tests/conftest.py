# tests/conftest.py
import os, sys

import pytest

# put the project root (the folder holding config.py) first on sys.path
PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

from db.executor import QueryResult  # noqa: E402


class FakeExecutor:
    """Stands in for QueryExecutor: records every call and replays queued results."""

    def __init__(self):
        self.calls = []
        self._results = []

    def returns(self, rows=None, rowcount=None):
        rows = rows or []
        self._results.append(QueryResult(rows=rows, rowcount=len(rows) if rowcount is None else rowcount))
        return self

    def query(self, sql, params=None):
        self.calls.append((" ".join(sql.split()), params))
        if self._results:
            return self._results.pop(0)
        return QueryResult()

    @property
    def last_sql(self):
        return self.calls[-1][0]

    @property
    def last_params(self):
        return self.calls[-1][1]


def customer_row(id, first_name, last_name, phone=None, notes=None):
    return {"id": id, "first_name": first_name, "last_name": last_name, "phone": phone, "notes": notes}


@pytest.fixture
def executor():
    return FakeExecutor()
