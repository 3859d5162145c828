import logging
from unittest.mock import MagicMock

import pytest

from conftest import customer_row
from errors import NotFoundError
from models.customer import Customer, Persisted, Transient
from repositories.customer_repo import CustomerRepository


@pytest.fixture
def reservations():
    return MagicMock()


@pytest.fixture
def repo(executor, reservations):
    return CustomerRepository(executor, reservations)


# ── get_all ───────────────────────────────────────────────

def test_get_all_orders_by_last_then_first_name(repo, executor):
    executor.returns([customer_row(2, "Amy", "Adams"), customer_row(1, "Bob", "Zed")])
    customers = repo.get_all()

    assert "ORDER BY last_name, first_name" in executor.last_sql
    assert executor.last_params is None
    assert [c.full_name() for c in customers] == ["Amy Adams", "Bob Zed"]
    assert all(c.is_persisted() for c in customers)


def test_get_all_empty(repo, executor):
    assert repo.get_all() == []


# ── get ───────────────────────────────────────────────────

def test_get_returns_customer_with_requested_id(repo, executor):
    executor.returns([customer_row(5, "Ada", "Lovelace", "555-0100", "window seat")])
    customer = repo.get(5)

    assert executor.last_params == (5,)
    assert "WHERE id = %s" in executor.last_sql
    assert customer.id == 5
    assert customer.identity == Persisted(5)
    assert (customer.phone, customer.notes) == ("555-0100", "window seat")


def test_get_missing_raises_not_found(repo, executor):
    with pytest.raises(NotFoundError) as exc_info:
        repo.get(404)
    assert exc_info.value.resource_id == 404
    assert exc_info.value.status == 404
    assert "No such customer: 404" in str(exc_info.value)


# ── get_reservations ─────────────────────────────────────

def test_get_reservations_delegates_with_customer_id(repo, reservations):
    reservations.get_for_customer.return_value = ["r1", "r2"]
    customer = Customer("Ada", "Lovelace", identity=Persisted(3))

    assert repo.get_reservations(customer) == ["r1", "r2"]
    reservations.get_for_customer.assert_called_once_with(3)


def test_get_reservations_for_unsaved_customer_is_rejected(repo, reservations):
    with pytest.raises(ValueError):
        repo.get_reservations(Customer("Ada", "Lovelace"))
    reservations.get_for_customer.assert_not_called()


# ── save ──────────────────────────────────────────────────

def test_save_transient_inserts_and_assigns_id(repo, executor):
    executor.returns([{"id": 12}])
    customer = Customer("Ada", "Lovelace", phone="555-0100")

    assert repo.save(customer) is None
    assert len(executor.calls) == 1
    assert executor.last_sql.startswith("INSERT INTO customers")
    assert "RETURNING id" in executor.last_sql
    assert executor.last_params == ("Ada", "Lovelace", "555-0100", None)
    assert customer.identity == Persisted(12)


def test_save_persisted_updates_all_fields(repo, executor):
    executor.returns(rowcount=1)
    customer = Customer("Ada", "Byron", "555-0199", "moved", identity=Persisted(12))

    repo.save(customer)

    assert len(executor.calls) == 1
    assert executor.last_sql.startswith("UPDATE customers")
    assert "WHERE id = %s" in executor.last_sql
    assert executor.last_params == ("Ada", "Byron", "555-0199", "moved", 12)
    assert customer.id == 12


def test_save_twice_keeps_id_and_issues_identical_updates(repo, executor):
    customer = Customer("Ada", "Lovelace", identity=Persisted(12))
    repo.save(customer)
    repo.save(customer)

    assert executor.calls[0] == executor.calls[1]
    assert customer.id == 12


def test_save_missing_row_is_silent(repo, executor, caplog):
    executor.returns(rowcount=0)
    customer = Customer("Ghost", "Row", identity=Persisted(999))

    with caplog.at_level(logging.WARNING, logger="repositories.customer_repo"):
        repo.save(customer)

    assert "customer #999 matched no rows" in caplog.text

    assert customer.identity == Persisted(999)


def test_save_propagates_store_errors(repo):
    repo.executor = MagicMock()
    repo.executor.query.side_effect = RuntimeError("constraint violated")
    customer = Customer("Ada", "Lovelace")

    with pytest.raises(RuntimeError):
        repo.save(customer)
    assert customer.identity == Transient()


# ── search ────────────────────────────────────────────────

def test_search_wraps_term_in_wildcards(repo, executor):
    executor.returns([customer_row(1, "Ada", "Lovelace")])
    customers = repo.search("ada")

    assert "CONCAT(first_name, ' ', last_name) ILIKE %s" in executor.last_sql
    assert executor.last_params == ("%ada%",)
    assert [c.full_name() for c in customers] == ["Ada Lovelace"]


def test_search_empty_term_matches_everything(repo, executor):
    repo.search("")
    assert executor.last_params == ("%%",)


def test_search_passes_pattern_characters_through(repo, executor):
    repo.search("a_a%")
    assert executor.last_params == ("%a_a%%",)


# ── favorites ─────────────────────────────────────────────

def test_favorites_ranks_by_reservation_count(repo, executor):
    executor.returns([customer_row(1, "Ann", "A"), customer_row(2, "Ben", "B")])
    customers = repo.favorites()

    sql = executor.last_sql
    assert "JOIN customers c ON c.id = r.customer_id" in sql
    assert "LEFT JOIN" not in sql
    assert "ORDER BY reservation_count DESC, c.id ASC" in sql
    assert "LIMIT %s" in sql
    assert executor.last_params == (10,)
    assert [c.id for c in customers] == [1, 2]


def test_favorites_custom_limit(repo, executor):
    repo.favorites(limit=3)
    assert executor.last_params == (3,)
