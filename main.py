"""
main.py
-------
Command-line entry point for the Lunchly customer database.

Responsibilities:
    - Create the database connection pool and wire up the repositories.
    - Run one command against the customers data.
    - Close the pool on the way out.

Usage:
    python main.py init-db
    python main.py list
    python main.py show 3
    python main.py search ada
    python main.py top
    python main.py add Ada Lovelace --phone 555-0100 --notes "Window seat"
    python main.py edit 3 --notes "Prefers the patio"
    python main.py edit 3 --phone ""          # clears the phone number
"""

import argparse
import sys

from db.connection import close_pool, create_pool
from db.executor import QueryExecutor
from db.init_db import create_tables
from errors import NotFoundError
from repositories.customer_repo import CustomerRepository
from repositories.reservation_repo import ReservationRepository
from services.customer_service import CustomerService
from utils.logger import get_logger

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Define the CLI commands and their arguments."""
    parser = argparse.ArgumentParser(prog="lunchly", description="Lunchly customer database")
    commands = parser.add_subparsers(dest="command", required=True)

    commands.add_parser("init-db", help="create the tables")
    commands.add_parser("list", help="list all customers")
    commands.add_parser("top", help="show the 10 most frequent customers")

    show = commands.add_parser("show", help="show one customer and their reservations")
    show.add_argument("customer_id", type=int)

    search = commands.add_parser("search", help="search customers by name")
    search.add_argument("term", nargs="?", default="")

    add = commands.add_parser("add", help="add a customer")
    add.add_argument("first_name")
    add.add_argument("last_name")
    add.add_argument("--phone")
    add.add_argument("--notes")

    edit = commands.add_parser("edit", help="edit a customer")
    edit.add_argument("customer_id", type=int)
    edit.add_argument("--first-name")
    edit.add_argument("--last-name")
    edit.add_argument("--phone")
    edit.add_argument("--notes")

    return parser


def run(args: argparse.Namespace, executor: QueryExecutor) -> str:
    """Execute one parsed command and return the text to print."""
    if args.command == "init-db":
        create_tables(executor)
        return "✅ Database schema created successfully."

    service = CustomerService(CustomerRepository(executor, ReservationRepository(executor)))

    if args.command == "list":
        return service.list_customers()
    if args.command == "top":
        return service.top_customers()
    if args.command == "show":
        return service.customer_detail(args.customer_id)
    if args.command == "search":
        return service.search_customers(args.term)
    if args.command == "add":
        customer = service.add_customer(args.first_name, args.last_name, args.phone, args.notes)
        return f"✅ Added {customer.full_name()} (#{customer.id})"
    if args.command == "edit":
        customer = service.edit_customer(
            args.customer_id,
            first_name=args.first_name,
            last_name=args.last_name,
            phone=args.phone,
            notes=args.notes,
        )
        return f"✏️ Updated {customer.full_name()} (#{customer.id})"
    raise ValueError(f"Unknown command: {args.command}")


def main(argv: list[str] | None = None) -> int:
    """Parse arguments, run the command, and return the exit status."""
    args = build_parser().parse_args(argv)

    # ── 1. Database setup ─────────────────────────────────
    db_pool = create_pool()
    try:
        # ── 2. Run the command ────────────────────────────
        print(run(args, QueryExecutor(db_pool)))
        return 0
    except NotFoundError as e:
        print(f"⚠️ {e.message}", file=sys.stderr)
        return 1
    except ValueError as e:
        print(f"⚠️ {e}", file=sys.stderr)
        return 1
    finally:
        # ── 3. Cleanup on shutdown ────────────────────────
        close_pool(db_pool)


if __name__ == "__main__":
    sys.exit(main())
