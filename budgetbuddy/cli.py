"""Command-line front end for recording and reviewing a budget."""

from __future__ import annotations

import argparse
import datetime as _dt
import sys
from collections.abc import Sequence

from budgetbuddy.database import DEFAULT_PATH, Database, DatabaseError
from budgetbuddy.ledger import (
    CATEGORIES,
    MONTHS,
    TransactionType,
    ValidationError,
    add_transaction,
    set_monthly_goal,
)
from budgetbuddy.reports import expenses_by_category, list_entries


def _month(text: str) -> str | int:
    return int(text) if text.strip().isdigit() else text


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with one sub-command per action."""
    today = _dt.date.today()
    parser = argparse.ArgumentParser(prog="budgetbuddy", description="Track income, expenses and budgets.")
    parser.add_argument("--db", default=DEFAULT_PATH, help="path of the database file")
    commands = parser.add_subparsers(dest="command", required=True)

    add = commands.add_parser("add", help="add a transaction")
    add.add_argument("amount")
    add.add_argument("--category", choices=CATEGORIES, default=CATEGORIES[0])
    add.add_argument(
        "--type",
        dest="kind",
        choices=[kind.value for kind in TransactionType],
        default=TransactionType.INCOME.value,
    )
    add.add_argument("--date", default=None, help="YYYY-MM-DD, today by default")

    goal = commands.add_parser("goal", help="set a monthly budget")
    goal.add_argument("amount")
    goal.add_argument("--month", type=_month, default=MONTHS[today.month - 1])
    goal.add_argument("--year", type=int, default=today.year)

    commands.add_parser("list", help="list transactions and goals")

    report = commands.add_parser("report", help="expenses by category for a month")
    report.add_argument("--month", type=_month, default=MONTHS[today.month - 1])
    report.add_argument("--year", type=int, default=today.year)
    return parser


def _print_entries(db: Database) -> None:
    headers = ("Date", "Category", "Type", "Amount")
    rows = [
        (entry.date, entry.category, entry.kind, f"{entry.amount:.2f}")
        for entry in list_entries(db)
    ]
    widths = [max(len(cell) for cell in column) for column in zip(headers, *rows)]
    for row in (headers, *rows):
        print("  ".join(cell.ljust(width) for cell, width in zip(row, widths)).rstrip())


def _run(db: Database, args: argparse.Namespace) -> None:
    if args.command == "add":
        add_transaction(db, args.amount, args.category, args.kind, args.date)
        print("Transaction added successfully!")
    elif args.command == "goal":
        set_monthly_goal(db, args.month, args.year, args.amount)
        print("Monthly budget saved successfully!")
    elif args.command == "list":
        _print_entries(db)
    elif args.command == "report":
        print(expenses_by_category(db, args.month, args.year).format())


def main(argv: Sequence[str] | None = None) -> int:
    """Run one command against the database; return the exit status."""
    args = build_parser().parse_args(argv)
    db = Database(args.db)
    try:
        db.open()
    except DatabaseError as exc:
        print("Database failed to open!", exc, file=sys.stderr)
        return -1
    with db:
        try:
            _run(db, args)
        except (ValidationError, DatabaseError) as exc:
            print(exc, file=sys.stderr)
            return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())