"""Listing the ledger and summarising a month's expenses by category."""

from __future__ import annotations

import sqlite3
from dataclasses import dataclass

from budgetbuddy.database import Database, DatabaseError
from budgetbuddy.ledger import (
    MAX_YEAR,
    MIN_YEAR,
    MONTHS,
    TransactionType,
    ValidationError,
    month_number,
)

GOAL_TYPE = "MonthlyGoal"

_ENTRIES_SQL = f"""
    SELECT date, category, type, amount FROM transactions
    UNION ALL
    SELECT
        '01-' || month || '-' || year AS date,
        month,
        '{GOAL_TYPE}',
        amount
    FROM monthly_goals
    ORDER BY date DESC
"""

_EXPENSES_SQL = """
    SELECT category, SUM(amount)
    FROM transactions
    WHERE type = :type
      AND strftime('%m', date) = :month
      AND strftime('%Y', date) = :year
    GROUP BY category
    ORDER BY category
"""


@dataclass(frozen=True)
class LedgerEntry:
    """One row of the combined transaction and goal listing."""

    date: str
    category: str
    kind: str
    amount: float


@dataclass(frozen=True)
class CategoryTotal:
    """The summed expenses of one category."""

    category: str
    amount: float


@dataclass(frozen=True)
class ExpenseReport:
    """Expenses of one month, grouped by category."""

    month: str
    year: int
    categories: tuple[CategoryTotal, ...]

    @property
    def title(self) -> str:
        return f"Expenses in {self.month} {self.year}"

    def total(self) -> float:
        """The sum of every category's expenses."""
        return sum(item.amount for item in self.categories)

    def format(self) -> str:
        """Render the report as text, with each category's share of the total."""
        lines = [self.title]
        if not self.categories:
            lines.append("No expenses recorded.")
            return "\n".join(lines)
        total = self.total()
        width = max(len("Total"), *(len(item.category) for item in self.categories))
        for item in self.categories:
            share = item.amount / total * 100 if total else 0.0
            lines.append(f"{item.category:<{width}}  {item.amount:>12.2f}  {share:5.1f}%")
        lines.append(f"{'Total':<{width}}  {total:>12.2f}")
        return "\n".join(lines)


def list_entries(db: Database) -> list[LedgerEntry]:
    """Return all transactions and monthly goals, newest date text first."""
    try:
        rows = db.connection.execute(_ENTRIES_SQL).fetchall()
    except sqlite3.Error as exc:
        raise DatabaseError(f"SQL error: {exc}") from exc
    return [
        LedgerEntry(date=str(date), category=str(category), kind=str(kind), amount=float(amount))
        for date, category, kind, amount in rows
    ]


def expenses_by_category(db: Database, month: str | int, year: int) -> ExpenseReport:
    """Sum the expenses of the given month and year for each category."""
    number = month_number(month)
    if not MIN_YEAR <= year <= MAX_YEAR:
        raise ValidationError(f"Year must be between {MIN_YEAR} and {MAX_YEAR}.")
    try:
        rows = db.connection.execute(
            _EXPENSES_SQL,
            {
                "type": TransactionType.EXPENSE.value,
                "month": f"{number:02d}",
                "year": str(year),
            },
        ).fetchall()
    except sqlite3.Error as exc:
        raise DatabaseError(f"Chart query failed: {exc}") from exc
    categories = tuple(
        CategoryTotal(category=str(category), amount=float(amount))
        for category, amount in rows
    )
    return ExpenseReport(month=MONTHS[number - 1], year=year, categories=categories)