"""Recording transactions and monthly budget goals."""

from __future__ import annotations

import datetime as _dt
import re
import sqlite3
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum

from budgetbuddy.database import Database, DatabaseError

MONTHS = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)
CATEGORIES = ("Food", "Fuel", "Rent", "Shopping", "Salary", "Misc")

MIN_AMOUNT = Decimal("0.01")
MAX_AMOUNT = Decimal("1000000")
MAX_DECIMALS = 2
MIN_YEAR = 2000
MAX_YEAR = 2100
DEFAULT_USER_ID = 1

_NUMBER = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)")


class ValidationError(ValueError):
    """Raised when user input is rejected."""


class TransactionType(str, Enum):
    INCOME = "Income"
    EXPENSE = "Expense"


@dataclass(frozen=True)
class Transaction:
    id: int
    user_id: int
    kind: TransactionType
    category: str
    amount: float
    date: _dt.date


@dataclass(frozen=True)
class MonthlyGoal:
    user_id: int
    month: str
    year: int
    amount: float


def _parse(text: str, empty_message: str, nonpositive_message: str) -> float:
    cleaned = text.strip()
    if not cleaned:
        raise ValidationError(empty_message)
    if not _NUMBER.fullmatch(cleaned):
        raise ValidationError(f"{cleaned!r} is not a number.")
    value = Decimal(cleaned)
    if value <= 0:
        raise ValidationError(nonpositive_message)
    exponent = value.as_tuple().exponent
    if isinstance(exponent, int) and -exponent > MAX_DECIMALS and value != value.quantize(MIN_AMOUNT):
        raise ValidationError(f"At most {MAX_DECIMALS} decimal places are allowed.")
    if value > MAX_AMOUNT:
        raise ValidationError(f"Amount must not exceed {MAX_AMOUNT}.")
    return float(value)


def parse_amount(text: str) -> float:
    """Parse a positive money amount with at most two decimals."""
    return _parse(text, "Please enter an amount.", "Amount must be greater than zero.")


def month_number(month: str | int) -> int:
    """Return 1-12 for a month name (any case) or month number."""
    if isinstance(month, int) and not isinstance(month, bool):
        if 1 <= month <= 12:
            return month
        raise ValidationError(f"Month number out of range: {month}")
    if isinstance(month, str):
        wanted = month.strip().lower()
        for number, name in enumerate(MONTHS, start=1):
            if name.lower() == wanted:
                return number
    raise ValidationError(f"Unknown month: {month!r}")


def _to_date(value: _dt.date | str | None) -> _dt.date:
    if value is None:
        return _dt.date.today()
    if isinstance(value, _dt.datetime):
        return value.date()
    if isinstance(value, _dt.date):
        return value
    try:
        return _dt.date.fromisoformat(value)
    except (TypeError, ValueError) as exc:
        raise ValidationError(f"Invalid date: {value!r}") from exc


def add_transaction(
    db: Database,
    amount_text: str,
    category: str,
    kind: TransactionType | str,
    date: _dt.date | str | None = None,
    user_id: int = DEFAULT_USER_ID,
) -> Transaction:
    """Validate and store one income or expense record."""
    amount = parse_amount(amount_text)
    if category not in CATEGORIES:
        raise ValidationError(f"Unknown category: {category!r}")
    try:
        kind = TransactionType(kind)
    except ValueError as exc:
        raise ValidationError(f"Unknown transaction type: {kind!r}") from exc
    day = _to_date(date)
    conn = db.connection
    try:
        with conn:
            cursor = conn.execute(
                "INSERT INTO transactions (user_id, type, category, amount, date) "
                "VALUES (:user_id, :type, :category, :amount, :date)",
                {
                    "user_id": user_id,
                    "type": kind.value,
                    "category": category,
                    "amount": amount,
                    "date": day.isoformat(),
                },
            )
    except sqlite3.Error as exc:
        raise DatabaseError(f"Failed to add transaction: {exc}") from exc
    return Transaction(
        id=cursor.lastrowid,
        user_id=user_id,
        kind=kind,
        category=category,
        amount=amount,
        date=day,
    )


def set_monthly_goal(
    db: Database,
    month: str | int,
    year: int,
    amount_text: str,
    user_id: int = DEFAULT_USER_ID,
) -> MonthlyGoal:
    """Store the budget for a month, replacing any earlier one."""
    name = MONTHS[month_number(month) - 1]
    if not MIN_YEAR <= year <= MAX_YEAR:
        raise ValidationError(f"Year must be between {MIN_YEAR} and {MAX_YEAR}.")
    amount = _parse(
        amount_text, "Please enter a budget amount.", "Budget must be greater than 0."
    )
    conn = db.connection
    try:
        with conn:
            conn.execute(
                "INSERT INTO monthly_goals (user_id, month, year, amount) "
                "VALUES (:user_id, :month, :year, :amount) "
                "ON CONFLICT(user_id, month, year) "
                "DO UPDATE SET amount = excluded.amount",
                {"user_id": user_id, "month": name, "year": year, "amount": amount},
            )
    except sqlite3.Error as exc:
        raise DatabaseError(f"Error: {exc}") from exc
    return MonthlyGoal(user_id=user_id, month=name, year=year, amount=amount)