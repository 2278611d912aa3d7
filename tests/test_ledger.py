import datetime as dt

import pytest

from budgetbuddy.database import Database, DatabaseError
from budgetbuddy.ledger import (
    CATEGORIES,
    MONTHS,
    MonthlyGoal,
    Transaction,
    TransactionType,
    ValidationError,
    add_transaction,
    month_number,
    parse_amount,
    set_monthly_goal,
)


@pytest.fixture
def db():
    with Database(":memory:") as database:
        yield database


def test_parse_amount_plain_values():
    assert parse_amount("42") == 42.0
    assert parse_amount("19.99") == 19.99
    assert parse_amount(" 7.5 ") == 7.5


def test_parse_amount_bounds_are_inclusive():
    assert parse_amount("0.01") == 0.01
    assert parse_amount("1000000") == 1000000.0


def test_parse_amount_empty_message():
    with pytest.raises(ValidationError, match="Please enter an amount."):
        parse_amount("")


@pytest.mark.parametrize("text", ["0", "-5", "0.00"])
def test_parse_amount_rejects_non_positive(text):
    with pytest.raises(ValidationError, match="Amount must be greater than zero."):
        parse_amount(text)


@pytest.mark.parametrize("text", ["abc", "1e3", "1,5", "1.2.3"])
def test_parse_amount_rejects_non_numbers(text):
    with pytest.raises(ValidationError):
        parse_amount(text)


def test_parse_amount_rejects_too_many_decimals():
    with pytest.raises(ValidationError):
        parse_amount("1.234")


def test_parse_amount_rejects_above_maximum():
    with pytest.raises(ValidationError):
        parse_amount("1000000.01")


def test_month_number_by_name_and_number():
    assert [month_number(name) for name in MONTHS] == list(range(1, 13))
    assert month_number("march") == month_number("March")
    assert month_number(12) == 12


@pytest.mark.parametrize("month", ["Smarch", "", 0, 13])
def test_month_number_rejects_unknown(month):
    with pytest.raises(ValidationError):
        month_number(month)


def test_add_transaction_stores_row(db):
    day = dt.date(2024, 3, 15)
    txn = add_transaction(db, "25.50", "Food", TransactionType.EXPENSE, day)
    assert isinstance(txn, Transaction)
    assert txn.amount == 25.5
    assert txn.user_id == 1
    row = db.connection.execute(
        "SELECT id, user_id, type, category, amount, date FROM transactions"
    ).fetchone()
    assert row == (txn.id, 1, "Expense", "Food", 25.5, "2024-03-15")


def test_add_transaction_accepts_string_kind_and_iso_date(db):
    txn = add_transaction(db, "100", "Salary", "Income", "2024-01-31", user_id=3)
    assert txn.kind is TransactionType.INCOME
    assert txn.date == dt.date(2024, 1, 31)
    assert txn.user_id == 3


def test_add_transaction_defaults_to_today(db):
    txn = add_transaction(db, "5", "Misc", "Expense")
    assert txn.date == dt.date.today()
    stored = db.connection.execute("SELECT date FROM transactions").fetchone()[0]
    assert stored == dt.date.today().isoformat()


def test_add_transaction_ids_increase(db):
    first = add_transaction(db, "1", "Fuel", "Expense", "2024-02-01")
    second = add_transaction(db, "2", "Rent", "Expense", "2024-02-02")
    assert second.id > first.id


def test_add_transaction_validation_stores_nothing(db):
    with pytest.raises(ValidationError, match="Please enter an amount."):
        add_transaction(db, "", "Food", "Expense", "2024-01-01")
    with pytest.raises(ValidationError):
        add_transaction(db, "3", "Holidays", "Expense", "2024-01-01")
    with pytest.raises(ValidationError):
        add_transaction(db, "3", "Food", "Loan", "2024-01-01")
    with pytest.raises(ValidationError):
        add_transaction(db, "3", "Food", "Expense", "not-a-date")
    count = db.connection.execute("SELECT COUNT(*) FROM transactions").fetchone()[0]
    assert count == 0


def test_add_transaction_on_closed_database_raises():
    with pytest.raises(DatabaseError):
        add_transaction(Database(":memory:"), "3", "Food", "Expense", "2024-01-01")


def test_categories_match_form(db):
    assert CATEGORIES == ("Food", "Fuel", "Rent", "Shopping", "Salary", "Misc")
    stored = [
        add_transaction(db, "1", category, "Expense", "2024-01-01").category
        for category in CATEGORIES
    ]
    assert stored == list(CATEGORIES)
    rows = db.connection.execute(
        "SELECT category FROM transactions ORDER BY id"
    ).fetchall()
    assert [name for (name,) in rows] == list(CATEGORIES)


def test_set_monthly_goal_stores_canonical_month(db):
    goal = set_monthly_goal(db, "april", 2024, "500")
    assert goal == MonthlyGoal(user_id=1, month="April", year=2024, amount=500.0)
    row = db.connection.execute(
        "SELECT user_id, month, year, amount FROM monthly_goals"
    ).fetchone()
    assert row == (1, "April", 2024, 500.0)


def test_set_monthly_goal_replaces_existing(db):
    set_monthly_goal(db, "May", 2024, "300")
    set_monthly_goal(db, 5, 2024, "450.25")
    rows = db.connection.execute(
        "SELECT month, year, amount FROM monthly_goals"
    ).fetchall()
    assert rows == [("May", 2024, 450.25)]


def test_set_monthly_goal_separate_years_and_users(db):
    set_monthly_goal(db, "June", 2024, "10")
    set_monthly_goal(db, "June", 2025, "20")
    set_monthly_goal(db, "June", 2024, "30", user_id=2)
    count = db.connection.execute("SELECT COUNT(*) FROM monthly_goals").fetchone()[0]
    assert count == 3


def test_set_monthly_goal_messages(db):
    with pytest.raises(ValidationError, match="Please enter a budget amount."):
        set_monthly_goal(db, "July", 2024, "")
    with pytest.raises(ValidationError, match="Budget must be greater than 0."):
        set_monthly_goal(db, "July", 2024, "0")


@pytest.mark.parametrize("year", [1999, 2101])
def test_set_monthly_goal_year_range(db, year):
    with pytest.raises(ValidationError):
        set_monthly_goal(db, "July", year, "10")


def test_set_monthly_goal_year_limits_accepted(db):
    assert set_monthly_goal(db, "July", 2000, "10").year == 2000
    assert set_monthly_goal(db, "July", 2100, "10").year == 2100