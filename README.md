# budgetbuddy

A small personal budget tracker. It keeps records in a local SQLite database
and lets you:

- record income and expense transactions by category and date,
- set a budget goal for a month and year (setting it again replaces it),
- list every transaction and monthly goal together,
- see how much you spent in each category in a chosen month.

## Installation

```
pip install .
```

To run the test suite as well:

```
pip install ".[test]"
pytest
```

## Command line

The package installs a `budgetbuddy` command. It opens the database (creating
the file and its tables if needed) and runs one action:

```
budgetbuddy --help
```

The global option `--db PATH` chooses the database file; the default is
`budgetbuddy.db` in the current directory.

- `budgetbuddy add AMOUNT [--category C] [--type T] [--date YYYY-MM-DD]`
  adds a transaction. Categories are `Food`, `Fuel`, `Rent`, `Shopping`,
  `Salary` and `Misc` (default `Food`); the type is `Income` (default) or
  `Expense`; the date defaults to today.
- `budgetbuddy goal AMOUNT [--month M] [--year Y]` stores the budget for a
  month, replacing any earlier one. The month may be a name or a number from
  1 to 12; month and year default to the current ones.
- `budgetbuddy list` prints all transactions and goals as a table with the
  columns Date, Category, Type and Amount.
- `budgetbuddy report [--month M] [--year Y]` prints the expenses of a month
  per category, each with its share of the total, followed by the total.

Rejected input or a failing statement prints the message to standard error
and ends with a non-zero exit status.

## Using it as a library

- `budgetbuddy.database.Database(path)`: a connection to the SQLite file.
  `open()` creates the `users`, `transactions`, `monthly_goals` and `alerts`
  tables if they are missing; `close()` closes it; `is_open` and `connection`
  are properties. It works as a context manager. `DatabaseError` is raised if
  the file cannot be opened, or if `connection` is used while closed.
- `budgetbuddy.ledger.parse_amount(text)`: turns user input into an amount.
  Empty text, text that is not a number, an amount not greater than zero,
  more than two decimal places or more than 1000000 raise `ValidationError`.
- `budgetbuddy.ledger.month_number(month)`: 1 to 12 for an English month name
  (any case) or a month number.
- `budgetbuddy.ledger.add_transaction(db, amount_text, category, kind, date, user_id)`:
  validates and stores one entry and returns a `Transaction`. `kind` is a
  `TransactionType` or its value; `date` is a `datetime.date`, an ISO date
  string or `None` for today.
- `budgetbuddy.ledger.set_monthly_goal(db, month, year, amount_text, user_id)`:
  stores or replaces a month's budget and returns a `MonthlyGoal`. Years run
  from 2000 to 2100.
- `budgetbuddy.reports.list_entries(db)`: returns transactions and goals as
  `LedgerEntry` records, sorted by their date text in descending order. Goal
  rows carry the type `MonthlyGoal`, the month name as category and a date of
  the form `01-May-2024`.
- `budgetbuddy.reports.expenses_by_category(db, month, year)`: returns an
  `ExpenseReport` with one `CategoryTotal` per category, in alphabetical
  order. `total()` sums it and `format()` renders it as text.

A short session:

```python
from budgetbuddy.database import Database
from budgetbuddy.ledger import add_transaction, set_monthly_goal
from budgetbuddy.reports import expenses_by_category, list_entries

with Database("budgetbuddy.db") as db:
    add_transaction(db, "12.50", "Food", "Expense", "2024-05-03")
    set_monthly_goal(db, "May", 2024, "500")
    for entry in list_entries(db):
        print(entry)
    print(expenses_by_category(db, "May", 2024).format())
```

## What it does not do

- There are no user accounts: no sign-up, log-in or password reset. Every
  record belongs to user id 1 unless another `user_id` is passed, and the
  `users` table is created but never filled.
- Nothing writes to the `alerts` table; spending beyond a goal is not
  reported.
- There is no graphical interface or chart; the monthly report is plain text.