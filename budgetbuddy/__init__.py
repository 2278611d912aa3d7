"""Personal budget tracking: SQLite storage, transactions, monthly goals and expense reports."""

__version__ = "0.1.0"
__all__ = ["__version__"]