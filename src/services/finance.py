"""
Finance service for categories, transactions and the homestead balance.

Typical usage:
    transactions = get_transactions(user_id, TransactionFilters(type="expense"))
    balance = calculate_balance(transactions)
    print(f"Net: {balance.net_balance:.2f}")
"""
from collections import defaultdict
from typing import List, Optional

from src.models.finance import (
    CategoryInsert,
    CategoryUpdate,
    FinancialBalance,
    FinancialCategory,
    Transaction,
    TransactionFilters,
    TransactionInsert,
    TransactionType,
    TransactionUpdate,
)
from src.services.records import UserRecordRepository

UNCATEGORIZED = "uncategorized"

categories = UserRecordRepository("financial_category", FinancialCategory)
transactions = UserRecordRepository("transaction", Transaction)


def get_categories(user_id: str) -> List[FinancialCategory]:
    """Get all financial categories for a user, sorted by name."""
    return sorted(categories.list(user_id), key=lambda c: c.name.lower())


def get_category(category_id: str, user_id: str) -> FinancialCategory:
    return categories.get(category_id, user_id)


def create_category(user_id: str, data: CategoryInsert) -> FinancialCategory:
    return categories.create(user_id, data)


def update_category(category_id: str, user_id: str, data: CategoryUpdate) -> FinancialCategory:
    return categories.update(category_id, user_id, data)


def delete_category(category_id: str, user_id: str) -> None:
    categories.delete(category_id, user_id)


def filter_transactions(
    items: List[Transaction],
    filters: Optional[TransactionFilters] = None
) -> List[Transaction]:
    """
    Apply optional filters to transactions.

    Args:
        items: Transactions to filter
        filters: Optional filters, date bounds inclusive

    Returns:
        Matching transactions, newest first
    """
    if filters:
        items = [
            t for t in items
            if (filters.type is None or t.type == filters.type)
            and (filters.property_id is None or t.property_id == filters.property_id)
            and (filters.category_id is None or t.category_id == filters.category_id)
            and (filters.start_date is None or t.date >= filters.start_date)
            and (filters.end_date is None or t.date <= filters.end_date)
        ]
    return sorted(items, key=lambda t: t.date, reverse=True)


def get_transactions(user_id: str, filters: Optional[TransactionFilters] = None) -> List[Transaction]:
    """Get a user's transactions, newest first, optionally filtered."""
    return filter_transactions(transactions.list(user_id), filters)


def get_transaction(transaction_id: str, user_id: str) -> Transaction:
    return transactions.get(transaction_id, user_id)


def create_transaction(user_id: str, data: TransactionInsert) -> Transaction:
    return transactions.create(user_id, data)


def update_transaction(transaction_id: str, user_id: str, data: TransactionUpdate) -> Transaction:
    return transactions.update(transaction_id, user_id, data)


def delete_transaction(transaction_id: str, user_id: str) -> None:
    transactions.delete(transaction_id, user_id)


def calculate_balance(items: List[Transaction]) -> FinancialBalance:
    """
    Calculate income, expense and net totals.

    Per-category totals are signed: income adds, expenses subtract.
    Transactions without a category are grouped under "uncategorized".
    """
    income = 0.0
    expense = 0.0
    by_category = defaultdict(float)

    for t in items:
        if t.type == TransactionType.INCOME:
            income += t.amount
            by_category[t.category_id or UNCATEGORIZED] += t.amount
        else:
            expense += t.amount
            by_category[t.category_id or UNCATEGORIZED] -= t.amount

    return FinancialBalance(
        total_income=round(income, 2),
        total_expense=round(expense, 2),
        net_balance=round(income - expense, 2),
        transaction_count=len(items),
        by_category={k: round(v, 2) for k, v in by_category.items()}
    )
