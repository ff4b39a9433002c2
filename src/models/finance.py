"""
Finance model definitions for categories and transactions.
"""
from enum import Enum
import datetime
from typing import Optional
from pydantic import BaseModel, Field

from src.models.record import OwnedRecord


class TransactionType(str, Enum):
    INCOME = "income"
    EXPENSE = "expense"


class CategoryInsert(BaseModel):
    """Fields accepted when adding a financial category."""
    name: str = Field(..., min_length=1, max_length=100)
    type: TransactionType


class CategoryUpdate(BaseModel):
    """Fields that may change on an existing category."""
    name: Optional[str] = Field(None, min_length=1, max_length=100)
    type: Optional[TransactionType] = None


class FinancialCategory(OwnedRecord, CategoryInsert):
    """A user-defined bucket for income or expenses."""


class TransactionInsert(BaseModel):
    """Fields accepted when recording a transaction."""
    date: datetime.date
    type: TransactionType
    amount: float = Field(..., gt=0)
    description: str = Field(..., min_length=1, max_length=500)
    notes: Optional[str] = None
    category_id: Optional[str] = None
    property_id: Optional[str] = None


class TransactionUpdate(BaseModel):
    """Fields that may change on an existing transaction."""
    date: Optional[datetime.date] = None
    type: Optional[TransactionType] = None
    amount: Optional[float] = Field(None, gt=0)
    description: Optional[str] = Field(None, min_length=1, max_length=500)
    notes: Optional[str] = None
    category_id: Optional[str] = None
    property_id: Optional[str] = None


class Transaction(OwnedRecord, TransactionInsert):
    """A single dated income or expense entry."""


class TransactionFilters(BaseModel):
    """
    Optional filters applied when listing transactions.

    Date bounds are inclusive.
    """
    type: Optional[TransactionType] = None
    property_id: Optional[str] = None
    category_id: Optional[str] = None
    start_date: Optional[datetime.date] = None
    end_date: Optional[datetime.date] = None


class FinancialBalance(BaseModel):
    """Income and expense totals over a set of transactions."""
    total_income: float = 0
    total_expense: float = 0
    net_balance: float = 0
    transaction_count: int = 0
    by_category: dict[str, float] = Field(default_factory=dict)
