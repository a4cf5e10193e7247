"""Mini README: Ledger and analytics engine for Spendwise.

``ledger`` owns transactions and computes every aggregate on demand,
``analytics`` derives the dashboard ratios from those aggregates, and
``entry`` validates raw input before a transaction is constructed.
"""

from .analytics import (
    CategoryShare,
    LedgerSummary,
    balance,
    category_shares,
    expense_to_income_ratio,
    format_percentage,
    percentage_share,
    savings_rate,
    summarise,
)
from .entry import InvalidTransactionError, build_transaction, next_transaction_id, remove_by_text
from .ledger import Ledger, Transaction, TransactionType

__all__ = [
    "CategoryShare",
    "InvalidTransactionError",
    "Ledger",
    "LedgerSummary",
    "Transaction",
    "TransactionType",
    "balance",
    "build_transaction",
    "category_shares",
    "expense_to_income_ratio",
    "format_percentage",
    "next_transaction_id",
    "percentage_share",
    "remove_by_text",
    "savings_rate",
    "summarise",
]
