"""Mini README: Derived dashboard figures built on top of the ledger.

Structure:
    * balance / savings_rate / expense_to_income_ratio - headline ratios.
    * percentage_share / format_percentage - guarded category percentages.
    * CategoryShare / category_shares - ranked breakdown rows for charts.
    * LedgerSummary / summarise - quick stats rendered on the dashboard.

Every ratio has a zero-denominator rule: the result is ``0.0`` instead of
``nan`` or ``inf`` so presentation code never receives an undefined number.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Dict, List, Union

from ..logging_utils import get_logger
from .ledger import Ledger, TransactionType

LOGGER = get_logger(__name__)


def balance(ledger: Ledger) -> float:
    """Income total minus expense total."""

    return ledger.total_by_type(TransactionType.INCOME) - ledger.total_by_type(TransactionType.EXPENSE)


def percentage_share(amount: float, total: float) -> float:
    """Return ``amount`` as a percentage of ``total``; 0 when the total is empty."""

    if not total or not math.isfinite(total):
        return 0.0
    share = amount / total * 100
    return share if math.isfinite(share) else 0.0


def format_percentage(value: float) -> str:
    """Render a percentage with one decimal place, ``0.0`` for undefined input."""

    if not math.isfinite(value):
        value = 0.0
    return f"{value:.1f}"


def savings_rate(ledger: Ledger) -> float:
    income = ledger.total_by_type(TransactionType.INCOME)
    return percentage_share(balance(ledger), income)


def expense_to_income_ratio(ledger: Ledger) -> float:
    income = ledger.total_by_type(TransactionType.INCOME)
    return percentage_share(ledger.total_by_type(TransactionType.EXPENSE), income)


@dataclass(slots=True)
class CategoryShare:
    """One row of a category breakdown with its share of the type total."""

    category: str
    amount: float
    percentage: float

    def as_dict(self) -> Dict[str, object]:
        return {
            "category": self.category,
            "amount": self.amount,
            "percentage": self.percentage,
            "percentage_label": format_percentage(self.percentage),
        }


def category_shares(ledger: Ledger, transaction_type: Union[str, TransactionType]) -> List[CategoryShare]:
    """Return the breakdown ranked by amount with guarded percentages."""

    total = ledger.total_by_type(transaction_type)
    ranked = sorted(
        ledger.category_breakdown(transaction_type).items(),
        key=lambda item: item[1],
        reverse=True,
    )
    return [
        CategoryShare(category=category, amount=amount, percentage=percentage_share(amount, total))
        for category, amount in ranked
    ]


@dataclass(slots=True)
class LedgerSummary:
    """Headline statistics for the dashboard cards."""

    total_income: float
    total_expense: float
    balance: float
    savings_rate: float
    expense_to_income_ratio: float
    transaction_count: int
    expense_category_count: int
    average_expense: float
    daily_average_expense: float

    def as_dict(self) -> Dict[str, object]:
        return {
            "total_income": self.total_income,
            "total_expense": self.total_expense,
            "balance": self.balance,
            "savings_rate": self.savings_rate,
            "savings_rate_label": format_percentage(self.savings_rate),
            "expense_to_income_ratio": self.expense_to_income_ratio,
            "expense_to_income_ratio_label": format_percentage(self.expense_to_income_ratio),
            "transaction_count": self.transaction_count,
            "expense_category_count": self.expense_category_count,
            "average_expense": self.average_expense,
            "daily_average_expense": self.daily_average_expense,
        }


def summarise(ledger: Ledger) -> LedgerSummary:
    """Compute the dashboard quick stats from the current ledger contents."""

    total_income = ledger.total_by_type(TransactionType.INCOME)
    total_expense = ledger.total_by_type(TransactionType.EXPENSE)
    expense_count = ledger.count_by_type(TransactionType.EXPENSE)
    summary = LedgerSummary(
        total_income=total_income,
        total_expense=total_expense,
        balance=total_income - total_expense,
        savings_rate=savings_rate(ledger),
        expense_to_income_ratio=expense_to_income_ratio(ledger),
        transaction_count=len(ledger),
        expense_category_count=len(ledger.category_breakdown(TransactionType.EXPENSE)),
        average_expense=total_expense / expense_count if expense_count else 0.0,
        daily_average_expense=ledger.daily_average(TransactionType.EXPENSE),
    )
    LOGGER.debug(
        "Summary -> income: %.2f expense: %.2f balance: %.2f transactions: %s",
        summary.total_income,
        summary.total_expense,
        summary.balance,
        summary.transaction_count,
    )
    return summary
