"""Mini README: In-memory ledger of income and expense transactions.

Structure:
    * TransactionType - enum representing income versus expense entries.
    * Transaction - frozen dataclass describing one recorded money movement.
    * Ledger - owns the transaction list and answers every aggregate query.

The ledger holds no derived state. Totals, breakdowns, rankings, monthly
buckets and averages are recomputed from the live list on each call, so a
mutation can never leave a stale figure behind. Identifier uniqueness is the
caller's responsibility; ``add`` stores whatever it is handed.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import date, datetime
from enum import Enum
from typing import Dict, Iterable, Iterator, List, Mapping, Optional, Tuple, Union

from ..logging_utils import get_logger

LOGGER = get_logger(__name__)

TransactionId = Union[int, str]

# Persisted field names, in the order records are written.
RECORD_FIELDS = ("id", "date", "category", "amount", "description", "type")


class TransactionType(str, Enum):
    """Enumerate the supported transaction directions."""

    INCOME = "income"
    EXPENSE = "expense"

    @classmethod
    def from_str(cls, value: Union[str, "TransactionType"]) -> "TransactionType":
        """Coerce arbitrary casing into a valid transaction type."""

        if isinstance(value, cls):
            return value
        try:
            normalised = value.strip().lower()
            return cls(normalised)
        except (ValueError, AttributeError) as error:
            raise ValueError(f"Unsupported transaction type: {value}") from error


def parse_amount(value: object) -> float:
    """Parse a magnitude, returning ``nan`` for anything that is not a non-negative number."""

    if isinstance(value, bool):
        return math.nan
    try:
        amount = float(value.strip() if isinstance(value, str) else value)
    except (TypeError, ValueError):
        return math.nan
    if amount < 0:
        return math.nan
    return amount


def parse_date(value: object) -> date:
    """Parse ISO formatted strings or date objects safely."""

    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        return date.fromisoformat(value.strip()[:10])
    raise ValueError("Dates must be provided as ISO strings or date/datetime instances.")


def parse_identifier(raw: str) -> TransactionId:
    """Turn a textual id from a URL or command line into the stored form.

    Generated ids are integers, so anything that reads as one (sign included)
    becomes an ``int``; other text is returned stripped.
    """

    stripped = raw.strip()
    if stripped.lstrip("-").isdigit():
        return int(stripped)
    return stripped


@dataclass(frozen=True, slots=True)
class Transaction:
    """Represent one income or expense entry.

    ``amount`` is always a magnitude; direction lives in ``transaction_type``.
    Amounts are parsed here, once, so aggregation never has to re-validate.
    """

    transaction_id: TransactionId
    occurred_on: date
    category: str
    amount: float
    description: str
    transaction_type: TransactionType

    def __post_init__(self) -> None:
        object.__setattr__(self, "occurred_on", parse_date(self.occurred_on))
        object.__setattr__(self, "amount", parse_amount(self.amount))
        object.__setattr__(self, "category", str(self.category))
        object.__setattr__(self, "description", "" if self.description is None else str(self.description))
        object.__setattr__(self, "transaction_type", TransactionType.from_str(self.transaction_type))

    @property
    def is_valid(self) -> bool:
        """True when the parsed amount is a finite, non-negative number."""

        return math.isfinite(self.amount)

    @property
    def month_key(self) -> str:
        """Zero padded ``YYYY-MM`` bucket the transaction belongs to."""

        return f"{self.occurred_on.year:04d}-{self.occurred_on.month:02d}"

    def as_record(self) -> Dict[str, object]:
        """Export the transaction using the persisted field names."""

        values = (
            self.transaction_id,
            self.occurred_on.isoformat(),
            self.category,
            self.amount,
            self.description,
            self.transaction_type.value,
        )
        return dict(zip(RECORD_FIELDS, values))

    @classmethod
    def from_record(cls, record: Mapping[str, object]) -> "Transaction":
        """Rebuild a transaction from a persisted record."""

        missing = [name for name in RECORD_FIELDS if name != "description" and name not in record]
        if missing:
            raise ValueError(f"Transaction record is missing fields: {', '.join(missing)}")
        return cls(
            transaction_id=record["id"],  # type: ignore[arg-type]
            occurred_on=record["date"],  # type: ignore[arg-type]
            category=record["category"],  # type: ignore[arg-type]
            amount=record["amount"],  # type: ignore[arg-type]
            description=record.get("description", ""),  # type: ignore[arg-type]
            transaction_type=record["type"],  # type: ignore[arg-type]
        )


class Ledger:
    """Own a list of transactions and compute aggregates on demand."""

    def __init__(self, transactions: Optional[Iterable[Transaction]] = None) -> None:
        self._transactions: List[Transaction] = list(transactions or [])
        LOGGER.debug("Ledger initialised with %s transactions", len(self._transactions))

    @classmethod
    def from_records(cls, records: Iterable[Mapping[str, object]]) -> "Ledger":
        """Reconstruct a ledger from serialised transaction records."""

        return cls(Transaction.from_record(record) for record in records)

    def to_records(self) -> List[Dict[str, object]]:
        """Serialise every transaction in stored order."""

        return [transaction.as_record() for transaction in self._transactions]

    @property
    def transactions(self) -> Tuple[Transaction, ...]:
        return tuple(self._transactions)

    def __len__(self) -> int:
        return len(self._transactions)

    def __iter__(self) -> Iterator[Transaction]:
        return iter(tuple(self._transactions))

    # Mutation -------------------------------------------------------------

    def add(self, transaction: Transaction) -> None:
        """Append a transaction without checking for duplicate identifiers."""

        self._transactions.append(transaction)
        LOGGER.info(
            "Added %s %s of %.2f in %s",
            transaction.transaction_type.value,
            transaction.transaction_id,
            transaction.amount,
            transaction.category,
        )

    def remove(self, transaction_id: TransactionId) -> int:
        """Drop every transaction with the identifier and return how many went.

        Removing an unknown identifier is a no-op.
        """

        before = len(self._transactions)
        self._transactions = [
            transaction for transaction in self._transactions if transaction.transaction_id != transaction_id
        ]
        removed = before - len(self._transactions)
        if removed:
            LOGGER.info("Removed %s transaction(s) with id %s", removed, transaction_id)
        else:
            LOGGER.debug("No transaction with id %s to remove", transaction_id)
        return removed

    # Queries --------------------------------------------------------------

    def _of_type(self, transaction_type: Union[str, TransactionType]) -> List[Transaction]:
        wanted = TransactionType.from_str(transaction_type)
        return [transaction for transaction in self._transactions if transaction.transaction_type is wanted]

    def transactions_in_range(self, start: object, end: object) -> List[Transaction]:
        """Return transactions dated within ``[start, end]`` in stored order."""

        start_date, end_date = parse_date(start), parse_date(end)
        return [
            transaction
            for transaction in self._transactions
            if start_date <= transaction.occurred_on <= end_date
        ]

    def total_by_type(self, transaction_type: Union[str, TransactionType]) -> float:
        return sum((transaction.amount for transaction in self._of_type(transaction_type)), 0.0)

    def count_by_type(self, transaction_type: Union[str, TransactionType]) -> int:
        return len(self._of_type(transaction_type))

    def category_total(
        self,
        category: str,
        transaction_type: Union[str, TransactionType] = TransactionType.EXPENSE,
    ) -> float:
        """Sum amounts matching both the category and the type."""

        return sum(
            (
                transaction.amount
                for transaction in self._of_type(transaction_type)
                if transaction.category == category
            ),
            0.0,
        )

    def category_breakdown(
        self, transaction_type: Union[str, TransactionType] = TransactionType.EXPENSE
    ) -> Dict[str, float]:
        """Map each category with at least one matching transaction to its total.

        Keys appear in first-encountered order; callers needing a ranking
        should use :meth:`top_categories` instead of relying on it.
        """

        breakdown: Dict[str, float] = {}
        for transaction in self._of_type(transaction_type):
            breakdown[transaction.category] = breakdown.get(transaction.category, 0.0) + transaction.amount
        return breakdown

    def top_categories(
        self, transaction_type: Union[str, TransactionType], limit: int
    ) -> List[Tuple[str, float]]:
        """Return the largest categories, ties kept in breakdown order."""

        if limit <= 0:
            return []
        ranked = sorted(
            self.category_breakdown(transaction_type).items(),
            key=lambda item: item[1],
            reverse=True,
        )
        return ranked[:limit]

    def monthly_data(self) -> Dict[str, Dict[str, float]]:
        """Bucket every transaction into ``YYYY-MM`` income/expense sums."""

        months: Dict[str, Dict[str, float]] = {}
        for transaction in self._transactions:
            bucket = months.setdefault(
                transaction.month_key,
                {TransactionType.INCOME.value: 0.0, TransactionType.EXPENSE.value: 0.0},
            )
            bucket[transaction.transaction_type.value] += transaction.amount
        return months

    def daily_average(self, transaction_type: Union[str, TransactionType]) -> float:
        """Average amount per distinct calendar day carrying the type; 0 without data."""

        matching = self._of_type(transaction_type)
        if not matching:
            return 0.0
        days = {transaction.occurred_on for transaction in matching}
        return sum((transaction.amount for transaction in matching), 0.0) / len(days)

    def categories(self, transaction_type: Optional[Union[str, TransactionType]] = None) -> List[str]:
        """Distinct categories in first-encountered order, optionally per type."""

        source = self._transactions if transaction_type is None else self._of_type(transaction_type)
        return list(dict.fromkeys(transaction.category for transaction in source))

    def list_transactions(
        self,
        transaction_type: Optional[Union[str, TransactionType]] = None,
        category: Optional[str] = None,
    ) -> List[Transaction]:
        """Return the history view: optional filters, most recent date first.

        ``None`` or ``"all"`` disables a filter. Same-day entries keep their
        stored order.
        """

        if transaction_type is None or transaction_type == "all":
            selected = list(self._transactions)
        else:
            selected = self._of_type(transaction_type)
        if category is not None and category != "all":
            selected = [transaction for transaction in selected if transaction.category == category]
        return sorted(selected, key=lambda transaction: transaction.occurred_on, reverse=True)
