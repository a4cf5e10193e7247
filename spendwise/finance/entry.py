"""Mini README: Validation of raw user input before it becomes a Transaction.

Structure:
    * InvalidTransactionError - ``ValueError`` naming the rejected field.
    * build_transaction - checks form-style input and constructs the record.
    * next_transaction_id - millisecond identifiers kept unique per ledger.
    * remove_by_text - deletes by an id typed into a URL or command line.

``Transaction`` itself turns garbage amounts into ``nan`` rather than raising.
Entry points (web form, CLI) go through ``build_transaction`` so bad input is
reported to the user immediately instead of surfacing later inside a total.
"""

from __future__ import annotations

import math
import time
from typing import Optional, Union

from ..logging_utils import get_logger
from .ledger import Ledger, Transaction, TransactionId, TransactionType, parse_date, parse_identifier

LOGGER = get_logger(__name__)


class InvalidTransactionError(ValueError):
    """Raised when user supplied transaction input cannot be accepted."""

    def __init__(self, field: str, message: str) -> None:
        super().__init__(message)
        self.field = field


def _validate_amount(amount: object) -> float:
    if amount is None or (isinstance(amount, str) and not amount.strip()):
        raise InvalidTransactionError("amount", "Amount is required.")
    if isinstance(amount, bool):
        raise InvalidTransactionError("amount", f"Amount must be a number, got {amount!r}.")
    try:
        value = float(amount.strip() if isinstance(amount, str) else amount)  # type: ignore[arg-type]
    except (TypeError, ValueError) as error:
        raise InvalidTransactionError("amount", f"Amount must be a number, got {amount!r}.") from error
    if not math.isfinite(value):
        raise InvalidTransactionError("amount", "Amount must be a finite number.")
    if value < 0:
        raise InvalidTransactionError(
            "amount", "Amount must not be negative; choose income or expense instead."
        )
    return value


def build_transaction(
    transaction_id: TransactionId,
    *,
    occurred_on: object,
    category: Optional[str],
    amount: object,
    description: Optional[str] = "",
    transaction_type: Union[str, TransactionType],
) -> Transaction:
    """Validate each field and return a ready-to-store transaction."""

    value = _validate_amount(amount)
    try:
        day = parse_date(occurred_on)
    except ValueError as error:
        raise InvalidTransactionError("date", f"Invalid date: {occurred_on!r}.") from error
    try:
        kind = TransactionType.from_str(transaction_type)
    except ValueError as error:
        raise InvalidTransactionError("type", str(error)) from error
    if category is None or not str(category).strip():
        raise InvalidTransactionError("category", "Category is required.")

    return Transaction(
        transaction_id=transaction_id,
        occurred_on=day,
        category=str(category).strip(),
        amount=value,
        description=(description or "").strip(),
        transaction_type=kind,
    )


def next_transaction_id(ledger: Ledger, now: Optional[float] = None) -> int:
    """Return a millisecond timestamp id greater than any integer id already stored."""

    candidate = int((time.time() if now is None else now) * 1000)
    existing = [
        transaction.transaction_id
        for transaction in ledger
        if isinstance(transaction.transaction_id, int) and not isinstance(transaction.transaction_id, bool)
    ]
    if existing and candidate <= max(existing):
        candidate = max(existing) + 1
        LOGGER.debug("Timestamp id collided; bumped to %s", candidate)
    return candidate


def remove_by_text(ledger: Ledger, raw: str) -> int:
    """Remove transactions whose id matches ``raw``, trying the integer form first."""

    identifier = parse_identifier(raw)
    removed = ledger.remove(identifier)
    if not removed and identifier != raw:
        removed = ledger.remove(raw)
    return removed
