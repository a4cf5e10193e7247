"""Mini README: JSON file persistence for the transaction list.

Structure:
    * StorageError - raised when the store file cannot be parsed or written.
    * TransactionStore - key-value JSON file; one key holds the record list.

The ledger never touches disk. Callers ``load`` a ledger at startup and
``save`` the complete list after each mutation, mirroring a browser
key-value store where a single entry carries the serialised transactions.
Other keys in the file are preserved on save.

Records whose amount does not parse to a finite, non-negative number are
skipped on load with a warning, so the next save drops them. Saving refuses
to emit ``NaN`` or ``Infinity`` tokens, which are not valid JSON.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict

from ..finance.ledger import Ledger, Transaction
from ..logging_utils import get_logger

LOGGER = get_logger(__name__)


class StorageError(RuntimeError):
    """Raised when persisted transactions cannot be read back."""


class TransactionStore:
    """Read and write the serialised transaction list under a single key."""

    def __init__(self, path: Path, key: str = "transactions") -> None:
        self.path = Path(path)
        self.key = key

    def _read_document(self) -> Dict[str, Any]:
        if not self.path.exists():
            return {}
        try:
            document = json.loads(self.path.read_text(encoding="utf-8") or "{}")
        except json.JSONDecodeError as error:
            raise StorageError(f"Store {self.path} is not valid JSON") from error
        if not isinstance(document, dict):
            raise StorageError(f"Store {self.path} must contain a JSON object")
        return document

    def load(self) -> Ledger:
        """Return a ledger rebuilt from the stored records, empty when none exist."""

        records = self._read_document().get(self.key, [])
        if not isinstance(records, list):
            raise StorageError(f"Key '{self.key}' in {self.path} must hold a list of records")
        try:
            transactions = [Transaction.from_record(record) for record in records]
        except (TypeError, ValueError) as error:
            raise StorageError(f"Store {self.path} contains an invalid record: {error}") from error
        valid = []
        for transaction in transactions:
            if transaction.is_valid:
                valid.append(transaction)
            else:
                LOGGER.warning(
                    "Skipping transaction %s in %s: amount is not a non-negative number",
                    transaction.transaction_id,
                    self.path,
                )
        ledger = Ledger(valid)
        LOGGER.debug("Loaded %s transactions from %s", len(ledger), self.path)
        return ledger

    def save(self, ledger: Ledger) -> Path:
        """Rewrite the full transaction list, keeping unrelated keys intact."""

        document = self._read_document()
        document[self.key] = ledger.to_records()
        self.path.parent.mkdir(parents=True, exist_ok=True)
        temporary = self.path.with_suffix(self.path.suffix + ".tmp")
        try:
            payload = json.dumps(document, indent=2, allow_nan=False)
        except ValueError as error:
            raise StorageError(f"Refusing to write non-finite amounts to {self.path}") from error
        temporary.write_text(payload, encoding="utf-8")
        temporary.replace(self.path)
        LOGGER.debug("Saved %s transactions to %s", len(ledger), self.path)
        return self.path
