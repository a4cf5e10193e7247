"""Mini README: Export transactions to a CSV table.

Structure:
    * CSV_HEADER - column titles written as the first row.
    * format_amount - renders amounts the way the dashboard shows raw numbers.
    * CsvExporter - renders text or writes a file, one row per transaction.

Rows follow the order of the sequence handed in. Callers wanting the usual
newest-first download pass ``ledger.list_transactions()``.
"""

from __future__ import annotations

import csv
import io
from pathlib import Path
from typing import Iterable, Sequence

from ..finance.ledger import Transaction
from ..logging_utils import get_logger

LOGGER = get_logger(__name__)

CSV_HEADER: Sequence[str] = ("Date", "Type", "Category", "Amount", "Description")


def format_amount(amount: float) -> str:
    """Drop the trailing ``.0`` of whole amounts, keep full precision otherwise."""

    if amount == amount and float(amount).is_integer():
        return str(int(amount))
    return repr(float(amount))


class CsvExporter:
    """Serialise transactions into comma separated text."""

    def __init__(self, delimiter: str = ",") -> None:
        self.delimiter = delimiter

    def render(self, transactions: Iterable[Transaction]) -> str:
        """Return the CSV document as a string."""

        buffer = io.StringIO()
        writer = csv.writer(buffer, delimiter=self.delimiter, lineterminator="\n")
        writer.writerow(CSV_HEADER)
        count = 0
        for transaction in transactions:
            writer.writerow(
                [
                    transaction.occurred_on.isoformat(),
                    transaction.transaction_type.value,
                    transaction.category,
                    format_amount(transaction.amount),
                    transaction.description,
                ]
            )
            count += 1
        LOGGER.debug("Rendered %s transactions to CSV", count)
        return buffer.getvalue()

    def export(self, transactions: Iterable[Transaction], destination: Path) -> Path:
        """Write the CSV document to ``destination``."""

        destination.parent.mkdir(parents=True, exist_ok=True)
        destination.write_text(self.render(transactions), encoding="utf-8")
        LOGGER.info("Exported transactions to %s", destination)
        return destination
