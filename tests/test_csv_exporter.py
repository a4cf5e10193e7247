"""Mini README: Tests for CSV export of transactions."""

from __future__ import annotations

from datetime import date
from pathlib import Path

from spendwise.export import CsvExporter
from spendwise.export.csv_exporter import format_amount
from spendwise.finance import Ledger, Transaction, TransactionType


def test_render_writes_header_and_rows_in_given_order(sample_ledger: Ledger) -> None:
    lines = CsvExporter().render(sample_ledger.list_transactions()).splitlines()

    assert lines[0] == "Date,Type,Category,Amount,Description"
    assert lines[1] == "2024-02-15,income,Freelance,400,Logo work"
    assert lines[3] == "2024-01-20,expense,Bills,120.5,Electricity"
    assert len(lines) == len(sample_ledger) + 1


def test_render_empty_collection_is_header_only() -> None:
    assert CsvExporter().render([]) == "Date,Type,Category,Amount,Description\n"


def test_descriptions_with_delimiters_are_quoted() -> None:
    transaction = Transaction(1, date(2024, 1, 1), "Food", 9.99, "Coffee, cake", TransactionType.EXPENSE)

    row = CsvExporter().render([transaction]).splitlines()[1]

    assert row == '2024-01-01,expense,Food,9.99,"Coffee, cake"'


def test_format_amount() -> None:
    assert format_amount(50.0) == "50"
    assert format_amount(120.5) == "120.5"
    assert format_amount(float("nan")) == "nan"


def test_export_writes_file(tmp_path: Path, sample_ledger: Ledger) -> None:
    destination = tmp_path / "out" / "expenses.csv"

    written = CsvExporter().export(sample_ledger.transactions, destination)

    assert written == destination
    assert destination.read_text(encoding="utf-8").startswith("Date,Type,Category")
