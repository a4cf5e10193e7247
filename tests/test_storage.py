"""Mini README: Tests for the JSON transaction store."""

from __future__ import annotations

import json
from datetime import date
from pathlib import Path

import pytest

from spendwise.finance import Ledger, Transaction, TransactionType
from spendwise.storage import StorageError, TransactionStore


def test_missing_file_loads_empty_ledger(tmp_path: Path) -> None:
    ledger = TransactionStore(tmp_path / "absent.json").load()
    assert len(ledger) == 0


def test_save_then_load_restores_transactions(tmp_path: Path, sample_ledger: Ledger) -> None:
    store = TransactionStore(tmp_path / "nested" / "transactions.json")

    store.save(sample_ledger)
    restored = store.load()

    assert restored.transactions == sample_ledger.transactions
    document = json.loads(store.path.read_text(encoding="utf-8"))
    assert document["transactions"][0] == {
        "id": 1,
        "date": "2024-01-05",
        "category": "Food",
        "amount": 50.0,
        "description": "Groceries",
        "type": "expense",
    }


def test_save_preserves_unrelated_keys(tmp_path: Path, sample_ledger: Ledger) -> None:
    path = tmp_path / "store.json"
    path.write_text(json.dumps({"theme": "dark"}), encoding="utf-8")

    TransactionStore(path).save(sample_ledger)

    document = json.loads(path.read_text(encoding="utf-8"))
    assert document["theme"] == "dark"
    assert len(document["transactions"]) == len(sample_ledger)


def test_custom_key_is_respected(tmp_path: Path, sample_ledger: Ledger) -> None:
    path = tmp_path / "store.json"
    TransactionStore(path, key="ledger").save(sample_ledger)

    assert len(TransactionStore(path, key="ledger").load()) == len(sample_ledger)
    assert len(TransactionStore(path).load()) == 0


def test_records_with_string_amounts_are_parsed_on_load(tmp_path: Path) -> None:
    path = tmp_path / "store.json"
    path.write_text(
        json.dumps(
            {
                "transactions": [
                    {
                        "id": 1700000000000,
                        "date": "2024-01-05",
                        "category": "Food",
                        "amount": "50",
                        "description": "",
                        "type": "expense",
                    }
                ]
            }
        ),
        encoding="utf-8",
    )

    ledger = TransactionStore(path).load()

    assert ledger.total_by_type("expense") == 50


@pytest.mark.parametrize(
    "content",
    ["{not json", "[1, 2]", json.dumps({"transactions": {"id": 1}}), json.dumps({"transactions": [{"id": 1}]})],
)
def test_corrupt_store_raises_storage_error(tmp_path: Path, content: str) -> None:
    path = tmp_path / "store.json"
    path.write_text(content, encoding="utf-8")

    with pytest.raises(StorageError):
        TransactionStore(path).load()


def test_records_with_unusable_amounts_are_skipped_on_load(tmp_path: Path) -> None:
    path = tmp_path / "store.json"
    path.write_text(
        json.dumps(
            {
                "transactions": [
                    {"id": 1, "date": "2024-01-05", "category": "Food", "amount": "abc", "type": "expense"},
                    {"id": 2, "date": "2024-01-05", "category": "Salary", "amount": "1000", "type": "income"},
                    {"id": 3, "date": "2024-01-06", "category": "Bills", "amount": -20, "type": "expense"},
                ]
            }
        ),
        encoding="utf-8",
    )
    store = TransactionStore(path)

    ledger = store.load()

    assert [transaction.transaction_id for transaction in ledger] == [2]
    assert ledger.total_by_type("expense") == 0
    store.save(ledger)
    saved = path.read_text(encoding="utf-8")
    assert "NaN" not in saved
    assert [record["id"] for record in json.loads(saved)["transactions"]] == [2]


def test_stored_nan_tokens_are_skipped_on_load(tmp_path: Path) -> None:
    path = tmp_path / "store.json"
    path.write_text(
        '{"transactions": [{"id": 1, "date": "2024-01-05", "category": "Food",'
        ' "amount": NaN, "description": "", "type": "expense"}]}',
        encoding="utf-8",
    )

    assert len(TransactionStore(path).load()) == 0


def test_save_refuses_non_finite_amounts(tmp_path: Path) -> None:
    path = tmp_path / "store.json"
    ledger = Ledger([Transaction(1, date(2024, 1, 5), "Food", "abc", "", TransactionType.EXPENSE)])

    with pytest.raises(StorageError):
        TransactionStore(path).save(ledger)

    assert not path.exists()
