"""Mini README: Shared pytest fixtures for Spendwise.

Every test runs with ``SPENDWISE_DATA_DIRECTORY`` pointed at a temporary
directory and a fresh settings cache so nothing touches a real store.
"""

from __future__ import annotations

from datetime import date
from pathlib import Path
from typing import Iterator

import pytest

from spendwise.configuration import get_settings
from spendwise.finance import Ledger, Transaction, TransactionType


@pytest.fixture(autouse=True)
def isolated_settings(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[Path]:
    data_directory = tmp_path / "data"
    monkeypatch.setenv("SPENDWISE_DATA_DIRECTORY", str(data_directory))
    get_settings.cache_clear()
    yield data_directory
    get_settings.cache_clear()


@pytest.fixture
def sample_ledger() -> Ledger:
    """Two months of mixed activity used across the suites."""

    return Ledger(
        [
            Transaction(1, date(2024, 1, 5), "Food", "50", "Groceries", TransactionType.EXPENSE),
            Transaction(2, date(2024, 1, 5), "Salary", "1000", "January pay", TransactionType.INCOME),
            Transaction(3, date(2024, 1, 20), "Bills", "120.5", "Electricity", TransactionType.EXPENSE),
            Transaction(4, date(2024, 2, 2), "Food", "30", "Lunch", TransactionType.EXPENSE),
            Transaction(5, date(2024, 2, 15), "Freelance", "400", "Logo work", TransactionType.INCOME),
        ]
    )
