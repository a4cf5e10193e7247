"""Mini README: Tests for environment driven settings."""

from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from spendwise.configuration import SpendwiseSettings, get_settings


def test_storage_path_resolves_inside_data_directory(isolated_settings: Path) -> None:
    settings = get_settings()

    assert settings.data_directory == isolated_settings.resolve()
    assert settings.data_directory.is_dir()
    assert settings.storage_path == isolated_settings.resolve() / "transactions.json"


def test_absolute_storage_file_is_used_verbatim(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    target = tmp_path / "elsewhere.json"
    monkeypatch.setenv("SPENDWISE_STORAGE_FILE", str(target))

    assert SpendwiseSettings().storage_path == target


def test_invalid_port_is_rejected(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SPENDWISE_INTERFACE_PORT", "70000")

    with pytest.raises(ValidationError):
        SpendwiseSettings()


def test_production_flag_follows_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    assert not SpendwiseSettings().is_production

    monkeypatch.setenv("SPENDWISE_ENVIRONMENT", " Production ")

    assert SpendwiseSettings().is_production
