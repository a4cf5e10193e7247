"""Mini README: Persistence helpers that load and save ledgers."""

from .json_store import StorageError, TransactionStore

__all__ = ["StorageError", "TransactionStore"]
