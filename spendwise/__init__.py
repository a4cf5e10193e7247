"""Mini README: Core package initializer for Spendwise.

Spendwise records expenses and income and derives dashboard views over
them. The ledger engine lives in ``spendwise.finance``; persistence, CSV
export and the web interface sit around it as thin collaborators.
"""

from .finance import Ledger, Transaction, TransactionType
from .logging_utils import get_logger

__all__ = ["Ledger", "Transaction", "TransactionType", "get_logger"]
