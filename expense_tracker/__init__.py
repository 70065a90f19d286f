"""
Expense Tracker Model

The observable state container of the expense tracker: stores transactions,
remembers which of them matched the last filter, and notifies registered
listeners when the transaction set changes.
"""

from .exceptions import ExpenseTrackerError, InvalidArgumentError
from .transactions import Transaction
from .events import ModelListener, ListenerRegistry
from .model import ExpenseTrackerModel
from .config import get_config
from .logging_config import setup_logging, get_logger

__version__ = "1.0.0"

__all__ = [
    "ExpenseTrackerModel",
    "ModelListener",
    "ListenerRegistry",
    "Transaction",
    "ExpenseTrackerError",
    "InvalidArgumentError",
    "get_config",
    "setup_logging",
    "get_logger",
]
