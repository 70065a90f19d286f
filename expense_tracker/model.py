"""
Expense Tracker Model Module

The model component of the expense tracker. It owns the list of transactions
and the indices of the transactions matched by the most recent filter, and it
is the observable side of the observer pattern: registered listeners are told
whenever a transaction is added.

Nothing inside the model is handed out by reference. Incoming index lists are
copied in and every query returns a fresh copy.
"""

from typing import Any, List, Optional, Sequence, Tuple
import logging

from .events import ListenerRegistry, ModelListener
from .exceptions import InvalidArgumentError
from .logging_config import log_action


class ExpenseTrackerModel:
    """
    Observable container for transactions and the current filter result
    """

    def __init__(self):
        self._transactions: List[Any] = []
        self._matched_filter_indices: List[int] = []
        self._listeners = ListenerRegistry()
        self.logger = logging.getLogger("expense_tracker.model")

    # Transactions

    def add_transaction(self, transaction: Any) -> None:
        """
        Append a transaction and notify listeners.

        Args:
            transaction: The transaction to add

        Raises:
            InvalidArgumentError: If transaction is None
        """
        if transaction is None:
            self.logger.warning("Rejected None transaction")
            raise InvalidArgumentError("The new transaction must be non-null.")

        self._transactions.append(transaction)
        # The previous filter is no longer valid
        self._matched_filter_indices.clear()

        log_action(
            self.logger, "debug", "Transaction added",
            action="add_transaction", resource="transaction",
            extra={"transaction_count": len(self._transactions)}
        )
        self._state_changed()

    def remove_transaction(self, transaction: Any) -> None:
        """
        Remove the first transaction equal to the given one.

        Removing None or a transaction that is not stored does nothing.
        Listeners are not notified; call notify_observers() if they need to be.
        """
        try:
            self._transactions.remove(transaction)
        except ValueError:
            self.logger.debug("Transaction to remove not found")
            return

        # The previous filter is no longer valid
        self._matched_filter_indices.clear()

        log_action(
            self.logger, "debug", "Transaction removed",
            action="remove_transaction", resource="transaction",
            extra={"transaction_count": len(self._transactions)}
        )

    def get_transactions(self) -> Tuple[Any, ...]:
        """Read-only snapshot of all transactions in insertion order"""
        return tuple(self._transactions)

    @property
    def transaction_count(self) -> int:
        """Number of stored transactions"""
        return len(self._transactions)

    # Filter result

    def set_matched_filter_indices(self, indices: Optional[Sequence[int]]) -> None:
        """
        Replace the indices of the transactions matched by the current filter.

        Every index is checked before anything is stored, so a rejected call
        leaves the previous indices in place. Listeners are not notified.

        Args:
            indices: Positions into the transaction list

        Raises:
            InvalidArgumentError: If indices is None or any index is not an
                integer in [0, transaction_count)
        """
        if indices is None:
            self.logger.warning("Rejected None matched filter indices")
            raise InvalidArgumentError("The matched filter indices list must be non-null.")

        try:
            new_indices = list(indices)
        except TypeError:
            self.logger.warning(f"Rejected non-sequence matched filter indices {indices!r}")
            raise InvalidArgumentError("The matched filter indices must be a sequence of integers.") from None
        count = len(self._transactions)
        for index in new_indices:
            # bool is an int subclass but never a position
            if isinstance(index, bool) or not isinstance(index, int) or not 0 <= index < count:
                self.logger.warning(f"Rejected matched filter index {index!r} for {count} transaction(s)")
                raise InvalidArgumentError(
                    "Each matched filter index must be between 0 (inclusive) "
                    "and the number of transactions (exclusive)."
                )

        self._matched_filter_indices = new_indices
        log_action(
            self.logger, "debug", "Matched filter indices set",
            action="set_matched_filter_indices", resource="filter",
            extra={"matched": len(new_indices)}
        )

    def get_matched_filter_indices(self) -> List[int]:
        """Copy of the indices matched by the current filter"""
        return list(self._matched_filter_indices)

    # Observers

    def register(self, listener: Optional[ModelListener]) -> bool:
        """
        Register a listener for state change events.

        Returns:
            True if the listener is non-null and was not already registered,
            False otherwise
        """
        return self._listeners.register(listener)

    def number_of_listeners(self) -> int:
        """Number of registered listeners"""
        return len(self._listeners)

    def contains_listener(self, listener: Any) -> bool:
        """Check if the given listener is registered"""
        return listener in self._listeners

    def notify_observers(self) -> None:
        """Notify all registered listeners about a change in the model's state"""
        self._state_changed()

    def _state_changed(self) -> None:
        self._listeners.notify(self)
