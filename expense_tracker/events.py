"""
Event System Module

Observer pattern plumbing for the expense tracker model: the listener contract
and the registry that broadcasts state changes to every registered listener.

Dispatch is synchronous and fail-fast. A listener that raises stops the
broadcast and the exception reaches whoever triggered it; listeners after the
failing one are not called for that change.
"""

from typing import Any, List, Protocol, runtime_checkable
import logging


@runtime_checkable
class ModelListener(Protocol):
    """Anything with an update(model) method can observe the model"""

    def update(self, model: Any) -> None:
        ...


def _describe(listener: Any) -> str:
    return getattr(listener, "__name__", None) or type(listener).__name__


class ListenerRegistry:
    """Ordered set of listeners plus a synchronous broadcast"""

    def __init__(self):
        self._listeners: List[ModelListener] = []
        self.logger = logging.getLogger("expense_tracker.events")

    def register(self, listener: ModelListener) -> bool:
        """
        Register a listener for state change events.

        Returns:
            True if the listener was added, False if it is None or
            already registered
        """
        if listener is None or listener in self:
            self.logger.debug(f"Ignored registration of {_describe(listener)}")
            return False
        self._listeners.append(listener)
        self.logger.debug(f"Registered listener {_describe(listener)} ({len(self._listeners)} total)")
        return True

    def __len__(self) -> int:
        return len(self._listeners)

    def __contains__(self, listener: Any) -> bool:
        # Identity, not ==: two equal views are still two listeners
        return any(existing is listener for existing in self._listeners)

    def notify(self, source: Any) -> None:
        """Call update(source) on every listener in registration order"""
        self.logger.debug(f"Notifying {len(self._listeners)} listener(s)")
        # Iterate over a snapshot so a listener registering another listener
        # does not extend the current broadcast
        for listener in list(self._listeners):
            listener.update(source)
