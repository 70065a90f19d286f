"""
Exceptions raised by the expense tracker model.
"""


class ExpenseTrackerError(Exception):
    """Base class for expense tracker errors"""


class InvalidArgumentError(ExpenseTrackerError, ValueError):
    """Raised before any state change when an operation receives a bad argument"""
