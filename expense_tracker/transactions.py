"""
Transaction Module

The expense record stored by the model. The model itself treats transactions
as opaque values and only compares them for equality when removing.
"""

from decimal import Decimal
from datetime import datetime, timezone
from dataclasses import dataclass, field
from typing import Any, Dict


@dataclass(frozen=True)
class Transaction:
    """
    Immutable expense record: an amount spent in a category at a point in time
    """
    amount: Decimal
    category: str
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def __post_init__(self):
        if not isinstance(self.amount, Decimal):
            # str() first so floats keep their printed value
            object.__setattr__(self, 'amount', Decimal(str(self.amount)))

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization"""
        return {
            'amount': str(self.amount),
            'category': self.category,
            'timestamp': self.timestamp.isoformat()
        }
