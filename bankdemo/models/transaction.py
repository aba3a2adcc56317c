"""Transaction data model."""

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal


@dataclass(frozen=True)
class Transaction:
    """A signed amount with a description. Withdrawals carry negative amounts."""

    amount: Decimal
    description: str
    time: datetime = field(default_factory=datetime.now, compare=False)
