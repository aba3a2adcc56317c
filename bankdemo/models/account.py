"""Account data model."""

from dataclasses import dataclass, field
from decimal import Decimal, InvalidOperation
from enum import Enum

from .exceptions import InsufficientBalanceError, InvalidAmountError
from .transaction import Transaction


def to_decimal(amount) -> Decimal:
    """Coerce ints, strings and floats to Decimal without binary float noise."""
    if isinstance(amount, Decimal):
        return amount
    try:
        return Decimal(str(amount))
    except InvalidOperation:
        raise InvalidAmountError(f"Invalid amount: {amount!r}")


class AccountKind(Enum):
    """Account kinds with their interest rate and display label."""

    SAVINGS = (Decimal("0.05"), "Savings Account")
    CHECKING = (None, "Checking Account")
    LOAN = (Decimal("0.1"), "Loan Account")

    def __init__(self, interest_rate: Decimal | None, label: str):
        self.interest_rate = interest_rate
        self.label = label

    @property
    def earns_interest(self) -> bool:
        return self.interest_rate is not None


@dataclass
class Account:
    """Represents a bank account.

    The balance is only changed through ``deposit`` and ``withdraw``, and every
    successful call appends exactly one Transaction to ``transactions``.
    Rejected calls raise before touching any state.
    """

    account_no: str
    name: str
    kind: AccountKind
    balance: Decimal = Decimal("0")
    transactions: list[Transaction] = field(default_factory=list)

    def __post_init__(self):
        self.balance = to_decimal(self.balance)
        if not self.balance.is_finite():
            raise InvalidAmountError(f"Invalid opening balance: {self.balance}")

    def deposit(self, amount, description: str = "Deposit") -> Transaction:
        """
        Add a positive amount to the balance.

        Args:
            amount: The amount to deposit
            description: Label recorded on the transaction

        Returns:
            The recorded Transaction

        Raises:
            InvalidAmountError: If the amount is zero, negative or not finite
        """
        amount = to_decimal(amount)
        if not amount.is_finite() or amount <= 0:
            raise InvalidAmountError("Deposit amount must be greater than zero.")

        self.balance += amount
        return self._add_transaction(amount, description)

    def withdraw(self, amount, description: str = "Withdrawal") -> Transaction:
        """
        Subtract a positive amount from the balance.

        Args:
            amount: The amount to withdraw
            description: Label recorded on the transaction

        Returns:
            The recorded Transaction, carrying the negated amount

        Raises:
            InvalidAmountError: If the amount is zero, negative or not finite
            InsufficientBalanceError: If the amount exceeds the balance
        """
        amount = to_decimal(amount)
        if not amount.is_finite() or amount <= 0:
            raise InvalidAmountError("Withdrawal amount must be greater than zero.")
        if amount > self.balance:
            raise InsufficientBalanceError("Insufficient funds.")

        self.balance -= amount
        return self._add_transaction(-amount, description)

    def calculate_interest(self) -> Transaction | None:
        """
        Deposit interest at the kind's rate.

        Returns:
            The interest Transaction, or None for kinds that earn no interest
        """
        if not self.kind.earns_interest:
            return None
        interest = self.balance * self.kind.interest_rate
        return self.deposit(interest, "Interest Deposit")

    def execute_transaction(self, amount) -> Transaction:
        """Deposit non-negative amounts, withdraw the magnitude of negative ones.

        NaN is routed to deposit, which rejects it.
        """
        amount = to_decimal(amount)
        if amount.is_nan() or amount >= 0:
            return self.deposit(amount, "Transaction")
        return self.withdraw(-amount, "Transaction")

    def _add_transaction(self, amount: Decimal, description: str) -> Transaction:
        transaction = Transaction(amount=amount, description=description)
        self.transactions.append(transaction)
        return transaction
