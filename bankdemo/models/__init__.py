"""Data models for the banking system."""

from .account import Account, AccountKind
from .transaction import Transaction
from .exceptions import (
    BankError,
    AccountNotFoundError,
    AccountAlreadyExistsError,
    InsufficientBalanceError,
    InvalidAmountError,
)

__all__ = [
    "Account",
    "AccountKind",
    "Transaction",
    "BankError",
    "AccountNotFoundError",
    "AccountAlreadyExistsError",
    "InsufficientBalanceError",
    "InvalidAmountError",
]
