"""Custom exceptions for the banking system."""


class BankError(Exception):
    """Base exception for all banking-related errors."""
    pass


class AccountNotFoundError(BankError):
    """Raised when an account cannot be found."""
    pass


class AccountAlreadyExistsError(BankError):
    """Raised when attempting to register an account number twice."""
    pass


class InsufficientBalanceError(BankError):
    """Raised when a withdrawal exceeds the account balance."""
    pass


class InvalidAmountError(BankError):
    """Raised when a non-positive amount is deposited or withdrawn."""
    pass
