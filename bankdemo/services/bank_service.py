"""Bank service for business logic layer."""

import logging
from decimal import Decimal

from bankdemo.models.account import Account, AccountKind
from bankdemo.models.exceptions import (
    AccountAlreadyExistsError,
    AccountNotFoundError,
    BankError,
)
from bankdemo.models.transaction import Transaction
from bankdemo.repositories.account_repo import AccountRepository

logger = logging.getLogger(__name__)


class BankService:
    """Service layer for banking operations addressed by account number."""

    def __init__(self, account_repo: AccountRepository):
        """
        Initialize the BankService with a registry.

        Args:
            account_repo: Registry holding the bank's accounts
        """
        self._account_repo = account_repo

    def _require_account(self, account_no: str) -> Account:
        account = self._account_repo.find_by_account_no(account_no)
        if account is None:
            raise AccountNotFoundError(f"Account {account_no} not found")
        return account

    def open_account(
        self,
        kind: AccountKind,
        account_no: str,
        name: str,
        initial_balance=Decimal("0"),
    ) -> Account:
        """
        Create and register a new account.

        Args:
            kind: The kind of account (savings, checking, loan)
            account_no: Unique account number
            name: The account holder's name
            initial_balance: Opening balance, recorded without a transaction

        Returns:
            The registered Account

        Raises:
            AccountAlreadyExistsError: If the account number is taken
            InvalidAmountError: If the opening balance is not a finite number
        """
        if self._account_repo.exists(account_no):
            raise AccountAlreadyExistsError(f"Account {account_no} already exists")

        account = Account(
            account_no=account_no,
            name=name,
            kind=kind,
            balance=initial_balance,
        )
        self._account_repo.add(account)
        logger.info(
            "Opened %s %s for %s with balance %s",
            kind.label, account_no, name, account.balance,
        )
        return account

    def get_account(self, account_no: str) -> Account:
        """
        Look up an account.

        Raises:
            AccountNotFoundError: If the account doesn't exist
        """
        return self._require_account(account_no)

    def get_balance(self, account_no: str) -> Decimal:
        return self._require_account(account_no).balance

    def list_accounts(self) -> list[Account]:
        return self._account_repo.all()

    def deposit(self, account_no: str, amount, description: str = "Deposit") -> Transaction:
        """
        Deposit funds into an account.

        Raises:
            AccountNotFoundError: If the account doesn't exist
            InvalidAmountError: If the amount is zero, negative or not finite
        """
        account = self._require_account(account_no)
        return self._record(account, "deposit", account.deposit, amount, description)

    def withdraw(self, account_no: str, amount, description: str = "Withdrawal") -> Transaction:
        """
        Withdraw funds from an account.

        Raises:
            AccountNotFoundError: If the account doesn't exist
            InvalidAmountError: If the amount is zero, negative or not finite
            InsufficientBalanceError: If the amount exceeds the balance
        """
        account = self._require_account(account_no)
        return self._record(account, "withdraw", account.withdraw, amount, description)

    def calculate_interest(self, account_no: str) -> Transaction | None:
        """
        Apply the account kind's interest.

        Returns:
            The interest Transaction, or None when the kind earns no interest
        """
        account = self._require_account(account_no)
        try:
            transaction = account.calculate_interest()
        except BankError as err:
            logger.warning("Interest on %s rejected: %s", account_no, err)
            raise
        if transaction is None:
            logger.info("No interest for %s (%s)", account_no, account.kind.label)
        else:
            logger.info(
                "Interest %s applied to %s, balance %s",
                transaction.amount, account_no, account.balance,
            )
        return transaction

    def execute_transaction(self, account_no: str, amount) -> Transaction:
        """Route a signed amount to deposit (>= 0) or withdraw (< 0)."""
        account = self._require_account(account_no)
        return self._record(account, "transaction", account.execute_transaction, amount)

    def _record(self, account: Account, action: str, operation, *args) -> Transaction:
        try:
            transaction = operation(*args)
        except BankError as err:
            logger.warning("%s on %s rejected: %s", action, account.account_no, err)
            raise
        logger.info(
            "%s %s on %s, balance %s",
            transaction.description, transaction.amount, account.account_no, account.balance,
        )
        return transaction
