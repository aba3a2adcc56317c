"""Account registry kept in memory."""

from bankdemo.models.account import Account
from bankdemo.models.exceptions import AccountAlreadyExistsError


class AccountRepository:
    """Registry mapping account numbers to accounts. Insertion only."""

    def __init__(self):
        self._accounts: dict[str, Account] = {}

    def add(self, account: Account) -> None:
        """
        Register an account under its account number.

        Args:
            account: The Account to register

        Raises:
            AccountAlreadyExistsError: If the account number is already registered
        """
        if account.account_no in self._accounts:
            raise AccountAlreadyExistsError(f"Account {account.account_no} already exists")
        self._accounts[account.account_no] = account

    def find_by_account_no(self, account_no: str) -> Account | None:
        """
        Find an account by account number.

        Args:
            account_no: The account number to search for

        Returns:
            Account object if found, None otherwise
        """
        return self._accounts.get(account_no)

    def exists(self, account_no: str) -> bool:
        return account_no in self._accounts

    def all(self) -> list[Account]:
        """Return every registered account in insertion order."""
        return list(self._accounts.values())
