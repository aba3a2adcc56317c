"""Console front end for the bank service."""

from decimal import ROUND_HALF_UP, Decimal

from tabulate import tabulate

from bankdemo.models.account import Account
from bankdemo.models.exceptions import BankError
from bankdemo.models.transaction import Transaction
from bankdemo.services.bank_service import BankService

CENT = Decimal('0.01')


def format_currency(amount: Decimal, symbol: str = '$') -> str:
    """Format like en-US currency: $1,234.50 and -$500.00."""
    rounded = Decimal(amount).quantize(CENT, rounding=ROUND_HALF_UP)
    sign = '-' if rounded < 0 else ''
    return f'{sign}{symbol}{abs(rounded):,.2f}'


def format_transaction(transaction: Transaction, symbol: str = '$') -> str:
    return f'{transaction.description}: {format_currency(transaction.amount, symbol)}'


def statement_lines(account: Account, symbol: str = '$') -> list[str]:
    lines = [
        f'Account Number: {account.account_no}',
        f'Account Holder: {account.name}',
        f'Balance: {format_currency(account.balance, symbol)}',
        'Transaction History:',
    ]
    lines.extend(format_transaction(t, symbol) for t in account.transactions)
    return lines


class Teller:
    """Runs service operations and prints their outcome.

    Rejected operations print the error message and return None instead of
    propagating, so a scripted session keeps going.
    """

    def __init__(self, service: BankService, currency_symbol: str = '$', table_format: str = 'simple'):
        self.service = service
        self.currency_symbol = currency_symbol
        self.table_format = table_format

    def _attempt(self, operation, *args):
        try:
            return operation(*args)
        except BankError as err:
            print(err)
            return None

    def deposit(self, account_no: str, amount, description: str = 'Deposit') -> Transaction | None:
        return self._attempt(self.service.deposit, account_no, amount, description)

    def withdraw(self, account_no: str, amount, description: str = 'Withdrawal') -> Transaction | None:
        return self._attempt(self.service.withdraw, account_no, amount, description)

    def execute_transaction(self, account_no: str, amount) -> Transaction | None:
        return self._attempt(self.service.execute_transaction, account_no, amount)

    def calculate_interest(self, account_no: str) -> Transaction | None:
        try:
            account = self.service.get_account(account_no)
            transaction = self.service.calculate_interest(account_no)
        except BankError as err:
            print(err)
            return None
        if transaction is None:
            print(f'No interest calculated for {account.kind.label}.')
        return transaction

    def print_statement(self, account_no: str) -> None:
        account = self._attempt(self.service.get_account, account_no)
        if account is None:
            return
        for line in statement_lines(account, self.currency_symbol):
            print(line)

    def print_transaction(self, account_no: str) -> None:
        account = self._attempt(self.service.get_account, account_no)
        if account is not None:
            print(f'Transaction Details: {account.kind.label}')

    def print_summary(self) -> None:
        """Print every registered account as a table."""
        header = ['Account', 'Holder', 'Kind', 'Balance', 'Transactions']
        rows = [
            [
                a.account_no,
                a.name,
                a.kind.label,
                format_currency(a.balance, self.currency_symbol),
                len(a.transactions),
            ]
            for a in self.service.list_accounts()
        ]
        print(tabulate(rows, headers=header, tablefmt=self.table_format,
                       stralign='right', numalign='right'))
