"""The scripted bank session printed by ``bank_demo.py``."""

from bankdemo.console import Teller
from bankdemo.models.account import AccountKind
from bankdemo.services.bank_service import BankService


def run_scenario(service: BankService, teller: Teller) -> None:
    """Open the demo accounts, operate on them and print the results."""
    service.open_account(AccountKind.SAVINGS, 'SA001', 'John Doe', 5000)
    service.open_account(AccountKind.CHECKING, 'CA001', 'Jane Smith', 2000)
    service.open_account(AccountKind.LOAN, 'LA001', 'Alice Johnson', 10000)

    teller.deposit('SA001', 1000)
    teller.withdraw('SA001', 500)
    teller.calculate_interest('SA001')
    teller.print_statement('SA001')
    print()

    teller.deposit('CA001', 200)
    teller.withdraw('CA001', 300)
    teller.print_statement('CA001')
    print()

    teller.withdraw('LA001', 500)
    teller.calculate_interest('LA001')
    teller.print_statement('LA001')
    print()

    # Signed amounts routed through execute_transaction on fresh accounts.
    signed = [
        (AccountKind.SAVINGS, 'SA002', 'Mark Davis', 5000, 1000),
        (AccountKind.CHECKING, 'CA002', 'Amy Johnson', 2000, -500),
        (AccountKind.LOAN, 'LA002', 'Michael Smith', 10000, -1000),
    ]
    for i, (kind, account_no, name, opening, amount) in enumerate(signed):
        if i:
            print()
        service.open_account(kind, account_no, name, opening)
        teller.execute_transaction(account_no, amount)
        teller.print_transaction(account_no)
