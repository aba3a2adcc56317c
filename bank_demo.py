from dotenv import find_dotenv, load_dotenv

from bankdemo.console import Teller
from bankdemo.repositories.account_repo import AccountRepository
from bankdemo.scenario import run_scenario
from bankdemo.services.bank_service import BankService
from config.settings import Settings


def main():
    load_dotenv(find_dotenv(usecwd=True))
    settings = Settings.load()
    settings.configure_logging()

    service = BankService(AccountRepository())
    teller = Teller(service, settings.currency_symbol, settings.table_format)
    run_scenario(service, teller)

    if settings.show_summary:
        print()
        teller.print_summary()


if __name__ == '__main__':
    main()
