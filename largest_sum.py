import logging

from dotenv import find_dotenv, load_dotenv

from bankdemo.scanner import DEFAULT_NUMBERS, find_largest_even, find_largest_odd
from config.settings import Settings

logger = logging.getLogger('bankdemo.largest_sum')


def main(numbers=DEFAULT_NUMBERS):
    load_dotenv(find_dotenv(usecwd=True))
    Settings.load().configure_logging()

    largest_odd = find_largest_odd(numbers)
    largest_even = find_largest_even(numbers)
    logger.info("Largest odd %s, largest even %s", largest_odd, largest_even)

    total = largest_odd + largest_even
    print(f"Sum of largest odd and largest even: {total}")
    return total


if __name__ == '__main__':
    main()
