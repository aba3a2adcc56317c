"""Find the largest odd and largest even numbers in a sequence."""

from collections.abc import Iterable

# Seed for the running maximum, returned when nothing qualifies.
INT_MIN = -2**31

DEFAULT_NUMBERS = (2, 5, 7, 10, 12, 15, 18, 20, 21, 24)


def _largest(numbers: Iterable[int], want_odd: bool) -> int:
    largest = INT_MIN
    for number in numbers:
        if (number % 2 != 0) == want_odd and number > largest:
            largest = number
    return largest


def find_largest_odd(numbers: Iterable[int]) -> int:
    """Return the largest odd number, or INT_MIN if there is none."""
    return _largest(numbers, want_odd=True)


def find_largest_even(numbers: Iterable[int]) -> int:
    """Return the largest even number, or INT_MIN if there is none."""
    return _largest(numbers, want_odd=False)


def sum_of_largest(numbers: Iterable[int]) -> int:
    numbers = list(numbers)
    return find_largest_odd(numbers) + find_largest_even(numbers)
