"""Number sequence generators"""
import math
from typing import List

from linq_quiz.processing.errors import InvalidArgumentError, SquareOverflowError

import logging

logger = logging.getLogger(__name__)

INT32_MAX = 2 ** 31 - 1


def get_even_numbers(exclusive_upper_limit: int) -> List[int]:
    """
    Return all even numbers between 1 and the upper limit

    Args:
        exclusive_upper_limit: Upper limit (exclusive)

    Returns:
        Even numbers in ascending order

    Raises:
        InvalidArgumentError: If exclusive_upper_limit is lower than 1
    """
    if exclusive_upper_limit <= 0:
        raise InvalidArgumentError(f"{exclusive_upper_limit} is invalid, upper limit must be at least 1")

    evens = list(range(2, exclusive_upper_limit, 2))

    logger.debug(f"Generated {len(evens)} even numbers below {exclusive_upper_limit}")
    return evens


def get_squares(exclusive_upper_limit: int) -> List[int]:
    """
    Return the squares of the numbers between 1 and the upper limit
    that are divisible by 7

    The result is empty if exclusive_upper_limit is lower than 1.

    Args:
        exclusive_upper_limit: Upper limit (exclusive)

    Returns:
        Squares in descending order

    Raises:
        SquareOverflowError: If a square could exceed a signed 32-bit integer
    """
    # Checked against the limit, not against each candidate
    if exclusive_upper_limit >= math.sqrt(INT32_MAX):
        raise SquareOverflowError(
            f"Overflow detected, squares below {exclusive_upper_limit} may exceed {INT32_MAX}"
        )

    if exclusive_upper_limit <= 0:
        return []

    multiples = (n for n in range(1, exclusive_upper_limit) if n % 7 == 0)
    squares = sorted((n * n for n in multiples), reverse=True)

    logger.debug(f"Generated {len(squares)} squares of multiples of 7 below {exclusive_upper_limit}")
    return squares
