"""
Loop Exercises - Bounded Decrement and Range Iteration
"""

import logging

from .errors import InvalidArgumentError

logger = logging.getLogger(__name__)


def bounded_decrement(value: int, n: int) -> int:
    """
    Subtract 1 from value exactly n times

    Equivalent to value - n; n == 0 returns value unchanged.

    Raises:
        InvalidArgumentError: If n is negative
    """
    if n < 0:
        raise InvalidArgumentError(f"decrement count must be non-negative, got {n}")

    remaining = n
    while remaining > 0:
        value -= 1
        remaining -= 1
    return value


def inclusive_or_exclusive_range(end: int, inclusive: bool) -> range:
    """
    Integers from 0 up to end (inclusive) or end - 1 (exclusive)

    The returned range is lazy and can be iterated any number of times.
    An exclusive range ending at 0 is empty.

    Raises:
        InvalidArgumentError: If end is negative
    """
    if end < 0:
        raise InvalidArgumentError(f"range end must be non-negative, got {end}")

    last = end if inclusive else end - 1
    if last < 0:
        logger.debug("Exclusive range ending at 0 is empty")
        return range(0)
    return range(0, last + 1)
