"""
Aggregates - Median and Mode

Pure functions computing a single statistic over a list of integers.
"""

from collections import Counter
from typing import Iterable, Union
import logging

from .errors import InvalidArgumentError

logger = logging.getLogger(__name__)


def median(values: Iterable[int], *, average_even: bool = False) -> Union[int, float]:
    """
    Return the middle value of the values after ascending sort

    Even-length input picks the upper-middle element (index (count+1)//2)
    unless average_even is set, in which case the two central elements
    are averaged.

    Args:
        values: Signed integers, in any order. Not mutated.
        average_even: Use the mean of the two central elements on even length

    Returns:
        The median value

    Raises:
        InvalidArgumentError: If values is empty
    """
    ordered = sorted(values)
    count = len(ordered)
    if count == 0:
        raise InvalidArgumentError("median of an empty sequence is undefined")

    if count % 2 != 0:
        median_index = count // 2
    else:
        median_index = (count + 1) // 2

    if count % 2 == 0 and average_even:
        total = ordered[median_index - 1] + ordered[median_index]
        result = total // 2 if total % 2 == 0 else total / 2
    else:
        result = ordered[median_index]

    logger.debug(f"median of {count} values -> {result}")
    return result


def mode(values: Iterable[int]) -> int:
    """
    Return the value that occurs most often

    Ties go to the smallest value.

    Raises:
        InvalidArgumentError: If values is empty
    """
    counts = Counter(values)
    if not counts:
        raise InvalidArgumentError("mode of an empty sequence is undefined")

    highest = max(counts.values())
    result = min(value for value, seen in counts.items() if seen == highest)

    logger.debug(f"mode over {len(counts)} distinct values -> {result}")
    return result
