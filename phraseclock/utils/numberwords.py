"""Spell integers as English words.

Uses short-scale group names (thousand, million, billion) and never
inserts "and":

    >>> spell_number(101)
    'one hundred one'
    >>> spell_number(-21)
    'minus twenty one'

Zero spells as the empty string, callers that need a word for a standalone
zero have to supply their own.
"""

import logging

from phraseclock import exception
from phraseclock.utils import trace


LOG = logging.getLogger("PHRASECLOCK")

UNITS = (
    "",
    "one",
    "two",
    "three",
    "four",
    "five",
    "six",
    "seven",
    "eight",
    "nine",
    "ten",
    "eleven",
    "twelve",
    "thirteen",
    "fourteen",
    "fifteen",
    "sixteen",
    "seventeen",
    "eighteen",
    "nineteen",
)

# 0 and 1 are covered by UNITS
TENS = (
    "",
    "",
    "twenty",
    "thirty",
    "forty",
    "fifty",
    "sixty",
    "seventy",
    "eighty",
    "ninety",
)

# (threshold, group name), largest first
GROUPS = (
    (10**9, "billion"),
    (10**6, "million"),
    (10**3, "thousand"),
    (10**2, "hundred"),
)

MAX_MAGNITUDE = 10**12


def _join(head, rest):
    if rest:
        return f"{head} {rest}"
    return head


def _spell(n):
    if n < 0:
        return "minus " + _spell(-n)

    if n < 20:
        return UNITS[n]

    if n < 100:
        return _join(TENS[n // 10], _spell(n % 10))

    for threshold, name in GROUPS:
        if n >= threshold:
            quotient, remainder = divmod(n, threshold)
            return _join(f"{_spell(quotient)} {name}", _spell(remainder))


@trace.trace
def spell_number(n: int) -> str:
    """Return the English words for the integer ``n``.

    :raises TypeError: when ``n`` is not an int
    :raises UnsupportedMagnitudeError: when ``abs(n)`` is a trillion or more
    """
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"spell_number() needs an int, not {type(n).__name__}")
    if abs(n) >= MAX_MAGNITUDE:
        LOG.debug(f"Refusing to spell {n}")
        raise exception.UnsupportedMagnitudeError(n)
    return _spell(n)
