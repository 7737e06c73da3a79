"""
Module: base60

Purpose:
    Base-60 numeral decoding used by the packed zone format for offsets and
    transition diffs. Digits run 0-9, A-Z, a-z (values 0-59).

Key Functions:
    - is_digit(ch): Whether ch is a base-60 digit
    - digit_value(ch): Value of a single base-60 digit
    - decode_base60(sign, whole, fraction): Signed number from digit strings

Dependencies:
    - none

Used By:
    - decoding.grammar: offsets and diffs fields
"""

from __future__ import annotations

BASE = 60


def is_digit(ch: str) -> bool:
    """True if ch is a single base-60 digit character."""
    return len(ch) == 1 and ch.isascii() and ch.isalnum()


def digit_value(ch: str) -> int:
    """
    Value of one base-60 digit.

    Args:
        ch: A character in 0-9, A-Z or a-z

    Returns:
        Digit value in 0..59

    Raises:
        ValueError: If ch is not a base-60 digit
    """
    if not is_digit(ch):
        raise ValueError(f"Not a base-60 digit: {ch!r}")
    code = ord(ch)
    if code <= 57:  # 0-9
        return code - 48
    if code >= 97:  # a-z
        return code - 87
    return code - 29  # A-Z


def decode_base60(sign: int, whole: str, fraction: str) -> float:
    """
    Decode a signed base-60 number from its whole and fractional digits.

    Whole digits are accumulated as ``value = (value + d) * 60``, so the
    last whole digit is worth d * 60 and "1" decodes to 60. Fractional
    digits contribute d1/60 + d2/60**2 + ..., accumulated from the right
    so that a single fractional digit d decodes to exactly d / 60.

    Either part may be empty (value 0); rejecting the case where both are
    empty is the caller's job.

    Args:
        sign: +1 or -1
        whole: Base-60 digits before the point
        fraction: Base-60 digits after the point

    Returns:
        sign * (whole value + fraction value) as a float

    Raises:
        ValueError: If sign is not +/-1 or a digit is invalid

    Example:
        >>> decode_base60(1, "1", "")
        60.0
        >>> decode_base60(1, "", "1") == 1 / 60
        True
        >>> decode_base60(-1, "1", "U") == -(60 + 32 / 60)
        True
    """
    if sign not in (1, -1):
        raise ValueError(f"sign must be +1 or -1: {sign}")

    whole_value = 0
    for ch in whole:
        whole_value = (whole_value + digit_value(ch)) * BASE

    fraction_value = 0.0
    for ch in reversed(fraction):
        fraction_value = (fraction_value + digit_value(ch)) / BASE

    return sign * (whole_value + fraction_value)
