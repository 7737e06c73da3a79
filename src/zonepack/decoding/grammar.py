"""
Module: decoding.grammar

Purpose:
    Parse a packed zone string into RawPackedFields. The string has five
    "|"-separated fields consumed strictly left to right:

        name|abbreviations|offsets|indices|diffs

    - name: one or more characters other than "|"
    - abbreviations: tokens separated by single spaces
    - offsets: base-60 numbers separated by single spaces (minutes)
    - indices: single decimal digits with no separator
    - diffs: zero or more base-60 numbers (minutes, returned as ms),
      followed by end of input

Key Functions:
    - parse_packed(): Parse one packed zone string

Key Classes:
    - Cursor: Position in the input with save/restore for backtracking

Dependencies:
    - zonepack.core.base60: numeral decoding
    - zonepack.errors.GrammarError

Used By:
    - decoding.decoder: first stage of decode()
"""

from __future__ import annotations

import logging
import math
from functools import partial
from typing import Callable, Optional, TypeVar

from ..config import DEFAULT_CONFIG, ZoneConfig
from ..core.base60 import decode_base60, is_digit
from ..core.models.fields import RawPackedFields
from ..core.models.span import MILLIS_PER_MINUTE
from ..errors import GrammarError

logger = logging.getLogger(__name__)

T = TypeVar("T")

FIELD_SEPARATOR = "|"
LIST_SEPARATOR = " "
NEGATIVE_SIGN = "-"
FRACTION_POINT = "."


class Cursor:
    """
    Read position into the packed text.

    Element parsers either consume input and return a value, or return
    None and leave ``pos`` where it was. Repetition relies on that to stop
    cleanly before the next field's separator.
    """

    __slots__ = ("text", "pos", "context")

    def __init__(self, text: str, context: int = DEFAULT_CONFIG.error_context):
        self.text = text
        self.pos = 0
        self.context = context

    @property
    def at_end(self) -> bool:
        return self.pos >= len(self.text)

    def peek(self) -> str:
        """Next character, or "" at end of input."""
        return self.text[self.pos] if self.pos < len(self.text) else ""

    def match(self, literal: str) -> bool:
        """Consume ``literal`` if it is next; report whether it was."""
        if self.text.startswith(literal, self.pos):
            self.pos += len(literal)
            return True
        return False

    def take_while(self, predicate: Callable[[str], bool]) -> str:
        start = self.pos
        while self.pos < len(self.text) and predicate(self.text[self.pos]):
            self.pos += 1
        return self.text[start:self.pos]

    def preview(self) -> str:
        """Quoted slice of upcoming input for error messages."""
        if self.at_end:
            return "end of input"
        return repr(self.text[self.pos:self.pos + self.context])

    def fail(self, message: str, field: str) -> GrammarError:
        return GrammarError(f"{message}, found {self.preview()}", field=field, position=self.pos)


# ─────────────────────────────────────────────────────────────────────────────
# Combinators
# ─────────────────────────────────────────────────────────────────────────────

def _repeat_separated(
    cursor: Cursor,
    element: Callable[[Cursor], Optional[T]],
    separator: str,
    first: T,
) -> list[T]:
    """Collect ``first`` then every further ``separator element`` pair.

    Stops at the first position where the pair does not parse, without
    consuming any of it.
    """
    items = [first]
    while True:
        mark = cursor.pos
        if not cursor.match(separator):
            break
        item = element(cursor)
        if item is None:
            cursor.pos = mark
            break
        items.append(item)
    return items


def _one_or_more(
    cursor: Cursor,
    element: Callable[[Cursor], Optional[T]],
    separator: str,
    field: str,
    expected: str,
) -> list[T]:
    first = element(cursor)
    if first is None:
        raise cursor.fail(f"expected {expected}", field)
    return _repeat_separated(cursor, element, separator, first)


def _expect_separator(cursor: Cursor, field: str) -> None:
    if not cursor.match(FIELD_SEPARATOR):
        raise cursor.fail(f"expected '{FIELD_SEPARATOR}' after {field}", field)


# ─────────────────────────────────────────────────────────────────────────────
# Element parsers
# ─────────────────────────────────────────────────────────────────────────────

def _token(cursor: Cursor) -> Optional[str]:
    token = cursor.take_while(lambda ch: ch != LIST_SEPARATOR and ch != FIELD_SEPARATOR)
    return token or None


def _number(cursor: Cursor, field: str) -> Optional[float]:
    """[-]digits[.digits] in base 60; None if no digits at all.

    Raises GrammarError, positioned at the numeral, if it is too long to
    fit in a float.
    """
    mark = cursor.pos
    sign = -1 if cursor.match(NEGATIVE_SIGN) else 1
    whole = cursor.take_while(is_digit)
    fraction = ""
    if cursor.match(FRACTION_POINT):
        fraction = cursor.take_while(is_digit)
    if not whole and not fraction:
        cursor.pos = mark
        return None
    try:
        value = decode_base60(sign, whole, fraction)
    except OverflowError:
        value = math.inf
    if not math.isfinite(value):
        cursor.pos = mark
        raise cursor.fail("base-60 number out of range", field)
    return value


def _index(cursor: Cursor) -> Optional[int]:
    ch = cursor.peek()
    if ch and "0" <= ch <= "9":
        cursor.pos += 1
        return int(ch)
    return None


# ─────────────────────────────────────────────────────────────────────────────
# Field parsers
# ─────────────────────────────────────────────────────────────────────────────

def _parse_name(cursor: Cursor) -> str:
    name = cursor.take_while(lambda ch: ch != FIELD_SEPARATOR)
    if not name:
        raise cursor.fail("expected zone name", "name")
    return name


def _parse_diffs(cursor: Cursor) -> list[float]:
    if cursor.at_end:
        return []
    minutes = _one_or_more(
        cursor, partial(_number, field="diffs"), LIST_SEPARATOR, "diffs",
        "base-60 number or end of input",
    )
    if not cursor.at_end:
        raise cursor.fail("expected end of input after diffs", "diffs")
    return [value * MILLIS_PER_MINUTE for value in minutes]


def parse_packed(text: str, *, config: Optional[ZoneConfig] = None) -> RawPackedFields:
    """
    Parse a packed zone string into its five raw fields.

    Field relationships (list lengths, index range) are not checked here;
    see decoding.validator.

    Args:
        text: Packed zone string, e.g. "Etc/Test|STD DST|-1 -2|0101|1 1 1"
        config: Supplies error_context for messages (default DEFAULT_CONFIG)

    Returns:
        RawPackedFields with offsets in minutes and diffs in milliseconds

    Raises:
        GrammarError: On any malformed field, naming the field and position
        TypeError: If text is not a str

    Example:
        >>> fields = parse_packed("Etc/Test|TST|0|0|")
        >>> fields.abbreviations
        ('TST',)
    """
    if not isinstance(text, str):
        raise TypeError(f"Packed zone must be a str, got {type(text).__name__}")
    config = config or DEFAULT_CONFIG
    cursor = Cursor(text, context=config.error_context)

    name = _parse_name(cursor)
    _expect_separator(cursor, "name")

    abbreviations = _one_or_more(cursor, _token, LIST_SEPARATOR, "abbreviations", "abbreviation")
    _expect_separator(cursor, "abbreviations")

    offsets = _one_or_more(
        cursor, partial(_number, field="offsets"), LIST_SEPARATOR, "offsets", "base-60 offset"
    )
    _expect_separator(cursor, "offsets")

    indices = _one_or_more(cursor, _index, "", "indices", "index digit")
    _expect_separator(cursor, "indices")

    diffs = _parse_diffs(cursor)

    logger.debug(
        "Parsed %s: %d abbreviations, %d offsets, %d indices, %d diffs",
        name, len(abbreviations), len(offsets), len(indices), len(diffs),
    )
    return RawPackedFields(
        name=name,
        abbreviations=tuple(abbreviations),
        offsets=tuple(offsets),
        indices=tuple(indices),
        diffs=tuple(diffs),
    )
