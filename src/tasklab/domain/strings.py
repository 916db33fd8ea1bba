"""Pure string exercises with no I/O or framework dependencies."""

from __future__ import annotations

import string
from typing import Final

GREETING_PREFIX: Final[str] = "Hello, "

#: Returned by :func:`get_card_id` for cards outside the deck.
CARD_NOT_FOUND: Final[int] = -1

_RANKS: Final[tuple[str, ...]] = ("A", "2", "3", "4", "5", "6", "7", "8", "9", "10", "J", "Q", "K")
_SUITS: Final[tuple[str, ...]] = ("♣", "♦", "♥", "♠")

#: Initial deck order, suit by suit.
DECK: Final[tuple[str, ...]] = tuple(f"{rank}{suit}" for suit in _SUITS for rank in _RANKS)
_DECK_INDEX: Final[dict[str, int]] = {card: index for index, card in enumerate(DECK)}

_ROT13: Final[dict[int, int]] = str.maketrans(
    string.ascii_uppercase + string.ascii_lowercase,
    string.ascii_uppercase[13:] + string.ascii_uppercase[:13] + string.ascii_lowercase[13:] + string.ascii_lowercase[:13],
)


def concatenate_strings(value1: str, value2: str) -> str:
    """Return both strings joined.

    Example:
        >>> concatenate_strings("aa", "bb")
        'aabb'
    """
    return value1 + value2


def get_string_length(value: str) -> int:
    return len(value)


def get_string_from_template(first_name: str, last_name: str) -> str:
    """Build the greeting ``Hello, <first> <last>!``.

    Example:
        >>> get_string_from_template("John", "Doe")
        'Hello, John Doe!'
    """
    return f"{GREETING_PREFIX}{first_name} {last_name}!"


def extract_name_from_template(value: str) -> str:
    """Inverse of :func:`get_string_from_template`.

    Example:
        >>> extract_name_from_template("Hello, John Doe!")
        'John Doe'
    """
    return value[len(GREETING_PREFIX) : -1]


def get_first_char(value: str) -> str:
    return value[:1]


def remove_leading_and_trailing_whitespaces(value: str) -> str:
    return value.strip()


def repeat_string(value: str, count: int) -> str:
    return value * count


def remove_first_occurrences(text: str, value: str) -> str:
    """Remove only the first occurrence of *value* from *text*.

    Example:
        >>> remove_first_occurrences("To be or not to be", "not")
        'To be or  to be'
        >>> remove_first_occurrences("ABABAB", "BA")
        'ABAB'
    """
    return text.replace(value, "", 1)


def unbracket_tag(text: str) -> str:
    """Strip the enclosing angle brackets of a tag.

    Example:
        >>> unbracket_tag("<div>")
        'div'
    """
    return text[1:-1]


def convert_to_upper_case(text: str) -> str:
    return text.upper()


def extract_emails(text: str, separator: str = ";") -> list[str]:
    """Split a separator-delimited address list.

    Example:
        >>> extract_emails("angus.young@gmail.com;brian.johnson@hotmail.com")
        ['angus.young@gmail.com', 'brian.johnson@hotmail.com']
    """
    return text.split(separator)


def get_rectangle_string(width: int, height: int) -> str:
    r"""Draw a box with box-drawing characters, one line per row.

    The first row is the top border, the last row the bottom border and every
    row in between is blank inside. Each row ends with ``\n``.

    Example:
        >>> print(get_rectangle_string(6, 4), end="")
        ┌────┐
        │    │
        │    │
        └────┘
    """
    inner = max(width - 2, 0)
    rows: list[str] = []
    for row in range(height):
        if row == 0:
            rows.append(f"┌{'─' * inner}┐\n")
        elif row == height - 1:
            rows.append(f"└{'─' * inner}┘\n")
        else:
            rows.append(f"│{' ' * inner}│\n")
    return "".join(rows)


def encode_to_rot13(text: str) -> str:
    """Shift ASCII letters by 13 places, leaving everything else intact.

    Example:
        >>> encode_to_rot13("Why did the chicken cross the road?")
        'Jul qvq gur puvpxra pebff gur ebnq?'
    """
    return text.translate(_ROT13)


def is_string(value: object) -> bool:
    return isinstance(value, str)


def get_card_id(card: str) -> int:
    """Return the zero-based position of *card* in :data:`DECK`.

    Example:
        >>> get_card_id("A♣"), get_card_id("Q♠"), get_card_id("K♠")
        (0, 50, 51)
        >>> get_card_id("Z♣") == CARD_NOT_FOUND
        True
    """
    return _DECK_INDEX.get(card, CARD_NOT_FOUND)


__all__ = [
    "CARD_NOT_FOUND",
    "DECK",
    "GREETING_PREFIX",
    "concatenate_strings",
    "convert_to_upper_case",
    "encode_to_rot13",
    "extract_emails",
    "extract_name_from_template",
    "get_card_id",
    "get_first_char",
    "get_rectangle_string",
    "get_string_from_template",
    "get_string_length",
    "is_string",
    "remove_first_occurrences",
    "remove_leading_and_trailing_whitespaces",
    "repeat_string",
    "unbracket_tag",
]
