"""Byte classification and decimal parsing helpers for the PDF lexer."""

from .errors import CharacterError

NULL = 0
HORIZONTAL_TAB = 9
LINE_FEED = 10
FORM_FEED = 12
CARRIAGE_RETURN = 13
SPACE = 32

LEFT_PARENTHESIS = ord("(")
RIGHT_PARENTHESIS = ord(")")
LESS_THAN_SIGN = ord("<")
GREATER_THAN_SIGN = ord(">")
LEFT_SQUARE_BRACKET = ord("[")
RIGHT_SQUARE_BRACKET = ord("]")
LEFT_CURLY_BRACKET = ord("{")
RIGHT_CURLY_BRACKET = ord("}")
SOLIDUS = ord("/")
PERCENT_SIGN = ord("%")
NUMBER_SIGN = ord("#")
REVERSE_SOLIDUS = ord("\\")

WHITE_SPACE = frozenset(
    {NULL, HORIZONTAL_TAB, LINE_FEED, FORM_FEED, CARRIAGE_RETURN, SPACE}
)

DELIMITERS = frozenset(
    {
        LEFT_PARENTHESIS,
        RIGHT_PARENTHESIS,
        LESS_THAN_SIGN,
        GREATER_THAN_SIGN,
        LEFT_SQUARE_BRACKET,
        RIGHT_SQUARE_BRACKET,
        LEFT_CURLY_BRACKET,
        RIGHT_CURLY_BRACKET,
        SOLIDUS,
        PERCENT_SIGN,
    }
)

_NUMBER_CHARS = frozenset(b".+-0123456789")


def is_white_space(ch: int) -> bool:
    """Return True if the byte is PDF white space."""
    return ch in WHITE_SPACE


def is_delimiter(ch: int) -> bool:
    """Return True if the byte is a PDF delimiter."""
    return ch in DELIMITERS


def is_number(ch: int) -> bool:
    """Return True if the byte may appear in a numeric token."""
    return ch in _NUMBER_CHARS


def _parse_decimal(buf: bytes, limit: int, detail: bool) -> int:
    n = 0
    for c in buf:
        if not 0x30 <= c <= 0x39:
            message = "usize_from_buffer param need between 0-9"
            if detail:
                message += f" got:{c}"
            raise CharacterError(message)
        n = n * 10 + (c - 0x30)
        if n > limit:
            raise CharacterError(f"number {buf!r} is out of range")
    return n


def u32_from_buffer(buf: bytes) -> int:
    """Parse an unsigned decimal that fits in 32 bits."""
    return _parse_decimal(buf, 0xFFFF_FFFF, False)


def u16_from_buffer(buf: bytes) -> int:
    """Parse an unsigned decimal that fits in 16 bits."""
    return _parse_decimal(buf, 0xFFFF, False)


def usize_from_buffer(buf: bytes) -> int:
    """Parse an unsigned decimal that fits in 64 bits."""
    return _parse_decimal(buf, 0xFFFF_FFFF_FFFF_FFFF, True)