"""Character classification, case conversion and integer/text conversion."""

from __future__ import annotations

_SPACE_CODES = frozenset({9, 10, 11, 12, 13, 32})


def _code(c: int | str) -> int:
    """Return the integer code of *c*, which is an int or a one-character str."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    return c


def is_alpha(c: int | str) -> bool:
    """True for ASCII letters A-Z and a-z."""
    code = _code(c)
    return 65 <= code <= 90 or 97 <= code <= 122


def is_digit(c: int | str) -> bool:
    """True for ASCII digits 0-9."""
    return 48 <= _code(c) <= 57


def is_alnum(c: int | str) -> bool:
    """True for ASCII letters and digits."""
    return is_alpha(c) or is_digit(c)


def is_ascii(c: int | str) -> bool:
    """True for codes 0 through 127."""
    return 0 <= _code(c) <= 127


def is_print(c: int | str) -> bool:
    """True for printable ASCII, space through tilde."""
    return 32 <= _code(c) <= 126


def to_upper(c: int | str) -> int | str:
    """Upper-case an ASCII lower-case letter; anything else is returned as is.

    The result has the same type as the argument.
    """
    code = _code(c)
    if 97 <= code <= 122:
        code -= 32
    return chr(code) if isinstance(c, str) else code


def to_lower(c: int | str) -> int | str:
    """Lower-case an ASCII upper-case letter; anything else is returned as is.

    The result has the same type as the argument.
    """
    code = _code(c)
    if 65 <= code <= 90:
        code += 32
    return chr(code) if isinstance(c, str) else code


def atoi(text: str) -> int:
    """Parse a leading decimal integer.

    Leading whitespace is skipped, a single optional sign is accepted, and
    parsing stops at the first non-digit. Text with no digits gives 0.
    """
    pos = 0
    length = len(text)
    while pos < length and ord(text[pos]) in _SPACE_CODES:
        pos += 1
    negative = False
    if pos < length and text[pos] in "+-":
        negative = text[pos] == "-"
        pos += 1
    result = 0
    while pos < length and is_digit(text[pos]):
        result = result * 10 + (ord(text[pos]) - 48)
        pos += 1
    return -result if negative else result


def itoa(n: int) -> str:
    """Render an integer in decimal, with a leading minus sign if negative."""
    if n < 0:
        return "-" + itoa(-n)
    digits = []
    while True:
        n, digit = divmod(n, 10)
        digits.append(chr(48 + digit))
        if n == 0:
            break
    return "".join(reversed(digits))