"""
Lexical readers for strings, numbers and keywords.

Each reader is entered with the cursor on the first character of its token
and returns with the cursor on the first character after it.
"""

from typing import Final

from ._cursor import EOF
from ._cursor import InputCursor
from ._profile import ProfileContext
from ._types import INT32_MAX
from ._types import INT32_MIN
from ._types import INT64_MAX
from ._types import INT64_MIN
from ._types import Int32
from ._types import Int64
from ._types import JSONNumberFormatError

_ESCAPES: Final = {
    '"': '"',
    "\\": "\\",
    "/": "/",
    "b": "\b",
    "f": "\f",
    "n": "\n",
    "r": "\r",
    "t": "\t",
}

_HEX_DIGITS: Final = frozenset("0123456789abcdefABCDEF")
_NUMBER_START: Final = frozenset("0123456789+-")
# Permissive on purpose: placement is checked by the final numeric parse
_NUMBER_CHARS: Final = frozenset("0123456789.eE+-")
_FLOAT_MARKERS: Final = frozenset(".eE")


def is_number_start(char: str) -> bool:
    return char in _NUMBER_START


def is_iso_control(char: str) -> bool:
    """C0 and C1 control characters, plus DEL."""
    code = ord(char)
    return code <= 0x1F or 0x7F <= code <= 0x9F


def _join_surrogates(text: str) -> str:
    """Combines UTF-16 surrogate pairs produced by consecutive \\u escapes."""
    return text.encode("utf-16-le", "surrogatepass").decode(
        "utf-16-le", "surrogatepass"
    )


def parse_number(text: str, is_float: bool) -> Int32 | Int64 | float:
    """
    Converts scanned numeric text, narrowing integers to the smallest kind.

    Raises ValueError (or OverflowError for integers beyond 64 bits) so the
    caller can attach stream position to the failure.
    """
    if is_float:
        return float(text)

    value = int(text)
    if INT32_MIN <= value <= INT32_MAX:
        return Int32(value)
    if INT64_MIN <= value <= INT64_MAX:
        return Int64(value)
    raise OverflowError(f"integer out of 64-bit range: {text}")


class LexicalScanner:
    """
    Reads scalar tokens from a cursor into a shared scratch buffer.

    The buffer belongs to the decoder and is reused for every token; each
    reader clears it before accumulating.
    """

    def __init__(self, cursor: InputCursor, buffer: list[str]) -> None:
        self.cursor = cursor
        self.buffer = buffer

    def read_string(self) -> str:
        """Reads a quoted string, resolving escape sequences."""
        cursor = self.cursor
        buffer = self.buffer
        buffer.clear()
        has_surrogates = False

        with ProfileContext("read_string", cursor):
            # Move past the opening quote
            char = cursor.advance()

            while char != EOF and char != '"':
                if is_iso_control(char):
                    raise cursor.error(
                        f"Invalid control character {char!r} in string"
                    )

                if char == "\\":
                    char = cursor.advance()
                    if char == "u":
                        char = self._read_unicode_escape()
                        has_surrogates |= "\ud800" <= char <= "\udfff"
                    elif char == EOF:
                        raise cursor.error("Unterminated escape sequence")
                    elif char in _ESCAPES:
                        char = _ESCAPES[char]
                    else:
                        raise cursor.error(
                            f"Invalid escape sequence: \\{char}"
                        )

                buffer.append(char)
                char = cursor.advance()

            if char != '"':
                raise cursor.error("Unterminated string")

            # Move past the closing quote
            cursor.advance()

        text = "".join(buffer)
        return _join_surrogates(text) if has_surrogates else text

    def _read_unicode_escape(self) -> str:
        """Consumes the four hex digits of a \\u escape."""
        cursor = self.cursor
        digits = []
        while len(digits) < 4:
            char = cursor.advance()
            if char == EOF:
                raise cursor.error("Incomplete unicode escape sequence")
            digits.append(char)

        hex_digits = "".join(digits)
        if not _HEX_DIGITS.issuperset(hex_digits):
            raise cursor.error(
                f"Invalid unicode escape sequence: \\u{hex_digits}"
            )
        return chr(int(hex_digits, 16))

    def read_number(self) -> Int32 | Int64 | float:
        """Reads a numeric literal; see ``parse_number`` for typing rules."""
        cursor = self.cursor
        buffer = self.buffer
        buffer.clear()
        is_float = False

        with ProfileContext("read_number", cursor):
            char = cursor.current
            while char in _NUMBER_CHARS:
                buffer.append(char)
                is_float |= char in _FLOAT_MARKERS
                char = cursor.advance()

        text = "".join(buffer)
        try:
            return parse_number(text, is_float)
        except OverflowError as e:
            raise cursor.error(
                f"Number out of range: {text}", JSONNumberFormatError
            ) from e
        except ValueError as e:
            raise cursor.error(
                f"Invalid number: {text}", JSONNumberFormatError
            ) from e

    def read_keyword(self, keyword: str) -> bool:
        """
        Matches ``keyword`` one character at a time.

        Returns False at the first mismatch; characters already matched stay
        consumed.
        """
        cursor = self.cursor
        with ProfileContext("read_keyword", cursor):
            for expected in keyword:
                if cursor.current != expected:
                    return False
                cursor.advance()
        return True
