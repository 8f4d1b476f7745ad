"""
Streaming JSON decoder with a single character of lookahead.

Decodes JSON text from strings, text or binary streams, or iterables of text
chunks into plain Python values in one forward pass. Nesting is tracked on an
explicit container stack, so document depth is never limited by the
interpreter's recursion limit.
"""

from dataclasses import dataclass
from typing import IO
from typing import Any
from typing import Final

from ._cursor import EOF
from ._cursor import InputCursor
from ._profile import HotPathStats
from ._profile import ProfileContext
from ._profile import clear_hot_path_stats
from ._profile import get_hot_path_stats
from ._scanner import LexicalScanner
from ._scanner import is_number_start
from ._stack import ContainerKind
from ._stack import ContainerStack
from ._types import Int32
from ._types import Int64
from ._types import JSONDecodeError
from ._types import JSONNumberFormatError
from ._types import JsonValue
from ._types import Position

__version__ = "0.1.0"

# First letter -> (keyword, decoded value)
_KEYWORDS: Final[dict[str, tuple[str, JsonValue]]] = {
    "t": ("true", True),
    "f": ("false", False),
    "n": ("null", None),
}
_CLOSERS: Final = frozenset("]}")


@dataclass(frozen=True)
class DecodeConfig:
    """
    Configures decoding behavior with immutable settings.

    ``sort_keys`` stores object members ordered by key instead of in the order
    they appear; ``buffer_size`` is how many characters (or bytes) are pulled
    from a stream per read.
    """

    sort_keys: bool = False
    buffer_size: int = 8192

    def __post_init__(self) -> None:
        if not isinstance(self.sort_keys, bool):
            raise TypeError("sort_keys must be a boolean")
        if isinstance(self.buffer_size, bool) or not isinstance(
            self.buffer_size, int
        ):
            raise TypeError("buffer_size must be an integer")
        if self.buffer_size < 1:
            raise ValueError("buffer_size must be positive")


class JSONDecoder:
    """
    Iterative JSON decoder driven by one cached lookahead character.

    Containers are opened and closed on an explicit stack instead of through
    recursive calls. The stack and the scratch buffer live on the instance and
    are reset at the start of every ``read``, so one decoder can be reused for
    any number of documents but must not be shared between threads.
    """

    def __init__(self, **kwargs: Any) -> None:
        self.config = DecodeConfig(**kwargs)
        self._stack = ContainerStack()
        self._buffer: list[str] = []

    def read(self, source: object) -> JsonValue:
        """
        Decodes one JSON document from ``source``.

        Returns ``None`` for empty or whitespace-only input. Raises
        ``TypeError`` when ``source`` is ``None`` or of an unsupported type,
        ``JSONDecodeError`` for malformed input, and lets errors raised by the
        source itself propagate unchanged.
        """
        if source is None:
            raise TypeError("source must not be None")

        stack = self._stack
        stack.clear()
        self._buffer.clear()

        cursor = InputCursor(source, self.config.buffer_size)
        scanner = LexicalScanner(cursor, self._buffer)

        value: JsonValue = None
        complete = False

        cursor.advance()
        with ProfileContext("read", cursor):
            cursor.skip_whitespace()

            while cursor.current != EOF:
                char = cursor.current
                if complete:
                    raise cursor.error("Extra data")

                if char in _CLOSERS:
                    value = self._close_container(cursor)
                    complete = not stack
                elif char == ",":
                    if not stack:
                        raise cursor.error("Unexpected character ','")
                    cursor.advance()
                else:
                    container = stack.top
                    key = None
                    if container is not None and container.expects_key:
                        key = self._read_key(cursor, scanner)

                    value = self._read_value(cursor, scanner)

                    if container is not None:
                        container.add(key, value)
                    else:
                        complete = not stack

                cursor.skip_whitespace()

            if stack:
                kind = stack.top.kind  # type: ignore[union-attr]
                raise cursor.error(f"Unterminated {kind.value}")

        return value

    def _close_container(self, cursor: InputCursor) -> JsonValue:
        stack = self._stack
        container = stack.top
        if container is None:
            raise cursor.error(f"Unexpected character {cursor.current!r}")
        if container.closer != cursor.current:
            raise cursor.error(
                f"Expecting '{container.closer}' to close "
                f"{container.kind.value}"
            )

        stack.pop()
        cursor.advance()
        return container.close()

    def _read_key(self, cursor: InputCursor, scanner: LexicalScanner) -> str:
        """Reads ``"key"`` and the ``:`` delimiter of an object member."""
        if cursor.current != '"':
            raise cursor.error(
                "Expecting property name enclosed in double quotes"
            )

        key = scanner.read_string()
        cursor.skip_whitespace()

        if cursor.current != ":":
            raise cursor.error("Expecting ':' delimiter")

        cursor.advance()
        cursor.skip_whitespace()
        return key

    def _read_value(
        self, cursor: InputCursor, scanner: LexicalScanner
    ) -> JsonValue:
        """
        Decodes the value starting at the lookahead character.

        Opening delimiters push an empty container and return it; its
        contents arrive on later iterations of the driver loop.
        """
        char = cursor.current

        if char == '"':
            return scanner.read_string()
        elif is_number_start(char):
            return scanner.read_number()
        elif char in _KEYWORDS:
            keyword, literal = _KEYWORDS[char]
            if not scanner.read_keyword(keyword):
                raise cursor.error(f"Invalid literal, expecting '{keyword}'")
            return literal
        elif char == "[":
            array = self._stack.push_array()
            cursor.advance()
            return array
        elif char == "{":
            obj = self._stack.push_object(self.config.sort_keys)
            cursor.advance()
            return obj
        elif char == EOF:
            raise cursor.error("Expecting value")
        else:
            raise cursor.error(f"Unexpected character {char!r}")


def read(source: object, **kwargs: Any) -> JsonValue:
    """
    Decodes a JSON document from any supported character source.

    ``source`` may be a ``str``, a text or binary file-like object, or an
    iterable of ``str`` chunks.
    """
    return JSONDecoder(**kwargs).read(source)


def loads(s: str, **kwargs: Any) -> JsonValue:
    """
    Decodes a JSON document held in a string.
    """
    if not isinstance(s, str):
        raise TypeError(
            f"the JSON object must be str, not {type(s).__name__}"
        )

    return JSONDecoder(**kwargs).read(s)


def load(fp: IO[str] | IO[bytes], **kwargs: Any) -> JsonValue:
    """
    Decodes a JSON document from a file-like object, one buffer at a time.
    """
    if not hasattr(fp, "read"):
        raise TypeError("fp must have a read() method")

    return JSONDecoder(**kwargs).read(fp)


__all__ = [
    "ContainerKind",
    "DecodeConfig",
    "HotPathStats",
    "Int32",
    "Int64",
    "JSONDecodeError",
    "JSONDecoder",
    "JSONNumberFormatError",
    "JsonValue",
    "Position",
    "clear_hot_path_stats",
    "get_hot_path_stats",
    "load",
    "loads",
    "read",
]
