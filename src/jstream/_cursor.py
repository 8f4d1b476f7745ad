"""
Single-character lookahead over a pull-based character source.

Every decision the decoder makes is taken by inspecting
``InputCursor.current``; consuming a character always re-caches the next
one, so ``current`` is the first unconsumed unit of input at all times.
"""

import codecs
from collections.abc import Iterable
from collections.abc import Iterator
from typing import Final

from ._types import JSONDecodeError
from ._types import Position

# Distinct from any one-character string
EOF: Final = ""

# str.isspace() members that Java-style whitespace classification excludes
_NOT_WHITESPACE: Final = frozenset("\u00a0\u2007\u202f\u0085")


def is_whitespace(char: str) -> bool:
    """Unicode-aware whitespace test; ``EOF`` is never whitespace."""
    return bool(char) and char.isspace() and char not in _NOT_WHITESPACE


def iter_chunks(source: object, buffer_size: int) -> Iterator[str]:
    """
    Normalizes a character source into an iterator of text chunks.

    Accepts a complete ``str``, a text or binary file-like object (binary
    streams are decoded incrementally as UTF-8), or an iterable of ``str``
    chunks. The source type is checked here, before any input is consumed.
    """
    if isinstance(source, str):
        return iter((source,))
    if isinstance(source, bytes | bytearray | memoryview):
        raise TypeError(
            "the JSON source must be str or a readable stream, "
            f"not {type(source).__name__}"
        )
    if hasattr(source, "read"):
        return _read_stream(source, buffer_size)
    if isinstance(source, Iterable):
        return _checked_chunks(source)
    raise TypeError(
        f"the JSON source must be str, a readable stream or an iterable of "
        f"str, not {type(source).__name__}"
    )


def _read_stream(stream: object, buffer_size: int) -> Iterator[str]:
    read = stream.read  # type: ignore[attr-defined]
    decoder = None
    while chunk := read(buffer_size):
        if isinstance(chunk, bytes | bytearray):
            if decoder is None:
                decoder = codecs.getincrementaldecoder("utf-8")()
            yield decoder.decode(chunk)
        else:
            yield chunk
    if decoder is not None:
        yield decoder.decode(b"", final=True)


def _checked_chunks(chunks: Iterable[object]) -> Iterator[str]:
    for chunk in chunks:
        if not isinstance(chunk, str):
            raise TypeError(
                f"source chunks must be str, not {type(chunk).__name__}"
            )
        yield chunk


class InputCursor:
    """
    Caches exactly one lookahead character from a chunked source.

    ``pos`` is the index of ``current`` in the stream; ``lineno`` and
    ``colno`` are 1-based and follow ``current``. Before the first
    ``advance()`` the cursor sits on ``EOF`` at position -1.
    """

    def __init__(self, source: object, buffer_size: int = 8192) -> None:
        self._chunks = iter_chunks(source, buffer_size)
        self._chunk = ""
        self._index = 0
        self._exhausted = False
        self.current: str = EOF
        self.pos: Position = -1
        self.lineno = 1
        self.colno = 0

    def _fill(self) -> bool:
        """Loads the next non-empty chunk, returns False when none remain."""
        for chunk in self._chunks:
            if chunk:
                self._chunk = chunk
                self._index = 0
                return True
        return False

    def advance(self) -> str:
        """Consumes the cached character and caches the next one."""
        if self._exhausted:
            return EOF

        if self._index < len(self._chunk) or self._fill():
            char = self._chunk[self._index]
            self._index += 1
        else:
            self._exhausted = True
            char = EOF

        if self.current == "\n":
            self.lineno += 1
            self.colno = 1
        else:
            self.colno += 1
        self.pos += 1
        self.current = char
        return char

    def skip_whitespace(self) -> None:
        char = self.current
        while is_whitespace(char):
            char = self.advance()

    def error(
        self, msg: str, cls: type[JSONDecodeError] = JSONDecodeError
    ) -> JSONDecodeError:
        """Builds a decode error located at the cached character."""
        return cls(msg, max(self.pos, 0), self.lineno, max(self.colno, 1))
