"""Value and error types shared by the cursor, scanner and decode driver."""

from typing import Final
from typing import TypeAlias

Position: TypeAlias = int

INT32_MIN: Final = -(2**31)
INT32_MAX: Final = 2**31 - 1
INT64_MIN: Final = -(2**63)
INT64_MAX: Final = 2**63 - 1


class Int32(int):
    """Integer literal that fits the signed 32-bit range."""

    __slots__ = ()


class Int64(int):
    """Integer literal outside the 32-bit range but within signed 64 bits."""

    __slots__ = ()


# Closed set of decoded kinds - recursive definition
JsonValue: TypeAlias = (
    None
    | bool
    | Int32
    | Int64
    | float
    | str
    | list["JsonValue"]
    | dict[str, "JsonValue"]
)


class JSONDecodeError(ValueError):
    """
    Handles JSON decoding failures with stream position information.

    The document is never held in memory, so line and column numbers are
    tracked by the cursor as characters are consumed rather than computed
    from the source text afterwards.
    """

    def __init__(
        self, msg: str, pos: Position = 0, lineno: int = 1, colno: int = 1
    ) -> None:
        if not isinstance(msg, str):
            raise TypeError("msg must be a string")
        if not isinstance(pos, int) or pos < 0:
            raise ValueError("pos must be a non-negative integer")

        self.msg = msg
        self.pos = pos
        self.lineno = lineno
        self.colno = colno

        super().__init__(f"{msg} at line {self.lineno}, column {self.colno}")

    def __reduce__(self) -> tuple[type, tuple[str, int, int, int]]:
        return self.__class__, (self.msg, self.pos, self.lineno, self.colno)


class JSONNumberFormatError(JSONDecodeError):
    """Numeric text that matched the scan grammar but failed to parse."""
