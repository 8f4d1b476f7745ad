"""Explicit stack of open containers, replacing recursive descent."""

from dataclasses import dataclass
from enum import Enum

from ._types import JsonValue


class ContainerKind(Enum):
    """Kinds of container that can be open while decoding."""

    ARRAY = "array"
    OBJECT = "object"


@dataclass(slots=True)
class OpenContainer:
    """
    A container whose opening delimiter has been read but not its closer.

    ``value`` is linked into its parent as soon as the container opens, so
    anything done on ``close()`` must mutate it in place.
    """

    kind: ContainerKind
    value: list[JsonValue] | dict[str, JsonValue]
    closer: str
    sort_keys: bool = False

    @property
    def expects_key(self) -> bool:
        return self.kind is ContainerKind.OBJECT

    def add(self, key: str | None, value: JsonValue) -> None:
        if self.kind is ContainerKind.OBJECT:
            self.value[key] = value  # type: ignore[index, call-overload]
        else:
            self.value.append(value)  # type: ignore[union-attr]

    def close(self) -> list[JsonValue] | dict[str, JsonValue]:
        if self.sort_keys and isinstance(self.value, dict):
            items = sorted(self.value.items())
            self.value.clear()
            self.value.update(items)
        return self.value


class ContainerStack:
    """
    Ordered stack of open containers; the top receives the next value.

    Empty only before the first container opens and after the outermost one
    closes.
    """

    def __init__(self) -> None:
        self._items: list[OpenContainer] = []

    def __len__(self) -> int:
        return len(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)

    @property
    def top(self) -> OpenContainer | None:
        return self._items[-1] if self._items else None

    def push_array(self) -> list[JsonValue]:
        array: list[JsonValue] = []
        self._items.append(OpenContainer(ContainerKind.ARRAY, array, "]"))
        return array

    def push_object(self, sort_keys: bool = False) -> dict[str, JsonValue]:
        obj: dict[str, JsonValue] = {}
        self._items.append(
            OpenContainer(ContainerKind.OBJECT, obj, "}", sort_keys)
        )
        return obj

    def pop(self) -> OpenContainer:
        """Removes the top container; IndexError when nothing is open."""
        return self._items.pop()

    def clear(self) -> None:
        self._items.clear()
