"""A list that always holds at least one element."""

from __future__ import annotations

from typing import Any, Generic, Iterable, Iterator, List, Optional, TypeVar

T = TypeVar("T")


class NonEmptyList(Generic[T]):
    """A list guaranteed to be non-empty.

    ``pop`` returns ``None`` rather than removing the last remaining element.
    """

    __hash__ = None  # type: ignore[assignment]

    def __init__(self, first: T, *args: T) -> None:
        self._items: List[T] = [first, *args]

    @classmethod
    def from_iterable(cls, items: Iterable[T]) -> "NonEmptyList[T]":
        """Build a list from an iterable, which must not be empty."""
        values = list(items)
        if not values:
            raise ValueError("cannot create a non-empty vector from an empty vector")
        return cls(*values)

    def first(self) -> T:
        """Return the first element."""
        return self._items[0]

    def last(self) -> T:
        """Return the last element."""
        return self._items[-1]

    def push(self, item: T) -> None:
        """Append an element."""
        self._items.append(item)

    def pop(self) -> Optional[T]:
        """Remove and return the last element, or None if only one is left."""
        if len(self._items) == 1:
            return None
        return self._items.pop()

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __getitem__(self, index: int) -> T:
        if isinstance(index, slice):
            raise TypeError("NonEmptyList does not support slicing")
        return self._items[index]

    def __setitem__(self, index: int, value: T) -> None:
        if isinstance(index, slice):
            raise TypeError("NonEmptyList does not support slicing")
        self._items[index] = value

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, NonEmptyList):
            return NotImplemented
        return self._items == other._items

    def to_list(self) -> List[T]:
        """Return the elements as a new plain list."""
        return list(self._items)

    def __repr__(self) -> str:
        return f"NonEmptyList({', '.join(map(repr, self._items))})"