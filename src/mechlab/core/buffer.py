"""
Bounded FIFO sample buffer.

Keeps the most recent ``capacity`` items in insertion order. When the buffer
is full the oldest item is evicted before the new one is appended, giving a
strict sliding window over the simulation history.
"""
from __future__ import annotations

from collections import deque
from collections.abc import Iterator
from typing import Generic, TypeVar

T = TypeVar("T")


class RollingBuffer(Generic[T]):
    """
    Fixed-capacity, insertion-ordered sequence with FIFO eviction.

    Parameters
    ----------
    capacity : int
        Maximum number of items held. Must be positive.

    Examples
    --------
    >>> buf = RollingBuffer[int](3)
    >>> for i in range(5):
    ...     buf.append(i)
    >>> list(buf)
    [2, 3, 4]
    """

    def __init__(self, capacity: int) -> None:
        if capacity <= 0:
            raise ValueError(f"Buffer capacity must be positive, got {capacity}")
        self._capacity = int(capacity)
        self._items: deque[T] = deque(maxlen=self._capacity)

    @property
    def capacity(self) -> int:
        """Maximum number of items retained."""
        return self._capacity

    @property
    def is_full(self) -> bool:
        return len(self._items) == self._capacity

    @property
    def latest(self) -> T | None:
        """Most recently appended item, or None when empty."""
        return self._items[-1] if self._items else None

    def append(self, item: T) -> None:
        """Append ``item``, evicting the oldest item first when full."""
        if len(self._items) == self._capacity:
            self._items.popleft()
        self._items.append(item)

    def clear(self) -> None:
        self._items.clear()

    def to_list(self) -> list[T]:
        return list(self._items)

    def column(self, name: str) -> list:
        """
        Extract one attribute from every item, oldest first.

        Used by chart collaborators to build per-series data, e.g.
        ``buf.column("kinetic_energy")``.
        """
        return [getattr(item, name) for item in self._items]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __getitem__(self, index: int) -> T:
        return self._items[index]

    def __repr__(self) -> str:
        return f"RollingBuffer(capacity={self._capacity}, size={len(self._items)})"
