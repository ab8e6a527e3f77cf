"""A bounded, identity-based list of game objects."""

from __future__ import annotations

from typing import Any, Callable, Iterator, Optional


class EntityList:
    """Ordered container with a fixed capacity.

    Membership is by identity, and ``close`` hands every remaining item to
    the destroy callback.
    """

    def __init__(self, capacity: int, destroy: Optional[Callable[[Any], None]] = None):
        self.capacity = capacity
        self._destroy = destroy
        self._items: list[Any] = []

    def add(self, item: Any) -> int:
        """Append item and return its index; OverflowError when full."""
        if len(self._items) >= self.capacity:
            raise OverflowError(f"entity list is full ({self.capacity} items)")
        self._items.append(item)
        return len(self._items) - 1

    def index_of(self, item: Any) -> int:
        """Index of this very object; ValueError when absent."""
        for index, stored in enumerate(self._items):
            if stored is item:
                return index
        raise ValueError("item is not in the entity list")

    def remove(self, item: Any) -> None:
        """Remove item, keeping the order of the rest; absent items are ignored."""
        try:
            index = self.index_of(item)
        except ValueError:
            return
        del self._items[index]

    def __getitem__(self, index: int) -> Any:
        return self._items[index]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(list(self._items))

    def close(self) -> None:
        """Destroy every item and empty the list."""
        items, self._items = self._items, []
        if self._destroy is not None:
            for item in items:
                self._destroy(item)

    def __enter__(self) -> "EntityList":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()