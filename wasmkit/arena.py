"""An arena whose items can be deleted, leaving tombstones behind."""

from __future__ import annotations

from typing import Callable, Generic, Iterator, TypeVar

T = TypeVar("T")


class Tombstone:
    """Base for items that release resources when deleted from an arena.

    Deleting an item does not destroy it; the item must remain in a valid
    state after ``on_delete`` runs.
    """

    def on_delete(self) -> None:
        """Release resources held by this item. Does nothing by default."""


class TombstoneArena(Generic[T]):
    """Stores items under integer ids; deleted ids are never reused."""

    def __init__(self) -> None:
        self._items: list[T] = []
        self._dead: set[int] = set()

    def alloc(self, value: T) -> int:
        """Store ``value`` and return its id."""
        self._items.append(value)
        return len(self._items) - 1

    def alloc_with_id(self, factory: Callable[[int], T]) -> int:
        """Build an item from the id it is about to receive and store it."""
        return self.alloc(factory(self.next_id()))

    def get(self, id: int) -> T | None:
        """Return the live item with ``id``, or None if absent or deleted."""
        if id in self:
            return self._items[id]
        return None

    def delete(self, id: int) -> None:
        """Mark the item as deleted and let it release its resources."""
        if id not in self:
            raise KeyError(f"id {id!r} is not a live item of this arena")
        self._dead.add(id)
        on_delete = getattr(self._items[id], "on_delete", None)
        if callable(on_delete):
            on_delete()

    def next_id(self) -> int:
        """The id the next allocated item will receive."""
        return len(self._items)

    def items(self) -> Iterator[tuple[int, T]]:
        """Yield ``(id, item)`` pairs for live items in allocation order."""
        for id, item in enumerate(self._items):
            if id not in self._dead:
                yield id, item

    def __len__(self) -> int:
        return len(self._items) - len(self._dead)

    def __contains__(self, id: object) -> bool:
        return (
            isinstance(id, int)
            and 0 <= id < len(self._items)
            and id not in self._dead
        )

    def __getitem__(self, id: int) -> T:
        if id not in self:
            raise KeyError(f"id {id!r} is not a live item of this arena")
        return self._items[id]

    def __iter__(self) -> Iterator[T]:
        for _, item in self.items():
            yield item