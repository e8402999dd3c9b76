from typing import Generic, Iterator, List, Optional, TypeVar

T = TypeVar("T")


class ResultList(Generic[T]):
    """
    Entities behind the results of the current search pass.

    The position of an entity is the id sent to the launcher. The list is
    rebuilt on every pass, so ids from an earlier pass are never valid.
    """

    def __init__(self):
        self._items: List[T] = []

    def clear(self) -> None:
        self._items.clear()

    def push(self, item: T) -> int:
        self._items.append(item)
        return len(self._items) - 1

    def get(self, id: int) -> Optional[T]:
        if id < 0 or id >= len(self._items):
            return None
        return self._items[id]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __repr__(self):
        return f"ResultList({len(self._items)} items)"
