from __future__ import annotations
from typing import Any, Callable, Generic, Optional, Sequence, Tuple, TypeVar

T = TypeVar("T")

NOT_FOUND = -1

def _identity(x: Any) -> Any:
    return x

class BinarySearch(Generic[T]):
    """Index lookup over a sequence that is already sorted ascending.

    The items are copied once at construction and never re-sorted or
    checked; an unsorted input gives undefined results. ``key`` is applied
    to both the stored items and the target, the same way ``sorted(key=...)``
    orders them.
    """

    def __init__(self, items: Sequence[T], key: Optional[Callable[[T], Any]] = None) -> None:
        self._items: Tuple[T, ...] = tuple(items)
        self._key = key if key is not None else _identity

    def index_of(self, target: T) -> int:
        """Index of an item equal to ``target`` or ``NOT_FOUND``.

        With duplicates, any one matching index may be returned.
        """
        wanted = self._key(target)
        low, high = 0, len(self._items) - 1
        while low <= high:
            mid = (low + high) // 2
            current = self._key(self._items[mid])
            if current == wanted:
                return mid
            if current < wanted:
                low = mid + 1
            else:
                high = mid - 1
        return NOT_FOUND

    def __contains__(self, target: object) -> bool:
        return self.index_of(target) != NOT_FOUND  # type: ignore[arg-type]

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"BinarySearch({list(self._items)!r})"
