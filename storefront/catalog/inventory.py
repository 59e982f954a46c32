"""Generic ordered container of item references."""
from typing import Generic, Iterator, Optional, Protocol, Tuple, TypeVar

from storefront.logging import get_logger

logger = get_logger(__name__)


class Identifiable(Protocol):
    """Element contract: an integer id, and equality decided by that id."""

    @property
    def item_id(self) -> int: ...

    def __eq__(self, other: object) -> bool: ...

    def describe(self) -> str: ...


T = TypeVar("T", bound=Identifiable)


class ItemList(Generic[T]):
    """
    Ordered, duplicate-tolerant list of item references.

    The list never copies the items it holds; callers keep their own
    references and see every change made through the list. ``find`` and
    ``remove`` are linear scans.
    """

    def __init__(self):
        self._data: list[T] = []

    def add(self, item: T) -> None:
        """Append ``item``. The same item may be added more than once."""
        self._data.append(item)

    def remove(self, item: T) -> int:
        """
        Remove every element equal to ``item``.

        Returns:
            Number of elements removed (0 if none matched)
        """
        before = len(self._data)
        self._data = [existing for existing in self._data if existing != item]
        removed = before - len(self._data)
        logger.debug(f"Removed {removed} element(s) with ID {item.item_id}")
        return removed

    def find(self, item_id: int) -> Optional[T]:
        """First element whose id matches, or None."""
        return next((item for item in self._data if item.item_id == item_id), None)

    def enumerate(self) -> Iterator[T]:
        """Fresh iterator over the elements in insertion order."""
        return iter(self._data)

    def __iter__(self) -> Iterator[T]:
        return self.enumerate()

    def size(self) -> int:
        return len(self._data)

    def __len__(self) -> int:
        return self.size()

    @property
    def data(self) -> Tuple[T, ...]:
        """Read-only view of the current elements."""
        return tuple(self._data)

    def describe(self) -> str:
        return "\n".join(item.describe() for item in self._data)

    def print(self) -> None:
        for item in self._data:
            print(item.describe())
