"""Named, ordered sequences of watchables."""

from medialib.catalog.base import Bingeable, Watchable
from medialib.utils.errors import require


class WatchList(Bingeable[Watchable]):
    """A sequence of watchables to watch in FIFO order.

    Two watchlists are equal when they hold equal items in the same order;
    the name and cursor position play no part. Watchlists are mutable
    containers and, like ``list``, are not hashable.

    Example:
        >>> weekend = WatchList("weekend")
        >>> weekend.add(movie)
        >>> weekend.next_item() is movie
        True
    """

    __hash__ = None  # type: ignore[assignment]

    def __init__(self, name: str) -> None:
        require(name is not None, "WatchList requires a name")
        super().__init__()
        self._name = name
        self._entries: list[Watchable] = []

    @property
    def name(self) -> str:
        return self._name

    @name.setter
    def name(self, value: str) -> None:
        require(value is not None, "WatchList requires a name")
        self._name = value

    def _items(self) -> list[Watchable]:
        return self._entries

    def add(self, item: Watchable) -> None:
        """Append a watchable to the end of the list."""
        require(item is not None, "Cannot add None to a watchlist")
        self._entries.append(item)

    def remove_next(self) -> Watchable:
        """Remove and return the first item.

        Raises:
            ContractViolationError: If the list is empty.
        """
        require(len(self._entries) > 0, f"Watchlist '{self._name}' is empty")
        item = self._entries.pop(0)
        if self._cursor >= len(self._entries):
            self._cursor = 0
        return item

    def valid_count(self) -> int:
        """Number of items that are currently valid."""
        return sum(1 for item in self._entries if item.is_valid())

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, WatchList):
            return NotImplemented
        if len(self._entries) != len(other._entries):
            return False
        return all(mine == theirs for mine, theirs in zip(self._entries, other._entries))

    def __repr__(self) -> str:
        return f"WatchList(name={self._name!r}, items={len(self._entries)})"
