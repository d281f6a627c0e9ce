"""Capability contracts shared by catalog entities.

This module defines the abstract base classes that catalog items build on:

- Watchable: anything with a title that can be validated and played
- Bingeable: a circular sequence of sub-items with a playback cursor
- Sequenceable: an item linked to a previous and next item of its own kind

WatchList and the watchlist generator depend only on these contracts, never
on Movie or TVShow directly.
"""

from abc import ABC, abstractmethod
from collections.abc import Iterator
from typing import Generic, TypeVar

from medialib.catalog.models import Language
from medialib.utils.errors import require

T = TypeVar("T")


class Watchable(ABC):
    """Base class for every playable catalog item.

    Subclasses provide title, language and studio along with validity and
    playback. Tagged metadata is stored here so every Watchable handles it
    the same way.

    Example:
        >>> movie.set_info("director", "Agnes Varda")
        >>> movie.get_info("director")
        'Agnes Varda'
    """

    def __init__(self) -> None:
        super().__init__()
        self._info: dict[str, str] = {}

    @property
    @abstractmethod
    def title(self) -> str:
        """Official title."""

    @property
    @abstractmethod
    def language(self) -> Language:
        """Original language."""

    @property
    @abstractmethod
    def studio(self) -> str:
        """Studio that originally published the item."""

    @abstractmethod
    def is_valid(self) -> bool:
        """Whether the item can currently be played."""

    @abstractmethod
    def watch(self) -> None:
        """Play the item."""

    def set_info(self, key: str, value: str | None) -> str | None:
        """Store a tag value, or remove the tag when value is None.

        Args:
            key: Non-blank tag name.
            value: Value to store, or None to remove the tag.

        Returns:
            The previous value for the key, or None if it was unset.
        """
        _check_key(key)
        if value is None:
            return self._info.pop(key, None)
        previous = self._info.get(key)
        self._info[key] = value
        return previous

    def has_info(self, key: str) -> bool:
        """Check whether a tag is set."""
        _check_key(key)
        return key in self._info

    def get_info(self, key: str) -> str:
        """Get a tag value. The tag must be set."""
        require(self.has_info(key), f"No info stored under key '{key}'")
        return self._info[key]

    @property
    def info(self) -> dict[str, str]:
        """Copy of all tags."""
        return dict(self._info)


class Bingeable(ABC, Generic[T]):
    """A sequence of items consumed through a circular cursor.

    The cursor always lies in ``[0, total_count)``. ``next_item()`` returns
    the item under the cursor and advances it, wrapping back to the first
    item as soon as it reaches the end, so the sequence never reports
    exhaustion. ``remaining_count`` is ``total_count - cursor``.
    """

    def __init__(self) -> None:
        super().__init__()
        self._cursor = 0

    @abstractmethod
    def _items(self) -> list[T]:
        """The underlying ordered items."""

    @property
    def total_count(self) -> int:
        """Number of items in the sequence."""
        return len(self._items())

    @property
    def remaining_count(self) -> int:
        """Number of items from the cursor to the end."""
        return self.total_count - self._cursor

    def next_item(self) -> T:
        """Return the item under the cursor and advance, wrapping at the end.

        Raises:
            ContractViolationError: If the sequence is empty.
        """
        require(self.remaining_count > 0, "Cannot advance an empty sequence")
        items = self._items()
        item = items[self._cursor]
        self._cursor += 1
        if self._cursor >= len(items):
            self._cursor = 0
        return item

    def reset(self) -> None:
        """Move the cursor back to the first item."""
        self._cursor = 0

    def __iter__(self) -> Iterator[T]:
        return iter(tuple(self._items()))

    def __len__(self) -> int:
        return self.total_count


class Sequenceable(ABC, Generic[T]):
    """An item with an optional previous and next item of the same kind."""

    @abstractmethod
    def has_previous(self) -> bool: ...

    @abstractmethod
    def has_next(self) -> bool: ...

    @abstractmethod
    def get_previous(self) -> T | None: ...

    @abstractmethod
    def get_next(self) -> T | None: ...


def _check_key(key: str) -> None:
    require(
        isinstance(key, str) and bool(key.strip()),
        "Info key must be a non-blank string",
    )
