"""Policies that drive watchlist generation.

A policy is both a filter and an ordering. ``Library.generate_watchlist()``
asks the filter about TV shows, their episodes and movies alike, then sorts
the accepted items with ``compare``.
"""

from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass
from operator import attrgetter
from typing import Any

from medialib.catalog.base import Watchable


class GenerationPolicy(ABC):
    """Filter plus comparator consumed by the watchlist generator."""

    @abstractmethod
    def filter(self, item: Watchable) -> bool:
        """Whether an item (TVShow, Episode or Movie) should be included."""

    @abstractmethod
    def compare(self, first: Watchable, second: Watchable) -> int:
        """Negative, zero or positive as first sorts before, with, or after second."""


@dataclass
class KeyPolicy(GenerationPolicy):
    """Policy built from a predicate and a sort key.

    Attributes:
        predicate: Items for which this returns True are kept. Keeps all
            items when None.
        key: Sort key. Sorts by title when None.
        reverse: Sort in descending order.

    Example:
        >>> french = KeyPolicy(predicate=lambda w: w.language is Language.FRENCH)
        >>> library.generate_watchlist("french night", french)
    """

    predicate: Callable[[Watchable], bool] | None = None
    key: Callable[[Watchable], Any] | None = None
    reverse: bool = False

    def filter(self, item: Watchable) -> bool:
        if self.predicate is None:
            return True
        return bool(self.predicate(item))

    def compare(self, first: Watchable, second: Watchable) -> int:
        key = self.key or attrgetter("title")
        a, b = key(first), key(second)
        result = (a > b) - (a < b)
        return -result if self.reverse else result
