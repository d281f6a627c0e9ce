"""Tests for WatchList."""

from pathlib import Path

import pytest

from medialib.catalog.models import Language
from medialib.catalog.movie import Movie
from medialib.catalog.tvshow import TVShow
from medialib.catalog.watchlist import WatchList
from medialib.utils.errors import ContractViolationError


@pytest.fixture
def movies(media_dir: Path) -> list[Movie]:
    """Create three movies, the first two backed by real files."""
    return [
        Movie.generate(media_dir / "one.mp4", "movie1", Language.ENGLISH, "mcgill"),
        Movie.generate(media_dir / "two.mp4", "movie2", Language.ENGLISH, "ubc"),
        Movie.generate(media_dir / "absent.mp4", "movie3", Language.FRENCH, "mcgill"),
    ]


def make_list(name: str, *items) -> WatchList:
    watchlist = WatchList(name)
    for item in items:
        watchlist.add(item)
    return watchlist


class TestWatchListEquality:
    """Tests for order-sensitive, name-independent equality."""

    def test_same_items_same_order_equal(self, movies: list[Movie]) -> None:
        """Test that names do not matter."""
        m1, m2, _ = movies
        assert make_list("first", m1, m2) == make_list("second", m1, m2)

    def test_order_matters(self, movies: list[Movie]) -> None:
        """Test that the same items in another order are unequal."""
        m1, m2, _ = movies
        assert make_list("first", m1, m2) != make_list("second", m2, m1)

    def test_empty_lists_equal(self) -> None:
        """Test that two empty lists are equal regardless of name."""
        assert WatchList("a") == WatchList("b")

    def test_length_matters(self, movies: list[Movie]) -> None:
        m1, m2, _ = movies
        assert make_list("a", m1) != make_list("b", m1, m2)

    def test_cursor_ignored(self, movies: list[Movie]) -> None:
        """Test that cursor position does not affect equality."""
        m1, m2, _ = movies
        advanced = make_list("a", m1, m2)
        advanced.next_item()

        assert advanced == make_list("b", m1, m2)

    def test_flyweight_items_make_lists_equal(self) -> None:
        """Test lists built from repeated generate calls on one title."""
        m2 = Movie.generate("2.mp4", "movie2", Language.ENGLISH, "ubc")
        m3 = Movie.generate("3.mp4", "movie2", Language.ENGLISH, "ubc")
        t1 = TVShow.generate("Wow Show", Language.ENGLISH, "concordia")
        t2 = TVShow.generate("Wow Show", Language.CHINESE, "ubc")

        assert make_list("wl1", m2, t1) == make_list("wl2", m3, t2)

    def test_unhashable(self) -> None:
        """Test that watchlists cannot be used as set members."""
        with pytest.raises(TypeError):
            hash(WatchList("a"))


class TestWatchListOperations:
    """Tests for add, remove_next and counts."""

    def test_remove_next_is_fifo(self, movies: list[Movie]) -> None:
        """Test that items come out in insertion order."""
        watchlist = make_list("fifo", *movies)

        assert watchlist.remove_next() is movies[0]
        assert watchlist.remove_next() is movies[1]
        assert watchlist.total_count == 1

    def test_remove_next_on_empty_raises(self) -> None:
        with pytest.raises(ContractViolationError):
            WatchList("empty").remove_next()

    def test_remove_next_keeps_cursor_in_range(self, movies: list[Movie]) -> None:
        """Test that the cursor wraps when removal shortens the list under it."""
        m1, m2, _ = movies
        watchlist = make_list("short", m1, m2)
        watchlist.next_item()

        watchlist.remove_next()

        assert watchlist.remaining_count == 1
        assert watchlist.next_item() is m2

    def test_valid_count(self, movies: list[Movie]) -> None:
        """Test that only playable items are counted."""
        assert make_list("mixed", *movies).valid_count() == 2

    def test_add_none_raises(self) -> None:
        with pytest.raises(ContractViolationError):
            WatchList("a").add(None)  # type: ignore[arg-type]

    def test_rename(self) -> None:
        watchlist = WatchList("old")
        watchlist.name = "new"
        assert watchlist.name == "new"

    def test_missing_name_raises(self) -> None:
        with pytest.raises(ContractViolationError):
            WatchList(None)  # type: ignore[arg-type]

    def test_rename_to_none_raises(self) -> None:
        """Test that a failed rename keeps the old name."""
        watchlist = WatchList("kept")

        with pytest.raises(ContractViolationError):
            watchlist.name = None  # type: ignore[assignment]

        assert watchlist.name == "kept"

    def test_iteration_does_not_expose_storage(self, movies: list[Movie]) -> None:
        """Test that iterating yields the items without allowing mutation."""
        watchlist = make_list("iter", *movies)
        assert list(watchlist) == movies
        assert len(watchlist) == 3


class TestWatchListBingeable:
    """Tests for the circular cursor."""

    def test_next_item_wraps(self, movies: list[Movie]) -> None:
        watchlist = make_list("loop", *movies)
        produced = [watchlist.next_item() for _ in range(4)]
        assert produced == [movies[0], movies[1], movies[2], movies[0]]

    def test_reset(self, movies: list[Movie]) -> None:
        watchlist = make_list("loop", *movies)
        watchlist.next_item()
        watchlist.next_item()

        watchlist.reset()

        assert watchlist.remaining_count == 3
        assert watchlist.next_item() is movies[0]

    def test_next_item_does_not_remove(self, movies: list[Movie]) -> None:
        watchlist = make_list("loop", *movies)
        watchlist.next_item()
        assert watchlist.total_count == 3

    def test_next_item_on_empty_raises(self) -> None:
        with pytest.raises(ContractViolationError):
            WatchList("empty").next_item()
