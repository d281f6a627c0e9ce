"""The catalog registry.

A Library holds the canonical Movie and TVShow for every title, the
watchlists registered with it, and every episode of its registered shows.
One Library serves the whole process (``get_library()``); separate
instances can be built for tests or embedding.
"""

import logging
import threading
from functools import cmp_to_key
from pathlib import Path
from typing import ClassVar

from medialib.catalog.base import Watchable
from medialib.catalog.models import Language
from medialib.catalog.movie import Movie
from medialib.catalog.policy import GenerationPolicy
from medialib.catalog.tvshow import Episode, TVShow
from medialib.catalog.watchlist import WatchList
from medialib.config.logging import setup_logging
from medialib.config.schema import LibraryConfig
from medialib.utils.errors import require

logger = logging.getLogger(__name__)


class Library:
    """Title-keyed registry of movies and TV shows, plus watchlists.

    Registering under a title that is already taken replaces the previous
    entry, so only one object per title is ever reachable. Creation goes
    through ``generate_movie()`` / ``generate_tv_show()``, which return the
    registered instance when the title is known.

    Example:
        >>> library = Library.instance()
        >>> alien = library.generate_movie("alien.mp4", "Alien", Language.ENGLISH, "Fox")
        >>> library.get_movie("Alien") is alien
        True
    """

    _instance: ClassVar["Library | None"] = None
    _instance_lock: ClassVar[threading.Lock] = threading.Lock()

    def __init__(
        self,
        name: str = "unnamed",
        email_id: str | None = None,
        default_language: Language = Language.ENGLISH,
    ) -> None:
        """Initialize an empty library.

        Args:
            name: Display name of the library.
            email_id: Owner contact address.
            default_language: Language given to new movies and TV shows
                created without one.
        """
        self.name = name
        self.email_id = email_id
        self.default_language = default_language
        self._movies: dict[str, Movie] = {}
        self._tv_shows: dict[str, TVShow] = {}
        self._watchlists: list[WatchList] = []
        self._episodes: set[Episode] = set()
        self._lock = threading.RLock()

    @classmethod
    def instance(cls) -> "Library":
        """Get the process-wide library, creating it on first use."""
        if cls._instance is None:
            with cls._instance_lock:
                if cls._instance is None:
                    cls._instance = cls()
                    logger.debug("Created process-wide library")
        return cls._instance

    @classmethod
    def from_config(cls, config: LibraryConfig) -> "Library":
        """Build a library from configuration.

        Applies the configured log level to the ``medialib`` logger and
        uses the configured default language for new items.
        """
        setup_logging(level=config.log_level)
        return cls(
            name=config.name,
            email_id=config.email_id,
            default_language=config.default_language,
        )

    # Registration

    def register_movie(self, movie: Movie) -> None:
        """Register a movie under its title, replacing any previous one."""
        require(isinstance(movie, Movie), f"Cannot register {movie!r} as a movie")
        with self._lock:
            self._movies[movie.title] = movie
        logger.debug(f"Registered movie '{movie.title}'")

    def register_tv_show(self, show: TVShow) -> None:
        """Register a TV show under its title, along with its episodes."""
        require(isinstance(show, TVShow), f"Cannot register {show!r} as a TV show")
        with self._lock:
            self._tv_shows[show.title] = show
            self._episodes.update(show)
        logger.debug(f"Registered TV show '{show.title}' ({show.total_count} episodes)")

    def register_watchlist(self, watchlist: WatchList) -> None:
        """Register a watchlist and every movie it contains.

        TV shows and episodes in the list are not registered by this call.
        """
        require(isinstance(watchlist, WatchList), f"Cannot register {watchlist!r} as a watchlist")
        with self._lock:
            if not any(existing is watchlist for existing in self._watchlists):
                self._watchlists.append(watchlist)
            for item in watchlist:
                if isinstance(item, Movie):
                    self.register_movie(item)
        logger.debug(f"Registered watchlist '{watchlist.name}'")

    # Lookup

    def has_movie(self, title: str) -> bool:
        return title in self._movies

    def get_movie(self, title: str) -> Movie:
        """Get the registered movie with a title. The title must be registered."""
        require(self.has_movie(title), f"No movie titled '{title}'")
        return self._movies[title]

    def has_tv_show(self, title: str) -> bool:
        return title in self._tv_shows

    def get_tv_show(self, title: str) -> TVShow:
        """Get the registered TV show with a title. The title must be registered."""
        require(self.has_tv_show(title), f"No TV show titled '{title}'")
        return self._tv_shows[title]

    @property
    def watchlists(self) -> tuple[WatchList, ...]:
        """Registered watchlists, in registration order."""
        return tuple(self._watchlists)

    # Creation

    def generate_movie(
        self, path: str | Path, title: str, language: Language | None, studio: str
    ) -> Movie:
        """Get the movie registered under a title, or create and register it.

        When the title is known, the other arguments are ignored. A new movie
        without a language gets ``default_language``.

        Raises:
            InvalidMediaPathError: If a new movie's path is a directory.
        """
        require(
            path is not None and title is not None and studio is not None,
            "Movie requires path, title and studio",
        )
        with self._lock:
            if self.has_movie(title):
                return self._movies[title]
            movie = Movie._create(path, title, language or self.default_language, studio)
            self.register_movie(movie)
            return movie

    def generate_tv_show(
        self, title: str, language: Language | None, studio: str
    ) -> TVShow:
        """Get the TV show registered under a title, or create and register it.

        When the title is known, the other arguments are ignored. A new show
        without a language gets ``default_language``.
        """
        require(
            title is not None and studio is not None,
            "TVShow requires title and studio",
        )
        with self._lock:
            if self.has_tv_show(title):
                return self._tv_shows[title]
            show = TVShow._create(title, language or self.default_language, studio)
            self.register_tv_show(show)
            return show

    def generate_watchlist(self, name: str, policy: GenerationPolicy) -> WatchList:
        """Build a new watchlist from the catalog.

        Episodes are drawn from the TV shows the policy accepts, keeping the
        episodes it also accepts; movies are kept when the policy accepts
        them. The candidates are sorted with ``policy.compare``. The result
        is not registered.

        Args:
            name: Name of the new watchlist.
            policy: Filter and ordering to apply.

        Returns:
            The generated watchlist.
        """
        require(name is not None and policy is not None, "Watchlist generation needs a name and a policy")

        with self._lock:
            shows = list(self._tv_shows.values())
            movies = list(self._movies.values())

        items: list[Watchable] = []
        for show in shows:
            if policy.filter(show):
                items.extend(episode for episode in show if policy.filter(episode))
        items.extend(movie for movie in movies if policy.filter(movie))
        items.sort(key=cmp_to_key(policy.compare))

        watchlist = WatchList(name)
        for item in items:
            watchlist.add(item)

        logger.debug(f"Generated watchlist '{name}' with {len(items)} items")
        return watchlist

    def __repr__(self) -> str:
        return (
            f"Library(name={self.name!r}, movies={len(self._movies)}, "
            f"tv_shows={len(self._tv_shows)}, watchlists={len(self._watchlists)})"
        )


def get_library() -> Library:
    """Get the process-wide library."""
    return Library.instance()
