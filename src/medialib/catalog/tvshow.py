"""TV show entity and the episodes it owns."""

import logging
import os
from pathlib import Path
from typing import TYPE_CHECKING

from medialib.catalog.base import Bingeable, Watchable
from medialib.catalog.models import Language
from medialib.utils.errors import ContractViolationError, require

if TYPE_CHECKING:
    from medialib.library import Library

logger = logging.getLogger(__name__)

_CONSTRUCTION_KEY = object()


class Episode(Watchable):
    """A single episode of a TV show.

    Episodes are created by ``TVShow.create_and_add_episode()``. Path, title,
    number and show are fixed at creation; language and studio are those of
    the owning show.

    Attributes:
        number: 1-based position within the show.
    """

    def __init__(
        self, path: Path, show: "TVShow", title: str, number: int, *, _key: object = None
    ) -> None:
        if _key is not _CONSTRUCTION_KEY:
            raise ContractViolationError(
                "Episodes are created through TVShow.create_and_add_episode()"
            )
        super().__init__()
        self._path = path
        self._show = show
        self._title = title
        self._number = number

    @property
    def path(self) -> Path:
        return self._path

    @property
    def show(self) -> "TVShow":
        return self._show

    @property
    def title(self) -> str:
        return self._title

    @property
    def number(self) -> int:
        return self._number

    @property
    def language(self) -> Language:
        return self._show.language

    @property
    def studio(self) -> str:
        return self._show.studio

    def is_valid(self) -> bool:
        return self._path.is_file() and os.access(self._path, os.R_OK)

    def watch(self) -> None:
        logger.info(f"Now playing {self._show.title} #{self._number}: {self._title}")

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, Episode):
            return NotImplemented
        return (
            self._path == other._path
            and self._title == other._title
            and self._number == other._number
            and self._show.title == other._show.title
        )

    def __hash__(self) -> int:
        return hash((self._path, self._title, self._number, self._show.title))

    def __repr__(self) -> str:
        return f"Episode(show={self._show.title!r}, number={self._number}, title={self._title!r})"


class TVShow(Watchable, Bingeable[Episode]):
    """A TV show: title, language, studio and an ordered list of episodes.

    TVShows are flyweights like Movies: one per title in a Library. As a
    Bingeable, ``next_item()`` walks the episodes in order and starts over
    after the last one. ``watch()`` plays every valid episode and leaves the
    cursor alone.

    Example:
        >>> show = TVShow.generate("Twin Peaks", Language.ENGLISH, "ABC")
        >>> show.create_and_add_episode("s01e01.mkv", "Pilot")
        >>> show.get_episode(1).title
        'Pilot'
    """

    def __init__(
        self, title: str, language: Language, studio: str, *, _key: object = None
    ) -> None:
        if _key is not _CONSTRUCTION_KEY:
            raise ContractViolationError(
                "TV shows are created through Library.generate_tv_show()"
            )
        require(
            title is not None and language is not None and studio is not None,
            "TVShow requires title, language and studio",
        )
        super().__init__()
        self._title = title
        self._language = language
        self._studio = studio
        self._episodes: list[Episode] = []

    @classmethod
    def _create(cls, title: str, language: Language, studio: str) -> "TVShow":
        """Build a new, unregistered TVShow. Used by the Library only."""
        return cls(title, language, studio, _key=_CONSTRUCTION_KEY)

    @classmethod
    def generate(
        cls,
        title: str,
        language: Language | None,
        studio: str,
        library: "Library | None" = None,
    ) -> "TVShow":
        """Get the canonical TVShow for a title, creating it if needed.

        Other arguments are ignored when the title is already registered. A
        language of None uses the library default.
        """
        if library is None:
            from medialib.library import get_library

            library = get_library()
        return library.generate_tv_show(title, language, studio)

    @property
    def title(self) -> str:
        return self._title

    @property
    def language(self) -> Language:
        return self._language

    @property
    def studio(self) -> str:
        return self._studio

    def _items(self) -> list[Episode]:
        return self._episodes

    def is_valid(self) -> bool:
        """Whether at least one episode is valid."""
        return any(episode.is_valid() for episode in self._episodes)

    def watch(self) -> None:
        for episode in self._episodes:
            if episode.is_valid():
                episode.watch()

    def create_and_add_episode(self, path: str | Path, title: str) -> Episode:
        """Create an episode and append it to the show.

        Args:
            path: Location of the episode's video file.
            title: Episode title.

        Returns:
            The new Episode, numbered after the current last one.
        """
        require(path is not None and title is not None, "Episode requires path and title")
        episode = Episode(
            Path(path), self, title, len(self._episodes) + 1, _key=_CONSTRUCTION_KEY
        )
        self._episodes.append(episode)
        logger.debug(f"Added episode {episode.number} to '{self._title}'")
        return episode

    def get_episode(self, number: int) -> Episode:
        """Get an episode by its 1-based number.

        Raises:
            ContractViolationError: If there is no episode with that number.
        """
        require(
            1 <= number <= len(self._episodes),
            f"'{self._title}' has no episode {number}",
        )
        return self._episodes[number - 1]

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, TVShow):
            return NotImplemented
        return (
            self._title == other._title
            and self._language == other._language
            and self._studio == other._studio
            and self._info == other._info
            and self._episodes == other._episodes
        )

    def __hash__(self) -> int:
        return hash((self._title, self._language, self._studio))

    def __repr__(self) -> str:
        return f"TVShow(title={self._title!r}, episodes={len(self._episodes)})"
