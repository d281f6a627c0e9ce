"""Movie entity with prequel/sequel links.

Movies are flyweights: at most one Movie per title lives in a Library. They
are created through ``Library.generate_movie()`` (or the ``Movie.generate()``
shortcut), never by calling the constructor.
"""

import logging
import os
import threading
from pathlib import Path
from typing import TYPE_CHECKING

from medialib.catalog.base import Sequenceable, Watchable
from medialib.catalog.models import Language
from medialib.utils.errors import (
    ContractViolationError,
    InvalidMediaPathError,
    require,
)

if TYPE_CHECKING:
    from medialib.library import Library

logger = logging.getLogger(__name__)

_CONSTRUCTION_KEY = object()

# Guards prequel/sequel rewiring so both directions change together
_LINK_LOCK = threading.Lock()


class Movie(Watchable, Sequenceable["Movie"]):
    """A single movie file with title, language and studio.

    Movies may be chained into a series: ``set_previous()`` links a prequel
    and keeps both directions of the link in step.

    Example:
        >>> first = Movie.generate("alien.mp4", "Alien", Language.ENGLISH, "Fox")
        >>> second = Movie.generate("aliens.mp4", "Aliens", Language.ENGLISH, "Fox")
        >>> second.set_previous(first)
        >>> first.get_next() is second
        True
    """

    def __init__(
        self,
        path: Path,
        title: str,
        language: Language,
        studio: str,
        *,
        _key: object = None,
    ) -> None:
        if _key is not _CONSTRUCTION_KEY:
            raise ContractViolationError(
                "Movies are created through Library.generate_movie()"
            )
        require(
            path is not None and title is not None
            and language is not None and studio is not None,
            "Movie requires path, title, language and studio",
        )
        if path.exists() and not path.is_file():
            raise InvalidMediaPathError(
                path,
                f"Movie path should point to a file: {path}",
                suggestion="Pass the path of the video file, not its folder",
            )
        super().__init__()
        self._path = path
        self._title = title
        self._language = language
        self._studio = studio
        self._prequel: Movie | None = None
        self._sequel: Movie | None = None

    @classmethod
    def _create(
        cls, path: str | Path, title: str, language: Language, studio: str
    ) -> "Movie":
        """Build a new, unregistered Movie. Used by the Library only."""
        return cls(Path(path), title, language, studio, _key=_CONSTRUCTION_KEY)

    @classmethod
    def generate(
        cls,
        path: str | Path,
        title: str,
        language: Language | None,
        studio: str,
        library: "Library | None" = None,
    ) -> "Movie":
        """Get the canonical Movie for a title, creating it if needed.

        On a title hit the registered Movie is returned as-is and the other
        arguments are ignored.

        Args:
            path: Location of the movie file.
            title: Official title in the original language.
            language: Language of the movie. None uses the library default.
            studio: Studio that originally published the movie.
            library: Library to use. Defaults to the process-wide one.

        Returns:
            The new or already registered Movie.

        Raises:
            InvalidMediaPathError: If a new Movie's path is a directory.
        """
        if library is None:
            from medialib.library import get_library

            library = get_library()
        return library.generate_movie(path, title, language, studio)

    @property
    def path(self) -> Path:
        return self._path

    @property
    def title(self) -> str:
        return self._title

    @property
    def language(self) -> Language:
        return self._language

    @property
    def studio(self) -> str:
        return self._studio

    def is_valid(self) -> bool:
        """Whether the file exists, is a regular file, and is readable."""
        return self._path.is_file() and os.access(self._path, os.R_OK)

    def watch(self) -> None:
        # Playback stub; there is no media engine
        logger.info(f"Now playing {self._title}")

    def has_previous(self) -> bool:
        return self._prequel is not None

    def has_next(self) -> bool:
        return self._sequel is not None

    def get_previous(self) -> "Movie | None":
        return self._prequel

    def get_next(self) -> "Movie | None":
        return self._sequel

    def set_previous(self, movie: "Movie") -> None:
        """Set the prequel of this movie.

        Any existing prequel of this movie loses its sequel, and any existing
        sequel of ``movie`` loses its prequel, before the new link is made.

        Args:
            movie: Movie to link as the prequel.

        Raises:
            ContractViolationError: If movie is not a Movie, or the link
                would make the series circular.
        """
        require(isinstance(movie, Movie), "Prequel must be a Movie")
        with _LINK_LOCK:
            node: Movie | None = self
            while node is not None:
                require(node is not movie, "Linking these movies would create a cycle")
                node = node._sequel

            if self._prequel is not None:
                self._prequel._sequel = None
            if movie._sequel is not None:
                movie._sequel._prequel = None
            self._prequel = movie
            movie._sequel = self
        logger.debug(f"Linked '{movie.title}' -> '{self._title}'")

    def chain(self) -> list["Movie"]:
        """Get the whole series this movie belongs to, earliest first."""
        first = self
        while first._prequel is not None:
            first = first._prequel
        series: list[Movie] = []
        node: Movie | None = first
        while node is not None:
            series.append(node)
            node = node._sequel
        return series

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, Movie):
            return NotImplemented
        # Links compare by identity so equality never walks the series
        return (
            self._path == other._path
            and self._title == other._title
            and self._language == other._language
            and self._studio == other._studio
            and self._prequel is other._prequel
            and self._sequel is other._sequel
            and self._info == other._info
        )

    def __hash__(self) -> int:
        return hash((self._path, self._title, self._language, self._studio))

    def __repr__(self) -> str:
        return f"Movie(title={self._title!r}, path={str(self._path)!r})"
