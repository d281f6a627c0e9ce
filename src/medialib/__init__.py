"""medialib - a personal media catalog with watchlists."""

from medialib.catalog import (
    Bingeable,
    Episode,
    GenerationPolicy,
    KeyPolicy,
    Language,
    Movie,
    Sequenceable,
    TVShow,
    WatchList,
    Watchable,
)
from medialib.library import Library, get_library

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "Bingeable",
    "Episode",
    "GenerationPolicy",
    "KeyPolicy",
    "Language",
    "Library",
    "Movie",
    "Sequenceable",
    "TVShow",
    "WatchList",
    "Watchable",
    "get_library",
]
