"""Catalog entities: movies, TV shows, episodes and watchlists."""

from medialib.catalog.base import Bingeable, Sequenceable, Watchable
from medialib.catalog.models import Language
from medialib.catalog.movie import Movie
from medialib.catalog.policy import GenerationPolicy, KeyPolicy
from medialib.catalog.tvshow import Episode, TVShow
from medialib.catalog.watchlist import WatchList

__all__ = [
    "Bingeable",
    "Episode",
    "GenerationPolicy",
    "KeyPolicy",
    "Language",
    "Movie",
    "Sequenceable",
    "TVShow",
    "WatchList",
    "Watchable",
]
