import logging

import tmdb
from models import ErrorState, LoadingState, SuccessState, ViewState

logger = logging.getLogger(__name__)


class MovieDetailsView:
    """
    Fetch-render state machine for a single details page.

    Starts in the loading state. Each call to load() resolves to exactly one
    error or success state. A result whose generation was superseded by a later
    load() is dropped and leaves the current state untouched.
    """

    def __init__(self, api_key: str, language: str = "en-US", timeout: float = 30.0):
        self.api_key = api_key
        self.language = language
        self.timeout = timeout
        self.state: ViewState = LoadingState(movie_id="")
        self._generation = 0

    async def load(self, movie_id: str) -> ViewState:
        self._generation += 1
        generation = self._generation
        self.state = LoadingState(movie_id=movie_id)

        try:
            movie = await tmdb.fetch_movie_details(
                self.api_key, movie_id, self.language, self.timeout
            )
        except tmdb.TMDBError as exc:
            logger.error("Error fetching movie details for %s: %s", movie_id, exc.message)
            result: ViewState = ErrorState(movie_id=movie_id, kind=exc.kind, message=exc.message)
        else:
            result = SuccessState(movie_id=movie_id, movie=movie)

        if generation != self._generation:
            logger.info("Discarding stale result for movie %s", movie_id)
            return self.state

        self.state = result
        return result
