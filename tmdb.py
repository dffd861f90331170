import logging
from typing import Optional

import httpx
from pydantic import ValidationError

from models import Movie

logger = logging.getLogger(__name__)

TMDB_BASE = "https://api.themoviedb.org/3"
TMDB_IMAGE_BASE = "https://image.tmdb.org/t/p"

STATUS_ERROR_MESSAGE = "Failed to fetch movie details"


class TMDBError(Exception):
    """Base class for failures while fetching a movie from TMDB."""

    kind = "network"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class TMDBNetworkError(TMDBError):
    kind = "network"


class TMDBStatusError(TMDBError):
    kind = "http_status"

    def __init__(self, status_code: int):
        super().__init__(STATUS_ERROR_MESSAGE)
        self.status_code = status_code


class TMDBParseError(TMDBError):
    kind = "parse"


def _describe(exc: Exception) -> str:
    return str(exc) or exc.__class__.__name__


async def get_movie_details(
    client: httpx.AsyncClient, api_key: str, movie_id: str, language: str = "en-US"
) -> Optional[Movie]:
    """Fetch one movie record. Returns None when TMDB answers with an empty body."""
    try:
        response = await client.get(
            f"{TMDB_BASE}/movie/{movie_id}",
            params={"language": language},
            headers={
                "accept": "application/json",
                "Authorization": f"Bearer {api_key}",
            },
        )
    except (httpx.RequestError, httpx.InvalidURL) as exc:
        raise TMDBNetworkError(_describe(exc)) from exc

    if not response.is_success:
        # Server-provided detail is discarded.
        raise TMDBStatusError(response.status_code)

    try:
        data = response.json()
    except ValueError as exc:
        raise TMDBParseError(_describe(exc)) from exc

    if not data:
        return None
    if not isinstance(data, dict):
        raise TMDBParseError(f"Unexpected movie payload: {type(data).__name__}")

    try:
        return Movie.model_validate(data)
    except ValidationError as exc:
        raise TMDBParseError(_describe(exc)) from exc


async def fetch_movie_details(
    api_key: str, movie_id: str, language: str = "en-US", timeout: float = 30.0
) -> Optional[Movie]:
    """Open a client, fetch a single movie and close the client again."""
    logger.info("Fetching movie details for %s", movie_id)
    async with httpx.AsyncClient(timeout=timeout) as client:
        return await get_movie_details(client, api_key, movie_id, language)
