from datetime import date
from typing import Optional

from tmdb import TMDB_IMAGE_BASE

NOT_AVAILABLE = "N/A"
POSTER_PLACEHOLDER = "/static/no-movie.svg"


def poster_url(poster_path: Optional[str]) -> str:
    return f"{TMDB_IMAGE_BASE}/w500{poster_path}" if poster_path else POSTER_PLACEHOLDER


def backdrop_url(backdrop_path: Optional[str]) -> Optional[str]:
    return f"{TMDB_IMAGE_BASE}/w1280{backdrop_path}" if backdrop_path else None


def format_rating(vote_average: Optional[float]) -> str:
    # A zero average means "no votes yet" on TMDB.
    return f"{vote_average:.1f}" if vote_average else NOT_AVAILABLE


def format_release_date(release_date: Optional[str]) -> str:
    """Render YYYY-MM-DD as e.g. 'November 5, 2014'."""
    if not release_date:
        return NOT_AVAILABLE
    try:
        day = date.fromisoformat(release_date)
    except ValueError:
        return NOT_AVAILABLE
    return f"{day:%B} {day.day}, {day.year}"


def format_runtime(runtime: Optional[int]) -> str:
    return f"{runtime} mins" if runtime else NOT_AVAILABLE


def format_language(original_language: Optional[str]) -> str:
    return original_language.upper() if original_language else NOT_AVAILABLE


def format_currency(amount: Optional[int]) -> Optional[str]:
    """Returns None for missing or non-positive amounts so the panel can be omitted."""
    if not amount or amount <= 0:
        return None
    return f"${amount:,}"
