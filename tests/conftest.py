import os

import pytest

# config.settings is built at import time and needs a credential.
os.environ.setdefault("TMDB_API_KEY", "test-token")


@pytest.fixture
def movie_payload() -> dict:
    """A trimmed TMDB /movie/{id} response for Interstellar."""
    return {
        "id": 157336,
        "title": "Interstellar",
        "tagline": "Mankind was born on Earth. It was never meant to die here.",
        "overview": "The adventures of a group of explorers who travel through a wormhole.",
        "vote_average": 8.4,
        "vote_count": 36000,
        "runtime": 169,
        "release_date": "2014-11-05",
        "status": "Released",
        "original_language": "en",
        "genres": [{"id": 12, "name": "Adventure"}, {"id": 18, "name": "Drama"}],
        "budget": 165000000,
        "revenue": 701729206,
        "poster_path": "/gEU2QniE6E77NI6lCU6MxlNBvIx.jpg",
        "backdrop_path": "/xJHokMbljvjADYdit5fK5VQsXEG.jpg",
        "production_companies": [
            {"id": 923, "name": "Legendary Pictures", "logo_path": None, "origin_country": "US"}
        ],
        "production_countries": [{"iso_3166_1": "US", "name": "United States of America"}],
        "adult": False,
    }
