from formatting import (
    POSTER_PLACEHOLDER,
    backdrop_url,
    format_currency,
    format_language,
    format_rating,
    format_release_date,
    format_runtime,
    poster_url,
)


def test_poster_url():
    assert poster_url("/abc.jpg") == "https://image.tmdb.org/t/p/w500/abc.jpg"


def test_poster_url_falls_back_to_placeholder():
    assert poster_url(None) == POSTER_PLACEHOLDER
    assert poster_url("") == POSTER_PLACEHOLDER


def test_backdrop_url():
    assert backdrop_url("/bg.jpg") == "https://image.tmdb.org/t/p/w1280/bg.jpg"
    assert backdrop_url(None) is None


def test_format_rating():
    assert format_rating(7.6) == "7.6"
    assert format_rating(8.4567) == "8.5"
    assert format_rating(7) == "7.0"
    assert format_rating(None) == "N/A"
    assert format_rating(0) == "N/A"


def test_format_release_date():
    assert format_release_date("2014-11-05") == "November 5, 2014"
    assert format_release_date("1999-03-31") == "March 31, 1999"
    assert format_release_date(None) == "N/A"
    assert format_release_date("") == "N/A"
    assert format_release_date("not-a-date") == "N/A"


def test_format_runtime():
    assert format_runtime(169) == "169 mins"
    assert format_runtime(None) == "N/A"
    assert format_runtime(0) == "N/A"


def test_format_language():
    assert format_language("en") == "EN"
    assert format_language(None) == "N/A"


def test_format_currency():
    assert format_currency(165000000) == "$165,000,000"
    assert format_currency(999) == "$999"
    assert format_currency(0) is None
    assert format_currency(None) is None
    assert format_currency(-5) is None
