from typing import Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Genre(BaseModel):
    id: Optional[int] = None
    name: Optional[str] = None


class ProductionCompany(BaseModel):
    id: Optional[int] = None
    name: Optional[str] = None
    logo_path: Optional[str] = None
    origin_country: Optional[str] = None


class ProductionCountry(BaseModel):
    iso_3166_1: Optional[str] = None
    name: Optional[str] = None


class Movie(BaseModel):
    """A movie record as returned by TMDB's /movie/{id} endpoint."""

    model_config = ConfigDict(extra="ignore")

    id: Optional[int] = None
    title: Optional[str] = None
    tagline: Optional[str] = None
    overview: Optional[str] = None
    vote_average: Optional[float] = None
    vote_count: Optional[int] = None
    runtime: Optional[int] = None
    release_date: Optional[str] = None  # YYYY-MM-DD, may be ""
    status: Optional[str] = None
    original_language: Optional[str] = None
    genres: list[Genre] = Field(default_factory=list)
    budget: Optional[int] = None
    revenue: Optional[int] = None
    poster_path: Optional[str] = None
    backdrop_path: Optional[str] = None
    production_companies: list[ProductionCompany] = Field(default_factory=list)
    production_countries: list[ProductionCountry] = Field(default_factory=list)
    homepage: Optional[str] = None
    imdb_id: Optional[str] = None

    @field_validator("genres", "production_companies", "production_countries", mode="before")
    @classmethod
    def _null_list(cls, value):
        return [] if value is None else value


ErrorKind = Literal["network", "http_status", "parse"]


class LoadingState(BaseModel):
    state: Literal["loading"] = "loading"
    movie_id: str


class ErrorState(BaseModel):
    state: Literal["error"] = "error"
    movie_id: str
    kind: ErrorKind
    message: str


class SuccessState(BaseModel):
    state: Literal["success"] = "success"
    movie_id: str
    movie: Optional[Movie] = None  # None renders as "not found"


ViewState = Union[LoadingState, ErrorState, SuccessState]
