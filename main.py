import logging
from pathlib import Path
from typing import Optional
from urllib.parse import quote

from fastapi import FastAPI
from fastapi.requests import Request
from fastapi.responses import HTMLResponse, RedirectResponse
from fastapi.staticfiles import StaticFiles
from fastapi.templating import Jinja2Templates

import formatting
from config import settings
from views import MovieDetailsView

logging.basicConfig(level=settings.log_level)
logger = logging.getLogger(__name__)

BASE_DIR = Path(__file__).resolve().parent

templates = Jinja2Templates(directory=BASE_DIR / "templates")
templates.env.filters.update(
    poster_url=formatting.poster_url,
    backdrop_url=formatting.backdrop_url,
    rating=formatting.format_rating,
    release_date=formatting.format_release_date,
    runtime=formatting.format_runtime,
    language=formatting.format_language,
    currency=formatting.format_currency,
)

app = FastAPI()
app.mount("/static", StaticFiles(directory=BASE_DIR / "static"), name="static")


def _details_view() -> MovieDetailsView:
    return MovieDetailsView(
        api_key=settings.tmdb_api_key,
        language=settings.tmdb_language,
        timeout=settings.tmdb_timeout,
    )


@app.get("/health")
async def health():
    return {"status": "ok"}


@app.get("/", response_class=HTMLResponse)
async def index(request: Request, movie_id: Optional[str] = None):
    movie_id = (movie_id or "").strip()
    if movie_id:
        return RedirectResponse(f"/movie/{quote(movie_id, safe='')}", status_code=303)
    return templates.TemplateResponse(request, "index.html", {})


@app.get("/movie/{movie_id}", response_class=HTMLResponse)
async def movie_page(request: Request, movie_id: str):
    return templates.TemplateResponse(
        request,
        "movie.html",
        {"movie_id": movie_id, "details_url": f"/movie/{quote(movie_id, safe='')}/details"},
    )


@app.get("/movie/{movie_id}/details", response_class=HTMLResponse)
async def movie_details(request: Request, movie_id: str):
    view = _details_view()
    state = await view.load(movie_id)
    return templates.TemplateResponse(
        request,
        f"partials/{state.state}.html",
        {"view": state},
    )
