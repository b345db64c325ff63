# movie_card.py
"""
Mapeamento puro de um resultado da API para os campos exibidos no card.
Nada aqui faz requisição ou toca no estado da sessão.
"""
from dataclasses import dataclass
from html import escape
from urllib.parse import quote

from tmdb_client import get_poster_url

DEFAULT_TITLE = "Untitled"
MISSING = "—"

_PLACEHOLDER_SVG = (
    "<svg xmlns='http://www.w3.org/2000/svg' width='400' height='600' viewBox='0 0 400 600'>"
    "<defs><linearGradient id='g' x1='0' x2='1' y1='0' y2='1'>"
    "<stop offset='0' stop-color='#cbd5e1'/><stop offset='1' stop-color='#e2e8f0'/>"
    "</linearGradient></defs>"
    "<rect width='400' height='600' fill='url(#g)'/>"
    "<text x='200' y='300' text-anchor='middle' font-family='system-ui, -apple-system, Segoe UI, Roboto' "
    "font-size='28' fill='#475569'>{title}</text></svg>"
)


def placeholder_image(title: str = "Movie") -> str:
    """Poster SVG gerado (data URI) com o título no centro. Determinístico."""
    svg = _PLACEHOLDER_SVG.format(title=escape(title, quote=True))
    return "data:image/svg+xml;utf8," + quote(svg, safe="")


@dataclass(frozen=True)
class MovieCard:
    key: str
    title: str
    poster: str
    alt: str
    release_date: str
    rating: str


def build_card(movie: dict) -> MovieCard:
    title = movie.get("title") or DEFAULT_TITLE
    poster = get_poster_url(movie.get("poster_path")) or placeholder_image(title)

    # nota 0 é exibida; só falta de valor vira traço
    vote = movie.get("vote_average")
    rating = MISSING if vote is None else str(vote)

    return MovieCard(
        key=f"{movie.get('id')}-{movie.get('release_date')}-{movie.get('title')}",
        title=title,
        poster=poster,
        alt=f"{title} poster",
        release_date=movie.get("release_date") or MISSING,
        rating=rating,
    )
