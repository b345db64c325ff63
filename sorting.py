# sorting.py
from typing import List

SORT_NONE = ""
SORT_RELEASE_ASC = "release_asc"
SORT_RELEASE_DESC = "release_desc"
SORT_RATING_ASC = "rating_asc"
SORT_RATING_DESC = "rating_desc"

# (valor, rótulo) na ordem em que aparecem no seletor
SORT_OPTIONS = [
    (SORT_NONE, "Sort By"),
    (SORT_RELEASE_ASC, "Release Date (Asc)"),
    (SORT_RELEASE_DESC, "Release Date (Desc)"),
    (SORT_RATING_ASC, "Rating (Asc)"),
    (SORT_RATING_DESC, "Rating (Desc)"),
]
SORT_LABELS = dict(SORT_OPTIONS)


def _release_key(movie: dict) -> str:
    # datas ISO comparam corretamente como texto; sem data vira ""
    return str(movie.get("release_date") or "")


def _rating_key(movie: dict) -> float:
    # valor que não vira número (ou NaN) conta como 0, para a ordem continuar total
    try:
        rating = float(movie.get("vote_average") or 0)
    except (TypeError, ValueError):
        return 0.0
    return 0.0 if rating != rating else rating


def sort_movies(results: List[dict], sort_key: str) -> List[dict]:
    """
    Retorna uma nova lista ordenada por `sort_key`; `results` não é alterada.
    sorted() é estável (inclusive com reverse=True), então empates mantêm a ordem da API.
    Chave vazia ou desconhecida devolve a ordem original.
    """
    if sort_key == SORT_RELEASE_ASC:
        return sorted(results, key=_release_key)
    if sort_key == SORT_RELEASE_DESC:
        return sorted(results, key=_release_key, reverse=True)
    if sort_key == SORT_RATING_ASC:
        return sorted(results, key=_rating_key)
    if sort_key == SORT_RATING_DESC:
        return sorted(results, key=_rating_key, reverse=True)
    return list(results)
