# tmdb_client.py
import os
import requests
from dotenv import load_dotenv

from logger_conf import get_logger

# Carrega .env
load_dotenv()

logger = get_logger(__name__)

# API Key v3 (curta), enviada como query param. Não é validada: sem chave a API responde 401.
API_KEY_V3 = os.getenv("TMDB_API_KEY_V3", "")

BASE_URL = "https://api.themoviedb.org/3"
IMG_BASE = "https://image.tmdb.org/t/p/w500"
REQUEST_TIMEOUT = 10

# ---------- montagem das requisições ----------
def discover_params(page: int = 1) -> dict:
    """Parâmetros de /discover/movie (filmes populares, sem filtro)."""
    return {
        "api_key": API_KEY_V3,
        "language": "en-US",
        "sort_by": "popularity.desc",
        "include_adult": "false",
        "include_video": "false",
        "page": page,
    }

def search_params(query: str, page: int = 1) -> dict:
    return {
        "api_key": API_KEY_V3,
        "query": query,
        "page": page,
    }

def _get_json(url: str, params: dict, label: str) -> dict:
    """
    GET comum aos dois endpoints.
    Retorna o JSON decodificado ou {} em caso de erro (timeout, rede, status != 200, JSON inválido).
    """
    try:
        resp = requests.get(url, params=params, timeout=REQUEST_TIMEOUT)

        if resp.status_code != 200:
            logger.warning(f"Erro na API ({label}): status {resp.status_code} - {resp.text[:200]}")
            return {}

        data = resp.json()
        if not isinstance(data, dict):
            logger.warning(f"Resposta inesperada da API ({label}): {type(data).__name__}")
            return {}
        return data

    except requests.exceptions.Timeout:
        logger.warning(f"Requisição {label} expirou (timeout).")
        return {}
    except requests.exceptions.RequestException as e:
        logger.error(f"Erro de rede/requests ({label}): {e}")
        return {}
    except ValueError as e:
        logger.error(f"JSON inválido na resposta ({label}): {e}")
        return {}

# ---------- funções principais ----------
def search_movie(query: str, page: int = 1) -> dict:
    """
    Busca filmes por texto (/search/movie).
    Retorna JSON dict ou {} em caso de erro ou termo vazio.
    """
    if not query or not str(query).strip():
        return {}

    url = f"{BASE_URL}/search/movie"
    return _get_json(url, search_params(query, page), "search")

def discover_movies(page: int = 1) -> dict:
    """Filmes populares via /discover/movie, página `page`."""
    url = f"{BASE_URL}/discover/movie"
    return _get_json(url, discover_params(page), "discover")

def get_poster_url(poster_path: str | None) -> str | None:
    if not poster_path:
        return None
    return f"{IMG_BASE}{poster_path}"
