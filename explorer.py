# explorer.py
"""
Estado da tela de exploração e o controlador que o atualiza.

Fluxo: texto digitado -> debounce -> modo (discover/search) e página 1 ->
fetch da página atual -> resultados -> ordenação no cliente.

Toda mutação acontece na thread que chama os métodos (a thread da UI).
Com um executor, o fetch roda em outra thread, mas o resultado só é aplicado
em pump(). Cada fetch leva a geração em que foi emitido; uma resposta de
geração antiga é descartada, com sucesso ou com erro.
"""
import time
from concurrent.futures import Executor, Future
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional, Tuple

import tmdb_client
from logger_conf import get_logger
from pager import PagerView, pager_view
from sorting import SORT_RATING_DESC, sort_movies

logger = get_logger(__name__)

MODE_DISCOVER = "discover"
MODE_SEARCH = "search"

DEBOUNCE_SECONDS = 0.25
MAX_TOTAL_PAGES = 500


@dataclass
class QueryState:
    query: str = ""
    mode: str = MODE_DISCOVER
    page: int = 1
    sort_key: str = SORT_RATING_DESC


@dataclass
class ExplorerState:
    query: QueryState = field(default_factory=QueryState)
    real_total_pages: int = 1
    results: List[dict] = field(default_factory=list)


@dataclass(frozen=True)
class FetchRequest:
    """Uma requisição emitida: discover(page) ou search(query, page)."""
    mode: str
    query: str
    page: int
    generation: int


def resolve_mode(query: str) -> str:
    return MODE_SEARCH if query.strip() else MODE_DISCOVER


def clamp_total_pages(api_total) -> int:
    # limita antes de converter: Infinity vira 500 e NaN vira 1
    return int(max(1, min(float(api_total or 1), MAX_TOTAL_PAGES)))


def fetch_movies(request: FetchRequest) -> dict:
    """Fetcher padrão: chama o endpoint do TMDB correspondente ao modo."""
    if request.mode == MODE_SEARCH:
        return tmdb_client.search_movie(request.query, page=request.page)
    return tmdb_client.discover_movies(page=request.page)


class Debouncer:
    """
    Guarda só o último valor agendado; ele fica disponível em poll()
    depois de `interval` segundos sem novo schedule().
    """

    def __init__(self, interval: float = DEBOUNCE_SECONDS, clock: Callable[[], float] = time.monotonic):
        self.interval = interval
        self._clock = clock
        self._pending: Optional[Tuple[str, float]] = None

    @property
    def pending(self) -> bool:
        return self._pending is not None

    def schedule(self, value: str) -> None:
        # substitui (cancela) o agendamento anterior
        self._pending = (value, self._clock() + self.interval)

    def cancel(self) -> None:
        self._pending = None

    def poll(self) -> Optional[str]:
        """Retorna o valor pendente se o prazo venceu (e o consome); senão None."""
        if self._pending is None:
            return None
        value, deadline = self._pending
        if self._clock() < deadline:
            return None
        self._pending = None
        return value


class ExplorerController:
    def __init__(
        self,
        fetcher: Callable[[FetchRequest], dict] = fetch_movies,
        executor: Optional[Executor] = None,
        clock: Callable[[], float] = time.monotonic,
        debounce_seconds: float = DEBOUNCE_SECONDS,
    ):
        self.state = ExplorerState()
        self._fetcher = fetcher
        self._executor = executor
        self._debouncer = Debouncer(debounce_seconds, clock)
        self._generation = 0
        self._issued_key: Optional[Tuple[str, str, int]] = None
        self._inflight: Dict[int, Tuple[FetchRequest, Future]] = {}
        self._results_version = 0
        self._sorted_cache: Optional[Tuple[int, str, List[dict]]] = None

    # ---------- propriedades de leitura ----------
    @property
    def generation(self) -> int:
        return self._generation

    @property
    def is_loading(self) -> bool:
        return bool(self._inflight)

    @property
    def sorted_results(self) -> List[dict]:
        """Resultados da página atual na ordem do sort_key; recalculado só quando algo muda."""
        key = (self._results_version, self.state.query.sort_key)
        if self._sorted_cache is None or self._sorted_cache[:2] != key:
            ordered = sort_movies(self.state.results, self.state.query.sort_key)
            self._sorted_cache = (key[0], key[1], ordered)
        return self._sorted_cache[2]

    def pager(self) -> PagerView:
        return pager_view(self.state.query.page, self.state.real_total_pages)

    # ---------- transições ----------
    def start(self) -> Optional[FetchRequest]:
        """Primeiro fetch (discover, página 1); também arma o debounce com a query inicial."""
        self._debouncer.schedule(self.state.query.query)
        return self._sync_fetch()

    def set_query(self, text: str) -> Optional[FetchRequest]:
        self.state.query.query = text
        self._debouncer.schedule(text)
        return self._sync_fetch()

    def set_sort(self, sort_key: str) -> None:
        self.state.query.sort_key = sort_key

    def tick(self) -> bool:
        """
        Aplica a resolução de modo se o debounce venceu.
        A página volta para 1 em toda resolução, mesmo se o modo não mudou.
        Retorna True se o estado mudou.
        """
        text = self._debouncer.poll()
        if text is None:
            return False
        q = self.state.query
        q.mode = resolve_mode(text)
        q.page = 1
        logger.debug(f"Modo resolvido: {q.mode} (query={text!r})")
        self._sync_fetch()
        return True

    def go_prev(self) -> Optional[FetchRequest]:
        q = self.state.query
        q.page = max(1, q.page - 1)
        return self._sync_fetch()

    def go_next(self) -> Optional[FetchRequest]:
        q = self.state.query
        q.page = min(self.state.real_total_pages, q.page + 1)
        return self._sync_fetch()

    # ---------- fetch ----------
    def build_request(self) -> FetchRequest:
        q = self.state.query
        query = q.query.strip()
        # modo search com texto em branco (antes do debounce) cai no discover
        if q.mode == MODE_SEARCH and query:
            return FetchRequest(MODE_SEARCH, query, q.page, self._generation)
        return FetchRequest(MODE_DISCOVER, "", q.page, self._generation)

    def _sync_fetch(self) -> Optional[FetchRequest]:
        q = self.state.query
        key = (q.mode, q.query, q.page)
        if key == self._issued_key:
            return None
        self._issued_key = key
        return self.issue_fetch()

    def issue_fetch(self) -> FetchRequest:
        """Emite um novo fetch e invalida qualquer fetch anterior ainda em andamento."""
        self._generation += 1
        self._cancel_inflight()
        request = self.build_request()
        logger.debug(f"Fetch #{request.generation}: {request.mode} query={request.query!r} page={request.page}")

        if self._executor is None:
            self.commit(request, self._run_inline(request))
        else:
            self._inflight[request.generation] = (request, self._executor.submit(self._fetcher, request))
        return request

    def _run_inline(self, request: FetchRequest) -> dict:
        try:
            return self._fetcher(request)
        except Exception:
            logger.exception(f"Fetch #{request.generation} falhou")
            return {}

    def _cancel_inflight(self) -> None:
        for generation, (_, future) in list(self._inflight.items()):
            # cancel() só impede futures que ainda não começaram; o resto é barrado pela geração
            future.cancel()
            logger.debug(f"Fetch #{generation} cancelado (substituído)")
        self._inflight.clear()

    def pump(self) -> bool:
        """Aplica os fetches concluídos do executor. Retorna True se o estado mudou."""
        changed = False
        for generation, (request, future) in list(self._inflight.items()):
            if not future.done():
                continue
            del self._inflight[generation]
            try:
                payload = future.result()
            except Exception:
                logger.exception(f"Fetch #{generation} falhou")
                payload = {}
            changed = self.commit(request, payload) or changed
        return changed

    def commit(self, request: FetchRequest, payload: dict) -> bool:
        """
        Aplica a resposta de `request` se ele ainda é o fetch mais recente.
        Resposta vazia ou malformada zera os resultados e volta o total real para 1.
        """
        if request.generation != self._generation:
            logger.debug(f"Descartando resposta obsoleta #{request.generation} (atual #{self._generation})")
            return False

        results, total = self._parse_payload(payload)
        if results is None:
            logger.warning(f"Fetch #{request.generation} sem resultados válidos; exibindo lista vazia.")
            results, total = [], 1

        self.state.results = results
        self.state.real_total_pages = total
        self._results_version += 1
        return True

    @staticmethod
    def _parse_payload(payload: dict) -> Tuple[Optional[List[dict]], int]:
        if not payload or not isinstance(payload, dict):
            return None, 1
        results = payload.get("results") or []
        if not isinstance(results, list):
            return None, 1
        try:
            total = clamp_total_pages(payload.get("total_pages"))
        except (TypeError, ValueError, OverflowError):
            return None, 1
        return results, total
