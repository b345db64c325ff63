from concurrent.futures import ThreadPoolExecutor
from html import escape

import streamlit as st

from explorer import DEBOUNCE_SECONDS, ExplorerController
from movie_card import MovieCard, build_card
from sorting import SORT_LABELS, SORT_OPTIONS

GRID_COLUMNS = 5

# ---------------------- CONFIG BÁSICA ---------------------- #

st.set_page_config(
    page_title="Movie Explorer",
    page_icon="🎬",
    layout="wide",
)

@st.cache_resource
def get_executor() -> ThreadPoolExecutor:
    # compartilhado entre sessões; só faz I/O, o estado fica no controller de cada sessão
    return ThreadPoolExecutor(max_workers=4, thread_name_prefix="tmdb-fetch")

st.markdown(
    """
    <style>
    .app-title {
        font-size: 2.3rem;
        font-weight: 700;
        margin-bottom: 0.8rem;
    }
    .card {
        margin-bottom: 1.2rem;
    }
    .card .poster {
        width: 100%;
        aspect-ratio: 2 / 3;
        object-fit: cover;
        border-radius: 8px;
    }
    .card .title {
        font-size: 1rem;
        font-weight: 600;
        margin: 0.4rem 0 0.2rem 0;
    }
    .card .meta {
        font-size: 0.85rem;
        margin: 0;
    }
    .muted {
        color: #888888;
    }
    .page-info {
        text-align: center;
        padding-top: 0.4rem;
    }
    </style>
    """,
    unsafe_allow_html=True,
)

# ---------------------- ESTADO INICIAL ---------------------- #

if "controller" not in st.session_state:
    controller = ExplorerController(executor=get_executor())
    controller.start()
    st.session_state["controller"] = controller

controller: ExplorerController = st.session_state["controller"]

# ---------------------- HELPERS ---------------------- #

def on_query_change():
    controller.set_query(st.session_state["query_input"])

def on_sort_change():
    controller.set_sort(st.session_state["sort_select"])

def render_toolbar() -> None:
    col_search, col_sort = st.columns([3, 1])
    with col_search:
        st.text_input(
            "Search for a movie",
            value=controller.state.query.query,
            key="query_input",
            placeholder="Search for a movie...",
            label_visibility="collapsed",
            on_change=on_query_change,
        )
    with col_sort:
        options = [value for value, _ in SORT_OPTIONS]
        current = controller.state.query.sort_key
        st.selectbox(
            "Sort movies",
            options,
            index=options.index(current) if current in options else 0,
            format_func=lambda value: SORT_LABELS.get(value, value),
            key="sort_select",
            label_visibility="collapsed",
            on_change=on_sort_change,
        )

def render_movie_card(card: MovieCard) -> None:
    """Renderiza um card (poster, título, lançamento e nota) como HTML."""
    st.markdown(
        f"""
        <article class="card">
          <img class="poster" alt="{escape(card.alt)}" src="{escape(card.poster)}" loading="lazy"/>
          <h2 class="title">{escape(card.title)}</h2>
          <p class="meta"><span class="muted">Release Date:</span> <span class="release">{escape(card.release_date)}</span></p>
          <p class="meta"><span class="muted">Rating:</span> <span class="rating">{escape(card.rating)}</span></p>
        </article>
        """,
        unsafe_allow_html=True,
    )

def render_grid() -> None:
    cards = [build_card(movie) for movie in controller.sorted_results]
    for start in range(0, len(cards), GRID_COLUMNS):
        cols = st.columns(GRID_COLUMNS)
        for col, card in zip(cols, cards[start:start + GRID_COLUMNS]):
            with col:
                render_movie_card(card)

def render_pager() -> None:
    view = controller.pager()
    col_prev, col_info, col_next = st.columns([1, 2, 1])
    col_prev.button("Previous", key="prev_btn", disabled=view.prev_disabled, on_click=controller.go_prev)
    col_info.markdown(f'<div class="page-info">{escape(view.label)}</div>', unsafe_allow_html=True)
    col_next.button("Next", key="next_btn", disabled=view.next_disabled, on_click=controller.go_next)

@st.fragment(run_every=DEBOUNCE_SECONDS)
def watch_pending():
    """Dispara o debounce e aplica fetches concluídos; reroda a página quando algo mudou."""
    changed = controller.tick()
    changed = controller.pump() or changed
    if changed:
        st.rerun()
    if controller.is_loading:
        st.caption("Loading...")

# ---------------------- PÁGINA ---------------------- #

st.markdown('<div class="app-title">🎬 Movie Explorer</div>', unsafe_allow_html=True)
render_toolbar()
watch_pending()
render_grid()
render_pager()
