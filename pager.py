# pager.py
from dataclasses import dataclass

# Número exibido no rodapé. É só visual: os limites de navegação usam real_total_pages.
DISPLAY_TOTAL_PAGES = 48693


@dataclass(frozen=True)
class PagerView:
    page: int
    display_total: int
    prev_disabled: bool
    next_disabled: bool

    @property
    def label(self) -> str:
        return f"Page {self.page} of {self.display_total}"


def pager_view(page: int, real_total_pages: int, display_total: int = DISPLAY_TOTAL_PAGES) -> PagerView:
    return PagerView(
        page=page,
        display_total=display_total,
        prev_disabled=page <= 1,
        next_disabled=page >= real_total_pages,
    )
