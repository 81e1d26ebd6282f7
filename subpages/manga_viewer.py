# subpages/manga_viewer.py — AI manga teaser + reader
# ----------------------------------------------------------
# Teaser on the home page; the reader is its own view (like a case
# page) and shows pages in chunks with a "show next" button.
# ----------------------------------------------------------

from __future__ import annotations
from typing import Callable, Sequence

import streamlit as st

from designquest.content import MANGA_PAGES, MANGA_THUMBNAIL
from designquest.i18n import t
from designquest.smart_image import smart_image

STATE_KEY = "manga_state"
CHUNK_SIZE = 3


def _init_state(chunk_size: int, n_pages: int):
    if STATE_KEY not in st.session_state:
        st.session_state[STATE_KEY] = {"shown": min(chunk_size, n_pages)}

def reset_reader():
    st.session_state.pop(STATE_KEY, None)


# -----------------------------
# Home teaser
# -----------------------------
def manga_teaser(lang: str, on_open: Callable[[], None]):
    tr = t("aiManga", lang)
    st.markdown(f'<div class="section-title">{tr["title"]}</div>', unsafe_allow_html=True)
    _, mid, _ = st.columns([1, 1.4, 1])
    with mid:
        smart_image(MANGA_THUMBNAIL, "AI漫画サムネイル", css_class="manga-thumb")
        st.button(f"▶  {tr['viewManga']}", key="manga_open", on_click=on_open, width="stretch")


# -----------------------------
# Reader view
# -----------------------------
def manga_reader_page(lang: str, on_close: Callable[[], None],
                      pages: Sequence[str] = MANGA_PAGES, chunk_size: int = CHUNK_SIZE):
    tr = t("aiManga", lang)
    n_pages = len(pages)
    _init_state(chunk_size, n_pages)
    S = st.session_state[STATE_KEY]

    top_l, top_r = st.columns([4, 1])
    with top_l:
        st.title(tr["title"])
    with top_r:
        st.button("✕", key="manga_close_top", on_click=on_close, width="stretch")

    shown = S["shown"]
    _, body, _ = st.columns([0.5, 3, 0.5])
    with body:
        for i, page in enumerate(pages[:shown]):
            smart_image(page, f"Manga Page {i}", caption=f"{i + 1}/{n_pages}")

        if shown < n_pages:
            nxt = min(chunk_size, n_pages - shown)
            if st.button(f"Show next {nxt} pages", key="manga_more", width="stretch"):
                S["shown"] = min(shown + chunk_size, n_pages)
                st.rerun()

        st.markdown("---")
        st.button(tr["closeManga"], key="manga_close_bottom", on_click=on_close,
                  type="primary", width="stretch")
