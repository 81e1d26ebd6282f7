# subpages/portfolio_gallery.py — filterable work gallery
# ----------------------------------------------------------
# The active category lives with the caller; this section only reads it
# and reports tab clicks through on_select.
# ----------------------------------------------------------

from __future__ import annotations
from html import escape
from typing import Callable

import streamlit as st

from designquest.content import (
    CATEGORIES, GalleryItem, category_for, filter_items, find_item, gallery_items,
)
from designquest.i18n import t
from designquest.smart_image import smart_image


def category_label(item: GalleryItem, lang: str) -> str:
    cat = category_for(item)
    return t("categories", lang)[cat.key] if cat else item.category

def open_item_dialog(item_id: int, lang: str) -> bool:
    item = find_item(item_id)
    if item is None:
        return False
    tr = t("portfolioDetail", lang)

    @st.dialog(tr["detail"], width="large")
    def _detail():
        st.markdown(f"**{item.title(lang)}**")
        left, right = st.columns([2, 1])
        with left:
            smart_image(item.src, item.title(lang), css_class="detail-img")
        with right:
            st.markdown(f'<div class="kicker">{tr["category"]}</div>', unsafe_allow_html=True)
            st.write(category_label(item, lang))
            st.markdown(f'<div class="kicker">{tr["projectTitle"]}</div>', unsafe_allow_html=True)
            st.write(item.title(lang))
            if st.button(tr["closeWindow"], key=f"close_item_{item.id}", width="stretch"):
                st.rerun()

    _detail()
    return True


def portfolio_section(lang: str, active: str, on_select: Callable[[str], None], n_cols: int = 3):
    tr = t("portfolio", lang)
    labels = t("categories", lang)

    st.markdown(f'<div class="section-title">{tr["title"]}</div>', unsafe_allow_html=True)
    st.caption(tr["subtitle"])

    tabs = st.columns(len(CATEGORIES))
    for col, cat in zip(tabs, CATEGORIES):
        with col:
            st.button(
                labels[cat.key], key=f"cat_{cat.id}",
                type="primary" if cat.id == active else "secondary",
                on_click=on_select, args=(cat.id,), width="stretch",
            )

    items = filter_items(gallery_items(), active)
    cols = st.columns(n_cols)
    for i, item in enumerate(items):
        with cols[i % n_cols]:
            smart_image(item.src, item.title(lang), css_class="gallery-img")
            st.markdown(
                f'<div class="kicker">{escape(category_label(item, lang))}</div>'
                f'<div class="card-title">{escape(item.title(lang))}</div>',
                unsafe_allow_html=True,
            )
            if st.button("⤢", key=f"item_{item.id}", help=item.title(lang)):
                open_item_dialog(item.id, lang)
