# designquest/smart_image.py — SmartImage for Streamlit
# ----------------------------------------------------------
# Streamlit renders on the server, so a "load failure" is decided here:
# a candidate fails when it does not map to a decodable file in the
# asset directory. Absolute URLs are left to the browser.
# ----------------------------------------------------------

from __future__ import annotations
import re
import unicodedata
from functools import lru_cache
from html import escape
from pathlib import Path
from typing import Optional, Union

import streamlit as st
from PIL import Image

from designquest.config import load_config
from designquest.image_resolver import ImageResolver, is_absolute

ImageWidth = Union[int, str]


def _nfc(text: str) -> str:
    return unicodedata.normalize("NFC", text)


class AssetProbe:
    """Maps resolved candidates onto files under asset_dir and checks they decode."""

    def __init__(self, asset_dir: Path, base_path: str = "/"):
        self.asset_dir = Path(asset_dir).resolve()
        base_path = re.sub(r"/{2,}", "/", base_path)
        self.base_path = base_path if base_path.endswith("/") else base_path + "/"

    def local_path(self, candidate: str) -> Optional[Path]:
        if is_absolute(candidate):
            return None
        # the NFC/NFD ladder steps normalise the base prefix too
        if not _nfc(candidate).startswith(_nfc(self.base_path)):
            return None
        depth = self.base_path.count("/")
        parts = candidate.split("/", depth)
        rel = parts[depth].lstrip("/") if len(parts) > depth else ""
        if not rel:
            return None
        path = (self.asset_dir / rel).resolve()
        if not path.is_relative_to(self.asset_dir):
            return None
        return path

    def __call__(self, candidate: str) -> bool:
        if is_absolute(candidate):
            return True
        path = self.local_path(candidate)
        if path is None or not path.is_file():
            return False
        try:
            with Image.open(path) as img:
                img.verify()
        except (OSError, SyntaxError, ValueError):
            # UnidentifiedImageError is an OSError; truncated files raise SyntaxError
            return False
        return True


@lru_cache(maxsize=1)
def default_probe() -> AssetProbe:
    cfg = load_config()
    return AssetProbe(cfg.asset_dir, cfg.base_path)


def placeholder_html(src: str, css_class: str = "") -> str:
    return (
        f'<div class="img-missing {escape(css_class)}">'
        '<div class="img-missing-icon">🖼️</div>'
        '<div class="img-missing-label">Image Not Found</div>'
        f'<div class="img-missing-src">{escape(src)}</div>'
        '</div>'
    )

def smart_image(
    src: str,
    alt: str = "",
    *,
    width: ImageWidth = "stretch",
    caption: Optional[str] = None,
    css_class: str = "",
    probe: Optional[AssetProbe] = None,
) -> Optional[str]:
    """Render src, walking the fallback ladder; returns the candidate shown or None."""
    probe = probe or default_probe()
    resolver = ImageResolver(src, probe.base_path)
    found = resolver.resolve(probe)

    if found is None:
        st.markdown(placeholder_html(src, css_class), unsafe_allow_html=True)
        return None
    if is_absolute(found):
        st.markdown(
            f'<img class="smart-img {escape(css_class)}" src="{escape(found)}" alt="{escape(alt)}"/>',
            unsafe_allow_html=True,
        )
    else:
        st.image(str(probe.local_path(found)), caption=caption, width=width)
    return found
