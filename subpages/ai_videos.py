# subpages/ai_videos.py — AI video collection (X post embeds)

from __future__ import annotations
import json

import streamlit as st
from streamlit.components.v1 import html as st_html

from designquest.content import VIDEOS, Video, tweet_id
from designquest.i18n import t

EMBED_HEIGHT = 680


def tweet_embed_html(post_id: str) -> str:
    return f"""
<div id="tweet" style="display:flex;justify-content:center;min-height:300px;
     color:#6b7280;font:700 11px sans-serif;letter-spacing:.15em;text-transform:uppercase;">
  Loading Video Content...
</div>
<script>
function renderTweet() {{
  const box = document.getElementById("tweet");
  box.innerHTML = "";
  window.twttr.widgets.createTweet({json.dumps(post_id)}, box, {{
    theme: "dark", align: "center", conversation: "none", cards: "visible"
  }});
}}
</script>
<script async src="https://platform.twitter.com/widgets.js" charset="utf-8" onload="renderTweet()"></script>
"""

def open_video_dialog(video: Video):
    @st.dialog("Exclusive Video Preview", width="large")
    def _preview():
        st.subheader(video.title)
        st.link_button("WATCH ON X (TWITTER) ↗", video.url)
        post_id = tweet_id(video.url)
        if post_id:
            st_html(tweet_embed_html(post_id), height=EMBED_HEIGHT, scrolling=True)
        st.caption("Design Quest AI Experimental Video Unit")

    _preview()


def ai_videos_section(lang: str, n_cols: int = 4):
    tr = t("aiVideo", lang)
    st.markdown(f'<div class="section-title">{tr["title"]}</div>', unsafe_allow_html=True)
    st.caption(tr["subtitle"])

    videos = VIDEOS[lang]
    cols = st.columns(n_cols)
    for i, video in enumerate(videos):
        with cols[i % n_cols]:
            if st.button(f"▶ {video.title}", key=f"video_{i}", width="stretch"):
                open_video_dialog(video)
            st.caption(f"{tr['aiVideoLabel']} #{i + 1} · {tr['watchVideo']}")
