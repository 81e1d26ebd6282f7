# app.py — Design Quest AI (single scroll) + manga reader view
# ----------------------------------------------------------------
#  • Language, gallery filter and view live in st.session_state and are
#    passed down to the sections with change callbacks
#  • Every image goes through smart_image (fallback ladder + placeholder)
#  • Sidebar jumps to section anchors via the pending-jump script
# ----------------------------------------------------------------

from __future__ import annotations
import logging
from html import escape
from typing import Dict

import streamlit as st
from streamlit.components.v1 import html as st_html

from designquest.config import SiteConfig, check_assets, configure_logging, load_config
from designquest.content import ALL, CATEGORIES, HOMEPAGE_URL, ICON_ALT, ICON_SRC, PROJECTS, PROMOTIONS
from designquest.i18n import DEFAULT_LANGUAGE, LANGUAGES, t
from designquest.smart_image import smart_image
from subpages.ai_videos import ai_videos_section
from subpages.manga_viewer import manga_reader_page, manga_teaser, reset_reader
from subpages.portfolio_gallery import portfolio_section

logger = logging.getLogger("designquest.app")

# -----------------------------
# Page config + CSS
# -----------------------------
st.set_page_config(
    page_title="Design Quest AI",
    page_icon="🎨",
    layout="wide",
    initial_sidebar_state="expanded",
)

st.markdown("""
<style>
/* Hero */
.hero-badge {
  display: inline-block;
  padding: 4px 14px;
  border: 1px solid rgba(239,68,68,.3);
  border-radius: 999px;
  background: rgba(239,68,68,.1);
  color: #ef4444;
  font-size: 10px;
  font-weight: 900;
  letter-spacing: .3em;
  text-transform: uppercase;
}
.hero {
  font-weight: 900;
  line-height: 1.0;
  margin: 18px 0 10px;
  letter-spacing: -.02em;
  text-transform: uppercase;
  font-size: clamp(40px, 7vw, 96px);
}
.hero .accent {
  background: linear-gradient(90deg, #dc2626, #f97316);
  -webkit-background-clip: text;
  background-clip: text;
  color: transparent;
}
.hero-sub {
  font-size: clamp(16px, 1.6vw, 24px);
  line-height: 1.6;
  opacity: .75;
  max-width: 62ch;
  margin: 0 auto;
}
.hero-wrap { text-align: center; padding: 80px 0 60px; }

/* Section headings */
.section-title {
  font-weight: 900;
  font-size: clamp(28px, 3.6vw, 52px);
  letter-spacing: -.02em;
  text-transform: uppercase;
  margin: 24px 0 6px;
}
.kicker {
  color: #f97316;
  font-size: 10px;
  font-weight: 900;
  letter-spacing: .3em;
  text-transform: uppercase;
  margin-top: 6px;
}
.card-title { font-weight: 700; font-size: 1.05rem; line-height: 1.2; min-height: 2.4em; }

/* Cards */
.dq-card {
  border: 1px solid rgba(255,255,255,.08);
  border-radius: 24px;
  padding: 24px;
  background: rgba(255,255,255,.03);
  height: 100%;
}
.dq-card a { text-decoration: none; color: inherit; }
.tag {
  display: inline-block;
  margin: 0 6px 6px 0;
  padding: 2px 10px;
  border: 1px solid rgba(249,115,22,.2);
  border-radius: 8px;
  background: rgba(249,115,22,.1);
  color: #f97316;
  font-size: 10px;
  font-weight: 900;
  text-transform: uppercase;
}

/* SmartImage placeholder */
.img-missing {
  display: flex;
  flex-direction: column;
  align-items: center;
  justify-content: center;
  min-height: 160px;
  padding: 24px;
  border-radius: 16px;
  background: rgba(17,24,39,.8);
  text-align: center;
}
.img-missing-icon { font-size: 32px; opacity: .2; margin-bottom: 8px; }
.img-missing-label { color: #6b7280; font-size: 10px; font-weight: 700; letter-spacing: .2em; text-transform: uppercase; }
.img-missing-src {
  color: #374151;
  font-size: 8px;
  margin-top: 4px;
  max-width: 100%;
  overflow: hidden;
  text-overflow: ellipsis;
  white-space: nowrap;
  opacity: .6;
}
.smart-img { width: 100%; height: auto; border-radius: 12px; }

.footer { text-align: center; opacity: .6; font-size: 11px; letter-spacing: .3em; text-transform: uppercase; padding: 24px 0; }
</style>
""", unsafe_allow_html=True)


@st.cache_resource(show_spinner=False)
def boot() -> SiteConfig:
    cfg = load_config()
    configure_logging(cfg.log_level)
    check_assets(cfg)
    logger.info("Design Quest AI starting (base path %s, assets %s)", cfg.base_path, cfg.asset_dir)
    return cfg

CFG = boot()

# -----------------------------
# State helpers (view, language, gallery filter, scroll)
# -----------------------------
def get_view() -> str:
    v = st.session_state.get("view", "home")
    return v if v in {"home", "manga"} else "home"

def set_view(v: str):
    st.session_state["view"] = v

def get_language() -> str:
    lang = st.session_state.get("lang", DEFAULT_LANGUAGE)
    return lang if lang in LANGUAGES else DEFAULT_LANGUAGE

def set_language(lang: str):
    st.session_state["lang"] = lang

def get_category() -> str:
    cat = st.session_state.get("category", ALL)
    return cat if any(c.id == cat for c in CATEGORIES) else ALL

def set_category(cat_id: str):
    st.session_state["category"] = cat_id

def set_pending_jump(anchor_id: str):
    st.session_state["pending_jump"] = anchor_id

def consume_pending_jump() -> str | None:
    return st.session_state.pop("pending_jump", None)

SECTION_IDS: Dict[str, str] = {
    "about": "about",
    "aiManga": "aimanga",
    "aiVideo": "aivideos",
    "portfolio": "portfolio",
    "vibeCoding": "vibecoding",
}

def open_manga():
    reset_reader(); set_view("manga")

def close_manga():
    reset_reader(); set_view("home"); set_pending_jump(SECTION_IDS["aiManga"])

def js_scroll_to_anchor(anchor_id: str):
    st_html(
        f"""
<script>
(function(){{
  const root = window.parent.document;
  const targetId = "{anchor_id}";
  function scrollNow() {{
    const el = root.getElementById(targetId);
    if (el) {{
      try {{
        el.scrollIntoView({{behavior:'smooth', block:'start'}});
      }} catch(e) {{
        const scroller = root.querySelector('section.main div.block-container');
        if (scroller) scroller.scrollTo({{top: el.getBoundingClientRect().top + scroller.scrollTop - 80, behavior:'smooth'}});
      }}
      return true;
    }}
    return false;
  }}
  if (!scrollNow()) {{
    const obs = new MutationObserver(() => {{ if (scrollNow()) obs.disconnect(); }});
    obs.observe(root, {{childList:true, subtree:true}});
    setTimeout(() => {{ scrollNow(); }}, 400);
  }}
}})();
</script>
""",
        height=0,
    )

def disable_scroll_restoration():
    st_html("""<script>try { window.parent.history.scrollRestoration = 'manual'; } catch(e) {}</script>""", height=0)

def enforce_top():
    # reader pages render after the script runs; one frame plus one late pass covers both
    st_html(
        """
<script>
(function(){
  const win = window.parent;
  const toTop = () => {
    win.scrollTo(0, 0);
    const main = win.document.querySelector('section.main div.block-container');
    if (main) main.scrollTop = 0;
  };
  win.requestAnimationFrame(toTop);
  setTimeout(toTop, 300);
})();
</script>
""",
        height=0,
    )

def anchor(key: str):
    st.markdown(f"<div id='{SECTION_IDS[key]}' class='section'></div>", unsafe_allow_html=True)

# -----------------------------
# Sidebar
# -----------------------------
lang = get_language()
nav = t("nav", lang)

st.sidebar.markdown("### Design Quest <span style='color:#f97316'>AI</span>", unsafe_allow_html=True)
lang_cols = st.sidebar.columns(len(LANGUAGES))
for col, code in zip(lang_cols, LANGUAGES):
    with col:
        st.button(code.upper(), key=f"lang_{code}", on_click=set_language, args=(code,),
                  type="primary" if code == lang else "secondary", width="stretch")
st.sidebar.markdown("---")

if get_view() == "home":
    for key in SECTION_IDS:
        if st.sidebar.button(nav[key], key=f"nav_{key}", width="stretch"):
            set_pending_jump(SECTION_IDS[key]); st.rerun()
else:
    st.sidebar.button(f"← {t('aiManga', lang)['closeManga']}", key="nav_back",
                      on_click=close_manga, width="stretch")

# -----------------------------
# HOME sections
# -----------------------------
def render_hero(lang: str):
    tr = t("hero", lang)
    *head, last = tr["title"].split(" ")
    st.markdown(
        '<div class="hero-wrap">'
        '<span class="hero-badge">New Era of Creativity</span>'
        f'<div class="hero">{escape(" ".join(head))} <span class="accent">{escape(last)}</span></div>'
        f'<div class="hero-sub">{escape(tr["subtitle"])}<br/>{escape(tr["description"])}</div>'
        '</div>',
        unsafe_allow_html=True,
    )

def render_about(lang: str):
    tr = t("about", lang)
    anchor("about")
    head_l, head_r = st.columns([4, 1], vertical_alignment="center")
    with head_l:
        st.markdown(f'<div class="section-title">{escape(tr["title"])}</div>', unsafe_allow_html=True)
    with head_r:
        smart_image(ICON_SRC, ICON_ALT, width=96, css_class="avatar")

    st.markdown(f"#### {tr['bio1']}")
    st.write(tr["bio2"])
    st.markdown("---")
    st.markdown(f"**{tr['lab']}**")

    c1, c2, c3 = st.columns(3)
    with c1:
        st.markdown(f'<div class="kicker">🧩 {tr["mainTools"]}</div>', unsafe_allow_html=True); st.write(tr["toolsList"])
        st.markdown(f'<div class="kicker">🧠 {tr["aiTools"]}</div>', unsafe_allow_html=True); st.write(tr["aiToolsList"])
    with c2:
        st.markdown(f'<div class="kicker">F {tr["fonts"]}</div>', unsafe_allow_html=True); st.write(tr["fontsList"])
        st.markdown(f'<div class="kicker">🖼️ {tr["imageGen"]}</div>', unsafe_allow_html=True); st.write(tr["imageGenList"])
    with c3:
        st.markdown(f'<div class="kicker">🎬 {tr["videoGen"]}</div>', unsafe_allow_html=True); st.write(tr["videoGenList"])

def render_vibe_coding(lang: str):
    tr = t("vibeCoding", lang)
    anchor("vibeCoding")
    st.markdown(f'<div class="section-title">{escape(tr["title"])}</div>', unsafe_allow_html=True)
    st.caption(tr["subtitle"])
    cols = st.columns(3)
    for col, proj in zip(cols, PROJECTS[lang]):
        with col:
            tags = "".join(f"<span class='tag'>{escape(tag)}</span>" for tag in proj.tags)
            st.markdown(
                f"<div class='dq-card'>{tags}<h3>{escape(proj.title)}</h3><p>{escape(proj.desc)}</p></div>",
                unsafe_allow_html=True,
            )
            st.link_button(f"{tr['launchProject']} ↗", proj.url, width="stretch")

def render_promotions(lang: str):
    tr = t("promotions", lang)
    cols = st.columns(2)
    for col, promo in zip(cols, PROMOTIONS):
        with col:
            st.markdown(
                f"<a href='{escape(promo.url)}' target='_blank' rel='noopener'><div class='dq-card'>"
                f"<div class='kicker'>{escape(tr[promo.label_key])}</div>"
                f"<h3>{escape(tr[promo.title_key])} →</h3></div></a>",
                unsafe_allow_html=True,
            )

def render_contact(lang: str, cfg: SiteConfig):
    tr = t("contact", lang)
    st.markdown(f'<div class="section-title">{escape(tr["title"])}</div>', unsafe_allow_html=True)
    st.write(tr["subtitle"])
    cL, cR = st.columns([1, 1])
    with cL:
        if cfg.contact_email:
            st.link_button(f"✉️  {tr['email']}", f"mailto:{cfg.contact_email}", width="stretch")
    with cR:
        st.link_button(f"🌐  {HOMEPAGE_URL}", HOMEPAGE_URL, width="stretch")

def render_footer():
    st.markdown(
        "<div class='footer'><b>Design Quest <span style='color:#f97316'>AI</span></b><br/>"
        "&copy; 2026 Design Quest AI. All Rights Reserved.</div>",
        unsafe_allow_html=True,
    )

def render_home(lang: str):
    disable_scroll_restoration()
    jump_id = consume_pending_jump()
    if jump_id: js_scroll_to_anchor(jump_id)

    render_hero(lang)
    st.markdown("---")
    render_about(lang)
    st.markdown("---")
    anchor("aiManga")
    manga_teaser(lang, on_open=open_manga)
    st.markdown("---")
    anchor("aiVideo")
    ai_videos_section(lang)
    st.markdown("---")
    anchor("portfolio")
    portfolio_section(lang, active=get_category(), on_select=set_category)
    st.markdown("---")
    render_vibe_coding(lang)
    st.markdown("---")
    render_promotions(lang)
    st.markdown("---")
    render_contact(lang, CFG)
    render_footer()

# -----------------------------
# Dispatch
# -----------------------------
if get_view() == "home":
    render_home(lang)
else:
    enforce_top()
    manga_reader_page(lang, on_close=close_manga)
