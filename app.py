import logging

import streamlit as st

from space_gallery.app_context import create_app
from space_gallery.components import streamlit_view as view
from space_gallery.config import load_settings

# ---------------------------
# Logging
# ---------------------------
settings = load_settings()
logging.basicConfig(
    level=settings.level,
    format="%(asctime)s | %(levelname)-7s | %(name)s | %(message)s"
)
logger = logging.getLogger("space_gallery")

# ---------------------------
# Page config
# ---------------------------
st.set_page_config(
    page_title="NASA Space Explorer",
    page_icon="🛰️",
    layout="wide",
)

# ---------------------------
# Session bootstrap
# ---------------------------
if "space_gallery" not in st.session_state:
    st.session_state.space_gallery = create_app(settings)  # one app (and one fact) per session
    logger.info("New session, catalog %s", settings.catalog_url)

app = st.session_state.space_gallery
view.reconcile_modal(app)

# ---------------------------
# Header
# ---------------------------
st.markdown(
    """
    <div style="display:flex;align-items:center;gap:12px;">
    <h1 style="margin:0;">🛰️ NASA Space Explorer</h1>
    <span style="opacity:.8;">— Astronomy Picture of the Day gallery</span>
    </div>
    """,
    unsafe_allow_html=True
)
view.paint_fact(app)

trigger_slot = st.empty()
gallery_slot = st.empty()

# ---------------------------
# Fetch cycle
# ---------------------------
if view.paint_trigger(trigger_slot, app):
    def repaint(_controller):
        view.paint_trigger(trigger_slot, app)
        view.paint_gallery(gallery_slot, app)

    unsubscribe = app.gallery.subscribe(repaint)
    try:
        app.gallery.run()
    finally:
        unsubscribe()
    st.rerun()  # redraw with the trigger re-enabled

view.paint_gallery(gallery_slot, app)
view.paint_modal(app)
