"""Attach render trees to the Streamlit page.

The controllers only ever touch ``Node`` trees; this module walks those
trees on every rerun and turns them into Streamlit elements, feeding widget
clicks back as document clicks.
"""
import logging
from typing import Optional

import streamlit as st
import streamlit.components.v1 as components

from space_gallery.app_context import SpaceGallery
from space_gallery.components.document import TRIGGER_ID
from space_gallery.components.gallery import GalleryState
from space_gallery.components.tree import Node, to_html

logger = logging.getLogger(__name__)

SHOWN_MODAL_KEY = "_shown_modal"
COLUMNS = 3
REMOTE_PREFIXES = ("http://", "https://", "data:")


def is_remote_image(src: Optional[str]) -> bool:
    # Anything else is taken by st.image as a local file path
    return bool(src) and src.lower().startswith(REMOTE_PREFIXES)


def paint_fact(app: SpaceGallery) -> None:
    if app.fact_region is not None and app.fact_region.children:
        st.markdown(to_html(app.fact_region), unsafe_allow_html=True)


def paint_trigger(slot, app: SpaceGallery) -> bool:
    trigger = app.trigger
    key = f"{TRIGGER_ID}_{app.gallery.latest_token}_{app.gallery.state.value}"
    return slot.button(
        trigger.text,
        key=key,
        type="primary",
        disabled="disabled" in trigger.attrs,
    )


def _paint_link(link: Node) -> None:
    href = link.attrs.get("href", "#")
    img = link.find("img")
    if img is None:
        st.link_button(link.text or "Open", href)
        return
    src = img.attrs.get("src")
    if is_remote_image(src):
        st.image(src, caption=img.attrs.get("alt"), width='stretch')
    else:
        st.caption("No preview.")
    st.link_button(link.attrs.get("aria-label", "Open in new tab"), href)


def _paint_card(app: SpaceGallery, card: Node, key: str) -> None:
    for child in card.children:
        if child.tag == "a":
            _paint_link(child)
        elif child.tag == "div":
            for link in child.find_all("a"):
                _paint_link(link)
        elif child.tag == "h3":
            st.markdown(f"**{child.text}**")
        elif child.tag == "p":
            st.caption(child.text)
    if st.button("Details", key=key):
        app.document.click(card)


def paint_gallery(slot, app: SpaceGallery) -> None:
    region = app.gallery_region
    with slot.container():
        for node in region.children:
            if "placeholder" not in node.classes:
                continue
            if app.gallery.state == GalleryState.ERROR:
                st.error(node.text)
            else:
                st.info(node.text)

        cards = [n for n in region.children if n.tag == "article"]
        if not cards:
            return
        # Masonry: round-robin over columns, source order preserved per row
        cols = st.columns(COLUMNS, gap="small")
        for idx, card in enumerate(cards):
            with cols[idx % COLUMNS].container(border=True):
                _paint_card(app, card, key=f"open_{app.gallery.latest_token}_{idx}")


def reconcile_modal(app: SpaceGallery) -> None:
    """Close a modal the browser already dismissed (Escape or backdrop click).

    Widgets inside a dialog only rerun the dialog itself, so a full rerun
    with the same overlay still open means the user closed it client-side.
    """
    shown: Optional[Node] = st.session_state.get(SHOWN_MODAL_KEY)
    if shown is not None and shown is app.modal.backdrop:
        logger.debug("Modal dismissed in browser")
        app.modal.close()
    st.session_state[SHOWN_MODAL_KEY] = None


def _paint_modal_body(app: SpaceGallery, backdrop: Node) -> None:
    modal = backdrop.find_class("modal")
    for child in modal.children if modal is not None else []:
        if child.tag == "img":
            if is_remote_image(child.attrs.get("src")):
                st.image(child.attrs["src"], width='stretch')
            else:
                st.info("No preview.")
        elif child.tag == "iframe":
            components.iframe(child.attrs["src"], height=int(child.attrs.get("height", 500)))
        elif child.tag == "a":
            st.link_button(child.text, child.attrs.get("href", "#"))
        elif "meta" in child.classes:
            date_node = child.find_class("date")
            if date_node is not None and date_node.text:
                st.caption(date_node.text)
        elif "explanation" in child.classes:
            st.write(child.text)
        elif "copyright" in child.classes:
            st.caption(child.text)

    close_btn = backdrop.find_class("close-btn")
    if close_btn is not None and st.button(close_btn.text, key="modal_close"):
        app.document.click(close_btn)
        st.rerun()


def paint_modal(app: SpaceGallery) -> None:
    backdrop = app.modal.backdrop
    if backdrop is None:
        return
    st.session_state[SHOWN_MODAL_KEY] = backdrop

    @st.dialog(app.modal.record.display_title, width="large")
    def detail():
        _paint_modal_body(app, backdrop)

    detail()
