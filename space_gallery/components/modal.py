import logging
from typing import Optional
from urllib.parse import urlparse

from space_gallery.components.document import ClickEvent, Document, KeyEvent
from space_gallery.components.gallery_item import external_link
from space_gallery.components.tree import Node, element
from space_gallery.services.catalog import CatalogRecord, ImageMedia, VideoMedia
from space_gallery.services.dates import format_date

logger = logging.getLogger(__name__)

EMBEDDABLE_HOSTS = ("youtube.com", "youtube-nocookie.com", "player.vimeo.com")
IFRAME_ALLOW = "accelerometer; autoplay; clipboard-write; encrypted-media; gyroscope; picture-in-picture"


def is_embeddable(url: Optional[str]) -> bool:
    if not url:
        return False
    host = (urlparse(url).hostname or "").lower()
    return any(host == h or host.endswith("." + h) for h in EMBEDDABLE_HOSTS)


def render_modal_media(record: CatalogRecord) -> Optional[Node]:
    media = record.media
    if isinstance(media, ImageMedia):
        return element("img", src=media.display_url, alt=record.title or "APOD Image")
    if isinstance(media, VideoMedia):
        if is_embeddable(media.url):
            return element(
                "iframe",
                src=media.url,
                width="100%",
                height="500",
                frameborder="0",
                allow=IFRAME_ALLOW,
                allowfullscreen="",
            )
        if media.thumbnail_url:
            return element("img", src=media.thumbnail_url, alt=record.title or "APOD Video")
        return external_link(media.url, text="Open video")
    return None


class ModalController:
    """Owns the single detail overlay and its keyboard listener.

    Opening while another overlay is showing replaces it, so there is never
    more than one backdrop in the document or one Escape listener registered.
    """

    def __init__(self, document: Document):
        self._document = document
        self._backdrop: Optional[Node] = None
        self._record: Optional[CatalogRecord] = None

    @property
    def is_open(self) -> bool:
        return self._backdrop is not None

    @property
    def backdrop(self) -> Optional[Node]:
        return self._backdrop

    @property
    def record(self) -> Optional[CatalogRecord]:
        return self._record

    def open(self, record: CatalogRecord) -> Node:
        if self.is_open:
            logger.debug("Replacing open modal for %r", self._record and self._record.title)
            self.close()

        close_btn = element("button", text="Close", class_="close-btn")
        close_btn.on("click", lambda event: self.close())

        modal = element("div", close_btn, class_="modal", role="dialog", aria_modal="true")
        media = render_modal_media(record)
        if media is not None:
            modal.append(media)
        modal.append(element(
            "div",
            element("h2", text=record.display_title),
            element("div", text=format_date(record.date or ""), class_="date"),
            class_="meta",
        ))
        if record.explanation:
            modal.append(element("div", text=record.explanation, class_="explanation"))
        if record.copyright:
            modal.append(element("div", text=f"© {record.copyright}", class_="copyright"))

        backdrop = element("div", modal, class_="modal-backdrop", data=record)
        backdrop.on("click", self._on_backdrop_click)
        self._document.body.append(backdrop)
        self._document.add_key_listener(self._on_key)

        self._backdrop = backdrop
        self._record = record
        return backdrop

    def close(self) -> None:
        backdrop = self._backdrop
        if backdrop is None:
            return
        backdrop.detach()
        self._document.remove_key_listener(self._on_key)
        self._backdrop = None
        self._record = None

    def _on_backdrop_click(self, event: ClickEvent) -> None:
        if event.target is self._backdrop:
            self.close()

    def _on_key(self, event: KeyEvent) -> None:
        if event.key == "Escape":
            self.close()
