import json
from typing import Callable, Optional

from space_gallery.components.document import ClickEvent
from space_gallery.components.tree import Node, element
from space_gallery.services.catalog import CatalogRecord, ImageMedia, VideoMedia
from space_gallery.services.dates import format_date

PLACEHOLDER_HREF = "#"


def external_link(href: Optional[str], *children: Node, text: str = "", **attrs) -> Node:
    return element(
        "a", *children,
        text=text,
        href=href or PLACEHOLDER_HREF,
        target="_blank",
        rel="noopener noreferrer",
        **attrs,
    )


def render_media(record: CatalogRecord) -> Node:
    media = record.media
    if isinstance(media, ImageMedia):
        img = element("img", src=media.display_url, alt=record.title or "APOD Image")
        return external_link(media.url, img)
    if isinstance(media, VideoMedia):
        if media.thumbnail_url:
            img = element("img", src=media.thumbnail_url, alt=record.title or "APOD Video")
            return external_link(media.url, img, aria_label="Open video in new tab")
        # No preview available: link box only
        return element("div", external_link(media.url, text="View video"), class_="video-link")
    return external_link(media.url, text="Open resource")


def render_item(
    record: CatalogRecord,
    on_activate: Optional[Callable[[CatalogRecord], None]] = None,
) -> Node:
    """Build the gallery card for one record.

    Clicking the card opens the detail view through ``on_activate``; clicks
    on links inside the card only follow the link.
    """
    card = element(
        "article",
        render_media(record),
        element("h3", text=record.display_title),
        element("p", text=format_date(record.date or ""), class_="date"),
        class_="gallery-item",
        data=record,
    )
    card.attrs["data-apod"] = json.dumps(record.raw, default=str)

    def on_click(event: ClickEvent) -> None:
        if event.target.closest("a") is not None:
            return
        if on_activate is not None:
            on_activate(record)

    card.on("click", on_click)
    return card
