import random
from dataclasses import dataclass
from functools import partial
from typing import Any, Callable, Optional

from space_gallery.components.document import FACT_ID, GALLERY_ID, TRIGGER_ID, Document, build_page
from space_gallery.components.gallery import GalleryController
from space_gallery.components.modal import ModalController
from space_gallery.components.tree import Node
from space_gallery.config import Settings, load_settings
from space_gallery.services.catalog import fetch_catalog
from space_gallery.services.facts import show_random_fact


@dataclass
class SpaceGallery:
    """Everything one browser session owns, wired together once."""
    document: Document
    trigger: Node
    gallery_region: Node
    fact_region: Optional[Node]
    modal: ModalController
    gallery: GalleryController
    settings: Settings
    fact: Optional[str] = None


def create_app(
    settings: Optional[Settings] = None,
    fetch: Optional[Callable[[], Any]] = None,
    rng: Optional[random.Random] = None,
    document: Optional[Document] = None,
) -> SpaceGallery:
    settings = settings or load_settings()
    document = document or build_page()
    trigger = document.get_element_by_id(TRIGGER_ID)
    gallery_region = document.get_element_by_id(GALLERY_ID)
    if trigger is None or gallery_region is None:
        raise LookupError(f"Page is missing #{TRIGGER_ID} or #{GALLERY_ID}")
    fact_region = document.get_element_by_id(FACT_ID)

    modal = ModalController(document)
    gallery = GalleryController(
        gallery_region,
        trigger,
        fetch or partial(fetch_catalog, settings.catalog_url, settings.timeout),
        on_activate=modal.open,
    )
    app = SpaceGallery(
        document=document,
        trigger=trigger,
        gallery_region=gallery_region,
        fact_region=fact_region,
        modal=modal,
        gallery=gallery,
        settings=settings,
    )
    app.fact = show_random_fact(fact_region, rng)
    return app
