from __future__ import annotations

import random
from typing import Any, Callable

import pytest

from space_gallery.app_context import SpaceGallery, create_app
from space_gallery.config import Settings
from space_gallery.services.catalog import CatalogRecord

IMAGE_ITEM = {
    "title": "M1",
    "date": "2024-01-01",
    "media_type": "image",
    "url": "a.jpg",
    "explanation": "The Crab Nebula.",
}


@pytest.fixture
def make_record() -> Callable[..., CatalogRecord]:
    def _make(**fields: Any) -> CatalogRecord:
        return CatalogRecord.from_dict(fields)

    return _make


@pytest.fixture
def make_app() -> Callable[..., SpaceGallery]:
    """Build an app whose fetch returns ``payload`` or raises ``error``."""

    def _make(payload: Any = None, error: Exception | None = None) -> SpaceGallery:
        def fetch() -> Any:
            if error is not None:
                raise error
            return payload

        return create_app(settings=Settings(), fetch=fetch, rng=random.Random(7))

    return _make
