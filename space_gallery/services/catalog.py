import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Mapping, Optional, Union

import requests

logger = logging.getLogger(__name__)


class MediaKind(str, Enum):
    IMAGE = "image"
    VIDEO = "video"
    OTHER = "other"


@dataclass(frozen=True)
class ImageMedia:
    url: Optional[str] = None
    hd_url: Optional[str] = None
    kind = MediaKind.IMAGE

    @property
    def display_url(self) -> Optional[str]:
        # hdurl wins over url for display
        return self.hd_url or self.url


@dataclass(frozen=True)
class VideoMedia:
    url: Optional[str] = None
    thumbnail_url: Optional[str] = None
    kind = MediaKind.VIDEO


@dataclass(frozen=True)
class OtherMedia:
    """Anything that is neither an image nor a video; keeps the raw tag."""
    url: Optional[str] = None
    media_type: Optional[str] = None
    kind = MediaKind.OTHER


Media = Union[ImageMedia, VideoMedia, OtherMedia]


class CatalogError(Exception):
    """Base class for catalog fetch failures."""


class TransportFailure(CatalogError):
    def __init__(self, message: str, status: Optional[int] = None):
        super().__init__(message)
        self.status = status


class ParseFailure(CatalogError):
    pass


def _text(value: Any) -> Optional[str]:
    # Empty strings count as missing, same as absent keys
    if value is None or value == "":
        return None
    return value if isinstance(value, str) else str(value)


@dataclass(frozen=True)
class CatalogRecord:
    title: Optional[str] = None
    date: Optional[str] = None
    media: Media = field(default_factory=OtherMedia)
    explanation: Optional[str] = None
    copyright: Optional[str] = None
    raw: Dict[str, Any] = field(default_factory=dict, compare=False, repr=False)

    @property
    def media_type(self) -> MediaKind:
        return self.media.kind

    @property
    def display_title(self) -> str:
        return self.title or "Untitled"

    @classmethod
    def from_dict(cls, item: Any) -> "CatalogRecord":
        """Build a record from one JSON entry; missing fields stay None."""
        if not isinstance(item, Mapping):
            return cls(raw={})
        url = _text(item.get("url"))
        media_type = _text(item.get("media_type"))
        media: Media
        if media_type == MediaKind.IMAGE.value:
            media = ImageMedia(url=url, hd_url=_text(item.get("hdurl")))
        elif media_type == MediaKind.VIDEO.value:
            media = VideoMedia(url=url, thumbnail_url=_text(item.get("thumbnail_url")))
        else:
            media = OtherMedia(url=url, media_type=media_type)
        return cls(
            title=_text(item.get("title")),
            date=_text(item.get("date")),
            media=media,
            explanation=_text(item.get("explanation")),
            copyright=_text(item.get("copyright")),
            raw=dict(item),
        )


def records_from_payload(payload: Any) -> Optional[List[CatalogRecord]]:
    """Records in source order, or None when the payload is not a JSON array."""
    if not isinstance(payload, list):
        return None
    return [CatalogRecord.from_dict(item) for item in payload]


def fetch_catalog(url: str, timeout: float = 20) -> Any:
    """GET the static catalog and return the decoded JSON body."""
    logger.info("Fetching catalog from %s", url)
    try:
        r = requests.get(url, timeout=timeout)
        r.raise_for_status()
    except requests.HTTPError as e:
        status = e.response.status_code if e.response is not None else None
        raise TransportFailure(f"Network error: {status}", status=status) from e
    except requests.RequestException as e:
        raise TransportFailure(f"Network error: {e}") from e
    try:
        return r.json()
    except ValueError as e:
        raise ParseFailure(f"Catalog body is not valid JSON: {e}") from e
