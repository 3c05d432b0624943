"""Tests for catalog parsing and fetching."""

from __future__ import annotations

import json
from unittest import mock

import pytest
import requests

from space_gallery.services import catalog
from space_gallery.services.catalog import (
    CatalogRecord,
    ImageMedia,
    MediaKind,
    OtherMedia,
    ParseFailure,
    TransportFailure,
    VideoMedia,
    fetch_catalog,
    records_from_payload,
)


def _response(status: int = 200, body: object = None, text: str | None = None) -> requests.Response:
    r = requests.Response()
    r.status_code = status
    r.url = "https://example.test/data.json"
    if text is not None:
        r._content = text.encode()
    else:
        r._content = json.dumps(body).encode()
    return r


class TestCatalogRecord:
    def test_image_record(self) -> None:
        rec = CatalogRecord.from_dict({
            "title": "M1", "date": "2024-01-01", "media_type": "image",
            "url": "a.jpg", "hdurl": "a_hd.jpg",
        })
        assert rec.media_type is MediaKind.IMAGE
        assert rec.media == ImageMedia(url="a.jpg", hd_url="a_hd.jpg")
        assert rec.media.display_url == "a_hd.jpg"
        assert rec.display_title == "M1"

    def test_image_without_hdurl_uses_url(self) -> None:
        rec = CatalogRecord.from_dict({"media_type": "image", "url": "a.jpg"})
        assert rec.media.display_url == "a.jpg"

    def test_video_record(self) -> None:
        rec = CatalogRecord.from_dict({
            "media_type": "video", "url": "https://www.youtube.com/embed/x", "thumbnail_url": "t.jpg",
        })
        assert rec.media == VideoMedia(url="https://www.youtube.com/embed/x", thumbnail_url="t.jpg")

    @pytest.mark.parametrize("tag", ["other", "audio", None, ""])
    def test_unrecognised_media_is_other(self, tag: str | None) -> None:
        rec = CatalogRecord.from_dict({"media_type": tag, "url": "x.bin"})
        assert rec.media_type is MediaKind.OTHER
        assert isinstance(rec.media, OtherMedia)
        assert rec.media.url == "x.bin"

    def test_empty_strings_count_as_missing(self) -> None:
        rec = CatalogRecord.from_dict({"title": "", "date": "", "explanation": ""})
        assert rec.title is None
        assert rec.date is None
        assert rec.explanation is None
        assert rec.display_title == "Untitled"

    @pytest.mark.parametrize("item", [None, 3, "text", ["a"]])
    def test_non_mapping_entry_degrades(self, item: object) -> None:
        rec = CatalogRecord.from_dict(item)
        assert rec.display_title == "Untitled"
        assert rec.media == OtherMedia()

    def test_raw_entry_is_kept(self) -> None:
        item = {"title": "A", "media_type": "image", "service_version": "v1"}
        assert CatalogRecord.from_dict(item).raw == item


def test_records_from_payload_preserves_order() -> None:
    payload = [{"title": str(i)} for i in range(5)]
    assert [r.title for r in records_from_payload(payload)] == ["0", "1", "2", "3", "4"]


@pytest.mark.parametrize("payload", [{}, {"title": "x"}, "nope", None, 1])
def test_records_from_payload_rejects_non_lists(payload: object) -> None:
    assert records_from_payload(payload) is None


class TestFetchCatalog:
    def test_returns_decoded_json(self) -> None:
        body = [{"title": "M1"}]
        with mock.patch.object(catalog.requests, "get", return_value=_response(body=body)) as get:
            assert fetch_catalog("https://example.test/data.json", timeout=5) == body
        get.assert_called_once_with("https://example.test/data.json", timeout=5)

    def test_non_success_status_is_transport_failure(self) -> None:
        with mock.patch.object(catalog.requests, "get", return_value=_response(status=503, body=[])):
            with pytest.raises(TransportFailure) as excinfo:
                fetch_catalog("https://example.test/data.json")
        assert excinfo.value.status == 503
        assert "503" in str(excinfo.value)

    def test_connection_error_is_transport_failure(self) -> None:
        with mock.patch.object(catalog.requests, "get", side_effect=requests.ConnectionError("down")):
            with pytest.raises(TransportFailure) as excinfo:
                fetch_catalog("https://example.test/data.json")
        assert excinfo.value.status is None

    def test_invalid_json_is_parse_failure(self) -> None:
        with mock.patch.object(catalog.requests, "get", return_value=_response(text="<html>oops")):
            with pytest.raises(ParseFailure):
                fetch_catalog("https://example.test/data.json")
