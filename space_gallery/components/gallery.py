import logging
from enum import Enum
from typing import Any, Callable, List, Optional

from space_gallery.components.gallery_item import render_item
from space_gallery.components.tree import Node, element
from space_gallery.services.catalog import CatalogRecord, records_from_payload

logger = logging.getLogger(__name__)

LOADING_TEXT = "🔄 Loading space photos…"
EMPTY_TEXT = "No images found."
ERROR_TEXT = "Failed to load images. Please try again later."
BUSY_LABEL = "Loading..."


class GalleryState(str, Enum):
    IDLE = "idle"
    LOADING = "loading"
    POPULATED = "populated"
    EMPTY = "empty"
    ERROR = "error"


def placeholder(text: str, **attrs: Any) -> Node:
    return element("div", text=text, class_="placeholder", **attrs)


class GalleryController:
    """Drives one fetch-and-render cycle per trigger activation.

    Each cycle gets a token from ``begin``; a completion carrying an older
    token than the latest one issued is dropped so a slow response cannot
    overwrite a newer one.
    """

    def __init__(
        self,
        gallery: Node,
        trigger: Node,
        fetch: Callable[[], Any],
        on_activate: Optional[Callable[[CatalogRecord], None]] = None,
    ):
        self._gallery = gallery
        self._trigger = trigger
        self._fetch = fetch
        self._on_activate = on_activate
        self._idle_label = trigger.text
        self._token = 0
        self._listeners: List[Callable[["GalleryController"], None]] = []
        self.state = GalleryState.IDLE
        self.records: List[CatalogRecord] = []
        self.error: Optional[str] = None

    @property
    def latest_token(self) -> int:
        return self._token

    def subscribe(self, listener: Callable[["GalleryController"], None]) -> Callable[[], None]:
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _notify(self) -> None:
        for listener in list(self._listeners):
            # A broken painter must not change the outcome of the cycle
            try:
                listener(self)
            except Exception:
                logger.exception("Gallery listener failed in state %s", self.state.value)

    def _show(self, *nodes: Node) -> None:
        self._gallery.clear()
        for node in nodes:
            self._gallery.append(node)

    def begin(self) -> int:
        self._token += 1
        self.records = []
        self.error = None
        self._gallery.attrs["aria-live"] = "polite"
        self._show(placeholder(LOADING_TEXT, role="status"))
        self._trigger.attrs["disabled"] = "disabled"
        self._trigger.text = BUSY_LABEL
        self.state = GalleryState.LOADING
        self._notify()
        return self._token

    def _is_current(self, token: int) -> bool:
        if token != self._token:
            logger.debug("Dropping stale catalog result (token %s, latest %s)", token, self._token)
            return False
        return True

    def _restore_trigger(self) -> None:
        self._trigger.attrs.pop("disabled", None)
        self._trigger.text = self._idle_label

    def complete(self, token: int, payload: Any) -> bool:
        if not self._is_current(token):
            return False
        records = records_from_payload(payload)
        if records is None:
            logger.warning("Catalog payload is %s, not a list; showing empty gallery", type(payload).__name__)
        try:
            if records:
                self._show(*(render_item(r, self._on_activate) for r in records))
                self.records = records
                self.state = GalleryState.POPULATED
            else:
                self._show(placeholder(EMPTY_TEXT))
                self.state = GalleryState.EMPTY
        finally:
            self._restore_trigger()
        self._notify()
        return True

    def fail(self, token: int, exc: BaseException) -> bool:
        if not self._is_current(token):
            return False
        try:
            self.error = str(exc)
            self._show(placeholder(ERROR_TEXT))
            self.state = GalleryState.ERROR
        finally:
            self._restore_trigger()
        self._notify()
        return True

    def run(self) -> GalleryState:
        """One synchronous cycle: loading, fetch, then populated/empty/error."""
        token = self.begin()
        try:
            payload = self._fetch()
        except Exception as e:
            logger.exception("Catalog fetch failed")
            self.fail(token, e)
        else:
            self.complete(token, payload)
        return self.state
