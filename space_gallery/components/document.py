import logging
from dataclasses import dataclass
from typing import Callable, List, Optional

from space_gallery.components.tree import Node, element

logger = logging.getLogger(__name__)

TRIGGER_ID = "getImageBtn"
GALLERY_ID = "gallery"
FACT_ID = "randomFact"


@dataclass
class ClickEvent:
    target: Node
    current: Optional[Node] = None


@dataclass
class KeyEvent:
    key: str


KeyListener = Callable[[KeyEvent], None]


class Document:
    """In-memory page surface: a body tree plus click and keyboard dispatch."""

    def __init__(self):
        self.body = Node("body")
        self.navigations: List[str] = []
        self._key_listeners: List[KeyListener] = []

    def get_element_by_id(self, element_id: str) -> Optional[Node]:
        return next((n for n in self.body.iter() if n.id == element_id), None)

    def is_attached(self, node: Node) -> bool:
        return self.body.contains(node)

    @property
    def key_listener_count(self) -> int:
        return len(self._key_listeners)

    def add_key_listener(self, listener: KeyListener) -> None:
        self._key_listeners.append(listener)

    def remove_key_listener(self, listener: KeyListener) -> None:
        self._key_listeners = [fn for fn in self._key_listeners if fn != listener]

    def dispatch_key(self, key: str) -> None:
        event = KeyEvent(key)
        for listener in list(self._key_listeners):
            listener(event)

    def click(self, target: Node) -> ClickEvent:
        """Bubble a click from ``target`` up to the root, then run the link default."""
        event = ClickEvent(target)
        path = []
        node: Optional[Node] = target
        while node is not None:
            path.append(node)
            node = node.parent
        for node in path:
            handler = node.handlers.get("click")
            if handler is not None:
                event.current = node
                handler(event)
        link = target.closest("a")
        if link is not None and link.attrs.get("target") == "_blank":
            href = link.attrs.get("href", "#")
            logger.debug("Opening %s in a new tab", href)
            self.navigations.append(href)
        return event


def build_page() -> Document:
    """The static page markup: trigger button, gallery container, fact region."""
    doc = Document()
    doc.body.append(element("p", id=FACT_ID, class_="random-fact"))
    doc.body.append(element("button", id=TRIGGER_ID, text="Fetch Space Images"))
    doc.body.append(element("div", id=GALLERY_ID, class_="gallery"))
    return doc
