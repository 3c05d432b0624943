"""Render tree: plain data describing what to show.

Renderers build ``Node`` trees without touching any display surface; the
Streamlit view (or ``to_html``) attaches them afterwards.
"""
from dataclasses import dataclass, field
from html import escape
from typing import Any, Callable, Dict, Iterator, List, Optional

VOID_TAGS = {"img", "br", "hr", "input"}


@dataclass(eq=False)
class Node:
    tag: str
    attrs: Dict[str, str] = field(default_factory=dict)
    children: List["Node"] = field(default_factory=list)
    text: str = ""
    data: Any = None
    handlers: Dict[str, Callable[[Any], None]] = field(default_factory=dict, repr=False)
    parent: Optional["Node"] = field(default=None, repr=False)

    def __post_init__(self):
        for child in self.children:
            child.parent = self

    @property
    def id(self) -> Optional[str]:
        return self.attrs.get("id")

    @property
    def classes(self) -> List[str]:
        return self.attrs.get("class", "").split()

    def append(self, child: "Node") -> "Node":
        if child.parent is not None:
            child.parent.remove(child)
        child.parent = self
        self.children.append(child)
        return child

    def remove(self, child: "Node") -> None:
        self.children.remove(child)
        child.parent = None

    def clear(self) -> None:
        for child in self.children:
            child.parent = None
        self.children = []
        self.text = ""

    def detach(self) -> bool:
        if self.parent is None:
            return False
        self.parent.remove(self)
        return True

    def on(self, event: str, handler: Callable[[Any], None]) -> None:
        self.handlers[event] = handler

    def iter(self) -> Iterator["Node"]:
        yield self
        for child in self.children:
            yield from child.iter()

    def find_all(self, tag: str) -> List["Node"]:
        return [n for n in self.iter() if n.tag == tag]

    def find(self, tag: str) -> Optional["Node"]:
        return next((n for n in self.iter() if n.tag == tag), None)

    def find_class(self, name: str) -> Optional["Node"]:
        return next((n for n in self.iter() if name in n.classes), None)

    def closest(self, tag: str) -> Optional["Node"]:
        node: Optional[Node] = self
        while node is not None:
            if node.tag == tag:
                return node
            node = node.parent
        return None

    def contains(self, other: "Node") -> bool:
        node: Optional[Node] = other
        while node is not None:
            if node is self:
                return True
            node = node.parent
        return False

    def text_content(self) -> str:
        return self.text + "".join(child.text_content() for child in self.children)


def _attr_name(name: str) -> str:
    # class_ -> class, aria_label -> aria-label
    return name.rstrip("_").replace("_", "-")


def element(tag: str, *children: Node, text: str = "", data: Any = None, **attrs: Any) -> Node:
    """Shorthand builder; ``None`` attribute values are dropped."""
    return Node(
        tag=tag,
        attrs={_attr_name(k): str(v) for k, v in attrs.items() if v is not None},
        children=list(children),
        text=text,
        data=data,
    )


def to_html(node: Node) -> str:
    attrs = "".join(f' {k}="{escape(v, quote=True)}"' for k, v in node.attrs.items())
    if node.tag in VOID_TAGS:
        return f"<{node.tag}{attrs}>"
    inner = escape(node.text, quote=False) + "".join(to_html(c) for c in node.children)
    return f"<{node.tag}{attrs}>{inner}</{node.tag}>"
