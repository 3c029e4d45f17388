"""Element model for HTML serialization.

Nodes are frozen values. Every ``with_*`` call returns a new node, so a tree
can be shared, rendered repeatedly and used as a template for variations.
Escaping happens at render time, never at construction time.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Iterable, Tuple, Union

from .escaping import DEFAULT_ESCAPER, Escaper

Attributes = Tuple[Tuple[str, str], ...]


def set_attribute(attributes: Attributes, name: str, value: str) -> Attributes:
    # dict keeps the original position of an overwritten key
    updated = dict(attributes)
    updated[name] = value
    return tuple(updated.items())


class _Renderable:
    def render(self, escaper: Escaper = DEFAULT_ESCAPER) -> str:
        return render_node(self, escaper)  # type: ignore[arg-type]

    def __html__(self) -> str:
        return self.render()

    def __str__(self) -> str:
        return self.render()


@dataclass(frozen=True)
class TextElement(_Renderable):
    """Escaped text wrapped in a ``<span>``."""

    content: str


@dataclass(frozen=True)
class RawHtml(_Renderable):
    """Trusted markup emitted verbatim.

    This is the only node that bypasses escaping. Never build one from
    untrusted input.
    """

    content: str


@dataclass(frozen=True)
class ImageElement(_Renderable):
    """Self-closing ``<img>``; ``src`` and ``alt`` are always emitted."""

    src: str
    alt: str | None = None
    attributes: Attributes = ()

    def with_alt(self, alt: str) -> ImageElement:
        return replace(self, alt=alt)

    def with_attribute(self, name: str, value: str) -> ImageElement:
        if name == "src":
            return replace(self, src=value)
        if name == "alt":
            return self.with_alt(value)
        return replace(self, attributes=set_attribute(self.attributes, name, value))


@dataclass(frozen=True)
class ContainerElement(_Renderable):
    """Element with a caller-chosen tag and an ordered list of children.

    The tag name is emitted as given. An empty or malformed tag produces
    invalid HTML; no validation is attempted.
    """

    tag: str
    id: str | None = None
    classes: Tuple[str, ...] = ()
    attributes: Attributes = ()
    children: Tuple["Node", ...] = ()

    def with_id(self, element_id: str) -> ContainerElement:
        return replace(self, id=element_id)

    def with_class(self, name: str) -> ContainerElement:
        if name in self.classes:
            return self
        return replace(self, classes=self.classes + (name,))

    def with_attribute(self, name: str, value: str) -> ContainerElement:
        """Set an attribute; ``id`` and ``class`` replace the dedicated fields."""
        if name == "id":
            return self.with_id(value)
        if name == "class":
            return replace(self, classes=tuple(dict.fromkeys(value.split())))
        return replace(self, attributes=set_attribute(self.attributes, name, value))

    def with_child(self, child: Node) -> ContainerElement:
        return replace(self, children=self.children + (ensure_node(child),))

    def with_children(self, children: Iterable[Node]) -> ContainerElement:
        added = tuple(ensure_node(child) for child in children)
        return replace(self, children=self.children + added)

    def with_text(self, text: str) -> ContainerElement:
        return self.with_child(TextElement(text))


Node = Union[TextElement, ImageElement, ContainerElement, RawHtml]
NODE_TYPES = (TextElement, ImageElement, ContainerElement, RawHtml)


def ensure_node(value: object) -> Node:
    """Return ``value`` unchanged if it is a node, else raise ``TypeError``."""
    if not isinstance(value, NODE_TYPES):
        raise TypeError(f"expected an HTML node, got {type(value).__name__}")
    return value


def render_attrs(attributes: Iterable[Tuple[str, str]], escaper: Escaper, *, escape_names: bool = False) -> str:
    parts = []
    for name, value in attributes:
        if escape_names:
            name = escaper.attribute(name)
        parts.append(f' {name}="{escaper.attribute(value)}"')
    return "".join(parts)


def _render_image(node: ImageElement, escaper: Escaper) -> str:
    fixed = [("src", node.src), ("alt", node.alt or "")]
    return f"<img{render_attrs(fixed, escaper)}{render_attrs(node.attributes, escaper)} />"


def _render_container(node: ContainerElement, escaper: Escaper) -> str:
    fixed = []
    if node.id is not None:
        fixed.append(("id", node.id))
    if node.classes:
        fixed.append(("class", " ".join(node.classes)))
    attrs = render_attrs(fixed, escaper) + render_attrs(node.attributes, escaper, escape_names=True)
    inner = "".join(render_node(child, escaper) for child in node.children)
    return f"<{node.tag}{attrs}>{inner}</{node.tag}>"


def render_node(node: Node, escaper: Escaper = DEFAULT_ESCAPER) -> str:
    """Render one node, and recursively its children, to an HTML fragment."""
    if isinstance(node, TextElement):
        return f"<span>{escaper.text(node.content)}</span>"
    if isinstance(node, RawHtml):
        return node.content
    if isinstance(node, ImageElement):
        return _render_image(node, escaper)
    if isinstance(node, ContainerElement):
        return _render_container(node, escaper)
    raise TypeError(f"cannot render {type(node).__name__}")


__all__ = [
    "Attributes",
    "ContainerElement",
    "ImageElement",
    "NODE_TYPES",
    "Node",
    "RawHtml",
    "TextElement",
    "ensure_node",
    "render_attrs",
    "render_node",
    "set_attribute",
]
