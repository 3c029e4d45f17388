"""Document model and renderer."""

from __future__ import annotations

from dataclasses import dataclass, replace
from pathlib import Path
from typing import Tuple

from .elements import Attributes, Node, ensure_node, render_attrs, render_node, set_attribute
from .escaping import DEFAULT_ESCAPER, Escaper
from .util_fs import PathLike, save_html

DOCTYPE = "<!DOCTYPE html>"


@dataclass(frozen=True)
class HtmlDocument:
    """A finished document: head metadata plus an ordered body."""

    title: str | None = None
    lang: str | None = None
    meta: Tuple[Tuple[str, str], ...] = ()
    stylesheets: Tuple[str, ...] = ()
    scripts: Tuple[str, ...] = ()
    head: Tuple[Node, ...] = ()
    body: Tuple[Node, ...] = ()
    body_attributes: Attributes = ()

    def render(self, escaper: Escaper = DEFAULT_ESCAPER) -> str:
        """Serialize the document as minified HTML5.

        Rendering is a read-only traversal; the same document always renders
        to the same string.
        """

        parts = [DOCTYPE]
        if self.lang is not None:
            parts.append(f'<html lang="{escaper.attribute(self.lang)}">')
        else:
            parts.append("<html>")

        parts.append("<head>")
        for name, content in self.meta:
            if name == "charset":
                parts.append(f'<meta charset="{escaper.attribute(content)}">')
            else:
                parts.append(f"<meta{render_attrs([('name', name), ('content', content)], escaper)}>")
        if self.title is not None:
            parts.append(f"<title>{escaper.text(self.title)}</title>")
        for href in self.stylesheets:
            parts.append(f'<link rel="stylesheet" href="{escaper.attribute(href)}">')
        parts.extend(render_node(node, escaper) for node in self.head)
        parts.append("</head>")

        parts.append(f"<body{render_attrs(self.body_attributes, escaper, escape_names=True)}>")
        parts.extend(render_node(node, escaper) for node in self.body)
        for src in self.scripts:
            parts.append(f'<script src="{escaper.attribute(src)}"></script>')
        parts.append("</body></html>")
        return "".join(parts)

    def save(self, path: PathLike) -> Path:
        return save_html(path, self.render())

    def __str__(self) -> str:
        return self.render()


@dataclass(frozen=True)
class HtmlDocumentBuilder:
    """Chainable builder for :class:`HtmlDocument`.

    Each call returns a new builder; ``build()`` leaves the builder untouched.
    """

    _document: HtmlDocument = HtmlDocument()

    def title(self, title: str) -> HtmlDocumentBuilder:
        return self._update(title=title)

    def lang(self, lang: str) -> HtmlDocumentBuilder:
        return self._update(lang=lang)

    def add_meta(self, name: str, content: str) -> HtmlDocumentBuilder:
        return self._update(meta=self._document.meta + ((name, content),))

    def add_stylesheet(self, href: str) -> HtmlDocumentBuilder:
        return self._update(stylesheets=self._document.stylesheets + (href,))

    def add_script(self, src: str) -> HtmlDocumentBuilder:
        return self._update(scripts=self._document.scripts + (src,))

    def add_head_element(self, element: Node) -> HtmlDocumentBuilder:
        return self._update(head=self._document.head + (ensure_node(element),))

    def add_body_element(self, element: Node) -> HtmlDocumentBuilder:
        return self._update(body=self._document.body + (ensure_node(element),))

    def add_body_attribute(self, name: str, value: str) -> HtmlDocumentBuilder:
        return self._update(body_attributes=set_attribute(self._document.body_attributes, name, value))

    def build(self) -> HtmlDocument:
        return self._document

    def _update(self, **changes) -> HtmlDocumentBuilder:
        return HtmlDocumentBuilder(replace(self._document, **changes))


__all__ = ["DOCTYPE", "HtmlDocument", "HtmlDocumentBuilder"]
