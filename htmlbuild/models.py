"""Pydantic models for page configuration files."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated, Dict, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from .document import HtmlDocument, HtmlDocumentBuilder
from .elements import ContainerElement, ImageElement, Node, RawHtml, TextElement
from .io_utils import read_yaml


class TextSpec(BaseModel):
    """Escaped text rendered inside a span."""

    kind: Literal["text"] = "text"
    text: str = Field(..., description="Untrusted text; escaped at render time.")

    model_config = ConfigDict(extra="forbid")

    def to_node(self) -> Node:
        return TextElement(self.text)


class RawHtmlSpec(BaseModel):
    """Trusted markup inserted without escaping."""

    kind: Literal["raw_html"] = "raw_html"
    html: str = Field(..., description="Trusted HTML fragment emitted verbatim.")

    model_config = ConfigDict(extra="forbid")

    def to_node(self) -> Node:
        return RawHtml(self.html)


class ImageSpec(BaseModel):
    """Self-closing image element."""

    kind: Literal["image"] = "image"
    src: str = Field(..., description="Image source path or URL.")
    alt: Optional[str] = Field(None, description="Alternative text; empty when omitted.")
    attributes: Dict[str, str] = Field(
        default_factory=dict, description="Extra attributes emitted after src and alt."
    )

    model_config = ConfigDict(extra="forbid")

    def to_node(self) -> Node:
        node = ImageElement(self.src)
        if self.alt is not None:
            node = node.with_alt(self.alt)
        for name, value in self.attributes.items():
            node = node.with_attribute(name, value)
        return node


class ContainerSpec(BaseModel):
    """Element with a tag name and nested children."""

    kind: Literal["container"] = "container"
    tag: str = Field(..., description="Tag name, emitted as given.")
    id: Optional[str] = Field(None, description="Value of the id attribute.")
    classes: List[str] = Field(
        default_factory=list, description="Class tokens; duplicates are dropped."
    )
    attributes: Dict[str, str] = Field(
        default_factory=dict, description="Additional attributes after id and class."
    )
    text: Optional[str] = Field(
        None, description="Shorthand for a leading text child."
    )
    children: List["NodeSpec"] = Field(
        default_factory=list, description="Child nodes in render order."
    )

    model_config = ConfigDict(extra="forbid")

    def to_node(self) -> Node:
        node = ContainerElement(self.tag)
        if self.id is not None:
            node = node.with_id(self.id)
        for name in self.classes:
            node = node.with_class(name)
        for name, value in self.attributes.items():
            node = node.with_attribute(name, value)
        if self.text is not None:
            node = node.with_text(self.text)
        return node.with_children(child.to_node() for child in self.children)


NodeSpec = Annotated[
    Union[TextSpec, RawHtmlSpec, ImageSpec, ContainerSpec],
    Field(discriminator="kind"),
]

ContainerSpec.model_rebuild()


class PageSpec(BaseModel):
    """Schema for a page YAML file."""

    title: Optional[str] = Field(None, description="Document title.")
    lang: Optional[str] = Field(None, description="Value of the html lang attribute.")
    meta: Dict[str, str] = Field(
        default_factory=dict,
        description="Meta tags keyed by name; the key 'charset' renders a charset meta.",
    )
    stylesheets: List[str] = Field(default_factory=list, description="Stylesheet hrefs.")
    scripts: List[str] = Field(
        default_factory=list, description="Script srcs appended to the end of the body."
    )
    body_attributes: Dict[str, str] = Field(
        default_factory=dict,
        alias="bodyAttributes",
        description="Attributes set on the body tag.",
    )
    head: List[NodeSpec] = Field(default_factory=list, description="Extra head nodes.")
    body: List[NodeSpec] = Field(default_factory=list, description="Body nodes in order.")

    model_config = ConfigDict(populate_by_name=True, extra="forbid")

    def to_document(self) -> HtmlDocument:
        builder = HtmlDocumentBuilder()
        if self.lang is not None:
            builder = builder.lang(self.lang)
        for name, content in self.meta.items():
            builder = builder.add_meta(name, content)
        if self.title is not None:
            builder = builder.title(self.title)
        for href in self.stylesheets:
            builder = builder.add_stylesheet(href)
        for src in self.scripts:
            builder = builder.add_script(src)
        for name, value in self.body_attributes.items():
            builder = builder.add_body_attribute(name, value)
        for spec in self.head:
            builder = builder.add_head_element(spec.to_node())
        for spec in self.body:
            builder = builder.add_body_element(spec.to_node())
        return builder.build()


def load_page_spec(path: Path) -> PageSpec:
    """Load and validate a page description from YAML."""
    data = read_yaml(path) or {}
    return PageSpec.model_validate(data)


__all__ = [
    "ContainerSpec",
    "ImageSpec",
    "NodeSpec",
    "PageSpec",
    "RawHtmlSpec",
    "TextSpec",
    "load_page_spec",
]
