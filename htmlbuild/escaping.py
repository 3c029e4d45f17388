"""Context-sensitive escaping for rendered HTML."""

from __future__ import annotations

import html
from dataclasses import dataclass
from typing import Callable

EscapeFn = Callable[[str], str]


def escape_text(value: str) -> str:
    """Escape a string for use as element text content.

    Quotes are escaped as well so the same output is safe if it ever lands
    inside an attribute. Escaping is not idempotent: ``&amp;`` becomes
    ``&amp;amp;``.
    """
    return html.escape(value, quote=True)


def escape_attribute(value: str) -> str:
    """Escape a string for use inside a double-quoted attribute value.

    Same output as :func:`escape_text`; both escape quotes, so a single
    policy covers text and attribute contexts.
    """
    return html.escape(value, quote=True)


@dataclass(frozen=True)
class Escaper:
    """Pair of escaping functions used while rendering a tree."""

    text: EscapeFn = escape_text
    attribute: EscapeFn = escape_attribute


DEFAULT_ESCAPER = Escaper()


__all__ = ["DEFAULT_ESCAPER", "EscapeFn", "Escaper", "escape_attribute", "escape_text"]
