# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Genro-Markup - Build markup trees with callable elements.

A lightweight, zero-dependency library to compose HTML-like trees in
Python and render them as strings or as DOM trees.

Example:
    >>> from genro_markup import Markup
    >>> m = Markup('ul', 'li', 'img/')
    >>> m.ul(m.li('one'), m.li(m.img(src='a.png'))).html()
    '<ul><li>one</li><li><img src="a.png"/></li></ul>'

Values are never escaped: callers are responsible for escaping untrusted
text and attribute values before passing them in.
"""

__version__ = "0.1.0"

from .arguments import classify, ingest
from .documents import Document, MinidomDocument
from .element import Element
from .exceptions import InvalidArgumentError, MarkupError
from .html5 import HtmlMarkup
from .node import NO_VALUE, MarkupNode
from .registry import Markup, parse_tag_spec
from .renderers import render_dom, render_html

__all__ = [
    # Core classes
    "Markup",
    "HtmlMarkup",
    "Element",
    "MarkupNode",
    "NO_VALUE",
    "parse_tag_spec",
    # Arguments
    "classify",
    "ingest",
    # Rendering
    "render_html",
    "render_dom",
    "Document",
    "MinidomDocument",
    # Exceptions
    "MarkupError",
    "InvalidArgumentError",
]
