# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Element - the callable handle around a MarkupNode."""

from __future__ import annotations

from typing import Any

from .arguments import ingest
from .documents import Document
from .node import MarkupNode
from .renderers import render_dom, render_html


class Element:
    """Callable handle collecting attributes and children into a node.

    Calling an element adds to it and returns the same element, so calls
    can be chained:

    - mappings (and keyword arguments) are attributes
    - other elements are nested children
    - lists, tuples and other iterables are expanded in place
    - anything else is a text child

    Nothing is rendered until html() or dom() is called.

    Example:
        >>> img = Element(MarkupNode('img', self_closing=True))
        >>> img({'src': 'a.png'})(alt='pic').html()
        '<img src="a.png" alt="pic"/>'
    """

    __slots__ = ('node',)

    def __init__(self, node: MarkupNode) -> None:
        self.node = node

    def __call__(self, *args: Any, **attr: Any) -> Element:
        return self.add(*args, **attr)

    def add(self, *args: Any, **attr: Any) -> Element:
        """Add children and attributes, left to right.

        Keyword names lose one trailing underscore, so ``class_='x'``
        sets the ``class`` attribute.

        Raises:
            InvalidArgumentError: If an argument (or a nested item) is None.
                Arguments before it are kept, the rest of the call is skipped.
        """
        for arg in args:
            ingest(self.node, arg)
        if attr:
            ingest(self.node, {_attr_name(k): v for k, v in attr.items()})
        return self

    def html(self) -> str:
        """Render as a markup string."""
        return render_html(self.node)

    def dom(self, document: Document | None = None) -> Any:
        """Render through a document (a new MinidomDocument by default)."""
        return render_dom(self.node, document)

    def __str__(self) -> str:
        return self.html()

    def __repr__(self) -> str:
        return f"Element({self.node!r})"


def _attr_name(name: str) -> str:
    return name[:-1] if name.endswith('_') and len(name) > 1 else name
