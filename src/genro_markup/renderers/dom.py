# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Structural renderer for markup nodes.

Walks a node exactly like ``render_html`` but builds a live tree through a
``Document`` collaborator instead of joining strings.
"""

from __future__ import annotations

from typing import Any

from ..documents import Document, MinidomDocument
from ..node import MarkupNode, is_bare


def _dom_element(node: MarkupNode, document: Document) -> Any:
    if node.is_fragment:
        return document.create_fragment()

    el = document.create_element(node.tag)
    for name, value in node.attr.items():
        # A bare attribute is an empty-valued one in the DOM
        document.set_attribute(el, name, "" if is_bare(value) else str(value))
    return el


def _dom_children(node: MarkupNode, el: Any, document: Document) -> Any:
    # Import here to avoid circular dependency
    from ..element import Element

    if node.self_closing:
        return el
    for child in node.children:
        if isinstance(child, Element):
            document.append_child(el, render_dom(child.node, document))
        else:
            document.append_child(el, document.create_text(str(child)))
    return el


def render_dom(node: MarkupNode, document: Document | None = None) -> Any:
    """Render a node and its descendants through a document.

    Args:
        node: The node to render.
        document: The tree-construction collaborator. If None, a new
            MinidomDocument is used.

    Returns:
        The external node: an element, or a document fragment for fragments.
    """
    if document is None:
        document = MinidomDocument()
    return _dom_children(node, _dom_element(node, document), document)
