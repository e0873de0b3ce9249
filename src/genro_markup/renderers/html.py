# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""String renderer for markup nodes.

Output shape:
    - ``<tag a="1" b>...</tag>`` for normal elements
    - ``<tag a="1"/>`` for self-closing elements (children are dropped)
    - the bare concatenated children for fragments

Nothing is escaped: tag names, attribute values and text are inserted
verbatim. Callers must pre-escape untrusted content.
"""

from __future__ import annotations

from ..node import MarkupNode, is_bare


def _open_tag(node: MarkupNode, parts: list[str]) -> None:
    parts.append(f"<{node.tag}")
    for name, value in node.attr.items():
        parts.append(f" {name}")
        if not is_bare(value):
            parts.append(f'="{value}"')
    parts.append("/>" if node.self_closing else ">")


def _inner_html(node: MarkupNode, parts: list[str]) -> None:
    # Import here to avoid circular dependency
    from ..element import Element

    if node.self_closing:
        return
    for child in node.children:
        if isinstance(child, Element):
            parts.append(render_html(child.node))
        else:
            parts.append(str(child))


def _close_tag(node: MarkupNode, parts: list[str]) -> None:
    if not node.self_closing:
        parts.append(f"</{node.tag}>")


def render_html(node: MarkupNode) -> str:
    """Render a node and its descendants to a markup string.

    Args:
        node: The node to render.

    Returns:
        The serialized markup.

    Example:
        >>> node = MarkupNode('p')
        >>> node.append('Hello')
        >>> render_html(node)
        '<p>Hello</p>'
    """
    parts: list[str] = []
    if node.is_fragment:
        _inner_html(node, parts)
        return "".join(parts)

    _open_tag(node, parts)
    _inner_html(node, parts)
    _close_tag(node, parts)
    return "".join(parts)
