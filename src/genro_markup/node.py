# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Markup node data model."""

from __future__ import annotations

from typing import Any


class _NoValue:
    """Marker for bare attributes such as ``disabled`` or ``checked``."""

    __slots__ = ()

    def __repr__(self) -> str:
        return 'NO_VALUE'

    def __reduce__(self) -> str:
        return 'NO_VALUE'


NO_VALUE = _NoValue()


def is_bare(value: Any) -> bool:
    """True if an attribute value means "no value" (rendered bare)."""
    return value is None or value is NO_VALUE


class MarkupNode:
    """A markup element, or a tagless fragment.

    Each node has:
    - tag: The element name (None for fragments)
    - self_closing: Rendered as ``<tag/>``, children are never emitted
    - is_fragment: Rendered as its children only, without delimiters
    - attr: Dictionary of attributes, in insertion order
    - children: Ordered list of literals and Element references

    Values are kept verbatim; nothing is escaped when rendering.

    Example:
        >>> node = MarkupNode('img', self_closing=True)
        >>> node.set_attr({'src': 'a.png'}, alt='pic')
        >>> node.attr
        {'src': 'a.png', 'alt': 'pic'}
    """

    __slots__ = ('tag', 'self_closing', 'is_fragment', 'attr', 'children')

    def __init__(
        self,
        tag: str | None = None,
        self_closing: bool = False,
        is_fragment: bool = False,
    ) -> None:
        """Initialize a MarkupNode.

        Args:
            tag: The element name. Ignored for fragments.
            self_closing: True for void elements (``br``, ``img``, ...).
            is_fragment: True for a tagless container.
        """
        self.is_fragment = is_fragment
        self.tag = None if is_fragment else tag
        self.self_closing = self_closing and not is_fragment
        self.attr: dict[str, Any] = {}
        self.children: list[Any] = []

    @classmethod
    def fragment(cls) -> MarkupNode:
        """Create a fragment node."""
        return cls(is_fragment=True)

    def __repr__(self) -> str:
        name = 'fragment' if self.is_fragment else repr(self.tag)
        if self.self_closing:
            name += ', self_closing'
        return (
            f"MarkupNode({name}, attr={len(self.attr)}, "
            f"children={len(self.children)})"
        )

    def set_attr(self, _attr: dict[str, Any] | None = None, **kwargs: Any) -> None:
        """Merge attributes into the node; later keys overwrite earlier ones.

        Args:
            _attr: Dictionary of attributes to set.
            **kwargs: Additional attributes as keyword arguments.
        """
        if _attr:
            self.attr.update(_attr)
        self.attr.update(kwargs)

    def append(self, child: Any) -> None:
        """Append a literal or an Element reference."""
        self.children.append(child)
