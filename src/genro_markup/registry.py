# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Markup - tag registry producing fresh elements on every access."""

from __future__ import annotations

import logging
from functools import partial

from .element import Element
from .node import MarkupNode

logger = logging.getLogger(__name__)


def _new_element(tag: str, self_closing: bool) -> Element:
    return Element(MarkupNode(tag, self_closing=self_closing))


def parse_tag_spec(spec: str) -> tuple[str, bool]:
    """Parse a tag specification.

    A trailing slash marks a self-closing tag and is stripped.

    Args:
        spec: Tag spec like 'div' or 'br/'.

    Returns:
        Tuple of (tag_name, self_closing)

    Examples:
        >>> parse_tag_spec('div')
        ('div', False)
        >>> parse_tag_spec('br/')
        ('br', True)
    """
    if spec.endswith('/'):
        return spec[:-1], True
    return spec, False


class Markup:
    """Registry of tags, each producing a new Element when accessed.

    Registered tags are available as attributes and through get().
    Every access returns a brand new element: ``m.div`` twice gives two
    independent trees.

    Usage:
        >>> m = Markup('body', 'p', 'br/').tags('ul', 'li')
        >>> m.body(m.p('Hello', m.br), m.ul([m.li, m.li])).html()
        '<body><p>Hello<br/></p><ul><li></li><li></li></ul></body>'

    Names clashing with Markup methods (e.g. 'tags') or that are not valid
    identifiers (e.g. 'my-widget') are reached with get() or create().
    """

    def __init__(self, *specs: str) -> None:
        """Initialize the registry and register the given tag specs."""
        self._factories: dict[str, partial[Element]] = {}
        self.tags(*specs)

    def __getattr__(self, name: str) -> Element:
        """Dynamic tag access: ``m.div`` is ``m.get('div')``."""
        if name.startswith('_'):
            raise AttributeError(
                f"'{type(self).__name__}' object has no attribute '{name}'"
            )
        try:
            return self.get(name)
        except KeyError:
            raise AttributeError(
                f"'{type(self).__name__}' has no tag '{name}'"
            ) from None

    def __contains__(self, name: object) -> bool:
        return name in self._factories

    def __repr__(self) -> str:
        return f"{type(self).__name__}({len(self._factories)} tags)"

    @property
    def names(self) -> list[str]:
        """Registered tag names, in registration order."""
        return list(self._factories)

    @property
    def fragment(self) -> Element:
        """A new fragment: children only, no enclosing tag."""
        return Element(MarkupNode.fragment())

    def tags(self, *specs: str) -> Markup:
        """Register tags; a trailing slash marks a self-closing tag.

        Registering an existing name replaces it.

        Returns:
            The registry itself, for chaining.
        """
        for spec in specs:
            tag, self_closing = parse_tag_spec(spec)
            if tag in self._factories:
                logger.debug("Replacing tag %r", tag)
            self._factories[tag] = partial(_new_element, tag, self_closing)
            logger.debug("Registered tag %r (self_closing=%s)", tag, self_closing)
        return self

    def get(self, name: str) -> Element:
        """Return a new element for a registered tag.

        Raises:
            KeyError: If name is not registered.
        """
        return self._factories[name]()

    def create(self, spec: str) -> Element:
        """Return a new element for any tag spec, without registering it."""
        return _new_element(*parse_tag_spec(spec))

    def is_self_closing(self, name: str) -> bool:
        """True if the registered tag is self-closing.

        Raises:
            KeyError: If name is not registered.
        """
        return self._factories[name].args[1]

    def __dir__(self) -> list[str]:
        return sorted(set(super().__dir__()) | set(self._factories))
