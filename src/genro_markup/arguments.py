# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Argument classification for element calls.

Every positional argument given to an Element is classified once, at the
call boundary, into one of four kinds:

- Sequence: lists, tuples and other iterables, expanded in place
- Attributes: mappings, merged into the node's attributes
- NodeRef: another Element, appended as a structural child
- Literal: anything else, appended as text

Example:
    >>> node = MarkupNode('p')
    >>> ingest(node, ['Hello', {'class': 'lead'}, ' world'])
    >>> node.children
    ['Hello', ' world']
    >>> node.attr
    {'class': 'lead'}
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import TYPE_CHECKING, Any, Union

from .exceptions import InvalidArgumentError
from .node import NO_VALUE, MarkupNode

if TYPE_CHECKING:
    from .element import Element


class Sequence:
    """Values expanded as if passed one by one at this position."""

    __slots__ = ('items',)

    def __init__(self, items: Iterable[Any]) -> None:
        self.items = items


class Attributes:
    """A mapping of attribute names to values."""

    __slots__ = ('mapping',)

    def __init__(self, mapping: Mapping[str, Any]) -> None:
        self.mapping = mapping


class NodeRef:
    """A nested element, rendered when its parent renders."""

    __slots__ = ('element',)

    def __init__(self, element: Element) -> None:
        self.element = element


class Literal:
    """A text child, rendered through str()."""

    __slots__ = ('value',)

    def __init__(self, value: Any) -> None:
        self.value = value


Argument = Union[Sequence, Attributes, NodeRef, Literal]


def classify(value: Any) -> Argument:
    """Classify a single call argument.

    Args:
        value: Any positional argument given to an Element.

    Returns:
        The Sequence, Attributes, NodeRef or Literal wrapping the value.

    Raises:
        InvalidArgumentError: If value is None or NO_VALUE.
    """
    # Import here to avoid circular dependency
    from .element import Element

    if value is None or value is NO_VALUE:
        raise InvalidArgumentError(f"Bad argument: {value!r}")
    if isinstance(value, Element):
        return NodeRef(value)
    if isinstance(value, Mapping):
        return Attributes(value)
    if isinstance(value, (str, bytes, bytearray)):
        return Literal(value)
    if isinstance(value, Iterable):
        return Sequence(value)
    return Literal(value)


def ingest(node: MarkupNode, value: Any) -> None:
    """Classify a value and apply it to node in place.

    Nested sequences are walked depth first. A bad value stops ingestion
    right there: values before it are kept, values after it are never seen.
    """
    argument = classify(value)
    if isinstance(argument, Sequence):
        for item in argument.items:
            ingest(node, item)
    elif isinstance(argument, Attributes):
        node.set_attr(dict(argument.mapping))
    elif isinstance(argument, NodeRef):
        node.append(argument.element)
    elif isinstance(argument, Literal):
        node.append(argument.value)
    else:
        raise TypeError(f"Unknown argument kind: {type(argument).__name__}")
