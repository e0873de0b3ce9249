# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Document protocol consumed by the structural renderer."""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class Document(Protocol):
    """Tree-construction API used by ``render_dom``.

    The renderer only ever calls these five methods; errors they raise
    are not caught.
    """

    def create_element(self, tag: str) -> Any:
        """Create an element named tag."""
        ...

    def create_fragment(self) -> Any:
        """Create a tagless container that only holds children."""
        ...

    def create_text(self, data: str) -> Any:
        """Create a text node."""
        ...

    def set_attribute(self, element: Any, name: str, value: str) -> None:
        """Set an attribute on an element created by this document."""
        ...

    def append_child(self, parent: Any, child: Any) -> None:
        """Append child as the last child of parent."""
        ...
