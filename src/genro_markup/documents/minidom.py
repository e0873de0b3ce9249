# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Document implementation backed by xml.dom.minidom."""

from __future__ import annotations

from xml.dom import minidom


class MinidomDocument:
    """Build minidom nodes owned by a single ``minidom.Document``.

    Usage:
        >>> doc = MinidomDocument()
        >>> el = doc.create_element('div')
        >>> doc.set_attribute(el, 'id', 'main')
        >>> el.toxml()
        '<div id="main"/>'
    """

    def __init__(self, document: minidom.Document | None = None) -> None:
        """Initialize with an existing minidom document, or a new one."""
        self.document = document if document is not None else minidom.Document()

    def create_element(self, tag: str) -> minidom.Element:
        return self.document.createElement(tag)

    def create_fragment(self) -> minidom.DocumentFragment:
        return self.document.createDocumentFragment()

    def create_text(self, data: str) -> minidom.Text:
        return self.document.createTextNode(data)

    def set_attribute(self, element: minidom.Element, name: str, value: str) -> None:
        element.setAttribute(name, value)

    def append_child(self, parent: minidom.Node, child: minidom.Node) -> None:
        parent.appendChild(child)
