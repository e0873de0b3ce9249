# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Document collaborators for the structural renderer.

A document is any object providing the five operations of the
``Document`` protocol. Available implementations:
- MinidomDocument: standard library ``xml.dom.minidom``
- SoupDocument: BeautifulSoup trees (``genro_markup.documents.soup``,
  requires the ``soup`` extra)

Example:
    >>> from genro_markup.documents import MinidomDocument
    >>> doc = MinidomDocument()
    >>> p = doc.create_element('p')
    >>> doc.append_child(p, doc.create_text('Hello'))
    >>> p.toxml()
    '<p>Hello</p>'
"""

from .base import Document
from .minidom import MinidomDocument

__all__ = ['Document', 'MinidomDocument']
