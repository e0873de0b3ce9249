# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Document implementation backed by BeautifulSoup.

Requires the ``soup`` extra (``pip install genro-markup[soup]``).

Example:
    >>> from genro_markup import Markup
    >>> from genro_markup.documents.soup import SoupDocument
    >>> m = Markup('ul', 'li')
    >>> tree = m.ul(m.li('a'), m.li('b')).dom(SoupDocument())
    >>> str(tree)
    '<ul><li>a</li><li>b</li></ul>'
"""

from __future__ import annotations

from bs4 import BeautifulSoup, NavigableString, Tag


class SoupDocument:
    """Build BeautifulSoup tags.

    Fragments are empty BeautifulSoup objects; appending one to a tag moves
    its children into that tag.
    """

    def __init__(self, features: str = "html.parser") -> None:
        """Initialize with the parser name given to every soup created."""
        self.features = features
        self.soup = BeautifulSoup("", features)

    def create_element(self, tag: str) -> Tag:
        return self.soup.new_tag(tag)

    def create_fragment(self) -> BeautifulSoup:
        return BeautifulSoup("", self.features)

    def create_text(self, data: str) -> NavigableString:
        return NavigableString(data)

    def set_attribute(self, element: Tag, name: str, value: str) -> None:
        element[name] = value

    def append_child(self, parent: Tag, child: Tag | NavigableString) -> None:
        parent.append(child)
