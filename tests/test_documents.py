# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Tests for the minidom and BeautifulSoup document collaborators."""

from xml.dom import Node

import pytest

from genro_markup import Document, Markup, MinidomDocument, NO_VALUE


@pytest.fixture
def m():
    return Markup('body', 'div', 'p', 'ul', 'li', 'span', 'br/', 'img/')


class TestMinidomDocument:
    """Tests for rendering through xml.dom.minidom."""

    def test_is_document(self):
        """Test MinidomDocument satisfies the Document protocol."""
        assert isinstance(MinidomDocument(), Document)

    def test_default_document(self, m):
        """Test dom() uses a new MinidomDocument when none is given."""
        tree = m.body(m.br()).dom()
        assert tree.nodeType == Node.ELEMENT_NODE
        assert tree.toxml() == '<body><br/></body>'

    def test_attributes_in_order(self, m):
        """Test attributes are set in insertion order."""
        tree = m.img({'src': 'a.png'})({'alt': 'pic'}).dom()
        assert tree.toxml() == '<img src="a.png" alt="pic"/>'

    def test_text_children(self, m):
        """Test literals become text nodes."""
        tree = m.p('Hello ', m.span('big'), 7).dom()
        assert tree.toxml() == '<p>Hello <span>big</span>7</p>'

    def test_bare_attribute(self, m):
        """Test bare attributes get an empty value."""
        tree = m.div({'hidden': NO_VALUE}).dom()
        assert tree.getAttribute('hidden') == ''

    def test_fragment(self, m):
        """Test fragments become DocumentFragment nodes."""
        frag = m.fragment(m.li('a'), 'x').dom()
        assert frag.nodeType == Node.DOCUMENT_FRAGMENT_NODE
        assert [child.toxml() for child in frag.childNodes] == ['<li>a</li>', 'x']

    def test_nested_fragment_is_flattened(self, m):
        """Test a fragment appended to an element hands over its children."""
        tree = m.ul(m.fragment(m.li('a'), m.li('b'))).dom()
        assert tree.toxml() == '<ul><li>a</li><li>b</li></ul>'

    def test_shared_document(self, m):
        """Test an existing minidom document can be supplied."""
        doc = MinidomDocument()
        tree = m.p('x').dom(doc)
        assert tree.ownerDocument is doc.document


class TestSoupDocument:
    """Tests for rendering through BeautifulSoup."""

    @pytest.fixture(autouse=True)
    def _soup(self):
        pytest.importorskip('bs4')

    def _document(self):
        from genro_markup.documents.soup import SoupDocument
        return SoupDocument()

    def test_is_document(self):
        """Test SoupDocument satisfies the Document protocol."""
        assert isinstance(self._document(), Document)

    def test_element_tree(self, m):
        """Test a small tree renders like the string renderer."""
        el = m.ul(m.li('a'), m.li({'class': 'last'}, 'b'))
        assert str(el.dom(self._document())) == el.html()

    def test_self_closing(self, m):
        """Test void elements render self-closed."""
        tree = m.p('a', m.br).dom(self._document())
        assert str(tree) == '<p>a<br/></p>'

    def test_fragment(self, m):
        """Test fragments render their children only."""
        frag = m.fragment(m.li('a'), 'x').dom(self._document())
        assert str(frag) == '<li>a</li>x'

    def test_nested_fragment(self, m):
        """Test a nested fragment hands over its children."""
        tree = m.div(m.fragment(m.p('x'), m.p('y'))).dom(self._document())
        assert str(tree) == '<div><p>x</p><p>y</p></div>'
